from typing import Tuple

COMMENT_CHAR = "%"


def split_comment(
    line: str, ignore_comments: bool = True, comment_char: str = COMMENT_CHAR
) -> Tuple[str, str]:
    """Split a line into (active, trailing).

    `active` is the part which gets scanned and rewritten.
    `trailing` is the comment, starting at the comment character, which is passed through verbatim.
    If comments aren't ignored, the whole line is active and `trailing` is always empty.
    """
    if not ignore_comments:
        return line, ""
    pos = line.find(comment_char)
    if pos < 0:
        return line, ""
    return line[:pos], line[pos:]
