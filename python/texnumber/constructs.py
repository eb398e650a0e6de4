"""Constructs are the brace-delimited units we care about: `\\label{...}` and the references to it.

Every construct has the same shape - an opening delimiter ending in '{', a body, and the first '}' after the delimiter.
Bodies cannot contain '}' and braces are not nested.
"""

import dataclasses
from typing import Optional, Tuple

from texnumber.diagnostics import UnterminatedConstructError

LABEL_DELIMITER = "\\label{"
EQREF_DELIMITER = "\\eqref{"
REF_DELIMITER = "\\ref{"
PAGEREF_DELIMITER = "\\pageref{"
CLOSING_BRACE = "}"

# The label definition must come first, the rewriter relies on the order being fixed.
DEFAULT_CONSTRUCTS: Tuple[str, ...] = (
    LABEL_DELIMITER,
    EQREF_DELIMITER,
    REF_DELIMITER,
    PAGEREF_DELIMITER,
)


@dataclasses.dataclass(frozen=True)
class Construct:
    """The position of one construct in a line.

    `line[start:body_start]` is the delimiter, `line[body_start:end]` is the body and `line[end]` is the closing brace."""

    delimiter: str
    start: int
    body_start: int
    end: int

    def body(self, line: str) -> str:
        return line[self.body_start : self.end]


def find_construct(
    line: str,
    delimiter: str,
    line_no: int,
    pos: int = 0,
    body_prefix: str = "",
) -> Optional[Construct]:
    """Find the first construct opened by `delimiter` at or after `pos`.

    If `body_prefix` is given, only delimiters immediately followed by it count and the closing brace is searched for after the prefix.
    The prefix is still part of the body.

    Returns None if there are no more constructs on the line.
    Raises UnterminatedConstructError if the delimiter is found but there is no closing brace after it.
    """
    needle = delimiter + body_prefix
    start = line.find(needle, pos)
    if start < 0:
        return None
    end = line.find(CLOSING_BRACE, start + len(needle))
    if end < 0:
        raise UnterminatedConstructError(line_no, delimiter)
    return Construct(delimiter, start, start + len(delimiter), end)
