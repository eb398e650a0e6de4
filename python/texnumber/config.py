import dataclasses
from typing import Optional, Tuple

from texnumber.comments import COMMENT_CHAR
from texnumber.constructs import DEFAULT_CONSTRUCTS, LABEL_DELIMITER


@dataclasses.dataclass(frozen=True)
class RenumberConfig:
    """Everything a renumbering run needs to know, passed into the pipeline up front."""

    prefix: str
    """Labels and references whose body starts with this are 'ours', e.g. 'eq:'."""

    replacement: str
    """Rewritten bodies are this followed by the label index, e.g. 'E' gives \\ref{E1}."""

    ignore_comments: bool = True
    """If True, everything after the comment character on a line is passed through untouched."""

    report_destination: Optional[str] = None
    """Where to write the final label report. None for nowhere, '-' for the diagnostics stream, otherwise a file path."""

    constructs: Tuple[str, ...] = DEFAULT_CONSTRUCTS
    """The construct delimiters rewritten in pass 2, in order. The first must be the label definition."""

    comment_char: str = COMMENT_CHAR

    def __post_init__(self) -> None:
        for field_name in ("prefix", "replacement"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string, got {value!r}")
            if "\n" in value:
                raise ValueError(f"{field_name} can't contain a newline: {value!r}")
        if len(self.comment_char) != 1:
            raise ValueError(
                f"comment_char must be a single character, got {self.comment_char!r}"
            )
        if not self.constructs:
            raise ValueError("Need at least one construct delimiter")
        if self.constructs[0] != LABEL_DELIMITER:
            raise ValueError(
                f"The first construct must be {LABEL_DELIMITER}, got {self.constructs[0]}"
            )
        for delimiter in self.constructs:
            if not delimiter.endswith("{"):
                raise ValueError(f"Construct delimiter {delimiter!r} must end with '{{'")
        if len(set(self.constructs)) != len(self.constructs):
            raise ValueError(f"Construct delimiters must be unique: {self.constructs}")


def parse_on_off(flag: str) -> bool:
    """Parse the ON/OFF flag used on the command line to say whether comments are ignored."""
    folded = flag.casefold()
    if folded == "on":
        return True
    if folded == "off":
        return False
    raise ValueError(f"Expected ON or OFF, got '{flag}'")
