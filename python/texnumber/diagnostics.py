"""Everything that can go wrong while renumbering.

Fatal conditions are exceptions and stop the run where they happen.
Recoverable conditions are Diagnostic values which are collected (and usually printed) while the run continues.
"""

import abc
import dataclasses
from enum import IntEnum

from typing_extensions import override


class DiagnosticKind(IntEnum):
    DuplicateLabel = 0
    UndefinedReference = 1


class Diagnostic(abc.ABC):
    """A non-fatal problem found on a specific (1-indexed) line of the input."""

    line_no: int
    kind: DiagnosticKind

    @abc.abstractmethod
    def message(self) -> str: ...

    def __str__(self) -> str:
        return self.message()


@dataclasses.dataclass(frozen=True)
class DuplicateLabel(Diagnostic):
    """A label was defined a second time. The first definition keeps its index."""

    line_no: int
    name: str
    kind: DiagnosticKind = dataclasses.field(
        default=DiagnosticKind.DuplicateLabel, init=False
    )

    @override
    def message(self) -> str:
        return f"PARSING WARNING: Duplicate \\label{{{self.name}}} on line {self.line_no}"


@dataclasses.dataclass(frozen=True)
class UndefinedReference(Diagnostic):
    """A reference in our namespace points to a label that was never defined."""

    line_no: int
    delimiter: str
    name: str
    kind: DiagnosticKind = dataclasses.field(
        default=DiagnosticKind.UndefinedReference, init=False
    )

    @override
    def message(self) -> str:
        return f"PARSING WARNING: Undefined {self.delimiter}{self.name}}} on line {self.line_no}"


class TexNumberError(RuntimeError):
    """Base class for errors which abort the whole run."""


class UnterminatedConstructError(TexNumberError):
    line_no: int
    delimiter: str

    def __init__(self, line_no: int, delimiter: str) -> None:
        super().__init__(
            f"PARSING ERROR: No matching '}}' for {delimiter} on line {line_no}"
        )
        self.line_no = line_no
        self.delimiter = delimiter


class PatternNotFoundError(TexNumberError):
    prefix: str

    def __init__(self, prefix: str) -> None:
        super().__init__(f"PARSING ERROR: pattern <{prefix}> not found")
        self.prefix = prefix
