from texnumber.comments import COMMENT_CHAR, split_comment
from texnumber.config import RenumberConfig, parse_on_off
from texnumber.constructs import (
    DEFAULT_CONSTRUCTS,
    EQREF_DELIMITER,
    LABEL_DELIMITER,
    PAGEREF_DELIMITER,
    REF_DELIMITER,
    Construct,
    find_construct,
)
from texnumber.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DuplicateLabel,
    PatternNotFoundError,
    TexNumberError,
    UndefinedReference,
    UnterminatedConstructError,
)
from texnumber.labels import Label, LabelTable, scan_labels
from texnumber.pipeline import (
    PipelineState,
    Renumberer,
    RenumberResult,
    renumber_text,
    split_lines,
)
from texnumber.refs import rewrite_refs
from texnumber.report import render_report, report_lines, write_report

__all__ = [
    "COMMENT_CHAR",
    "split_comment",
    "RenumberConfig",
    "parse_on_off",
    "DEFAULT_CONSTRUCTS",
    "EQREF_DELIMITER",
    "LABEL_DELIMITER",
    "PAGEREF_DELIMITER",
    "REF_DELIMITER",
    "Construct",
    "find_construct",
    "Diagnostic",
    "DiagnosticKind",
    "DuplicateLabel",
    "PatternNotFoundError",
    "TexNumberError",
    "UndefinedReference",
    "UnterminatedConstructError",
    "Label",
    "LabelTable",
    "scan_labels",
    "PipelineState",
    "Renumberer",
    "RenumberResult",
    "renumber_text",
    "split_lines",
    "rewrite_refs",
    "render_report",
    "report_lines",
    "write_report",
]
