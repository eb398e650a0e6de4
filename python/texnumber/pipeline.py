"""Renumbering happens in two passes over the same fully-buffered input:

1. Scanning
   Every line is scanned for `\\label{<prefix>...}` definitions, building a LabelTable.
   The table must be complete before anything is rewritten, because a reference on line 1 can point to a label on line 500.
   Finding no labels at all, or a label without a closing brace, fails the run before any output is written.
2. Rewriting
   The input is read again from the start. Each line has its comment split off, every construct in the active part
   which names a known label is rewritten, and the line is written out immediately.
   An unterminated construct fails the run mid-way. Lines already written stay written.

Once both passes succeed the label table is (optionally) written out as a report.
"""

import dataclasses
import io
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from texnumber.comments import split_comment
from texnumber.config import RenumberConfig
from texnumber.diagnostics import Diagnostic
from texnumber.labels import LabelTable, scan_labels
from texnumber.refs import rewrite_refs
from texnumber.report import write_report
from texnumber.streams import TextWriter, resolve_sink


def split_lines(text: str) -> List[str]:
    """Split on '\\n' only. A final newline ends the last line instead of starting an empty one."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class PipelineState(IntEnum):
    Ready = 0
    Scanning = 1
    Rewriting = 2
    Succeeded = 3
    Failed = 4


@dataclasses.dataclass(frozen=True)
class RenumberResult:
    table: LabelTable
    diagnostics: Tuple[Diagnostic, ...]
    line_count: int


class Renumberer:
    """Single-use driver for one renumbering run.

    If `diagnostics_stream` is given, every diagnostic is printed to it as soon as it's found.
    All diagnostics are also kept in `diagnostics`, in the order they were found.
    """

    config: RenumberConfig
    state: PipelineState
    table: Optional[LabelTable]
    diagnostics: List[Diagnostic]
    line_count: int
    _diagnostics_stream: Optional[TextWriter]

    def __init__(
        self, config: RenumberConfig, diagnostics_stream: Optional[TextWriter] = None
    ) -> None:
        self.config = config
        self.state = PipelineState.Ready
        self.table = None
        self.diagnostics = []
        self.line_count = 0
        self._diagnostics_stream = diagnostics_stream

    def _emit_one(self, d: Diagnostic) -> None:
        self.diagnostics.append(d)
        if self._diagnostics_stream is not None:
            print(d.message(), file=self._diagnostics_stream)

    def _emit(self, diagnostics: Sequence[Diagnostic]) -> None:
        for d in diagnostics:
            self._emit_one(d)

    def scan(self, lines: Sequence[str]) -> LabelTable:
        if self.state != PipelineState.Ready:
            raise RuntimeError(
                f"Can't scan from state {self.state.name}, a Renumberer can only be used once"
            )
        self.state = PipelineState.Scanning
        try:
            table, _ = scan_labels(
                lines,
                self.config.prefix,
                self.config.ignore_comments,
                self.config.comment_char,
                on_diagnostic=self._emit_one,
            )
        except Exception:
            self.state = PipelineState.Failed
            raise
        self.table = table
        return table

    def rewrite(self, lines: Sequence[str], out: TextWriter) -> None:
        if self.state != PipelineState.Scanning or self.table is None:
            raise RuntimeError(
                f"Can't rewrite from state {self.state.name}, scan() must succeed first"
            )
        self.state = PipelineState.Rewriting
        try:
            for line_no, line in enumerate(lines, start=1):
                active, trailing = split_comment(
                    line, self.config.ignore_comments, self.config.comment_char
                )
                active, diagnostics = rewrite_refs(
                    active,
                    self.config.prefix,
                    self.config.replacement,
                    self.table,
                    self.config.constructs,
                    line_no,
                )
                self._emit(diagnostics)
                out.write(f"{active}{trailing}\n")
                self.line_count = line_no
        except Exception:
            self.state = PipelineState.Failed
            raise
        self.state = PipelineState.Succeeded

    def run(self, text: str, out: TextWriter) -> RenumberResult:
        lines = split_lines(text)
        self.scan(lines)
        self.rewrite(lines, out)
        self.write_report()
        return self.result()

    def result(self) -> RenumberResult:
        if self.state != PipelineState.Succeeded or self.table is None:
            raise RuntimeError(
                f"Can't build a result from state {self.state.name}, the run hasn't succeeded"
            )
        return RenumberResult(self.table, tuple(self.diagnostics), self.line_count)

    def write_report(self) -> None:
        if self.state != PipelineState.Succeeded or self.table is None:
            raise RuntimeError(
                f"Can't write a report from state {self.state.name}, the run hasn't succeeded"
            )
        destination = self.config.report_destination
        if destination == "-" and self._diagnostics_stream is not None:
            write_report(self.table, self.config.replacement, self._diagnostics_stream)
            return
        sink = resolve_sink(destination)
        if sink is None:
            return
        with sink.open_write_text() as f:
            write_report(self.table, self.config.replacement, f)


def renumber_text(
    text: str,
    config: RenumberConfig,
    diagnostics_stream: Optional[TextWriter] = None,
) -> Tuple[str, RenumberResult]:
    """Renumber a whole document held in memory, returning the new document and the result."""
    out = io.StringIO()
    result = Renumberer(config, diagnostics_stream).run(text, out)
    return out.getvalue(), result
