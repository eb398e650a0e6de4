from typing import List

from texnumber.labels import LabelTable
from texnumber.streams import TextWriter


def report_lines(table: LabelTable, replacement: str) -> List[str]:
    """One `name -> <replacement><index>` line per label, in index order, with the names padded to line up the arrows."""
    labels = table.labels()
    if not labels:
        return []
    width = max(len(label.name) for label in labels)
    return [
        f"{label.name.ljust(width)} -> {replacement}{label.index}" for label in labels
    ]


def render_report(table: LabelTable, replacement: str) -> str:
    return "".join(f"{line}\n" for line in report_lines(table, replacement))


def write_report(table: LabelTable, replacement: str, writer: TextWriter) -> None:
    writer.write(render_report(table, replacement))
