import sys
from pathlib import Path
from typing import Optional

from texnumber.config import RenumberConfig
from texnumber.pipeline import Renumberer, RenumberResult, split_lines
from texnumber.streams import (
    FileTextSink,
    FileTextSource,
    StdinTextSource,
    StdoutTextSink,
    TextSink,
    TextSource,
)


def autodetect_source(input_arg: Optional[str], encoding: str = "utf-8") -> TextSource:
    """No [--input] (or '-') means stdin, anything else is a file that must exist."""
    if input_arg is None or input_arg == "-":
        return StdinTextSource()
    input_path = Path(input_arg)
    if not input_path.is_file():
        raise ValueError(f"Input file '{input_arg}' doesn't exist or isn't a file")
    return FileTextSource(input_path, encoding=encoding)


def autodetect_sink(output_arg: Optional[str], encoding: str = "utf-8") -> TextSink:
    """No [--output] (or '-') means stdout, anything else is a file which is created or overwritten."""
    if output_arg is None or output_arg == "-":
        return StdoutTextSink()
    output_path = Path(output_arg)
    if output_path.exists() and not output_path.is_file():
        raise ValueError(f"Output path '{output_arg}' exists but isn't a file")
    return FileTextSink(output_path, encoding=encoding)


def renumber(
    source: TextSource, sink: TextSink, config: RenumberConfig
) -> RenumberResult:
    # The sink is only opened once the label scan has succeeded, so a run which fails
    # before writing anything leaves an existing output file (possibly the input itself) untouched
    lines = split_lines(source.read_all())
    renumberer = Renumberer(config, diagnostics_stream=sys.stderr)
    renumberer.scan(lines)
    with sink.open_write_text() as out:
        renumberer.rewrite(lines, out)
    renumberer.write_report()
    return renumberer.result()
