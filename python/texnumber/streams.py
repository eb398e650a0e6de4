"""Text sources and sinks the pipeline reads from and writes to.

Renumbering needs the whole input before it can write anything (the label table must be complete),
so a TextSource is always read in full. Output is written line by line to whatever a TextSink opens.

Sinks open context managers rather than returning streams directly, so that the process-wide stdout/stderr
and in-memory buffers can be handed out without being closed afterwards.
This allows unit tests etc. to capture output without touching the filesystem.
"""

import abc
import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Generator, Optional, TextIO, TypeAlias

from typing_extensions import override

TextWriter: TypeAlias = TextIO


class TextSource(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self) -> str:
        """A human readable name for diagnostics, not necessarily a path."""
        ...

    @abc.abstractmethod
    def read_all(self) -> str: ...


class TextSink(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def open_write_text(self) -> ContextManager[TextWriter]: ...


class FileTextSource(TextSource):
    _path: Path
    _encoding: str

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        super().__init__()
        self._path = path
        self._encoding = encoding

    @property
    @override
    def name(self) -> str:
        return str(self._path)

    @override
    def read_all(self) -> str:
        # newline="" keeps '\r' as line content, only '\n' splits lines
        with open(self._path, "r", encoding=self._encoding, newline="") as f:
            return f.read()


class StdinTextSource(TextSource):
    @property
    @override
    def name(self) -> str:
        return "<stdin>"

    @override
    def read_all(self) -> str:
        return sys.stdin.read()


class InMemoryTextSource(TextSource):
    _name: str
    _text: str

    def __init__(self, text: str, name: str = "<string>") -> None:
        super().__init__()
        self._name = name
        self._text = text

    @property
    @override
    def name(self) -> str:
        return self._name

    @override
    def read_all(self) -> str:
        return self._text


@contextmanager
def non_closing_text_writer(writer: TextWriter) -> Generator[TextWriter, None, None]:
    try:
        yield writer
    finally:
        # DON'T close the writer, it belongs to someone else
        writer.flush()


class FileTextSink(TextSink):
    _path: Path
    _encoding: str

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        super().__init__()
        self._path = path
        self._encoding = encoding

    @property
    @override
    def name(self) -> str:
        return str(self._path)

    @override
    def open_write_text(self) -> ContextManager[TextWriter]:
        return open(self._path, "w", encoding=self._encoding, newline="")


class StdoutTextSink(TextSink):
    @property
    @override
    def name(self) -> str:
        return "<stdout>"

    @override
    def open_write_text(self) -> ContextManager[TextWriter]:
        return non_closing_text_writer(sys.stdout)


class StderrTextSink(TextSink):
    @property
    @override
    def name(self) -> str:
        return "<stderr>"

    @override
    def open_write_text(self) -> ContextManager[TextWriter]:
        return non_closing_text_writer(sys.stderr)


class InMemoryTextSink(TextSink):
    """Collects everything written to it in a StringIO, which survives the writer being 'closed'."""

    _name: str
    _buf: io.StringIO

    def __init__(self, name: str = "<memory>") -> None:
        super().__init__()
        self._name = name
        self._buf = io.StringIO()

    @property
    @override
    def name(self) -> str:
        return self._name

    @override
    def open_write_text(self) -> ContextManager[TextWriter]:
        return non_closing_text_writer(self._buf)

    def getvalue(self) -> str:
        return self._buf.getvalue()


def resolve_sink(destination: Optional[str], encoding: str = "utf-8") -> Optional[TextSink]:
    """Turn a destination string into a sink: None -> None, '-' -> stderr, anything else is a file path."""
    if destination is None:
        return None
    if destination == "-":
        return StderrTextSink()
    return FileTextSink(Path(destination), encoding=encoding)
