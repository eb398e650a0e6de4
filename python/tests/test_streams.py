import sys

from texnumber.streams import (
    FileTextSink,
    FileTextSource,
    InMemoryTextSink,
    InMemoryTextSource,
    StderrTextSink,
    resolve_sink,
)


def test_in_memory_sink_survives_closing():
    sink = InMemoryTextSink()
    with sink.open_write_text() as f:
        f.write("line 1\n")
    with sink.open_write_text() as f:
        f.write("line 2\n")
    assert sink.getvalue() == "line 1\nline 2\n"


def test_in_memory_source():
    source = InMemoryTextSource("abc", name="<test>")
    assert source.name == "<test>"
    assert source.read_all() == "abc"


def test_file_round_trip_keeps_carriage_returns(tmp_path):
    path = tmp_path / "doc.tex"
    with FileTextSink(path).open_write_text() as f:
        f.write("a\r\nb\n")
    assert FileTextSource(path).read_all() == "a\r\nb\n"


def test_stderr_sink_not_closed():
    with StderrTextSink().open_write_text() as f:
        assert f is sys.stderr
    assert not sys.stderr.closed


def test_resolve_sink(tmp_path):
    assert resolve_sink(None) is None
    assert isinstance(resolve_sink("-"), StderrTextSink)
    sink = resolve_sink(str(tmp_path / "x.log"))
    assert isinstance(sink, FileTextSink)
    assert sink.name == str(tmp_path / "x.log")
