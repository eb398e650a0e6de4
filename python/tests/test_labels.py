import pytest

from texnumber import (
    DuplicateLabel,
    Label,
    LabelTable,
    PatternNotFoundError,
    UnterminatedConstructError,
    scan_labels,
)


def test_labels_numbered_in_order():
    table, diagnostics = scan_labels(
        ["\\label{eq:b} \\label{eq:a}", "text", "\\label{eq:c}"], "eq:"
    )
    assert table.as_dict() == {"eq:b": 1, "eq:a": 2, "eq:c": 3}
    assert diagnostics == []


def test_indices_are_dense():
    lines = [f"\\label{{eq:{i}}} \\label{{fig:{i}}}" for i in range(10)]
    table, _ = scan_labels(lines, "eq:")
    assert sorted(label.index for label in table) == list(range(1, 11))


def test_foreign_labels_not_numbered():
    table, diagnostics = scan_labels(["\\label{fig:x}\\label{eq:a}"], "eq:")
    assert table.as_dict() == {"eq:a": 1}
    assert diagnostics == []


def test_duplicate_label_keeps_first_index():
    table, diagnostics = scan_labels(
        ["\\label{eq:a}", "\\label{eq:b}\\label{eq:a}", "\\label{eq:c}"], "eq:"
    )
    assert table.as_dict() == {"eq:a": 1, "eq:b": 2, "eq:c": 3}
    assert diagnostics == [DuplicateLabel(2, "eq:a")]
    assert (
        str(diagnostics[0]) == "PARSING WARNING: Duplicate \\label{eq:a} on line 2"
    )


def test_empty_label_name():
    table, _ = scan_labels(["\\label{eq:}\\label{eq:a}"], "eq:")
    assert table.as_dict() == {"eq:": 1, "eq:a": 2}


def test_commented_labels_ignored():
    table, _ = scan_labels(["\\label{eq:a} % \\label{eq:b}"], "eq:")
    assert table.as_dict() == {"eq:a": 1}


def test_commented_labels_scanned_when_comments_not_ignored():
    table, _ = scan_labels(
        ["\\label{eq:a} % \\label{eq:b}"], "eq:", ignore_comments=False
    )
    assert table.as_dict() == {"eq:a": 1, "eq:b": 2}


def test_unterminated_label_is_fatal():
    with pytest.raises(UnterminatedConstructError) as err_info:
        scan_labels(["\\label{eq:a}", "", "\\label{eq:b"], "eq:")
    assert err_info.value.line_no == 3
    assert err_info.value.delimiter == "\\label{"


def test_closing_brace_in_comment_doesnt_count():
    with pytest.raises(UnterminatedConstructError):
        scan_labels(["\\label{eq:a %}"], "eq:")


def test_no_labels_is_fatal():
    with pytest.raises(PatternNotFoundError) as err_info:
        scan_labels(["\\label{fig:x}"], "eq:")
    assert str(err_info.value) == "PARSING ERROR: pattern <eq:> not found"


def test_table_frozen_after_scan():
    table, _ = scan_labels(["\\label{eq:a}"], "eq:")
    assert table.frozen
    with pytest.raises(RuntimeError):
        table.register("eq:b")


def test_table_lookups():
    table = LabelTable()
    assert table.register("eq:x") == 1
    assert table.register("eq:y") == 2
    assert table.register("eq:x") is None
    assert len(table) == 2
    assert "eq:x" in table
    assert "eq:z" not in table
    assert table.index_of("eq:y") == 2
    assert table.index_of("eq:z") is None
    assert table.name_of(1) == "eq:x"
    with pytest.raises(KeyError):
        table.name_of(3)
    with pytest.raises(KeyError):
        table.name_of(0)
    assert list(table) == [Label("eq:x", 1), Label("eq:y", 2)]


def test_diagnostics_reported_as_found():
    seen = []
    with pytest.raises(UnterminatedConstructError):
        scan_labels(
            ["\\label{eq:a}", "\\label{eq:a}", "\\label{eq:b"],
            "eq:",
            on_diagnostic=seen.append,
        )
    assert seen == [DuplicateLabel(2, "eq:a")]
