from __future__ import annotations

import pytest

from indent_engine.indent import (
    LineEdit,
    indent_edit,
    leading_whitespace,
    line_editor,
    unindent_edit,
)
from indent_engine.settings import ResolvedIndentSettings

TABS = ResolvedIndentSettings(translate_tabs_to_spaces=False, tab_size=4)
SPACES = ResolvedIndentSettings(translate_tabs_to_spaces=True, tab_size=4)


@pytest.mark.parametrize(
    ("line", "run"),
    [("", ""), ("abc", ""), (" \t x\t", " \t "), ("\t\t", "\t\t"), ("x \t", "")],
)
def test_leading_whitespace(line: str, run: str) -> None:
    assert leading_whitespace(line) == run


def test_indent_inserts_unit_even_on_empty_line() -> None:
    assert indent_edit(TABS, "") == LineEdit(insert="\t")
    assert indent_edit(SPACES, "\tx") == LineEdit(insert="    ")


@pytest.mark.parametrize(
    ("line", "deleted"),
    [
        ("x", 0),
        ("", 0),
        ("\t  d", 1),
        ("\t\tx", 1),
        ("  b", 2),
        ("      c", 4),
        (" \t   d", 1),
        ("   ", 3),
        ("x\ty", 0),
    ],
)
def test_unindent_deletes_bounded_prefix(line: str, deleted: int) -> None:
    assert unindent_edit(TABS, line).delete == deleted
    assert unindent_edit(SPACES, line).delete == deleted


def test_unindent_respects_tab_size_for_spaces() -> None:
    narrow = ResolvedIndentSettings(translate_tabs_to_spaces=False, tab_size=2)

    assert unindent_edit(narrow, "      c").apply("      c") == "    c"


def test_line_edit_apply_and_noop() -> None:
    assert LineEdit(insert="\t").apply("a") == "\ta"
    assert LineEdit(delete=2).apply("  a") == "a"
    assert LineEdit().is_noop


def test_tab_indent_then_unindent_restores_line() -> None:
    for line in ["", "a", "  b", "\tc", " \t d"]:
        inserted = indent_edit(TABS, line).apply(line)
        assert unindent_edit(TABS, inserted).apply(inserted) == line


def test_line_editor_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        line_editor("reindent", TABS)  # type: ignore[arg-type]
