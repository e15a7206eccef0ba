"""Per-line leading whitespace edits for indent and unindent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from indent_engine.settings import ResolvedIndentSettings

IndentMode = Literal["indent", "unindent"]
LineEditor = Callable[[str], "LineEdit"]

WHITESPACE = " \t"


@dataclass(frozen=True, slots=True)
class LineEdit:
    """Edit applied at a line's first column: delete ``delete`` chars, then insert."""

    insert: str = ""
    delete: int = 0

    @property
    def is_noop(self) -> bool:
        return not self.insert and not self.delete

    def apply(self, line: str) -> str:
        return self.insert + line[self.delete :]


NO_EDIT = LineEdit()


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(WHITESPACE))]


def indent_edit(settings: ResolvedIndentSettings, line: str) -> LineEdit:
    """One indent unit at the start of ``line``, whatever ``line`` holds."""

    del line
    return LineEdit(insert=settings.indent_unit)


def unindent_edit(settings: ResolvedIndentSettings, line: str) -> LineEdit:
    """Remove one indent unit from the leading run of ``line``.

    A leading tab counts as one unit whatever ``tab_size`` says; otherwise up
    to ``tab_size`` leading spaces go. ``translate_tabs_to_spaces`` plays no
    part here.
    """

    run = leading_whitespace(line)
    if not run:
        return NO_EDIT
    if run[0] == "\t":
        return LineEdit(delete=1)
    spaces = len(run) - len(run.lstrip(" "))
    return LineEdit(delete=min(settings.tab_size, spaces))


def line_editor(mode: IndentMode, settings: ResolvedIndentSettings) -> LineEditor:
    if mode == "indent":
        return lambda line: indent_edit(settings, line)
    if mode == "unindent":
        return lambda line: unindent_edit(settings, line)
    raise ValueError(f"Unknown indent mode '{mode}'")


__all__ = [
    "IndentMode",
    "LineEdit",
    "LineEditor",
    "NO_EDIT",
    "leading_whitespace",
    "indent_edit",
    "unindent_edit",
    "line_editor",
]
