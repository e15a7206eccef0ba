"""Indent/unindent pipeline: regions -> rows -> line edits -> buffer."""

from .engine import (
    IndentResult,
    indent,
    indent_text,
    resolve_settings,
    shift_lines,
    unindent,
    unindent_text,
)
from .lines import collect_lines, lines_for_region, normalize_region
from .mutator import STRATEGIES, Strategy, apply_line_edits
from .whitespace import (
    LineEdit,
    indent_edit,
    leading_whitespace,
    line_editor,
    unindent_edit,
)

__all__ = [
    "IndentResult",
    "indent",
    "unindent",
    "indent_text",
    "unindent_text",
    "resolve_settings",
    "shift_lines",
    "normalize_region",
    "lines_for_region",
    "collect_lines",
    "LineEdit",
    "leading_whitespace",
    "indent_edit",
    "unindent_edit",
    "line_editor",
    "apply_line_edits",
    "Strategy",
    "STRATEGIES",
]
