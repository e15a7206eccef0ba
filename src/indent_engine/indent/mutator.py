"""Apply per-line edits to a view without invalidating pending offsets."""

from __future__ import annotations

from typing import Literal, Sequence, Tuple

from indent_engine.buffer import Region, View

from .whitespace import LineEdit, LineEditor

Strategy = Literal["descending", "recompute"]
STRATEGIES: Tuple[str, ...] = ("descending", "recompute")


def _apply(view: View, start: int, edit: LineEdit) -> None:
    if edit.delete:
        view.erase(Region(start, start + edit.delete))
    if edit.insert:
        view.insert(start, edit.insert)


def _apply_descending(view: View, rows: Sequence[int], editor: LineEditor) -> int:
    document = view.document
    planned = [(document.line_start(row), editor(document.line(row))) for row in rows]
    changed = 0
    # bottom-up, so the starts computed above stay valid
    for start, edit in reversed(planned):
        if edit.is_noop:
            continue
        _apply(view, start, edit)
        changed += 1
    return changed


def _apply_recompute(view: View, rows: Sequence[int], editor: LineEditor) -> int:
    document = view.document
    changed = 0
    for row in rows:
        edit = editor(document.line(row))
        if edit.is_noop:
            continue
        _apply(view, document.line_start(row), edit)
        changed += 1
    return changed


def apply_line_edits(
    view: View,
    rows: Sequence[int],
    editor: LineEditor,
    *,
    strategy: Strategy = "descending",
) -> int:
    """Apply ``editor`` to every row in ``rows`` and return how many changed.

    ``rows`` must be ascending and unique. Both strategies produce the same
    text; ``"recompute"`` re-reads each line start after the previous edit.
    """

    if strategy == "descending":
        return _apply_descending(view, rows, editor)
    if strategy == "recompute":
        return _apply_recompute(view, rows, editor)
    raise ValueError(f"Unknown strategy '{strategy}', expected one of {STRATEGIES}")


__all__ = ["Strategy", "STRATEGIES", "apply_line_edits"]
