"""Indent and unindent entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from indent_engine.buffer import Region, View
from indent_engine.runtime import telemetry
from indent_engine.settings import IndentSettings, ResolvedIndentSettings

from .lines import collect_lines
from .mutator import Strategy, apply_line_edits
from .whitespace import IndentMode, line_editor

SettingsInput = Union[IndentSettings, ResolvedIndentSettings, None]


@dataclass(frozen=True, slots=True)
class IndentResult:
    mode: IndentMode
    rows: Tuple[int, ...]
    changed: int
    settings: ResolvedIndentSettings


def resolve_settings(view: View, settings: SettingsInput = None) -> ResolvedIndentSettings:
    if isinstance(settings, ResolvedIndentSettings):
        return settings
    if settings is None:
        settings = IndentSettings.from_settings(view.settings)
    return settings.resolve()


def shift_lines(
    view: View,
    mode: IndentMode,
    *,
    settings: SettingsInput = None,
    strategy: Strategy = "descending",
) -> IndentResult:
    """Indent or unindent every line touched by the view's selection.

    Must run inside an open transaction on ``view``. Settings and the
    selection are read once, before the first edit.
    """

    resolved = resolve_settings(view, settings)
    regions = view.sel().regions()
    with telemetry.span(
        f"indent::{mode}",
        component="indent",
        metadata={"view": view.name, "regions": len(regions)},
    ) as handle:
        rows = collect_lines(view.document, regions)
        changed = apply_line_edits(
            view, rows, line_editor(mode, resolved), strategy=strategy
        )
        handle.add_metadata("rows", len(rows))
        handle.add_metadata("changed", changed)
    return IndentResult(mode=mode, rows=rows, changed=changed, settings=resolved)


def indent(
    view: View,
    *,
    settings: SettingsInput = None,
    strategy: Strategy = "descending",
) -> IndentResult:
    return shift_lines(view, "indent", settings=settings, strategy=strategy)


def unindent(
    view: View,
    *,
    settings: SettingsInput = None,
    strategy: Strategy = "descending",
) -> IndentResult:
    return shift_lines(view, "unindent", settings=settings, strategy=strategy)


def _shift_text(
    text: str,
    regions: Iterable[Region],
    mode: IndentMode,
    settings: SettingsInput,
    strategy: Strategy,
) -> str:
    view = View.from_text(text, name=f"{mode}_text", selection=regions)
    with view.begin_edit(mode):
        shift_lines(view, mode, settings=settings, strategy=strategy)
    return view.text()


def indent_text(
    text: str,
    regions: Iterable[Region],
    settings: SettingsInput = None,
    *,
    strategy: Strategy = "descending",
) -> str:
    """Return ``text`` with every line touched by ``regions`` indented."""

    return _shift_text(text, regions, "indent", settings, strategy)


def unindent_text(
    text: str,
    regions: Iterable[Region],
    settings: SettingsInput = None,
    *,
    strategy: Strategy = "descending",
) -> str:
    """Return ``text`` with every line touched by ``regions`` unindented."""

    return _shift_text(text, regions, "unindent", settings, strategy)


__all__ = [
    "IndentResult",
    "resolve_settings",
    "shift_lines",
    "indent",
    "unindent",
    "indent_text",
    "unindent_text",
]
