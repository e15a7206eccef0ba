"""Minimal Textual adapter that wires text commands into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from indent_engine.buffer import BufferMirror, Region, TextDocument, View
from indent_engine.commands import CommandHandler, CommandOutcome
from indent_engine.indent import IndentResult

HostRegion = Union[Region, Tuple[int, int]]
HostPoint = Tuple[int, int]

SETTINGS_WATCH_TAG = "textual-adapter"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualIndentAdapter:
    """Bridges a host text widget and a ``View`` through the command handler.

    Implements ``BufferSync``: hosts push their widget state in before running
    a command and receive a ``BufferMirror`` through ``update_buffer`` after.
    """

    def __init__(
        self,
        view: View,
        hooks: TextualUIHooks,
        *,
        handler: Optional[CommandHandler] = None,
    ) -> None:
        self.view = view
        self.hooks = hooks
        self.handler = handler or CommandHandler()
        view.settings.add_on_change(SETTINGS_WATCH_TAG, self._settings_changed)
        self._refresh_buffer()

    def close(self) -> None:
        """Stop watching the view's settings."""

        self.view.settings.clear_on_change(SETTINGS_WATCH_TAG)

    def sync_from_host(self, text: str, selection: Iterable[HostRegion]) -> None:
        """Adopt the host widget's text and selection; not recorded for undo."""

        regions = tuple(
            item if isinstance(item, Region) else Region(*item) for item in selection
        )
        self.push_host_edit(BufferMirror(text=text, selection=regions))

    def sync_from_host_points(
        self, text: str, selection: Iterable[Tuple[HostPoint, HostPoint]]
    ) -> None:
        """Adopt host text plus a selection given as (row, col) pairs.

        The pairs are resolved against ``text``, not the view's previous content.
        """

        document = TextDocument.from_text(text)
        regions = tuple(
            Region(document.text_point(*start), document.text_point(*end))
            for start, end in selection
        )
        self.push_host_edit(BufferMirror(text=text, selection=regions))

    def pull_buffer(self) -> BufferMirror:
        return self.view.mirror()

    def push_host_edit(self, mirror: BufferMirror) -> None:
        self.view.load(mirror.text, mirror.selection)
        self._log_state("sync ->", regions=len(mirror.selection))

    def run(self, name: str, args: Optional[Dict[str, Any]] = None) -> CommandOutcome:
        self._log_state("command ->", command=name)
        outcome = self.handler.run_text_command(self.view, name, args)
        self.hooks.update_status(_describe(outcome))
        self.hooks.handle_event(
            "command.run", {"name": outcome.name, "status": outcome.status}
        )
        self._refresh_buffer()
        self._log_state("result <-", command=name, status=outcome.status)
        return outcome

    def undo(self) -> bool:
        return self._step("undo", self.view.undo)

    def redo(self) -> bool:
        return self._step("redo", self.view.redo)

    def _step(self, label: str, action: Callable[[], bool]) -> bool:
        applied = action()
        self.hooks.update_status(label if applied else f"nothing to {label}")
        if applied:
            self._refresh_buffer()
        self._log_state(f"{label} <-", applied=applied)
        return applied

    def _settings_changed(self, key: str) -> None:
        value = self.view.settings.get(key)
        self.hooks.update_status(f"{key} = {value!r}")
        self.hooks.handle_event("settings.changed", {"key": key, "value": value})

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "view": self.view.name,
            "version": self.view.document.version,
            "selection": [region.as_tuple() for region in self.view.sel()],
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


def _describe(outcome: CommandOutcome) -> str:
    if outcome.status == "unknown_command":
        return f"unknown command: {outcome.name}"
    result = outcome.result
    if isinstance(result, IndentResult):
        return f"{outcome.name}: {result.changed} line(s)"
    return outcome.name


__all__ = ["TextualIndentAdapter", "TextualUIHooks"]
