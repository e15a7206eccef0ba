"""Executable Textual app that hosts the indent engine."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use indent_engine.adapters.textual.app"
    ) from exc

from indent_engine.buffer import BufferMirror, View
from indent_engine.settings import (
    TAB_SIZE_KEY,
    TRANSLATE_TABS_KEY,
    IndentSettings,
    Settings,
)

from .controller import TextualIndentAdapter, TextualUIHooks


def create_default_view(
    text: str = "",
    *,
    tab_size: Optional[int] = None,
    spaces: Optional[bool] = None,
) -> View:
    """Build a view whose settings layer sits on top of editor-wide defaults."""

    defaults = Settings()
    if tab_size is not None:
        defaults.set(TAB_SIZE_KEY, tab_size)
    if spaces is not None:
        defaults.set(TRANSLATE_TABS_KEY, spaces)
    return View.from_text(text, name="demo", settings=Settings(parent=defaults))


class IndentEngineApp(App[None]):
    """Minimal Textual UI embedding the indent engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("tab", "indent", "Indent", priority=True),
        Binding("shift+tab", "unindent", "Unindent", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+t", "toggle_spaces", "Tabs/Spaces", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, view: View) -> None:
        super().__init__()
        self.view = view
        self.adapter: TextualIndentAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._editor = TextArea(self.view.text(), id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self.log,
        )
        self.adapter = TextualIndentAdapter(self.view, hooks)

    def action_indent(self) -> None:
        self._run("indent")

    def action_unindent(self) -> None:
        self._run("unindent")

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.undo()

    def action_redo(self) -> None:
        if self.adapter:
            self.adapter.redo()

    def action_toggle_spaces(self) -> None:
        current = IndentSettings.from_settings(self.view.settings).resolve()
        self.view.settings.set(TRANSLATE_TABS_KEY, not current.translate_tabs_to_spaces)

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.close()

    def _run(self, name: str) -> None:
        if not self.adapter or not self._editor:
            return
        selection = self._editor.selection
        self.adapter.sync_from_host_points(
            self._editor.text, [(selection.start, selection.end)]
        )
        self.adapter.run(name)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if not self._editor:
            return
        if self._editor.text != mirror.text:
            self._editor.load_text(mirror.text)
        if mirror.selection:
            first = mirror.selection[0]
            document = self.view.document
            self._editor.selection = Selection(
                document.row_col(first.a), document.row_col(first.b)
            )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _env_int(key: str) -> Optional[int]:
    value = os.environ.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the indent engine Textual demo.")
    parser.add_argument("path", nargs="?", help="File to load into the editor")
    parser.add_argument(
        "--tab-size",
        type=int,
        default=_env_int("INDENT_ENGINE_TAB_SIZE"),
        help="Indent width in spaces (default: 4)",
    )
    parser.add_argument(
        "--spaces",
        action="store_true",
        default=None,
        help="Indent with spaces instead of tabs",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    view = create_default_view(text, tab_size=args.tab_size, spaces=args.spaces)
    IndentEngineApp(view).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
