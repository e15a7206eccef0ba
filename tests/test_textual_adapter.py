from __future__ import annotations

from typing import Any, Dict, List

from indent_engine.adapters.textual import TextualIndentAdapter, TextualUIHooks
from indent_engine.buffer import BufferMirror, BufferSync, Region, View


def make_view(text: str = "a\nb\n") -> View:
    return View.from_text(text, name="adapter")


def test_adapter_runs_indent_and_updates_host() -> None:
    updates: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=updates.append,
        update_status=statuses.append,
    )
    adapter = TextualIndentAdapter(make_view(), hooks)

    adapter.sync_from_host("a\nb\n", [(0, 2)])
    outcome = adapter.run("indent")

    assert outcome.ok
    assert updates[-1].text == "\ta\n\tb\n"
    assert updates[-1].selection == (Region(1, 4),)
    assert statuses[-1] == "indent: 2 line(s)"


def test_adapter_undo_and_redo_refresh_host() -> None:
    updates: List[str] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: updates.append(mirror.text),
        update_status=statuses.append,
    )
    adapter = TextualIndentAdapter(make_view("\tx"), hooks)
    adapter.sync_from_host("\tx", [Region(1, 1)])
    adapter.run("unindent")

    assert adapter.undo() is True
    assert updates[-1] == "\tx"
    assert adapter.redo() is True
    assert updates[-1] == "x"
    assert adapter.redo() is False
    assert statuses[-1] == "nothing to redo"


def test_adapter_reports_unknown_command_event() -> None:
    events: List[Dict[str, Any]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = TextualIndentAdapter(make_view(), hooks)

    adapter.run("reindent")

    assert statuses[-1] == "unknown command: reindent"
    assert events[-1]["payload"] == {"name": "reindent", "status": "unknown_command"}


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        log=logs.append,
    )
    adapter = TextualIndentAdapter(make_view(), hooks)

    adapter.sync_from_host("a", [(0, 0)])
    adapter.run("indent")

    assert any(line.startswith("sync ->") for line in logs)
    assert any(line.startswith("command ->") for line in logs)
    assert any("status='ok'" in line for line in logs)


def test_adapter_satisfies_buffer_sync() -> None:
    hooks = TextualUIHooks(update_buffer=lambda mirror: None)
    adapter = TextualIndentAdapter(make_view(), hooks)
    sync: BufferSync = adapter

    sync.push_host_edit(BufferMirror(text="  x", selection=(Region(3, 0),)))
    adapter.run("unindent")

    pulled = sync.pull_buffer()
    assert pulled.text == "x"
    assert pulled.selection == (Region(1, 0),)


def test_adapter_resolves_host_points_against_new_text() -> None:
    updates: List[BufferMirror] = []
    hooks = TextualUIHooks(update_buffer=updates.append)
    adapter = TextualIndentAdapter(make_view("a"), hooks)

    adapter.sync_from_host_points("a\nb\nc", [((2, 0), (2, 1))])
    outcome = adapter.run("indent")

    assert outcome.ok
    assert updates[-1].text == "a\nb\n\tc"
    assert updates[-1].selection == (Region(5, 6),)


def test_adapter_accepts_columns_past_previous_line_end() -> None:
    updates: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda mirror: updates.append(mirror.text))
    adapter = TextualIndentAdapter(make_view("ab"), hooks)

    adapter.sync_from_host_points("  abcdef", [((0, 8), (0, 8))])
    adapter.run("unindent")

    assert updates[-1] == "abcdef"


def test_adapter_reports_settings_changes_until_closed() -> None:
    statuses: List[str] = []
    events: List[Dict[str, Any]] = []
    view = make_view()
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = TextualIndentAdapter(view, hooks)

    view.settings.set("translate_tabs_to_spaces", True)

    assert statuses[-1] == "translate_tabs_to_spaces = True"
    assert events[-1] == {
        "name": "settings.changed",
        "payload": {"key": "translate_tabs_to_spaces", "value": True},
    }

    adapter.close()
    view.settings.set("tab_size", 2)
    assert statuses[-1] == "translate_tabs_to_spaces = True"
