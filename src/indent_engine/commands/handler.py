"""Dispatch named text commands against a view."""

from __future__ import annotations

from typing import Optional

from indent_engine.buffer import View
from indent_engine.runtime import telemetry

from .defaults import load_default_commands
from .models import CommandArgs, CommandOutcome
from .registry import CommandRegistry


class CommandHandler:
    """Runs registry commands, each inside its own edit transaction."""

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        *,
        load_defaults: bool = True,
    ) -> None:
        self.registry = registry or CommandRegistry(
            logger_name="indent_engine.commands"
        )
        if load_defaults and registry is None:
            load_default_commands(self.registry)

    def run_text_command(
        self,
        view: View,
        name: str,
        args: Optional[CommandArgs] = None,
    ) -> CommandOutcome:
        command = self.registry.find(name)
        if command is None:
            telemetry.record_event(
                "command.unknown",
                level="warning",
                data={"command": name, "view": view.name},
            )
            return CommandOutcome(name=name, status="unknown_command")

        with view.begin_edit(name):
            result = command(view, dict(args or {}))

        telemetry.record_event(
            "command.run",
            data={
                "command": command.telemetry_name,
                "view": view.name,
                "version": view.document.version,
            },
        )
        return CommandOutcome(name=name, status="ok", result=result)


__all__ = ["CommandHandler"]
