"""Registry that owns the text commands a handler can dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from indent_engine.runtime.telemetry import span

from .models import CommandRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    command_ids: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a command id is registered twice without ``replace``."""

    def __init__(self, command: CommandRef, existing: CommandRef) -> None:
        super().__init__(
            f"Command '{command.id}' is already registered"
            f" ({existing.description or existing.telemetry_name})"
        )
        self.command = command
        self.existing = existing


class CommandRegistry:
    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def find(self, command_id: str) -> Optional[CommandRef]:
        return self._commands.get(command_id)

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ) as handle:
            existing = self._commands.get(command.id)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.id)
                raise CommandConflictError(command, existing)
            self._commands[command.id] = command
            self._revision += 1
            return command

    def unregister(self, command_id: str) -> Optional[CommandRef]:
        with span(
            "commands::unregister",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            removed = self._commands.pop(command_id, None)
            if removed is not None:
                self._revision += 1
            return removed

    def iter_commands(self) -> Iterator[CommandRef]:
        yield from self._commands.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            command_ids=tuple(sorted(self._commands)),
        )

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands


__all__ = ["CommandRegistry", "CommandConflictError", "RegistryStats"]
