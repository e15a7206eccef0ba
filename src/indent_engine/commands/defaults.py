"""Built-in text commands."""

from __future__ import annotations

from typing import Iterable, Optional

from indent_engine.buffer import View
from indent_engine.indent import IndentResult, indent, unindent

from .models import CommandArgs, CommandRef
from .registry import CommandRegistry


def indent_command(view: View, args: CommandArgs) -> IndentResult:
    return indent(view, strategy=args.get("strategy", "descending"))


def unindent_command(view: View, args: CommandArgs) -> IndentResult:
    return unindent(view, strategy=args.get("strategy", "descending"))


DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        id="indent",
        handler=indent_command,
        description="Indent every line touched by the selection",
    ),
    CommandRef(
        id="unindent",
        handler=unindent_command,
        description="Unindent every line touched by the selection",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    include: Optional[Iterable[str]] = None,
    replace: bool = False,
) -> CommandRegistry:
    """Register the built-in commands, optionally only those in ``include``."""

    wanted = set(include) if include is not None else None
    for command in DEFAULT_COMMANDS:
        if wanted is not None and command.id not in wanted:
            continue
        registry.register(command, replace=replace)
    return registry


__all__ = [
    "DEFAULT_COMMANDS",
    "indent_command",
    "unindent_command",
    "load_default_commands",
]
