"""Dataclasses describing text commands and their outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

if TYPE_CHECKING:
    from indent_engine.buffer import View

CommandArgs = Mapping[str, Any]
TextCommandHandler = Callable[["View", CommandArgs], object]


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Callable metadata used during command dispatch."""

    id: str
    handler: TextCommandHandler
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, view: "View", args: CommandArgs) -> object:
        return self.handler(view, args)


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of ``CommandHandler.run_text_command``."""

    name: str
    status: str
    result: Optional[object] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


__all__ = ["CommandRef", "CommandOutcome", "CommandArgs", "TextCommandHandler"]
