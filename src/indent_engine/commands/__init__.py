"""Text command registry and dispatch."""

from .defaults import DEFAULT_COMMANDS, load_default_commands
from .handler import CommandHandler
from .models import CommandArgs, CommandOutcome, CommandRef
from .registry import CommandConflictError, CommandRegistry, RegistryStats

__all__ = [
    "CommandRef",
    "CommandOutcome",
    "CommandArgs",
    "CommandRegistry",
    "CommandConflictError",
    "RegistryStats",
    "CommandHandler",
    "DEFAULT_COMMANDS",
    "load_default_commands",
]
