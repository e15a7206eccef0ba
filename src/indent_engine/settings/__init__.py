"""Settings storage and indentation settings resolution."""

from .indentation import (
    DEFAULT_TAB_SIZE,
    TAB_SIZE_KEY,
    TRANSLATE_TABS_KEY,
    IndentSettings,
    ResolvedIndentSettings,
)
from .store import Settings

__all__ = [
    "Settings",
    "IndentSettings",
    "ResolvedIndentSettings",
    "DEFAULT_TAB_SIZE",
    "TAB_SIZE_KEY",
    "TRANSLATE_TABS_KEY",
]
