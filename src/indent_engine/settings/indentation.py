"""Indentation settings as an explicit tri-state value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .store import Settings

TRANSLATE_TABS_KEY = "translate_tabs_to_spaces"
TAB_SIZE_KEY = "tab_size"
DEFAULT_TAB_SIZE = 4


@dataclass(frozen=True, slots=True)
class ResolvedIndentSettings:
    translate_tabs_to_spaces: bool
    tab_size: int

    @property
    def indent_unit(self) -> str:
        if self.translate_tabs_to_spaces:
            return " " * self.tab_size
        return "\t"


@dataclass(frozen=True, slots=True)
class IndentSettings:
    """Indentation settings as read from a store; ``None`` means unset."""

    translate_tabs_to_spaces: Optional[bool] = None
    tab_size: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "IndentSettings":
        translate = settings.get(TRANSLATE_TABS_KEY)
        tab_size = settings.get(TAB_SIZE_KEY)
        return cls(
            translate_tabs_to_spaces=translate if isinstance(translate, bool) else None,
            # bool is an int subclass; True is not a tab size
            tab_size=(
                tab_size
                if isinstance(tab_size, int) and not isinstance(tab_size, bool)
                else None
            ),
        )

    def resolve(self) -> ResolvedIndentSettings:
        tab_size = self.tab_size
        if tab_size is None or tab_size <= 0:
            tab_size = DEFAULT_TAB_SIZE
        return ResolvedIndentSettings(
            translate_tabs_to_spaces=bool(self.translate_tabs_to_spaces),
            tab_size=tab_size,
        )


__all__ = [
    "IndentSettings",
    "ResolvedIndentSettings",
    "DEFAULT_TAB_SIZE",
    "TRANSLATE_TABS_KEY",
    "TAB_SIZE_KEY",
]
