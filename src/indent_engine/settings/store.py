"""Layered key/value settings with change notification."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

OnChange = Callable[[str], None]

_MISSING = object()


class Settings:
    """Key/value layer that falls back to ``parent`` for missing keys.

    Hosts typically seed editor-wide defaults in a parent layer and give each
    view its own child layer for per-buffer overrides.
    """

    def __init__(
        self,
        parent: Optional["Settings"] = None,
        values: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.parent = parent
        self._values: Dict[str, Any] = dict(values or {})
        self._on_change: Dict[str, OnChange] = {}

    def get(self, key: str, default: Any = None) -> Any:
        value = self._values.get(key, _MISSING)
        if value is not _MISSING:
            return value
        if self.parent is not None:
            return self.parent.get(key, default)
        return default

    def has(self, key: str) -> bool:
        if key in self._values:
            return True
        return self.parent.has(key) if self.parent is not None else False

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._notify(key)

    def erase(self, key: str) -> None:
        if self._values.pop(key, _MISSING) is not _MISSING:
            self._notify(key)

    def snapshot(self) -> Dict[str, Any]:
        """Merged view of this layer over its parents."""

        merged = self.parent.snapshot() if self.parent is not None else {}
        merged.update(self._values)
        return merged

    def add_on_change(self, tag: str, callback: OnChange) -> None:
        self._on_change[tag] = callback

    def clear_on_change(self, tag: str) -> None:
        self._on_change.pop(tag, None)

    def _notify(self, key: str) -> None:
        for callback in list(self._on_change.values()):
            callback(key)


__all__ = ["Settings", "OnChange"]
