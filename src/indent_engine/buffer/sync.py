"""Adapter boundary types for syncing views with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Tuple

from .region import Region


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current view state."""

    text: str
    selection: Tuple[Region, ...]
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """Protocol describing how adapters exchange data with a view."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest snapshot the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Replace the view content with an edit made on the host side."""
        ...


class BufferValidationError(IndexError):
    """Raised when a caller passes an offset outside ``[0, size]``."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset
