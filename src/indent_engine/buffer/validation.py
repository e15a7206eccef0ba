"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .region import Region
from .sync import BufferValidationError

if TYPE_CHECKING:
    from .document import TextDocument


def ensure_offset(document: "TextDocument", offset: int) -> int:
    if offset < 0 or offset > document.size:
        raise BufferValidationError(
            f"Offset {offset} outside buffer of size {document.size}", offset=offset
        )
    return offset


def ensure_region(document: "TextDocument", region: Region) -> Region:
    ensure_offset(document, region.a)
    ensure_offset(document, region.b)
    return region
