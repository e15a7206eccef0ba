"""Text buffer, selection regions, and undoable edit transactions."""

from .document import LINE_BREAK, TextDocument
from .edit import Transaction
from .region import Region, RegionSet
from .sync import BufferMirror, BufferSync, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_offset, ensure_region
from .view import View

__all__ = [
    "TextDocument",
    "LINE_BREAK",
    "Region",
    "RegionSet",
    "Transaction",
    "View",
    "UndoEntry",
    "UndoTimeline",
    "BufferMirror",
    "BufferSync",
    "BufferValidationError",
    "ensure_offset",
    "ensure_region",
]
