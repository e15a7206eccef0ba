"""Offset-addressable text storage for views."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .region import Region
from .sync import BufferValidationError
from .validation import ensure_offset, ensure_region

LINE_BREAK = "\n"


@dataclass(slots=True)
class TextDocument:
    """Flat string storage with lazily derived line boundaries.

    Lines are never stored. ``line_start`` and friends are computed from the
    text on first use and dropped on every mutation, so offsets obtained
    before an edit must not be reused after it.
    """

    _text: str = ""
    version: int = 0
    _line_starts: Optional[List[int]] = field(default=None, repr=False)

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_text=text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def size(self) -> int:
        return len(self._text)

    @property
    def line_count(self) -> int:
        return len(self._starts())

    def substr(self, region: Region) -> str:
        ensure_region(self, region)
        return self._text[region.begin() : region.end()]

    def insert(self, offset: int, text: str) -> int:
        """Insert ``text`` at ``offset`` and return the number of characters added."""

        ensure_offset(self, offset)
        if not text:
            return 0
        self._text = self._text[:offset] + text + self._text[offset:]
        self._touch()
        return len(text)

    def erase(self, region: Region) -> str:
        """Remove ``region`` and return the removed text."""

        ensure_region(self, region)
        start, stop = region.begin(), region.end()
        removed = self._text[start:stop]
        if removed:
            self._text = self._text[:start] + self._text[stop:]
            self._touch()
        return removed

    def replace_all(self, text: str) -> None:
        self._text = text
        self._touch()

    def row_of(self, offset: int) -> int:
        """Row containing ``offset``; a line break belongs to the line it ends."""

        ensure_offset(self, offset)
        return bisect_right(self._starts(), offset) - 1

    def line_start(self, row: int) -> int:
        starts = self._starts()
        if row < 0 or row >= len(starts):
            raise BufferValidationError(f"Row {row} outside {len(starts)} line(s)")
        return starts[row]

    def line_end(self, row: int) -> int:
        """Offset just past the content of ``row``, excluding its line break."""

        starts = self._starts()
        self.line_start(row)
        if row + 1 < len(starts):
            return starts[row + 1] - 1
        return len(self._text)

    def line_region(self, row: int) -> Region:
        return Region(self.line_start(row), self.line_end(row))

    def line(self, row: int) -> str:
        return self._text[self.line_start(row) : self.line_end(row)]

    def row_col(self, offset: int) -> Tuple[int, int]:
        row = self.row_of(offset)
        return row, offset - self._starts()[row]

    def text_point(self, row: int, col: int) -> int:
        start = self.line_start(row)
        if col < 0 or start + col > self.line_end(row):
            raise BufferValidationError(f"Column {col} outside row {row}")
        return start + col

    def _starts(self) -> List[int]:
        if self._line_starts is None:
            starts = [0]
            index = self._text.find(LINE_BREAK)
            while index != -1:
                starts.append(index + 1)
                index = self._text.find(LINE_BREAK, index + 1)
            self._line_starts = starts
        return self._line_starts

    def _touch(self) -> None:
        self._line_starts = None
        self.version += 1


__all__ = ["TextDocument", "LINE_BREAK"]
