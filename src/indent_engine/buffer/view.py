"""View façade combining document, selection, settings, and undo."""

from __future__ import annotations

from typing import Iterable, Optional

from indent_engine.settings import Settings

from .document import TextDocument
from .edit import Transaction
from .region import Region, RegionSet
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline


class View:
    def __init__(
        self,
        *,
        name: str = "untitled",
        document: Optional[TextDocument] = None,
        selection: Optional[RegionSet] = None,
        settings: Optional[Settings] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.selection = selection or RegionSet()
        self.settings = settings if settings is not None else Settings()
        self.undo_timeline = undo or UndoTimeline()
        self.active_transaction: Optional[Transaction] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "untitled",
        selection: Iterable[Region] = (),
        settings: Optional[Settings] = None,
    ) -> "View":
        return cls(
            name=name,
            document=TextDocument.from_text(text),
            selection=RegionSet(selection),
            settings=settings,
        )

    def sel(self) -> RegionSet:
        return self.selection

    def size(self) -> int:
        return self.document.size

    def text(self) -> str:
        return self.document.text

    def substr(self, region: Region) -> str:
        return self.document.substr(region)

    def begin_edit(self, label: str = "edit") -> Transaction:
        return Transaction(self, label)

    def insert(self, offset: int, text: str) -> int:
        self._require_transaction("insert")
        added = self.document.insert(offset, text)
        if added:
            self.selection.adjust_for_insert(offset, added)
        return added

    def erase(self, region: Region) -> str:
        self._require_transaction("erase")
        removed = self.document.erase(region)
        if removed:
            self.selection.adjust_for_erase(region.begin(), region.end())
        return removed

    def load(self, text: str, selection: Iterable[Region] = ()) -> None:
        """Replace content and selection without recording history."""

        self.document.replace_all(text)
        self.selection.replace(selection)

    def undo(self) -> bool:
        entry = self.undo_timeline.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry)
        self.selection.replace(entry.selection_before)
        return True

    def redo(self) -> bool:
        entry = self.undo_timeline.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry)
        self.selection.replace(entry.selection_after)
        return True

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            selection=self.selection.regions(),
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def _restore(self, text: str, entry: UndoEntry) -> None:
        if self.active_transaction is not None:
            raise RuntimeError(
                f"Cannot restore '{entry.label}' while a transaction is open"
            )
        self.document.replace_all(text)

    def _require_transaction(self, operation: str) -> None:
        if self.active_transaction is None:
            raise RuntimeError(f"{operation} requires an open edit transaction")


__all__ = ["View"]
