"""Undoable edit transactions scoped around one command invocation."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, ContextManager, Optional, Tuple

from indent_engine.runtime import telemetry

from .region import Region
from .undo import UndoEntry

if TYPE_CHECKING:
    from .view import View


class Transaction(AbstractContextManager["Transaction"]):
    """Edit session: one undo step on success, full rollback on error.

    Entering while another transaction is open on the same view joins it;
    only the outermost transaction records undo history or rolls back.
    """

    def __init__(self, view: "View", label: str) -> None:
        self.view = view
        self.label = label
        self.joined = False
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_text = ""
        self._before_selection: Tuple[Region, ...] = ()

    @property
    def changed(self) -> bool:
        return self.view.document.text != self._before_text

    def __enter__(self) -> "Transaction":
        outer = self.view.active_transaction
        if outer is not None:
            self.joined = True
            return outer
        self._before_text = self.view.document.text
        self._before_selection = self.view.sel().regions()
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"view": self.view.name},
        )
        self._span_cm.__enter__()
        self.view.active_transaction = self
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self.joined:
            return False
        self.view.active_transaction = None
        try:
            if exc_type is not None:
                self._rollback()
            elif self.changed:
                self._commit()
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False

    def _commit(self) -> None:
        self.view.undo_timeline.push(
            UndoEntry(
                label=self.label,
                before_text=self._before_text,
                after_text=self.view.document.text,
                selection_before=self._before_selection,
                selection_after=self.view.sel().regions(),
            )
        )

    def _rollback(self) -> None:
        if self.changed:
            self.view.document.replace_all(self._before_text)
        self.view.sel().replace(self._before_selection)


__all__ = ["Transaction"]
