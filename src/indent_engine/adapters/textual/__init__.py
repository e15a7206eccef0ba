"""Textual integration for the indent engine."""

from .controller import TextualIndentAdapter, TextualUIHooks

__all__ = ["TextualIndentAdapter", "TextualUIHooks"]
