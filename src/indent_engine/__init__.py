"""UI-agnostic indent/unindent engine for text buffers."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "indent",
    "runtime",
    "settings",
]

__version__ = "0.1.0"
