"""Sentence/word boundary engine for a notepad that speaks as you type."""

__all__ = [
    "adapters",
    "buffer",
    "fonts",
    "host",
    "runtime",
    "segments",
    "settings",
]

__version__ = "0.1.0"
