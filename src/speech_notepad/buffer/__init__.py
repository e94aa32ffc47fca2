"""Snapshots and collaborator protocols at the host boundary."""

from .state import CursorState
from .sync import (
    DisplaySink,
    SpeechSink,
    SpeechUnavailableError,
    TextSnapshot,
    TextSource,
)
from .validation import clamp_cursor, selection_span

__all__ = [
    "CursorState",
    "DisplaySink",
    "SpeechSink",
    "SpeechUnavailableError",
    "TextSnapshot",
    "TextSource",
    "clamp_cursor",
    "selection_span",
]
