"""Clamping helpers shared across host services."""

from __future__ import annotations

from speech_notepad.segments import Span, clamp

from .state import CursorState
from .sync import TextSnapshot


def clamp_cursor(text: str, cursor: CursorState) -> CursorState:
    """Pin a host-reported caret/selection inside ``text``."""

    start = clamp(cursor.selection_start, 0, len(text))
    length = clamp(cursor.selection_length, 0, len(text) - start)
    return CursorState(start, length)


def selection_span(snapshot: TextSnapshot) -> Span:
    cursor = clamp_cursor(snapshot.text, snapshot.cursor)
    return Span(cursor.selection_start, cursor.selection_length)
