"""Caret and selection state reported by the host widget."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorState:
    """Linear caret/selection, as a host text widget reports it.

    ``selection_start + selection_length`` may exceed the buffer length; the
    engine clamps rather than trusting the host.
    """

    selection_start: int = 0
    selection_length: int = 0

    @property
    def has_selection(self) -> bool:
        return self.selection_length > 0

    @property
    def selection_end(self) -> int:
        return self.selection_start + self.selection_length

    @classmethod
    def caret(cls, offset: int) -> "CursorState":
        return cls(selection_start=offset, selection_length=0)

    @classmethod
    def between(cls, anchor: int, active: int) -> "CursorState":
        """Build a selection from two offsets in either order."""

        start, end = sorted((anchor, active))
        return cls(selection_start=start, selection_length=end - start)
