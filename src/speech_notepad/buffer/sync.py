"""Adapter boundary types for exchanging text and output with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .state import CursorState


@dataclass(frozen=True, slots=True)
class TextSnapshot:
    """Immutable copy of the buffer and caret taken for one engine call."""

    text: str
    cursor: CursorState = field(default_factory=CursorState)

    @classmethod
    def at(cls, text: str, offset: int, length: int = 0) -> "TextSnapshot":
        return cls(text=text, cursor=CursorState(offset, length))

    def __len__(self) -> int:
        return len(self.text)


class TextSource(Protocol):
    """Read-only access to the host's text buffer."""

    @property
    def text(self) -> str:
        ...


class SpeechSink(Protocol):
    """Speaks text asynchronously; the engine only hands it strings."""

    def speak(self, text: str) -> None:
        """Queue ``text`` for speaking and return immediately."""
        ...

    def cancel(self) -> None:
        """Drop everything queued or being spoken."""
        ...


class DisplaySink(Protocol):
    """Receives the font size the host should render with."""

    def apply_font_size(self, size: float) -> None:
        ...


class SpeechUnavailableError(RuntimeError):
    """Raised when no speech backend can be started."""

    def __init__(self, message: str, *, backend: str | None = None) -> None:
        super().__init__(message)
        self.backend = backend
