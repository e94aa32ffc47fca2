"""Offset ranges into a text buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, start + length)`` into a buffer.

    A span never owns text; it is only an index pair that a host resolves
    against the buffer it was computed from.
    """

    start: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start cannot be negative")
        if self.length < 0:
            raise ValueError("length cannot be negative")

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def extract(self, text: str) -> str:
        return text[self.start : self.end]


EMPTY_SPAN = Span(0, 0)


def clamp(value: int, lower: int, upper: int) -> int:
    """Pin ``value`` into ``[lower, upper]``."""

    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


__all__ = ["EMPTY_SPAN", "Span", "clamp"]
