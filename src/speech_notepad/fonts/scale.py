"""Fixed ladder of font sizes the stepper snaps to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True, slots=True)
class FontScale:
    """Strictly ascending, immutable sequence of allowed font sizes."""

    sizes: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.sizes:
            raise ValueError("FontScale requires at least one size")
        for smaller, larger in zip(self.sizes, self.sizes[1:]):
            if larger <= smaller:
                raise ValueError(
                    f"FontScale sizes must be strictly ascending ({smaller} >= {larger})"
                )

    @classmethod
    def of(cls, sizes: Iterable[float]) -> "FontScale":
        return cls(tuple(sizes))

    def __iter__(self) -> Iterator[float]:
        return iter(self.sizes)

    def __len__(self) -> int:
        return len(self.sizes)

    @property
    def smallest(self) -> float:
        return self.sizes[0]

    @property
    def largest(self) -> float:
        return self.sizes[-1]

    def below(self, size: float) -> Optional[float]:
        """Largest size strictly less than ``size``, if any."""

        found: Optional[float] = None
        for candidate in self.sizes:
            if candidate < size:
                found = candidate
        return found

    def above(self, size: float) -> Optional[float]:
        """Smallest size strictly greater than ``size``, if any."""

        found: Optional[float] = None
        for candidate in reversed(self.sizes):
            if candidate > size:
                found = candidate
        return found


DEFAULT_FONT_SCALE = FontScale.of(
    (8, 9, 10, 11, 12, 14, 16, 18, 20, 22, 24, 26, 28, 36, 48, 72)
)

__all__ = ["DEFAULT_FONT_SCALE", "FontScale"]
