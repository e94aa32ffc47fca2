"""Rate-limited font size stepping over a :class:`FontScale`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .scale import DEFAULT_FONT_SCALE, FontScale

DEFAULT_COOLDOWN_S = 0.1


class StepDirection(str, Enum):
    SMALLER = "smaller"
    LARGER = "larger"


class StepStatus(str, Enum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one step; ``size`` is the size the display should show."""

    status: StepStatus
    size: float

    @property
    def applied(self) -> bool:
        return self.status is StepStatus.APPLIED

    @classmethod
    def applied_to(cls, size: float) -> "StepResult":
        return cls(StepStatus.APPLIED, size)

    @classmethod
    def unchanged(cls, size: float) -> "StepResult":
        return cls(StepStatus.UNCHANGED, size)

    @classmethod
    def rejected(cls, size: float) -> "StepResult":
        return cls(StepStatus.REJECTED, size)


@dataclass(slots=True)
class ThrottleState:
    """Instant of the last applied change. Single writer: the stepper's caller."""

    last_change: float = float("-inf")


def step_size(
    current_size: float,
    direction: StepDirection,
    now: float,
    last_change: float,
    cooldown: float = DEFAULT_COOLDOWN_S,
    scale: FontScale = DEFAULT_FONT_SCALE,
) -> StepResult:
    """Snap ``current_size`` to the neighbouring scale value in ``direction``.

    ``current_size`` may sit between two scale values; the result is always a
    scale value. Calls inside the cooldown window are rejected outright, and
    being at an extreme of the scale yields ``UNCHANGED``. Only ``APPLIED``
    should advance the caller's throttle.
    """

    if now - last_change < cooldown:
        return StepResult.rejected(current_size)

    if StepDirection(direction) is StepDirection.SMALLER:
        target = scale.below(current_size)
    else:
        target = scale.above(current_size)

    if target is None:
        return StepResult.unchanged(current_size)
    return StepResult.applied_to(target)


class FontStepper:
    """Owns a :class:`ThrottleState` and applies :func:`step_size` against it.

    Not thread-safe; hosts serialize calls the same way they serialize input
    events.
    """

    def __init__(
        self,
        *,
        scale: FontScale = DEFAULT_FONT_SCALE,
        cooldown: float = DEFAULT_COOLDOWN_S,
        clock: Callable[[], float] = time.monotonic,
        throttle: Optional[ThrottleState] = None,
    ) -> None:
        if cooldown < 0:
            raise ValueError("cooldown cannot be negative")
        self.scale = scale
        self.cooldown = cooldown
        self.clock = clock
        self.throttle = throttle or ThrottleState()

    def step(
        self,
        current_size: float,
        direction: StepDirection,
        *,
        now: Optional[float] = None,
    ) -> StepResult:
        instant = self.clock() if now is None else now
        result = step_size(
            current_size,
            direction,
            instant,
            self.throttle.last_change,
            self.cooldown,
            self.scale,
        )
        if result.applied:
            self.throttle.last_change = instant
        return result

    def smaller(self, current_size: float, *, now: Optional[float] = None) -> StepResult:
        return self.step(current_size, StepDirection.SMALLER, now=now)

    def larger(self, current_size: float, *, now: Optional[float] = None) -> StepResult:
        return self.step(current_size, StepDirection.LARGER, now=now)


__all__ = [
    "DEFAULT_COOLDOWN_S",
    "FontStepper",
    "StepDirection",
    "StepResult",
    "StepStatus",
    "ThrottleState",
    "step_size",
]
