"""Discrete font size stepping."""

from .scale import DEFAULT_FONT_SCALE, FontScale
from .stepper import (
    DEFAULT_COOLDOWN_S,
    FontStepper,
    StepDirection,
    StepResult,
    StepStatus,
    ThrottleState,
    step_size,
)

__all__ = [
    "DEFAULT_COOLDOWN_S",
    "DEFAULT_FONT_SCALE",
    "FontScale",
    "FontStepper",
    "StepDirection",
    "StepResult",
    "StepStatus",
    "ThrottleState",
    "step_size",
]
