from __future__ import annotations

from typing import List

import pytest

from speech_notepad.fonts import (
    DEFAULT_FONT_SCALE,
    FontScale,
    FontStepper,
    StepDirection,
    StepStatus,
    step_size,
)

SMALL_SCALE = FontScale.of([8, 9, 10, 12])


def test_smaller_snaps_to_previous_value() -> None:
    result = step_size(9, StepDirection.SMALLER, 10.0, 0.0, 0.1, SMALL_SCALE)

    assert result.status is StepStatus.APPLIED
    assert result.size == 8


def test_larger_at_top_of_scale_is_unchanged() -> None:
    result = step_size(12, StepDirection.LARGER, 10.0, 0.0, 0.1, SMALL_SCALE)

    assert result.status is StepStatus.UNCHANGED
    assert result.size == 12


def test_size_between_values_snaps_to_neighbours() -> None:
    smaller = step_size(11, StepDirection.SMALLER, 10.0, 0.0, 0.1, SMALL_SCALE)
    larger = step_size(11, StepDirection.LARGER, 10.0, 0.0, 0.1, SMALL_SCALE)

    assert smaller.size == 10
    assert larger.size == 12


def test_size_outside_scale() -> None:
    assert step_size(7, StepDirection.SMALLER, 10.0, 0.0, 0.1, SMALL_SCALE).status == (
        StepStatus.UNCHANGED
    )
    assert step_size(7, StepDirection.LARGER, 10.0, 0.0, 0.1, SMALL_SCALE).size == 8
    assert step_size(40, StepDirection.SMALLER, 10.0, 0.0, 0.1, SMALL_SCALE).size == 12


def test_step_inside_cooldown_is_rejected() -> None:
    result = step_size(9, StepDirection.SMALLER, 1.05, 1.0, 0.1, SMALL_SCALE)

    assert result.status is StepStatus.REJECTED
    assert result.size == 9


def test_stepper_allows_one_change_per_cooldown_window() -> None:
    stepper = FontStepper(scale=SMALL_SCALE, cooldown=0.5)

    first = stepper.larger(9, now=10.0)
    second = stepper.larger(first.size, now=10.2)
    third = stepper.larger(first.size, now=10.5)

    assert first.status is StepStatus.APPLIED
    assert second.status is StepStatus.REJECTED
    assert third.status is StepStatus.APPLIED
    assert third.size == 12
    assert stepper.throttle.last_change == 10.5


def test_unchanged_step_does_not_reset_throttle() -> None:
    stepper = FontStepper(scale=SMALL_SCALE, cooldown=0.5)

    at_top = stepper.larger(12, now=10.0)

    assert at_top.status is StepStatus.UNCHANGED
    assert stepper.throttle.last_change == float("-inf")

    back_down = stepper.smaller(12, now=10.01)

    assert back_down.status is StepStatus.APPLIED
    assert back_down.size == 10


def test_rejected_step_does_not_reset_throttle() -> None:
    stepper = FontStepper(scale=SMALL_SCALE, cooldown=0.5)
    stepper.smaller(12, now=10.0)

    stepper.smaller(10, now=10.3)

    assert stepper.throttle.last_change == 10.0


@pytest.mark.parametrize(
    "direction, start",
    [(StepDirection.SMALLER, 72), (StepDirection.LARGER, 8)],
)
def test_repeated_steps_are_monotonic_and_saturate(
    direction: StepDirection, start: float
) -> None:
    stepper = FontStepper(cooldown=0.1)
    sizes: List[float] = [start]
    now = 0.0
    for _ in range(len(DEFAULT_FONT_SCALE) + 3):
        now += 1.0
        sizes.append(stepper.step(sizes[-1], direction, now=now).size)

    pairs = list(zip(sizes, sizes[1:]))
    if direction is StepDirection.SMALLER:
        assert all(after <= before for before, after in pairs)
        assert sizes[-1] == DEFAULT_FONT_SCALE.smallest
    else:
        assert all(after >= before for before, after in pairs)
        assert sizes[-1] == DEFAULT_FONT_SCALE.largest


def test_stepper_uses_clock_when_no_instant_given() -> None:
    stepper = FontStepper(clock=lambda: 5.0)

    result = stepper.smaller(12)

    assert result.size == 11
    assert stepper.throttle.last_change == 5.0


@pytest.mark.parametrize("sizes", [[], [10, 9], [9, 9]])
def test_scale_must_be_strictly_ascending(sizes: List[float]) -> None:
    with pytest.raises(ValueError):
        FontScale.of(sizes)


def test_negative_cooldown_is_rejected() -> None:
    with pytest.raises(ValueError):
        FontStepper(cooldown=-1)
