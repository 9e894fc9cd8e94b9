"""Goal — the target condition that ends an exercise or rest period.

A goal is one of three closed variants, each tagged with a ``kind``
discriminator that the store and the device serializer key on:

- ``OpenGoal``      ends when the athlete decides (lap button)
- ``TimeGoal``      ends after a number of seconds
- ``DistanceGoal``  ends after a distance in a declared length unit
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from workout_planner.formatting import format_distance, format_duration
from workout_planner.models.enums import LengthUnit

GOAL_OPEN = "open"
GOAL_TIME = "time"
GOAL_DISTANCE = "distance"


@dataclass(frozen=True)
class OpenGoal:
    """No end condition."""

    kind: ClassVar[str] = GOAL_OPEN

    def describe(self) -> str:
        return "No goal"


@dataclass(frozen=True)
class TimeGoal:
    """Time-bounded goal. Callers supply a non-negative duration."""

    seconds: float

    kind: ClassVar[str] = GOAL_TIME

    def describe(self) -> str:
        return format_duration(self.seconds)


@dataclass(frozen=True)
class DistanceGoal:
    """Distance-bounded goal in *unit*. Callers supply a non-negative value."""

    value: float
    unit: LengthUnit = LengthUnit.METERS

    kind: ClassVar[str] = GOAL_DISTANCE

    @property
    def meters(self) -> float:
        return self.value * self.unit.meters

    def describe(self) -> str:
        return format_distance(self.value, self.unit)


Goal = Union[OpenGoal, TimeGoal, DistanceGoal]

GOAL_KINDS = frozenset({GOAL_OPEN, GOAL_TIME, GOAL_DISTANCE})
