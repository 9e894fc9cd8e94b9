"""Runtime workout tree — Exercise / Rest → Workout → ActivityGroup → ActivitySession.

Every node is a frozen dataclass that exclusively owns its children, so a
session is a strict tree with structural equality. Edits are made by
building a new node and substituting it into the parent's tuple.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from workout_planner.models.alert import Alert
from workout_planner.models.enums import (
    DEFAULT_REST_NAME,
    MIN_ITERATIONS,
    MIND_AND_BODY_ACTIVITIES,
    ActivityType,
    FitnessMetric,
    Muscle,
    SessionLocation,
    WorkoutType,
)
from workout_planner.models.goal import Goal, OpenGoal
from workout_planner.models.movement import Movement, lookup

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class Exercise:
    """One movement performed toward a goal, optionally monitored by an alert.

    Target muscles and metrics always come from the movement catalogue.
    """

    movement: Movement
    goal: Goal = field(default_factory=OpenGoal)
    alert: Optional[Alert] = None

    @property
    def display_name(self) -> str:
        return lookup(self.movement).display_name

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return lookup(self.movement).target_muscles

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return lookup(self.movement).target_metrics


@dataclass(frozen=True)
class Rest:
    """A recovery interval between exercises."""

    display_name: str = DEFAULT_REST_NAME
    goal: Goal = field(default_factory=OpenGoal)


@dataclass(frozen=True)
class Workout:
    """A repeatable block of exercises, each optionally followed by a rest.

    ``rest_periods[i]`` is the rest after ``exercises[i]``. The two
    tuples may differ in length: a missing rest means none, and rests
    beyond the last exercise are never performed.

    ``iterations`` below 1 is clamped to 1.
    """

    exercises: tuple[Exercise, ...] = ()
    rest_periods: tuple[Rest, ...] = ()
    iterations: int = 1
    workout_type: Optional[WorkoutType] = None
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "exercises", tuple(self.exercises))
        object.__setattr__(self, "rest_periods", tuple(self.rest_periods))
        if self.iterations is None or self.iterations < MIN_ITERATIONS:
            logger.warning(
                "Workout iterations %r below %d, clamping",
                self.iterations,
                MIN_ITERATIONS,
            )
            object.__setattr__(self, "iterations", MIN_ITERATIONS)

    @classmethod
    def from_pairs(
        cls,
        pairs: list[tuple[Exercise, Optional[Rest]]],
        iterations: int = 1,
        workout_type: Optional[WorkoutType] = None,
        display_name: Optional[str] = None,
    ) -> Workout:
        """Build a workout from ``(exercise, rest_or_None)`` pairs.

        A ``None`` rest is only allowed on the last pair, since rests are
        matched to exercises by index.

        Raises:
            ValueError: A pair other than the last has no rest.
        """
        exercises = tuple(exercise for exercise, _ in pairs)
        rests = tuple(rest for _, rest in pairs if rest is not None)
        if any(rest is None for _, rest in pairs[:-1]):
            raise ValueError("Only the last exercise may go without a rest")
        return cls(
            exercises=exercises,
            rest_periods=rests,
            iterations=iterations,
            workout_type=workout_type,
            display_name=display_name,
        )

    @property
    def pairs(self) -> tuple[tuple[Exercise, Optional[Rest]], ...]:
        """Each exercise with the rest that follows it, or None.

        Rests past the last exercise are not included.
        """
        rests = self.rest_periods
        return tuple(
            (exercise, rests[i] if i < len(rests) else None)
            for i, exercise in enumerate(self.exercises)
        )

    @property
    def title(self) -> str:
        if self.display_name:
            return self.display_name
        if self.workout_type is not None:
            return self.workout_type.value
        return "Workout"

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return frozenset().union(*(e.target_muscles for e in self.exercises))

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return frozenset().union(*(e.target_metrics for e in self.exercises))


@dataclass(frozen=True)
class ActivityGroup:
    """Workouts sharing one activity classification and location."""

    activity: ActivityType
    location: SessionLocation
    workouts: tuple[Workout, ...] = ()
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "workouts", tuple(self.workouts))

    @property
    def title(self) -> str:
        return self.display_name or self.activity.display_name

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return frozenset().union(*(w.target_muscles for w in self.workouts))

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return frozenset().union(*(w.target_metrics for w in self.workouts))


@dataclass(frozen=True)
class ActivitySession:
    """Top-level authored plan: ordered activity groups plus metadata.

    ``date_created`` is always aware UTC; naive values are taken as UTC.
    """

    activity_groups: tuple[ActivityGroup, ...]
    display_name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_prebuilt: bool = False
    date_created: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(self, "activity_groups", tuple(self.activity_groups))
        object.__setattr__(self, "date_created", _as_utc(self.date_created))

    @classmethod
    def single_activity(
        cls,
        workouts: tuple[Workout, ...] | list[Workout],
        activity: ActivityType,
        location: SessionLocation,
        display_name: str | None = None,
    ) -> ActivitySession:
        """Build a one-group session; the name defaults to the activity's."""
        group = ActivityGroup(activity=activity, location=location, workouts=tuple(workouts))
        return cls(
            activity_groups=(group,),
            display_name=display_name or activity.display_name,
        )

    @property
    def workouts(self) -> tuple[Workout, ...]:
        """All workouts across groups, in group order."""
        return tuple(w for g in self.activity_groups for w in g.workouts)

    @property
    def activity(self) -> ActivityType:
        """Primary activity (first group's), OTHER when empty."""
        if not self.activity_groups:
            return ActivityType.OTHER
        return self.activity_groups[0].activity

    @property
    def location(self) -> SessionLocation:
        if not self.activity_groups:
            return SessionLocation.UNKNOWN
        return self.activity_groups[0].location

    @property
    def is_mind_and_body(self) -> bool:
        return bool(self.activity_groups) and all(
            g.activity in MIND_AND_BODY_ACTIVITIES for g in self.activity_groups
        )

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return frozenset().union(*(g.target_muscles for g in self.activity_groups))

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return frozenset().union(*(g.target_metrics for g in self.activity_groups))
