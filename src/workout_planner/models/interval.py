"""Lowered interval models — the flat form handed to a workout scheduler."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from workout_planner.models.alert import Alert
from workout_planner.models.enums import ActivityType, SessionLocation, StepPurpose
from workout_planner.models.goal import Goal


@dataclass(frozen=True)
class IntervalStep:
    """A single work or recovery step inside an interval block."""

    purpose: StepPurpose
    goal: Goal
    display_name: str
    alert: Optional[Alert] = None


@dataclass(frozen=True)
class IntervalBlock:
    """Ordered steps repeated ``iterations`` times."""

    steps: tuple[IntervalStep, ...]
    iterations: int = 1


@dataclass(frozen=True)
class CustomWorkoutPlan:
    """One externally schedulable unit: a lowered activity group."""

    activity: ActivityType
    location: SessionLocation
    display_name: str
    blocks: tuple[IntervalBlock, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutPlan:
    """A lowered unit with the identity the scheduler tracks it by."""

    workout: CustomWorkoutPlan
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class ScheduledWorkoutPlan:
    """A plan placed on the calendar."""

    plan: WorkoutPlan
    date: datetime
    complete: bool = False
