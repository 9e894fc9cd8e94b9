"""Interval lowering — turns the workout tree into flat interval blocks.

Exercises and rests live in two parallel tuples on a Workout; lowering
merges them by index:

    exercise[0], rest[0], exercise[1], rest[1], ...

An exercise without a rest at its index gets no recovery step. Rests past
the last exercise are dropped. All functions are pure.
"""

from __future__ import annotations

import logging

from workout_planner.models.enums import StepPurpose
from workout_planner.models.interval import CustomWorkoutPlan, IntervalBlock, IntervalStep
from workout_planner.models.session import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    Workout,
)

logger = logging.getLogger(__name__)


def lower_exercise(exercise: Exercise) -> IntervalStep:
    """Lower an exercise to a WORK step."""
    return IntervalStep(
        purpose=StepPurpose.WORK,
        goal=exercise.goal,
        display_name=exercise.display_name,
        alert=exercise.alert,
    )


def lower_rest(rest: Rest) -> IntervalStep:
    """Lower a rest to a RECOVERY step."""
    return IntervalStep(
        purpose=StepPurpose.RECOVERY,
        goal=rest.goal,
        display_name=rest.display_name,
    )


def lower_workout(workout: Workout) -> IntervalBlock:
    """Interleave a workout's exercises and rests into one IntervalBlock."""
    steps: list[IntervalStep] = []
    for exercise, rest in workout.pairs:
        steps.append(lower_exercise(exercise))
        if rest is not None:
            steps.append(lower_rest(rest))

    dropped = len(workout.rest_periods) - len(workout.exercises)
    if dropped > 0:
        logger.debug(
            "Dropped %d rest period(s) past the last exercise of %r",
            dropped,
            workout.title,
        )

    return IntervalBlock(steps=tuple(steps), iterations=workout.iterations)


def lower_group(group: ActivityGroup, session_display_name: str) -> CustomWorkoutPlan:
    """Package a group's lowered workouts as one schedulable plan unit.

    The unit is named ``"<session> - <group>"``; the group part falls back
    to the activity name when the group has no display name.
    """
    return CustomWorkoutPlan(
        activity=group.activity,
        location=group.location,
        display_name=f"{session_display_name} - {group.title}",
        blocks=tuple(lower_workout(w) for w in group.workouts),
    )


def lower_session(session: ActivitySession) -> list[CustomWorkoutPlan]:
    """Lower a session to one plan unit per activity group, in group order."""
    return [lower_group(g, session.display_name) for g in session.activity_groups]
