"""Lowering — turns authored sessions into executable plan units."""

from workout_planner.lowering.intervals import lower_group, lower_session, lower_workout
from workout_planner.lowering.validation import ensure_schedulable, interleaving_warnings

__all__ = [
    "ensure_schedulable",
    "interleaving_warnings",
    "lower_group",
    "lower_session",
    "lower_workout",
]
