"""Exception hierarchy for the workout planner."""

from __future__ import annotations

import uuid


class WorkoutPlannerError(Exception):
    """Base exception for all workout_planner errors."""


class StoreError(WorkoutPlannerError):
    """The session store could not complete a read or write."""


class SessionNotFoundError(WorkoutPlannerError):
    """No stored session has the requested id."""

    def __init__(self, session_id: uuid.UUID) -> None:
        super().__init__(f"No session with id {session_id}")
        self.session_id = session_id


class EmptySessionError(WorkoutPlannerError):
    """A session has nothing to schedule (no groups, or a group without workouts)."""


class SchedulingError(WorkoutPlannerError):
    """The workout scheduler rejected or lost track of a plan."""
