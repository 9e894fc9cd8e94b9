"""Authoring-time checks for workouts and sessions.

Interleaving problems are reported as warnings, never raised: lowering
still accepts any workout. Schedulability is a hard precondition checked
before anything is handed to a scheduler.
"""

from __future__ import annotations

from workout_planner.exceptions import EmptySessionError
from workout_planner.models.session import ActivitySession, Workout


def interleaving_warnings(workout: Workout) -> list[str]:
    """Check how a workout's rests pair up with its exercises.

    Equal counts, or one rest fewer than exercises (no rest after the last
    exercise), are the expected shapes.

    Returns:
        List of warning strings. Empty list means the pairing is expected.
    """
    warnings: list[str] = []
    n_exercises = len(workout.exercises)
    n_rests = len(workout.rest_periods)

    if n_exercises == 0:
        warnings.append(f"{workout.title}: workout has no exercises.")
        return warnings

    if n_rests > n_exercises:
        warnings.append(
            f"{workout.title}: {n_rests} rest periods for {n_exercises} exercises; "
            f"{n_rests - n_exercises} trailing rest(s) will be ignored."
        )
    elif n_rests < n_exercises - 1:
        warnings.append(
            f"{workout.title}: only {n_rests} rest periods for {n_exercises} exercises; "
            f"exercises {n_rests + 1}-{n_exercises} run back to back."
        )

    return warnings


def session_warnings(session: ActivitySession) -> list[str]:
    """Collect interleaving warnings for every workout in a session."""
    warnings: list[str] = []
    for workout in session.workouts:
        warnings.extend(interleaving_warnings(workout))
    return warnings


def ensure_schedulable(session: ActivitySession) -> None:
    """Raise EmptySessionError unless every group has at least one workout.

    Raises:
        EmptySessionError: The session has no activity groups, or one of
            its groups has no workouts.
    """
    if not session.activity_groups:
        raise EmptySessionError(f"Session {session.display_name!r} has no activity groups")

    for index, group in enumerate(session.activity_groups):
        if not group.workouts:
            raise EmptySessionError(
                f"Activity group {index} ({group.title!r}) of session "
                f"{session.display_name!r} has no workouts"
            )
