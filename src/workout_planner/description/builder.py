"""Description builder — plain-text summaries of workouts and sessions.

Used for previews in the CLI and as the Garmin workout description.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from workout_planner.models.session import ActivitySession, Exercise, Rest, Workout


def _tag_list(tags: Iterable[Enum]) -> str:
    """Join enum tags by display value, sorted so output is stable."""
    return ", ".join(sorted(tag.value for tag in tags))


def _exercise_line(exercise: Exercise) -> str:
    line = f"     • {exercise.display_name} - Goal: {exercise.goal.describe()}"
    if exercise.alert is not None:
        line += f" - Alert: {exercise.alert.describe()}"
    return line


def _rest_line(rest: Rest) -> str:
    return f"       Rest: {rest.display_name} ({rest.goal.describe()})"


def describe_workout(workout: Workout) -> str:
    """Render one workout: title, sets, tags, then exercises with their rests."""
    lines: list[str] = [workout.title]

    if workout.iterations > 1:
        lines.append(f"   Sets: {workout.iterations}")
    if workout.target_metrics:
        lines.append(f"   Target Metrics: {_tag_list(workout.target_metrics)}")
    if workout.target_muscles:
        lines.append(f"   Target Muscles: {_tag_list(workout.target_muscles)}")

    lines.append("   Exercises:")
    for exercise, rest in workout.pairs:
        lines.append(_exercise_line(exercise))
        if rest is not None:
            lines.append(_rest_line(rest))

    return "\n".join(lines) + "\n"


def describe_session(session: ActivitySession) -> str:
    """Render a session banner followed by each activity group's workouts.

    Workouts are numbered ``<group>.<workout>.`` starting from 1.
    """
    lines: list[str] = [f"=== {session.display_name.upper()} ===", ""]

    if session.target_metrics:
        lines.append(f"Target Metrics: {_tag_list(session.target_metrics)}")
    if session.target_muscles:
        lines.append(f"Target Muscles: {_tag_list(session.target_muscles)}")

    lines.append("")
    lines.append("ACTIVITY GROUPS")
    lines.append("---------------")

    for group_index, group in enumerate(session.activity_groups, start=1):
        lines.append("")
        lines.append(f"{group.title} ({group.location.display_name})")
        lines.append(f"Target Metrics: {_tag_list(group.target_metrics)}")
        lines.append(f"Target Muscles: {_tag_list(group.target_muscles)}")
        lines.append("")
        for workout_index, workout in enumerate(group.workouts, start=1):
            lines.append(f"{group_index}.{workout_index}. {describe_workout(workout)}")

    return "\n".join(lines) + "\n"
