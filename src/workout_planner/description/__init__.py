"""Description module — human-readable workout and session summaries."""

from workout_planner.description.builder import describe_session, describe_workout

__all__ = ["describe_session", "describe_workout"]
