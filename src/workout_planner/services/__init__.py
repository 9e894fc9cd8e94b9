"""Services — session management and scheduling."""

from workout_planner.services.scheduling import (
    InMemoryWorkoutScheduler,
    LoggingNotifier,
    Notifier,
    SessionScheduler,
    WorkoutScheduler,
)
from workout_planner.services.workout_manager import WorkoutManager

__all__ = [
    "InMemoryWorkoutScheduler",
    "LoggingNotifier",
    "Notifier",
    "SessionScheduler",
    "WorkoutManager",
    "WorkoutScheduler",
]
