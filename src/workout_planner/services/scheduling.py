"""Scheduling — hands lowered sessions to a workout scheduler.

The scheduler and notifier are collaborators behind small protocols.
``InMemoryWorkoutScheduler`` keeps plans locally;
``garmin_client.GarminWorkoutScheduler`` pushes them to Garmin Connect.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import Protocol

from workout_planner.exceptions import SchedulingError
from workout_planner.lowering.intervals import lower_session
from workout_planner.lowering.validation import ensure_schedulable
from workout_planner.models.enums import DEFAULT_SCHEDULE_SPACING_MIN
from workout_planner.models.interval import ScheduledWorkoutPlan, WorkoutPlan
from workout_planner.models.session import ActivitySession

logger = logging.getLogger(__name__)


class WorkoutScheduler(Protocol):
    """Calendar of scheduled workout plans."""

    def schedule(self, plan: WorkoutPlan, at: datetime) -> None: ...

    def scheduled_workouts(self) -> list[ScheduledWorkoutPlan]: ...

    def remove(self, plan_id: uuid.UUID, at: datetime) -> None: ...

    def mark_complete(self, plan_id: uuid.UUID, at: datetime) -> None: ...


class Notifier(Protocol):
    """Fire-and-forget notice that a plan was scheduled."""

    def notify(self, plan_id: uuid.UUID, label: str) -> None: ...


class InMemoryWorkoutScheduler:
    """Keeps scheduled plans in a list, ordered by date."""

    def __init__(self) -> None:
        self._scheduled: list[ScheduledWorkoutPlan] = []

    def schedule(self, plan: WorkoutPlan, at: datetime) -> None:
        self._scheduled.append(ScheduledWorkoutPlan(plan=plan, date=at))
        self._scheduled.sort(key=lambda s: s.date)

    def scheduled_workouts(self) -> list[ScheduledWorkoutPlan]:
        return list(self._scheduled)

    def remove(self, plan_id: uuid.UUID, at: datetime) -> None:
        index = self._index_of(plan_id, at)
        del self._scheduled[index]

    def mark_complete(self, plan_id: uuid.UUID, at: datetime) -> None:
        index = self._index_of(plan_id, at)
        entry = self._scheduled[index]
        self._scheduled[index] = ScheduledWorkoutPlan(plan=entry.plan, date=entry.date, complete=True)

    def _index_of(self, plan_id: uuid.UUID, at: datetime) -> int:
        for i, entry in enumerate(self._scheduled):
            if entry.plan.id == plan_id and entry.date == at:
                return i
        raise SchedulingError(f"No plan {plan_id} scheduled at {at.isoformat()}")


class LoggingNotifier:
    """Notifier that only logs."""

    def notify(self, plan_id: uuid.UUID, label: str) -> None:
        logger.info("Workout scheduled: %s (plan %s)", label, plan_id)


class SessionScheduler:
    """Lowers sessions and places their plan units on a scheduler.

    Usage::

        scheduler = SessionScheduler(InMemoryWorkoutScheduler(), LoggingNotifier())
        scheduled = scheduler.schedule_session(session, start=datetime.now())
    """

    def __init__(
        self,
        scheduler: WorkoutScheduler,
        notifier: Notifier | None = None,
        spacing: timedelta = timedelta(minutes=DEFAULT_SCHEDULE_SPACING_MIN),
    ) -> None:
        self.scheduler = scheduler
        self.notifier = notifier or LoggingNotifier()
        self.spacing = spacing

    def schedule_session(
        self, session: ActivitySession, start: datetime,
    ) -> list[ScheduledWorkoutPlan]:
        """Schedule one plan per activity group, ``spacing`` apart from *start*.

        All or nothing: if a unit fails, the units already scheduled are
        removed again before the error propagates.

        Raises:
            EmptySessionError: The session has nothing to schedule. Raised
                before the scheduler is called.
            SchedulingError: A unit could not be scheduled.
        """
        ensure_schedulable(session)

        scheduled: list[ScheduledWorkoutPlan] = []
        at = start
        for unit in lower_session(session):
            plan = WorkoutPlan(workout=unit)
            try:
                self.scheduler.schedule(plan, at)
            except SchedulingError:
                self._unwind(scheduled)
                raise
            self.notifier.notify(plan.id, unit.display_name)
            scheduled.append(ScheduledWorkoutPlan(plan=plan, date=at))
            logger.info("Scheduled %r at %s", unit.display_name, at.isoformat())
            at = at + self.spacing

        return scheduled

    def _unwind(self, scheduled: list[ScheduledWorkoutPlan]) -> None:
        for entry in reversed(scheduled):
            try:
                self.scheduler.remove(entry.plan.id, entry.date)
            except SchedulingError as exc:
                logger.warning("Could not unschedule %r: %s", entry.plan.workout.display_name, exc)
        if scheduled:
            logger.info("Removed %d already-scheduled workout(s) after a failure", len(scheduled))
