"""WorkoutScheduler backed by the Garmin Connect calendar."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from workout_planner.exceptions import SchedulingError
from workout_planner.models.interval import ScheduledWorkoutPlan, WorkoutPlan
from workout_planner.serialization.garmin import to_garmin_json

from garmin_client.client import GarminClient
from garmin_client.exceptions import GarminClientError

logger = logging.getLogger(__name__)


@dataclass
class _CalendarEntry:
    scheduled: ScheduledWorkoutPlan
    workout_id: int
    schedule_id: Optional[int] = None


class GarminWorkoutScheduler:
    """Uploads each plan as a Garmin workout and puts it on the calendar.

    Garmin only schedules by day, so the time of *at* is kept locally for
    ordering and lookup. Completion is tracked locally as well.
    """

    def __init__(self, client: GarminClient) -> None:
        self.client = client
        self._entries: list[_CalendarEntry] = []

    def schedule(self, plan: WorkoutPlan, at: datetime) -> None:
        unit = plan.workout
        payload = to_garmin_json(
            unit,
            description=f"{unit.activity.display_name} ({unit.location.display_name})",
        )
        try:
            workout_id = self.client.upload_workout(payload)
        except GarminClientError as exc:
            raise SchedulingError(f"Could not upload {unit.display_name!r}: {exc}") from exc
        try:
            schedule_id = self.client.schedule_workout(workout_id, at.date())
        except GarminClientError as exc:
            self._discard_upload(workout_id)
            raise SchedulingError(f"Could not schedule {unit.display_name!r}: {exc}") from exc

        self._entries.append(
            _CalendarEntry(
                scheduled=ScheduledWorkoutPlan(plan=plan, date=at),
                workout_id=workout_id,
                schedule_id=schedule_id,
            )
        )
        self._entries.sort(key=lambda e: e.scheduled.date)

    def scheduled_workouts(self) -> list[ScheduledWorkoutPlan]:
        return [entry.scheduled for entry in self._entries]

    def remove(self, plan_id: uuid.UUID, at: datetime) -> None:
        """Drop the calendar entry and the uploaded workout."""
        entry = self._entry(plan_id, at)
        try:
            if entry.schedule_id is not None:
                self.client.unschedule_workout(entry.schedule_id)
            self.client.delete_workout(entry.workout_id)
        except GarminClientError as exc:
            raise SchedulingError(f"Could not remove workout {entry.workout_id}: {exc}") from exc
        self._entries.remove(entry)

    def mark_complete(self, plan_id: uuid.UUID, at: datetime) -> None:
        entry = self._entry(plan_id, at)
        entry.scheduled = ScheduledWorkoutPlan(
            plan=entry.scheduled.plan, date=entry.scheduled.date, complete=True,
        )
        logger.debug("Marked workout %d complete", entry.workout_id)

    def _discard_upload(self, workout_id: int) -> None:
        try:
            self.client.delete_workout(workout_id)
        except GarminClientError as exc:
            logger.warning("Could not delete orphaned workout %d: %s", workout_id, exc)

    def _entry(self, plan_id: uuid.UUID, at: datetime) -> _CalendarEntry:
        for entry in self._entries:
            if entry.scheduled.plan.id == plan_id and entry.scheduled.date == at:
                return entry
        raise SchedulingError(f"No plan {plan_id} scheduled at {at.isoformat()}")
