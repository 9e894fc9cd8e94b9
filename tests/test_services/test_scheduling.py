"""Tests for the scheduling service and the in-memory scheduler."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from workout_planner.exceptions import EmptySessionError, SchedulingError
from workout_planner.models.interval import WorkoutPlan
from workout_planner.models.session import ActivitySession
from workout_planner.lowering.intervals import lower_session
from workout_planner.services.scheduling import (
    InMemoryWorkoutScheduler,
    LoggingNotifier,
    SessionScheduler,
)

START = datetime(2026, 10, 20, 7, 0)


class _FailsOnSecondSchedule(InMemoryWorkoutScheduler):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def schedule(self, plan, at):
        self.calls += 1
        if self.calls == 2:
            raise SchedulingError("calendar full")
        super().schedule(plan, at)


class TestInMemoryWorkoutScheduler:
    def test_schedule_keeps_date_order(self, leg_day):
        backend = InMemoryWorkoutScheduler()
        (unit,) = lower_session(leg_day)
        later, earlier = WorkoutPlan(unit), WorkoutPlan(unit)
        backend.schedule(later, START + timedelta(days=1))
        backend.schedule(earlier, START)
        assert [s.plan for s in backend.scheduled_workouts()] == [earlier, later]

    def test_remove(self, leg_day):
        backend = InMemoryWorkoutScheduler()
        plan = WorkoutPlan(lower_session(leg_day)[0])
        backend.schedule(plan, START)
        backend.remove(plan.id, START)
        assert backend.scheduled_workouts() == []

    def test_mark_complete(self, leg_day):
        backend = InMemoryWorkoutScheduler()
        plan = WorkoutPlan(lower_session(leg_day)[0])
        backend.schedule(plan, START)
        backend.mark_complete(plan.id, START)
        assert backend.scheduled_workouts()[0].complete is True

    def test_unknown_plan_raises(self):
        with pytest.raises(SchedulingError):
            InMemoryWorkoutScheduler().remove(uuid.uuid4(), START)

    def test_same_plan_wrong_date_raises(self, leg_day):
        backend = InMemoryWorkoutScheduler()
        plan = WorkoutPlan(lower_session(leg_day)[0])
        backend.schedule(plan, START)
        with pytest.raises(SchedulingError):
            backend.mark_complete(plan.id, START + timedelta(minutes=1))


class TestSessionScheduler:
    def test_schedules_one_plan_per_group_spaced(self, brick_session):
        backend = InMemoryWorkoutScheduler()
        scheduled = SessionScheduler(backend).schedule_session(brick_session, START)

        assert [s.date for s in scheduled] == [START, START + timedelta(minutes=5)]
        assert [s.plan.workout.display_name for s in scheduled] == ["Brick - Bike", "Brick - Running"]
        assert backend.scheduled_workouts() == scheduled

    def test_custom_spacing(self, brick_session):
        scheduled = SessionScheduler(
            InMemoryWorkoutScheduler(), spacing=timedelta(hours=1),
        ).schedule_session(brick_session, START)
        assert scheduled[1].date - scheduled[0].date == timedelta(hours=1)

    def test_fresh_plan_ids(self, brick_session):
        scheduled = SessionScheduler(InMemoryWorkoutScheduler()).schedule_session(brick_session, START)
        assert scheduled[0].plan.id != scheduled[1].plan.id

    def test_notifies_per_plan(self, brick_session):
        notifier = MagicMock()
        scheduled = SessionScheduler(InMemoryWorkoutScheduler(), notifier).schedule_session(
            brick_session, START,
        )
        assert notifier.notify.call_count == 2
        notifier.notify.assert_any_call(scheduled[0].plan.id, "Brick - Bike")

    def test_empty_session_rejected_before_scheduler_called(self):
        backend = MagicMock()
        with pytest.raises(EmptySessionError):
            SessionScheduler(backend).schedule_session(
                ActivitySession(activity_groups=(), display_name="Empty"), START,
            )
        backend.schedule.assert_not_called()

    def test_scheduler_error_propagates(self, leg_day):
        backend = MagicMock()
        backend.schedule.side_effect = SchedulingError("calendar full")
        with pytest.raises(SchedulingError):
            SessionScheduler(backend).schedule_session(leg_day, START)

    def test_failure_removes_units_already_scheduled(self, brick_session):
        backend = _FailsOnSecondSchedule()
        notifier = MagicMock()
        with pytest.raises(SchedulingError, match="calendar full"):
            SessionScheduler(backend, notifier).schedule_session(brick_session, START)
        assert backend.calls == 2
        assert backend.scheduled_workouts() == []

    def test_failed_unwind_is_logged_and_original_error_raised(self, brick_session, caplog):
        backend = MagicMock()
        backend.schedule.side_effect = [None, SchedulingError("calendar full")]
        backend.remove.side_effect = SchedulingError("gone")
        with caplog.at_level(logging.WARNING):
            with pytest.raises(SchedulingError, match="calendar full"):
                SessionScheduler(backend).schedule_session(brick_session, START)
        backend.remove.assert_called_once()
        assert "Could not unschedule 'Brick - Bike'" in caplog.text


class TestLoggingNotifier:
    def test_logs(self, caplog):
        plan_id = uuid.uuid4()
        with caplog.at_level(logging.INFO, logger="workout_planner.services.scheduling"):
            LoggingNotifier().notify(plan_id, "Leg Day - Cycling")
        assert "Leg Day - Cycling" in caplog.text
        assert str(plan_id) in caplog.text
