"""Tests for the SQLAlchemy session store (real SQLite database under tmp_path)."""

from __future__ import annotations

import dataclasses
import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from workout_planner.exceptions import StoreError
from workout_planner.persistence.mapping import session_to_persisted, session_to_runtime
from workout_planner.persistence.store import SessionStore
from workout_planner.lowering.intervals import lower_session
from workout_planner.models.alert import (
    CadenceRangeAlert,
    CadenceThresholdAlert,
    HeartRateRangeAlert,
    HeartRateZoneAlert,
    PowerRangeAlert,
    PowerThresholdAlert,
    PowerZoneAlert,
    SpeedRangeAlert,
    SpeedThresholdAlert,
)
from workout_planner.models.enums import SpeedUnit, StepPurpose
from workout_planner.models.goal import OpenGoal, TimeGoal
from workout_planner.models.movement import Movement
from workout_planner.models.session import Exercise, Rest, Workout


def _row_counts(store: SessionStore) -> dict[str, int]:
    conn = sqlite3.connect(store.db_path)
    try:
        return {
            table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
            for table in ("sessions", "activity_groups", "workouts", "exercises", "rest_periods")
        }
    finally:
        conn.close()


class TestSaveAndFetch:
    def test_round_trip(self, store, brick_session):
        store.save(session_to_persisted(brick_session))
        record = store.fetch(str(brick_session.id))
        assert record is not None
        assert session_to_runtime(record) == brick_session

    def test_fetch_missing(self, store):
        assert store.fetch("no-such-id") is None

    def test_fetch_all_newest_first(self, store, leg_day, brick_session):
        older = dataclasses.replace(leg_day, date_created=datetime(2026, 1, 1, tzinfo=timezone.utc))
        newer = dataclasses.replace(
            brick_session, date_created=older.date_created + timedelta(days=3),
        )
        store.save(session_to_persisted(older))
        store.save(session_to_persisted(newer))
        assert [r.display_name for r in store.fetch_all()] == ["Brick", "Leg Day"]

    def test_fetch_all_orders_by_instant_across_offsets(self, store, leg_day, brick_session):
        # 10:00+05:00 is 05:00 UTC, an hour before the brick session
        earlier = dataclasses.replace(
            leg_day, date_created=datetime(2026, 10, 1, 10, 0, tzinfo=timezone(timedelta(hours=5))),
        )
        later = dataclasses.replace(
            brick_session, date_created=datetime(2026, 10, 1, 6, 0, tzinfo=timezone.utc),
        )
        store.save(session_to_persisted(later))
        store.save(session_to_persisted(earlier))
        assert [r.display_name for r in store.fetch_all()] == ["Brick", "Leg Day"]

    def test_date_created_reloads_as_utc(self, store, leg_day):
        offset = dataclasses.replace(
            leg_day, date_created=datetime(2026, 10, 1, 10, 0, tzinfo=timezone(timedelta(hours=5))),
        )
        store.save(session_to_persisted(offset))
        reloaded = store.fetch(str(leg_day.id)).date_created
        assert reloaded == datetime(2026, 10, 1, 5, 0, tzinfo=timezone.utc)
        assert reloaded.utcoffset() == timedelta(0)

    def test_every_alert_kind_round_trips(self, store, leg_day):
        alerts = [
            HeartRateRangeAlert(low=120, high=150),
            HeartRateZoneAlert(zone=2),
            PowerRangeAlert(low=200, high=250),
            PowerThresholdAlert(value=250),
            PowerZoneAlert(zone=3),
            CadenceRangeAlert(low=80, high=90),
            CadenceThresholdAlert(value=85),
            SpeedRangeAlert(low=9, high=11, unit=SpeedUnit.MILES_PER_HOUR),
            SpeedThresholdAlert(value=4, unit=SpeedUnit.METERS_PER_SECOND),
        ]
        workout = Workout(
            exercises=tuple(Exercise(Movement.RUN, TimeGoal(60), alert) for alert in alerts),
            rest_periods=tuple(Rest() for _ in alerts[:-1]),
        )
        group = dataclasses.replace(leg_day.activity_groups[0], workouts=(workout,))
        session = dataclasses.replace(leg_day, activity_groups=(group,))

        store.save(session_to_persisted(session))
        reloaded = session_to_runtime(store.fetch(str(session.id)))
        assert [e.alert for e in reloaded.workouts[0].exercises] == alerts

    def test_fetch_all_filters_prebuilt(self, store, leg_day, brick_session):
        store.save(session_to_persisted(dataclasses.replace(leg_day, is_prebuilt=True)))
        store.save(session_to_persisted(brick_session))
        assert [r.display_name for r in store.fetch_all(prebuilt=True)] == ["Leg Day"]
        assert store.count() == 2
        assert store.count(prebuilt=False) == 1

    def test_back_references_set_on_load(self, store, brick_session):
        store.save(session_to_persisted(brick_session))
        record = store.fetch(str(brick_session.id))
        group = record.activity_groups[0]
        assert group.session is record
        assert group.workouts[0].activity_group is group

    def test_leg_day_persist_reload_lower(self, store, leg_day):
        store.save(session_to_persisted(leg_day))
        reloaded = session_to_runtime(store.fetch(str(leg_day.id)))
        (plan,) = lower_session(reloaded)
        (block,) = plan.blocks
        assert block.iterations == 3
        assert [(s.purpose, s.goal) for s in block.steps] == [
            (StepPurpose.WORK, OpenGoal()),
            (StepPurpose.RECOVERY, TimeGoal(30)),
        ]
        assert block.steps[0].display_name == Movement.BARBELL_BACK_SQUAT.display_name

    def test_order_survives_physical_row_order(self, store, brick_session):
        record = session_to_persisted(brick_session)
        workout = record.activity_groups[0].workouts[1]
        workout.exercises.reverse()
        workout.rest_periods.reverse()
        record.activity_groups.reverse()
        store.save(record)
        assert session_to_runtime(store.fetch(record.id)) == brick_session


class TestDelete:
    def test_cascades_to_every_table(self, store, brick_session, leg_day):
        store.save(session_to_persisted(brick_session))
        store.save(session_to_persisted(leg_day))

        assert store.delete(str(brick_session.id)) is True

        counts = _row_counts(store)
        assert counts == {
            "sessions": 1,
            "activity_groups": 1,
            "workouts": 1,
            "exercises": 1,
            "rest_periods": 1,
        }

    def test_missing_returns_false(self, store):
        assert store.delete("no-such-id") is False


class TestReplace:
    def test_replaces_whole_tree(self, store, brick_session):
        store.save(session_to_persisted(brick_session))
        trimmed = dataclasses.replace(
            brick_session,
            display_name="Brick (short)",
            activity_groups=brick_session.activity_groups[:1],
        )
        assert store.replace(session_to_persisted(trimmed)) is True
        assert store.count() == 1
        assert session_to_runtime(store.fetch(str(brick_session.id))) == trimmed
        assert _row_counts(store)["activity_groups"] == 1


class TestAtomicity:
    def test_failed_save_leaves_nothing(self, store, brick_session):
        record = session_to_persisted(brick_session)
        exercises = record.activity_groups[0].workouts[1].exercises
        exercises[1].id = exercises[0].id  # primary key clash on the second insert

        with pytest.raises(StoreError):
            store.save(record)

        assert _row_counts(store) == dict.fromkeys(
            ("sessions", "activity_groups", "workouts", "exercises", "rest_periods"), 0,
        )

    def test_exception_in_transaction_rolls_back(self, store, leg_day):
        with pytest.raises(RuntimeError):
            with store.transaction() as session:
                store.insert(session, session_to_persisted(leg_day))
                raise RuntimeError("boom")
        assert store.count() == 0

    def test_duplicate_session_id_rejected(self, store, leg_day):
        store.save(session_to_persisted(leg_day))
        with pytest.raises(StoreError):
            store.save(session_to_persisted(leg_day))
        assert store.count() == 1


class TestUnavailableStore:
    def test_unopenable_path_raises_store_error(self, tmp_path):
        with pytest.raises(StoreError):
            SessionStore(tmp_path / "missing" / "dir" / "workouts.db")

    def test_store_error_is_planner_error(self):
        from workout_planner.exceptions import WorkoutPlannerError

        assert issubclass(StoreError, WorkoutPlannerError)


class TestInMemoryStore:
    def test_schema_and_rows_survive_between_calls(self, leg_day):
        store = SessionStore(":memory:")
        assert store.count() == 0
        store.save(session_to_persisted(leg_day))
        assert store.count() == 1
        assert session_to_runtime(store.fetch(str(leg_day.id))) == leg_day
