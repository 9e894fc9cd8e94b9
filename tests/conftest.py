"""Shared test fixtures: sample sessions and a throwaway SQLite store."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from workout_planner.models.alert import HeartRateRangeAlert, HeartRateZoneAlert, SpeedThresholdAlert
from workout_planner.models.enums import (
    ActivityType,
    LengthUnit,
    SessionLocation,
    SpeedUnit,
    WorkoutType,
)
from workout_planner.models.goal import DistanceGoal, OpenGoal, TimeGoal
from workout_planner.models.movement import Movement
from workout_planner.models.session import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    Workout,
)
from workout_planner.persistence.store import SessionStore


@pytest.fixture
def leg_day() -> ActivitySession:
    """One cycling group: squat (open) + 30 s rest, three sets."""
    workout = Workout(
        exercises=(Exercise(movement=Movement.BARBELL_BACK_SQUAT, goal=OpenGoal()),),
        rest_periods=(Rest(goal=TimeGoal(30)),),
        iterations=3,
    )
    return ActivitySession(
        activity_groups=(
            ActivityGroup(
                activity=ActivityType.CYCLING,
                location=SessionLocation.INDOOR,
                workouts=(workout,),
            ),
        ),
        display_name="Leg Day",
        date_created=datetime(2026, 10, 1, 7, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def brick_session() -> ActivitySession:
    """Two groups (bike then run) with goals and alerts at every level."""
    bike = ActivityGroup(
        activity=ActivityType.CYCLING,
        location=SessionLocation.OUTDOOR,
        workouts=(
            Workout(
                exercises=(Exercise(Movement.CYCLING, TimeGoal(600), HeartRateZoneAlert(zone=2)),),
                workout_type=WorkoutType.WARMUP,
            ),
            Workout(
                exercises=(
                    Exercise(Movement.CYCLING, DistanceGoal(20, LengthUnit.KILOMETERS),
                             HeartRateRangeAlert(low=140, high=160)),
                    Exercise(Movement.SPRINT, TimeGoal(30)),
                ),
                rest_periods=(Rest(goal=TimeGoal(60)), Rest("Spin easy", TimeGoal(120))),
                iterations=2,
                workout_type=WorkoutType.AEROBIC_ENDURANCE,
            ),
        ),
        display_name="Bike",
    )
    run = ActivityGroup(
        activity=ActivityType.RUNNING,
        location=SessionLocation.OUTDOOR,
        workouts=(
            Workout(
                exercises=(
                    Exercise(Movement.RUN, DistanceGoal(5, LengthUnit.KILOMETERS),
                             SpeedThresholdAlert(value=12, unit=SpeedUnit.KILOMETERS_PER_HOUR)),
                ),
                display_name="Transition run",
            ),
        ),
    )
    return ActivitySession(
        activity_groups=(bike, run),
        display_name="Brick",
        date_created=datetime(2026, 10, 2, 6, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def yoga_session() -> ActivitySession:
    return ActivitySession.single_activity(
        workouts=[
            Workout(
                exercises=(Exercise(Movement.SUN_SALUTATION, TimeGoal(300)),),
                workout_type=WorkoutType.WARMUP,
            ),
        ],
        activity=ActivityType.YOGA,
        location=SessionLocation.INDOOR,
        display_name="Morning Yoga",
    )


@pytest.fixture
def store(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "workouts.db")
