"""Built-in sessions and the one-time seeding of an empty store."""

from __future__ import annotations

import dataclasses
import logging
import threading

from workout_planner.models.alert import HeartRateZoneAlert, SpeedThresholdAlert
from workout_planner.models.enums import (
    ActivityType,
    SessionLocation,
    SpeedUnit,
    WorkoutType,
)
from workout_planner.models.goal import OpenGoal, TimeGoal
from workout_planner.models.movement import Movement
from workout_planner.models.session import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    Workout,
)
from workout_planner.persistence.mapping import session_to_persisted
from workout_planner.persistence.store import SessionStore

logger = logging.getLogger(__name__)

_seed_lock = threading.Lock()


def _strength(movement: Movement) -> Exercise:
    return Exercise(movement=movement, goal=OpenGoal())


def _timed(movement: Movement, seconds: float, alert=None) -> Exercise:
    return Exercise(movement=movement, goal=TimeGoal(seconds), alert=alert)


def upper_body_session() -> ActivitySession:
    short_rest = Rest(goal=TimeGoal(30))
    open_rest = Rest()

    def single(movement: Movement, workout_type: WorkoutType) -> Workout:
        return Workout(
            exercises=(_strength(movement),),
            rest_periods=(open_rest,),
            iterations=3,
            workout_type=workout_type,
        )

    warmup = Workout(
        exercises=(_strength(Movement.PULL_UPS), _strength(Movement.CHEST_DIPS)),
        rest_periods=(short_rest, short_rest),
        iterations=2,
        workout_type=WorkoutType.DYNAMIC_WARMUP,
    )
    return ActivitySession(
        activity_groups=(
            ActivityGroup(
                activity=ActivityType.TRADITIONAL_STRENGTH_TRAINING,
                location=SessionLocation.INDOOR,
                workouts=(
                    warmup,
                    single(Movement.LAT_PULLDOWNS, WorkoutType.FUNCTIONAL_STRENGTH),
                    single(Movement.BENCH_PRESS, WorkoutType.FUNCTIONAL_STRENGTH),
                    single(Movement.CHEST_FLYS, WorkoutType.MUSCULAR_ENDURANCE),
                    single(Movement.CABLE_PULLOVER, WorkoutType.MUSCULAR_ENDURANCE),
                ),
                display_name="Upper Body",
            ),
        ),
        display_name="Upper Body",
    )


def lower_body_session() -> ActivitySession:
    open_rest = Rest()

    def single(movement: Movement, workout_type: WorkoutType) -> Workout:
        return Workout(
            exercises=(_strength(movement),),
            rest_periods=(open_rest,),
            iterations=3,
            workout_type=workout_type,
        )

    cardio_warmup = Workout(
        exercises=(_timed(Movement.CYCLING, 300, HeartRateZoneAlert(zone=2)),),
        workout_type=WorkoutType.WARMUP,
    )
    hip_warmup = Workout(
        exercises=(_strength(Movement.ADDUCTORS), _strength(Movement.ABDUCTORS)),
        rest_periods=(open_rest, open_rest),
        iterations=2,
        workout_type=WorkoutType.FUNCTIONAL_WARMUP,
    )
    return ActivitySession(
        activity_groups=(
            ActivityGroup(
                activity=ActivityType.TRADITIONAL_STRENGTH_TRAINING,
                location=SessionLocation.INDOOR,
                workouts=(
                    cardio_warmup,
                    hip_warmup,
                    single(Movement.BARBELL_BACK_SQUAT, WorkoutType.FUNCTIONAL_STRENGTH),
                    single(Movement.BARBELL_DEADLIFTS, WorkoutType.FUNCTIONAL_STRENGTH),
                    single(Movement.CALF_RAISES, WorkoutType.FUNCTIONAL_STABILITY),
                ),
                display_name="Lower Body",
            ),
        ),
        display_name="Lower Body",
    )


def mixed_cardio_session() -> ActivitySession:
    cycling = ActivityGroup(
        activity=ActivityType.CYCLING,
        location=SessionLocation.INDOOR,
        workouts=(
            Workout(
                exercises=(_timed(Movement.CYCLING, 300, HeartRateZoneAlert(zone=2)),),
                workout_type=WorkoutType.WARMUP,
            ),
            Workout(
                exercises=(_timed(Movement.CYCLING, 900, HeartRateZoneAlert(zone=3)),),
                workout_type=WorkoutType.AEROBIC_ENDURANCE,
            ),
        ),
        display_name="Cycling",
    )
    running = ActivityGroup(
        activity=ActivityType.RUNNING,
        location=SessionLocation.INDOOR,
        workouts=(
            Workout(
                exercises=(
                    _timed(
                        Movement.RUN, 1800,
                        SpeedThresholdAlert(value=10, unit=SpeedUnit.KILOMETERS_PER_HOUR),
                    ),
                ),
                workout_type=WorkoutType.AEROBIC_ENDURANCE,
            ),
        ),
        display_name="Running",
    )
    hiit = ActivityGroup(
        activity=ActivityType.JUMP_ROPE,
        location=SessionLocation.INDOOR,
        workouts=(
            Workout(
                exercises=(_timed(Movement.JUMP_ROPE, 90, HeartRateZoneAlert(zone=4)),),
                rest_periods=(Rest(goal=TimeGoal(30)),),
                iterations=3,
                workout_type=WorkoutType.ANAEROBIC_ENDURANCE,
            ),
        ),
        display_name="HIIT",
    )
    return ActivitySession(activity_groups=(cycling, running, hiit), display_name="Mixed Cardio")


def yoga_flow_session() -> ActivitySession:
    short_rest = Rest(goal=TimeGoal(10))
    transition = Rest(goal=TimeGoal(5))

    warmup = Workout(
        exercises=(
            _timed(Movement.MOUNTAIN_POSE, 30),
            _timed(Movement.CAT_COW_POSE, 60),
            _timed(Movement.CHILDS_POSE, 30),
        ),
        rest_periods=(transition, transition, short_rest),
        workout_type=WorkoutType.WARMUP,
    )
    main_flow = Workout(
        exercises=(
            _timed(Movement.SUN_SALUTATION, 300),
            _timed(Movement.WARRIOR_ONE, 45),
            _timed(Movement.WARRIOR_TWO, 45),
            _timed(Movement.TRIANGLE_POSE, 45),
        ),
        rest_periods=(short_rest, transition, transition, short_rest),
        iterations=2,
    )
    cooldown = Workout(
        exercises=(
            _timed(Movement.DOWNWARD_DOG, 60),
            _timed(Movement.COBRA_POSE, 45),
            _timed(Movement.CHILDS_POSE, 120),
        ),
        rest_periods=(transition, transition, Rest()),
        workout_type=WorkoutType.COOLDOWN,
    )
    return ActivitySession(
        activity_groups=(
            ActivityGroup(
                activity=ActivityType.YOGA,
                location=SessionLocation.INDOOR,
                workouts=(warmup, main_flow, cooldown),
                display_name="Yoga Flow",
            ),
        ),
        display_name="Yoga Flow",
    )


def default_sessions() -> list[ActivitySession]:
    """Return fresh copies of the built-in sessions, marked prebuilt."""
    sessions = [
        upper_body_session(),
        lower_body_session(),
        mixed_cardio_session(),
        yoga_flow_session(),
    ]
    return [dataclasses.replace(s, is_prebuilt=True) for s in sessions]


def seed_default_sessions(store: SessionStore) -> int:
    """Persist the built-in sessions once per store.

    The existence check and the inserts share one immediate transaction,
    so two callers racing on a fresh store still seed exactly once.

    Returns:
        Number of sessions inserted (0 when the store was already seeded).

    Raises:
        StoreError: The store failed; nothing from this call is kept.
    """
    with _seed_lock, store.transaction() as session:
        if store.has_prebuilt(session):
            logger.info("Default sessions already present, skipping seed")
            return 0

        sessions = default_sessions()
        for built_in in sessions:
            store.insert(session, session_to_persisted(built_in))

    logger.info("Seeded %d default sessions", len(sessions))
    return len(sessions)
