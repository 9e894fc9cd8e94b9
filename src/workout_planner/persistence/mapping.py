"""Bidirectional mapping between the runtime tree and the persisted mirror.

``*_to_persisted`` gives each child a fresh id and its positional
``order_index``; assigning the child lists sets the parent references
through the relationships. ``*_to_runtime`` sorts
children by ``order_index`` before converting, so the order returned by
the store never matters.

Malformed persisted values never raise. They fall back to documented
defaults and are logged:

- unknown goal type          → OpenGoal
- unknown time unit          → seconds
- unknown distance unit      → metres
- unknown alert type         → no alert
- unknown movement code      → Movement.PULL_UPS
- unknown activity code      → ActivityType.OTHER
- unknown location code      → SessionLocation.UNKNOWN
- unknown workout type       → None
- missing / < 1 iterations   → 1
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from workout_planner.models.alert import (
    Alert,
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
from workout_planner.models.enums import (
    MIN_ITERATIONS,
    ActivityType,
    LengthUnit,
    SessionLocation,
    SpeedUnit,
    WorkoutType,
)
from workout_planner.models.goal import (
    GOAL_DISTANCE,
    GOAL_OPEN,
    GOAL_TIME,
    DistanceGoal,
    Goal,
    OpenGoal,
    TimeGoal,
)
from workout_planner.models.movement import Movement
from workout_planner.models.session import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    Workout,
)
from workout_planner.persistence.records import (
    PersistedActivityGroup,
    PersistedExercise,
    PersistedRest,
    PersistedSession,
    PersistedWorkout,
    new_record_id,
)

logger = logging.getLogger(__name__)

TIME_UNIT_SYMBOL = "s"

# Time unit symbol → seconds per unit
_TIME_UNIT_SECONDS: dict[str, float] = {
    "s": 1.0,
    "sec": 1.0,
    "seconds": 1.0,
    "min": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
}

FALLBACK_MOVEMENT = Movement.PULL_UPS

GoalFields = tuple[str, float, Optional[str]]
AlertFields = tuple[Optional[float], Optional[float], Optional[str]]


# ---------------------------------------------------------------------------
# Goal
# ---------------------------------------------------------------------------


def flatten_goal(goal: Goal) -> GoalFields:
    """Flatten a Goal to ``(goal_type, goal_value, goal_unit_symbol)``."""
    if goal.kind == GOAL_TIME:
        return GOAL_TIME, float(goal.seconds), TIME_UNIT_SYMBOL
    if goal.kind == GOAL_DISTANCE:
        return GOAL_DISTANCE, float(goal.value), goal.unit.value
    return GOAL_OPEN, 0.0, None


def restore_goal(
    goal_type: Optional[str],
    goal_value: Optional[float],
    goal_unit_symbol: Optional[str],
) -> Goal:
    """Rebuild a Goal from its flattened fields, defaulting to OpenGoal."""
    value = float(goal_value or 0.0)

    if goal_type == GOAL_TIME:
        factor = _TIME_UNIT_SECONDS.get(goal_unit_symbol or TIME_UNIT_SYMBOL)
        if factor is None:
            logger.warning("Unknown time unit %r, reading value as seconds", goal_unit_symbol)
            factor = 1.0
        return TimeGoal(seconds=value * factor)

    if goal_type == GOAL_DISTANCE:
        try:
            unit = LengthUnit(goal_unit_symbol)
        except ValueError:
            logger.warning("Unknown distance unit %r, reading value as metres", goal_unit_symbol)
            unit = LengthUnit.METERS
        return DistanceGoal(value=value, unit=unit)

    if goal_type != GOAL_OPEN:
        logger.warning("Unknown goal type %r, defaulting to open goal", goal_type)
    return OpenGoal()


# ---------------------------------------------------------------------------
# Alert
# ---------------------------------------------------------------------------

_ALERT_FLATTENERS: dict[str, Callable[..., AlertFields]] = {
    HeartRateRangeAlert.kind: lambda a: (a.low, a.high, None),
    HeartRateZoneAlert.kind: lambda a: (a.zone, None, None),
    PowerRangeAlert.kind: lambda a: (a.low, a.high, None),
    PowerThresholdAlert.kind: lambda a: (a.value, None, None),
    PowerZoneAlert.kind: lambda a: (a.zone, None, None),
    CadenceRangeAlert.kind: lambda a: (a.low, a.high, None),
    CadenceThresholdAlert.kind: lambda a: (a.value, None, None),
    SpeedRangeAlert.kind: lambda a: (a.low, a.high, a.unit.value),
    SpeedThresholdAlert.kind: lambda a: (a.value, None, a.unit.value),
}

_ALERT_BUILDERS: dict[str, Callable[[float, Optional[float], Optional[str]], Alert]] = {
    HeartRateRangeAlert.kind: lambda one, two, _: HeartRateRangeAlert(low=one, high=two),
    HeartRateZoneAlert.kind: lambda one, _two, _: HeartRateZoneAlert(zone=int(one)),
    PowerRangeAlert.kind: lambda one, two, _: PowerRangeAlert(low=one, high=two),
    PowerThresholdAlert.kind: lambda one, _two, _: PowerThresholdAlert(value=one),
    PowerZoneAlert.kind: lambda one, _two, _: PowerZoneAlert(zone=int(one)),
    CadenceRangeAlert.kind: lambda one, two, _: CadenceRangeAlert(low=one, high=two),
    CadenceThresholdAlert.kind: lambda one, _two, _: CadenceThresholdAlert(value=one),
    SpeedRangeAlert.kind: lambda one, two, unit: SpeedRangeAlert(
        low=one, high=two, unit=_speed_unit(unit),
    ),
    SpeedThresholdAlert.kind: lambda one, _two, unit: SpeedThresholdAlert(
        value=one, unit=_speed_unit(unit),
    ),
}

# Alert kinds whose second value is required
_RANGE_ALERTS = frozenset({
    HeartRateRangeAlert.kind,
    PowerRangeAlert.kind,
    CadenceRangeAlert.kind,
    SpeedRangeAlert.kind,
})


def _speed_unit(symbol: Optional[str]) -> SpeedUnit:
    try:
        return SpeedUnit(symbol)
    except ValueError:
        logger.warning("Unknown speed unit %r, reading value as km/h", symbol)
        return SpeedUnit.KILOMETERS_PER_HOUR


def flatten_alert(alert: Optional[Alert]) -> tuple[Optional[str], Optional[float], Optional[float], Optional[str]]:
    """Flatten an Alert to ``(alert_type, value_one, value_two, unit_symbol)``."""
    if alert is None:
        return None, None, None, None
    one, two, unit = _ALERT_FLATTENERS[alert.kind](alert)
    return (
        alert.kind,
        float(one),
        float(two) if two is not None else None,
        unit,
    )


def restore_alert(
    alert_type: Optional[str],
    value_one: Optional[float],
    value_two: Optional[float],
    unit_symbol: Optional[str],
) -> Optional[Alert]:
    """Rebuild an Alert from flattened fields; malformed input yields None."""
    if alert_type is None:
        return None

    builder = _ALERT_BUILDERS.get(alert_type)
    if builder is None:
        logger.warning("Unknown alert type %r, dropping alert", alert_type)
        return None

    if value_one is None or (alert_type in _RANGE_ALERTS and value_two is None):
        logger.warning("Alert %r is missing values, dropping alert", alert_type)
        return None

    return builder(value_one, value_two, unit_symbol)


# ---------------------------------------------------------------------------
# Enum codes
# ---------------------------------------------------------------------------


def restore_movement(code: Optional[int]) -> Movement:
    try:
        return Movement(code)
    except ValueError:
        logger.warning("Unknown movement code %r, using %s", code, FALLBACK_MOVEMENT.name)
        return FALLBACK_MOVEMENT


def restore_activity(code: Optional[int]) -> ActivityType:
    try:
        return ActivityType(code)
    except ValueError:
        logger.warning("Unknown activity code %r, using OTHER", code)
        return ActivityType.OTHER


def restore_location(code: Optional[int]) -> SessionLocation:
    try:
        return SessionLocation(code)
    except ValueError:
        logger.warning("Unknown location code %r, using UNKNOWN", code)
        return SessionLocation.UNKNOWN


def restore_workout_type(raw: Optional[str]) -> Optional[WorkoutType]:
    if raw is None:
        return None
    try:
        return WorkoutType(raw)
    except ValueError:
        logger.warning("Unknown workout type %r, dropping tag", raw)
        return None


# ---------------------------------------------------------------------------
# Runtime → persisted
# ---------------------------------------------------------------------------


def exercise_to_persisted(exercise: Exercise, order_index: int = 0) -> PersistedExercise:
    goal_type, goal_value, goal_unit = flatten_goal(exercise.goal)
    alert_type, alert_one, alert_two, alert_unit = flatten_alert(exercise.alert)
    return PersistedExercise(
        id=new_record_id(),
        order_index=order_index,
        movement_code=int(exercise.movement),
        goal_type=goal_type,
        goal_value=goal_value,
        goal_unit_symbol=goal_unit,
        alert_type=alert_type,
        alert_value_one=alert_one,
        alert_value_two=alert_two,
        alert_unit_symbol=alert_unit,
    )


def rest_to_persisted(rest: Rest, order_index: int = 0) -> PersistedRest:
    goal_type, goal_value, goal_unit = flatten_goal(rest.goal)
    return PersistedRest(
        id=new_record_id(),
        order_index=order_index,
        display_name=rest.display_name,
        goal_type=goal_type,
        goal_value=goal_value,
        goal_unit_symbol=goal_unit,
    )


def workout_to_persisted(workout: Workout, order_index: int = 0) -> PersistedWorkout:
    return PersistedWorkout(
        id=new_record_id(),
        order_index=order_index,
        iterations=workout.iterations,
        workout_type=workout.workout_type.value if workout.workout_type is not None else None,
        display_name=workout.display_name,
        exercises=[exercise_to_persisted(e, i) for i, e in enumerate(workout.exercises)],
        rest_periods=[rest_to_persisted(r, i) for i, r in enumerate(workout.rest_periods)],
    )


def group_to_persisted(group: ActivityGroup, order_index: int = 0) -> PersistedActivityGroup:
    return PersistedActivityGroup(
        id=new_record_id(),
        order_index=order_index,
        activity_code=int(group.activity),
        location_code=int(group.location),
        display_name=group.display_name,
        workouts=[workout_to_persisted(w, i) for i, w in enumerate(group.workouts)],
    )


def session_to_persisted(session: ActivitySession) -> PersistedSession:
    """Build the persisted tree for *session*, keeping its id and metadata."""
    return PersistedSession(
        id=str(session.id),
        display_name=session.display_name,
        date_created=session.date_created,
        is_prebuilt=session.is_prebuilt,
        activity_groups=[group_to_persisted(g, i) for i, g in enumerate(session.activity_groups)],
    )


# ---------------------------------------------------------------------------
# Persisted → runtime
# ---------------------------------------------------------------------------


def _by_order(records):
    return sorted(records, key=lambda r: r.order_index)


def exercise_to_runtime(record: PersistedExercise) -> Exercise:
    return Exercise(
        movement=restore_movement(record.movement_code),
        goal=restore_goal(record.goal_type, record.goal_value, record.goal_unit_symbol),
        alert=restore_alert(
            record.alert_type,
            record.alert_value_one,
            record.alert_value_two,
            record.alert_unit_symbol,
        ),
    )


def rest_to_runtime(record: PersistedRest) -> Rest:
    return Rest(
        display_name=record.display_name,
        goal=restore_goal(record.goal_type, record.goal_value, record.goal_unit_symbol),
    )


def workout_to_runtime(record: PersistedWorkout) -> Workout:
    iterations = record.iterations
    if iterations is None or iterations < MIN_ITERATIONS:
        iterations = MIN_ITERATIONS
    return Workout(
        exercises=tuple(exercise_to_runtime(e) for e in _by_order(record.exercises)),
        rest_periods=tuple(rest_to_runtime(r) for r in _by_order(record.rest_periods)),
        iterations=iterations,
        workout_type=restore_workout_type(record.workout_type),
        display_name=record.display_name,
    )


def group_to_runtime(record: PersistedActivityGroup) -> ActivityGroup:
    return ActivityGroup(
        activity=restore_activity(record.activity_code),
        location=restore_location(record.location_code),
        workouts=tuple(workout_to_runtime(w) for w in _by_order(record.workouts)),
        display_name=record.display_name,
    )


def session_to_runtime(record: PersistedSession) -> ActivitySession:
    """Rebuild a runtime session, ordering children by ``order_index``."""
    return ActivitySession(
        activity_groups=tuple(group_to_runtime(g) for g in _by_order(record.activity_groups)),
        display_name=record.display_name,
        id=uuid.UUID(record.id),
        is_prebuilt=record.is_prebuilt,
        date_created=record.date_created,
    )
