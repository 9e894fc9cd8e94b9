"""Garmin Connect JSON serialization for CustomWorkoutPlan objects.

Converts a lowered plan unit → Garmin Connect-compatible JSON that can be
uploaded via the Garmin Connect API and synced to a Garmin watch.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json
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
from workout_planner.models.enums import ActivityType, StepPurpose
from workout_planner.models.goal import GOAL_DISTANCE, GOAL_TIME, Goal
from workout_planner.models.interval import CustomWorkoutPlan, IntervalBlock, IntervalStep

# Garmin enforces limits on certain text fields.
_GARMIN_NAME_MAX = 32
_GARMIN_DESCRIPTION_MAX = 1024
_GARMIN_STEP_NOTES_MAX = 200

_STEP_TYPES = {
    StepPurpose.WORK: {"stepTypeId": 3, "stepTypeKey": "interval"},
    StepPurpose.RECOVERY: {"stepTypeId": 4, "stepTypeKey": "recovery"},
}
_REPEAT_STEP_TYPE = {"stepTypeId": 6, "stepTypeKey": "repeat"}

# Garmin sportTypeId / sportTypeKey pairs.
_RUNNING = (1, "running")
_CYCLING = (2, "cycling")
_OTHER = (3, "other")
_SWIMMING = (4, "swimming")
_STRENGTH = (5, "strength_training")
_CARDIO = (6, "cardio_training")
_YOGA = (7, "yoga")
_PILATES = (8, "pilates")
_HIIT = (9, "hiit")
_MOBILITY = (11, "mobility")

_SPORT_TYPES: dict[ActivityType, tuple[int, str]] = {
    ActivityType.RUNNING: _RUNNING,
    ActivityType.WALKING: _RUNNING,
    ActivityType.HIKING: _RUNNING,
    ActivityType.CYCLING: _CYCLING,
    ActivityType.SWIMMING: _SWIMMING,
    ActivityType.TRADITIONAL_STRENGTH_TRAINING: _STRENGTH,
    ActivityType.FUNCTIONAL_STRENGTH_TRAINING: _STRENGTH,
    ActivityType.CORE_TRAINING: _STRENGTH,
    ActivityType.ROWING: _CARDIO,
    ActivityType.ELLIPTICAL: _CARDIO,
    ActivityType.MIXED_CARDIO: _CARDIO,
    ActivityType.JUMP_ROPE: _CARDIO,
    ActivityType.HIGH_INTENSITY_INTERVAL_TRAINING: _HIIT,
    ActivityType.YOGA: _YOGA,
    ActivityType.PILATES: _PILATES,
    ActivityType.FLEXIBILITY: _MOBILITY,
    ActivityType.MIND_AND_BODY: _MOBILITY,
    ActivityType.COOLDOWN: _MOBILITY,
}


def sport_type_for(activity: ActivityType) -> dict:
    """Garmin sportType dict for an activity; unmapped activities are "other"."""
    type_id, key = _SPORT_TYPES.get(activity, _OTHER)
    return {"sportTypeId": type_id, "sportTypeKey": key}


def to_garmin_json(plan: CustomWorkoutPlan, description: str = "") -> dict:
    """Convert a CustomWorkoutPlan to a Garmin Connect-compatible dict.

    Each block becomes a RepeatGroupDTO, even with one iteration, so the
    block structure survives the round trip to the watch.
    """
    sport_type = sport_type_for(plan.activity)
    steps = [
        _convert_block(block, order)
        for order, block in enumerate(plan.blocks, start=1)
    ]

    return {
        "workoutName": plan.display_name[:_GARMIN_NAME_MAX],
        "description": description[:_GARMIN_DESCRIPTION_MAX],
        "sportType": dict(sport_type),
        "workoutSegments": [
            {
                "segmentOrder": 1,
                "sportType": dict(sport_type),
                "workoutSteps": steps,
            }
        ],
    }


def to_garmin_json_string(plan: CustomWorkoutPlan, description: str = "", indent: int = 2) -> str:
    """Convert a CustomWorkoutPlan to a Garmin-compatible JSON string."""
    return json.dumps(to_garmin_json(plan, description), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_block(block: IntervalBlock, step_order: int) -> dict:
    """Build a RepeatGroupDTO for one interval block."""
    return {
        "type": "RepeatGroupDTO",
        "stepOrder": step_order,
        "stepType": dict(_REPEAT_STEP_TYPE),
        "endCondition": {
            "conditionTypeId": 7,
            "conditionTypeKey": "iterations",
        },
        "endConditionValue": block.iterations,
        "numberOfIterations": block.iterations,
        "workoutSteps": [
            _convert_step(step, order)
            for order, step in enumerate(block.steps, start=1)
        ],
    }


def _convert_step(step: IntervalStep, step_order: int) -> dict:
    """Build an ExecutableStepDTO for a work or recovery step."""
    result = {
        "type": "ExecutableStepDTO",
        "stepOrder": step_order,
        "stepType": dict(_STEP_TYPES[step.purpose]),
    }
    result.update(_end_condition(step.goal))
    result.update(_build_target(step.alert))

    if step.display_name:
        result["stepNotes"] = step.display_name[:_GARMIN_STEP_NOTES_MAX]

    return result


def _end_condition(goal: Goal) -> dict:
    """Time goals end on seconds, distance goals on metres, open on lap press."""
    if goal.kind == GOAL_TIME and goal.seconds > 0:
        return {
            "endCondition": {"conditionTypeId": 2, "conditionTypeKey": "time"},
            "endConditionValue": float(goal.seconds),
        }
    if goal.kind == GOAL_DISTANCE and goal.value > 0:
        return {
            "endCondition": {"conditionTypeId": 3, "conditionTypeKey": "distance"},
            "endConditionValue": goal.meters,
        }
    # Open or zero-length goal → lap button press
    return {
        "endCondition": {"conditionTypeId": 1, "conditionTypeKey": "lap.button"},
        "endConditionValue": None,
    }


def _target(type_id: int, key: str, one=None, two=None, zone: Optional[int] = None) -> dict:
    result = {
        "targetType": {
            "workoutTargetTypeId": type_id,
            "workoutTargetTypeKey": key,
        },
        "targetValueOne": one,
        "targetValueTwo": two,
    }
    if zone is not None:
        result["zoneNumber"] = zone
    return result


def _hr_range(alert: HeartRateRangeAlert) -> dict:
    return _target(4, "heart.rate.zone", alert.low, alert.high)


def _hr_zone(alert: HeartRateZoneAlert) -> dict:
    return _target(4, "heart.rate.zone", zone=alert.zone)


def _power_range(alert: PowerRangeAlert) -> dict:
    return _target(2, "power.zone", alert.low, alert.high)


def _power_threshold(alert: PowerThresholdAlert) -> dict:
    return _target(2, "power.zone", alert.value)


def _power_zone(alert: PowerZoneAlert) -> dict:
    return _target(2, "power.zone", zone=alert.zone)


def _cadence_range(alert: CadenceRangeAlert) -> dict:
    return _target(3, "cadence", alert.low, alert.high)


def _cadence_threshold(alert: CadenceThresholdAlert) -> dict:
    return _target(3, "cadence", alert.value)


def _speed_range(alert: SpeedRangeAlert) -> dict:
    factor = alert.unit.meters_per_second
    return _target(5, "speed.zone", alert.low * factor, alert.high * factor)


def _speed_threshold(alert: SpeedThresholdAlert) -> dict:
    return _target(5, "speed.zone", alert.value * alert.unit.meters_per_second)


_TARGET_BUILDERS: dict[str, Callable[..., dict]] = {
    HeartRateRangeAlert.kind: _hr_range,
    HeartRateZoneAlert.kind: _hr_zone,
    PowerRangeAlert.kind: _power_range,
    PowerThresholdAlert.kind: _power_threshold,
    PowerZoneAlert.kind: _power_zone,
    CadenceRangeAlert.kind: _cadence_range,
    CadenceThresholdAlert.kind: _cadence_threshold,
    SpeedRangeAlert.kind: _speed_range,
    SpeedThresholdAlert.kind: _speed_threshold,
}


def _build_target(alert: Optional[Alert]) -> dict:
    """Build the target fields for a step from its alert.

    Speeds are converted to m/s. Thresholds fill only targetValueOne.
    """
    if alert is None:
        return _target(1, "no.target")
    return _TARGET_BUILDERS[alert.kind](alert)
