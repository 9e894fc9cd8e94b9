"""Data models for workout composition."""

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
    ActivityType,
    FitnessMetric,
    LengthUnit,
    Muscle,
    SessionLocation,
    SpeedUnit,
    StepPurpose,
    WorkoutType,
)
from workout_planner.models.goal import DistanceGoal, Goal, OpenGoal, TimeGoal
from workout_planner.models.interval import (
    CustomWorkoutPlan,
    IntervalBlock,
    IntervalStep,
    ScheduledWorkoutPlan,
    WorkoutPlan,
)
from workout_planner.models.movement import Movement, MovementProfile, lookup
from workout_planner.models.session import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    Workout,
)

__all__ = [
    "ActivityGroup",
    "ActivitySession",
    "ActivityType",
    "Alert",
    "CadenceRangeAlert",
    "CadenceThresholdAlert",
    "CustomWorkoutPlan",
    "DistanceGoal",
    "Exercise",
    "FitnessMetric",
    "Goal",
    "HeartRateRangeAlert",
    "HeartRateZoneAlert",
    "IntervalBlock",
    "IntervalStep",
    "LengthUnit",
    "Movement",
    "MovementProfile",
    "Muscle",
    "OpenGoal",
    "PowerRangeAlert",
    "PowerThresholdAlert",
    "PowerZoneAlert",
    "Rest",
    "ScheduledWorkoutPlan",
    "SessionLocation",
    "SpeedRangeAlert",
    "SpeedThresholdAlert",
    "SpeedUnit",
    "StepPurpose",
    "TimeGoal",
    "Workout",
    "WorkoutPlan",
    "WorkoutType",
    "lookup",
]
