"""Enumerations shared across the workout planner.

Integer-valued enums carry the stable codes written to the store, so
members must never be renumbered.
"""

from enum import Enum, IntEnum


class FitnessMetric(str, Enum):
    """Aspects of fitness a movement develops."""

    STRENGTH = "Strength"
    STABILITY = "Stability"
    SPEED = "Speed"
    ENDURANCE = "Endurance"
    AEROBIC_ENDURANCE = "Aerobic Endurance"
    ANAEROBIC_ENDURANCE = "Anaerobic Endurance"
    MUSCULAR_ENDURANCE = "Muscular Endurance"
    AGILITY = "Agility"
    POWER = "Power"
    MOBILITY = "Mobility"


class Muscle(str, Enum):
    """Muscle groups and body regions a movement targets."""

    # Core
    CORE = "Core"
    OBLIQUES = "Obliques"
    PSOAS = "Psoas"
    ILIACUS = "Iliacus"

    # Upper body
    CHEST = "Chest"
    BACK = "Back"
    LATS = "Lats"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"

    # Lower body
    QUADRICEPS = "Quadriceps"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    ADDUCTORS = "Adductors"
    ABDUCTORS = "Abductors"

    FULL_BODY = "Full Body"


class WorkoutType(str, Enum):
    """Optional category tag on a workout. Persisted by value."""

    WARMUP = "Warmup"
    COOLDOWN = "Cooldown"
    STRENGTH = "Strength Workout"
    ENDURANCE = "Endurance Workout"
    STABILITY = "Stability Workout"
    DYNAMIC_WARMUP = "Dynamic Warmup"
    FUNCTIONAL_WARMUP = "Functional Warmup"
    FUNCTIONAL_STRENGTH = "Functional Strength Workout"
    MUSCULAR_ENDURANCE = "Muscular Endurance Workout"
    AEROBIC_ENDURANCE = "Aerobic Endurance Workout"
    ANAEROBIC_ENDURANCE = "Anaerobic Endurance Workout"
    FUNCTIONAL_STABILITY = "Functional Stability Workout"


class ActivityType(IntEnum):
    """Physical activity classification (HealthKit raw codes)."""

    CYCLING = 13
    ELLIPTICAL = 16
    FUNCTIONAL_STRENGTH_TRAINING = 20
    HIKING = 24
    MIND_AND_BODY = 29
    ROWING = 35
    RUNNING = 37
    SWIMMING = 46
    TRADITIONAL_STRENGTH_TRAINING = 50
    WALKING = 52
    YOGA = 57
    CORE_TRAINING = 59
    FLEXIBILITY = 62
    HIGH_INTENSITY_INTERVAL_TRAINING = 63
    JUMP_ROPE = 64
    PILATES = 66
    MIXED_CARDIO = 73
    COOLDOWN = 80
    OTHER = 3000

    @property
    def display_name(self) -> str:
        return _ACTIVITY_NAMES.get(self, "Workout")


_ACTIVITY_NAMES: dict[ActivityType, str] = {
    ActivityType.RUNNING: "Running",
    ActivityType.CYCLING: "Cycling",
    ActivityType.WALKING: "Walking",
    ActivityType.SWIMMING: "Swimming",
    ActivityType.HIKING: "Hiking",
    ActivityType.YOGA: "Yoga",
    ActivityType.TRADITIONAL_STRENGTH_TRAINING: "Traditional Strength Training",
    ActivityType.FUNCTIONAL_STRENGTH_TRAINING: "Functional Strength Training",
    ActivityType.CORE_TRAINING: "Core Training",
    ActivityType.HIGH_INTENSITY_INTERVAL_TRAINING: "HIIT",
    ActivityType.JUMP_ROPE: "Jump Rope",
    ActivityType.PILATES: "Pilates",
    ActivityType.FLEXIBILITY: "Flexibility",
    ActivityType.MIND_AND_BODY: "Mind and Body",
    ActivityType.MIXED_CARDIO: "Mixed Cardio",
    ActivityType.COOLDOWN: "Cooldown",
    ActivityType.ROWING: "Rowing",
    ActivityType.ELLIPTICAL: "Elliptical",
}

# Sessions made only of these activities are listed as mind & body sessions.
MIND_AND_BODY_ACTIVITIES = frozenset({
    ActivityType.YOGA,
    ActivityType.PILATES,
    ActivityType.FLEXIBILITY,
    ActivityType.MIND_AND_BODY,
})


class SessionLocation(IntEnum):
    """Where an activity group is performed (HealthKit raw codes)."""

    UNKNOWN = 1
    INDOOR = 2
    OUTDOOR = 3

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class LengthUnit(str, Enum):
    """Distance units. The value is the persisted unit symbol."""

    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    YARDS = "yd"

    @property
    def meters(self) -> float:
        """Length of one unit in metres."""
        return _METERS_PER_UNIT[self]


_METERS_PER_UNIT: dict[LengthUnit, float] = {
    LengthUnit.METERS: 1.0,
    LengthUnit.KILOMETERS: 1000.0,
    LengthUnit.MILES: 1609.344,
    LengthUnit.YARDS: 0.9144,
}


class SpeedUnit(str, Enum):
    """Speed units used by speed alerts."""

    METERS_PER_SECOND = "m/s"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mph"

    @property
    def meters_per_second(self) -> float:
        """One unit of this speed expressed in m/s."""
        return _MPS_PER_UNIT[self]


_MPS_PER_UNIT: dict[SpeedUnit, float] = {
    SpeedUnit.METERS_PER_SECOND: 1.0,
    SpeedUnit.KILOMETERS_PER_HOUR: 1000.0 / 3600.0,
    SpeedUnit.MILES_PER_HOUR: 1609.344 / 3600.0,
}


class StepPurpose(IntEnum):
    """Role of a lowered interval step."""

    WORK = 1
    RECOVERY = 2


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_REST_NAME = "Rest"
MIN_ITERATIONS = 1

# Gap between consecutive plans when a session is scheduled
DEFAULT_SCHEDULE_SPACING_MIN = 5
