"""Movement catalogue — fixed table of exercise movements and their targets.

Each movement maps to a static profile of target muscles and target
fitness metrics. Adding a movement means adding an enum member with a new
code and a row in both tables below; the import-time check at the bottom
keeps ``lookup()`` total.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from workout_planner.models.enums import FitnessMetric, Muscle

class Movement(IntEnum):
    """Exercise movements. Values are the persisted codes."""

    # Upper body
    PULL_UPS = 1
    CHIN_UPS = 2
    CHEST_DIPS = 3
    TRICEP_DIPS = 4
    BENCH_PRESS = 5
    LAT_PULLDOWNS = 6
    CABLE_PULLOVER = 7
    CHEST_FLYS = 8
    BICEP_CURLS = 9
    HAMMER_CURLS = 10
    PREACHER_CURLS = 11
    LATERAL_RAISES = 12
    OVERHEAD_PRESS = 13
    FACE_PULLS = 14
    TRICEP_PULLDOWN = 15
    OVERHEAD_PULL = 16

    # Lower body
    BARBELL_BACK_SQUAT = 17
    BARBELL_DEADLIFTS = 18
    CALF_RAISES = 19
    ADDUCTORS = 20
    ABDUCTORS = 21

    # Core
    L_SIT = 22
    LEG_RAISE = 23

    # Cardio
    CYCLING = 24
    RUN = 25
    SPRINT = 26
    JUMP_ROPE = 27

    # Stretching
    BENCH_HIP_FLEXOR_STRETCH = 28
    HAMSTRING_STRETCH = 29
    QUADRICEPS_STRETCH = 30
    CALF_STRETCH = 31
    SHOULDER_STRETCH = 32
    NECK_STRETCH = 33
    SPINAL_TWIST = 34
    CHILDS_POSE = 35

    # Yoga
    DOWNWARD_DOG = 36
    WARRIOR_ONE = 37
    WARRIOR_TWO = 38
    TRIANGLE_POSE = 39
    TREE_POSE = 40
    CAT_COW_POSE = 41
    COBRA_POSE = 42
    PLANK_POSE = 43
    MOUNTAIN_POSE = 44
    SUN_SALUTATION = 45

    # Pilates
    PILATES_HUNDRED = 46
    PILATES_ROLL_UP = 47
    PILATES_SINGLE_LEG_CIRCLE = 48
    PILATES_TEASER = 49
    PILATES_PLANK = 50
    PILATES_BRIDGE = 51

    # Mindfulness
    MEDITATION = 52
    BREATHING_EXERCISE = 53
    BODY_SCANNING = 54
    PROGRESSIVE_MUSCLE_RELAXATION = 55

    # Complex
    BEAR_CRAWLS = 56
    HINGE_TO_SQUAT = 57
    PIKE_PULSE = 58
    PRECISION_BROAD_JUMP = 59
    ROPE_CLIMBING = 60

    @property
    def display_name(self) -> str:
        return lookup(self).display_name

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return lookup(self).target_muscles

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return lookup(self).target_metrics


@dataclass(frozen=True)
class MovementProfile:
    """Static reference data for one movement."""

    display_name: str
    target_muscles: frozenset[Muscle]
    target_metrics: frozenset[FitnessMetric]


_M = Movement
_MU = Muscle
_FM = FitnessMetric

_DISPLAY_NAMES: dict[Movement, str] = {
    _M.PULL_UPS: "Pull Ups",
    _M.CHIN_UPS: "Chin Ups",
    _M.CHEST_DIPS: "Chest Dips",
    _M.TRICEP_DIPS: "Tricep Dips",
    _M.BENCH_PRESS: "Bench Press",
    _M.LAT_PULLDOWNS: "Lat Pulldowns",
    _M.CABLE_PULLOVER: "Cable Pullover",
    _M.CHEST_FLYS: "Chest Flys",
    _M.BICEP_CURLS: "Bicep Curls",
    _M.HAMMER_CURLS: "Hammer Curls",
    _M.PREACHER_CURLS: "Preacher Curls",
    _M.LATERAL_RAISES: "Lateral Raises",
    _M.OVERHEAD_PRESS: "Overhead Press",
    _M.FACE_PULLS: "Face Pulls",
    _M.TRICEP_PULLDOWN: "Tricep Pulldown",
    _M.OVERHEAD_PULL: "Overhead Pull",
    _M.BARBELL_BACK_SQUAT: "Barbell Back Squat",
    _M.BARBELL_DEADLIFTS: "Barbell Deadlifts",
    _M.CALF_RAISES: "Calf Raises",
    _M.ADDUCTORS: "Adductors",
    _M.ABDUCTORS: "Abductors",
    _M.L_SIT: "L-Sit",
    _M.LEG_RAISE: "Leg Raise",
    _M.CYCLING: "Cycling",
    _M.RUN: "Run",
    _M.SPRINT: "Sprint",
    _M.JUMP_ROPE: "Jump Rope",
    _M.BENCH_HIP_FLEXOR_STRETCH: "Bench Hip Flexor Stretch",
    _M.HAMSTRING_STRETCH: "Hamstring Stretch",
    _M.QUADRICEPS_STRETCH: "Quadriceps Stretch",
    _M.CALF_STRETCH: "Calf Stretch",
    _M.SHOULDER_STRETCH: "Shoulder Stretch",
    _M.NECK_STRETCH: "Neck Stretch",
    _M.SPINAL_TWIST: "Spinal Twist",
    _M.CHILDS_POSE: "Child's Pose",
    _M.DOWNWARD_DOG: "Downward Dog",
    _M.WARRIOR_ONE: "Warrior I",
    _M.WARRIOR_TWO: "Warrior II",
    _M.TRIANGLE_POSE: "Triangle Pose",
    _M.TREE_POSE: "Tree Pose",
    _M.CAT_COW_POSE: "Cat Cow Pose",
    _M.COBRA_POSE: "Cobra Pose",
    _M.PLANK_POSE: "Plank Pose",
    _M.MOUNTAIN_POSE: "Mountain Pose",
    _M.SUN_SALUTATION: "Sun Salutation",
    _M.PILATES_HUNDRED: "Pilates Hundred",
    _M.PILATES_ROLL_UP: "Pilates Roll Up",
    _M.PILATES_SINGLE_LEG_CIRCLE: "Pilates Single Leg Circle",
    _M.PILATES_TEASER: "Pilates Teaser",
    _M.PILATES_PLANK: "Pilates Plank",
    _M.PILATES_BRIDGE: "Pilates Bridge",
    _M.MEDITATION: "Meditation",
    _M.BREATHING_EXERCISE: "Breathing Exercise",
    _M.BODY_SCANNING: "Body Scanning",
    _M.PROGRESSIVE_MUSCLE_RELAXATION: "Progressive Muscle Relaxation",
    _M.BEAR_CRAWLS: "Bear Crawls",
    _M.HINGE_TO_SQUAT: "Hinge to Squat",
    _M.PIKE_PULSE: "Pike Pulse",
    _M.PRECISION_BROAD_JUMP: "Precision Broad Jump",
    _M.ROPE_CLIMBING: "Rope Climbing",
}

# (movements, muscles) rows; a movement appears in exactly one row.
_MUSCLE_ROWS: tuple[tuple[tuple[Movement, ...], tuple[Muscle, ...]], ...] = (
    ((_M.PULL_UPS, _M.CHIN_UPS, _M.LAT_PULLDOWNS, _M.CABLE_PULLOVER), (_MU.BACK, _MU.LATS, _MU.BICEPS)),
    ((_M.CHEST_DIPS, _M.BENCH_PRESS, _M.CHEST_FLYS), (_MU.CHEST, _MU.TRICEPS)),
    ((_M.TRICEP_DIPS, _M.TRICEP_PULLDOWN, _M.OVERHEAD_PULL), (_MU.TRICEPS,)),
    ((_M.BICEP_CURLS, _M.HAMMER_CURLS, _M.PREACHER_CURLS), (_MU.BICEPS,)),
    ((_M.LATERAL_RAISES, _M.OVERHEAD_PRESS, _M.FACE_PULLS), (_MU.SHOULDERS,)),
    ((_M.BARBELL_BACK_SQUAT,), (_MU.QUADRICEPS, _MU.GLUTES)),
    ((_M.BARBELL_DEADLIFTS,), (_MU.HAMSTRINGS, _MU.GLUTES, _MU.BACK)),
    ((_M.CALF_RAISES,), (_MU.CALVES,)),
    ((_M.ADDUCTORS,), (_MU.ADDUCTORS,)),
    ((_M.ABDUCTORS,), (_MU.ABDUCTORS,)),
    ((_M.L_SIT, _M.LEG_RAISE), (_MU.CORE, _MU.PSOAS)),
    ((_M.CYCLING, _M.RUN, _M.SPRINT, _M.JUMP_ROPE), (_MU.FULL_BODY,)),
    ((_M.BENCH_HIP_FLEXOR_STRETCH,), (_MU.PSOAS, _MU.ILIACUS)),
    ((_M.HAMSTRING_STRETCH,), (_MU.HAMSTRINGS,)),
    ((_M.QUADRICEPS_STRETCH,), (_MU.QUADRICEPS,)),
    ((_M.CALF_STRETCH,), (_MU.CALVES,)),
    ((_M.SHOULDER_STRETCH,), (_MU.SHOULDERS,)),
    ((_M.NECK_STRETCH,), (_MU.FULL_BODY,)),
    ((_M.SPINAL_TWIST, _M.CHILDS_POSE), (_MU.BACK, _MU.CORE)),
    ((_M.DOWNWARD_DOG,), (_MU.SHOULDERS, _MU.HAMSTRINGS, _MU.CALVES)),
    ((_M.WARRIOR_ONE, _M.WARRIOR_TWO), (_MU.QUADRICEPS, _MU.GLUTES, _MU.CORE)),
    ((_M.TRIANGLE_POSE,), (_MU.HAMSTRINGS, _MU.CORE, _MU.SHOULDERS)),
    ((_M.TREE_POSE, _M.MOUNTAIN_POSE), (_MU.CORE, _MU.GLUTES)),
    ((_M.CAT_COW_POSE,), (_MU.BACK, _MU.CORE)),
    ((_M.COBRA_POSE,), (_MU.BACK, _MU.CHEST)),
    ((_M.PLANK_POSE,), (_MU.CORE, _MU.SHOULDERS, _MU.CHEST)),
    ((_M.SUN_SALUTATION,), (_MU.FULL_BODY,)),
    ((_M.PILATES_HUNDRED,), (_MU.CORE, _MU.OBLIQUES)),
    ((_M.PILATES_ROLL_UP, _M.PILATES_SINGLE_LEG_CIRCLE, _M.PILATES_TEASER), (_MU.CORE, _MU.PSOAS)),
    ((_M.PILATES_PLANK,), (_MU.CORE, _MU.SHOULDERS)),
    ((_M.PILATES_BRIDGE,), (_MU.GLUTES, _MU.HAMSTRINGS, _MU.CORE)),
    (
        (_M.MEDITATION, _M.BREATHING_EXERCISE, _M.BODY_SCANNING, _M.PROGRESSIVE_MUSCLE_RELAXATION),
        (_MU.FULL_BODY,),
    ),
    ((_M.BEAR_CRAWLS, _M.PIKE_PULSE), (_MU.CORE, _MU.PSOAS)),
    ((_M.HINGE_TO_SQUAT, _M.PRECISION_BROAD_JUMP, _M.ROPE_CLIMBING), (_MU.FULL_BODY,)),
)

_METRIC_ROWS: tuple[tuple[tuple[Movement, ...], tuple[FitnessMetric, ...]], ...] = (
    ((_M.PULL_UPS, _M.CHIN_UPS, _M.CHEST_DIPS, _M.BENCH_PRESS), (_FM.STRENGTH, _FM.POWER)),
    (
        (
            _M.LAT_PULLDOWNS, _M.CABLE_PULLOVER, _M.CHEST_FLYS,
            _M.TRICEP_DIPS, _M.TRICEP_PULLDOWN, _M.OVERHEAD_PULL,
            _M.BICEP_CURLS, _M.HAMMER_CURLS, _M.PREACHER_CURLS,
        ),
        (_FM.STRENGTH, _FM.MUSCULAR_ENDURANCE),
    ),
    ((_M.LATERAL_RAISES, _M.OVERHEAD_PRESS, _M.FACE_PULLS), (_FM.STRENGTH, _FM.STABILITY)),
    ((_M.BARBELL_BACK_SQUAT, _M.BARBELL_DEADLIFTS), (_FM.STRENGTH, _FM.POWER, _FM.STABILITY)),
    ((_M.CALF_RAISES,), (_FM.STRENGTH, _FM.STABILITY)),
    ((_M.ADDUCTORS, _M.ABDUCTORS), (_FM.STABILITY, _FM.MOBILITY)),
    ((_M.L_SIT, _M.LEG_RAISE), (_FM.STRENGTH, _FM.STABILITY, _FM.MUSCULAR_ENDURANCE)),
    ((_M.CYCLING,), (_FM.AEROBIC_ENDURANCE, _FM.MUSCULAR_ENDURANCE)),
    ((_M.RUN,), (_FM.AEROBIC_ENDURANCE, _FM.SPEED)),
    ((_M.SPRINT,), (_FM.ANAEROBIC_ENDURANCE, _FM.SPEED, _FM.POWER)),
    ((_M.JUMP_ROPE,), (_FM.ANAEROBIC_ENDURANCE, _FM.AGILITY, _FM.SPEED)),
    (
        (
            _M.BENCH_HIP_FLEXOR_STRETCH, _M.HAMSTRING_STRETCH, _M.QUADRICEPS_STRETCH,
            _M.CALF_STRETCH, _M.SHOULDER_STRETCH, _M.NECK_STRETCH,
        ),
        (_FM.MOBILITY,),
    ),
    ((_M.SPINAL_TWIST, _M.CHILDS_POSE), (_FM.MOBILITY, _FM.STABILITY)),
    ((_M.DOWNWARD_DOG,), (_FM.MOBILITY, _FM.STABILITY, _FM.STRENGTH)),
    ((_M.WARRIOR_ONE, _M.WARRIOR_TWO), (_FM.STABILITY, _FM.STRENGTH, _FM.MOBILITY)),
    ((_M.TRIANGLE_POSE, _M.CAT_COW_POSE), (_FM.MOBILITY, _FM.STABILITY)),
    ((_M.TREE_POSE, _M.MOUNTAIN_POSE), (_FM.STABILITY,)),
    ((_M.COBRA_POSE,), (_FM.MOBILITY, _FM.STRENGTH)),
    ((_M.PLANK_POSE, _M.PILATES_PLANK), (_FM.STRENGTH, _FM.STABILITY, _FM.MUSCULAR_ENDURANCE)),
    ((_M.SUN_SALUTATION,), (_FM.MOBILITY, _FM.STABILITY, _FM.STRENGTH, _FM.ENDURANCE)),
    ((_M.PILATES_HUNDRED,), (_FM.MUSCULAR_ENDURANCE, _FM.STABILITY)),
    ((_M.PILATES_ROLL_UP,), (_FM.STRENGTH, _FM.STABILITY, _FM.MOBILITY)),
    ((_M.PILATES_SINGLE_LEG_CIRCLE,), (_FM.STABILITY, _FM.MOBILITY)),
    ((_M.PILATES_TEASER, _M.PILATES_BRIDGE), (_FM.STRENGTH, _FM.STABILITY)),
    (
        (_M.MEDITATION, _M.BREATHING_EXERCISE, _M.BODY_SCANNING, _M.PROGRESSIVE_MUSCLE_RELAXATION),
        (_FM.STABILITY,),
    ),
    ((_M.BEAR_CRAWLS,), (_FM.STRENGTH, _FM.STABILITY, _FM.MUSCULAR_ENDURANCE)),
    ((_M.PIKE_PULSE, _M.HINGE_TO_SQUAT), (_FM.STRENGTH, _FM.STABILITY, _FM.MOBILITY)),
    ((_M.PRECISION_BROAD_JUMP,), (_FM.POWER, _FM.AGILITY, _FM.SPEED)),
    ((_M.ROPE_CLIMBING,), (_FM.STRENGTH, _FM.POWER, _FM.MUSCULAR_ENDURANCE)),
)


def _build_catalogue() -> dict[Movement, MovementProfile]:
    muscles = {m: frozenset(tags) for movements, tags in _MUSCLE_ROWS for m in movements}
    metrics = {m: frozenset(tags) for movements, tags in _METRIC_ROWS for m in movements}

    missing = [
        m.name for m in Movement
        if m not in _DISPLAY_NAMES or m not in muscles or m not in metrics
    ]
    if missing:
        raise RuntimeError(f"Movement catalogue incomplete for: {', '.join(missing)}")

    return {
        m: MovementProfile(
            display_name=_DISPLAY_NAMES[m],
            target_muscles=muscles[m],
            target_metrics=metrics[m],
        )
        for m in Movement
    }


_CATALOGUE: dict[Movement, MovementProfile] = _build_catalogue()


def lookup(movement: Movement) -> MovementProfile:
    """Return the static profile for *movement*."""
    return _CATALOGUE[movement]
