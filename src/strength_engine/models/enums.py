"""Enumerations and prescription constants for the strength engine.

Every axis the planner matches on (pattern, modality, equipment,
contraindication, flags) is a closed enum so that rule tables can be
checked for exhaustiveness instead of comparing free-form strings.
"""

from enum import Enum, IntEnum, auto


class MovementPattern(str, Enum):
    """Movement categories used to group interchangeable exercises."""

    SQUAT = "squat"
    HINGE = "hinge"
    LUNGE = "lunge"
    HORIZONTAL_PRESS = "horizontal_press"
    VERTICAL_PRESS = "vertical_press"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PULL = "vertical_pull"
    CORE = "core"
    CARRY = "carry"
    ELBOW_FLEXION = "elbow_flexion"
    ELBOW_EXTENSION = "elbow_extension"
    SHOULDER_ISOLATION = "shoulder_isolation"
    REAR_DELT = "rear_delt"
    KNEE_FLEXION = "knee_flexion"
    CALF = "calf"


class Modality(str, Enum):
    """The loading implement an exercise is performed with."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    BANDS = "bands"


class Equipment(str, Enum):
    """Items a user can have available: one per modality plus support gear."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    BANDS = "bands"
    RACK = "rack"
    BENCH = "bench"
    PULLUP_BAR = "pullup_bar"


class ContraindicationTag(str, Enum):
    """Movement risks that a user limitation can rule out."""

    OVERHEAD = "overhead"
    SPINAL_LOAD = "spinal_load"
    HIGH_IMPACT = "high_impact"
    DEEP_KNEE_FLEXION = "deep_knee_flexion"
    WRIST_LOAD = "wrist_load"


class LiftClass(str, Enum):
    """Relative priority class of an exercise."""

    MAIN = "main"
    ACCESSORY = "accessory"


class Experience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Goal(str, Enum):
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general_fitness"


class BiomarkerFlag(str, Enum):
    """Safety-relevant flags derived from health data."""

    ELEVATED_BP = "elevated_bp"
    HYPERTENSION_STAGE2 = "hypertension_stage2"


class RecoveryFlag(str, Enum):
    """Readiness-relevant flags that reduce prescribed volume."""

    HRV_DOWN_3D = "hrv_down_3d"
    SLEEP_POOR = "sleep_poor"
    HIGH_SORENESS = "high_soreness"
    RESTING_HR_UP = "resting_hr_up"
    LOW_ENERGY = "low_energy"


class LoadDecision(str, Enum):
    """Next-session load progression outcome."""

    DELOAD = "deload"
    MAINTAIN = "maintain"
    INCREASE_SMALL = "increase_small"


class SlotPriority(IntEnum):
    """Slot priority rank: lower value = processed and protected first.

    MAIN slots are never removed by the time-budget trimmer.
    """

    MAIN = 1
    SECONDARY = 2
    ACCESSORY = 3


class ExclusionReason(IntEnum):
    """Why a candidate was hard-excluded before ranking."""

    EQUIPMENT_UNAVAILABLE = auto()
    LIMITATION_CONFLICT = auto()


# Modality → the Equipment member that must be available to use it.
MODALITY_EQUIPMENT: dict[Modality, Equipment] = {
    Modality.BARBELL: Equipment.BARBELL,
    Modality.DUMBBELL: Equipment.DUMBBELL,
    Modality.KETTLEBELL: Equipment.KETTLEBELL,
    Modality.CABLE: Equipment.CABLE,
    Modality.MACHINE: Equipment.MACHINE,
    Modality.BODYWEIGHT: Equipment.BODYWEIGHT,
    Modality.BANDS: Equipment.BANDS,
}

# Shorthand names accepted from callers, e.g. the legacy "db".
EQUIPMENT_ALIASES: dict[str, Equipment] = {
    "db": Equipment.DUMBBELL,
    "dumbbells": Equipment.DUMBBELL,
    "kb": Equipment.KETTLEBELL,
    "bw": Equipment.BODYWEIGHT,
    "band": Equipment.BANDS,
    "pullup": Equipment.PULLUP_BAR,
}

# Limitation values in the "no_<movement>" form map onto a tag.
LIMITATION_ALIASES: dict[str, ContraindicationTag] = {
    "no_overhead_press": ContraindicationTag.OVERHEAD,
    "no_overhead": ContraindicationTag.OVERHEAD,
    "no_spinal_loading": ContraindicationTag.SPINAL_LOAD,
    "no_axial_load": ContraindicationTag.SPINAL_LOAD,
    "no_jumping": ContraindicationTag.HIGH_IMPACT,
    "no_high_impact": ContraindicationTag.HIGH_IMPACT,
    "no_deep_squat": ContraindicationTag.DEEP_KNEE_FLEXION,
    "no_wrist_load": ContraindicationTag.WRIST_LOAD,
}


# ---------------------------------------------------------------------------
# Scoring weights
# ---------------------------------------------------------------------------

W_EQUIP = 20.0
W_GOAL = 10.0
W_PREF = 15.0
W_EXPERIENCE = 8.0
W_READINESS = 5.0  # machines favoured while elevated_bp is active

# Hypertrophy favours exercises whose base sets x top reps reach this.
HYPERTROPHY_VOLUME_CAPACITY = 30


# ---------------------------------------------------------------------------
# Prescription constants
# ---------------------------------------------------------------------------

# Strength goal on main slots
STRENGTH_REPS_LOW = 5
STRENGTH_REPS_HIGH = 8
STRENGTH_REST_S = 180

# Endurance goal
ENDURANCE_REPS_LOW = 12
ENDURANCE_REPS_HIGH = 15
ENDURANCE_REST_S = 60

# Accessory slots drop one set but keep at least this many
ACCESSORY_MIN_SETS = 2

# Elevated blood pressure clamp on main lifts
BP_REP_FLOOR = 6
BP_REST_FLOOR_S = 120

# Stage 2 hypertension clamp on main lifts (systolic >= 140 mmHg)
STAGE2_REP_FLOOR = 8
STAGE2_REST_FLOOR_S = 150

# Recovery severity -> set multiplier. Read as (min_severity, multiplier),
# highest matching threshold wins.
VOLUME_STEP_TABLE: tuple[tuple[int, float], ...] = (
    (0, 1.0),
    (1, 0.85),
    (3, 0.7),
)
MIN_SETS_PER_EXERCISE = 1


# ---------------------------------------------------------------------------
# Session timing
# ---------------------------------------------------------------------------

SECONDS_PER_REP = 3.0
WARMUP_OVERHEAD_MIN = 5.0

# Alternates offered per slot swap
MAX_ALTERNATES = 3
