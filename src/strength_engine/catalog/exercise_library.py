"""Default exercise library.

Declaration order matters: within a movement pattern, an earlier entry wins
a scoring tie. Compound barbell variants come first, then dumbbell,
machine/cable, and bodyweight/band fallbacks.
"""

from __future__ import annotations

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.models.enums import (
    ContraindicationTag as Tag,
    Equipment,
    LiftClass,
    Modality,
    MovementPattern as P,
)
from strength_engine.models.exercise import Exercise, Prescription

MAIN = LiftClass.MAIN
ACC = LiftClass.ACCESSORY


def _rx(sets: int, reps_low: int, reps_high: int, rest_s: int) -> Prescription:
    return Prescription(sets=sets, reps_low=reps_low, reps_high=reps_high, rest_s=rest_s)


EXERCISES: tuple[Exercise, ...] = (
    # -- Squat ---------------------------------------------------------------
    Exercise(
        id="barbell_back_squat", name="Barbell Back Squat",
        pattern=P.SQUAT, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(4, 6, 10, 150),
        muscles=("quads", "glutes", "hamstrings"),
        contraindications=frozenset({Tag.SPINAL_LOAD, Tag.DEEP_KNEE_FLEXION}),
        gear=frozenset({Equipment.RACK}),
    ),
    Exercise(
        id="db_goblet_squat", name="Dumbbell Goblet Squat",
        pattern=P.SQUAT, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(4, 8, 12, 120),
        muscles=("quads", "glutes"),
        contraindications=frozenset({Tag.DEEP_KNEE_FLEXION}),
    ),
    Exercise(
        id="hack_squat", name="Hack Squat",
        pattern=P.SQUAT, modality=Modality.MACHINE, lift_class=MAIN,
        base=_rx(4, 8, 12, 120),
        muscles=("quads", "glutes"),
    ),
    Exercise(
        id="leg_press", name="Leg Press",
        pattern=P.SQUAT, modality=Modality.MACHINE, lift_class=MAIN,
        base=_rx(3, 10, 15, 120),
        muscles=("quads", "glutes", "hamstrings"),
    ),
    Exercise(
        id="db_front_squat", name="Dumbbell Front Squat",
        pattern=P.SQUAT, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 120),
        muscles=("quads", "glutes"),
        contraindications=frozenset({Tag.DEEP_KNEE_FLEXION}),
    ),
    Exercise(
        id="kb_goblet_squat", name="Kettlebell Goblet Squat",
        pattern=P.SQUAT, modality=Modality.KETTLEBELL, lift_class=MAIN,
        base=_rx(3, 10, 15, 90),
        muscles=("quads", "glutes"),
        contraindications=frozenset({Tag.DEEP_KNEE_FLEXION}),
    ),
    Exercise(
        id="bodyweight_squat", name="Bodyweight Squat",
        pattern=P.SQUAT, modality=Modality.BODYWEIGHT, lift_class=MAIN,
        base=_rx(3, 12, 20, 60),
        muscles=("quads", "glutes"),
    ),
    Exercise(
        id="jump_squat", name="Jump Squat",
        pattern=P.SQUAT, modality=Modality.BODYWEIGHT, lift_class=MAIN,
        base=_rx(3, 6, 10, 90),
        muscles=("quads", "glutes", "calves"),
        contraindications=frozenset({Tag.HIGH_IMPACT}),
    ),

    # -- Hinge ---------------------------------------------------------------
    Exercise(
        id="barbell_deadlift", name="Barbell Deadlift",
        pattern=P.HINGE, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(3, 4, 6, 180),
        muscles=("hamstrings", "glutes", "back"),
        contraindications=frozenset({Tag.SPINAL_LOAD}),
    ),
    Exercise(
        id="power_clean", name="Power Clean",
        pattern=P.HINGE, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(5, 2, 3, 150),
        muscles=("hamstrings", "glutes", "traps", "quads"),
        contraindications=frozenset({Tag.SPINAL_LOAD, Tag.HIGH_IMPACT}),
        technical=True,
    ),
    Exercise(
        id="barbell_rdl", name="Barbell Romanian Deadlift",
        pattern=P.HINGE, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(3, 6, 10, 150),
        muscles=("hamstrings", "glutes"),
        contraindications=frozenset({Tag.SPINAL_LOAD}),
    ),
    Exercise(
        id="barbell_hip_thrust", name="Barbell Hip Thrust",
        pattern=P.HINGE, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 120),
        muscles=("glutes", "hamstrings"),
        gear=frozenset({Equipment.BENCH}),
    ),
    Exercise(
        id="db_rdl", name="Dumbbell Romanian Deadlift",
        pattern=P.HINGE, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 120),
        muscles=("hamstrings", "glutes"),
    ),
    Exercise(
        id="kb_swing", name="Kettlebell Swing",
        pattern=P.HINGE, modality=Modality.KETTLEBELL, lift_class=MAIN,
        base=_rx(4, 12, 20, 60),
        muscles=("glutes", "hamstrings", "core"),
    ),
    Exercise(
        id="cable_pull_through", name="Cable Pull-Through",
        pattern=P.HINGE, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 12, 15, 60),
        muscles=("glutes", "hamstrings"),
    ),

    # -- Lunge / single leg --------------------------------------------------
    Exercise(
        id="db_reverse_lunge", name="Dumbbell Reverse Lunge",
        pattern=P.LUNGE, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("quads", "glutes"),
    ),
    Exercise(
        id="db_bulgarian_split_squat", name="Dumbbell Bulgarian Split Squat",
        pattern=P.LUNGE, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("quads", "glutes"),
        contraindications=frozenset({Tag.DEEP_KNEE_FLEXION}),
        gear=frozenset({Equipment.BENCH}),
    ),
    Exercise(
        id="bodyweight_lunge", name="Walking Lunge",
        pattern=P.LUNGE, modality=Modality.BODYWEIGHT, lift_class=MAIN,
        base=_rx(3, 10, 15, 60),
        muscles=("quads", "glutes"),
    ),

    # -- Horizontal press ----------------------------------------------------
    Exercise(
        id="barbell_bench_press", name="Barbell Bench Press",
        pattern=P.HORIZONTAL_PRESS, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(4, 6, 10, 150),
        muscles=("chest", "triceps", "shoulders"),
        gear=frozenset({Equipment.BENCH}),
    ),
    Exercise(
        id="flat_db_press", name="Flat Dumbbell Press",
        pattern=P.HORIZONTAL_PRESS, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(4, 8, 12, 120),
        muscles=("chest", "triceps", "shoulders"),
        gear=frozenset({Equipment.BENCH}),
    ),
    Exercise(
        id="machine_chest_press", name="Machine Chest Press",
        pattern=P.HORIZONTAL_PRESS, modality=Modality.MACHINE, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("chest", "triceps"),
    ),
    Exercise(
        id="pushup", name="Push-up",
        pattern=P.HORIZONTAL_PRESS, modality=Modality.BODYWEIGHT, lift_class=MAIN,
        base=_rx(3, 8, 15, 60),
        muscles=("chest", "triceps", "shoulders"),
        contraindications=frozenset({Tag.WRIST_LOAD}),
    ),
    Exercise(
        id="band_chest_press", name="Band Chest Press",
        pattern=P.HORIZONTAL_PRESS, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 12, 20, 60),
        muscles=("chest", "triceps"),
    ),

    # -- Vertical press ------------------------------------------------------
    Exercise(
        id="barbell_overhead_press", name="Barbell Overhead Press",
        pattern=P.VERTICAL_PRESS, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(4, 5, 8, 150),
        muscles=("shoulders", "triceps"),
        contraindications=frozenset({Tag.OVERHEAD, Tag.SPINAL_LOAD}),
        gear=frozenset({Equipment.RACK}),
    ),
    Exercise(
        id="db_overhead_press", name="Dumbbell Overhead Press",
        pattern=P.VERTICAL_PRESS, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("shoulders", "triceps"),
        contraindications=frozenset({Tag.OVERHEAD}),
    ),
    Exercise(
        id="machine_shoulder_press", name="Machine Shoulder Press",
        pattern=P.VERTICAL_PRESS, modality=Modality.MACHINE, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("shoulders", "triceps"),
        contraindications=frozenset({Tag.OVERHEAD}),
    ),
    Exercise(
        id="landmine_press", name="Landmine Press",
        pattern=P.VERTICAL_PRESS, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("shoulders", "chest", "triceps"),
    ),

    # -- Horizontal pull -----------------------------------------------------
    Exercise(
        id="barbell_row", name="Barbell Row",
        pattern=P.HORIZONTAL_PULL, modality=Modality.BARBELL, lift_class=MAIN,
        base=_rx(4, 6, 10, 120),
        muscles=("back", "lats", "biceps"),
        contraindications=frozenset({Tag.SPINAL_LOAD}),
    ),
    Exercise(
        id="db_row", name="Dumbbell Row",
        pattern=P.HORIZONTAL_PULL, modality=Modality.DUMBBELL, lift_class=MAIN,
        base=_rx(3, 8, 12, 90),
        muscles=("back", "lats", "biceps"),
        gear=frozenset({Equipment.BENCH}),
    ),
    Exercise(
        id="cable_row", name="Cable Row",
        pattern=P.HORIZONTAL_PULL, modality=Modality.CABLE, lift_class=MAIN,
        base=_rx(3, 10, 12, 90),
        muscles=("back", "lats", "biceps"),
    ),
    Exercise(
        id="band_row", name="Band Row",
        pattern=P.HORIZONTAL_PULL, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 12, 20, 60),
        muscles=("back", "biceps"),
    ),

    # -- Vertical pull -------------------------------------------------------
    Exercise(
        id="pullup", name="Pull-up",
        pattern=P.VERTICAL_PULL, modality=Modality.BODYWEIGHT, lift_class=MAIN,
        base=_rx(3, 5, 10, 120),
        muscles=("lats", "biceps"),
        gear=frozenset({Equipment.PULLUP_BAR}),
    ),
    Exercise(
        id="lat_pulldown", name="Lat Pulldown",
        pattern=P.VERTICAL_PULL, modality=Modality.CABLE, lift_class=MAIN,
        base=_rx(3, 10, 12, 90),
        muscles=("lats", "biceps"),
    ),
    Exercise(
        id="band_pulldown", name="Band Lat Pulldown",
        pattern=P.VERTICAL_PULL, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 12, 20, 60),
        muscles=("lats", "biceps"),
    ),

    # -- Core & carries ------------------------------------------------------
    Exercise(
        id="cable_pallof_press", name="Cable Pallof Press",
        pattern=P.CORE, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 10, 12, 45),
        muscles=("core",),
    ),
    Exercise(
        id="hanging_leg_raise", name="Hanging Leg Raise",
        pattern=P.CORE, modality=Modality.BODYWEIGHT, lift_class=ACC,
        base=_rx(3, 8, 12, 60),
        muscles=("core", "hip_flexors"),
        gear=frozenset({Equipment.PULLUP_BAR}),
    ),
    Exercise(
        id="dead_bug", name="Dead Bug",
        pattern=P.CORE, modality=Modality.BODYWEIGHT, lift_class=ACC,
        base=_rx(3, 8, 12, 45),
        muscles=("core",),
    ),
    Exercise(
        id="farmer_carry", name="Dumbbell Farmer Carry",
        pattern=P.CARRY, modality=Modality.DUMBBELL, lift_class=ACC,
        base=_rx(3, 2, 4, 90),
        muscles=("forearms", "traps", "core"),
        contraindications=frozenset({Tag.SPINAL_LOAD}),
    ),
    Exercise(
        id="kb_suitcase_carry", name="Kettlebell Suitcase Carry",
        pattern=P.CARRY, modality=Modality.KETTLEBELL, lift_class=ACC,
        base=_rx(3, 2, 4, 90),
        muscles=("obliques", "forearms"),
    ),

    # -- Arms ----------------------------------------------------------------
    Exercise(
        id="db_curl", name="Dumbbell Curl",
        pattern=P.ELBOW_FLEXION, modality=Modality.DUMBBELL, lift_class=ACC,
        base=_rx(3, 10, 15, 60),
        muscles=("biceps",),
    ),
    Exercise(
        id="cable_curl", name="Cable Curl",
        pattern=P.ELBOW_FLEXION, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 10, 15, 60),
        muscles=("biceps",),
    ),
    Exercise(
        id="band_curl", name="Band Curl",
        pattern=P.ELBOW_FLEXION, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 12, 20, 45),
        muscles=("biceps",),
    ),
    Exercise(
        id="db_overhead_tricep_extension", name="Dumbbell Overhead Tricep Extension",
        pattern=P.ELBOW_EXTENSION, modality=Modality.DUMBBELL, lift_class=ACC,
        base=_rx(3, 10, 15, 60),
        muscles=("triceps",),
        contraindications=frozenset({Tag.OVERHEAD}),
    ),
    Exercise(
        id="cable_tricep_extension", name="Cable Tricep Extension",
        pattern=P.ELBOW_EXTENSION, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 10, 15, 60),
        muscles=("triceps",),
    ),
    Exercise(
        id="band_tricep_pushdown", name="Band Tricep Pushdown",
        pattern=P.ELBOW_EXTENSION, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 12, 20, 45),
        muscles=("triceps",),
    ),

    # -- Shoulders -----------------------------------------------------------
    Exercise(
        id="lateral_raise", name="Lateral Raise",
        pattern=P.SHOULDER_ISOLATION, modality=Modality.DUMBBELL, lift_class=ACC,
        base=_rx(3, 12, 15, 60),
        muscles=("shoulders",),
    ),
    Exercise(
        id="cable_lateral_raise", name="Cable Lateral Raise",
        pattern=P.SHOULDER_ISOLATION, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 12, 15, 60),
        muscles=("shoulders",),
    ),
    Exercise(
        id="cable_face_pull", name="Cable Face Pull",
        pattern=P.REAR_DELT, modality=Modality.CABLE, lift_class=ACC,
        base=_rx(3, 12, 15, 60),
        muscles=("rear_delts", "traps"),
    ),
    Exercise(
        id="band_pull_apart", name="Band Pull-Apart",
        pattern=P.REAR_DELT, modality=Modality.BANDS, lift_class=ACC,
        base=_rx(3, 15, 20, 45),
        muscles=("rear_delts",),
    ),

    # -- Legs accessories ----------------------------------------------------
    Exercise(
        id="leg_curl", name="Leg Curl",
        pattern=P.KNEE_FLEXION, modality=Modality.MACHINE, lift_class=ACC,
        base=_rx(3, 10, 15, 60),
        muscles=("hamstrings",),
    ),
    Exercise(
        id="calf_raise", name="Calf Raise",
        pattern=P.CALF, modality=Modality.MACHINE, lift_class=ACC,
        base=_rx(3, 12, 15, 60),
        muscles=("calves",),
    ),
    Exercise(
        id="bodyweight_calf_raise", name="Bodyweight Calf Raise",
        pattern=P.CALF, modality=Modality.BODYWEIGHT, lift_class=ACC,
        base=_rx(3, 15, 20, 45),
        muscles=("calves",),
    ),
)


def default_catalog() -> ExerciseCatalog:
    """Build the catalog from the default library."""
    return ExerciseCatalog(EXERCISES)
