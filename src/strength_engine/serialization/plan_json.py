"""JSON serialization for DayPlan objects.

Produces the wire shape the API layer returns to clients: one dict per
planned exercise plus plan-level notes, estimate and structural flags.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

import pandas as pd

from strength_engine.models.plan import DayPlan, PlannedExercise, ScoreResult

# Column order for tabular output.
_FRAME_COLUMNS = [
    "slot",
    "priority",
    "exercise_name",
    "sets",
    "reps",
    "rest_s",
    "estimated_minutes",
]


def to_plan_dict(plan: DayPlan) -> dict:
    """Convert a DayPlan to a JSON-ready dict."""
    return {
        "template_id": plan.template_id,
        "day_key": plan.day_key,
        "exercises": [_convert_exercise(pe) for pe in plan.exercises],
        "notes": list(plan.notes),
        "estimated_time_min": plan.estimated_time_min,
        "time_cap_min": plan.time_cap_min,
        "over_budget": plan.over_budget,
        "unresolved_slots": list(plan.unresolved_slots),
        "trimmed_exercises": list(plan.trimmed_exercises),
        "slot_count": plan.slot_count,
        "total_sets": plan.total_sets,
    }


def to_plan_json_string(plan: DayPlan, indent: int = 2) -> str:
    """Convert a DayPlan to a JSON string. Key order is stable."""
    return json.dumps(to_plan_dict(plan), indent=indent)


def to_alternates_list(results: tuple[ScoreResult, ...]) -> list[dict]:
    """Alternates as JSON-ready dicts, best first."""
    return [
        {
            "exercise_id": r.exercise.id,
            "exercise_name": r.exercise.name,
            "score": r.score,
            "reasons": list(r.reasons),
        }
        for r in results
    ]


def to_plan_frame(plan: DayPlan) -> pd.DataFrame:
    """One row per planned exercise, for tabular display."""
    rows = [
        {
            "slot": pe.slot.name,
            "priority": int(pe.priority),
            "exercise_name": pe.exercise.name,
            "sets": pe.sets,
            "reps": pe.reps,
            "rest_s": pe.rest_s,
            "estimated_minutes": pe.estimated_minutes,
        }
        for pe in plan.exercises
    ]
    return pd.DataFrame(rows, columns=_FRAME_COLUMNS)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_exercise(pe: PlannedExercise) -> dict:
    return {
        "slot": pe.slot.name,
        "priority": int(pe.priority),
        "exercise_id": pe.exercise.id,
        "exercise_name": pe.exercise.name,
        "modality": pe.exercise.modality.value,
        "sets": pe.sets,
        "reps": pe.reps,
        "rest_s": pe.rest_s,
        "reasons": list(pe.reasons),
        "estimated_minutes": pe.estimated_minutes,
    }
