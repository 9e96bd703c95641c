"""SAFETY clamp: stage 2 hypertension (systolic >= 140 mmHg) on main lifts.

Stricter than the elevated-BP clamp and evaluated after it; both only raise
floors so the combined result is the stricter of the two.
"""

from __future__ import annotations

from strength_engine.models.enums import (
    STAGE2_REP_FLOOR,
    STAGE2_REST_FLOOR_S,
    BiomarkerFlag,
)
from strength_engine.models.exercise import Prescription
from strength_engine.rules.base import ClampRule


class HypertensionStage2Clamp(ClampRule):
    """Rep floor 8 and rest floor 150 s on main lifts."""

    rule_id = "hypertension_stage2"
    version = "1.0.0"
    order = 20
    trigger = BiomarkerFlag.HYPERTENSION_STAGE2

    def clamp(self, prescription: Prescription) -> Prescription:
        return prescription.with_rep_floor(STAGE2_REP_FLOOR).with_rest_floor(STAGE2_REST_FLOOR_S)

    def describe(self) -> str:
        return f"rep floor >={STAGE2_REP_FLOOR}, rest >={STAGE2_REST_FLOOR_S}s"
