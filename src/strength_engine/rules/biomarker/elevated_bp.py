"""SAFETY clamp: elevated blood pressure on main lifts.

Heavy low-rep sets with short rest drive the largest pressor response, so
main lifts get a rep floor and a rest floor while ``elevated_bp`` is set.

Reference:
    MacDougall et al. (1985). Arterial blood pressure response to heavy
    resistance exercise. J Appl Physiol 58(3):785-790.
"""

from __future__ import annotations

from strength_engine.models.enums import BP_REP_FLOOR, BP_REST_FLOOR_S, BiomarkerFlag
from strength_engine.models.exercise import Prescription
from strength_engine.rules.base import ClampRule


class ElevatedBPClamp(ClampRule):
    """Rep floor 6 and rest floor 120 s on main lifts."""

    rule_id = "elevated_bp"
    version = "1.0.0"
    order = 10
    trigger = BiomarkerFlag.ELEVATED_BP

    def clamp(self, prescription: Prescription) -> Prescription:
        return prescription.with_rep_floor(BP_REP_FLOOR).with_rest_floor(BP_REST_FLOOR_S)

    def describe(self) -> str:
        return f"rep floor >={BP_REP_FLOOR}, rest >={BP_REST_FLOOR_S}s"
