"""SafetyRuleEngine: the two safety stages of slot resolution.

1. Hard exclusion, consulted before ranking: a candidate whose equipment is
   unavailable or whose contraindication tags intersect the user's
   limitations is removed from every slot.
2. Soft clamps, applied to a chosen winner: each biomarker clamp rule whose
   flag is active rewrites the prescription, in the registry's fixed order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from strength_engine.models.enums import ExclusionReason
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.profile import UserProfile
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot
from strength_engine.rules.base import ClampRule
from strength_engine.rules.registry import ClampRuleRegistry, default_rules


@dataclass(frozen=True)
class ClampOutcome:
    """Prescription after clamping plus the rules that fired."""

    prescription: Prescription
    fired: tuple[ClampRule, ...] = field(default_factory=tuple)

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(rule.explanation for rule in self.fired)


class SafetyRuleEngine:
    """Applies hard exclusions and biomarker clamps.

    Usage::

        safety = SafetyRuleEngine()
        reason = safety.exclusion_reason(exercise, profile)
        outcome = safety.apply_clamps(prescription, slot, signals)
    """

    def __init__(self, rules: Sequence[ClampRule] | None = None) -> None:
        if rules is None:
            rules = default_rules()
        self._rules = ClampRuleRegistry(rules).ordered()

    @property
    def rules(self) -> tuple[ClampRule, ...]:
        return self._rules

    @staticmethod
    def exclusion_reason(exercise: Exercise, profile: UserProfile) -> ExclusionReason | None:
        """Return why *exercise* is ineligible for *profile*, or None."""
        if exercise.contraindications & profile.avoided_tags:
            return ExclusionReason.LIMITATION_CONFLICT
        if not exercise.required_equipment <= profile.equipment:
            return ExclusionReason.EQUIPMENT_UNAVAILABLE
        return None

    def apply_clamps(
        self, prescription: Prescription, slot: Slot, signals: Signals
    ) -> ClampOutcome:
        """Run every applicable clamp in order over *prescription*."""
        fired: list[ClampRule] = []
        for rule in self._rules:
            if rule.applies(signals, slot):
                prescription = rule.clamp(prescription)
                fired.append(rule)
        return ClampOutcome(prescription=prescription, fired=tuple(fired))
