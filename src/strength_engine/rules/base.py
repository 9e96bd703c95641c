"""Abstract base class for biomarker clamp rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from strength_engine.models.enums import BiomarkerFlag, SlotPriority
from strength_engine.models.exercise import Prescription
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot


class ClampRule(ABC):
    """Base class for post-selection safety clamps.

    Each rule fires on one biomarker flag and rewrites a slot winner's
    prescription. Clamps may only raise floors (rep lower bound, rest),
    never lower them, so applying several in sequence is order-safe.

    Subclasses must define:
        rule_id: unique identifier (e.g. "elevated_bp")
        version: semantic version string
        order: position in the fixed evaluation order (lower runs first)
        trigger: the BiomarkerFlag that activates the rule
        clamp(): the prescription rewrite
    """

    rule_id: str
    version: str
    order: int
    trigger: BiomarkerFlag
    slot_priorities: frozenset[SlotPriority] = frozenset({SlotPriority.MAIN})

    def applies(self, signals: Signals, slot: Slot) -> bool:
        """Whether this rule fires for a winner in *slot* under *signals*."""
        return signals.has_biomarker(self.trigger) and slot.priority in self.slot_priorities

    @abstractmethod
    def clamp(self, prescription: Prescription) -> Prescription:
        """Return the prescription with this rule's floors applied."""
        ...

    @property
    def explanation(self) -> str:
        return f"{self.trigger.value}: {self.describe()}"

    def describe(self) -> str:
        return self.rule_id
