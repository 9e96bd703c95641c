"""Data models for the strength engine."""

from strength_engine.models.enums import (
    BiomarkerFlag,
    ContraindicationTag,
    Equipment,
    Experience,
    Goal,
    LiftClass,
    LoadDecision,
    Modality,
    MovementPattern,
    RecoveryFlag,
    SlotPriority,
)
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.plan import (
    BuildDayPlanRequest,
    DayPlan,
    PlannedExercise,
    ScoreResult,
    SessionRecord,
)
from strength_engine.models.profile import Preferences, UserProfile
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot, Template

__all__ = [
    "BiomarkerFlag",
    "BuildDayPlanRequest",
    "ContraindicationTag",
    "DayPlan",
    "Equipment",
    "Exercise",
    "Experience",
    "Goal",
    "LiftClass",
    "LoadDecision",
    "Modality",
    "MovementPattern",
    "PlannedExercise",
    "Preferences",
    "Prescription",
    "RecoveryFlag",
    "ScoreResult",
    "SessionRecord",
    "Signals",
    "Slot",
    "SlotPriority",
    "Template",
    "UserProfile",
]
