"""Plan models: scoring results, planned exercises and the final DayPlan."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import ExclusionReason, SlotPriority
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.profile import UserProfile
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot


@dataclass(frozen=True)
class ScoreResult:
    """One exercise's score against a profile and signals.

    Hard-excluded candidates carry an ``exclusion_reason`` and are never
    ranked, whatever their score.
    """

    exercise: Exercise
    score: float
    exclusion_reason: ExclusionReason | None = None
    reasons: tuple[str, ...] = field(default_factory=tuple)

    @property
    def excluded(self) -> bool:
        return self.exclusion_reason is not None


@dataclass(frozen=True)
class PlannedExercise:
    """The winning exercise for a slot with its final prescription.

    ``order`` is the insertion index into the draft plan; the trimmer uses
    it to break ties between slots of equal priority.
    """

    exercise: Exercise
    slot: Slot
    prescription: Prescription
    order: int
    estimated_minutes: float
    reasons: tuple[str, ...] = field(default_factory=tuple)

    @property
    def priority(self) -> SlotPriority:
        return self.slot.priority

    @property
    def sets(self) -> int:
        return self.prescription.sets

    @property
    def reps(self) -> str:
        return self.prescription.reps

    @property
    def rest_s(self) -> int:
        return self.prescription.rest_s


@dataclass(frozen=True)
class DayPlan:
    """The sole output of a build call. The builder keeps no reference to it.

    Structural non-matches are reported here instead of raised:
    ``unresolved_slots`` names slots without an eligible candidate, and
    ``over_budget`` is set when only main lifts remain and the cap still
    cannot be met.
    """

    template_id: str
    day_key: str
    exercises: tuple[PlannedExercise, ...]
    estimated_time_min: float
    time_cap_min: float
    slot_count: int
    notes: tuple[str, ...] = field(default_factory=tuple)
    unresolved_slots: tuple[str, ...] = field(default_factory=tuple)
    trimmed_exercises: tuple[str, ...] = field(default_factory=tuple)
    over_budget: bool = False

    @property
    def total_sets(self) -> int:
        return sum(pe.sets for pe in self.exercises)

    @property
    def is_complete(self) -> bool:
        """True when every template slot made it into the plan."""
        return len(self.exercises) == self.slot_count


@dataclass(frozen=True)
class BuildDayPlanRequest:
    """Everything one build call needs."""

    user_profile: UserProfile
    template_id: str
    day_key: str
    signals: Signals = field(default_factory=Signals)
    time_cap_min: float | None = None

    @property
    def effective_cap(self) -> float:
        """Explicit cap if given, else the profile's session cap."""
        if self.time_cap_min is not None:
            return self.time_cap_min
        return self.user_profile.session_minutes_cap


@dataclass(frozen=True)
class SessionRecord:
    """Outcome of one past working set sequence, for load progression."""

    exercise_id: str
    completed_reps: int
    target_reps_max: int
