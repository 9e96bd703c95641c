"""Session time estimation and time-budget trimming.

Time per exercise = sets x (reps_high x seconds_per_rep + rest_s), in
minutes; a session adds a fixed warm-up/transition overhead. Estimates are
rounded to 0.1 min and the cap is compared against the rounded value so the
reported estimate always honours the cap when trimming succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from strength_engine.models.enums import (
    SECONDS_PER_REP,
    WARMUP_OVERHEAD_MIN,
    SlotPriority,
)
from strength_engine.models.exercise import Prescription
from strength_engine.models.plan import PlannedExercise

logger = logging.getLogger(__name__)


def exercise_minutes(
    prescription: Prescription, seconds_per_rep: float = SECONDS_PER_REP
) -> float:
    """Estimated minutes for one exercise, unrounded."""
    per_set_s = prescription.reps_high * seconds_per_rep + prescription.rest_s
    return prescription.sets * per_set_s / 60.0


def estimate_session_minutes(
    prescriptions: Sequence[Prescription],
    overhead_min: float = WARMUP_OVERHEAD_MIN,
    seconds_per_rep: float = SECONDS_PER_REP,
) -> float:
    """Estimated session length in minutes, rounded to 0.1.

    Args:
        prescriptions: Final prescriptions of every planned exercise.
        overhead_min: Fixed warm-up/transition overhead.
        seconds_per_rep: Working time per repetition.

    Returns:
        overhead + sum of per-exercise minutes. An empty plan costs only
        the overhead.
    """
    if not prescriptions:
        return round(overhead_min, 1)
    sets = np.array([p.sets for p in prescriptions], dtype=np.float64)
    reps = np.array([p.reps_high for p in prescriptions], dtype=np.float64)
    rest = np.array([p.rest_s for p in prescriptions], dtype=np.float64)
    work_s = float(np.sum(sets * (reps * seconds_per_rep + rest)))
    return round(overhead_min + work_s / 60.0, 1)


@dataclass(frozen=True)
class TrimResult:
    """Outcome of fitting a draft plan into a time cap."""

    kept: tuple[PlannedExercise, ...]
    removed: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    estimated_time_min: float = 0.0
    over_budget: bool = False


class TimeBudgetTrimmer:
    """Removes the lowest-priority exercises until a plan fits its cap.

    Removal order: highest slot priority number first (accessories before
    secondary lifts), ties broken by the latest insertion. MAIN slots are
    never removed; if only they remain and the cap is still exceeded the
    result is flagged ``over_budget``.
    """

    def __init__(
        self,
        overhead_min: float = WARMUP_OVERHEAD_MIN,
        seconds_per_rep: float = SECONDS_PER_REP,
    ) -> None:
        self.overhead_min = overhead_min
        self.seconds_per_rep = seconds_per_rep

    def exercise_minutes(self, prescription: Prescription) -> float:
        return round(exercise_minutes(prescription, self.seconds_per_rep), 1)

    def estimate(self, planned: Sequence[PlannedExercise]) -> float:
        return estimate_session_minutes(
            [pe.prescription for pe in planned],
            overhead_min=self.overhead_min,
            seconds_per_rep=self.seconds_per_rep,
        )

    def minimum_core_minutes(self, planned: Sequence[PlannedExercise]) -> float:
        """Estimate for the MAIN-slot exercises alone (the non-trimmable core)."""
        return self.estimate([pe for pe in planned if pe.priority == SlotPriority.MAIN])

    def trim(self, planned: Sequence[PlannedExercise], cap_min: float) -> TrimResult:
        """Fit *planned* into *cap_min* minutes.

        Args:
            planned: Draft plan in insertion order.
            cap_min: Session time cap in minutes.

        Returns:
            TrimResult with the kept exercises (insertion order preserved),
            the removed ones in removal order, and the final estimate.
        """
        kept = list(planned)
        removed: list[PlannedExercise] = []
        estimate = self.estimate(kept)

        while estimate > cap_min:
            trimmable = [pe for pe in kept if pe.priority != SlotPriority.MAIN]
            if not trimmable:
                logger.info(
                    "Plan still %.1f min over a %.1f min cap with only main lifts left",
                    estimate - cap_min,
                    cap_min,
                )
                return TrimResult(
                    kept=tuple(kept),
                    removed=tuple(removed),
                    estimated_time_min=estimate,
                    over_budget=True,
                )
            victim = max(trimmable, key=lambda pe: (pe.priority, pe.order))
            kept.remove(victim)
            removed.append(victim)
            estimate = self.estimate(kept)
            logger.debug(
                "Trimmed %s (slot %s), estimate now %.1f min",
                victim.exercise.id,
                victim.slot.name,
                estimate,
            )

        return TrimResult(
            kept=tuple(kept),
            removed=tuple(removed),
            estimated_time_min=estimate,
        )
