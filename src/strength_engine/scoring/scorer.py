"""ExerciseScorer: weighted-sum scoring of one exercise for one user.

Terms, each a signed delta on a base of 0:

    equipment     +W_EQUIP, or hard exclusion when unavailable
    limitation    hard exclusion on any contraindication match
    goal          +W_GOAL when a goal's heuristic favours the exercise
    preference    +W_PREF liked id/modality, -W_PREF disliked
    experience    -W_EXPERIENCE for technical lifts when beginner
    readiness     +W_READINESS for machines while elevated_bp is active

Ties are broken by catalog declaration order.
"""

from __future__ import annotations

from collections.abc import Iterable

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.models.enums import (
    HYPERTROPHY_VOLUME_CAPACITY,
    W_EQUIP,
    W_EXPERIENCE,
    W_GOAL,
    W_PREF,
    W_READINESS,
    BiomarkerFlag,
    ExclusionReason,
    Experience,
    Goal,
    LiftClass,
    Modality,
)
from strength_engine.models.exercise import Exercise
from strength_engine.models.plan import ScoreResult
from strength_engine.models.profile import UserProfile
from strength_engine.models.signals import Signals
from strength_engine.safety.engine import SafetyRuleEngine

_ENDURANCE_MODALITIES = frozenset({Modality.BODYWEIGHT, Modality.KETTLEBELL, Modality.BANDS})

_EXCLUSION_TEXT = {
    ExclusionReason.EQUIPMENT_UNAVAILABLE: "equipment unavailable",
    ExclusionReason.LIMITATION_CONFLICT: "contraindicated by limitation",
}


def _goal_match(exercise: Exercise, goal: Goal) -> bool:
    if goal is Goal.STRENGTH:
        return exercise.modality is Modality.BARBELL and exercise.lift_class is LiftClass.MAIN
    if goal is Goal.HYPERTROPHY:
        return exercise.volume_capacity >= HYPERTROPHY_VOLUME_CAPACITY
    if goal is Goal.ENDURANCE:
        return exercise.modality in _ENDURANCE_MODALITIES
    return False


class ExerciseScorer:
    """Scores and ranks candidates. Stateless apart from the safety engine."""

    def __init__(self, safety: SafetyRuleEngine | None = None) -> None:
        self.safety = safety or SafetyRuleEngine()

    def score(
        self, exercise: Exercise, profile: UserProfile, signals: Signals
    ) -> ScoreResult:
        """Score one exercise. Excluded exercises get score 0 and a reason."""
        exclusion = self.safety.exclusion_reason(exercise, profile)
        if exclusion is not None:
            return ScoreResult(
                exercise=exercise,
                score=0.0,
                exclusion_reason=exclusion,
                reasons=(_EXCLUSION_TEXT[exclusion],),
            )

        score = W_EQUIP
        reasons = ["equipment available"]

        for goal in profile.goals:
            if _goal_match(exercise, goal):
                score += W_GOAL
                reasons.append(f"{goal.value} goal favours {exercise.modality.value}")
                break

        prefs = profile.preferences
        if prefs.likes_exercise(exercise.id, exercise.modality):
            score += W_PREF
            reasons.append("preferred")
        if prefs.dislikes_exercise(exercise.id, exercise.modality):
            score -= W_PREF
            reasons.append("disliked")

        if exercise.technical and profile.experience is Experience.BEGINNER:
            score -= W_EXPERIENCE
            reasons.append("technical lift for a beginner")

        # Recovery flags only scale volume; they never change which exercise wins.
        bp_elevated = signals.has_biomarker(BiomarkerFlag.ELEVATED_BP)
        if bp_elevated and exercise.modality is Modality.MACHINE:
            score += W_READINESS
            reasons.append("elevated blood pressure favours machines")

        return ScoreResult(exercise=exercise, score=score, reasons=tuple(reasons))

    def rank(
        self,
        candidates: Iterable[Exercise],
        catalog: ExerciseCatalog,
        profile: UserProfile,
        signals: Signals,
    ) -> list[ScoreResult]:
        """Eligible candidates, best first; ties go to the earlier declaration."""
        results = [self.score(ex, profile, signals) for ex in candidates]
        eligible = [r for r in results if not r.excluded]
        return sorted(
            eligible,
            key=lambda r: (-r.score, catalog.index_of(r.exercise.id)),
        )
