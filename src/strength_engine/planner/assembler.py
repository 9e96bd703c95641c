"""PlanAssembler: builds one day's session from a template.

Algorithm:
1. Resolve the day's slots from the template registry
2. Walk the slots in ascending priority order (stable within a rank)
3. Rank the pattern's catalog candidates; hard-excluded ones never rank
4. Take the winner's base prescription with goal/slot adjustments
5. Apply biomarker clamps (main slots only) in fixed rule order
6. Trim the unscaled draft to the time cap
7. Scale the kept exercises' sets by recovery severity
8. Return a frozen DayPlan

Trimming runs before scaling so that recovery flags can only shrink the
session: the same exercises are kept with or without flags, and scaled
sets never take longer than unscaled ones.

The assembler holds only immutable collaborators, so one instance can
serve concurrent callers.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from strength_engine.budget.trimmer import TimeBudgetTrimmer
from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.template_registry import TemplateRegistry, ordered_slots
from strength_engine.config import EngineSettings
from strength_engine.exceptions import InvalidProfile
from strength_engine.models.plan import BuildDayPlanRequest, DayPlan, PlannedExercise
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot
from strength_engine.models.profile import UserProfile
from strength_engine.planner.prescription import base_prescription
from strength_engine.safety.engine import SafetyRuleEngine
from strength_engine.scoring.scorer import ExerciseScorer
from strength_engine.volume.scaler import VolumeScaler

logger = logging.getLogger(__name__)


class PlanAssembler:
    """Orchestrates scoring, safety, volume scaling and trimming.

    Usage::

        assembler = PlanAssembler(default_catalog(), default_templates())
        plan = assembler.build_day_plan(request)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        templates: TemplateRegistry,
        safety: SafetyRuleEngine | None = None,
        scaler: VolumeScaler | None = None,
        trimmer: TimeBudgetTrimmer | None = None,
    ) -> None:
        self.catalog = catalog
        self.templates = templates
        self.safety = safety or SafetyRuleEngine()
        self.scorer = ExerciseScorer(self.safety)
        self.scaler = scaler or VolumeScaler()
        self.trimmer = trimmer or TimeBudgetTrimmer()

    @classmethod
    def from_settings(
        cls,
        catalog: ExerciseCatalog,
        templates: TemplateRegistry,
        settings: EngineSettings,
    ) -> PlanAssembler:
        trimmer = TimeBudgetTrimmer(
            overhead_min=settings.warmup_overhead_min,
            seconds_per_rep=settings.seconds_per_rep,
        )
        return cls(catalog, templates, trimmer=trimmer)

    def build_day_plan(self, request: BuildDayPlanRequest) -> DayPlan:
        """Build the plan for ``request.template_id`` / ``request.day_key``.

        Raises:
            UnknownTemplate: If the template or day does not exist.
            InvalidProfile: If the profile has no equipment or the cap is
                not positive.
        """
        profile = request.user_profile
        signals = request.signals
        cap = request.effective_cap
        _validate(profile, cap)

        slots = self.templates.get_day(request.template_id, request.day_key)
        notes: list[str] = []
        unresolved: list[str] = []
        draft: list[PlannedExercise] = []
        fired_rules: dict[str, str] = {}

        if signals.recovery_flags:
            flags = ", ".join(sorted(f.value for f in signals.recovery_flags))
            notes.append(f"Volume scaled due to low recovery ({flags})")
        if signals.ignored_flags:
            notes.append(f"Ignored unrecognised flags: {', '.join(signals.ignored_flags)}")

        for slot in ordered_slots(slots):
            planned = self._resolve_slot(slot, profile, signals, len(draft), fired_rules)
            if planned is None:
                unresolved.append(slot.name)
                notes.append(f"Could not find valid exercise for slot: {slot.name}")
                logger.info("No eligible candidate for slot %s", slot.name)
                continue
            draft.append(planned)

        for explanation in fired_rules.values():
            notes.append(f"Safety clamp on main lifts ({explanation})")

        draft_minutes = self.trimmer.estimate(draft)
        result = self.trimmer.trim(draft, cap)
        if result.removed:
            names = ", ".join(pe.exercise.name for pe in result.removed)
            notes.append(
                f"Time budget exceeded ({draft_minutes:.1f}min > {cap:g}min), trimmed: {names}"
            )
            logger.info(
                "Trimmed %d exercise(s) to fit %s/%s into %g min",
                len(result.removed),
                request.template_id,
                request.day_key,
                cap,
            )
        kept = tuple(self._scale_volume(pe, signals) for pe in result.kept)
        estimate = self.trimmer.estimate(kept)
        over_budget = estimate > cap
        if over_budget:
            notes.append(
                f"Main lifts alone need {estimate:.1f}min, over the {cap:g}min cap"
            )

        return DayPlan(
            template_id=request.template_id,
            day_key=request.day_key,
            exercises=kept,
            estimated_time_min=estimate,
            time_cap_min=cap,
            slot_count=len(slots),
            notes=tuple(notes),
            unresolved_slots=tuple(unresolved),
            trimmed_exercises=tuple(pe.exercise.id for pe in result.removed),
            over_budget=over_budget,
        )

    def _resolve_slot(
        self,
        slot: Slot,
        profile: UserProfile,
        signals: Signals,
        order: int,
        fired_rules: dict[str, str],
    ) -> PlannedExercise | None:
        """Pick and prescribe the winner for one slot, or None if none is eligible."""
        candidates = self.catalog.candidates_for_pattern(slot.pattern)
        ranked = self.scorer.rank(candidates, self.catalog, profile, signals)
        if not ranked:
            return None

        winner = ranked[0]
        exercise = winner.exercise
        rx, rx_reasons = base_prescription(exercise, slot, profile)

        clamped = self.safety.apply_clamps(rx, slot, signals)
        rx = clamped.prescription
        for rule in clamped.fired:
            fired_rules.setdefault(rule.rule_id, rule.explanation)

        reasons = list(winner.reasons) + list(rx_reasons) + list(clamped.reasons)
        logger.debug(
            "Slot %s -> %s (score %.1f, %d candidates eligible)",
            slot.name,
            exercise.id,
            winner.score,
            len(ranked),
        )
        return PlannedExercise(
            exercise=exercise,
            slot=slot,
            prescription=rx,
            order=order,
            estimated_minutes=self.trimmer.exercise_minutes(rx),
            reasons=tuple(reasons),
        )

    def _scale_volume(self, pe: PlannedExercise, signals: Signals) -> PlannedExercise:
        """Shrink *pe*'s sets for the active recovery flags and re-time it."""
        rx = pe.prescription
        scaled_sets = self.scaler.scale(rx.sets, signals.recovery_flags)
        if scaled_sets == rx.sets:
            return pe
        rx = replace(rx, sets=scaled_sets)
        return replace(
            pe,
            prescription=rx,
            estimated_minutes=self.trimmer.exercise_minutes(rx),
            reasons=pe.reasons + (f"low recovery: {pe.prescription.sets} -> {scaled_sets} sets",),
        )


def _validate(profile: UserProfile, cap: float) -> None:
    if not profile.equipment:
        raise InvalidProfile("Profile must list at least one equipment item", field="equipment")
    if cap <= 0:
        raise InvalidProfile(f"Time cap must be positive, got {cap}", field="time_cap_min")
