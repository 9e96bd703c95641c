"""Swap alternates: other eligible exercises for a slot the user wants to change."""

from __future__ import annotations

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.exceptions import UnknownTemplate
from strength_engine.models.enums import MAX_ALTERNATES
from strength_engine.models.plan import ScoreResult
from strength_engine.models.profile import UserProfile
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot
from strength_engine.scoring.scorer import ExerciseScorer


def find_slot(templates: TemplateRegistry, template_id: str, slot_name: str) -> Slot:
    """First slot named *slot_name* across the template's days.

    Raises:
        UnknownTemplate: If the template or slot does not exist.
    """
    template = templates.get(template_id)
    for _, slots in template.days:
        for slot in slots:
            if slot.name == slot_name:
                return slot
    raise UnknownTemplate(
        f"Slot {slot_name!r} not found in template {template_id!r}",
        template_id=template_id,
    )


def swap_alternates(
    catalog: ExerciseCatalog,
    templates: TemplateRegistry,
    template_id: str,
    slot_name: str,
    current_id: str,
    profile: UserProfile,
    signals: Signals,
    limit: int = MAX_ALTERNATES,
    scorer: ExerciseScorer | None = None,
) -> tuple[ScoreResult, ...]:
    """Best eligible alternatives to *current_id* for a slot.

    Uses the same scoring and hard exclusions as plan building, so an
    alternate is always safe to drop into the plan. Non-substitutable
    slots return no alternates.
    """
    slot = find_slot(templates, template_id, slot_name)
    if not slot.substitutable:
        return ()

    scorer = scorer or ExerciseScorer()
    candidates = [
        ex for ex in catalog.candidates_for_pattern(slot.pattern) if ex.id != current_id
    ]
    ranked = scorer.rank(candidates, catalog, profile, signals)
    return tuple(ranked[:limit])
