"""Template registry: day templates keyed by template id."""

from __future__ import annotations

from collections.abc import Iterable

from strength_engine.exceptions import CatalogError, UnknownTemplate
from strength_engine.models.template import Slot, Template


class TemplateRegistry:
    """Immutable lookup of day templates.

    Usage::

        registry = TemplateRegistry(TEMPLATES)
        slots = registry.get_day("template_fullbody_x3", "dayA")
    """

    def __init__(self, templates: Iterable[Template]) -> None:
        self._templates: dict[str, Template] = {}
        for template in templates:
            if template.id in self._templates:
                raise CatalogError(f"Duplicate template id {template.id!r}")
            self._templates[template.id] = template

    def get(self, template_id: str) -> Template:
        """Look up a template.

        Raises:
            UnknownTemplate: If no template has this id.
        """
        template = self._templates.get(template_id)
        if template is None:
            raise UnknownTemplate(
                f"Template {template_id!r} not found", template_id=template_id,
            )
        return template

    def get_day(self, template_id: str, day_key: str) -> tuple[Slot, ...]:
        """Return the slot sequence for one day of a template.

        Raises:
            UnknownTemplate: If the template or the day does not exist.
        """
        slots = self.get(template_id).slots_for(day_key)
        if slots is None:
            raise UnknownTemplate(
                f"Day {day_key!r} not found in template {template_id!r}",
                template_id=template_id,
                day_key=day_key,
            )
        return slots

    @property
    def template_ids(self) -> list[str]:
        return list(self._templates)


def ordered_slots(slots: Iterable[Slot]) -> list[Slot]:
    """Slots in ascending priority rank; declaration order within a rank."""
    return sorted(slots, key=lambda s: s.priority)
