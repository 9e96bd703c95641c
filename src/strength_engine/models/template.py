"""Day templates: ordered slots that form the skeleton of a training day."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import MovementPattern, SlotPriority


@dataclass(frozen=True)
class Slot:
    """A required position in a day: one exercise of ``pattern``.

    ``substitutable`` controls whether alternates may be offered for the
    slot after the plan is built.
    """

    name: str
    pattern: MovementPattern
    priority: SlotPriority
    substitutable: bool = True


@dataclass(frozen=True)
class Template:
    """Immutable reference data: day_key -> slot sequence."""

    id: str
    name: str
    days: tuple[tuple[str, tuple[Slot, ...]], ...] = field(default_factory=tuple)

    @property
    def day_keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.days)

    def slots_for(self, day_key: str) -> tuple[Slot, ...] | None:
        """Return the slots for *day_key*, or None if the day is not defined."""
        for key, slots in self.days:
            if key == day_key:
                return slots
        return None
