"""Exercise definitions and their set/rep/rest prescriptions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from strength_engine.models.enums import (
    ContraindicationTag,
    Equipment,
    LiftClass,
    Modality,
    MovementPattern,
    MODALITY_EQUIPMENT,
)


@dataclass(frozen=True)
class Prescription:
    """Sets, rep range and rest for one exercise.

    Rest is in seconds. ``reps_low`` never exceeds ``reps_high``.
    """

    sets: int
    reps_low: int
    reps_high: int
    rest_s: int

    def __post_init__(self) -> None:
        if self.sets < 1:
            raise ValueError(f"sets must be >= 1, got {self.sets}")
        if self.reps_low < 1 or self.reps_low > self.reps_high:
            raise ValueError(
                f"invalid rep range {self.reps_low}-{self.reps_high}"
            )
        if self.rest_s < 0:
            raise ValueError(f"rest_s must be >= 0, got {self.rest_s}")

    @property
    def reps(self) -> str:
        """Rep range as displayed, e.g. '6-10'."""
        return f"{self.reps_low}-{self.reps_high}"

    def with_rep_floor(self, floor: int) -> Prescription:
        """Raise the lower rep bound to at least *floor*, widening the top if needed."""
        low = max(self.reps_low, floor)
        return replace(self, reps_low=low, reps_high=max(self.reps_high, low))

    def with_rest_floor(self, floor_s: int) -> Prescription:
        return replace(self, rest_s=max(self.rest_s, floor_s))


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise. Immutable; identity is ``id``.

    Attributes:
        pattern: Movement pattern the exercise can fill.
        modality: Loading implement; must be available to the user.
        lift_class: MAIN for compound lifts, ACCESSORY otherwise.
        muscles: Target muscle names.
        contraindications: Movement risks carried by the exercise.
        base: Default prescription before goal/safety/recovery adjustments.
        gear: Support equipment needed besides the modality (rack, bench...).
        technical: Olympic-style lifts that penalise beginners.
    """

    id: str
    name: str
    pattern: MovementPattern
    modality: Modality
    lift_class: LiftClass
    base: Prescription
    muscles: tuple[str, ...] = field(default_factory=tuple)
    contraindications: frozenset[ContraindicationTag] = field(default_factory=frozenset)
    gear: frozenset[Equipment] = field(default_factory=frozenset)
    technical: bool = False

    @property
    def required_equipment(self) -> frozenset[Equipment]:
        """Everything that must be in the user's equipment set."""
        return self.gear | {MODALITY_EQUIPMENT[self.modality]}

    @property
    def volume_capacity(self) -> int:
        """Base sets times the top of the base rep range."""
        return self.base.sets * self.base.reps_high
