"""User profile: who is training, with what, and what to avoid."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import (
    ContraindicationTag,
    Equipment,
    Experience,
    Goal,
    Modality,
)


@dataclass(frozen=True)
class Preferences:
    """Liked and disliked exercise ids or modality names."""

    likes: frozenset[str] = field(default_factory=frozenset)
    dislikes: frozenset[str] = field(default_factory=frozenset)

    def likes_exercise(self, exercise_id: str, modality: Modality) -> bool:
        return exercise_id in self.likes or modality.value in self.likes

    def dislikes_exercise(self, exercise_id: str, modality: Modality) -> bool:
        return exercise_id in self.dislikes or modality.value in self.dislikes


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of a user's training profile.

    ``limitations`` maps a body region (e.g. "shoulder") to the
    contraindication tag that region rules out. Stored as sorted pairs so
    the profile stays hashable.
    """

    experience: Experience
    equipment: frozenset[Equipment]
    session_minutes_cap: float
    goals: tuple[Goal, ...] = field(default_factory=tuple)
    preferences: Preferences = field(default_factory=Preferences)
    limitations: tuple[tuple[str, ContraindicationTag], ...] = field(default_factory=tuple)
    days_per_week: int = 3

    @property
    def avoided_tags(self) -> frozenset[ContraindicationTag]:
        return frozenset(tag for _, tag in self.limitations)

    def has_goal(self, goal: Goal) -> bool:
        return goal in self.goals
