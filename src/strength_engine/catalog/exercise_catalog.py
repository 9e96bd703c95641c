"""Exercise catalog: read-only lookup from exercise id to Exercise."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from strength_engine.exceptions import CatalogError, UnknownExercise
from strength_engine.models.enums import MovementPattern
from strength_engine.models.exercise import Exercise


class ExerciseCatalog:
    """Immutable exercise library, built once and injected into the planner.

    Declaration order is preserved: ``candidates_for_pattern`` returns
    exercises in the order they were given, and ``index_of`` exposes that
    position so scoring ties are broken deterministically.

    Usage::

        catalog = ExerciseCatalog(EXERCISES)
        squats = catalog.candidates_for_pattern(MovementPattern.SQUAT)
    """

    def __init__(self, exercises: Iterable[Exercise]) -> None:
        ordered: list[Exercise] = []
        index: dict[str, int] = {}
        for exercise in exercises:
            if exercise.id in index:
                raise CatalogError(f"Duplicate exercise id {exercise.id!r}")
            index[exercise.id] = len(ordered)
            ordered.append(exercise)

        self._exercises: tuple[Exercise, ...] = tuple(ordered)
        self._index = index
        by_pattern: dict[MovementPattern, list[Exercise]] = {}
        for exercise in self._exercises:
            by_pattern.setdefault(exercise.pattern, []).append(exercise)
        self._by_pattern = {p: tuple(exs) for p, exs in by_pattern.items()}

    def get(self, exercise_id: str) -> Exercise:
        """Look up an exercise by id.

        Raises:
            UnknownExercise: If the id is not in the catalog.
        """
        try:
            return self._exercises[self._index[exercise_id]]
        except KeyError:
            raise UnknownExercise(exercise_id) from None

    def candidates_for_pattern(self, pattern: MovementPattern) -> tuple[Exercise, ...]:
        """All exercises for *pattern*, in declaration order."""
        return self._by_pattern.get(pattern, ())

    def index_of(self, exercise_id: str) -> int:
        """Declaration index of an exercise (lower wins score ties)."""
        try:
            return self._index[exercise_id]
        except KeyError:
            raise UnknownExercise(exercise_id) from None

    @property
    def patterns(self) -> frozenset[MovementPattern]:
        return frozenset(self._by_pattern)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._index

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)
