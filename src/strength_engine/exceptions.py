"""Custom exception hierarchy for the strength engine."""

from __future__ import annotations


class StrengthEngineError(Exception):
    """Base exception for all strength_engine errors."""


class ConfigurationError(StrengthEngineError):
    """Reference data (catalog, templates) is missing or malformed."""


class UnknownTemplate(ConfigurationError, KeyError):
    """A template id, day key or slot name does not resolve."""

    def __init__(self, message: str, template_id: str, day_key: str | None = None) -> None:
        super().__init__(message)
        self.template_id = template_id
        self.day_key = day_key

    def __str__(self) -> str:
        return self.args[0]


class UnknownExercise(ConfigurationError, KeyError):
    """An exercise id is not present in the catalog."""

    def __init__(self, exercise_id: str) -> None:
        super().__init__(f"Exercise {exercise_id!r} not found in catalog")
        self.exercise_id = exercise_id

    def __str__(self) -> str:
        return self.args[0]


class CatalogError(ConfigurationError):
    """A catalog or template entry could not be loaded."""


class InvalidProfile(StrengthEngineError, ValueError):
    """A required user profile or request field is absent or invalid."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field
