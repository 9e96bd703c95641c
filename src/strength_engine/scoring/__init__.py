"""Exercise scoring against a profile and signals."""

from strength_engine.scoring.scorer import ExerciseScorer

__all__ = ["ExerciseScorer"]
