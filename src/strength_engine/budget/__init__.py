"""Session time estimation and time-budget trimming."""

from strength_engine.budget.trimmer import (
    TimeBudgetTrimmer,
    TrimResult,
    estimate_session_minutes,
    exercise_minutes,
)

__all__ = [
    "TimeBudgetTrimmer",
    "TrimResult",
    "estimate_session_minutes",
    "exercise_minutes",
]
