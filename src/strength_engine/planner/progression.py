"""Load progression: whether the next session should add, hold or drop load."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from strength_engine.models.enums import LoadDecision, RecoveryFlag
from strength_engine.models.plan import SessionRecord


def next_load_decision(
    recovery_flags: Iterable[RecoveryFlag],
    last_sessions: Sequence[SessionRecord],
) -> LoadDecision:
    """Decide the load change for an exercise's next session.

    Any active recovery flag means a deload. Otherwise load goes up only
    when each of the last two sessions reached the top of its rep range.
    With fewer than two sessions on record the load is held.
    """
    if any(True for _ in recovery_flags):
        return LoadDecision.DELOAD

    recent = list(last_sessions)[-2:]
    if len(recent) == 2 and all(s.completed_reps >= s.target_reps_max for s in recent):
        return LoadDecision.INCREASE_SMALL

    return LoadDecision.MAINTAIN
