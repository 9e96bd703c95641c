"""VolumeScaler: set-count reduction from recovery signal severity.

Each recognised recovery flag adds one severity point. Severity maps to a
set multiplier through ``VOLUME_STEP_TABLE``; the result is floored to a
whole set with a minimum of one. The table is non-increasing, so more
active flags can never produce more sets.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from strength_engine.models.enums import (
    MIN_SETS_PER_EXERCISE,
    VOLUME_STEP_TABLE,
    RecoveryFlag,
)


class VolumeScaler:
    """Maps recovery flags to adjusted set counts."""

    def __init__(
        self, step_table: tuple[tuple[int, float], ...] = VOLUME_STEP_TABLE
    ) -> None:
        self.step_table = tuple(sorted(step_table))
        multipliers = [m for _, m in self.step_table]
        if multipliers != sorted(multipliers, reverse=True):
            raise ValueError("volume step table multipliers must not increase with severity")

    @staticmethod
    def severity(recovery_flags: Iterable[RecoveryFlag | str]) -> int:
        """Count distinct known recovery flags; unknown names are ignored."""
        known = set()
        for flag in recovery_flags:
            try:
                known.add(RecoveryFlag(flag))
            except ValueError:
                continue
        return len(known)

    def multiplier(self, severity: int) -> float:
        result = 1.0
        for threshold, mult in self.step_table:
            if severity >= threshold:
                result = mult
        return result

    def scale(self, base_sets: int, recovery_flags: Iterable[RecoveryFlag | str]) -> int:
        """Return the adjusted set count for *base_sets*."""
        mult = self.multiplier(self.severity(recovery_flags))
        # Round away float noise before flooring.
        return max(MIN_SETS_PER_EXERCISE, math.floor(round(base_sets * mult, 6)))
