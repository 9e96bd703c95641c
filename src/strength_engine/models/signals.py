"""Per-request physiological signals supplied by the caller."""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import BiomarkerFlag, RecoveryFlag


@dataclass(frozen=True)
class Signals:
    """Biomarker and recovery flags for one build call.

    ``ignored_flags`` keeps raw flag names that were not recognised so the
    plan can report them; they never affect the prescription.
    """

    biomarker_flags: frozenset[BiomarkerFlag] = field(default_factory=frozenset)
    recovery_flags: frozenset[RecoveryFlag] = field(default_factory=frozenset)
    ignored_flags: tuple[str, ...] = field(default_factory=tuple)

    def has_biomarker(self, flag: BiomarkerFlag) -> bool:
        return flag in self.biomarker_flags

    @property
    def recovery_compromised(self) -> bool:
        return len(self.recovery_flags) > 0
