"""Environment-variable-based configuration for the strength engine.

Read once at process start via ``load_settings()`` and passed into the
planner; the builder itself never touches the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from strength_engine.models.enums import SECONDS_PER_REP, WARMUP_OVERHEAD_MIN


@dataclass(frozen=True)
class EngineSettings:
    log_level: str = "INFO"
    warmup_overhead_min: float = WARMUP_OVERHEAD_MIN
    seconds_per_rep: float = SECONDS_PER_REP
    catalog_path: Path | None = None  # None = built-in library


def load_settings(environ: dict[str, str] | None = None) -> EngineSettings:
    """Build settings from environment variables.

    Variables:
        STRENGTH_ENGINE_LOG_LEVEL: logging level name (default INFO).
        STRENGTH_ENGINE_WARMUP_MIN: warm-up/transition overhead minutes.
        STRENGTH_ENGINE_SECONDS_PER_REP: working seconds per repetition.
        STRENGTH_ENGINE_CATALOG_PATH: JSON file with exercises and templates.
    """
    env = os.environ if environ is None else environ
    catalog_path = env.get("STRENGTH_ENGINE_CATALOG_PATH", "")
    return EngineSettings(
        log_level=env.get("STRENGTH_ENGINE_LOG_LEVEL", "INFO").upper(),
        warmup_overhead_min=float(
            env.get("STRENGTH_ENGINE_WARMUP_MIN", str(WARMUP_OVERHEAD_MIN))
        ),
        seconds_per_rep=float(
            env.get("STRENGTH_ENGINE_SECONDS_PER_REP", str(SECONDS_PER_REP))
        ),
        catalog_path=Path(catalog_path).expanduser() if catalog_path else None,
    )
