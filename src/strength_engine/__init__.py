"""Deterministic single-day strength workout planner."""

from strength_engine.catalog import default_catalog, default_templates
from strength_engine.exceptions import (
    CatalogError,
    ConfigurationError,
    InvalidProfile,
    StrengthEngineError,
    UnknownExercise,
    UnknownTemplate,
)
from strength_engine.models.plan import BuildDayPlanRequest, DayPlan
from strength_engine.planner import PlanAssembler


def build_day_plan(request: BuildDayPlanRequest) -> DayPlan:
    """Build a plan against the built-in catalog and templates.

    Long-running callers should construct one PlanAssembler at startup and
    reuse it instead.
    """
    return PlanAssembler(default_catalog(), default_templates()).build_day_plan(request)


__all__ = [
    "BuildDayPlanRequest",
    "CatalogError",
    "ConfigurationError",
    "DayPlan",
    "InvalidProfile",
    "PlanAssembler",
    "StrengthEngineError",
    "UnknownExercise",
    "UnknownTemplate",
    "build_day_plan",
    "default_catalog",
    "default_templates",
]
