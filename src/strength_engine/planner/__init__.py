"""Planner: assembles a day's session and related per-exercise decisions."""

from strength_engine.planner.alternates import swap_alternates
from strength_engine.planner.assembler import PlanAssembler
from strength_engine.planner.prescription import base_prescription
from strength_engine.planner.progression import next_load_decision

__all__ = [
    "PlanAssembler",
    "base_prescription",
    "next_load_decision",
    "swap_alternates",
]
