"""Goal and slot adjustments to an exercise's base prescription."""

from __future__ import annotations

from dataclasses import replace

from strength_engine.models.enums import (
    ACCESSORY_MIN_SETS,
    ENDURANCE_REPS_HIGH,
    ENDURANCE_REPS_LOW,
    ENDURANCE_REST_S,
    STRENGTH_REPS_HIGH,
    STRENGTH_REPS_LOW,
    STRENGTH_REST_S,
    Goal,
    SlotPriority,
)
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.profile import UserProfile
from strength_engine.models.template import Slot


def base_prescription(
    exercise: Exercise, slot: Slot, profile: UserProfile
) -> tuple[Prescription, tuple[str, ...]]:
    """Start from the exercise's base and apply goal and slot adjustments.

    - strength on MAIN slots: reps capped at 5-8, rest at least 180 s
    - endurance: reps raised to at least 12-15, rest at most 60 s
    - ACCESSORY slots: one set fewer, never below two

    Safety clamps and recovery scaling are applied afterwards by the
    assembler.

    Returns:
        The adjusted prescription and the reasons for each adjustment.
    """
    rx = exercise.base
    reasons: list[str] = []

    if profile.has_goal(Goal.STRENGTH) and slot.priority == SlotPriority.MAIN:
        low = min(rx.reps_low, STRENGTH_REPS_LOW)
        high = max(min(rx.reps_high, STRENGTH_REPS_HIGH), low)
        rx = replace(rx, reps_low=low, reps_high=high, rest_s=max(rx.rest_s, STRENGTH_REST_S))
        reasons.append("strength goal: lower reps, longer rest")
    elif profile.has_goal(Goal.ENDURANCE):
        low = max(rx.reps_low, ENDURANCE_REPS_LOW)
        high = max(rx.reps_high, ENDURANCE_REPS_HIGH, low)
        rx = replace(rx, reps_low=low, reps_high=high, rest_s=min(rx.rest_s, ENDURANCE_REST_S))
        reasons.append("endurance goal: higher reps, shorter rest")

    if slot.priority == SlotPriority.ACCESSORY and rx.sets > ACCESSORY_MIN_SETS:
        rx = replace(rx, sets=max(ACCESSORY_MIN_SETS, rx.sets - 1))
        reasons.append("accessory: reduced volume")

    return rx, tuple(reasons)
