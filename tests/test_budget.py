"""Tests for session time estimation and TimeBudgetTrimmer."""

from __future__ import annotations

import pytest

from strength_engine.budget import (
    TimeBudgetTrimmer,
    estimate_session_minutes,
    exercise_minutes,
)
from strength_engine.models.enums import LiftClass, Modality, MovementPattern, SlotPriority
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.plan import PlannedExercise
from strength_engine.models.template import Slot


def _make_planned(
    name: str,
    priority: SlotPriority,
    order: int,
    sets: int,
    reps_high: int,
    rest_s: int,
) -> PlannedExercise:
    rx = Prescription(sets=sets, reps_low=min(8, reps_high), reps_high=reps_high, rest_s=rest_s)
    exercise = Exercise(
        id=name,
        name=name,
        pattern=MovementPattern.SQUAT,
        modality=Modality.DUMBBELL,
        lift_class=LiftClass.MAIN,
        base=rx,
    )
    return PlannedExercise(
        exercise=exercise,
        slot=Slot(f"{name}_slot", MovementPattern.SQUAT, priority),
        prescription=rx,
        order=order,
        estimated_minutes=round(exercise_minutes(rx), 1),
    )


@pytest.fixture
def draft() -> list[PlannedExercise]:
    """Two main lifts, one secondary, two accessories: 39.1 min with warm-up."""
    return [
        _make_planned("squat", SlotPriority.MAIN, 0, sets=4, reps_high=12, rest_s=120),
        _make_planned("press", SlotPriority.MAIN, 1, sets=4, reps_high=12, rest_s=120),
        _make_planned("pulldown", SlotPriority.SECONDARY, 2, sets=3, reps_high=12, rest_s=90),
        _make_planned("curl", SlotPriority.ACCESSORY, 3, sets=2, reps_high=15, rest_s=60),
        _make_planned("extension", SlotPriority.ACCESSORY, 4, sets=2, reps_high=15, rest_s=60),
    ]


class TestEstimate:
    def test_exercise_minutes(self) -> None:
        rx = Prescription(sets=4, reps_low=8, reps_high=12, rest_s=120)
        # 4 x (12 x 3s + 120s) = 624s
        assert exercise_minutes(rx) == pytest.approx(10.4)

    def test_empty_plan_is_overhead_only(self) -> None:
        assert estimate_session_minutes([]) == 5.0

    def test_session_estimate(self, draft: list[PlannedExercise]) -> None:
        assert TimeBudgetTrimmer().estimate(draft) == pytest.approx(39.1)

    def test_custom_timing(self) -> None:
        rx = Prescription(sets=1, reps_low=10, reps_high=10, rest_s=0)
        assert estimate_session_minutes([rx], overhead_min=0.0, seconds_per_rep=6.0) == 1.0

    def test_minimum_core(self, draft: list[PlannedExercise]) -> None:
        assert TimeBudgetTrimmer().minimum_core_minutes(draft) == pytest.approx(25.8)


class TestTrim:
    def test_fits_without_trimming(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 40)
        assert result.kept == tuple(draft)
        assert result.removed == ()
        assert not result.over_budget

    def test_last_accessory_removed_first(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 35)
        assert [pe.exercise.id for pe in result.removed] == ["extension", "curl"]
        assert [pe.exercise.id for pe in result.kept] == ["squat", "press", "pulldown"]
        assert result.estimated_time_min == pytest.approx(32.1)
        assert result.estimated_time_min <= 35

    def test_secondary_before_main(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 30)
        assert [pe.exercise.id for pe in result.kept] == ["squat", "press"]
        assert result.removed[-1].exercise.id == "pulldown"
        assert not result.over_budget

    def test_main_lifts_never_removed(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 20)
        assert [pe.exercise.id for pe in result.kept] == ["squat", "press"]
        assert result.over_budget
        assert result.estimated_time_min == pytest.approx(25.8)

    def test_cap_equal_to_estimate_fits(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 39.1)
        assert result.removed == ()

    def test_kept_order_preserved(self, draft: list[PlannedExercise]) -> None:
        result = TimeBudgetTrimmer().trim(draft, 36)
        orders = [pe.order for pe in result.kept]
        assert orders == sorted(orders)

    def test_plain_int_priorities_protect_main_lifts(self) -> None:
        draft = [
            _make_planned("squat", 1, 0, sets=4, reps_high=12, rest_s=120),
            _make_planned("press", 1, 1, sets=4, reps_high=12, rest_s=120),
            _make_planned("curl", 3, 2, sets=2, reps_high=15, rest_s=60),
        ]
        result = TimeBudgetTrimmer().trim(draft, 20)
        assert [pe.exercise.id for pe in result.kept] == ["squat", "press"]
        assert [pe.exercise.id for pe in result.removed] == ["curl"]
        assert result.over_budget
