"""Tests for PlanAssembler: end-to-end day plan construction."""

from __future__ import annotations

from dataclasses import replace

import pytest

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.exceptions import InvalidProfile, UnknownTemplate
from strength_engine.models.enums import (
    BiomarkerFlag,
    ContraindicationTag,
    Equipment,
    Experience,
    LiftClass,
    Modality,
    MovementPattern,
    RecoveryFlag,
    SlotPriority,
)
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.plan import BuildDayPlanRequest, DayPlan
from strength_engine.models.profile import Preferences, UserProfile
from strength_engine.models.signals import Signals
from strength_engine.models.template import Slot, Template
from strength_engine.planner import PlanAssembler


def _make_request(profile: UserProfile, **overrides) -> BuildDayPlanRequest:
    defaults = dict(
        user_profile=profile,
        template_id="template_fullbody_x3",
        day_key="dayA",
    )
    defaults.update(overrides)
    return BuildDayPlanRequest(**defaults)


def _ids(plan: DayPlan) -> list[str]:
    return [pe.exercise.id for pe in plan.exercises]


def _by_slot(plan: DayPlan) -> dict:
    return {pe.slot.name: pe for pe in plan.exercises}


class TestDumbbellGym:
    def test_full_plan_within_cap(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile))
        assert _ids(plan) == [
            "db_goblet_squat",
            "flat_db_press",
            "lat_pulldown",
            "db_curl",
            "db_overhead_tricep_extension",
        ]
        assert plan.estimated_time_min == pytest.approx(39.1)
        assert plan.time_cap_min == 60.0
        assert plan.is_complete
        assert not plan.over_budget

    def test_accessories_lose_a_set(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile))
        slots = _by_slot(plan)
        assert slots["accessory_biceps"].sets == 2
        assert slots["squat_pattern"].sets == 4
        assert plan.total_sets == 15

    def test_only_available_equipment_used(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile))
        for pe in plan.exercises:
            assert pe.exercise.required_equipment <= dumbbell_profile.equipment

    def test_priority_order(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile))
        priorities = [pe.priority for pe in plan.exercises]
        assert priorities == sorted(priorities)

    def test_reasons_attached(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile))
        squat = _by_slot(plan)["squat_pattern"]
        assert "preferred" in squat.reasons
        assert "equipment available" in squat.reasons

    def test_disliked_exercise_loses_tie(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        profile = UserProfile(
            experience=dumbbell_profile.experience,
            equipment=dumbbell_profile.equipment,
            session_minutes_cap=60.0,
            goals=dumbbell_profile.goals,
            preferences=Preferences(
                likes=frozenset({"dumbbell"}),
                dislikes=frozenset({"db_goblet_squat"}),
            ),
        )
        plan = assembler.build_day_plan(_make_request(profile))
        assert _by_slot(plan)["squat_pattern"].exercise.id == "db_front_squat"


class TestTimeBudget:
    def test_accessories_trimmed_last_first(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=35))
        assert _ids(plan) == ["db_goblet_squat", "flat_db_press", "lat_pulldown"]
        assert plan.trimmed_exercises == ("db_overhead_tricep_extension", "db_curl")
        assert plan.estimated_time_min <= 35
        assert plan.estimated_time_min == pytest.approx(32.1)
        assert any(n.startswith("Time budget exceeded (39.1min > 35min)") for n in plan.notes)

    def test_profile_cap_used_by_default(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        untrimmed = assembler.build_day_plan(_make_request(dumbbell_profile))
        profile = replace(dumbbell_profile, session_minutes_cap=35.0)
        plan = assembler.build_day_plan(_make_request(profile))
        assert len(plan.exercises) < len(untrimmed.exercises)
        assert plan.estimated_time_min <= 35

    def test_request_cap_overrides_profile(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=35))
        assert plan.time_cap_min == 35

    def test_unreachable_cap_keeps_main_lifts(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=20))
        assert _ids(plan) == ["db_goblet_squat", "flat_db_press"]
        assert plan.over_budget
        assert plan.estimated_time_min == pytest.approx(25.8)
        assert any("Main lifts alone need 25.8min" in n for n in plan.notes)

    def test_main_slots_survive_any_cap(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        for cap in (5, 15, 25, 35, 45):
            plan = assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=cap))
            mains = [pe for pe in plan.exercises if pe.priority == SlotPriority.MAIN]
            assert len(mains) == 2
            if not plan.over_budget:
                assert plan.estimated_time_min <= cap


class TestRecovery:
    def test_poor_recovery_reduces_volume(
        self,
        assembler: PlanAssembler,
        dumbbell_profile: UserProfile,
        poor_recovery: Signals,
    ) -> None:
        baseline = assembler.build_day_plan(_make_request(dumbbell_profile))
        scaled = assembler.build_day_plan(_make_request(dumbbell_profile, signals=poor_recovery))
        assert scaled.total_sets < baseline.total_sets
        assert [pe.sets for pe in scaled.exercises] == [3, 3, 2, 1, 1]
        assert "Volume scaled due to low recovery (hrv_down_3d, sleep_poor)" in scaled.notes

    def test_every_exercise_keeps_a_set(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        signals = Signals(recovery_flags=frozenset(RecoveryFlag))
        plan = assembler.build_day_plan(_make_request(dumbbell_profile, signals=signals))
        assert all(pe.sets >= 1 for pe in plan.exercises)

    def test_unknown_flags_reported_not_applied(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        signals = Signals(ignored_flags=("mercury_retrograde",))
        plan = assembler.build_day_plan(_make_request(dumbbell_profile, signals=signals))
        assert plan.total_sets == 15
        assert "Ignored unrecognised flags: mercury_retrograde" in plan.notes

    def test_recovery_keeps_the_same_exercises_under_a_cap(
        self,
        assembler: PlanAssembler,
        dumbbell_profile: UserProfile,
        poor_recovery: Signals,
    ) -> None:
        rested = assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=35))
        tired = assembler.build_day_plan(
            _make_request(dumbbell_profile, time_cap_min=35, signals=poor_recovery)
        )
        assert _ids(tired) == _ids(rested) == ["db_goblet_squat", "flat_db_press", "lat_pulldown"]
        assert tired.trimmed_exercises == rested.trimmed_exercises
        assert [pe.sets for pe in tired.exercises] == [3, 3, 2]
        assert tired.estimated_time_min < rested.estimated_time_min

    def test_more_flags_never_add_sets(
        self,
        assembler: PlanAssembler,
        templates: TemplateRegistry,
        dumbbell_profile: UserProfile,
        barbell_strength_profile: UserProfile,
        shoulder_limited_profile: UserProfile,
    ) -> None:
        chain = [
            frozenset(),
            frozenset({RecoveryFlag.HRV_DOWN_3D}),
            frozenset({RecoveryFlag.HRV_DOWN_3D, RecoveryFlag.SLEEP_POOR}),
            frozenset({
                RecoveryFlag.HRV_DOWN_3D,
                RecoveryFlag.SLEEP_POOR,
                RecoveryFlag.HIGH_SORENESS,
            }),
            frozenset(RecoveryFlag),
        ]
        for profile in (dumbbell_profile, barbell_strength_profile, shoulder_limited_profile):
            for template_id in templates.template_ids:
                for day_key in templates.get(template_id).day_keys:
                    for cap in (20, 25, 30, 35, 45, 60):
                        plans = [
                            assembler.build_day_plan(
                                _make_request(
                                    profile,
                                    template_id=template_id,
                                    day_key=day_key,
                                    time_cap_min=cap,
                                    signals=Signals(recovery_flags=flags),
                                )
                            )
                            for flags in chain
                        ]
                        sets = [p.total_sets for p in plans]
                        assert sets == sorted(sets, reverse=True), (template_id, day_key, cap)
                        for plan in plans:
                            assert _ids(plan) == _ids(plans[0])
                            if not plan.over_budget:
                                assert plan.estimated_time_min <= cap


class TestSafety:
    def test_overhead_limitation_swaps_triceps(
        self, assembler: PlanAssembler, shoulder_limited_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(shoulder_limited_profile))
        assert _by_slot(plan)["accessory_triceps"].exercise.id == "cable_tricep_extension"
        for pe in plan.exercises:
            assert ContraindicationTag.OVERHEAD not in pe.exercise.contraindications

    def test_limitation_excluded_from_every_day(
        self,
        assembler: PlanAssembler,
        templates: TemplateRegistry,
        shoulder_limited_profile: UserProfile,
    ) -> None:
        for template_id in templates.template_ids:
            for day_key in templates.get(template_id).day_keys:
                plan = assembler.build_day_plan(_make_request(
                    shoulder_limited_profile, template_id=template_id, day_key=day_key,
                ))
                for pe in plan.exercises:
                    assert ContraindicationTag.OVERHEAD not in pe.exercise.contraindications

    def test_elevated_bp_clamps_main_lifts(
        self,
        assembler: PlanAssembler,
        barbell_strength_profile: UserProfile,
        elevated_bp: Signals,
    ) -> None:
        plan = assembler.build_day_plan(
            _make_request(barbell_strength_profile, signals=elevated_bp)
        )
        squat = _by_slot(plan)["squat_pattern"]
        assert squat.exercise.id == "barbell_back_squat"
        assert squat.reps == "6-8"
        assert squat.rest_s == 180
        assert any(n.startswith("Safety clamp on main lifts (elevated_bp") for n in plan.notes)

    def test_strength_goal_without_bp(
        self, assembler: PlanAssembler, barbell_strength_profile: UserProfile
    ) -> None:
        plan = assembler.build_day_plan(_make_request(barbell_strength_profile))
        press = _by_slot(plan)["horizontal_press"]
        assert press.exercise.id == "barbell_bench_press"
        assert press.reps == "5-8"
        assert press.rest_s == 180

    def test_stage2_hypertension_stricter(
        self, assembler: PlanAssembler, barbell_strength_profile: UserProfile
    ) -> None:
        signals = Signals(biomarker_flags=frozenset({
            BiomarkerFlag.ELEVATED_BP,
            BiomarkerFlag.HYPERTENSION_STAGE2,
        }))
        plan = assembler.build_day_plan(_make_request(barbell_strength_profile, signals=signals))
        for pe in plan.exercises:
            if pe.priority is SlotPriority.MAIN:
                assert pe.prescription.reps_low >= 8
                assert pe.rest_s >= 150

    def test_bp_clamp_skips_accessories(
        self,
        assembler: PlanAssembler,
        barbell_strength_profile: UserProfile,
        elevated_bp: Signals,
    ) -> None:
        plan = assembler.build_day_plan(
            _make_request(barbell_strength_profile, signals=elevated_bp)
        )
        curl = _by_slot(plan)["accessory_biceps"]
        assert curl.rest_s == 60


class TestStructuralGaps:
    def test_missing_equipment_leaves_slot_unresolved(
        self, assembler: PlanAssembler, barbell_strength_profile: UserProfile
    ) -> None:
        # no cable, pull-up bar, bands or bodyweight listed
        plan = assembler.build_day_plan(_make_request(barbell_strength_profile))
        assert plan.unresolved_slots == ("vertical_pull",)
        assert "Could not find valid exercise for slot: vertical_pull" in plan.notes
        assert not plan.is_complete
        assert plan.slot_count == 5

    def test_empty_pattern_in_custom_catalog(self) -> None:
        squat = Exercise(
            id="goblet",
            name="Goblet Squat",
            pattern=MovementPattern.SQUAT,
            modality=Modality.DUMBBELL,
            lift_class=LiftClass.MAIN,
            base=Prescription(sets=3, reps_low=8, reps_high=12, rest_s=90),
        )
        template = Template(
            id="tiny",
            name="Tiny",
            days=(("d1", (
                Slot("squat", MovementPattern.SQUAT, SlotPriority.MAIN),
                Slot("carry", MovementPattern.CARRY, SlotPriority.ACCESSORY),
            )),),
        )
        assembler = PlanAssembler(ExerciseCatalog([squat]), TemplateRegistry([template]))
        profile = UserProfile(
            experience=Experience.BEGINNER,
            equipment=frozenset({Equipment.DUMBBELL}),
            session_minutes_cap=30.0,
        )
        plan = assembler.build_day_plan(
            BuildDayPlanRequest(user_profile=profile, template_id="tiny", day_key="d1")
        )
        assert _ids(plan) == ["goblet"]
        assert plan.unresolved_slots == ("carry",)


class TestErrors:
    def test_unknown_template(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        with pytest.raises(UnknownTemplate):
            assembler.build_day_plan(_make_request(dumbbell_profile, template_id="nope"))

    def test_unknown_day(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        with pytest.raises(UnknownTemplate) as exc_info:
            assembler.build_day_plan(_make_request(dumbbell_profile, day_key="dayZ"))
        assert exc_info.value.day_key == "dayZ"

    def test_empty_equipment(self, assembler: PlanAssembler) -> None:
        profile = UserProfile(
            experience=Experience.BEGINNER,
            equipment=frozenset(),
            session_minutes_cap=45.0,
        )
        with pytest.raises(InvalidProfile) as exc_info:
            assembler.build_day_plan(_make_request(profile))
        assert exc_info.value.field == "equipment"

    def test_non_positive_cap(
        self, assembler: PlanAssembler, dumbbell_profile: UserProfile
    ) -> None:
        with pytest.raises(InvalidProfile) as exc_info:
            assembler.build_day_plan(_make_request(dumbbell_profile, time_cap_min=0))
        assert exc_info.value.field == "time_cap_min"


class TestDeterminism:
    def test_same_request_same_plan(
        self,
        assembler: PlanAssembler,
        dumbbell_profile: UserProfile,
        poor_recovery: Signals,
    ) -> None:
        request = _make_request(dumbbell_profile, signals=poor_recovery, time_cap_min=35)
        assert assembler.build_day_plan(request) == assembler.build_day_plan(request)

    def test_fresh_assembler_same_plan(
        self,
        catalog: ExerciseCatalog,
        templates: TemplateRegistry,
        dumbbell_profile: UserProfile,
    ) -> None:
        request = _make_request(dumbbell_profile, day_key="dayC")
        first = PlanAssembler(catalog, templates).build_day_plan(request)
        second = PlanAssembler(catalog, templates).build_day_plan(request)
        assert first == second

    def test_package_level_entry_point(self, dumbbell_profile: UserProfile) -> None:
        from strength_engine import build_day_plan

        plan = build_day_plan(_make_request(dumbbell_profile))
        assert len(plan.exercises) == 5
