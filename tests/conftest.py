"""Shared test fixtures: reference data, user profiles and signal states."""

from __future__ import annotations

import pytest

from strength_engine.catalog import default_catalog, default_templates
from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.models.enums import (
    BiomarkerFlag,
    ContraindicationTag,
    Equipment,
    Experience,
    Goal,
    RecoveryFlag,
)
from strength_engine.models.profile import Preferences, UserProfile
from strength_engine.models.signals import Signals
from strength_engine.planner import PlanAssembler


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return default_catalog()


@pytest.fixture
def templates() -> TemplateRegistry:
    return default_templates()


@pytest.fixture
def assembler(catalog: ExerciseCatalog, templates: TemplateRegistry) -> PlanAssembler:
    return PlanAssembler(catalog, templates)


@pytest.fixture
def dumbbell_profile() -> UserProfile:
    """Intermediate hypertrophy trainee with a dumbbell/cable/machine gym, likes dumbbells."""
    return UserProfile(
        experience=Experience.INTERMEDIATE,
        equipment=frozenset({
            Equipment.DUMBBELL,
            Equipment.BENCH,
            Equipment.CABLE,
            Equipment.MACHINE,
        }),
        session_minutes_cap=60.0,
        goals=(Goal.HYPERTROPHY,),
        preferences=Preferences(likes=frozenset({"dumbbell"})),
    )


@pytest.fixture
def shoulder_limited_profile(dumbbell_profile: UserProfile) -> UserProfile:
    """Same trainee with a shoulder limitation ruling out overhead work."""
    return UserProfile(
        experience=dumbbell_profile.experience,
        equipment=dumbbell_profile.equipment,
        session_minutes_cap=dumbbell_profile.session_minutes_cap,
        goals=dumbbell_profile.goals,
        preferences=dumbbell_profile.preferences,
        limitations=(("shoulder", ContraindicationTag.OVERHEAD),),
    )


@pytest.fixture
def barbell_strength_profile() -> UserProfile:
    """Strength-focused lifter with a barbell gym but no cable stack or pull-up bar."""
    return UserProfile(
        experience=Experience.ADVANCED,
        equipment=frozenset({
            Equipment.BARBELL,
            Equipment.RACK,
            Equipment.BENCH,
            Equipment.DUMBBELL,
            Equipment.MACHINE,
        }),
        session_minutes_cap=75.0,
        goals=(Goal.STRENGTH,),
    )


@pytest.fixture
def no_signals() -> Signals:
    return Signals()


@pytest.fixture
def poor_recovery() -> Signals:
    """Two recovery flags: HRV trending down and poor sleep."""
    return Signals(
        recovery_flags=frozenset({RecoveryFlag.HRV_DOWN_3D, RecoveryFlag.SLEEP_POOR}),
    )


@pytest.fixture
def elevated_bp() -> Signals:
    return Signals(biomarker_flags=frozenset({BiomarkerFlag.ELEVATED_BP}))


@pytest.fixture
def dumbbell_request_data() -> dict:
    """Wire-format build request for the dumbbell trainee on full-body day A."""
    return {
        "user_profile": {
            "experience": "intermediate",
            "available_equipment": ["db", "bench", "cable", "machine"],
            "goals": ["hypertrophy"],
            "preferences": {"likes": ["db"], "dislikes": []},
            "limitations": {},
            "session_minutes_cap": 60,
        },
        "template_id": "template_fullbody_x3",
        "day_key": "dayA",
        "signals": {"biomarker_flags": [], "recovery_flags": []},
    }
