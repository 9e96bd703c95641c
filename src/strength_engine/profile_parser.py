"""Build profiles, signals and requests from JSON-compatible dicts.

Required profile fields fail fast with InvalidProfile naming the field.
Equipment and limitations are never defaulted: a missing list could hide
a constraint and produce an unsafe plan. Unknown signal flags are kept on
``Signals.ignored_flags`` instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from strength_engine.exceptions import InvalidProfile
from strength_engine.models.enums import (
    EQUIPMENT_ALIASES,
    LIMITATION_ALIASES,
    BiomarkerFlag,
    ContraindicationTag,
    Equipment,
    Experience,
    Goal,
    RecoveryFlag,
)
from strength_engine.models.plan import BuildDayPlanRequest
from strength_engine.models.profile import Preferences, UserProfile
from strength_engine.models.signals import Signals

logger = logging.getLogger(__name__)


def _field(data: dict, *names: str) -> Any:
    """Value of the first present key among *names*; raise naming the first."""
    for name in names:
        if name in data and data[name] is not None:
            return data[name]
    raise InvalidProfile(f"Missing required profile field {names[0]!r}", field=names[0])


def parse_equipment(values: Iterable[str]) -> frozenset[Equipment]:
    items = set()
    for raw in values:
        key = str(raw).strip().lower()
        if key in EQUIPMENT_ALIASES:
            items.add(EQUIPMENT_ALIASES[key])
            continue
        try:
            items.add(Equipment(key))
        except ValueError:
            raise InvalidProfile(f"Unknown equipment {raw!r}", field="available_equipment") from None
    return frozenset(items)


def parse_limitation(value: str) -> ContraindicationTag:
    key = str(value).strip().lower()
    if key in LIMITATION_ALIASES:
        return LIMITATION_ALIASES[key]
    try:
        return ContraindicationTag(key)
    except ValueError:
        raise InvalidProfile(f"Unknown limitation {value!r}", field="limitations") from None


def _preference_set(values: Iterable[str] | None) -> frozenset[str]:
    """Exercise ids or modality names; modality shorthands like "db" are expanded."""
    names = set()
    for raw in values or ():
        key = str(raw).strip()
        alias = EQUIPMENT_ALIASES.get(key.lower())
        names.add(alias.value if alias is not None else key)
    return frozenset(names)


def parse_signals(data: dict | None) -> Signals:
    """Split raw flag names into known biomarker/recovery flags and the rest."""
    if not data:
        return Signals()

    biomarkers: set[BiomarkerFlag] = set()
    recovery: set[RecoveryFlag] = set()
    ignored: list[str] = []

    for raw in data.get("biomarker_flags", ()) or ():
        try:
            biomarkers.add(BiomarkerFlag(raw))
        except ValueError:
            ignored.append(str(raw))
    for raw in data.get("recovery_flags", ()) or ():
        try:
            recovery.add(RecoveryFlag(raw))
        except ValueError:
            ignored.append(str(raw))

    if ignored:
        logger.debug("Ignoring unknown signal flags: %s", ignored)
    return Signals(
        biomarker_flags=frozenset(biomarkers),
        recovery_flags=frozenset(recovery),
        ignored_flags=tuple(sorted(set(ignored))),
    )


def parse_profile(data: dict) -> UserProfile:
    """Build a UserProfile.

    Raises:
        InvalidProfile: If experience, equipment, limitations or the session
            cap is missing, or any value is not recognised.
    """
    if not isinstance(data, dict):
        raise InvalidProfile("Profile must be a mapping", field="user_profile")

    raw_experience = _field(data, "experience")
    try:
        experience = Experience(raw_experience)
    except ValueError:
        raise InvalidProfile(f"Unknown experience {raw_experience!r}", field="experience") from None

    equipment = parse_equipment(_field(data, "available_equipment", "equipment"))

    raw_limitations = _field(data, "limitations")
    if not isinstance(raw_limitations, dict):
        raise InvalidProfile("limitations must map body region to tag", field="limitations")
    limitations = tuple(
        sorted((str(region), parse_limitation(tag)) for region, tag in raw_limitations.items())
    )

    goals = []
    for raw in data.get("goals", ()) or ():
        try:
            goals.append(Goal(raw))
        except ValueError:
            raise InvalidProfile(f"Unknown goal {raw!r}", field="goals") from None

    prefs = data.get("preferences") or {}
    raw_cap = _field(data, "session_minutes_cap")
    try:
        cap = float(raw_cap)
    except (TypeError, ValueError):
        raise InvalidProfile("session_minutes_cap must be a number", field="session_minutes_cap") from None
    try:
        days_per_week = int(data.get("days_per_week", 3))
    except (TypeError, ValueError):
        raise InvalidProfile("days_per_week must be an integer", field="days_per_week") from None

    return UserProfile(
        experience=experience,
        equipment=equipment,
        session_minutes_cap=cap,
        goals=tuple(goals),
        preferences=Preferences(
            likes=_preference_set(prefs.get("likes")),
            dislikes=_preference_set(prefs.get("dislikes")),
        ),
        limitations=limitations,
        days_per_week=days_per_week,
    )


def parse_request(data: dict) -> BuildDayPlanRequest:
    """Build a BuildDayPlanRequest from the wire shape.

    Signals come from the request's ``signals``; a profile-embedded
    ``signals`` block is used only when the request has none.
    """
    profile_data = data.get("user_profile")
    if profile_data is None:
        raise InvalidProfile("Missing required field 'user_profile'", field="user_profile")
    profile = parse_profile(profile_data)

    for key in ("template_id", "day_key"):
        if not data.get(key):
            raise InvalidProfile(f"Missing required request field {key!r}", field=key)

    raw_signals = data.get("signals")
    if raw_signals is None:
        raw_signals = profile_data.get("signals")

    cap = data.get("time_cap_min")
    if cap is not None:
        try:
            cap = float(cap)
        except (TypeError, ValueError):
            raise InvalidProfile("time_cap_min must be a number", field="time_cap_min") from None
    return BuildDayPlanRequest(
        user_profile=profile,
        template_id=str(data["template_id"]),
        day_key=str(data["day_key"]),
        signals=parse_signals(raw_signals),
        time_cap_min=cap,
    )
