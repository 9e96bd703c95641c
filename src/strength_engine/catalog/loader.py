"""Load exercise catalogs and day templates from JSON-compatible data.

The file-backed counterpart of ``exercise_library`` / ``template_library``.
Any malformed entry is a configuration error and fails the whole load.

Expected shape::

    {
      "exercises": [
        {"id": "...", "name": "...", "pattern": "squat", "modality": "barbell",
         "lift_class": "main", "muscles": [...], "contraindications": [...],
         "gear": ["rack"], "technical": false,
         "base": {"sets": 4, "reps_low": 6, "reps_high": 10, "rest_s": 150}}
      ],
      "templates": [
        {"id": "...", "name": "...",
         "days": {"dayA": [{"name": "...", "pattern": "squat", "priority": 1,
                            "substitutable": true}]}}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.exceptions import CatalogError
from strength_engine.models.enums import (
    ContraindicationTag,
    Equipment,
    LiftClass,
    Modality,
    MovementPattern,
    SlotPriority,
)
from strength_engine.models.exercise import Exercise, Prescription
from strength_engine.models.template import Slot, Template

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _enum(enum_cls: type[E], value: Any, where: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise CatalogError(
            f"{where}: {value!r} is not a valid {enum_cls.__name__}"
        ) from None


def _require(entry: dict, key: str, where: str) -> Any:
    if key not in entry:
        raise CatalogError(f"{where}: missing required field {key!r}")
    return entry[key]


def parse_exercise(entry: dict) -> Exercise:
    """Build one Exercise from a dict, raising CatalogError on bad data."""
    where = f"exercise {entry.get('id', '<no id>')!r}"
    base = _require(entry, "base", where)
    try:
        prescription = Prescription(
            sets=int(base["sets"]),
            reps_low=int(base["reps_low"]),
            reps_high=int(base["reps_high"]),
            rest_s=int(base["rest_s"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"{where}: invalid base prescription ({exc})") from exc

    return Exercise(
        id=str(_require(entry, "id", where)),
        name=str(_require(entry, "name", where)),
        pattern=_enum(MovementPattern, _require(entry, "pattern", where), where),
        modality=_enum(Modality, _require(entry, "modality", where), where),
        lift_class=_enum(LiftClass, entry.get("lift_class", "accessory"), where),
        base=prescription,
        muscles=tuple(entry.get("muscles", ())),
        contraindications=frozenset(
            _enum(ContraindicationTag, t, where) for t in entry.get("contraindications", ())
        ),
        gear=frozenset(_enum(Equipment, g, where) for g in entry.get("gear", ())),
        technical=bool(entry.get("technical", False)),
    )


def parse_template(entry: dict) -> Template:
    """Build one Template from a dict, raising CatalogError on bad data."""
    where = f"template {entry.get('id', '<no id>')!r}"
    days_raw = _require(entry, "days", where)
    if not isinstance(days_raw, dict) or not days_raw:
        raise CatalogError(f"{where}: 'days' must be a non-empty mapping")

    days: list[tuple[str, tuple[Slot, ...]]] = []
    for day_key, slots_raw in days_raw.items():
        day_where = f"{where} day {day_key!r}"
        slots = []
        for slot in slots_raw:
            priority = _require(slot, "priority", day_where)
            slots.append(Slot(
                name=str(_require(slot, "name", day_where)),
                pattern=_enum(MovementPattern, _require(slot, "pattern", day_where), day_where),
                priority=_enum(SlotPriority, priority, day_where),
                substitutable=bool(slot.get("substitutable", True)),
            ))
        days.append((str(day_key), tuple(slots)))

    return Template(
        id=str(_require(entry, "id", where)),
        name=str(entry.get("name", entry["id"])),
        days=tuple(days),
    )


def load_catalog(entries: list[dict]) -> ExerciseCatalog:
    return ExerciseCatalog(parse_exercise(e) for e in entries)


def load_templates(entries: list[dict]) -> TemplateRegistry:
    return TemplateRegistry(parse_template(e) for e in entries)


def load_reference_file(path: Path) -> tuple[ExerciseCatalog, TemplateRegistry]:
    """Load both registries from a JSON file.

    Raises:
        CatalogError: If the file is unreadable or any entry is malformed.
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Could not read reference data from {path}: {exc}") from exc

    catalog = load_catalog(data.get("exercises", []))
    templates = load_templates(data.get("templates", []))
    logger.info(
        "Loaded %d exercises and %d templates from %s",
        len(catalog),
        len(templates.template_ids),
        path,
    )
    return catalog, templates
