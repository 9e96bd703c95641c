"""Command-line entry point: build a day plan from a JSON request file.

Usage:
    python -m strength_engine.cli build request.json
    python -m strength_engine.cli build request.json --format table
    python -m strength_engine.cli alternates swap.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from strength_engine.catalog import default_catalog, default_templates
from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.loader import load_reference_file
from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.config import EngineSettings, load_settings
from strength_engine.exceptions import ConfigurationError, InvalidProfile
from strength_engine.planner import PlanAssembler, swap_alternates
from strength_engine.profile_parser import parse_profile, parse_request, parse_signals
from strength_engine.serialization import (
    to_alternates_list,
    to_plan_frame,
    to_plan_json_string,
)

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)


def _reference_data(settings: EngineSettings) -> tuple[ExerciseCatalog, TemplateRegistry]:
    if settings.catalog_path is not None:
        return load_reference_file(settings.catalog_path)
    return default_catalog(), default_templates()


def _cmd_build(args: argparse.Namespace, settings: EngineSettings) -> int:
    catalog, templates = _reference_data(settings)
    assembler = PlanAssembler.from_settings(catalog, templates, settings)
    request = parse_request(_load_json(args.request))
    plan = assembler.build_day_plan(request)
    logger.info(
        "Built %s/%s: %d exercises, %.1f min",
        plan.template_id,
        plan.day_key,
        len(plan.exercises),
        plan.estimated_time_min,
    )

    if args.format == "table":
        print(to_plan_frame(plan).to_string(index=False))
        for note in plan.notes:
            print(f"- {note}")
        print(f"Estimated time: {plan.estimated_time_min:.1f} min")
    else:
        print(to_plan_json_string(plan))
    return 0


def _cmd_alternates(args: argparse.Namespace, settings: EngineSettings) -> int:
    catalog, templates = _reference_data(settings)
    data = _load_json(args.request)
    profile_data = data.get("user_profile")
    if profile_data is None:
        raise InvalidProfile("Missing required field 'user_profile'", field="user_profile")
    for key in ("template_id", "slot"):
        if not data.get(key):
            raise InvalidProfile(f"Missing required request field {key!r}", field=key)
    results = swap_alternates(
        catalog,
        templates,
        template_id=data["template_id"],
        slot_name=data["slot"],
        current_id=data.get("current_exercise_id", ""),
        profile=parse_profile(profile_data),
        signals=parse_signals(data.get("signals")),
    )
    print(json.dumps(to_alternates_list(results), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic strength workout planner")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a day plan")
    build.add_argument("request", type=Path, help="JSON request file")
    build.add_argument("--format", choices=("json", "table"), default="json")

    alternates = sub.add_parser("alternates", help="List swap alternates for a slot")
    alternates.add_argument("request", type=Path, help="JSON swap request file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    handlers = {"build": _cmd_build, "alternates": _cmd_alternates}
    try:
        return handlers[args.command](args, settings)
    except InvalidProfile as exc:
        logger.error("Invalid profile (%s): %s", exc.field, exc)
        return 2
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 3
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read request: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
