"""Reference data: the exercise catalog and the day template registry."""

from strength_engine.catalog.exercise_catalog import ExerciseCatalog
from strength_engine.catalog.exercise_library import EXERCISES, default_catalog
from strength_engine.catalog.template_library import TEMPLATES, default_templates
from strength_engine.catalog.template_registry import TemplateRegistry, ordered_slots

__all__ = [
    "EXERCISES",
    "ExerciseCatalog",
    "TEMPLATES",
    "TemplateRegistry",
    "default_catalog",
    "default_templates",
    "ordered_slots",
]
