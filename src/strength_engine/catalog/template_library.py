"""Default day templates.

Priority 1 slots hold the main compound lifts and are protected from
time-budget trimming; priority 3 slots are the first to go.
"""

from __future__ import annotations

from strength_engine.catalog.template_registry import TemplateRegistry
from strength_engine.models.enums import MovementPattern as P, SlotPriority
from strength_engine.models.template import Slot, Template

MAIN = SlotPriority.MAIN
SECONDARY = SlotPriority.SECONDARY
ACCESSORY = SlotPriority.ACCESSORY


TEMPLATES: tuple[Template, ...] = (
    Template(
        id="template_fullbody_x3",
        name="Full Body 3x/week",
        days=(
            ("dayA", (
                Slot("squat_pattern", P.SQUAT, MAIN),
                Slot("horizontal_press", P.HORIZONTAL_PRESS, MAIN),
                Slot("vertical_pull", P.VERTICAL_PULL, SECONDARY),
                Slot("accessory_biceps", P.ELBOW_FLEXION, ACCESSORY),
                Slot("accessory_triceps", P.ELBOW_EXTENSION, ACCESSORY),
            )),
            ("dayB", (
                Slot("hip_hinge", P.HINGE, MAIN),
                Slot("horizontal_pull", P.HORIZONTAL_PULL, MAIN),
                Slot("overhead_press", P.VERTICAL_PRESS, SECONDARY),
                Slot("accessory_rear_delt", P.REAR_DELT, ACCESSORY),
                Slot("accessory_hamstrings", P.KNEE_FLEXION, ACCESSORY),
                Slot("accessory_calves", P.CALF, ACCESSORY),
            )),
            ("dayC", (
                Slot("squat_pattern", P.SQUAT, MAIN),
                Slot("vertical_pull", P.VERTICAL_PULL, MAIN),
                Slot("single_leg", P.LUNGE, SECONDARY),
                Slot("horizontal_press", P.HORIZONTAL_PRESS, SECONDARY),
                Slot("core", P.CORE, ACCESSORY, substitutable=False),
                Slot("loaded_carry", P.CARRY, ACCESSORY),
            )),
        ),
    ),
    Template(
        id="template_upper_lower_x4",
        name="Upper/Lower 4x/week",
        days=(
            ("upper", (
                Slot("horizontal_press", P.HORIZONTAL_PRESS, MAIN),
                Slot("horizontal_pull", P.HORIZONTAL_PULL, MAIN),
                Slot("vertical_press", P.VERTICAL_PRESS, SECONDARY),
                Slot("vertical_pull", P.VERTICAL_PULL, SECONDARY),
                Slot("accessory_lateral_raise", P.SHOULDER_ISOLATION, ACCESSORY),
                Slot("accessory_biceps", P.ELBOW_FLEXION, ACCESSORY),
                Slot("accessory_triceps", P.ELBOW_EXTENSION, ACCESSORY),
            )),
            ("lower", (
                Slot("squat_pattern", P.SQUAT, MAIN),
                Slot("hip_hinge", P.HINGE, MAIN),
                Slot("single_leg", P.LUNGE, SECONDARY),
                Slot("accessory_hamstrings", P.KNEE_FLEXION, ACCESSORY),
                Slot("accessory_calves", P.CALF, ACCESSORY),
                Slot("core", P.CORE, ACCESSORY, substitutable=False),
            )),
        ),
    ),
)


def default_templates() -> TemplateRegistry:
    """Build the registry from the default templates."""
    return TemplateRegistry(TEMPLATES)
