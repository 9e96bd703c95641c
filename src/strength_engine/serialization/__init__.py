"""Serialization module: export plans to the API wire format."""

from strength_engine.serialization.plan_json import (
    to_alternates_list,
    to_plan_dict,
    to_plan_frame,
    to_plan_json_string,
)

__all__ = ["to_alternates_list", "to_plan_dict", "to_plan_frame", "to_plan_json_string"]
