"""Serialization module — hand generated workouts to the workout log."""

from wod_engine.serialization.storage import (
    from_storage_dict,
    from_storage_json_string,
    to_storage_dict,
    to_storage_json_string,
)

__all__ = [
    "from_storage_dict",
    "from_storage_json_string",
    "to_storage_dict",
    "to_storage_json_string",
]
