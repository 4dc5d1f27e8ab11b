"""Description helpers — labels, colors, display names and prompts."""

from wod_engine.describe.labels import (
    build_display_name,
    get_duration_bucket_color,
    get_duration_bucket_label,
    get_format_color,
    get_format_label,
    get_modality_code,
    get_modality_color,
    get_modality_label,
    get_structure_label,
)
from wod_engine.describe.prompt import build_workout_prompt

__all__ = [
    "build_display_name",
    "build_workout_prompt",
    "get_duration_bucket_color",
    "get_duration_bucket_label",
    "get_format_color",
    "get_format_label",
    "get_modality_code",
    "get_modality_color",
    "get_modality_label",
    "get_structure_label",
]
