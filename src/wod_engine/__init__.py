"""Weighted, structure-aware random workout generator."""

from wod_engine.config.weights import DEFAULT_WEIGHTS, WeightConfig, get_weight_config
from wod_engine.describe.labels import (
    get_duration_bucket_color,
    get_duration_bucket_label,
    get_format_color,
    get_format_label,
    get_modality_color,
    get_modality_label,
)
from wod_engine.generator import WorkoutGenerator, generate_workout
from wod_engine.models.enums import DurationBucket, Modality, Structure, WorkoutFormat
from wod_engine.models.workout import GeneratedWorkout

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_WEIGHTS",
    "DurationBucket",
    "GeneratedWorkout",
    "Modality",
    "Structure",
    "WeightConfig",
    "WorkoutFormat",
    "WorkoutGenerator",
    "generate_workout",
    "get_duration_bucket_color",
    "get_duration_bucket_label",
    "get_format_color",
    "get_format_label",
    "get_modality_color",
    "get_modality_label",
    "get_weight_config",
]
