"""Data models for the workout generator."""

from wod_engine.models.enums import (
    CombinationCategory,
    DurationBucket,
    Modality,
    Structure,
    WorkoutFormat,
)
from wod_engine.models.trace import DrawRecord, GenerationTrace, Stage
from wod_engine.models.workout import (
    GeneratedWorkout,
    ModalityCombination,
    classify_combination,
)

__all__ = [
    "CombinationCategory",
    "DrawRecord",
    "DurationBucket",
    "GeneratedWorkout",
    "GenerationTrace",
    "Modality",
    "ModalityCombination",
    "Stage",
    "Structure",
    "WorkoutFormat",
    "classify_combination",
]
