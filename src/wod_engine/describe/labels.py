"""Human-readable labels and presentation colors for generator output.

Colors are Dracula palette hex tokens. A lookup miss (a value that is not
an enum member) is logged and falls back to the first member's entry, so
callers never receive an empty string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import TypeVar

from wod_engine.models.enums import DurationBucket, Modality, Structure, WorkoutFormat
from wod_engine.models.workout import ModalityCombination

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=IntEnum)

_MODALITY_LABELS: dict[Modality, str] = {
    Modality.WEIGHTLIFTING: "Weightlifting",
    Modality.GYMNASTICS: "Gymnastics",
    Modality.MONOSTRUCTURAL: "Monostructural",
}

_MODALITY_CODES: dict[Modality, str] = {
    Modality.WEIGHTLIFTING: "W",
    Modality.GYMNASTICS: "G",
    Modality.MONOSTRUCTURAL: "M",
}

_MODALITY_COLORS: dict[Modality, str] = {
    Modality.WEIGHTLIFTING: "#FF5555",   # red
    Modality.GYMNASTICS: "#8BE9FD",      # cyan
    Modality.MONOSTRUCTURAL: "#50FA7B",  # green
}

_STRUCTURE_LABELS: dict[Structure, str] = {
    Structure.SINGLE: "Single",
    Structure.COUPLET: "Couplet",
    Structure.TRIPLET: "Triplet",
    Structure.CHIPPER: "Chipper",
}

_DURATION_LABELS: dict[DurationBucket, str] = {
    DurationBucket.SHORT: "< 8 min",
    DurationBucket.MEDIUM: "8-20 min",
    DurationBucket.LONG: "20+ min",
}

_DURATION_COLORS: dict[DurationBucket, str] = {
    DurationBucket.SHORT: "#F1FA8C",   # yellow
    DurationBucket.MEDIUM: "#FFB86C",  # orange
    DurationBucket.LONG: "#FF79C6",    # pink
}

_FORMAT_LABELS: dict[WorkoutFormat, str] = {
    WorkoutFormat.SETS: "Sets",
    WorkoutFormat.EMOM: "EMOM (or E2MOM)",
    WorkoutFormat.BENCHMARK: "Benchmark",
    WorkoutFormat.FOR_TIME_WITH_REPS: "For Time/Reps",
    WorkoutFormat.FOR_TIME: "For Time (or not for time)",
    WorkoutFormat.ROUNDS_FOR_TIME: "Rounds for Time",
    WorkoutFormat.AMRAP: "AMRAP",
    WorkoutFormat.INTERVALS: "Intervals",
    WorkoutFormat.SKILL: "Skill",
}

_FORMAT_COLORS: dict[WorkoutFormat, str] = {
    WorkoutFormat.SETS: "#BD93F9",                # purple
    WorkoutFormat.EMOM: "#FF5555",                # red
    WorkoutFormat.BENCHMARK: "#FFB86C",           # orange
    WorkoutFormat.FOR_TIME_WITH_REPS: "#8BE9FD",  # cyan
    WorkoutFormat.FOR_TIME: "#50FA7B",            # green
    WorkoutFormat.ROUNDS_FOR_TIME: "#5AFF9B",     # lighter green
    WorkoutFormat.AMRAP: "#FF79C6",               # pink
    WorkoutFormat.INTERVALS: "#F1FA8C",           # yellow
    WorkoutFormat.SKILL: "#6272A4",               # comment
}


def _lookup(table: Mapping[E, str], key: object, kind: str) -> str:
    value = table.get(key)  # type: ignore[call-overload]
    if value:
        return value
    first = next(iter(table))
    logger.warning("No %s entry for %r; falling back to %s", kind, key, first.name)
    return table[first]


def get_modality_label(modality: Modality) -> str:
    return _lookup(_MODALITY_LABELS, modality, "modality label")


def get_modality_code(modality: Modality) -> str:
    """Single-letter code used in compact names and storage (W/G/M)."""
    return _lookup(_MODALITY_CODES, modality, "modality code")


def get_modality_color(modality: Modality) -> str:
    return _lookup(_MODALITY_COLORS, modality, "modality color")


def get_structure_label(structure: Structure) -> str:
    return _lookup(_STRUCTURE_LABELS, structure, "structure label")


def get_duration_bucket_label(bucket: DurationBucket) -> str:
    return _lookup(_DURATION_LABELS, bucket, "duration label")


def get_duration_bucket_color(bucket: DurationBucket) -> str:
    return _lookup(_DURATION_COLORS, bucket, "duration color")


def get_format_label(workout_format: WorkoutFormat) -> str:
    return _lookup(_FORMAT_LABELS, workout_format, "format label")


def get_format_color(workout_format: WorkoutFormat) -> str:
    return _lookup(_FORMAT_COLORS, workout_format, "format color")


def build_display_name(structure: Structure, combination: ModalityCombination) -> str:
    """Short title for a generated workout.

    e.g. "Single: Weightlifting", "Couplet: W + G", "Triplet: G + M + W",
    "Chipper".
    """
    label = get_structure_label(structure)
    if not combination:
        return label
    if len(combination) == 1:
        return f"{label}: {get_modality_label(combination[0])}"
    return f"{label}: " + " + ".join(get_modality_code(m) for m in combination)
