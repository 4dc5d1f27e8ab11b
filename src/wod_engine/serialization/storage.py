"""Storage serialization for GeneratedWorkout records.

Converts a GeneratedWorkout to the plain-dict shape the workout log stores
(short string codes, camelCase keys) and back. All functions are pure
(no I/O).
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from wod_engine.config.weights import WEIGHT_VERSIONS
from wod_engine.describe.labels import build_display_name
from wod_engine.exceptions import SerializationError
from wod_engine.models.enums import DurationBucket, Modality, Structure, WorkoutFormat
from wod_engine.models.workout import GeneratedWorkout

_STRUCTURE_CODES = {
    Structure.SINGLE: "single",
    Structure.COUPLET: "couplet",
    Structure.TRIPLET: "triplet",
    Structure.CHIPPER: "chipper",
}

_MODALITY_CODES = {
    Modality.WEIGHTLIFTING: "W",
    Modality.GYMNASTICS: "G",
    Modality.MONOSTRUCTURAL: "M",
}

_DURATION_CODES = {
    DurationBucket.SHORT: "short",
    DurationBucket.MEDIUM: "medium",
    DurationBucket.LONG: "long",
}

_FORMAT_CODES = {
    WorkoutFormat.SETS: "sets",
    WorkoutFormat.EMOM: "emom",
    WorkoutFormat.BENCHMARK: "benchmark",
    WorkoutFormat.FOR_TIME_WITH_REPS: "for_time_reps",
    WorkoutFormat.FOR_TIME: "for_time",
    WorkoutFormat.ROUNDS_FOR_TIME: "rounds_for_time",
    WorkoutFormat.AMRAP: "amrap",
    WorkoutFormat.INTERVALS: "intervals",
    WorkoutFormat.SKILL: "skill",
}


def _invert(mapping: dict) -> dict:
    return {code: member for member, code in mapping.items()}


_STRUCTURES_BY_CODE = _invert(_STRUCTURE_CODES)
_MODALITIES_BY_CODE = _invert(_MODALITY_CODES)
_DURATIONS_BY_CODE = _invert(_DURATION_CODES)
_FORMATS_BY_CODE = _invert(_FORMAT_CODES)


def _check_consistency(workout: GeneratedWorkout) -> None:
    if not workout.is_consistent:
        raise SerializationError(
            f"Stored {workout.structure.name.lower()} workout has "
            f"{workout.slot_count} modalities"
        )
    if workout.structure == Structure.CHIPPER and workout.duration_bucket != DurationBucket.LONG:
        raise SerializationError("Stored chipper workout must be long")
    legal = frozenset().union(*(
        config.legal_formats(workout.structure, workout.leading_modality)
        for config in WEIGHT_VERSIONS.values()
    ))
    if workout.workout_format not in legal:
        raise SerializationError(
            f"Stored workoutType {_FORMAT_CODES[workout.workout_format]!r} is not "
            f"a legal format for {workout.display_name!r}"
        )


def to_storage_dict(workout: GeneratedWorkout) -> dict:
    """Convert a GeneratedWorkout to a JSON-ready dict."""
    return {
        "structure": _STRUCTURE_CODES[workout.structure],
        "modalities": [_MODALITY_CODES[m] for m in workout.modality_combination],
        "timeDomain": _DURATION_CODES[workout.duration_bucket],
        "workoutType": _FORMAT_CODES[workout.workout_format],
        "name": workout.display_name,
    }


def to_storage_json_string(workout: GeneratedWorkout, indent: int = 2) -> str:
    return json.dumps(to_storage_dict(workout), indent=indent)


def from_storage_dict(data: Mapping) -> GeneratedWorkout:
    """Rebuild a GeneratedWorkout from a stored dict.

    A missing ``name`` is regenerated from structure and modalities.

    Raises:
        SerializationError: on missing keys or unknown codes, or when the
            record could not have been generated (wrong modality count for
            the structure, or a format no shipped table allows there).
    """
    try:
        structure = _decode(_STRUCTURES_BY_CODE, data["structure"], "structure")
        modalities = tuple(
            _decode(_MODALITIES_BY_CODE, code, "modality")
            for code in data.get("modalities", ())
        )
        bucket = _decode(_DURATIONS_BY_CODE, data["timeDomain"], "timeDomain")
        workout_format = _decode(_FORMATS_BY_CODE, data["workoutType"], "workoutType")
    except KeyError as exc:
        raise SerializationError(f"Stored workout is missing {exc}") from exc

    workout = GeneratedWorkout(
        structure=structure,
        modality_combination=modalities,
        duration_bucket=bucket,
        workout_format=workout_format,
        display_name=data.get("name") or build_display_name(structure, modalities),
    )
    _check_consistency(workout)
    return workout


def from_storage_json_string(text: str) -> GeneratedWorkout:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid workout JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError("Stored workout must be a JSON object")
    return from_storage_dict(data)


def _decode(table: dict, code: object, field_name: str):
    if not isinstance(code, str) or code not in table:
        raise SerializationError(f"Unknown {field_name} code {code!r}")
    return table[code]
