"""Prompt builder — turns a generated workout into a text request.

The prompt is what users paste into a chat assistant to flesh the
structure out into exercises, reps and scaling.
"""

from __future__ import annotations

from wod_engine.describe.labels import (
    get_duration_bucket_label,
    get_format_label,
    get_modality_code,
)
from wod_engine.models.workout import GeneratedWorkout

_REQUEST_LINES = (
    "1. Specific exercises with reps/sets/weights",
    "2. Workout flow and timing",
    "3. Scaling options",
    "4. Any special instructions or tips",
)


def build_workout_prompt(workout: GeneratedWorkout) -> str:
    """Render the copyable prompt for a generated workout.

    Args:
        workout: Output of WorkoutGenerator.generate().

    Returns:
        Multi-line prompt text. Chippers list no modalities.
    """
    modalities = ", ".join(get_modality_code(m) for m in workout.modality_combination)
    lines = [
        "Generate a detailed CrossFit workout based on this structure:",
        "",
        f"Structure: {workout.structure.name.lower()}",
        f"Modalities: {modalities}",
        f"Time Domain: {get_duration_bucket_label(workout.duration_bucket)}",
        f"Workout Type: {get_format_label(workout.workout_format)}",
        "",
        "Please provide:",
        *_REQUEST_LINES,
    ]
    return "\n".join(lines)
