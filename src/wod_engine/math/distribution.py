"""Sampling and goodness-of-fit helpers for checking weight tables.

Generates many workouts into a DataFrame and compares observed outcome
frequencies against a table's declared weights with Pearson's chi-square.

Reference:
    Pearson (1900), On the criterion that a given system of deviations ...
    Phil Mag 50(302):157-175
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd

from wod_engine.config.weights import WeightConfig
from wod_engine.describe.labels import get_modality_code
from wod_engine.generator import WorkoutGenerator
from wod_engine.models.enums import Modality, Structure

# Chi-square critical values at p = 0.01, keyed by degrees of freedom
CHI_SQUARE_CRITICAL_001 = {
    1: 6.635,
    2: 9.210,
    3: 11.345,
    4: 13.277,
    5: 15.086,
    6: 16.812,
    7: 18.475,
    8: 20.090,
}

SAMPLE_COLUMNS = ("structure", "leading", "combination", "duration", "format")


def sample_workouts(
    generator: WorkoutGenerator,
    structure: Structure | str,
    n: int,
) -> pd.DataFrame:
    """Generate *n* workouts and tabulate them, one row per workout.

    Columns hold enum names (``leading`` is None for chippers) and a compact
    combination code such as "W+G".
    """
    rows = []
    for workout in generator.generate_many(structure, n):
        leading = workout.leading_modality
        rows.append({
            "structure": workout.structure.name,
            "leading": leading.name if leading is not None else None,
            "combination": "+".join(get_modality_code(m) for m in workout.modality_combination),
            "duration": workout.duration_bucket.name,
            "format": workout.workout_format.name,
        })
    return pd.DataFrame(rows, columns=list(SAMPLE_COLUMNS))


def observed_frequencies(frame: pd.DataFrame, column: str) -> pd.Series:
    """Normalized value counts for one column, sorted by label."""
    return frame[column].value_counts(normalize=True).sort_index()


def chi_square_statistic(
    observed_counts: pd.Series,
    expected_probs: Mapping[str, float],
) -> float:
    """Pearson chi-square of observed counts against expected probabilities.

    Categories with zero expected probability are excluded from the sum;
    if any such category was observed the statistic is infinite.

    Args:
        observed_counts: Raw counts indexed by category label.
        expected_probs: Declared probability per category label.

    Returns:
        The chi-square statistic (0.0 for a perfect fit).
    """
    total = float(observed_counts.sum())
    if total <= 0:
        return 0.0

    impossible = [
        label for label, count in observed_counts.items()
        if count > 0 and expected_probs.get(label, 0.0) <= 0
    ]
    if impossible:
        return float("inf")

    labels = [label for label, p in expected_probs.items() if p > 0]
    observed = np.array([observed_counts.get(label, 0) for label in labels], dtype=float)
    expected = np.array([expected_probs[label] for label in labels], dtype=float) * total
    return float(np.sum((observed - expected) ** 2 / expected))


def expected_modality_probabilities(config: WeightConfig) -> dict[str, float]:
    """Declared single-modality probabilities keyed by enum name."""
    return {
        modality.name: config.single_modality.probability(modality)
        for modality in Modality
    }
