"""Generated workout — the sole output of the workout generator."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from wod_engine.models.enums import (
    STRUCTURE_SLOT_COUNT,
    TWO_OF_A_KIND_CATEGORY,
    CombinationCategory,
    DurationBucket,
    Modality,
    Structure,
    WorkoutFormat,
)

ModalityCombination = tuple[Modality, ...]


@dataclass(frozen=True)
class GeneratedWorkout:
    """A concrete workout descriptor produced by one generate() call.

    ``modality_combination`` is ordered; only its first element (the
    leading modality) influences format selection. Chippers carry an
    empty combination.
    """

    structure: Structure
    modality_combination: ModalityCombination
    duration_bucket: DurationBucket
    workout_format: WorkoutFormat
    display_name: str = ""

    @property
    def leading_modality(self) -> Modality | None:
        if not self.modality_combination:
            return None
        return self.modality_combination[0]

    @property
    def slot_count(self) -> int:
        return len(self.modality_combination)

    @property
    def is_consistent(self) -> bool:
        """True when the combination length matches the structure's slot count."""
        return STRUCTURE_SLOT_COUNT[self.structure] == self.slot_count


def classify_combination(
    combination: ModalityCombination,
) -> CombinationCategory | None:
    """Categorise a couplet/triplet combination for duration-table lookup.

    Returns None for singles and chippers, which have no category.

    Examples:
        (W, W)       -> PURE
        (W, G)       -> MIXED
        (W, G, M)    -> TRI_MODAL
        (G, W, G)    -> TWO_GYMNASTICS
    """
    if len(combination) < 2:
        return None

    counts = Counter(combination)
    if len(counts) == 1:
        return CombinationCategory.PURE

    if len(combination) == 2:
        return CombinationCategory.MIXED

    if len(counts) == len(combination):
        return CombinationCategory.TRI_MODAL

    dominant, _ = counts.most_common(1)[0]
    return TWO_OF_A_KIND_CATEGORY[dominant]
