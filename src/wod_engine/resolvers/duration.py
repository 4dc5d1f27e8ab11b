"""Stage 2: duration-bucket resolution."""

from __future__ import annotations

from wod_engine.config.weights import WeightConfig
from wod_engine.models.enums import CHIPPER_DURATION, DurationBucket, Structure
from wod_engine.models.trace import Stage
from wod_engine.models.workout import ModalityCombination, classify_combination
from wod_engine.resolvers.base import DrawContext


def resolve_duration(
    structure: Structure,
    combination: ModalityCombination,
    config: WeightConfig,
    ctx: DrawContext,
) -> DurationBucket:
    """Pick a duration bucket for the resolved structure.

    Chippers are always LONG without a draw. Couplets and triplets use a
    combination-aware table when the config defines one for the
    combination's category, otherwise the structure-level table.
    """
    if structure == Structure.CHIPPER:
        return ctx.fixed(Stage.DURATION, "chipper", CHIPPER_DURATION)

    category = classify_combination(combination)
    table = config.duration_table(structure, category)
    return ctx.pick(Stage.DURATION, table)
