"""Stage 1: structure resolution — pick the modality combination.

Triplets may be downgraded to chippers by a biased coin flip before the
triple itself is drawn.
"""

from __future__ import annotations

from wod_engine.config.weights import WeightConfig
from wod_engine.models.enums import Structure
from wod_engine.models.trace import Stage
from wod_engine.models.workout import ModalityCombination
from wod_engine.resolvers.base import DrawContext


def resolve_structure(
    structure: Structure,
    config: WeightConfig,
    ctx: DrawContext,
) -> tuple[Structure, ModalityCombination]:
    """Resolve a requested structure to (final structure, combination).

    Args:
        structure: Requested structure. Already coerced to a member.
        config: Weight tables to draw from.
        ctx: Draw context for this generate() call.

    Returns:
        The structure actually produced (TRIPLET can become CHIPPER) and
        its ordered modality combination (empty for chippers).
    """
    if structure == Structure.CHIPPER:
        return Structure.CHIPPER, ()

    if structure == Structure.TRIPLET:
        if ctx.flip(Stage.CHIPPER_FLIP, "chipper_probability", config.chipper_probability):
            return Structure.CHIPPER, ()
        return Structure.TRIPLET, tuple(ctx.pick(Stage.STRUCTURE, config.triplet_combinations))

    if structure == Structure.COUPLET:
        return Structure.COUPLET, tuple(ctx.pick(Stage.STRUCTURE, config.couplet_combinations))

    modality = ctx.pick(Stage.STRUCTURE, config.single_modality)
    return Structure.SINGLE, (modality,)
