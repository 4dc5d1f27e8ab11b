"""Stage 3: workout format resolution.

Singles select a table by leading modality and duration bucket. Couplets
and triplets key on duration bucket only; their leading modality does not
change the table.
"""

from __future__ import annotations

from wod_engine.config.weights import WeightConfig
from wod_engine.models.enums import CHIPPER_FORMAT, DurationBucket, Modality, Structure, WorkoutFormat
from wod_engine.models.trace import Stage
from wod_engine.resolvers.base import DrawContext


def resolve_format(
    structure: Structure,
    leading: Modality | None,
    bucket: DurationBucket,
    config: WeightConfig,
    ctx: DrawContext,
) -> WorkoutFormat:
    if structure == Structure.CHIPPER:
        return ctx.fixed(Stage.FORMAT, "chipper", CHIPPER_FORMAT)

    table = config.format_table(structure, leading, bucket)
    return ctx.pick(Stage.FORMAT, table)
