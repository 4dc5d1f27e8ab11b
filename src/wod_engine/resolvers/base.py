"""Draw context shared by the three resolver stages.

Resolvers never touch a random source directly. They ask the context to
pick from a table, flip a biased coin, or note a deterministic decision;
the context pulls a uniform value from the injected source and records
every decision for the generation trace.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from wod_engine.math.weighted_draw import WeightTable, bernoulli
from wod_engine.models.trace import DrawRecord, Stage

logger = logging.getLogger(__name__)

T = TypeVar("T")

RandomSource = Callable[[], float]

# Largest float strictly below 1.0
_MAX_DRAW = 1.0 - 2.0 ** -53


def _outcome_label(outcome: object) -> str:
    if isinstance(outcome, tuple):
        return "+".join(getattr(o, "name", str(o)) for o in outcome)
    return getattr(outcome, "name", str(outcome))


class DrawContext:
    """Per-call draw bookkeeping. Create one per generate() call."""

    def __init__(self, random_source: RandomSource) -> None:
        self._random_source = random_source
        self._records: list[DrawRecord] = []

    @property
    def records(self) -> tuple[DrawRecord, ...]:
        return tuple(self._records)

    def _next_value(self) -> float:
        r = float(self._random_source())
        if 0.0 <= r < 1.0:
            return r
        clamped = min(max(r, 0.0), _MAX_DRAW)
        logger.warning("Random source returned %r outside [0, 1); clamped to %r", r, clamped)
        return clamped

    def pick(self, stage: Stage, table: WeightTable[T]) -> T:
        """Consume one draw and select from *table*."""
        r = self._next_value()
        outcome = table.draw(r)
        logger.debug("%s draw on %s: r=%.6f -> %s", stage.name, table.name, r, _outcome_label(outcome))
        self._records.append(
            DrawRecord(stage=stage, table=table.name, value=r, outcome=_outcome_label(outcome))
        )
        return outcome

    def flip(self, stage: Stage, name: str, probability: float) -> bool:
        """Consume one draw for a biased coin flip."""
        r = self._next_value()
        result = bernoulli(r, probability)
        logger.debug("%s flip on %s (p=%.3f): r=%.6f -> %s", stage.name, name, probability, r, result)
        self._records.append(
            DrawRecord(stage=stage, table=name, value=r, outcome=str(result))
        )
        return result

    def fixed(self, stage: Stage, name: str, outcome: T) -> T:
        """Record a deterministic decision that consumes no draw."""
        self._records.append(
            DrawRecord(stage=stage, table=name, value=None, outcome=_outcome_label(outcome))
        )
        return outcome
