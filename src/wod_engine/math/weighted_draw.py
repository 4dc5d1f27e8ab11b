"""Weighted draws over fixed, ordered cumulative-threshold tables.

Every random decision in the generator goes through ``WeightTable.draw``:
one uniform value r in [0, 1) is compared against ascending cumulative
upper bounds, and the first outcome whose bound is strictly greater than r
wins. Ties at a boundary therefore resolve to the later bucket.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

import numpy as np

from wod_engine.exceptions import WeightTableError
from wod_engine.models.enums import WEIGHT_SUM_TOLERANCE

T = TypeVar("T")


class WeightTable(Generic[T]):
    """Immutable ordered list of (outcome, weight) pairs.

    Usage::

        table = WeightTable("single", [(W, 0.52), (M, 0.43), (G, 0.05)])
        table.draw(0.60)   # -> M

    Zero-weight entries are allowed (so a table can list every outcome of
    its domain) but are never returned by ``draw``.
    """

    __slots__ = ("_name", "_outcomes", "_weights", "_thresholds", "_fallback")

    def __init__(
        self,
        name: str,
        entries: Iterable[tuple[T, float]],
        validate: bool = True,
    ) -> None:
        pairs = list(entries)
        self._name = name
        self._outcomes: tuple[T, ...] = tuple(outcome for outcome, _ in pairs)
        self._weights: tuple[float, ...] = tuple(float(w) for _, w in pairs)

        if not pairs:
            raise WeightTableError(f"Weight table '{name}' has no entries")
        if any(w < 0 for w in self._weights):
            raise WeightTableError(f"Weight table '{name}' has a negative weight")

        positive = [i for i, w in enumerate(self._weights) if w > 0]
        if not positive:
            raise WeightTableError(f"Weight table '{name}' has no positive weight")

        self._thresholds: tuple[float, ...] = tuple(
            np.round(np.cumsum(np.asarray(self._weights, dtype=float)), 10).tolist()
        )
        # Unconditional fallback: never rely on the sum reaching exactly 1.0
        self._fallback: T = self._outcomes[positive[-1]]

        if validate and abs(self.total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise WeightTableError(
                f"Weight table '{name}' sums to {self.total:.6f}, expected 1.0"
            )

    @classmethod
    def uniform(cls, name: str, outcomes: Sequence[T]) -> WeightTable[T]:
        """Equal weight for every outcome."""
        if not outcomes:
            raise WeightTableError(f"Weight table '{name}' has no entries")
        weight = 1.0 / len(outcomes)
        return cls(name, [(o, weight) for o in outcomes])

    @property
    def name(self) -> str:
        return self._name

    @property
    def outcomes(self) -> tuple[T, ...]:
        return self._outcomes

    @property
    def weights(self) -> tuple[float, ...]:
        return self._weights

    @property
    def thresholds(self) -> tuple[float, ...]:
        """Ascending cumulative upper bounds, one per entry."""
        return self._thresholds

    @property
    def total(self) -> float:
        return self._thresholds[-1]

    @property
    def support(self) -> frozenset[T]:
        """Outcomes that can actually be drawn (positive weight)."""
        return frozenset(
            o for o, w in zip(self._outcomes, self._weights) if w > 0
        )

    def probability(self, outcome: T) -> float:
        """Declared weight of an outcome (0.0 if absent)."""
        total = 0.0
        for o, w in zip(self._outcomes, self._weights):
            if o == outcome:
                total += w
        return total

    def draw(self, r: float) -> T:
        """Select an outcome for a uniform value r in [0, 1)."""
        for outcome, bound in zip(self._outcomes, self._thresholds):
            if r < bound:
                return outcome
        return self._fallback

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self):
        return iter(zip(self._outcomes, self._weights))

    def __repr__(self) -> str:
        return f"WeightTable({self._name!r}, entries={len(self)}, total={self.total:.4f})"


def bernoulli(r: float, probability: float) -> bool:
    """Single biased coin flip: True when r falls below *probability*."""
    return r < probability
