"""Shared test fixtures: deterministic random sources and generators."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from wod_engine.config.weights import CLASSIC_WEIGHTS, LINCHPIN_WEIGHTS
from wod_engine.generator import WorkoutGenerator


class SequenceSource:
    """Random source that replays a fixed list of values, cycling at the end."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def constant_source() -> Callable[[float], Callable[[], float]]:
    """Factory: a source that always returns the same value."""

    def _make(value: float) -> Callable[[], float]:
        return lambda: value

    return _make


@pytest.fixture
def sequence_source() -> Callable[[Sequence[float]], SequenceSource]:
    """Factory: a source that replays the given values in order."""
    return SequenceSource


@pytest.fixture
def seeded_generator() -> WorkoutGenerator:
    """Canonical weights with a fixed seed."""
    return WorkoutGenerator(weights=LINCHPIN_WEIGHTS, seed=20240611)


@pytest.fixture
def classic_generator() -> WorkoutGenerator:
    """Uniform-combination weights with a fixed seed."""
    return WorkoutGenerator(weights=CLASSIC_WEIGHTS, seed=7)


@pytest.fixture(params=["linchpin-2", "classic-1"])
def any_weights(request):
    """Every shipped weight config."""
    from wod_engine.config.weights import get_weight_config

    return get_weight_config(request.param)
