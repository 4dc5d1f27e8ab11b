"""Generation trace — audit trail of the draws behind a generated workout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from wod_engine.models.workout import GeneratedWorkout


class Stage(IntEnum):
    """Pipeline stage a draw belongs to, in execution order."""

    CHIPPER_FLIP = auto()
    STRUCTURE = auto()
    DURATION = auto()
    FORMAT = auto()


@dataclass(frozen=True)
class DrawRecord:
    """One stage decision.

    ``value`` is None for deterministic stages (e.g. a chipper's duration),
    which consume no random draw.
    """

    stage: Stage
    table: str
    value: float | None = None
    outcome: str = ""


@dataclass(frozen=True)
class GenerationTrace:
    """Every decision made during a single generate_with_trace() call."""

    records: tuple[DrawRecord, ...] = field(default_factory=tuple)
    workout: GeneratedWorkout | None = None
    weights_version: str = ""
    chipper_short_circuit: bool = False

    @property
    def draw_count(self) -> int:
        """Number of random values actually consumed."""
        return sum(1 for r in self.records if r.value is not None)

    def for_stage(self, stage: Stage) -> tuple[DrawRecord, ...]:
        return tuple(r for r in self.records if r.stage == stage)
