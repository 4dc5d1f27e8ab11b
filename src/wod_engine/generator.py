"""WorkoutGenerator — the three-stage weighted random workout pipeline."""

from __future__ import annotations

import logging
import random
from enum import Enum

from wod_engine.config.weights import DEFAULT_WEIGHTS, WeightConfig
from wod_engine.describe.labels import build_display_name
from wod_engine.models.enums import FALLBACK_STRUCTURE, Structure
from wod_engine.models.trace import GenerationTrace
from wod_engine.models.workout import GeneratedWorkout
from wod_engine.resolvers.base import DrawContext, RandomSource
from wod_engine.resolvers.duration import resolve_duration
from wod_engine.resolvers.format import resolve_format
from wod_engine.resolvers.structure import resolve_structure

logger = logging.getLogger(__name__)


def coerce_structure(structure: object) -> Structure:
    """Map a Structure, its name ("couplet") or its value to a member.

    Anything unrecognised resolves to SINGLE with a warning; this is the
    documented fallback, not an error.
    """
    if isinstance(structure, Structure):
        return structure
    if isinstance(structure, str):
        try:
            return Structure[structure.strip().upper()]
        except KeyError:
            pass
    elif isinstance(structure, int) and not isinstance(structure, (bool, Enum)):
        try:
            return Structure(structure)
        except ValueError:
            pass
    logger.warning(
        "Unrecognised structure %r; falling back to %s",
        structure, FALLBACK_STRUCTURE.name,
    )
    return FALLBACK_STRUCTURE


class WorkoutGenerator:
    """Generates workout descriptors from a requested structure.

    Usage::

        generator = WorkoutGenerator(seed=7)
        workout = generator.generate(Structure.COUPLET)
        workout, trace = generator.generate_with_trace("triplet")

    The generator holds only its weight config and random source; it keeps
    no history between calls.
    """

    def __init__(
        self,
        weights: WeightConfig | None = None,
        random_source: RandomSource | None = None,
        seed: int | None = None,
    ) -> None:
        self.weights = weights or DEFAULT_WEIGHTS
        self.weights.validate()

        if random_source is None:
            random_source = random.Random(seed).random
        self._random_source = random_source

    def generate(self, structure: Structure | str) -> GeneratedWorkout:
        """Generate one workout for the requested structure."""
        workout, _ = self.generate_with_trace(structure)
        return workout

    def generate_with_trace(
        self, structure: Structure | str
    ) -> tuple[GeneratedWorkout, GenerationTrace]:
        """Generate one workout and the record of every draw behind it.

        Stages run strictly in order:
        1. Structure resolution (modality combination; triplet may become chipper)
        2. Duration-bucket resolution
        3. Format resolution, keyed by leading modality and bucket

        Args:
            structure: Requested structure, as a member or its name.

        Returns:
            A tuple of (GeneratedWorkout, GenerationTrace).
        """
        requested = coerce_structure(structure)
        ctx = DrawContext(self._random_source)

        resolved, combination = resolve_structure(requested, self.weights, ctx)
        bucket = resolve_duration(resolved, combination, self.weights, ctx)
        leading = combination[0] if combination else None
        workout_format = resolve_format(resolved, leading, bucket, self.weights, ctx)

        workout = GeneratedWorkout(
            structure=resolved,
            modality_combination=combination,
            duration_bucket=bucket,
            workout_format=workout_format,
            display_name=build_display_name(resolved, combination),
        )
        logger.debug(
            "Generated %s (%s, %s) from %s request",
            workout.display_name, bucket.name, workout_format.name, requested.name,
        )

        trace = GenerationTrace(
            records=ctx.records,
            workout=workout,
            weights_version=self.weights.version,
            chipper_short_circuit=(
                requested == Structure.TRIPLET and resolved == Structure.CHIPPER
            ),
        )
        return workout, trace

    def generate_many(self, structure: Structure | str, count: int) -> list[GeneratedWorkout]:
        """Generate *count* independent workouts for the same structure."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate(structure) for _ in range(count)]


_default_generator: WorkoutGenerator | None = None


def generate_workout(structure: Structure | str) -> GeneratedWorkout:
    """Generate a workout with a shared default generator (canonical weights)."""
    global _default_generator
    if _default_generator is None:
        _default_generator = WorkoutGenerator()
    return _default_generator.generate(structure)
