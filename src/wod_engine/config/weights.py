"""Versioned weight configurations for the workout generator.

A ``WeightConfig`` bundles every table the three pipeline stages read:
structure/combination tables, duration-bucket tables and format tables.
Configs are immutable and named by version; the generator receives one at
construction time.

Two versions ship:

    linchpin-2  Canonical. Skewed tables reflecting real programming
                frequency (W-led singles dominate, W+G couplets favoured,
                tri-modal triplets favoured), 12% chipper rate.
    classic-1   Uniform modality/pair/triple draws, 20% chipper rate and
                the earlier, flatter duration and format tables.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from wod_engine.exceptions import WeightConfigError
from wod_engine.math.weighted_draw import WeightTable
from wod_engine.models.enums import (
    MONOSTRUCTURAL_EXCLUDED_FORMATS,
    SKILL_ONLY_MODALITY,
    CombinationCategory,
    DurationBucket,
    Modality,
    Structure,
    WorkoutFormat,
)

W = Modality.WEIGHTLIFTING
G = Modality.GYMNASTICS
M = Modality.MONOSTRUCTURAL

SHORT = DurationBucket.SHORT
MEDIUM = DurationBucket.MEDIUM
LONG = DurationBucket.LONG

F = WorkoutFormat

ALL_PAIRS = tuple(itertools.product((W, G, M), repeat=2))
ALL_TRIPLES = tuple(itertools.product((W, G, M), repeat=3))

_DRAWN_STRUCTURES = (Structure.SINGLE, Structure.COUPLET, Structure.TRIPLET)


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class WeightConfig:
    """Every weight table the generator needs, under one version string."""

    version: str
    single_modality: WeightTable[Modality]
    couplet_combinations: WeightTable[tuple[Modality, ...]]
    triplet_combinations: WeightTable[tuple[Modality, ...]]
    chipper_probability: float
    duration_by_structure: Mapping[Structure, WeightTable[DurationBucket]]
    single_formats: Mapping[Modality, Mapping[DurationBucket, WeightTable[WorkoutFormat]]]
    couplet_formats: Mapping[DurationBucket, WeightTable[WorkoutFormat]]
    triplet_formats: Mapping[DurationBucket, WeightTable[WorkoutFormat]]
    duration_by_category: Mapping[
        Structure, Mapping[CombinationCategory, WeightTable[DurationBucket]]
    ] = field(default_factory=lambda: MappingProxyType({}))

    def combination_table(self, structure: Structure) -> WeightTable:
        if structure == Structure.SINGLE:
            return self.single_modality
        if structure == Structure.COUPLET:
            return self.couplet_combinations
        if structure == Structure.TRIPLET:
            return self.triplet_combinations
        raise WeightConfigError(
            f"No combination table for {structure.name}", version=self.version
        )

    def duration_table(
        self,
        structure: Structure,
        category: CombinationCategory | None = None,
    ) -> WeightTable[DurationBucket]:
        """Combination-aware table when one is configured, else the structure table."""
        if category is not None:
            by_category = self.duration_by_category.get(structure, {})
            if category in by_category:
                return by_category[category]
        return self.duration_by_structure[structure]

    def format_table(
        self,
        structure: Structure,
        leading: Modality | None,
        bucket: DurationBucket,
    ) -> WeightTable[WorkoutFormat]:
        if structure == Structure.COUPLET:
            return self.couplet_formats[bucket]
        if structure == Structure.TRIPLET:
            return self.triplet_formats[bucket]
        if structure == Structure.SINGLE and leading is not None:
            return self.single_formats[leading][bucket]
        raise WeightConfigError(
            f"No format table for {structure.name} led by {leading!r}",
            version=self.version,
        )

    def legal_formats(
        self, structure: Structure, leading: Modality | None = None
    ) -> frozenset[WorkoutFormat]:
        """Formats with positive weight in any bucket for this context."""
        if structure == Structure.CHIPPER:
            return frozenset({WorkoutFormat.FOR_TIME})
        if structure == Structure.SINGLE:
            if leading is None:
                raise WeightConfigError(
                    "Single structures need a leading modality", version=self.version
                )
            tables = self.single_formats[leading].values()
        elif structure == Structure.COUPLET:
            tables = self.couplet_formats.values()
        else:
            tables = self.triplet_formats.values()
        return frozenset().union(*(t.support for t in tables))

    def all_tables(self) -> list[WeightTable]:
        """Flat list of every table in the config, for static validation."""
        tables: list[WeightTable] = [
            self.single_modality,
            self.couplet_combinations,
            self.triplet_combinations,
        ]
        tables.extend(self.duration_by_structure.values())
        for by_category in self.duration_by_category.values():
            tables.extend(by_category.values())
        for by_bucket in self.single_formats.values():
            tables.extend(by_bucket.values())
        tables.extend(self.couplet_formats.values())
        tables.extend(self.triplet_formats.values())
        return tables

    def validate(self) -> None:
        """Check coverage and format exclusions. Raises WeightConfigError."""
        if not 0.0 <= self.chipper_probability <= 1.0:
            raise WeightConfigError(
                f"Chipper probability {self.chipper_probability} outside [0, 1]",
                version=self.version,
            )

        if set(self.single_modality.outcomes) != {W, G, M}:
            raise WeightConfigError(
                "Single modality table must list W, G and M", version=self.version
            )
        if set(self.couplet_combinations.outcomes) != set(ALL_PAIRS):
            raise WeightConfigError(
                "Couplet table must list all 9 ordered pairs", version=self.version
            )
        if set(self.triplet_combinations.outcomes) != set(ALL_TRIPLES):
            raise WeightConfigError(
                "Triplet table must list all 27 ordered triples", version=self.version
            )

        for structure in _DRAWN_STRUCTURES:
            if structure not in self.duration_by_structure:
                raise WeightConfigError(
                    f"Missing duration table for {structure.name}", version=self.version
                )

        for modality in (W, G, M):
            by_bucket = self.single_formats.get(modality)
            if by_bucket is None or set(by_bucket) != set(DurationBucket):
                raise WeightConfigError(
                    f"Single {modality.name} needs a format table per bucket",
                    version=self.version,
                )
        for label, by_bucket in (
            ("Couplet", self.couplet_formats),
            ("Triplet", self.triplet_formats),
        ):
            if set(by_bucket) != set(DurationBucket):
                raise WeightConfigError(
                    f"{label} needs a format table per bucket", version=self.version
                )

        for modality in (W, G, M):
            legal = self.legal_formats(Structure.SINGLE, modality)
            if modality != SKILL_ONLY_MODALITY and WorkoutFormat.SKILL in legal:
                raise WeightConfigError(
                    f"SKILL is only legal for {SKILL_ONLY_MODALITY.name} singles",
                    version=self.version,
                )
            if modality == M and legal & MONOSTRUCTURAL_EXCLUDED_FORMATS:
                raise WeightConfigError(
                    "Monostructural singles must never be AMRAP", version=self.version
                )
        for structure in (Structure.COUPLET, Structure.TRIPLET):
            if WorkoutFormat.SKILL in self.legal_formats(structure):
                raise WeightConfigError(
                    f"SKILL is not legal for {structure.name}", version=self.version
                )


# ---------------------------------------------------------------------------
# linchpin-2 (canonical)
# ---------------------------------------------------------------------------

LINCHPIN_WEIGHTS = WeightConfig(
    version="linchpin-2",
    # W ~52%, M ~43%, G ~5%: pure gymnastics singles are rare
    single_modality=WeightTable("single_modality", [
        (W, 0.52),
        (M, 0.43),
        (G, 0.05),
    ]),
    couplet_combinations=WeightTable("couplet_combinations", [
        ((W, G), 0.25),
        ((G, W), 0.12),
        ((W, M), 0.22),
        ((M, W), 0.11),
        ((G, M), 0.18),
        ((M, G), 0.09),
        ((W, W), 0.02),
        ((G, G), 0.01),
        ((M, M), 0.00),
    ]),
    triplet_combinations=WeightTable("triplet_combinations", [
        # Tri-modal: 40% total
        ((W, G, M), 0.0667),
        ((W, M, G), 0.0667),
        ((G, W, M), 0.0667),
        ((G, M, W), 0.0667),
        ((M, W, G), 0.0667),
        ((M, G, W), 0.0667),
        # Pure: 17.5% total
        ((G, G, G), 0.09),
        ((W, W, W), 0.055),
        ((M, M, M), 0.03),
        # Two W + one other: 20% total
        ((W, W, G), 0.0333),
        ((W, W, M), 0.0333),
        ((W, G, W), 0.0333),
        ((W, M, W), 0.0333),
        ((G, W, W), 0.0333),
        ((M, W, W), 0.0333),
        # Two G + one other: 12% total
        ((G, G, W), 0.02),
        ((G, G, M), 0.02),
        ((G, W, G), 0.02),
        ((W, G, G), 0.02),
        ((G, M, G), 0.02),
        ((M, G, G), 0.02),
        # Two M + one other: 10.5% total
        ((M, M, W), 0.0175),
        ((M, M, G), 0.0175),
        ((M, W, M), 0.0175),
        ((W, M, M), 0.0175),
        ((M, G, M), 0.0175),
        ((G, M, M), 0.0175),
    ]),
    chipper_probability=0.12,
    duration_by_structure=_freeze({
        Structure.SINGLE: WeightTable("duration_single", [
            (SHORT, 0.08), (MEDIUM, 0.50), (LONG, 0.42),
        ]),
        Structure.COUPLET: WeightTable("duration_couplet", [
            (SHORT, 0.15), (MEDIUM, 0.50), (LONG, 0.35),
        ]),
        Structure.TRIPLET: WeightTable("duration_triplet", [
            (SHORT, 0.05), (MEDIUM, 0.45), (LONG, 0.50),
        ]),
    }),
    single_formats=_freeze({
        W: _freeze({
            SHORT: WeightTable("single_w_short", [
                (F.SETS, 0.40), (F.EMOM, 0.45), (F.BENCHMARK, 0.10),
                (F.FOR_TIME_WITH_REPS, 0.05),
            ]),
            MEDIUM: WeightTable("single_w_medium", [
                (F.SETS, 0.50), (F.EMOM, 0.35), (F.BENCHMARK, 0.10),
                (F.FOR_TIME_WITH_REPS, 0.05),
            ]),
            LONG: WeightTable("single_w_long", [
                (F.SETS, 0.35), (F.EMOM, 0.55), (F.BENCHMARK, 0.05),
                (F.FOR_TIME_WITH_REPS, 0.05),
            ]),
        }),
        G: _freeze({
            SHORT: WeightTable("single_g_short", [
                (F.FOR_TIME, 0.40), (F.ROUNDS_FOR_TIME, 0.10), (F.AMRAP, 0.15),
                (F.INTERVALS, 0.10), (F.EMOM, 0.20), (F.BENCHMARK, 0.03),
                (F.SKILL, 0.02),
            ]),
            MEDIUM: WeightTable("single_g_medium", [
                (F.FOR_TIME, 0.27), (F.ROUNDS_FOR_TIME, 0.15), (F.AMRAP, 0.25),
                (F.INTERVALS, 0.08), (F.EMOM, 0.15), (F.BENCHMARK, 0.05),
                (F.SKILL, 0.05),
            ]),
            LONG: WeightTable("single_g_long", [
                (F.FOR_TIME, 0.20), (F.ROUNDS_FOR_TIME, 0.15), (F.AMRAP, 0.30),
                (F.INTERVALS, 0.12), (F.EMOM, 0.15), (F.BENCHMARK, 0.05),
                (F.SKILL, 0.03),
            ]),
        }),
        M: _freeze({
            SHORT: WeightTable("single_m_short", [
                (F.BENCHMARK, 0.40), (F.INTERVALS, 0.40), (F.FOR_TIME, 0.15),
                (F.ROUNDS_FOR_TIME, 0.05),
            ]),
            MEDIUM: WeightTable("single_m_medium", [
                (F.BENCHMARK, 0.50), (F.INTERVALS, 0.30), (F.FOR_TIME, 0.15),
                (F.ROUNDS_FOR_TIME, 0.05),
            ]),
            LONG: WeightTable("single_m_long", [
                (F.BENCHMARK, 0.55), (F.INTERVALS, 0.30), (F.FOR_TIME, 0.10),
                (F.ROUNDS_FOR_TIME, 0.05),
            ]),
        }),
    }),
    couplet_formats=_freeze({
        SHORT: WeightTable("couplet_short", [
            (F.FOR_TIME, 0.40), (F.ROUNDS_FOR_TIME, 0.20), (F.AMRAP, 0.20),
            (F.INTERVALS, 0.05), (F.EMOM, 0.10), (F.BENCHMARK, 0.05),
        ]),
        MEDIUM: WeightTable("couplet_medium", [
            (F.FOR_TIME, 0.30), (F.ROUNDS_FOR_TIME, 0.20), (F.AMRAP, 0.30),
            (F.INTERVALS, 0.05), (F.EMOM, 0.13), (F.BENCHMARK, 0.02),
        ]),
        LONG: WeightTable("couplet_long", [
            (F.FOR_TIME, 0.20), (F.ROUNDS_FOR_TIME, 0.15), (F.AMRAP, 0.45),
            (F.INTERVALS, 0.08), (F.EMOM, 0.10), (F.BENCHMARK, 0.02),
        ]),
    }),
    triplet_formats=_freeze({
        SHORT: WeightTable("triplet_short", [
            (F.FOR_TIME, 0.35), (F.ROUNDS_FOR_TIME, 0.25), (F.AMRAP, 0.25),
            (F.INTERVALS, 0.05), (F.EMOM, 0.07), (F.BENCHMARK, 0.03),
        ]),
        MEDIUM: WeightTable("triplet_medium", [
            (F.FOR_TIME, 0.25), (F.ROUNDS_FOR_TIME, 0.20), (F.AMRAP, 0.35),
            (F.INTERVALS, 0.08), (F.EMOM, 0.10), (F.BENCHMARK, 0.02),
        ]),
        LONG: WeightTable("triplet_long", [
            (F.FOR_TIME, 0.20), (F.ROUNDS_FOR_TIME, 0.15), (F.AMRAP, 0.45),
            (F.INTERVALS, 0.10), (F.EMOM, 0.09), (F.BENCHMARK, 0.01),
        ]),
    }),
)


# ---------------------------------------------------------------------------
# classic-1 (uniform combinations)
# ---------------------------------------------------------------------------

CLASSIC_WEIGHTS = WeightConfig(
    version="classic-1",
    single_modality=WeightTable.uniform("single_modality", (W, G, M)),
    couplet_combinations=WeightTable.uniform("couplet_combinations", ALL_PAIRS),
    triplet_combinations=WeightTable.uniform("triplet_combinations", ALL_TRIPLES),
    chipper_probability=0.20,
    duration_by_structure=_freeze({
        Structure.SINGLE: WeightTable("duration_single", [
            (SHORT, 0.05), (MEDIUM, 0.45), (LONG, 0.50),
        ]),
        Structure.COUPLET: WeightTable("duration_couplet", [
            (SHORT, 0.25), (MEDIUM, 0.50), (LONG, 0.25),
        ]),
        Structure.TRIPLET: WeightTable("duration_triplet", [
            (SHORT, 0.05), (MEDIUM, 0.35), (LONG, 0.60),
        ]),
    }),
    single_formats=_freeze({
        W: _freeze({
            SHORT: WeightTable("single_w_short", [
                (F.SETS, 0.45), (F.EMOM, 0.35), (F.BENCHMARK, 0.10),
                (F.FOR_TIME_WITH_REPS, 0.10),
            ]),
            MEDIUM: WeightTable("single_w_medium", [
                (F.SETS, 0.65), (F.EMOM, 0.20), (F.BENCHMARK, 0.10),
                (F.FOR_TIME_WITH_REPS, 0.05),
            ]),
            LONG: WeightTable("single_w_long", [
                (F.SETS, 0.50), (F.EMOM, 0.35), (F.BENCHMARK, 0.05),
                (F.FOR_TIME_WITH_REPS, 0.10),
            ]),
        }),
        G: _freeze({
            SHORT: WeightTable("single_g_short", [
                (F.FOR_TIME, 0.35), (F.AMRAP, 0.15), (F.INTERVALS, 0.15),
                (F.EMOM, 0.20), (F.BENCHMARK, 0.05), (F.SKILL, 0.10),
            ]),
            MEDIUM: WeightTable("single_g_medium", [
                (F.FOR_TIME, 0.30), (F.AMRAP, 0.35), (F.INTERVALS, 0.10),
                (F.EMOM, 0.10), (F.BENCHMARK, 0.05), (F.SKILL, 0.10),
            ]),
            LONG: WeightTable("single_g_long", [
                (F.FOR_TIME, 0.20), (F.AMRAP, 0.40), (F.INTERVALS, 0.15),
                (F.EMOM, 0.10), (F.BENCHMARK, 0.05), (F.SKILL, 0.10),
            ]),
        }),
        M: _freeze({
            SHORT: WeightTable("single_m_short", [
                (F.BENCHMARK, 0.45), (F.INTERVALS, 0.45), (F.FOR_TIME, 0.10),
            ]),
            MEDIUM: WeightTable("single_m_medium", [
                (F.BENCHMARK, 0.60), (F.INTERVALS, 0.30), (F.FOR_TIME, 0.10),
            ]),
            LONG: WeightTable("single_m_long", [
                (F.BENCHMARK, 0.70), (F.INTERVALS, 0.25), (F.FOR_TIME, 0.05),
            ]),
        }),
    }),
    couplet_formats=_freeze({
        SHORT: WeightTable("couplet_short", [
            (F.FOR_TIME, 0.65), (F.AMRAP, 0.25), (F.INTERVALS, 0.05),
            (F.BENCHMARK, 0.05),
        ]),
        MEDIUM: WeightTable("couplet_medium", [
            (F.FOR_TIME, 0.50), (F.AMRAP, 0.40), (F.INTERVALS, 0.05),
            (F.BENCHMARK, 0.05),
        ]),
        LONG: WeightTable("couplet_long", [
            (F.FOR_TIME, 0.25), (F.AMRAP, 0.60), (F.INTERVALS, 0.10),
            (F.BENCHMARK, 0.05),
        ]),
    }),
    triplet_formats=_freeze({
        SHORT: WeightTable("triplet_short", [
            (F.FOR_TIME, 0.50), (F.AMRAP, 0.35), (F.INTERVALS, 0.10),
            (F.BENCHMARK, 0.05),
        ]),
        MEDIUM: WeightTable("triplet_medium", [
            (F.FOR_TIME, 0.30), (F.AMRAP, 0.55), (F.INTERVALS, 0.10),
            (F.BENCHMARK, 0.05),
        ]),
        LONG: WeightTable("triplet_long", [
            (F.FOR_TIME, 0.15), (F.AMRAP, 0.70), (F.INTERVALS, 0.10),
            (F.BENCHMARK, 0.05),
        ]),
    }),
)


DEFAULT_WEIGHTS = LINCHPIN_WEIGHTS

WEIGHT_VERSIONS: Mapping[str, WeightConfig] = _freeze({
    LINCHPIN_WEIGHTS.version: LINCHPIN_WEIGHTS,
    CLASSIC_WEIGHTS.version: CLASSIC_WEIGHTS,
})


def get_weight_config(version: str) -> WeightConfig:
    """Look up a shipped weight config by version string."""
    try:
        return WEIGHT_VERSIONS[version]
    except KeyError:
        known = ", ".join(sorted(WEIGHT_VERSIONS))
        raise WeightConfigError(
            f"Unknown weight version '{version}' (known: {known})", version=version
        ) from None
