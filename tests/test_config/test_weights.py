"""Static validation of the shipped weight configurations."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType

import pytest

from wod_engine.config.weights import (
    ALL_PAIRS,
    ALL_TRIPLES,
    CLASSIC_WEIGHTS,
    DEFAULT_WEIGHTS,
    LINCHPIN_WEIGHTS,
    get_weight_config,
)
from wod_engine.exceptions import WeightConfigError
from wod_engine.math.weighted_draw import WeightTable
from wod_engine.models.enums import (
    WEIGHT_SUM_TOLERANCE,
    CombinationCategory,
    DurationBucket,
    Modality,
    Structure,
    WorkoutFormat,
)

W = Modality.WEIGHTLIFTING
G = Modality.GYMNASTICS
M = Modality.MONOSTRUCTURAL


class TestShippedTables:
    def test_every_table_sums_to_one(self, any_weights) -> None:
        for table in any_weights.all_tables():
            assert abs(sum(table.weights) - 1.0) < WEIGHT_SUM_TOLERANCE, table.name

    def test_configs_validate(self, any_weights) -> None:
        any_weights.validate()

    def test_default_is_linchpin(self) -> None:
        assert DEFAULT_WEIGHTS is LINCHPIN_WEIGHTS

    def test_couplet_table_lists_all_nine_pairs(self, any_weights) -> None:
        assert set(any_weights.couplet_combinations.outcomes) == set(ALL_PAIRS)
        assert len(ALL_PAIRS) == 9

    def test_triplet_table_lists_all_27_triples(self, any_weights) -> None:
        assert set(any_weights.triplet_combinations.outcomes) == set(ALL_TRIPLES)
        assert len(ALL_TRIPLES) == 27

    def test_linchpin_never_draws_pure_monostructural_couplet(self) -> None:
        assert (M, M) not in LINCHPIN_WEIGHTS.couplet_combinations.support

    def test_linchpin_single_order(self) -> None:
        assert LINCHPIN_WEIGHTS.single_modality.outcomes == (W, M, G)

    def test_chipper_probabilities(self) -> None:
        assert LINCHPIN_WEIGHTS.chipper_probability == 0.12
        assert CLASSIC_WEIGHTS.chipper_probability == 0.20

    def test_classic_is_uniform(self) -> None:
        for modality in Modality:
            assert CLASSIC_WEIGHTS.single_modality.probability(modality) == pytest.approx(1 / 3)
        for pair in ALL_PAIRS:
            assert CLASSIC_WEIGHTS.couplet_combinations.probability(pair) == pytest.approx(1 / 9)


class TestCumulativeBoundaries:
    def test_draw_at_each_bound_moves_to_later_entry(self) -> None:
        for table in LINCHPIN_WEIGHTS.all_tables():
            for outcome, bound in zip(table.outcomes, table.thresholds):
                literal = round(bound, 6)
                if literal >= 1.0:
                    continue
                assert table.draw(literal) != outcome, (table.name, literal)

    def test_thresholds_match_decimal_literals(self) -> None:
        for table in LINCHPIN_WEIGHTS.all_tables():
            for bound in table.thresholds:
                assert bound == round(bound, 6), (table.name, bound)

    def test_single_weightlifting_short_tie_at_085(self) -> None:
        table = LINCHPIN_WEIGHTS.format_table(Structure.SINGLE, W, DurationBucket.SHORT)
        assert table.thresholds[1] == 0.85
        assert table.draw(0.85) == WorkoutFormat.BENCHMARK

    def test_single_gymnastics_medium_tie_at_042(self) -> None:
        table = LINCHPIN_WEIGHTS.format_table(Structure.SINGLE, G, DurationBucket.MEDIUM)
        assert table.draw(0.42) == WorkoutFormat.AMRAP


class TestLegalFormats:
    def test_skill_only_for_gymnastics_singles(self, any_weights) -> None:
        assert WorkoutFormat.SKILL in any_weights.legal_formats(Structure.SINGLE, G)
        assert WorkoutFormat.SKILL not in any_weights.legal_formats(Structure.SINGLE, W)
        assert WorkoutFormat.SKILL not in any_weights.legal_formats(Structure.SINGLE, M)
        assert WorkoutFormat.SKILL not in any_weights.legal_formats(Structure.COUPLET)
        assert WorkoutFormat.SKILL not in any_weights.legal_formats(Structure.TRIPLET)

    def test_no_amrap_for_monostructural_singles(self, any_weights) -> None:
        assert WorkoutFormat.AMRAP not in any_weights.legal_formats(Structure.SINGLE, M)

    def test_weightlifting_single_formats(self) -> None:
        assert LINCHPIN_WEIGHTS.legal_formats(Structure.SINGLE, W) == {
            WorkoutFormat.SETS,
            WorkoutFormat.EMOM,
            WorkoutFormat.BENCHMARK,
            WorkoutFormat.FOR_TIME_WITH_REPS,
        }

    def test_linchpin_couplet_and_triplet_share_six_formats(self) -> None:
        six = {
            WorkoutFormat.FOR_TIME,
            WorkoutFormat.ROUNDS_FOR_TIME,
            WorkoutFormat.AMRAP,
            WorkoutFormat.INTERVALS,
            WorkoutFormat.EMOM,
            WorkoutFormat.BENCHMARK,
        }
        assert LINCHPIN_WEIGHTS.legal_formats(Structure.COUPLET) == six
        assert LINCHPIN_WEIGHTS.legal_formats(Structure.TRIPLET) == six

    def test_chipper_is_for_time_only(self) -> None:
        assert LINCHPIN_WEIGHTS.legal_formats(Structure.CHIPPER) == {WorkoutFormat.FOR_TIME}

    def test_single_needs_leading_modality(self) -> None:
        with pytest.raises(WeightConfigError):
            LINCHPIN_WEIGHTS.legal_formats(Structure.SINGLE)


class TestTableLookup:
    def test_format_table_for_single_uses_leading(self) -> None:
        table = LINCHPIN_WEIGHTS.format_table(Structure.SINGLE, M, DurationBucket.SHORT)
        assert table.name == "single_m_short"

    def test_couplet_format_table_ignores_leading(self) -> None:
        a = LINCHPIN_WEIGHTS.format_table(Structure.COUPLET, W, DurationBucket.LONG)
        b = LINCHPIN_WEIGHTS.format_table(Structure.COUPLET, M, DurationBucket.LONG)
        assert a is b

    def test_chipper_has_no_format_table(self) -> None:
        with pytest.raises(WeightConfigError):
            LINCHPIN_WEIGHTS.format_table(Structure.CHIPPER, None, DurationBucket.LONG)

    def test_chipper_has_no_combination_table(self) -> None:
        with pytest.raises(WeightConfigError):
            LINCHPIN_WEIGHTS.combination_table(Structure.CHIPPER)

    def test_duration_table_falls_back_to_structure(self) -> None:
        table = LINCHPIN_WEIGHTS.duration_table(Structure.TRIPLET, CombinationCategory.TRI_MODAL)
        assert table is LINCHPIN_WEIGHTS.duration_by_structure[Structure.TRIPLET]

    def test_duration_table_prefers_category(self) -> None:
        tri = WeightTable("tri_modal", [(DurationBucket.LONG, 1.0)])
        config = dataclasses.replace(
            LINCHPIN_WEIGHTS,
            duration_by_category=MappingProxyType(
                {Structure.TRIPLET: {CombinationCategory.TRI_MODAL: tri}}
            ),
        )
        assert config.duration_table(Structure.TRIPLET, CombinationCategory.TRI_MODAL) is tri
        assert tri in config.all_tables()


class TestValidationFailures:
    def test_chipper_probability_out_of_range(self) -> None:
        config = dataclasses.replace(LINCHPIN_WEIGHTS, chipper_probability=1.5)
        with pytest.raises(WeightConfigError, match="Chipper probability"):
            config.validate()

    def test_amrap_in_monostructural_single_rejected(self) -> None:
        amrap_table = WeightTable("m_amrap", [
            (WorkoutFormat.BENCHMARK, 0.5), (WorkoutFormat.AMRAP, 0.5),
        ])
        single_formats = dict(LINCHPIN_WEIGHTS.single_formats)
        single_formats[M] = {bucket: amrap_table for bucket in DurationBucket}
        config = dataclasses.replace(LINCHPIN_WEIGHTS, single_formats=single_formats)
        with pytest.raises(WeightConfigError, match="AMRAP"):
            config.validate()

    def test_skill_in_weightlifting_single_rejected(self) -> None:
        skill_table = WeightTable("w_skill", [
            (WorkoutFormat.SETS, 0.9), (WorkoutFormat.SKILL, 0.1),
        ])
        single_formats = dict(LINCHPIN_WEIGHTS.single_formats)
        single_formats[W] = {bucket: skill_table for bucket in DurationBucket}
        config = dataclasses.replace(LINCHPIN_WEIGHTS, single_formats=single_formats)
        with pytest.raises(WeightConfigError, match="SKILL"):
            config.validate()

    def test_missing_pair_rejected(self) -> None:
        partial = WeightTable.uniform("couplet_partial", ALL_PAIRS[:8])
        config = dataclasses.replace(LINCHPIN_WEIGHTS, couplet_combinations=partial)
        with pytest.raises(WeightConfigError, match="9 ordered pairs"):
            config.validate()

    def test_missing_bucket_rejected(self) -> None:
        couplet_formats = dict(LINCHPIN_WEIGHTS.couplet_formats)
        del couplet_formats[DurationBucket.SHORT]
        config = dataclasses.replace(LINCHPIN_WEIGHTS, couplet_formats=couplet_formats)
        with pytest.raises(WeightConfigError, match="Couplet"):
            config.validate()


class TestVersionRegistry:
    def test_lookup_by_version(self) -> None:
        assert get_weight_config("linchpin-2") is LINCHPIN_WEIGHTS
        assert get_weight_config("classic-1") is CLASSIC_WEIGHTS

    def test_unknown_version(self) -> None:
        with pytest.raises(WeightConfigError, match="Unknown weight version") as excinfo:
            get_weight_config("v0")
        assert excinfo.value.version == "v0"
