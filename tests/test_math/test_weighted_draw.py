"""Tests for WeightTable — cumulative-threshold weighted draws."""

from __future__ import annotations

import pytest

from wod_engine.exceptions import WeightTableError
from wod_engine.math.weighted_draw import WeightTable, bernoulli


class TestWeightTableDraw:
    def setup_method(self) -> None:
        self.table = WeightTable("abc", [("a", 0.5), ("b", 0.3), ("c", 0.2)])

    def test_zero_selects_first_entry(self) -> None:
        assert self.table.draw(0.0) == "a"

    def test_boundary_resolves_to_later_bucket(self) -> None:
        # r == cumulative bound of "a" is not strictly below it
        assert self.table.draw(0.5) == "b"

    def test_just_below_boundary_stays_in_bucket(self) -> None:
        assert self.table.draw(0.4999) == "a"

    def test_middle_bucket(self) -> None:
        assert self.table.draw(0.7) == "b"

    def test_near_one_selects_last_entry(self) -> None:
        assert self.table.draw(0.999999) == "c"

    def test_thresholds_ascending(self) -> None:
        thresholds = self.table.thresholds
        assert list(thresholds) == sorted(thresholds)
        assert thresholds[-1] == pytest.approx(1.0)

    def test_probability_lookup(self) -> None:
        assert self.table.probability("b") == pytest.approx(0.3)
        assert self.table.probability("missing") == 0.0

    def test_len_and_iter(self) -> None:
        assert len(self.table) == 3
        assert dict(self.table) == {"a": 0.5, "b": 0.3, "c": 0.2}

    def test_float_sum_boundary_is_exact_decimal(self) -> None:
        # 0.40 + 0.45 sums to 0.8500000000000001 in binary floating point
        table = WeightTable("drift", [("a", 0.40), ("b", 0.45), ("c", 0.15)])
        assert table.thresholds[1] == 0.85
        assert table.draw(0.85) == "c"


class TestZeroWeightEntries:
    def test_zero_weight_in_middle_never_drawn(self) -> None:
        table = WeightTable("gap", [("a", 0.5), ("z", 0.0), ("b", 0.5)])
        assert table.draw(0.5) == "b"
        assert table.draw(0.49) == "a"
        assert "z" not in table.support

    def test_zero_weight_first_never_drawn(self) -> None:
        table = WeightTable("lead", [("z", 0.0), ("a", 1.0)])
        assert table.draw(0.0) == "a"

    def test_fallback_skips_trailing_zero_weight(self) -> None:
        table = WeightTable("tail", [("a", 0.4), ("b", 0.4), ("z", 0.0)], validate=False)
        # Sum short of 1.0: nothing exceeds r, fallback is the last positive entry
        assert table.draw(0.95) == "b"

    def test_fallback_when_sum_short_of_one(self) -> None:
        table = WeightTable("short", [("a", 0.3), ("b", 0.3)], validate=False)
        assert table.draw(0.9) == "b"


class TestWeightTableValidation:
    def test_empty_table_rejected(self) -> None:
        with pytest.raises(WeightTableError):
            WeightTable("empty", [])

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(WeightTableError):
            WeightTable("neg", [("a", 1.2), ("b", -0.2)])

    def test_all_zero_rejected(self) -> None:
        with pytest.raises(WeightTableError):
            WeightTable("zero", [("a", 0.0), ("b", 0.0)], validate=False)

    def test_sum_must_be_one(self) -> None:
        with pytest.raises(WeightTableError, match="sums to"):
            WeightTable("bad", [("a", 0.5), ("b", 0.4)])

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            WeightTable("bad", [("a", 0.5)])

    def test_uniform_table(self) -> None:
        table = WeightTable.uniform("u", ["x", "y", "z"])
        assert table.total == pytest.approx(1.0)
        assert table.draw(0.0) == "x"
        assert table.draw(0.5) == "y"
        assert table.draw(0.99) == "z"


class TestBernoulli:
    def test_below_probability_is_true(self) -> None:
        assert bernoulli(0.11, 0.12) is True

    def test_at_probability_is_false(self) -> None:
        assert bernoulli(0.12, 0.12) is False

    def test_zero_probability_never_true(self) -> None:
        assert bernoulli(0.0, 0.0) is False
