"""
Tests for rounded and exact number rendering.

Rounded mode rounds half away from zero to two decimals and then prints
the shortest decimal form; exact mode prints the shortest decimal form
that round-trips to the value itself.
"""

import math

import numpy as np
import pytest

from pysigma.core.exceptions import InvalidInputError
from pysigma.core.formatting import (
    UNDEFINED,
    FormattingMode,
    format_correlation,
    format_number,
    resolve_mode,
    round_half_away,
    shortest_decimal,
)
from pysigma.core.thresholds import ReportThresholds


# ═══════════════════════════════════════════════════════════════════════
# Mode resolution
# ═══════════════════════════════════════════════════════════════════════


class TestResolveMode:

    def test_enum_passthrough(self):
        assert resolve_mode(FormattingMode.EXACT) is FormattingMode.EXACT

    @pytest.mark.parametrize("text", ["exact", "EXACT", " Exact "])
    def test_string_normalized(self, text):
        assert resolve_mode(text) is FormattingMode.EXACT

    def test_bool_is_rounding_flag(self):
        assert resolve_mode(True) is FormattingMode.ROUNDED
        assert resolve_mode(False) is FormattingMode.EXACT

    def test_unknown_string(self):
        with pytest.raises(InvalidInputError, match="Unknown formatting mode"):
            resolve_mode("scientific")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            resolve_mode(2)


# ═══════════════════════════════════════════════════════════════════════
# Rounded mode
# ═══════════════════════════════════════════════════════════════════════


class TestRounded:

    def test_two_decimals(self):
        assert format_number(3.14159) == "3.14"

    def test_trailing_zeros_trimmed(self):
        assert format_number(3.10) == "3.1"

    def test_integral_has_no_point(self):
        assert format_number(2.0) == "2"

    def test_ties_away_from_zero(self):
        # 0.125 and -0.125 are exact binary fractions
        assert format_number(0.125) == "0.13"
        assert format_number(-0.125) == "-0.13"

    def test_just_below_half_rounds_down(self):
        # 0.004999999999999999 * 100 == 0.4999999999999999
        assert format_number(0.004999999999999999) == "0"
        assert format_number(-0.004999999999999999) == "0"

    def test_integral_after_scaling_is_unchanged(self):
        # value * 100 is an odd integer above 2**52
        assert format_number(45035996273704.97) == "45035996273704.97"

    def test_small_negative_rounds_to_plain_zero(self):
        assert format_number(-0.001) == "0"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_large_value_positional(self):
        assert format_number(1e22) == "10000000000000000000000"

    def test_custom_decimals(self):
        thresholds = ReportThresholds(rounding_decimals=3)
        assert format_number(3.14159, thresholds=thresholds) == "3.142"

    def test_round_half_away_passthrough_for_huge(self):
        assert round_half_away(2.0 ** 60, 2) == 2.0 ** 60

    def test_round_half_away_nan(self):
        assert math.isnan(round_half_away(math.nan, 2))


# ═══════════════════════════════════════════════════════════════════════
# Exact mode
# ═══════════════════════════════════════════════════════════════════════


class TestExact:

    def test_all_digits_kept(self):
        assert format_number(3.14159, 'exact') == "3.14159"

    def test_shortest_round_trip(self):
        assert format_number(0.1 + 0.2, 'exact') == "0.30000000000000004"

    def test_no_scientific_notation(self):
        assert format_number(1e-7, 'exact') == "0.0000001"

    def test_round_trips(self, rng):
        for value in rng.normal(scale=1e3, size=50):
            assert float(shortest_decimal(float(value))) == float(value)

    def test_numpy_scalar(self):
        assert format_number(np.float64(2.5), FormattingMode.EXACT) == "2.5"


# ═══════════════════════════════════════════════════════════════════════
# Non-finite values and correlation precision
# ═══════════════════════════════════════════════════════════════════════


class TestUndefined:

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    @pytest.mark.parametrize("mode", ["rounded", "exact"])
    def test_non_finite(self, value, mode):
        assert format_number(value, mode) == UNDEFINED

    def test_correlation_non_finite(self):
        assert format_correlation(math.nan) == UNDEFINED


class TestCorrelation:

    def test_four_decimals(self):
        assert format_correlation(1.0) == "1.0000"
        assert format_correlation(-0.5) == "-0.5000"
        assert format_correlation(0.123456) == "0.1235"

    def test_negative_zero(self):
        assert format_correlation(-0.0) == "0.0000"

    def test_custom_decimals(self):
        thresholds = ReportThresholds(correlation_decimals=2)
        assert format_correlation(0.987, thresholds=thresholds) == "0.99"
