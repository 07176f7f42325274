"""
Tests for report assembly and exact report wording.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from pysigma import analyze
from pysigma.core.exceptions import DimensionError, InvalidInputError
from pysigma.core.formatting import FormattingMode
from pysigma.datasets import example_data
from pysigma.descriptive import describe
from pysigma.regression import Diagnostic, DiagnosticReason, RegressionKind, fit
from pysigma.report import build_report, render_diagnostic

ALL_SECTIONS = ['table', 'sums', 'correlation', 'distribution', 'outliers', 'trendline']


def section_names(report):
    return [s.name for s in report.sections]


# ═══════════════════════════════════════════════════════════════════════
# Full linear report
# ═══════════════════════════════════════════════════════════════════════


class TestLinearReport:

    def test_table_layout(self, perfect_line):
        lines = analyze(*perfect_line).text.split("\n")
        header = lines[0]
        assert header.split() == ['Index', 'X', 'Y', 'X^2', 'Y^2', 'XY']
        assert [header.index(col) for col in ('X ', 'Y ', 'X^2', 'Y^2', 'XY')] == [
            8, 19, 30, 43, 56,
        ]
        assert len(header) == 68
        assert lines[1].split() == ['1', '1', '2', '1', '4', '2']
        assert lines[3].split() == ['3', '3', '6', '9', '36', '18']
        assert lines[3].index('6') == 19

    def test_text_after_table(self, perfect_line):
        text = analyze(*perfect_line).text
        assert text.split("\n")[4:] == [
            "",
            "Σx = 6",
            "Σy = 12",
            "Σx² = 14",
            "Σy² = 56",
            "Σxy = 28",
            "n = 3",
            "r = 1.0000",
            "r² = 1.0000",
            "The correlation is positive.",
            "Perfect correlation.",
            "",
            "Mean of Y: 4",
            "Standard Deviation of Y: 1.63",
            "No outliers detected.",
            "",
            "Trendline equation: y = 2x + 0",
            "",
        ]

    def test_exact_mode(self, perfect_line):
        report = analyze(*perfect_line, mode='exact')
        assert report.mode is FormattingMode.EXACT
        assert f"Standard Deviation of Y: {math.sqrt(8 / 3)!r}" in report.text.split("\n")
        # correlation keeps four decimals in every mode
        assert "r = 1.0000" in report.text

    def test_bool_mode(self):
        x, y = [0.0, 1.0], [0.125, 3.25]
        assert "Trendline equation: y = 3.13x + 0.13" in analyze(x, y, mode=True).text
        assert "Trendline equation: y = 3.125x + 0.125" in analyze(x, y, mode=False).text

    def test_sections_and_str(self, perfect_line):
        report = analyze(*perfect_line)
        assert section_names(report) == ALL_SECTIONS
        assert str(report) == report.text
        assert report.text.endswith("\n")

    def test_to_dict(self, perfect_line):
        payload = analyze(*perfect_line, kind='power').to_dict()
        assert payload['x'] == [1.0, 2.0, 3.0]
        assert payload['y'] == [2.0, 4.0, 6.0]
        assert payload['regression_type'] == 'power'
        assert payload['text_output'].startswith("Index")

    def test_to_dict_reports_fitted_kind(self, perfect_line):
        with pytest.warns(UserWarning):
            payload = analyze(*perfect_line, kind='Cubic').to_dict()
        assert payload['regression_type'] == 'linear'


# ═══════════════════════════════════════════════════════════════════════
# Per-kind trendline sections
# ═══════════════════════════════════════════════════════════════════════


class TestTrendlineSections:

    def test_quadratic(self, parabola):
        report = analyze(*parabola, kind='quadratic')
        assert report.section('trendline').lines == (
            "Quadratic Trendline equation: y = 1x² + 0x + 0",
            "Vertex: (0, 0) - This is a minimum",
        )
        assert report.section('correlation').lines == (
            "r = 0.0000",
            "r² = 0.0000",
            "There is no pos/neg correlation.",
            "There is no spectrum correlation.",
        )

    def test_quadratic_straight_line(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        report = analyze(x, 2.0 * x + 1.0, kind='quadratic')
        assert report.section('trendline').lines == (
            "Quadratic Trendline equation: y = 0x² + 2x + 1",
            "Vertex: undefined (a = 0, the fitted curve is a straight line).",
        )

    def test_quadratic_float_straight_line(self):
        x = np.array([0.1, 0.2, 0.3, 0.4])
        report = analyze(x, 2.0 * x + 1.0, kind='quadratic')
        assert report.section('trendline').lines == (
            "Quadratic Trendline equation: y = 0x² + 2x + 1",
            "Vertex: undefined (a = 0, the fitted curve is a straight line).",
        )

    def test_quadratic_zero_determinant(self):
        report = analyze([1.0, 2.0, 1.0, 2.0], [1.0, 2.0, 3.0, 4.0], kind='quadratic')
        assert report.section('trendline').lines == (
            "Could not calculate quadratic regression (determinant is zero).",
        )

    def test_exponential(self, exponential_data):
        report = analyze(*exponential_data, kind='exponential')
        assert report.section('trendline').lines == (
            "Exponential equation: y = 3*e^(0.5*(x-2))",
            "Solving for x: x = 2 + ln(y/3)/0.5",
            "r² for exponential fit: 1",
        )

    def test_power(self, power_data):
        report = analyze(*power_data, kind='power')
        assert report.section('trendline').lines == (
            "Power equation: y = 2*x^3",
            "Solving for x: x = (y/2)^(1/3)",
            "r² for power fit: 1",
        )


# ═══════════════════════════════════════════════════════════════════════
# Partial reports
# ═══════════════════════════════════════════════════════════════════════


class TestPartialReports:

    def test_exponential_rejects_negative_y(self):
        report = analyze([1.0, 2.0, 3.0, 4.0], [1.0, 2.0, -3.0, 4.0], kind='exponential')
        assert section_names(report) == ALL_SECTIONS
        assert "Σx = 10" in report.text
        assert report.text.endswith(
            "\nCannot perform exponential regression: "
            "y value at index 2 is not positive (-3).\n"
        )
        assert report.diagnostics[0].reason is DiagnosticReason.NON_POSITIVE_VALUE

    def test_power_rejects_zero_x(self):
        report = analyze([1.0, 0.0, 2.0], [1.0, 2.0, 3.0], kind='power')
        assert report.section('trendline').lines == (
            "Cannot perform power regression: x value at index 1 is not positive (0).",
        )

    def test_exponential_same_x(self):
        report = analyze([2.0, 2.0, 2.0], [1.0, 2.0, 3.0], kind='exponential')
        assert report.section('correlation').lines == (
            "r is undefined (denominator for r is zero).",
        )
        assert report.section('trendline').lines == (
            "Cannot perform exponential regression: denominator for b is zero "
            "(all X values may be the same).",
        )

    def test_linear_same_x_omits_trendline(self):
        report = analyze([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])
        assert section_names(report) == ALL_SECTIONS[:-1]
        assert report.section('trendline') is None
        assert report.text.endswith("No outliers detected.\n")
        assert any("omitted" in w for w in report.warnings)

    def test_overflowing_values(self):
        report = analyze([1e200, 2e200], [1.0, 2.0])
        lines = report.text.split("\n")
        assert "Σx² = undefined" in lines
        assert "Some sums are undefined: the values are too large to represent." in lines
        assert "r is undefined (the correlation is not a finite number)." in lines
        assert report.section('trendline') is None


class TestOutlierSection:

    def test_spike(self, spike_data):
        report = analyze(*spike_data)
        assert report.section('outliers').lines == (
            "Outliers detected at the following indices (0-based):",
            "Index 9: X = 9, Y = 100",
        )


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic wording
# ═══════════════════════════════════════════════════════════════════════


class TestRenderDiagnostic:

    def test_invalid_coefficients(self):
        d = Diagnostic(DiagnosticReason.INVALID_COEFFICIENT, RegressionKind.QUADRATIC)
        assert render_diagnostic(d) == (
            "Could not calculate quadratic regression: coefficients are not "
            "finite numbers (possibly due to data scale or input values)."
        )

    def test_invalid_named_coefficient(self):
        d = Diagnostic(
            DiagnosticReason.INVALID_COEFFICIENT, RegressionKind.POWER,
            variable='a', value=math.inf,
        )
        assert render_diagnostic(d) == (
            "Could not calculate power regression: invalid coefficient a "
            "(possibly due to data scale or input values)."
        )

    def test_non_finite_vertex(self):
        d = Diagnostic(
            DiagnosticReason.UNDEFINED_VERTEX, RegressionKind.QUADRATIC,
            variable='x', value=math.inf,
        )
        assert render_diagnostic(d) == (
            "Vertex: undefined (the turning point is not a finite number)."
        )

    def test_value_follows_mode(self):
        d = Diagnostic(
            DiagnosticReason.NON_POSITIVE_VALUE, RegressionKind.POWER,
            variable='y', index=0, value=-1.23456,
        )
        assert render_diagnostic(d).endswith("(-1.23).")
        assert render_diagnostic(d, 'exact').endswith("(-1.23456).")


# ═══════════════════════════════════════════════════════════════════════
# Entry point behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestAnalyze:

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            analyze([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="empty"):
            analyze([], [])

    def test_unknown_mode(self, perfect_line):
        with pytest.raises(InvalidInputError, match="formatting mode"):
            analyze(*perfect_line, mode='fancy')

    def test_unknown_kind(self, perfect_line):
        with pytest.warns(UserWarning, match="unrecognized regression kind"):
            report = analyze(*perfect_line, kind='sigmoid')
        assert report.trend.kind is RegressionKind.LINEAR
        assert "Trendline equation: y = 2x + 0" in report.text
        assert any("sigmoid" in w for w in report.warnings)

    def test_matches_build_report(self, perfect_line):
        statistics = describe(*perfect_line)
        trend = fit(*perfect_line, kind='quadratic')
        assert build_report(statistics, trend).text == (
            analyze(*perfect_line, kind='quadratic').text
        )

    def test_build_report_rejects_mismatch(self, perfect_line):
        with pytest.raises(ValueError, match="different samples"):
            build_report(describe(*perfect_line), fit([1.0, 2.0], [3.0, 4.0]))

    @pytest.mark.parametrize("kind", [k.value for k in RegressionKind])
    def test_example_datasets_fit(self, kind):
        report = analyze(*example_data(kind), kind=kind)
        assert report.trend.is_fitted
        assert report.diagnostics == ()

    def test_concurrent_calls(self):
        jobs = [(example_data(k), k) for k in RegressionKind] * 4
        expected = [analyze(*data, kind=k).text for data, k in jobs]
        with ThreadPoolExecutor(max_workers=4) as pool:
            got = list(pool.map(lambda job: analyze(*job[0], kind=job[1]).text, jobs))
        assert got == expected
