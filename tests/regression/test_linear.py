"""
Tests for the linear trendline.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pysigma.regression import fit


class TestLinearFit:

    def test_perfect_line(self, perfect_line):
        result = fit(*perfect_line)
        assert result.coefficients == {'slope': 2.0, 'intercept': 0.0}
        assert result.r_squared is None
        assert result.vertex is None
        assert result.diagnostics == ()

    def test_matches_scipy(self, rng):
        x = rng.uniform(-5, 5, size=60)
        y = -1.3 * x + 4.0 + rng.normal(scale=0.5, size=60)
        result = fit(x, y)
        expected = sp_stats.linregress(x, y)
        np.testing.assert_allclose(result.coefficients['slope'], expected.slope, rtol=1e-9)
        np.testing.assert_allclose(
            result.coefficients['intercept'], expected.intercept, rtol=1e-9
        )

    def test_constant_x_omitted(self):
        result = fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])
        assert not result.is_fitted
        assert result.diagnostics == ()
        assert any("slope denominator is zero" in w for w in result.warnings)

    def test_overflow_omitted(self):
        result = fit([1e200, 2e200], [1.0, 2.0])
        assert not result.is_fitted
        assert any("not finite" in w for w in result.warnings)


class TestLinearRendering:

    def test_equation(self, perfect_line):
        assert fit(*perfect_line).equation() == "y = 2x + 0"

    def test_equation_exact(self):
        result = fit([0.0, 1.0], [0.125, 3.25])
        assert result.equation("exact") == "y = 3.125x + 0.125"
        assert result.equation("rounded") == "y = 3.13x + 0.13"

    def test_negative_intercept_keeps_plus(self):
        assert fit([0.0, 1.0], [-1.0, 1.0]).equation() == "y = 2x + -1"

    def test_no_inverse_formula(self, perfect_line):
        assert fit(*perfect_line).inverse_formula() is None


class TestLinearEvaluation:

    def test_predict(self, perfect_line):
        np.testing.assert_allclose(fit(*perfect_line).predict([0.0, 10.0]), [0.0, 20.0])

    def test_solve_for_x(self, perfect_line):
        np.testing.assert_allclose(fit(*perfect_line).solve_for_x([8.0]), [4.0])

    def test_solve_for_x_flat(self):
        result = fit([1.0, 2.0, 3.0], [5.0, 5.0, 5.0])
        assert result.coefficients['slope'] == 0.0
        with pytest.raises(ValueError, match="slope is zero"):
            result.solve_for_x([5.0])
