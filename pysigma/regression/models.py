"""
Trendline models.

Each TrendModel defines:
- how to fit its coefficients from the samples and the shared sums
- the equation text, and where one exists the x-solving inverse formula
- how to evaluate the fitted curve and its inverse

Models:
    LinearModel       y = m·x + c         least squares from the six sums
    QuadraticModel    y = a·x² + b·x + c  3x3 normal equations, Cramer's rule
    ExponentialModel  y = a·e^(b·(x−x₀))  ln(y) against x shifted by x₀ = min(x)
    PowerModel        y = a·x^b           ln(y) against ln(x)

Degenerate data never raises here. A fit that cannot proceed returns
TrendParams without coefficients and with a Diagnostic naming the reason.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
import math

import numpy as np
from numpy.typing import NDArray

from pysigma.core.formatting import FormattingMode, format_number
from pysigma.core.result import Result
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.core.timing import Timer
from pysigma.core.tolerances import DEFAULT_TOLERANCES, FitTolerances
from pysigma.descriptive.backends.cpu import pearson_terms
from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solution import SummarySums
from pysigma.regression.kinds import RegressionKind
from pysigma.regression.solution import (
    Diagnostic, DiagnosticReason, TrendParams, Vertex,
)


# =====================================================================
# Shared numerics
# =====================================================================

@dataclass(frozen=True)
class _LineFit:
    """Ordinary least squares of v on u."""
    slope: float
    intercept: float
    term_u: float
    r_squared: float | None


def _least_squares(u: NDArray, v: NDArray) -> _LineFit:
    """
    Fit v = slope·u + intercept.

    `term_u` is n·Σu² − (Σu)²; when it is zero the slope is undefined and
    both coefficients are NaN. `r_squared` is None unless the correlation
    denominator is positive.
    """
    n = float(u.shape[0])
    with np.errstate(over='ignore', invalid='ignore'):
        sum_u = float(np.sum(u))
        sum_v = float(np.sum(v))
        sum_uv = float(np.sum(u * v))
        sum_u2 = float(np.sum(u * u))
        sum_v2 = float(np.sum(v * v))

    numerator = n * sum_uv - sum_u * sum_v
    term_u = n * sum_u2 - sum_u * sum_u
    term_v = n * sum_v2 - sum_v * sum_v

    if term_u == 0:
        return _LineFit(math.nan, math.nan, term_u, None)

    slope = numerator / term_u
    intercept = (sum_v - slope * sum_u) / n

    r_squared = None
    denominator = term_u * term_v
    if denominator > 0:
        r = numerator / math.sqrt(denominator)
        r_squared = r * r
    return _LineFit(slope, intercept, term_u, r_squared)


def _first_non_positive(values: NDArray) -> int | None:
    """Index of the first value <= 0, or None."""
    bad = np.flatnonzero(values <= 0)
    return int(bad[0]) if bad.size else None


def _exp(value: float) -> float:
    """exp() that overflows to inf instead of raising."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def _det3(m: tuple[tuple[float, ...], ...]) -> float:
    """Determinant of a 3x3 matrix by cofactor expansion along row 0."""
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _replace_column(
    m: tuple[tuple[float, ...], ...],
    column: int,
    values: tuple[float, ...],
) -> tuple[tuple[float, ...], ...]:
    return tuple(
        tuple(values[i] if j == column else m[i][j] for j in range(3))
        for i in range(3)
    )


# =====================================================================
# Model base class
# =====================================================================

class TrendModel(ABC):
    """
    Trendline strategy for one RegressionKind.

    Models hold only their immutable tolerances; `solve` is safe to call
    concurrently.
    """

    def __init__(self, tolerances: FitTolerances = DEFAULT_TOLERANCES):
        self.tolerances = tolerances

    @property
    @abstractmethod
    def kind(self) -> RegressionKind:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier, '{device}_{kind}_{method}'."""
        ...

    @abstractmethod
    def _fit(
        self,
        design: SampleDesign,
        sums: SummarySums,
        warnings_list: list[str],
    ) -> TrendParams:
        ...

    @abstractmethod
    def equation(
        self,
        params: TrendParams,
        mode: FormattingMode | str | bool,
        *,
        thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    ) -> str:
        """Equation text 'y = ...' for fitted params."""
        ...

    def inverse_formula(
        self,
        params: TrendParams,
        mode: FormattingMode | str | bool,
        *,
        thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    ) -> str | None:
        """Formula 'x = ...' solving the equation for x; None by default."""
        return None

    @abstractmethod
    def predict(self, params: TrendParams, x: NDArray) -> NDArray:
        ...

    def solve_for_x(self, params: TrendParams, y: NDArray) -> NDArray:
        raise NotImplementedError(
            f"{self.kind.value} trendline has no single-valued inverse"
        )

    def solve(self, design: SampleDesign, sums: SummarySums) -> Result[TrendParams]:
        """
        Fit the model.

        Args:
            design: Validated sample design
            sums: The six sums of the same design

        Returns:
            Result containing TrendParams; soft failures are reported as
            diagnostics, never raised
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('fit'):
            params = self._fit(design, sums, warnings_list)

        timer.stop()

        info: dict[str, Any] = {
            'kind': self.kind.value,
            'n': design.n,
            'fitted': params.is_fitted,
        }
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _stop(self, reason: DiagnosticReason, **where: Any) -> TrendParams:
        """Unfitted params carrying one diagnostic."""
        return TrendParams(
            kind=self.kind,
            diagnostics=(Diagnostic(reason=reason, kind=self.kind, **where),),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# =====================================================================
# Concrete models
# =====================================================================

class LinearModel(TrendModel):
    """
    Straight line through the six sums.

    A zero x-variance term leaves the trendline out of the report
    altogether; the reason is kept on Result.warnings only.
    """

    @property
    def kind(self) -> RegressionKind:
        return RegressionKind.LINEAR

    @property
    def name(self) -> str:
        return 'cpu_linear_sums'

    def _fit(self, design, sums, warnings_list):
        numerator, term_x, _ = pearson_terms(sums)
        if term_x == 0:
            warnings_list.append(
                "linear trendline omitted: slope denominator is zero "
                "(all x values may be the same)"
            )
            return TrendParams(kind=self.kind)

        slope = numerator / term_x
        intercept = (sums.sum_y - slope * sums.sum_x) / sums.n
        if not _all_finite(slope, intercept):
            warnings_list.append(
                "linear trendline omitted: coefficients are not finite"
            )
            return TrendParams(kind=self.kind)

        return TrendParams(
            kind=self.kind,
            coefficients={'slope': slope, 'intercept': intercept},
        )

    def equation(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        c = params.coefficients
        return (
            f"y = {format_number(c['slope'], mode, thresholds=thresholds)}x"
            f" + {format_number(c['intercept'], mode, thresholds=thresholds)}"
        )

    def predict(self, params, x):
        c = params.coefficients
        return c['slope'] * x + c['intercept']

    def solve_for_x(self, params, y):
        c = params.coefficients
        if c['slope'] == 0:
            raise ValueError("slope is zero; x cannot be solved from y")
        return (y - c['intercept']) / c['slope']


class QuadraticModel(TrendModel):
    """
    Parabola from the 3x3 normal equations.

        | Σx⁴ Σx³ Σx² | |a|   |Σx²y|
        | Σx³ Σx² Σx  | |b| = |Σxy |
        | Σx² Σx  n   | |c|   |Σy  |

    solved in closed form by Cramer's rule.
    """

    @property
    def kind(self) -> RegressionKind:
        return RegressionKind.QUADRATIC

    @property
    def name(self) -> str:
        return 'cpu_quadratic_cramer'

    def _fit(self, design, sums, warnings_list):
        x = design.x
        y = design.y
        with np.errstate(over='ignore', invalid='ignore'):
            x2 = x * x
            sum_x3 = float(np.sum(x2 * x))
            sum_x4 = float(np.sum(x2 * x2))
            sum_x2y = float(np.sum(x2 * y))

        n = float(sums.n)
        matrix = (
            (sum_x4, sum_x3, sums.sum_x2),
            (sum_x3, sums.sum_x2, sums.sum_x),
            (sums.sum_x2, sums.sum_x, n),
        )
        rhs = (sum_x2y, sums.sum_xy, sums.sum_y)

        det = _det3(matrix)
        if det == 0:
            return self._stop(DiagnosticReason.ZERO_DETERMINANT)

        a, b, c = (_det3(_replace_column(matrix, j, rhs)) / det for j in range(3))
        if not _all_finite(a, b, c):
            return self._stop(DiagnosticReason.INVALID_COEFFICIENT)

        vertex = None
        diagnostics: tuple[Diagnostic, ...] = ()
        if self._negligible_curvature(a, b, c, float(np.max(np.abs(x)))):
            diagnostics = (
                Diagnostic(DiagnosticReason.UNDEFINED_VERTEX, self.kind, 'a', value=a),
            )
            warnings_list.append(f"quadratic vertex undefined (a={a!r} is negligible)")
        else:
            vx = -b / (2 * a)
            vy = a * vx * vx + b * vx + c
            if _all_finite(vx, vy):
                vertex = Vertex(x=vx, y=vy, is_maximum=a < 0)
            else:
                diagnostics = (
                    Diagnostic(DiagnosticReason.UNDEFINED_VERTEX, self.kind, 'x', value=vx),
                )
                warnings_list.append(f"quadratic vertex undefined (x={vx!r})")

        return TrendParams(
            kind=self.kind,
            coefficients={'a': a, 'b': b, 'c': c},
            vertex=vertex,
            diagnostics=diagnostics,
        )

    def _negligible_curvature(self, a: float, b: float, c: float, x_max: float) -> bool:
        """True if a·x² is rounding residue next to b·x + c over the data."""
        curvature = abs(a) * x_max * x_max
        line = abs(b) * x_max + abs(c)
        return a == 0 or curvature <= self.tolerances.quadratic_rtol * line

    def equation(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        a, b, c = (
            format_number(params.coefficients[k], mode, thresholds=thresholds)
            for k in ('a', 'b', 'c')
        )
        return f"y = {a}x² + {b}x + {c}"

    def predict(self, params, x):
        c = params.coefficients
        return c['a'] * x * x + c['b'] * x + c['c']


class ExponentialModel(TrendModel):
    """
    y = a·e^(b·(x − x₀)) with x₀ = min(x).

    Shifting x keeps ln(a) near the data and away from overflow.
    Requires every y > 0.
    """

    @property
    def kind(self) -> RegressionKind:
        return RegressionKind.EXPONENTIAL

    @property
    def name(self) -> str:
        return 'cpu_exponential_loglinear'

    def _fit(self, design, sums, warnings_list):
        x = design.x
        y = design.y

        bad = _first_non_positive(y)
        if bad is not None:
            return self._stop(
                DiagnosticReason.NON_POSITIVE_VALUE,
                variable='y', index=bad, value=float(y[bad]),
            )

        x_shift = float(np.min(x))
        line = _least_squares(x - x_shift, np.log(y))
        if line.term_u == 0:
            return self._stop(DiagnosticReason.ZERO_DENOMINATOR, variable='x')

        a = _exp(line.intercept)
        b = line.slope
        if a == 0 or not _all_finite(a, b):
            return self._stop(DiagnosticReason.INVALID_COEFFICIENT, variable='a', value=a)

        return TrendParams(
            kind=self.kind,
            coefficients={'a': a, 'b': b, 'x_shift': x_shift},
            r_squared=line.r_squared,
        )

    def equation(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        a, b, shift = (
            format_number(params.coefficients[k], mode, thresholds=thresholds)
            for k in ('a', 'b', 'x_shift')
        )
        return f"y = {a}*e^({b}*(x-{shift}))"

    def inverse_formula(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        if params.coefficients['b'] == 0:
            return None
        a, b, shift = (
            format_number(params.coefficients[k], mode, thresholds=thresholds)
            for k in ('a', 'b', 'x_shift')
        )
        return f"x = {shift} + ln(y/{a})/{b}"

    def predict(self, params, x):
        c = params.coefficients
        with np.errstate(over='ignore'):
            return c['a'] * np.exp(c['b'] * (x - c['x_shift']))

    def solve_for_x(self, params, y):
        c = params.coefficients
        if c['b'] == 0:
            raise ValueError("b is zero; x cannot be solved from y")
        with np.errstate(divide='ignore', invalid='ignore'):
            return c['x_shift'] + np.log(y / c['a']) / c['b']


class PowerModel(TrendModel):
    """
    y = a·x^b, fitted as ln(y) = ln(a) + b·ln(x).

    Requires every x > 0 and every y > 0; x is checked first.
    """

    @property
    def kind(self) -> RegressionKind:
        return RegressionKind.POWER

    @property
    def name(self) -> str:
        return 'cpu_power_loglog'

    def _fit(self, design, sums, warnings_list):
        x = design.x
        y = design.y

        for variable, values in (('x', x), ('y', y)):
            bad = _first_non_positive(values)
            if bad is not None:
                return self._stop(
                    DiagnosticReason.NON_POSITIVE_VALUE,
                    variable=variable, index=bad, value=float(values[bad]),
                )

        line = _least_squares(np.log(x), np.log(y))
        if line.term_u == 0:
            return self._stop(DiagnosticReason.ZERO_DENOMINATOR, variable='x')

        a = _exp(line.intercept)
        b = line.slope
        if a == 0 or not _all_finite(a, b):
            return self._stop(DiagnosticReason.INVALID_COEFFICIENT, variable='a', value=a)

        return TrendParams(
            kind=self.kind,
            coefficients={'a': a, 'b': b},
            r_squared=line.r_squared,
        )

    def equation(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        a, b = (
            format_number(params.coefficients[k], mode, thresholds=thresholds)
            for k in ('a', 'b')
        )
        return f"y = {a}*x^{b}"

    def inverse_formula(self, params, mode, *, thresholds=DEFAULT_THRESHOLDS):
        if params.coefficients['b'] == 0:
            return None
        a, b = (
            format_number(params.coefficients[k], mode, thresholds=thresholds)
            for k in ('a', 'b')
        )
        return f"x = (y/{a})^(1/{b})"

    def predict(self, params, x):
        c = params.coefficients
        with np.errstate(over='ignore', invalid='ignore'):
            return c['a'] * np.power(x, c['b'])

    def solve_for_x(self, params, y):
        c = params.coefficients
        if c['b'] == 0:
            raise ValueError("b is zero; x cannot be solved from y")
        with np.errstate(over='ignore', invalid='ignore'):
            return np.power(y / c['a'], 1.0 / c['b'])


# =====================================================================
# Kind → model mapping
# =====================================================================

_MODEL_CLASSES: dict[RegressionKind, type[TrendModel]] = {
    RegressionKind.LINEAR: LinearModel,
    RegressionKind.QUADRATIC: QuadraticModel,
    RegressionKind.EXPONENTIAL: ExponentialModel,
    RegressionKind.POWER: PowerModel,
}


def get_model(
    kind: RegressionKind,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> TrendModel:
    """Instantiate the model for a resolved kind."""
    return _MODEL_CLASSES[kind](tolerances)
