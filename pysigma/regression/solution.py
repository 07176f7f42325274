"""
Trendline solution types.

Contains the diagnostic record, the parameter payload and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysigma.core.formatting import FormattingMode
from pysigma.core.result import Result
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.regression.kinds import RegressionKind

if TYPE_CHECKING:
    from pysigma.descriptive.design import SampleDesign
    from pysigma.regression.models import TrendModel


class DiagnosticReason(str, Enum):
    """Why a model section stopped early or lost part of its output."""
    NON_POSITIVE_VALUE = 'non_positive_value'
    ZERO_DENOMINATOR = 'zero_denominator'
    ZERO_DETERMINANT = 'zero_determinant'
    INVALID_COEFFICIENT = 'invalid_coefficient'
    UNDEFINED_VERTEX = 'undefined_vertex'


@dataclass(frozen=True)
class Diagnostic:
    """
    An expected domain condition met while fitting.

    Diagnostics are data: the fit still returns, and the report turns each
    one into an explanatory note. `variable`, `index` and `value` identify
    the offending sample when there is one (index is 0-based).
    """
    reason: DiagnosticReason
    kind: RegressionKind
    variable: str | None = None
    index: int | None = None
    value: float | None = None


@dataclass(frozen=True)
class Vertex:
    """Turning point of a quadratic trendline."""
    x: float
    y: float
    is_maximum: bool

    @property
    def label(self) -> str:
        return 'maximum' if self.is_maximum else 'minimum'


@dataclass(frozen=True)
class TrendParams:
    """
    Parameter payload for a trendline fit.

    `coefficients` is empty when the fit stopped before producing any;
    `diagnostics` then says why.
    """
    kind: RegressionKind
    coefficients: dict[str, float] = field(default_factory=dict)
    r_squared: float | None = None
    vertex: Vertex | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_fitted(self) -> bool:
        return bool(self.coefficients)


@dataclass
class TrendSolution:
    """
    User-facing trendline results.

    Wraps the model's Result and delegates rendering and evaluation to
    the model that produced it.
    """
    _result: Result[TrendParams]
    _design: 'SampleDesign'
    _model: 'TrendModel'

    @property
    def params(self) -> TrendParams:
        return self._result.params

    @property
    def kind(self) -> RegressionKind:
        return self._result.params.kind

    @property
    def is_fitted(self) -> bool:
        return self._result.params.is_fitted

    @property
    def coefficients(self) -> dict[str, float]:
        return dict(self._result.params.coefficients)

    @property
    def r_squared(self) -> float | None:
        """Model-specific r² (log domain for exponential and power)."""
        return self._result.params.r_squared

    @property
    def vertex(self) -> Vertex | None:
        return self._result.params.vertex

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self._result.params.diagnostics

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def equation(
        self,
        mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
        *,
        thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    ) -> str | None:
        """Right-hand equation text such as 'y = 2x + 0', or None if unfitted."""
        if not self.is_fitted:
            return None
        return self._model.equation(self.params, mode, thresholds=thresholds)

    def inverse_formula(
        self,
        mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
        *,
        thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    ) -> str | None:
        """Formula giving x from y, or None where the model has none."""
        if not self.is_fitted:
            return None
        return self._model.inverse_formula(self.params, mode, thresholds=thresholds)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted curve at x."""
        self._require_fitted()
        return self._model.predict(self.params, np.asarray(x, dtype=np.float64))

    def solve_for_x(self, y: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the inverse formula at y."""
        self._require_fitted()
        return self._model.solve_for_x(self.params, np.asarray(y, dtype=np.float64))

    def trendline(
        self,
        x_min: float | None = None,
        x_max: float | None = None,
        num: int = 101,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Evenly spaced points along the fitted curve, for plotting.

        Args:
            x_min: Left end, defaults to min(x) of the data
            x_max: Right end, defaults to max(x) of the data
            num: Number of points (at least 2)

        Returns:
            (xs, ys) arrays of length num
        """
        self._require_fitted()
        if num < 2:
            raise ValueError(f"num must be at least 2, got {num}")
        lo = float(np.min(self._design.x)) if x_min is None else float(x_min)
        hi = float(np.max(self._design.x)) if x_max is None else float(x_max)
        xs = np.linspace(lo, hi, num)
        return xs, self.predict(xs)

    def _require_fitted(self) -> None:
        if not self.is_fitted:
            raise ValueError(
                f"{self.kind.value} trendline was not fitted; see diagnostics"
            )

    def __repr__(self) -> str:
        coefs = ", ".join(f"{k}={v:.6g}" for k, v in self.params.coefficients.items())
        return f"TrendSolution(kind={self.kind.value}, {coefs or 'unfitted'})"
