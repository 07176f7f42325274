"""
Trendline fitting.

Four models, selected by the caller: linear, quadratic, exponential and
power.

Public API:
    fit(x, y, kind=...) -> TrendSolution

The fit() function handles:
    - Input validation
    - Model selection (unknown kinds fall back to linear)
    - Result wrapping

Example:
    >>> from pysigma.regression import fit
    >>> result = fit(x, y, kind='quadratic')
    >>> print(result.equation('exact'))
    >>> print(result.vertex)
"""

from pysigma.regression.kinds import RegressionKind, resolve_kind
from pysigma.regression.models import (
    TrendModel,
    LinearModel,
    QuadraticModel,
    ExponentialModel,
    PowerModel,
    get_model,
)
from pysigma.regression.solution import (
    Diagnostic,
    DiagnosticReason,
    TrendParams,
    TrendSolution,
    Vertex,
)
from pysigma.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionKind",
    "resolve_kind",
    "TrendModel",
    "LinearModel",
    "QuadraticModel",
    "ExponentialModel",
    "PowerModel",
    "get_model",
    "Diagnostic",
    "DiagnosticReason",
    "TrendParams",
    "TrendSolution",
    "Vertex",
]
