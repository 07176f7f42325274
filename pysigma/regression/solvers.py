"""
Solver dispatch for trendline fitting.

This module provides the fit() function (public API) and model selection.
"""

from __future__ import annotations

from dataclasses import replace
import warnings

from numpy.typing import ArrayLike

from pysigma.core.tolerances import DEFAULT_TOLERANCES, FitTolerances
from pysigma.descriptive.backends.cpu import compute_sums
from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solution import SummarySums
from pysigma.descriptive.solvers import ensure_design
from pysigma.regression.kinds import RegressionKind, parse_kind
from pysigma.regression.models import get_model
from pysigma.regression.solution import TrendSolution


def fit(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | None = None,
    *,
    kind: RegressionKind | str | None = RegressionKind.LINEAR,
    sums: SummarySums | None = None,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> TrendSolution:
    """
    Fit a trendline of the requested kind.

    Args:
        x: Independent values, or a SampleDesign
        y: Dependent values. Required unless x is a SampleDesign.
        kind: 'linear', 'quadratic', 'exponential' or 'power'.
            None and unrecognized names fall back to linear; the latter
            also warns.
        sums: Six sums already computed for the same design, reused
            instead of recomputed
        tolerances: Rounding allowance for degenerate-fit detection

    Returns:
        TrendSolution. Data the model cannot fit (non-positive values for
        a log transform, zero determinant) yields an unfitted solution with
        diagnostics rather than an exception.

    Raises:
        InvalidInputError: If x or y is empty, non-numeric or non-finite
        DimensionError: If x and y differ in length
        TypeError: If kind is not a string or RegressionKind
        ValueError: If sums were computed for a different sample count

    Example:
        >>> from pysigma.regression import fit
        >>> result = fit([1, 2, 3], [2, 4, 6])
        >>> result.coefficients
        {'slope': 2.0, 'intercept': 0.0}
    """
    resolved, fallback = parse_kind(kind)
    if fallback is not None:
        warnings.warn(fallback, UserWarning, stacklevel=2)

    # This is the boundary - validate here, trust everywhere else
    design = ensure_design(x, y)
    return fit_design(
        design, resolved, sums=sums, fallback=fallback, tolerances=tolerances,
    )


def fit_design(
    design: SampleDesign,
    kind: RegressionKind,
    *,
    sums: SummarySums | None = None,
    fallback: str | None = None,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> TrendSolution:
    """
    Fit an already validated design with an already resolved kind.

    `fallback` is the message produced when the caller's kind name was
    not recognized; it is recorded on the result's warnings.
    """
    if sums is None:
        sums = compute_sums(design)
    elif sums.n != design.n:
        raise ValueError(
            f"sums were computed for n={sums.n}, design has n={design.n}"
        )

    model = get_model(kind, tolerances)
    result = model.solve(design, sums)

    if fallback is not None:
        result = replace(result, warnings=(fallback,) + result.warnings)

    return TrendSolution(_result=result, _design=design, _model=model)
