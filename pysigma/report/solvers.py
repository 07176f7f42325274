"""
One-call analysis entry point.

analyze() validates the samples once, then runs the statistics pass,
the requested trendline fit (reusing the sums) and the report assembly.
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pysigma.core.formatting import FormattingMode, resolve_mode
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.core.tolerances import DEFAULT_TOLERANCES, FitTolerances
from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solvers import describe, ensure_design
from pysigma.regression.kinds import RegressionKind, parse_kind
from pysigma.regression.solvers import fit_design
from pysigma.report.report import Report, build_report


def analyze(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | None = None,
    *,
    kind: RegressionKind | str | None = RegressionKind.LINEAR,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Report:
    """
    Compute statistics and a trendline and render them as a text report.

    Parameters
    ----------
    x : array-like or SampleDesign
        Independent values, or an already validated design.
    y : array-like, optional
        Dependent values. Required unless x is a SampleDesign.
    kind : str or RegressionKind
        'linear' (default), 'quadratic', 'exponential' or 'power'.
        Unrecognized names fall back to linear with a warning.
    mode : str, bool or FormattingMode
        'rounded' (2 decimals) or 'exact'. True means rounded.
    thresholds : ReportThresholds
        Strength bands, outlier multiplier and display precision.
    tolerances : FitTolerances
        Rounding allowance for degenerate-fit detection.

    Returns
    -------
    Report
        Always complete up to the trendline section. A trendline that
        cannot be fitted turns into explanatory notes.

    Raises
    ------
    InvalidInputError
        If x or y is empty, non-numeric or non-finite, or mode is unknown.
    DimensionError
        If x and y differ in length.
    """
    mode = resolve_mode(mode)
    resolved, fallback = parse_kind(kind)
    if fallback is not None:
        warnings.warn(fallback, UserWarning, stacklevel=2)

    design = ensure_design(x, y)

    statistics = describe(design, thresholds=thresholds)
    trend = fit_design(
        design, resolved,
        sums=statistics.sums, fallback=fallback, tolerances=tolerances,
    )
    return build_report(statistics, trend, mode, thresholds=thresholds)
