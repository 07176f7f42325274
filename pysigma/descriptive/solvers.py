"""
Solver dispatch for the statistics pass.

Provides describe() as the public entry point.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solution import StatisticsSolution
from pysigma.descriptive.backends.cpu import CPUStatisticsBackend


def ensure_design(x: ArrayLike | SampleDesign, y: ArrayLike | None = None) -> SampleDesign:
    """
    Convert raw arrays to a SampleDesign if needed.

    Raises:
        ValueError: If x is an array-like and y is missing
    """
    if isinstance(x, SampleDesign):
        return x
    if y is None:
        raise ValueError("y required when x is not a SampleDesign")
    return SampleDesign.from_arrays(x, y)


def describe(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | None = None,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> StatisticsSolution:
    """
    Compute summary sums, Pearson correlation and y outliers.

    Parameters
    ----------
    x : array-like or SampleDesign
        Independent values, or an already validated design.
    y : array-like, optional
        Dependent values. Required unless x is a SampleDesign.
    thresholds : ReportThresholds
        Correlation strength bands and outlier multiplier.

    Returns
    -------
    StatisticsSolution

    Raises
    ------
    InvalidInputError
        If x or y is empty, non-numeric or non-finite.
    DimensionError
        If x and y differ in length.
    """
    design = ensure_design(x, y)
    result = CPUStatisticsBackend().solve(design, thresholds=thresholds)
    return StatisticsSolution(_result=result, _design=design)
