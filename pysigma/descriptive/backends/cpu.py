"""
CPU reference backend for the statistics pass.

Everything is a fixed number of vectorized passes over x and y:
sums and per-row products, Pearson r from the sums, then mean, population
standard deviation and outliers of y.
"""

from __future__ import annotations

from typing import Any
import math

import numpy as np

from pysigma.core.result import Result
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.core.timing import Timer
from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solution import (
    Outlier, StatisticsParams, SummarySums, TableRow,
)
from pysigma.descriptive._classify import classify_sign, classify_strength


def compute_sums(design: SampleDesign) -> SummarySums:
    """Σx, Σy, Σx², Σy², Σxy and n."""
    x = design.x
    y = design.y
    with np.errstate(over='ignore', invalid='ignore'):
        return SummarySums(
            sum_x=float(np.sum(x)),
            sum_y=float(np.sum(y)),
            sum_x2=float(np.sum(x * x)),
            sum_y2=float(np.sum(y * y)),
            sum_xy=float(np.sum(x * y)),
            n=design.n,
        )


def pearson_terms(sums: SummarySums) -> tuple[float, float, float]:
    """
    Numerator and the two variance terms of Pearson's r.

    Returns:
        (n·Σxy − Σx·Σy, n·Σx² − (Σx)², n·Σy² − (Σy)²)
    """
    n = float(sums.n)
    numerator = n * sums.sum_xy - sums.sum_x * sums.sum_y
    term_x = n * sums.sum_x2 - sums.sum_x * sums.sum_x
    term_y = n * sums.sum_y2 - sums.sum_y * sums.sum_y
    return numerator, term_x, term_y


class CPUStatisticsBackend:
    """
    CPU backend for sums, correlation and outliers.

    Stateless: one instance may serve any number of concurrent calls.
    """

    @property
    def name(self) -> str:
        return 'cpu_statistics'

    def solve(
        self,
        design: SampleDesign,
        *,
        thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
    ) -> Result[StatisticsParams]:
        """
        Run the statistics pass.

        Args:
            design: Validated sample design
            thresholds: Strength bands and outlier multiplier

        Returns:
            Result containing StatisticsParams
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        x = design.x
        y = design.y

        with timer.section('sums'):
            sums = compute_sums(design)
            if not sums.is_finite():
                warnings_list.append(
                    "sums overflowed: values too large to represent as float64"
                )

        with timer.section('table'):
            with np.errstate(over='ignore', invalid='ignore'):
                x2 = x * x
                y2 = y * y
                xy = x * y
            rows = tuple(
                TableRow(
                    index=i,
                    x=float(x[i]),
                    y=float(y[i]),
                    x2=float(x2[i]),
                    y2=float(y2[i]),
                    xy=float(xy[i]),
                )
                for i in range(design.n)
            )

        with timer.section('correlation'):
            r, r_denominator = self._correlation(sums)
            if r is None and r_denominator != 0:
                warnings_list.append(
                    f"r is not a finite number (denominator={r_denominator!r})"
                )

        with timer.section('outliers'):
            mean_y, sd_y, outliers = self._outliers(design, thresholds)

        timer.stop()

        params = StatisticsParams(
            sums=sums,
            rows=rows,
            r=r,
            r_denominator=r_denominator,
            sign=None if r is None else classify_sign(r),
            strength=None if r is None else classify_strength(r, thresholds),
            mean_y=mean_y,
            sd_y=sd_y,
            outliers=outliers,
        )

        info: dict[str, Any] = {
            'method': 'pearson',
            'n': design.n,
            'outlier_multiplier': thresholds.outlier_multiplier,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _correlation(sums: SummarySums) -> tuple[float | None, float]:
        """Pearson r from the sums; None when undefined or not finite."""
        numerator, term_x, term_y = pearson_terms(sums)
        denominator = term_x * term_y
        if denominator == 0:
            return None, denominator
        with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
            r = float(numerator / np.sqrt(denominator))
        if not math.isfinite(r):
            return None, denominator
        # Rounding can push |r| a hair past 1.
        return min(1.0, max(-1.0, r)), denominator

    @staticmethod
    def _outliers(
        design: SampleDesign,
        thresholds: ReportThresholds,
    ) -> tuple[float, float, tuple[Outlier, ...]]:
        """Mean and population SD of y, and samples beyond the multiplier."""
        y = design.y
        with np.errstate(over='ignore', invalid='ignore'):
            mean_y = float(np.mean(y))
            deviations = np.abs(y - mean_y)
            sd_y = float(np.sqrt(np.mean(deviations ** 2)))
            flagged = np.flatnonzero(deviations > thresholds.outlier_multiplier * sd_y)
        outliers = tuple(
            Outlier(index=int(i), x=float(design.x[i]), y=float(y[i]))
            for i in flagged
        )
        return mean_y, sd_y, outliers
