"""
Descriptive statistics for paired observations.

Public API:
    describe(x, y)  - sums, per-sample table, Pearson r with its verbal
                      classification, mean/SD of y and outliers
"""

from pysigma.descriptive.design import SampleDesign
from pysigma.descriptive.solution import (
    Outlier,
    StatisticsParams,
    StatisticsSolution,
    SummarySums,
    TableRow,
)
from pysigma.descriptive._classify import (
    CorrelationSign,
    CorrelationStrength,
    classify_sign,
    classify_strength,
)
from pysigma.descriptive.backends.cpu import compute_sums
from pysigma.descriptive.solvers import describe

__all__ = [
    "describe",
    "compute_sums",
    "classify_sign",
    "classify_strength",
    "CorrelationSign",
    "CorrelationStrength",
    "SampleDesign",
    "StatisticsParams",
    "StatisticsSolution",
    "SummarySums",
    "TableRow",
    "Outlier",
]
