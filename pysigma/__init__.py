"""
pysigma: paired-observation statistics and trendlines.

Computes summary sums, Pearson correlation, outliers and a caller-chosen
trendline (linear, quadratic, exponential or power) for paired (x, y)
data, and renders them as a fixed-structure text report.

Submodules:
    core: Result envelope, exceptions, validation, number formatting
    descriptive: Sums, correlation and outliers
    regression: Trendline models
    report: Section builders and the analyze() pipeline
    datasets: Built-in example data
    inputs: Whitespace-delimited text parsing
"""

__version__ = "0.1.0"

from pysigma import descriptive
from pysigma import regression
from pysigma import report
from pysigma.core.exceptions import PySigmaError, InvalidInputError, DimensionError
from pysigma.core.formatting import FormattingMode
from pysigma.regression.kinds import RegressionKind
from pysigma.report import analyze, Report

__all__ = [
    "__version__",
    "analyze",
    "Report",
    "FormattingMode",
    "RegressionKind",
    "PySigmaError",
    "InvalidInputError",
    "DimensionError",
    "descriptive",
    "regression",
    "report",
]
