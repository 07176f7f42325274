"""
Core infrastructure for pysigma.

Shared abstractions used by the statistics, regression and report
subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Rounded/exact number rendering
    thresholds: Classification and precision presets
    tolerances: Rounding allowances for degenerate fits
    timing: Section timer used by backends
"""

from pysigma.core.result import Result
from pysigma.core.exceptions import (
    PySigmaError,
    InvalidInputError,
    DimensionError,
)
from pysigma.core.formatting import (
    FormattingMode,
    resolve_mode,
    format_number,
    format_correlation,
)
from pysigma.core.thresholds import ReportThresholds, DEFAULT_THRESHOLDS
from pysigma.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pysigma.core.timing import Timer

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySigmaError",
    "InvalidInputError",
    "DimensionError",
    # Formatting
    "FormattingMode",
    "resolve_mode",
    "format_number",
    "format_correlation",
    # Configuration
    "ReportThresholds",
    "DEFAULT_THRESHOLDS",
    "FitTolerances",
    "DEFAULT_TOLERANCES",
    # Timing
    "Timer",
]
