"""
Classification thresholds for reports.

Defines the cut-offs that turn raw numbers into words: correlation
strength bands, the outlier multiplier, and display precision. Presets are
frozen so one instance can be shared by concurrent analyses.

Used by the statistics backend, the report builders, and the test suite.
"""

from dataclasses import dataclass

from pysigma.core.exceptions import InvalidInputError


@dataclass(frozen=True)
class ReportThresholds:
    """
    Thresholds for one analysis.

    Attributes:
        outlier_multiplier: A sample is an outlier when its y deviates from
            mean(y) by strictly more than this many population standard
            deviations.
        strong: Lower bound (inclusive) of |r| for a strong correlation.
        moderate: Lower bound (inclusive) of |r| for a moderate correlation.
        weak: Lower bound (inclusive) of |r| for a weak correlation.
        correlation_decimals: Fixed decimals for r and r² in the report.
        rounding_decimals: Decimals kept by the rounded formatting mode.
    """
    outlier_multiplier: float = 2.0
    strong: float = 0.7
    moderate: float = 0.5
    weak: float = 0.3
    correlation_decimals: int = 4
    rounding_decimals: int = 2

    def __post_init__(self):
        if not self.outlier_multiplier > 0:
            raise InvalidInputError(
                f"outlier_multiplier must be positive, got {self.outlier_multiplier}"
            )
        if not (1.0 >= self.strong >= self.moderate >= self.weak >= 0.0):
            raise InvalidInputError(
                "correlation bands must satisfy 1 >= strong >= moderate >= weak >= 0, "
                f"got strong={self.strong}, moderate={self.moderate}, weak={self.weak}"
            )
        if self.correlation_decimals < 0 or self.rounding_decimals < 0:
            raise InvalidInputError(
                "decimal counts must be non-negative, got "
                f"correlation_decimals={self.correlation_decimals}, "
                f"rounding_decimals={self.rounding_decimals}"
            )


DEFAULT_THRESHOLDS = ReportThresholds()
