"""
Verbal classification of a correlation coefficient.

Sign and strength are classified independently. Strength bands are
evaluated from the top down and are inclusive at their lower bound.
"""

from __future__ import annotations

from enum import Enum

from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds


class CorrelationSign(str, Enum):
    POSITIVE = 'positive'
    NEGATIVE = 'negative'
    NONE = 'none'


class CorrelationStrength(str, Enum):
    PERFECT = 'perfect'
    STRONG = 'strong'
    MODERATE = 'moderate'
    WEAK = 'weak'
    NONE = 'none'


def classify_sign(r: float) -> CorrelationSign:
    """Direction of the association."""
    if r > 0:
        return CorrelationSign.POSITIVE
    if r < 0:
        return CorrelationSign.NEGATIVE
    return CorrelationSign.NONE


def classify_strength(
    r: float,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> CorrelationStrength:
    """
    Strength band of |r|.

    |r| == 1 is perfect; otherwise the first band whose lower bound |r|
    reaches wins: strong, moderate, weak, else none.
    """
    abs_r = abs(r)
    if abs_r == 1.0:
        return CorrelationStrength.PERFECT
    if abs_r >= thresholds.strong:
        return CorrelationStrength.STRONG
    if abs_r >= thresholds.moderate:
        return CorrelationStrength.MODERATE
    if abs_r >= thresholds.weak:
        return CorrelationStrength.WEAK
    return CorrelationStrength.NONE
