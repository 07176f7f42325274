"""
Number rendering for text reports.

Two modes:
    rounded: round half away from zero to a fixed number of decimals, then
             print the shortest decimal that round-trips to the rounded value
             (3.10 -> "3.1", 3.14159 -> "3.14").
    exact:   print the shortest decimal that round-trips to the value itself
             (3.14159 -> "3.14159").

Output is always positional, never scientific notation. Non-finite values
never render as numbers.
"""

from __future__ import annotations

from enum import Enum
import math

import numpy as np

from pysigma.core.exceptions import InvalidInputError
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds

UNDEFINED = 'undefined'

# Doubles at or above 2**52 carry no fractional digits.
_INTEGRAL_LIMIT = 2.0 ** 52


class FormattingMode(str, Enum):
    """How numeric values are displayed in a report."""
    ROUNDED = 'rounded'
    EXACT = 'exact'


def resolve_mode(mode: FormattingMode | str | bool) -> FormattingMode:
    """
    Resolve a mode argument to a FormattingMode.

    A bool is read as a "use rounding" flag.

    Raises:
        InvalidInputError: If a string names no known mode
        TypeError: If mode is of an unsupported type
    """
    if isinstance(mode, FormattingMode):
        return mode
    if isinstance(mode, bool):
        return FormattingMode.ROUNDED if mode else FormattingMode.EXACT
    if isinstance(mode, str):
        try:
            return FormattingMode(mode.strip().lower())
        except ValueError:
            valid = ', '.join(m.value for m in FormattingMode)
            raise InvalidInputError(
                f"Unknown formatting mode: {mode!r}. Valid modes: {valid}"
            ) from None
    raise TypeError(f"mode must be str, bool or FormattingMode, got {type(mode).__name__}")


def round_half_away(value: float, decimals: int) -> float:
    """Round to `decimals` places, ties away from zero."""
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_LIMIT:
        return value
    scale = 10.0 ** decimals
    scaled = abs(value) * scale
    if not math.isfinite(scaled) or scaled >= _INTEGRAL_LIMIT:
        return value
    # Exact tie test on the fractional part; scaled + 0.5 may itself round.
    whole = math.trunc(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / scale


def shortest_decimal(value: float) -> str:
    """Shortest positional decimal that parses back to `value`."""
    if not math.isfinite(value):
        return UNDEFINED
    # -0.0 + 0.0 == +0.0
    return np.format_float_positional(value + 0.0, unique=True, trim='-')


def format_number(
    value: float,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """
    Render a value according to the formatting mode.

    Args:
        value: Number to render
        mode: FormattingMode, its string value, or a "use rounding" bool
        thresholds: Supplies the decimals kept by the rounded mode

    Returns:
        Decimal string, or 'undefined' for NaN and infinities
    """
    value = float(value)
    if resolve_mode(mode) is FormattingMode.ROUNDED:
        value = round_half_away(value, thresholds.rounding_decimals)
    return shortest_decimal(value)


def format_correlation(
    value: float,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Render a correlation value with fixed decimals, whatever the mode."""
    value = float(value)
    if not math.isfinite(value):
        return UNDEFINED
    return f"{value + 0.0:.{thresholds.correlation_decimals}f}"
