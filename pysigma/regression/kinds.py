"""
Regression kind selector.

The caller picks the model; there is no automatic model selection.
Unrecognized kind names fall back to linear.
"""

from __future__ import annotations

from enum import Enum
import warnings


class RegressionKind(str, Enum):
    """Which trendline model to fit."""
    LINEAR = 'linear'
    QUADRATIC = 'quadratic'
    EXPONENTIAL = 'exponential'
    POWER = 'power'


def parse_kind(kind: RegressionKind | str | None) -> tuple[RegressionKind, str | None]:
    """
    Resolve a kind argument without emitting warnings.

    Returns:
        (kind, message) where message explains a fallback to linear, or
        None if the argument named a kind.

    Raises:
        TypeError: If kind is neither str, RegressionKind nor None
    """
    if kind is None:
        return RegressionKind.LINEAR, None
    if isinstance(kind, RegressionKind):
        return kind, None
    if isinstance(kind, str):
        try:
            return RegressionKind(kind.strip().lower()), None
        except ValueError:
            valid = ', '.join(k.value for k in RegressionKind)
            return RegressionKind.LINEAR, (
                f"unrecognized regression kind {kind!r}, using linear "
                f"(valid kinds: {valid})"
            )
    raise TypeError(f"kind must be str or RegressionKind, got {type(kind).__name__}")


def resolve_kind(kind: RegressionKind | str | None) -> RegressionKind:
    """Resolve a kind argument, warning when falling back to linear."""
    resolved, message = parse_kind(kind)
    if message is not None:
        warnings.warn(message, UserWarning, stacklevel=2)
    return resolved
