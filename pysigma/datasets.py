"""
Built-in example datasets, one per regression kind.

Each is shaped to suit its model: a noisy decreasing line, a parabola
with its minimum near the origin, roughly e^x growth, and roughly x².
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pysigma.regression.kinds import RegressionKind, parse_kind

# Noisy decreasing trend
linear = np.array([
    [0.0, 8.2],
    [3.0, 7.5],
    [5.0, 7.0],
    [6.0, 6.5],
    [7.0, 7.2],
    [10.0, 6.1],
    [12.0, 6.8],
    [13.0, 5.5],
    [15.0, 5.8],
    [18.0, 5.2],
])

# y ≈ x²
quadratic = np.array([
    [-3.0, 9.2],
    [-2.0, 4.1],
    [-1.0, 1.1],
    [0.0, 0.2],
    [1.0, 1.1],
    [2.0, 4.2],
    [3.0, 9.1],
    [4.0, 16.0],
    [5.0, 25.1],
])

# y ≈ 2·e^x
exponential = np.array([
    [0.0, 2.1],
    [1.0, 5.4],
    [2.0, 14.8],
    [3.0, 40.2],
    [4.0, 109.6],
    [5.0, 298.1],
])

# y ≈ x²
power = np.array([
    [1.0, 1.1],
    [2.0, 4.2],
    [3.0, 9.1],
    [4.0, 16.2],
    [5.0, 25.1],
    [6.0, 36.2],
    [7.0, 49.1],
    [8.0, 64.2],
    [9.0, 81.1],
    [10.0, 100.2],
])

_DATASETS: dict[RegressionKind, NDArray[np.floating[Any]]] = {
    RegressionKind.LINEAR: linear,
    RegressionKind.QUADRATIC: quadratic,
    RegressionKind.EXPONENTIAL: exponential,
    RegressionKind.POWER: power,
}


def example_data(
    kind: RegressionKind | str | None = RegressionKind.LINEAR,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Example (x, y) for a regression kind.

    Unrecognized kinds get the linear dataset. Returns fresh copies, so
    callers may modify them.
    """
    resolved, _ = parse_kind(kind)
    data = _DATASETS[resolved]
    return data[:, 0].copy(), data[:, 1].copy()
