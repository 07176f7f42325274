"""
SampleDesign: the validated paired-observation set.

Wraps the x and y sequences every analysis runs on. Construction is the
single validation boundary: once a SampleDesign exists, downstream code
trusts that x and y are finite, one-dimensional, non-empty and of equal
length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysigma.core.validation import (
    check_array, check_1d, check_not_empty, check_consistent_length, check_finite,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Ordered set of (x, y) samples.

    Position in the sequence is the sample's index: 0-based for
    diagnostics, 1-based in the report table. Immutable after construction.

    Construction:
        SampleDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SampleDesign:
        """
        Build a SampleDesign from two array-likes.

        Raises:
            InvalidInputError: If either sequence is empty, non-numeric
                or contains NaN/Inf
            DimensionError: If the sequences are not 1D or differ in length
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> SampleDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_not_empty(x, 'x')
        check_not_empty(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_finite(x, 'x')
        check_finite(y, 'y')

        # Private copies: callers may mutate their arrays afterwards.
        x = x.copy()
        y = y.copy()
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(_x=x, _y=y, _n=int(x.shape[0]))

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Independent values (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Dependent values (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    def samples(self) -> Iterator[tuple[int, float, float]]:
        """Yield (index, x, y) in input order, index 0-based."""
        for i in range(self._n):
            yield i, float(self._x[i]), float(self._y[i])

    def __repr__(self) -> str:
        return f"SampleDesign(n={self._n})"
