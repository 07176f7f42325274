"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from pysigma.core.result import Result
from pysigma.descriptive._classify import CorrelationSign, CorrelationStrength

if TYPE_CHECKING:
    from pysigma.descriptive.design import SampleDesign


@dataclass(frozen=True)
class SummarySums:
    """The six sums every statistic and linear fit is built from."""
    sum_x: float
    sum_y: float
    sum_x2: float
    sum_y2: float
    sum_xy: float
    n: int

    def is_finite(self) -> bool:
        """False if any sum overflowed."""
        return all(math.isfinite(v) for v in (
            self.sum_x, self.sum_y, self.sum_x2, self.sum_y2, self.sum_xy,
        ))


@dataclass(frozen=True)
class TableRow:
    """One sample with its products. `index` is 0-based."""
    index: int
    x: float
    y: float
    x2: float
    y2: float
    xy: float


@dataclass(frozen=True)
class Outlier:
    """A sample flagged by the outlier rule. `index` is 0-based."""
    index: int
    x: float
    y: float


@dataclass(frozen=True)
class StatisticsParams:
    """
    Parameter payload for the statistics pass.

    This is the immutable data computed by the backend. `r` is None when
    the correlation denominator is exactly zero or the quotient is not a
    finite number; `sign` and `strength` are None in the same cases.
    """
    sums: SummarySums
    rows: tuple[TableRow, ...]
    r: float | None
    r_denominator: float
    sign: CorrelationSign | None
    strength: CorrelationStrength | None
    mean_y: float
    sd_y: float
    outliers: tuple[Outlier, ...]


@dataclass
class StatisticsSolution:
    """
    User-facing statistics results.

    Wraps Result[StatisticsParams] and provides convenient accessors.
    """
    _result: Result[StatisticsParams]
    _design: 'SampleDesign'

    @property
    def design(self) -> 'SampleDesign':
        return self._design

    @property
    def params(self) -> StatisticsParams:
        return self._result.params

    @property
    def sums(self) -> SummarySums:
        return self._result.params.sums

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return self._result.params.rows

    @property
    def r(self) -> float | None:
        """Pearson correlation coefficient, or None if undefined."""
        return self._result.params.r

    @property
    def r_squared(self) -> float | None:
        r = self._result.params.r
        return None if r is None else r * r

    @property
    def r_denominator(self) -> float:
        """(nΣx² − (Σx)²)·(nΣy² − (Σy)²); r is undefined when this is 0."""
        return self._result.params.r_denominator

    @property
    def is_r_defined(self) -> bool:
        return self._result.params.r is not None

    @property
    def sign(self) -> CorrelationSign | None:
        return self._result.params.sign

    @property
    def strength(self) -> CorrelationStrength | None:
        return self._result.params.strength

    @property
    def mean_y(self) -> float:
        return self._result.params.mean_y

    @property
    def sd_y(self) -> float:
        """Population standard deviation of y (divisor n)."""
        return self._result.params.sd_y

    @property
    def outliers(self) -> tuple[Outlier, ...]:
        return self._result.params.outliers

    @property
    def outlier_indices(self) -> tuple[int, ...]:
        return tuple(o.index for o in self._result.params.outliers)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        r = 'undefined' if self.r is None else f"{self.r:.4f}"
        return (
            f"StatisticsSolution(n={self._design.n}, r={r}, "
            f"outliers={len(self.outliers)})"
        )
