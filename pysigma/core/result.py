"""
Generic result container for all pysigma computations.

The Result class provides a standardized envelope that the statistics and
trendline backends share. Domain code defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sample count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so results can be shared between callers
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single computation.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (sums, coefficients, ...)
        info: Structured metadata (method, n, regression kind)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TrendParams(...),
        ...     info={'method': 'cramer', 'n': 5},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_quadratic_cramer'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
