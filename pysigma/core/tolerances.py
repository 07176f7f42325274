"""
Tolerances for degenerate-fit detection.

Cramer's rule on the quadratic normal equations leaves rounding residue in
the coefficients. A coefficient whose contribution over the data range is
within tolerance of the other terms is treated as zero.

Used by the quadratic model and the test suite.
"""

from dataclasses import dataclass

from pysigma.core.exceptions import InvalidInputError


@dataclass(frozen=True)
class FitTolerances:
    """
    Tolerance specification for trendline fits.

    Attributes:
        quadratic_rtol: The quadratic term is negligible when
            |a|·max|x|² <= quadratic_rtol · (|b|·max|x| + |c|).
        name: Preset identifier.
        description: Human-readable summary.
    """
    quadratic_rtol: float
    name: str
    description: str

    def __post_init__(self):
        if not self.quadratic_rtol >= 0:
            raise InvalidInputError(
                f"quadratic_rtol must be non-negative, got {self.quadratic_rtol}"
            )


# CPU double precision reference
CPU_FP64 = FitTolerances(
    quadratic_rtol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, normal equations by Cramer\'s rule',
)

# Only an exactly zero quadratic coefficient counts as zero
EXACT = FitTolerances(
    quadratic_rtol=0.0,
    name='exact',
    description='No rounding allowance',
)

DEFAULT_TOLERANCES = CPU_FP64
