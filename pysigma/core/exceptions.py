"""
Exception hierarchy for pysigma.

All exceptions inherit from PySigmaError to allow catching any
library-specific error.

Only hard input errors are exceptions. Degenerate data met while fitting
a trendline (non-positive values for a log transform, zero determinants)
is reported in-band as a Diagnostic, never raised.

Design principles:
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySigmaError(Exception):
    """Base exception for all pysigma errors."""
    pass


class InvalidInputError(PySigmaError):
    """
    Input validation failed.

    Raised before any computation starts: empty samples, non-numeric or
    non-finite values, malformed text fields, unknown formatting modes.
    No partial report is ever produced alongside this error.
    """
    pass


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when x and y differ in length or are not one-dimensional.

    Attributes:
        lengths: Mapping of parameter name to observed length, if known
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths
