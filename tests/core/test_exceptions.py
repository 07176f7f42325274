"""
Tests for the pysigma exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySigmaError)
    - DimensionError carries the observed lengths
"""

import pytest

from pysigma.core.exceptions import (
    DimensionError,
    InvalidInputError,
    PySigmaError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySigmaError."""

    def test_invalid_input_error_is_pysigma_error(self):
        with pytest.raises(PySigmaError):
            raise InvalidInputError("bad input")

    def test_dimension_error_is_invalid_input_error(self):
        with pytest.raises(InvalidInputError):
            raise DimensionError("length mismatch")

    def test_dimension_error_is_pysigma_error(self):
        with pytest.raises(PySigmaError):
            raise DimensionError("length mismatch")

    def test_pysigma_error_is_not_value_error(self):
        assert not issubclass(PySigmaError, ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries optional length diagnostics."""

    def test_message(self):
        err = DimensionError("x=3, y=2")
        assert str(err) == "x=3, y=2"

    def test_lengths_default_none(self):
        assert DimensionError("mismatch").lengths is None

    def test_lengths_attribute(self):
        err = DimensionError("mismatch", lengths={'x': 3, 'y': 2})
        assert err.lengths == {'x': 3, 'y': 2}

    def test_catchable_with_attributes(self):
        with pytest.raises(DimensionError) as exc_info:
            raise DimensionError("mismatch", lengths={'x': 1, 'y': 4})
        assert exc_info.value.lengths['y'] == 4
