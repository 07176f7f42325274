"""
Whitespace-delimited text input.

Turns the two free-text fields a user types (or pastes) into the x and y
arrays the analysis runs on, or picks a built-in example dataset.
"""

from __future__ import annotations

from typing import Any
import re

import numpy as np
from numpy.typing import NDArray

from pysigma.core.exceptions import DimensionError, InvalidInputError
from pysigma.datasets import example_data
from pysigma.regression.kinds import RegressionKind

# ASCII decimal literal, or inf/infinity/nan in any case. No digit
# separators, no non-ASCII digits.
_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def parse_values(text: str | None, name: str) -> NDArray[np.floating[Any]]:
    """
    Parse whitespace-separated numbers.

    Args:
        text: Field contents; None and blank text give an empty array
        name: Field label for error messages, e.g. 'X'

    Raises:
        InvalidInputError: If a field is not a numeric literal
    """
    fields = (text or '').split()
    values = np.empty(len(fields), dtype=np.float64)
    for i, field in enumerate(fields):
        if _NUMBER.fullmatch(field) is None:
            raise InvalidInputError(
                f"Invalid input for {name} values: {field!r} is not a number"
            )
        values[i] = float(field)
    return values


def load_observations(
    x_text: str | None = None,
    y_text: str | None = None,
    *,
    use_default: bool = False,
    kind: RegressionKind | str | None = RegressionKind.LINEAR,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Resolve the samples for one request.

    With use_default the example dataset for `kind` is returned and the
    text fields are ignored.

    Raises:
        InvalidInputError: On a malformed number or an empty X field
        DimensionError: If the Y count differs from a non-empty X count
    """
    if use_default:
        return example_data(kind)

    x = parse_values(x_text, 'X')
    y_fields = (y_text or '').split()
    if x.size > 0 and len(y_fields) != x.size:
        raise DimensionError(
            f"Number of Y values must match number of X values "
            f"(X={x.size}, Y={len(y_fields)})",
            lengths={'x': int(x.size), 'y': len(y_fields)},
        )
    y = parse_values(y_text, 'Y')
    if x.size == 0:
        raise InvalidInputError("X values are empty and not using default.")
    return x, y
