"""
Argument validators.

Validation functions shared by the statistics and rolling modules.
NaN and Inf are valid data and pass through; only arguments the library
cannot interpret are rejected.
"""

import numbers

import numpy as np

from rollstat.core.exceptions import InvalidArgumentError
from rollstat.core.types import ArrayLike, FloatArray


def as_float_array(x: ArrayLike, name: str = "x") -> FloatArray:
    """
    Convert input to a private 1-D float64 copy.

    Args:
        x: Sequence of numbers
        name: Argument name used in error messages

    Returns:
        New float64 array (never a view of the caller's data)
    """
    try:
        arr = np.array(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"Cannot convert {name} to a float array: {e}",
            argument=name,
        ) from e

    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"{name} must be one-dimensional, got {arr.ndim} dimensions",
            argument=name,
            value=arr.shape,
        )
    return arr


def validate_window_length(k: int) -> int:
    """
    Check that a window length is an integer >= 1.

    Args:
        k: Window length

    Returns:
        The window length as a plain int
    """
    # bool is an Integral, but True/False as a window length is a mistake
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidArgumentError(
            "Window length must be an integer",
            argument="k",
            value=k,
        )
    if k < 1:
        raise InvalidArgumentError(
            "Window length must be at least 1",
            argument="k",
            value=k,
        )
    return int(k)


def validate_weights(
    weights: ArrayLike | None,
    length: int | None = None,
    exact: bool = True,
) -> FloatArray | None:
    """
    Check an optional weight vector.

    Args:
        weights: Per-element weights, or None for equal weighting
        length: Expected length (skipped when None)
        exact: If False, weights only need to be at least `length` long

    Returns:
        Weights as a float64 array, or None
    """
    if weights is None:
        return None

    w = as_float_array(weights, name="weights")

    if length is not None:
        if exact and len(w) != length:
            raise InvalidArgumentError(
                f"Weights length {len(w)} does not match data length {length}",
                argument="weights",
            )
        if not exact and len(w) < length:
            raise InvalidArgumentError(
                f"Weights length {len(w)} is shorter than window length {length}",
                argument="weights",
            )

    if np.any(w < 0):
        raise InvalidArgumentError(
            "Weights must be non-negative",
            argument="weights",
        )

    return w
