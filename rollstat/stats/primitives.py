"""
Numeric primitives.

Weighted mean, variance and standard deviation. These never raise on
degenerate data: empty input, a single observation, or any NaN/Inf value
yield NaN, following IEEE-754 semantics.
"""

import numpy as np

from rollstat.core.types import ArrayLike
from rollstat.validation import as_float_array, validate_weights


def mean(x: ArrayLike, weights: ArrayLike | None = None) -> float:
    """
    Weighted arithmetic mean.

    Formula: sum(w * x) / sum(w)

    Args:
        x: Values
        weights: Optional per-element weights (None = equal weighting)

    Returns:
        Weighted mean, NaN for empty input
    """
    arr = as_float_array(x)
    w = validate_weights(weights, len(arr))

    with np.errstate(divide="ignore", invalid="ignore"):
        if w is None:
            return float(np.float64(arr.sum()) / np.float64(len(arr)))
        return float(np.float64((w * arr).sum()) / np.float64(w.sum()))


def variance(x: ArrayLike, weights: ArrayLike | None = None) -> float:
    """
    Unbiased weighted sample variance.

    Uses the corrected two-pass algorithm:
        (sum(w * d**2) - sum(w * d)**2 / sum(w)) / (sum(w) - 1)
    where d = x - mean(x, w). Weights are treated as frequency weights.

    Args:
        x: Values
        weights: Optional per-element weights (None = equal weighting)

    Returns:
        Variance, NaN for fewer than two observations
    """
    arr = as_float_array(x)
    w = validate_weights(weights, len(arr))
    if w is None:
        w = np.ones_like(arr)

    with np.errstate(divide="ignore", invalid="ignore"):
        sum_w = np.float64(w.sum())
        m = np.float64((w * arr).sum()) / sum_w
        d = arr - m
        ss = np.float64((w * d * d).sum())
        compensation = np.float64((w * d).sum())
        return float((ss - compensation * compensation / sum_w) / (sum_w - 1))


def stddev(x: ArrayLike, weights: ArrayLike | None = None) -> float:
    """
    Weighted sample standard deviation.

    Args:
        x: Values
        weights: Optional per-element weights (None = equal weighting)

    Returns:
        Square root of variance(), NaN for fewer than two observations
    """
    var = variance(x, weights)
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(var))
