"""
Transforms: z-score normalization and historical volatility.
"""

import logging

import numpy as np

from rollstat.core.constants import DEFAULT_PERIODICITY
from rollstat.core.types import ArrayLike, FloatArray
from rollstat.stats.primitives import mean, stddev
from rollstat.validation import as_float_array


logger = logging.getLogger(__name__)


def normalize(x: ArrayLike, weights: ArrayLike | None = None) -> FloatArray:
    """
    Z-score normalization.

    Formula: (x - mean) / std, using the weighted mean and standard deviation.

    The resulting scores have mean 0 and standard deviation 1, a unit-free
    measure for comparing observations taken in different units.

    If the standard deviation is exactly zero the scores are only centered:
    x - mean. That result is NOT unit-free.

    Args:
        x: Values to normalize
        weights: Optional per-element weights (None = equal weighting)

    Returns:
        Array of z-scores, same length as x
    """
    arr = as_float_array(x)
    mu = mean(arr, weights)
    sigma = stddev(arr, weights)

    if sigma == 0.0:
        logger.warning("Zero standard deviation, returning centered values unscaled")
        return arr - mu

    with np.errstate(divide="ignore", invalid="ignore"):
        return (arr - mu) / sigma


def log_returns(x: ArrayLike) -> FloatArray:
    """
    Logarithmic returns of a price series.

    Formula: r[i] = ln(x[i] / x[i-1]), i = 1..N-1

    Args:
        x: Prices

    Returns:
        Array of N-1 returns (empty for fewer than two prices)
    """
    prices = as_float_array(x, name="prices")
    if len(prices) < 2:
        return np.array([], dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(prices[1:] / prices[:-1])


def volatility(x: ArrayLike, periodicity: float = DEFAULT_PERIODICITY) -> float:
    """
    Historical volatility.

    Annualized standard deviation of logarithmic returns:
        std(log_returns(x)) * sqrt(periodicity)

    Args:
        x: Prices
        periodicity: Observations per year (252 for daily trading data)

    Returns:
        Volatility, NaN when fewer than three prices are given
    """
    rets = log_returns(x)
    return stddev(rets) * float(np.sqrt(periodicity))
