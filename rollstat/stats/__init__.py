"""
Statistics module for ROLLSTAT.

Provides numeric primitives and the single-pass descriptive statistics
built on them.
"""

from rollstat.stats.primitives import mean, stddev, variance
from rollstat.stats.robust import mad, mad_result, median
from rollstat.stats.transforms import log_returns, normalize, volatility

__all__ = [
    "mean",
    "stddev",
    "variance",
    "mad",
    "mad_result",
    "median",
    "log_returns",
    "normalize",
    "volatility",
]
