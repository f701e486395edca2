"""
ROLLSTAT - Rolling Window Descriptive Statistics

Small library of descriptive statistics over sequences of real numbers:
- Median and median absolute deviation (MAD)
- Z-score normalization and historical volatility
- Rolling windows with truncated boundaries and a moving standard deviation

Degenerate inputs produce sentinels or NaN, not exceptions.
"""

__version__ = "0.1.0"
__author__ = "ROLLSTAT Team"

from rollstat.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    RollstatError,
)
from rollstat.core.types import MADResult, WindowPolicy
from rollstat.rolling import (
    RollingWindowCalculator,
    filter_nans,
    is_real_value,
    mov_stddev,
    rolling_window,
)
from rollstat.stats import (
    log_returns,
    mad,
    mad_result,
    mean,
    median,
    normalize,
    stddev,
    variance,
    volatility,
)

__all__ = [
    # Statistics
    "mean",
    "stddev",
    "variance",
    "median",
    "mad",
    "mad_result",
    "normalize",
    "log_returns",
    "volatility",
    # Rolling
    "rolling_window",
    "filter_nans",
    "is_real_value",
    "mov_stddev",
    "RollingWindowCalculator",
    # Types
    "MADResult",
    "WindowPolicy",
    # Exceptions
    "RollstatError",
    "ConfigurationError",
    "InvalidArgumentError",
]
