"""
Rolling module for ROLLSTAT.

Provides rolling window generation and moving statistics.
Boundary windows are truncated so every original position gets a window.
"""

from rollstat.rolling.windows import filter_nans, is_real_value, rolling_window
from rollstat.rolling.moving import RollingWindowCalculator, mov_stddev

__all__ = [
    "filter_nans",
    "is_real_value",
    "rolling_window",
    "RollingWindowCalculator",
    "mov_stddev",
]
