"""
pandas adapters.

Apply the array functions to pd.Series while keeping index labels where
positions can be matched back to the input.
"""

import logging

import numpy as np
import pandas as pd

from rollstat.core.constants import DEFAULT_PERIODICITY
from rollstat.core.types import ArrayLike, WindowPolicy
from rollstat.rolling.moving import mov_stddev
from rollstat.stats.transforms import normalize, volatility


logger = logging.getLogger(__name__)


def moving_stddev_series(
    series: pd.Series,
    policy: WindowPolicy | None = None,
    weights: ArrayLike | None = None,
) -> pd.Series:
    """
    Moving standard deviation of a Series.

    Labelling:
    - values actually omitted as NaN/Inf: a fresh RangeIndex, since the
      windows no longer map to rows, even when the counts happen to match
    - one value per input row: the input index
    - full windows: the label of each window's last row

    Args:
        series: Input values
        policy: Window policy (defaults to WindowPolicy())
        weights: Optional per-position weights

    Returns:
        Series named "<name>_movstd"
    """
    policy = policy or WindowPolicy()
    values = series.to_numpy(dtype=np.float64)
    result = mov_stddev(
        values,
        weights,
        policy.window,
        policy.omit_nans,
        policy.trailing,
        policy.full_window,
    )

    omitted = policy.omit_nans and not np.isfinite(values).all()

    if omitted:
        logger.debug(
            f"Moving stddev over {len(series)} rows with omitted values, "
            f"using positional index"
        )
        index = pd.RangeIndex(len(result))
    elif len(result) == len(series):
        index = series.index
    else:
        # Full-window mode without omission: window i ends on row i + k - 1
        index = series.index[policy.window - 1:]

    name = f"{series.name}_movstd" if series.name is not None else "movstd"
    return pd.Series(result, index=index, name=name)


def zscore_series(
    series: pd.Series,
    weights: ArrayLike | None = None,
) -> pd.Series:
    """Z-score normalize a Series, keeping its index and name."""
    scores = normalize(series.to_numpy(dtype=np.float64), weights)
    return pd.Series(scores, index=series.index, name=series.name)


def volatility_series(
    prices: pd.Series,
    periodicity: float = DEFAULT_PERIODICITY,
) -> float:
    """
    Historical volatility of a price Series.

    Missing prices are dropped first so a gap does not poison every return.
    """
    clean = prices.dropna()
    if len(clean) < len(prices):
        logger.warning(f"Dropped {len(prices) - len(clean)} missing prices before volatility")
    return volatility(clean.to_numpy(dtype=np.float64), periodicity)
