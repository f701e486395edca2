"""
Robust statistics: median and median absolute deviation (MAD).
"""

import logging

import numpy as np

from rollstat.core.constants import MAD_SCALE
from rollstat.core.types import ArrayLike, MADResult
from rollstat.validation import as_float_array


logger = logging.getLogger(__name__)


def median(x: ArrayLike) -> float:
    """
    Median of a sequence.

    Sorts a copy of the data; the caller's sequence is left untouched.
    For an even count the two middle values are averaged. NaN values sort
    before every number, so they shift the middle towards the low end.

    Args:
        x: Values

    Returns:
        Median, NaN for empty input
    """
    series = np.sort(as_float_array(x))
    # np.sort puts NaN last; move it to the front
    nan_mask = np.isnan(series)
    series = np.concatenate([series[nan_mask], series[~nan_mask]])
    n = len(series)
    if n == 0:
        return float("nan")

    k = n // 2
    if n % 2 == 1:
        return float(series[k])
    return float(0.5 * (series[k - 1] + series[k]))


def mad_result(x: ArrayLike) -> MADResult:
    """
    Median absolute deviation with an explicit undefined state.

    Formula: 1.4826 * median(|x - median(x)|)

    Args:
        x: Values

    Returns:
        MADResult; undefined (value -1.0) for empty input
    """
    arr = as_float_array(x)
    if len(arr) == 0:
        logger.warning("MAD requested for empty input, result is undefined")
        return MADResult.undefined()

    center = median(arr)
    deviations = np.abs(center - arr)
    return MADResult(value=MAD_SCALE * median(deviations), count=len(arr))


def mad(x: ArrayLike) -> float:
    """
    Median absolute deviation (MAD).

    A robust analog of the standard deviation: deviations are measured from
    the median instead of the mean, so outliers distort it far less.

    1. Take the absolute deviation of each value from the median.
    2. Take the median of those deviations.
    3. Multiply by 1.4826 so the result estimates the standard deviation
       of normally distributed data.

    Args:
        x: Values

    Returns:
        MAD, or -1.0 for empty input. Callers must check for the sentinel;
        use mad_result() to get an explicit defined/undefined flag instead.
    """
    return mad_result(x).value
