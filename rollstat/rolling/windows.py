"""
Rolling window generation.

Splits a sequence into overlapping windows of a target length. Windows are
truncated at the endpoints when there are not enough elements to fill them,
so a moving statistic can be defined at every original position.
"""

import logging

import numpy as np

from rollstat.core.types import ArrayLike, FloatArray
from rollstat.validation import as_float_array, validate_window_length


logger = logging.getLogger(__name__)


def is_real_value(value: float) -> bool:
    """Check that a value is neither NaN nor +/-Inf."""
    return bool(np.isfinite(value))


def filter_nans(x: ArrayLike) -> FloatArray:
    """
    Drop NaN and +/-Inf values.

    Args:
        x: Values

    Returns:
        New array with only finite values, original order kept
    """
    arr = as_float_array(x)
    return arr[np.isfinite(arr)]


def rolling_window(
    x: ArrayLike,
    k: int,
    omit_nans: bool = False,
    trailing: bool = False,
    full_window: bool = False,
) -> list[FloatArray]:
    """
    Split x into sliding windows of length k.

    Windows are produced left to right in three passes over the working
    sequence v (x itself, or x without NaN/Inf when omit_nans is set):

    1. growing leading windows v[:1] .. v[:k-1]
    2. full windows v[i:i+k] for every i with i+k <= len(v)
    3. shrinking trailing windows, the last k-1 .. 1 elements of v

    Passes 1 and 3 are skipped when full_window is set. Otherwise, if more
    windows were produced than len(x), the surplus is dropped: from both ends
    (centered), or from the tail only when trailing is set.

    Args:
        x: Values
        k: Target window length (>= 1)
        omit_nans: Drop NaN and +/-Inf values before windowing
        trailing: If there are more windows than len(x), keep the first
            len(x) instead of the centered ones
        full_window: Discard any window with fewer than k elements

    Returns:
        List of read-only array views. Views share memory with each other
        but never with the caller's data.
    """
    k = validate_window_length(k)
    arr = as_float_array(x)

    if omit_nans:
        v = filter_nans(arr)
        if len(v) < len(arr):
            logger.debug(f"Omitted {len(arr) - len(v)} non-finite values of {len(arr)}")
    else:
        v = arr
    v.flags.writeable = False

    n = len(v)
    if n == 0:
        return []

    windows: list[FloatArray] = []

    # Leading windows grow from the start; clipped when k exceeds len(v)
    if not full_window:
        for i in range(1, k):
            windows.append(v[:min(i, n)])

    for i in range(n - k + 1):
        windows.append(v[i:i + k])

    if full_window:
        return windows

    for i in range(k - 1, 0, -1):
        windows.append(v[max(n - i, 0):])

    return _reconcile(windows, len(arr), n, trailing)


def _reconcile(
    windows: list[FloatArray],
    total: int,
    filtered: int,
    trailing: bool,
) -> list[FloatArray]:
    """
    Cut the window list down to one window per original element.

    The surplus is checked against the original length but the centered trim
    is computed against the filtered length, so with omitted NaNs the two
    can disagree. Slices past the end are clipped to the available windows.
    """
    if len(windows) <= total:
        return windows

    if trailing:
        logger.debug(f"Trailing alignment: keeping first {total} of {len(windows)} windows")
        return windows[:total]

    # Odd surplus: one more window is dropped from the tail than the head
    trim = (len(windows) - filtered) // 2
    logger.debug(f"Centered alignment: trimming {trim} leading windows of {len(windows)}")
    return windows[trim:trim + total]
