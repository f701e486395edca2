"""
Moving statistics over rolling windows.

Maintains a window policy and computes one statistic per window.
"""

import logging

import numpy as np

from rollstat.core.config import WindowingConfig
from rollstat.core.types import ArrayLike, FloatArray, WindowPolicy
from rollstat.rolling.windows import rolling_window
from rollstat.stats.primitives import stddev
from rollstat.validation import validate_weights, validate_window_length


logger = logging.getLogger(__name__)


def mov_stddev(
    x: ArrayLike,
    weights: ArrayLike | None,
    k: int,
    omit_nans: bool = False,
    trailing: bool = False,
    full_window: bool = False,
) -> FloatArray:
    """
    Moving standard deviation.

    Local k-point standard deviations, each computed over a window from
    rolling_window(x, k, omit_nans, trailing, full_window).

    Weights are applied by position within each window: a window of length m
    uses weights[:m]. Boundary windows therefore take a prefix of the weight
    vector, not the weights of the original positions they cover.

    Args:
        x: Values
        weights: Optional per-position weights (None = equal weighting)
        k: Window length (>= 1)
        omit_nans: Drop NaN and +/-Inf values before windowing
        trailing: Trailing instead of centered alignment
        full_window: Discard windows with fewer than k elements

    Returns:
        Array with one standard deviation per window. A window holding
        NaN/Inf yields NaN; so does a single-element window.
    """
    windows = rolling_window(x, k, omit_nans, trailing, full_window)
    if not windows:
        return np.array([], dtype=np.float64)

    w = None
    if weights is not None:
        w = validate_weights(weights, max(len(wnd) for wnd in windows), exact=False)

    std_devs = np.empty(len(windows), dtype=np.float64)
    for i, wnd in enumerate(windows):
        std_devs[i] = stddev(wnd, None if w is None else w[:len(wnd)])

    return std_devs


class RollingWindowCalculator:
    """
    Calculates rolling window statistics under a fixed window policy.

    Bundles the window length and the three policies so the same settings
    can be applied to many series.
    """

    def __init__(
        self,
        window: int | None = None,
        omit_nans: bool = False,
        trailing: bool = False,
        full_window: bool = False,
        policy: WindowPolicy | None = None,
    ) -> None:
        """
        Initialize rolling window calculator.

        Args:
            window: Window length (required unless policy is given)
            omit_nans: Drop NaN and +/-Inf values before windowing
            trailing: Trailing instead of centered alignment
            full_window: Discard windows with fewer than `window` elements
            policy: Complete policy, overrides the other arguments
        """
        if policy is None:
            policy = WindowPolicy(
                window=validate_window_length(window),
                omit_nans=omit_nans,
                trailing=trailing,
                full_window=full_window,
            )
        else:
            validate_window_length(policy.window)
        self.policy = policy

    @classmethod
    def from_config(cls, config: WindowingConfig) -> "RollingWindowCalculator":
        """Create a calculator from windowing configuration."""
        policy = config.to_policy()
        logger.debug(f"Rolling calculator configured with {policy}")
        return cls(policy=policy)

    @property
    def window(self) -> int:
        """Target window length."""
        return self.policy.window

    def windows(self, x: ArrayLike) -> list[FloatArray]:
        """
        Split values into windows.

        Args:
            x: Values

        Returns:
            List of read-only window views
        """
        p = self.policy
        return rolling_window(x, p.window, p.omit_nans, p.trailing, p.full_window)

    def stddev(
        self,
        x: ArrayLike,
        weights: ArrayLike | None = None,
    ) -> FloatArray:
        """
        Moving standard deviation of values.

        Args:
            x: Values
            weights: Optional per-position weights

        Returns:
            One standard deviation per window
        """
        p = self.policy
        return mov_stddev(x, weights, p.window, p.omit_nans, p.trailing, p.full_window)

    def window_count(self, n: int) -> int:
        """
        Number of windows produced for n finite values.

        Assumes no values are omitted as NaN.
        """
        if n <= 0:
            return 0
        if self.policy.full_window:
            return max(0, n - self.window + 1)
        return n
