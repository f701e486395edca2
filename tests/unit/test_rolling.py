"""
Tests for rolling window generation.
"""

import numpy as np
import pytest

from rollstat.core.exceptions import InvalidArgumentError
from rollstat.rolling.windows import filter_nans, is_real_value, rolling_window


def as_lists(windows):
    """Convert window views to plain lists for comparison."""
    return [w.tolist() for w in windows]


class TestNaNFiltering:
    """Tests for NaN/Inf helpers."""

    def test_real_values(self):
        """Finite values are real, NaN and infinities are not."""
        assert is_real_value(1.5)
        assert not is_real_value(float("nan"))
        assert not is_real_value(float("inf"))
        assert not is_real_value(float("-inf"))

    def test_filter_keeps_order(self, gappy_values):
        """Only finite values survive, in order."""
        assert filter_nans(gappy_values).tolist() == [1.0, 3.0, 5.0]

    def test_filter_does_not_modify_input(self, gappy_values):
        """Input array keeps its sentinels."""
        filter_nans(gappy_values)
        assert np.isnan(gappy_values[1])


class TestRollingWindow:
    """Tests for window shapes and counts."""

    def test_centered_odd_window(self):
        """k=3 truncates one element at each end."""
        windows = rolling_window([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        assert as_lists(windows) == [
            [1.0, 2.0],
            [1.0, 2.0, 3.0],
            [2.0, 3.0, 4.0],
            [3.0, 4.0, 5.0],
            [4.0, 5.0],
        ]

    def test_centered_even_window(self):
        """k=2 puts the single boundary window at the start."""
        windows = rolling_window([1.0, 2.0, 3.0, 4.0, 5.0], 2)
        assert as_lists(windows) == [
            [1.0],
            [1.0, 2.0],
            [2.0, 3.0],
            [3.0, 4.0],
            [4.0, 5.0],
        ]

    def test_singleton_window(self):
        """k=1 gives one single-element window per value."""
        windows = rolling_window([1.0, 2.0, 3.0, 4.0, 5.0], 1)
        assert as_lists(windows) == [[1.0], [2.0], [3.0], [4.0], [5.0]]

    def test_trailing(self):
        """Trailing windows end at each position."""
        windows = rolling_window([1.0, 2.0, 3.0, 4.0, 5.0], 3, trailing=True)
        assert as_lists(windows) == [
            [1.0],
            [1.0, 2.0],
            [1.0, 2.0, 3.0],
            [2.0, 3.0, 4.0],
            [3.0, 4.0, 5.0],
        ]

    def test_full_window(self):
        """Partial windows are discarded."""
        windows = rolling_window([1.0, 2.0, 3.0, 4.0, 5.0], 3, full_window=True)
        assert as_lists(windows) == [
            [1.0, 2.0, 3.0],
            [2.0, 3.0, 4.0],
            [3.0, 4.0, 5.0],
        ]

    def test_omit_nans(self, gappy_values):
        """Windows are built over the finite values only."""
        windows = rolling_window(gappy_values, 2, omit_nans=True)
        assert as_lists(windows) == [[1.0], [1.0, 3.0], [3.0, 5.0], [5.0]]

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 7, 10])
    def test_one_window_per_element(self, k):
        """Centered windows cover every position."""
        x = np.arange(10, dtype=float)
        assert len(rolling_window(x, k)) == len(x)
        assert len(rolling_window(x, k, trailing=True)) == len(x)

    @pytest.mark.parametrize("k", [1, 2, 3, 5, 10, 12])
    def test_full_window_count(self, k):
        """Full-window mode yields max(0, n-k+1) windows of length k."""
        x = np.arange(10, dtype=float)
        windows = rolling_window(x, k, full_window=True)

        assert len(windows) == max(0, len(x) - k + 1)
        assert all(len(w) == k for w in windows)

    def test_nan_kept_without_omit(self, gappy_values):
        """Without omit_nans the sentinels stay in the windows."""
        windows = rolling_window(gappy_values, 2)

        assert len(windows) == len(gappy_values)
        assert np.isnan(windows[2][0])

    def test_omit_nans_centered_trim_uses_filtered_length(self):
        """Surplus is trimmed by the filtered length, output capped at len(x)."""
        x = [1.0, np.nan, 3.0, 4.0, 5.0]
        windows = rolling_window(x, 3, omit_nans=True)
        assert as_lists(windows) == [
            [1.0, 3.0],
            [1.0, 3.0, 4.0],
            [3.0, 4.0, 5.0],
            [4.0, 5.0],
            [5.0],
        ]

    def test_omit_nans_trim_clipped_at_end(self):
        """A trim range past the last window is clipped."""
        x = [1.0, np.nan, np.nan, np.nan, 5.0, 6.0, 7.0]
        windows = rolling_window(x, 5, omit_nans=True)
        assert as_lists(windows) == [
            [1.0, 5.0, 6.0],
            [1.0, 5.0, 6.0, 7.0],
            [1.0, 5.0, 6.0, 7.0],
            [5.0, 6.0, 7.0],
            [6.0, 7.0],
            [7.0],
        ]

    def test_window_longer_than_data(self):
        """Boundary windows are clipped to the available values."""
        windows = rolling_window([1.0, 2.0], 4)
        assert as_lists(windows) == [[1.0, 2.0], [1.0, 2.0]]

    def test_empty_input(self):
        """No values, no windows."""
        assert rolling_window([], 3) == []

    def test_all_nan_omitted(self):
        """Filtering everything out leaves no windows."""
        assert rolling_window([np.nan, np.inf], 2, omit_nans=True) == []


class TestWindowViews:
    """Tests for window memory handling."""

    def test_windows_are_read_only(self):
        """Windows cannot be written through."""
        windows = rolling_window([1.0, 2.0, 3.0], 2)
        with pytest.raises(ValueError):
            windows[1][0] = 99.0

    def test_windows_do_not_share_input_memory(self):
        """Windows are views of a private copy."""
        x = np.array([1.0, 2.0, 3.0])
        windows = rolling_window(x, 2)

        assert not any(np.shares_memory(w, x) for w in windows)
        assert x.flags.writeable


class TestWindowLengthValidation:
    """Tests for rejected window lengths."""

    @pytest.mark.parametrize("k", [0, -1])
    def test_rejects_non_positive(self, k):
        """k must be at least 1."""
        with pytest.raises(InvalidArgumentError):
            rolling_window([1.0, 2.0], k)

    @pytest.mark.parametrize("k", [2.5, True, "3"])
    def test_rejects_non_integer(self, k):
        """k must be an integer."""
        with pytest.raises(InvalidArgumentError):
            rolling_window([1.0, 2.0], k)

    def test_accepts_numpy_integer(self):
        """numpy integers are valid window lengths."""
        assert len(rolling_window([1.0, 2.0, 3.0], np.int64(2))) == 3
