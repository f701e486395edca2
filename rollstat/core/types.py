"""
Core type definitions for ROLLSTAT.

Defines enums, dataclasses, and type aliases used throughout the library.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

from rollstat.core.constants import (
    DEFAULT_FULL_WINDOW,
    DEFAULT_OMIT_NANS,
    DEFAULT_TRAILING,
    DEFAULT_WINDOW,
    MAD_UNDEFINED,
)


# Anything numpy can turn into a 1-D float array
ArrayLike: TypeAlias = Sequence[float] | NDArray[np.float64]

FloatArray: TypeAlias = NDArray[np.float64]


class AlignmentMode(str, Enum):
    """
    How surplus boundary windows are dropped during reconciliation.

    CENTERED drops windows from both ends, TRAILING only from the tail.
    """

    CENTERED = "centered"
    TRAILING = "trailing"

    @property
    def is_trailing(self) -> bool:
        """Whether this mode maps to the trailing flag."""
        return self == AlignmentMode.TRAILING


@dataclass(frozen=True)
class WindowPolicy:
    """
    Window length and the three windowing policies.

    Attributes:
        window: Target window length (k >= 1)
        omit_nans: Drop NaN and +/-Inf values before windowing
        trailing: Drop surplus windows from the tail only
        full_window: Keep only windows with exactly `window` elements
    """

    window: int = DEFAULT_WINDOW
    omit_nans: bool = DEFAULT_OMIT_NANS
    trailing: bool = DEFAULT_TRAILING
    full_window: bool = DEFAULT_FULL_WINDOW

    @property
    def alignment(self) -> AlignmentMode:
        """Alignment mode implied by the trailing flag."""
        return AlignmentMode.TRAILING if self.trailing else AlignmentMode.CENTERED

    def __str__(self) -> str:
        flags = []
        if self.omit_nans:
            flags.append("omit_nans")
        if self.full_window:
            flags.append("full_window")
        else:
            flags.append(self.alignment.value)
        return f"WindowPolicy(k={self.window}, {', '.join(flags)})"


@dataclass(frozen=True)
class MADResult:
    """
    Median absolute deviation with an explicit defined/undefined state.

    `value` holds MAD_UNDEFINED (-1.0) when the input was empty, so it can be
    handed to code written against the plain mad() sentinel.
    """

    value: float
    count: int

    @classmethod
    def undefined(cls) -> "MADResult":
        """Result for an empty input."""
        return cls(value=MAD_UNDEFINED, count=0)

    @property
    def is_defined(self) -> bool:
        """Check if a MAD could be computed."""
        return self.count > 0
