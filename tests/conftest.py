"""
Pytest configuration and fixtures.
"""

import numpy as np
import pandas as pd
import pytest

from rollstat.core.config import get_settings


@pytest.fixture
def sample_prices() -> list[float]:
    """22 daily closes, 21 returns - roughly one calendar month."""
    return [
        42.35834, 40.703716, 42.202611, 42.338873, 41.47263,
        42.718463, 41.920351, 42.13448, 42.319407, 41.891153,
        42.80606, 43.117518, 43.068854, 42.319407, 42.932591,
        42.728198, 42.698996, 42.737929, 42.767127, 42.13448,
        42.280473, 43.078585,
    ]


@pytest.fixture
def sample_series() -> list[float]:
    """Ten values with sign changes for moving statistics."""
    return [4.0, 8.0, 6.0, -1.0, -2.0, -3.0, -1.0, 3.0, 4.0, 5.0]


@pytest.fixture
def sample_scores() -> list[float]:
    """Exam scores with mean 51 and sample std 17."""
    return [35.0, 36.0, 46.0, 68.0, 70.0]


@pytest.fixture
def price_series(sample_prices: list[float]) -> pd.Series:
    """Prices as a Series indexed by business day."""
    index = pd.bdate_range("2024-01-02", periods=len(sample_prices))
    return pd.Series(sample_prices, index=index, name="close")


@pytest.fixture
def gappy_values() -> np.ndarray:
    """Values with missing data sentinels."""
    return np.array([1.0, np.nan, 3.0, -np.inf, 5.0])


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear cached settings around a test that edits the environment."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
