"""
Configuration management for ROLLSTAT.

Loads settings from environment variables and YAML config files.
Uses pydantic for validation.

Priority order:
1. Environment variables (ROLLSTAT_ prefix)
2. .env file
3. Field defaults
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rollstat.core.constants import (
    DEFAULT_FULL_WINDOW,
    DEFAULT_OMIT_NANS,
    DEFAULT_PERIODICITY,
    DEFAULT_TRAILING,
    DEFAULT_WINDOW,
)
from rollstat.core.exceptions import ConfigurationError
from rollstat.core.types import WindowPolicy


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Paths and log level are loaded from .env file or environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROLLSTAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing YAML config files",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("config_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()


class WindowingConfig:
    """Configuration for rolling windows loaded from windowing.yaml."""

    def __init__(self, config_path: Path):
        self._config = self._load_yaml(config_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WindowingConfig":
        """Build a config from an already parsed mapping."""
        config = cls.__new__(cls)
        config._config = data
        return config

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load and parse YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        # An empty file parses to None
        return data or {}

    @property
    def _windowing(self) -> dict[str, Any]:
        return self._config.get("windowing", {}) or {}

    @property
    def window(self) -> int:
        """Default rolling window length."""
        return int(self._windowing.get("window", DEFAULT_WINDOW))

    @property
    def omit_nans(self) -> bool:
        """Whether NaN/Inf values are dropped before windowing."""
        return bool(self._windowing.get("omit_nans", DEFAULT_OMIT_NANS))

    @property
    def trailing(self) -> bool:
        """Whether surplus windows are dropped from the tail only."""
        return bool(self._windowing.get("trailing", DEFAULT_TRAILING))

    @property
    def full_window(self) -> bool:
        """Whether partial boundary windows are discarded."""
        return bool(self._windowing.get("full_window", DEFAULT_FULL_WINDOW))

    @property
    def periodicity(self) -> float:
        """Annualization factor for volatility."""
        return float(self._windowing.get("periodicity", DEFAULT_PERIODICITY))

    def to_policy(self) -> WindowPolicy:
        """Convert to a WindowPolicy."""
        return WindowPolicy(
            window=self.window,
            omit_nans=self.omit_nans,
            trailing=self.trailing,
            full_window=self.full_window,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()


def load_config(config_type: str) -> WindowingConfig:
    """
    Load a specific configuration file.

    Args:
        config_type: Currently only "windowing"

    Returns:
        Appropriate config object
    """
    settings = get_settings()
    config_map = {
        "windowing": (settings.config_dir / "windowing.yaml", WindowingConfig),
    }

    if config_type not in config_map:
        raise ConfigurationError(
            f"Unknown config type: {config_type}. "
            f"Valid types: {list(config_map.keys())}"
        )

    path, config_class = config_map[config_type]
    return config_class(path)


def setup_logging(level: str | None = None) -> None:
    """Configure logging, defaulting to the level from settings."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
