"""Core module containing types, configuration, and shared utilities."""

from rollstat.core.types import (
    AlignmentMode,
    MADResult,
    WindowPolicy,
)
from rollstat.core.config import (
    Settings,
    WindowingConfig,
    get_settings,
    load_config,
    setup_logging,
)
from rollstat.core.exceptions import (
    RollstatError,
    ConfigurationError,
    InvalidArgumentError,
)

__all__ = [
    # Types
    "AlignmentMode",
    "MADResult",
    "WindowPolicy",
    # Config
    "Settings",
    "WindowingConfig",
    "get_settings",
    "load_config",
    "setup_logging",
    # Exceptions
    "RollstatError",
    "ConfigurationError",
    "InvalidArgumentError",
]
