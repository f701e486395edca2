"""
Custom exceptions for ROLLSTAT.

All exceptions inherit from RollstatError for easy catching.

Degenerate numeric results (empty input, zero spread, NaN data) are NOT
errors: they are reported through sentinels and NaN propagation. Exceptions
are reserved for arguments the library cannot interpret.
"""


class RollstatError(Exception):
    """Base exception for all ROLLSTAT errors."""

    pass


class ConfigurationError(RollstatError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidArgumentError(RollstatError):
    """Raised when an argument is outside the domain of an operation."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.argument:
            parts.append(f"argument={self.argument}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)
