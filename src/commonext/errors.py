"""Exception hierarchy for commonext."""

from __future__ import annotations


class CommonExtError(Exception):
    """Base exception for all commonext errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ContractError(CommonExtError):
    """An API was called in a way its contract forbids (a caller bug)."""


class ConfigurationError(CommonExtError):
    """Configuration validation or resolution failed."""


class ResourceError(CommonExtError):
    """A packaged resource could not be located or read."""


class SerializationError(CommonExtError):
    """A value could not be serialized or deserialized."""
