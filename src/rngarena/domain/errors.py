"""Exceptions raised by the bracket engine and its configuration layer."""

from __future__ import annotations


class ArenaError(Exception):
    """Base class for every error raised by rngarena."""


class ConfigurationError(ArenaError):
    """Raised when a bracket cannot be built from the supplied participants."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(ConfigurationError):
    """Raised when configuration files fail validation."""


class InvalidStateError(ArenaError):
    """Raised when the engine is driven out of sequence."""


__all__ = ["ArenaError", "ConfigurationError", "ConfigError", "InvalidStateError"]
