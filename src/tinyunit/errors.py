"""Exception types raised by the harness itself (never by test bodies)."""

from __future__ import annotations


class TinyUnitError(Exception):
    """Base class for harness errors."""


class ConfigError(TinyUnitError):
    """A config file could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config '{path}': {reason}")


class AlreadyPerformedError(TinyUnitError, RuntimeError):
    """A test case was asked to execute a second time."""
