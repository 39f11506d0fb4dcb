"""Assertion system for test bodies."""

from tinyunit.assertions.base import (
    AssertionResult,
    Comparison,
    ErrorRecord,
    Negated,
)
from tinyunit.assertions.recorder import AssertionRecorder

__all__ = [
    "AssertionRecorder",
    "AssertionResult",
    "Comparison",
    "ErrorRecord",
    "Negated",
]
