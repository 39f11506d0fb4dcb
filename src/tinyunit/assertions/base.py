"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from tinyunit.assertions.coercion import format_value


@dataclass(frozen=True)
class Negated:
    """An expectation that the actual value is *not* ``value``.

    Renders as ``NOT <value>`` in reports.
    """

    value: Any

    def __str__(self) -> str:
        return f"NOT {format_value(self.value)}"


@dataclass(frozen=True)
class Comparison:
    """Outcome of a single assertion call.

    Attributes:
        expected: The value (or ``Negated`` label) the assertion checked against.
        actual: The value supplied by the test author.
        passed: Whether the comparison held.
        message: Optional human label for the assertion.
    """

    expected: Any
    actual: Any
    passed: bool
    message: str | None = None

    is_error = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "expected": format_value(self.expected),
            "actual": format_value(self.actual),
            "passed": self.passed,
            "message": self.message,
        }


@dataclass(frozen=True)
class ErrorRecord:
    """A test body raised instead of finishing normally."""

    error: str

    is_error = True
    passed = False

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


AssertionResult = Union[Comparison, ErrorRecord]
