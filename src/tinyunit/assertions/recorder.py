"""The assertion handle passed to every test body."""

from __future__ import annotations

import math
from typing import Any

from tinyunit.assertions.base import AssertionResult, Comparison, Negated
from tinyunit.assertions.coercion import (
    is_nan,
    loose_equals,
    strict_equals,
    truthy,
)


class AssertionRecorder:
    """Collects one record per assertion call, in call order.

    Failed assertions do not raise; the test body keeps running and the
    outcome is read back from :attr:`records` after the body returns.
    """

    def __init__(self) -> None:
        self.records: list[AssertionResult] = []

    def _record(
        self, expected: Any, actual: Any, passed: bool, message: str | None
    ) -> None:
        self.records.append(
            Comparison(expected=expected, actual=actual, passed=passed, message=message)
        )

    def ok(self, actual: Any, message: str | None = None) -> None:
        """Pass if ``actual`` is truthy."""
        self._record(True, actual, truthy(actual), message)

    def not_ok(self, actual: Any, message: str | None = None) -> None:
        """Pass if ``actual`` is falsy."""
        self._record(False, actual, not truthy(actual), message)

    def is_true(self, actual: Any, message: str | None = None) -> None:
        """Pass only if ``actual`` is the ``True`` singleton."""
        self._record(True, actual, actual is True, message)

    def is_false(self, actual: Any, message: str | None = None) -> None:
        """Pass only if ``actual`` is the ``False`` singleton."""
        self._record(False, actual, actual is False, message)

    def equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Pass if the values are equal after numeric coercion."""
        self._record(expected, actual, loose_equals(actual, expected), message)

    def not_equal(
        self, actual: Any, expected: Any, message: str | None = None
    ) -> None:
        """Pass if the values differ even after numeric coercion."""
        self._record(
            Negated(expected), actual, not loose_equals(actual, expected), message
        )

    def strict_equal(
        self, actual: Any, expected: Any, message: str | None = None
    ) -> None:
        """Pass if the values are of the same kind and equal, without coercion."""
        self._record(expected, actual, strict_equals(actual, expected), message)

    def not_strict_equal(
        self, actual: Any, expected: Any, message: str | None = None
    ) -> None:
        """Pass if the values differ in kind or value."""
        self._record(
            Negated(expected), actual, not strict_equals(actual, expected), message
        )

    def is_nan(self, actual: Any, message: str | None = None) -> None:
        """Pass if ``actual`` coerces to NaN (e.g. ``"abc"`` or ``None``)."""
        self._record(math.nan, actual, is_nan(actual), message)

    def is_not_nan(self, actual: Any, message: str | None = None) -> None:
        """Pass if ``actual`` coerces to a number (infinities included)."""
        self._record(Negated(math.nan), actual, not is_nan(actual), message)
