"""Minimal unit-testing harness: register named tests, run them, report results.

The module-level ``test``, ``module``, ``before_each`` and ``after_each``
functions act on a process-wide default :class:`Harness`; create your
own ``Harness`` for isolated runs.
"""

from __future__ import annotations

from tinyunit.assertions import AssertionRecorder, Comparison, ErrorRecord
from tinyunit.case import TestCallback, TestCase, TestReport
from tinyunit.config import HarnessConfig
from tinyunit.harness import Harness
from tinyunit.registry import HookCallback

__version__ = "1.0.0"

_harness: Harness | None = None


def get_harness() -> Harness:
    global _harness
    if _harness is None:
        _harness = Harness(HarnessConfig())
    return _harness


def reset_harness(config: HarnessConfig | None = None, **kwargs) -> Harness:
    """Replace the default harness with a fresh one and return it."""
    global _harness
    _harness = Harness(config or HarnessConfig(), **kwargs)
    return _harness


def test(title: str, fn: TestCallback) -> TestCase:
    return get_harness().test(title, fn)


def module(label: object) -> None:
    get_harness().module(label)


def before_each(fn: HookCallback | None) -> None:
    get_harness().before_each(fn)


def after_each(fn: HookCallback | None) -> None:
    get_harness().after_each(fn)


# not a pytest test function
test.__test__ = False

__all__ = [
    "AssertionRecorder",
    "Comparison",
    "ErrorRecord",
    "Harness",
    "HarnessConfig",
    "TestCase",
    "TestReport",
    "after_each",
    "before_each",
    "get_harness",
    "module",
    "reset_harness",
    "test",
]
