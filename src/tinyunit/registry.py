from __future__ import annotations

from typing import Callable, Iterator

from tinyunit.case import TestCallback, TestCase

DEFAULT_MODULE = "Common"

HookCallback = Callable[[int], object]


class TestRegistry:
    """Append-only, ordered list of test cases plus the current module label."""

    __test__ = False

    def __init__(self, default_module: str = DEFAULT_MODULE):
        self.cases: list[TestCase] = []
        self.current_module = default_module
        self.before_each: HookCallback | None = None
        self.after_each: HookCallback | None = None

    def add_test(self, title: str, callback: TestCallback) -> TestCase:
        case = TestCase(title, callback, module=self.current_module)
        self.cases.append(case)
        return case

    def set_module(self, label: object) -> None:
        """Label subsequently added tests; empty or non-string labels are ignored."""
        if label and isinstance(label, str):
            self.current_module = label

    def set_before_each(self, fn: HookCallback | None) -> None:
        self.before_each = fn

    def set_after_each(self, fn: HookCallback | None) -> None:
        self.after_each = fn

    def position(self, case: TestCase) -> int:
        """1-based registration position of ``case``."""
        return self.cases.index(case) + 1

    def pending(self) -> list[TestCase]:
        return [case for case in self.cases if not case.performed]

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self.cases)
