"""A single registered unit test and its read-only report snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from tinyunit.assertions.base import AssertionResult, Comparison, ErrorRecord
from tinyunit.assertions.recorder import AssertionRecorder
from tinyunit.errors import AlreadyPerformedError

TestCallback = Callable[[AssertionRecorder], Any]


def _count_passed(records: Iterable[AssertionResult]) -> int:
    return sum(1 for r in records if isinstance(r, Comparison) and r.passed)


@dataclass(frozen=True)
class TestReport:
    """Finished, immutable view of a test handed to reporters."""

    __test__ = False

    index: int
    title: str
    module: str
    records: tuple[AssertionResult, ...]
    elapsed_ms: float
    passed_count: int
    total_count: int

    @property
    def passed(self) -> bool:
        # zero records is a vacuous pass
        return self.passed_count == self.total_count

    @property
    def errored(self) -> bool:
        return any(r.is_error for r in self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "title": self.title,
            "module": self.module,
            "passed": self.passed,
            "passed_count": self.passed_count,
            "total_count": self.total_count,
            "elapsed_ms": self.elapsed_ms,
            "records": [r.to_dict() for r in self.records],
        }


class TestCase:
    """One registered test: a title, its module label and a body to run once."""

    __test__ = False

    def __init__(self, title: str, callback: TestCallback, module: str):
        self.title = title
        self.callback = callback
        self.module = module
        self.recorder = AssertionRecorder()
        self.error: ErrorRecord | None = None
        self.elapsed_ms = 0.0
        self.performed = False

    @property
    def records(self) -> list[AssertionResult]:
        """Records visible to reporters.

        A body that raised is reported as a single error record; the
        comparisons it made before raising stay on ``recorder.records``.
        """
        if self.error is not None:
            return [self.error]
        return list(self.recorder.records)

    @property
    def passed_count(self) -> int:
        return _count_passed(self.records)

    @property
    def total_count(self) -> int:
        return len(self.records)

    @property
    def passed(self) -> bool:
        return self.passed_count == self.total_count

    def perform(self) -> None:
        """Run the body against the recorder, absorbing any exception it raises."""
        if self.performed:
            raise AlreadyPerformedError(f"Test '{self.title}' has already been run")
        self.performed = True
        try:
            self.callback(self.recorder)
        except Exception as e:
            self.error = ErrorRecord(error=str(e) or type(e).__name__)

    def snapshot(self, index: int) -> TestReport:
        records = tuple(self.records)
        return TestReport(
            index=index,
            title=self.title,
            module=self.module,
            records=records,
            elapsed_ms=self.elapsed_ms,
            passed_count=_count_passed(records),
            total_count=len(records),
        )

    def __repr__(self) -> str:
        return f"TestCase(title={self.title!r}, module={self.module!r})"
