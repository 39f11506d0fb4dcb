from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Iterable

import numpy as np

from tinyunit.case import TestReport


@dataclass
class TimingStatistics:
    """Statistics for elapsed test time, in milliseconds."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None
    total: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass
class ModuleSummary:
    """Counters for the tests sharing one module label."""

    module: str
    tests: int = 0
    passed: int = 0
    failed: int = 0
    errors: int = 0
    assertions: int = 0
    passed_assertions: int = 0

    def add(self, report: TestReport) -> None:
        self.tests += 1
        self.assertions += report.total_count
        self.passed_assertions += report.passed_count
        if report.passed:
            self.passed += 1
        else:
            self.failed += 1
        if report.errored:
            self.errors += 1

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RunSummary:
    """Totals across a whole run."""

    tests: int
    passed: int
    failed: int
    errors: int
    assertions: int
    passed_assertions: int
    timing: TimingStatistics
    modules: list[ModuleSummary] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "tests": self.tests,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "assertions": self.assertions,
            "passed_assertions": self.passed_assertions,
            "all_passed": self.all_passed,
            "timing": self.timing.to_dict(),
            "modules": [m.to_dict() for m in self.modules],
        }


def compute_timing(values: list[float], precision: int = 3) -> TimingStatistics:
    """Compute avg, min, max, stddev and total for a list of durations."""
    if not values:
        return TimingStatistics(avg=None, min=None, max=None, stddev=None, total=None)

    arr = np.array(values, dtype=float)
    return TimingStatistics(
        avg=round(float(np.mean(arr)), precision),
        min=round(float(np.min(arr)), precision),
        max=round(float(np.max(arr)), precision),
        stddev=round(float(np.std(arr)), precision),
        total=round(float(np.sum(arr)), precision),
    )


def summarize(reports: Iterable[TestReport]) -> RunSummary:
    """Aggregate finished test reports into run totals and per-module counters."""
    reports = list(reports)
    modules: dict[str, ModuleSummary] = {}
    for report in reports:
        if report.module not in modules:
            modules[report.module] = ModuleSummary(module=report.module)
        modules[report.module].add(report)

    passed = sum(1 for r in reports if r.passed)
    return RunSummary(
        tests=len(reports),
        passed=passed,
        failed=len(reports) - passed,
        errors=sum(1 for r in reports if r.errored),
        assertions=sum(r.total_count for r in reports),
        passed_assertions=sum(r.passed_count for r in reports),
        timing=compute_timing([r.elapsed_ms for r in reports]),
        modules=list(modules.values()),
    )
