from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from tinyunit.case import TestCase, TestReport
from tinyunit.registry import TestRegistry
from tinyunit.reporting.base import Reporter
from tinyunit.verbose import get_logger

ELAPSED_TIME_PRECISION = 3


class TestRunner:
    """Executes registered test cases one at a time, in registration order."""

    __test__ = False

    def __init__(
        self,
        registry: TestRegistry,
        reporters: Iterable[Reporter] = (),
        logger: logging.Logger | None = None,
        precision: int = ELAPSED_TIME_PRECISION,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.registry = registry
        self.reporters = list(reporters)
        self.logger = logger or get_logger()
        self.precision = precision
        self.clock = clock

    def run_test(self, case: TestCase) -> TestReport:
        """Run one case between the before/after hooks and hand it to reporters.

        Only the test body is isolated: an exception from a hook
        propagates to the caller and stops the run.
        """
        index = self.registry.position(case)
        self.logger.debug(f"Starting test #{index} '{case.title}' [{case.module}]")

        if self.registry.before_each is not None:
            self.logger.debug(f"Calling before_each hook for test #{index}")
            self.registry.before_each(index)

        start = self.clock()
        case.perform()
        end = self.clock()
        case.elapsed_ms = round(max(end - start, 0.0) * 1000, self.precision)

        if case.error is not None:
            self.logger.warning(
                f"Test #{index} '{case.title}' raised: {case.error.error}"
            )
        self.logger.debug(
            f"Test #{index} '{case.title}' completed: "
            f"{case.passed_count}/{case.total_count} assertions passed "
            f"in {case.elapsed_ms} ms"
        )

        report = case.snapshot(index)
        for reporter in self.reporters:
            reporter.report(report)

        if self.registry.after_each is not None:
            self.logger.debug(f"Calling after_each hook for test #{index}")
            self.registry.after_each(index)

        return report

    def run_all(self) -> list[TestReport]:
        """Run every case that has not run yet; never stops on a failing test."""
        return [self.run_test(case) for case in self.registry.pending()]
