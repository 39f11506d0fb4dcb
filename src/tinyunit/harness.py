from __future__ import annotations

import logging
from pathlib import Path

from tinyunit.case import TestCallback, TestCase, TestReport
from tinyunit.config import HarnessConfig, ReporterType
from tinyunit.registry import HookCallback, TestRegistry
from tinyunit.reporting import (
    CollectingReporter,
    FileReporter,
    HtmlReporter,
    JsonReporter,
    JUnitReporter,
    Reporter,
    TextReporter,
)
from tinyunit.runner import TestRunner
from tinyunit.summary import RunSummary, summarize
from tinyunit.verbose import get_logger


def build_reporters(config: HarnessConfig) -> list[Reporter]:
    """Instantiate the reporters named in ``config``."""
    reporters: list[Reporter] = []
    for reporter_config in config.reporters:
        path = config.reporter_path(reporter_config)
        if reporter_config.type == ReporterType.TEXT:
            reporters.append(TextReporter())
        elif reporter_config.type == ReporterType.JSON:
            reporters.append(JsonReporter(path))
        elif reporter_config.type == ReporterType.JUNIT:
            reporters.append(JUnitReporter(path))
        elif reporter_config.type == ReporterType.HTML:
            reporters.append(HtmlReporter(path))
    return reporters


class Harness:
    """Composition root owning one registry, its runner and reporters.

    In the default (immediate) mode ``test()`` registers and runs a case
    straight away, so registration order and execution order match.
    With ``deferred=True`` cases are only registered until ``run_all()``.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        reporters: list[Reporter] | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or HarnessConfig(reporters=[])
        self.logger = logger or get_logger()
        self.registry = TestRegistry(default_module=self.config.default_module)
        self._collector = CollectingReporter()
        if reporters is None:
            reporters = build_reporters(self.config)
        self.runner = TestRunner(
            self.registry,
            reporters=[self._collector, *reporters],
            logger=self.logger,
            precision=self.config.elapsed_precision,
        )
        self.finished = False

    @property
    def deferred(self) -> bool:
        return self.config.deferred

    @property
    def cases(self) -> list[TestCase]:
        return list(self.registry.cases)

    @property
    def reports(self) -> list[TestReport]:
        return list(self._collector.reports)

    def add_reporter(self, reporter: Reporter) -> None:
        self.runner.reporters.append(reporter)

    def test(self, title: str, fn: TestCallback) -> TestCase:
        """Register a test and, unless deferred, run it immediately."""
        case = self.registry.add_test(title, fn)
        self.logger.debug(f"Registered test '{title}' in module '{case.module}'")
        if not self.deferred:
            self.runner.run_test(case)
        return case

    def module(self, label: object) -> None:
        self.registry.set_module(label)

    def before_each(self, fn: HookCallback | None) -> None:
        self.registry.set_before_each(fn)

    def after_each(self, fn: HookCallback | None) -> None:
        self.registry.set_after_each(fn)

    def run_all(self) -> list[TestReport]:
        return self.runner.run_all()

    def summary(self) -> RunSummary:
        return summarize(self.reports)

    def finish(self) -> RunSummary:
        """Run anything still pending, let reporters write their output once."""
        self.run_all()
        if not self.finished:
            self.finished = True
            for reporter in self.runner.reporters:
                reporter.finish()
            for path in self.output_paths():
                self.logger.debug(f"Wrote report: {path}")
        return self.summary()

    def output_paths(self) -> list[Path]:
        return [r.path for r in self.runner.reporters if isinstance(r, FileReporter)]
