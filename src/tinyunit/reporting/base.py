from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from tinyunit.case import TestReport


class Reporter(ABC):
    """Receives each finished test and renders it somewhere."""

    @abstractmethod
    def report(self, test: TestReport) -> None:
        """Called once per test, right after it has run."""
        ...

    def finish(self) -> None:
        """Called once after the last test of a run."""


class CollectingReporter(Reporter):
    """Keeps every report in memory, in run order."""

    def __init__(self) -> None:
        self.reports: list[TestReport] = []

    def report(self, test: TestReport) -> None:
        self.reports.append(test)


class FileReporter(CollectingReporter):
    """Collects reports during the run and writes one file at ``finish()``."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path

    def finish(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.write()

    @abstractmethod
    def write(self) -> None:
        ...
