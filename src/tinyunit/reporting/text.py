from __future__ import annotations

import sys
from typing import TextIO

from tinyunit.assertions.base import Comparison
from tinyunit.assertions.coercion import format_value
from tinyunit.case import TestReport
from tinyunit.reporting.base import Reporter


def format_test_line(test: TestReport) -> str:
    status = "PASS" if test.passed else "FAIL"
    return (
        f"[{test.index}] {status}  {test.module} / {test.title} "
        f"({test.passed_count}/{test.total_count} assertions, {test.elapsed_ms} ms)"
    )


def format_record_lines(test: TestReport) -> list[str]:
    """Detail lines for the records that did not pass."""
    lines = []
    for i, record in enumerate(test.records, start=1):
        if record.passed:
            continue
        label = f"#{i}"
        if isinstance(record, Comparison):
            if record.message:
                label += f" - {record.message}"
            lines.append(
                f"      {label}: expected {format_value(record.expected)}, "
                f"actual {format_value(record.actual)}"
            )
        else:
            lines.append(f"      {label}: error: {record.error}")
    return lines


class TextReporter(Reporter):
    """Writes one line per test, plus details for failures, to a stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def report(self, test: TestReport) -> None:
        print(format_test_line(test), file=self.stream)
        for line in format_record_lines(test):
            print(line, file=self.stream)
