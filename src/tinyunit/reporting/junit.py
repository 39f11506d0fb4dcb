from __future__ import annotations

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from tinyunit.assertions.base import Comparison
from tinyunit.assertions.coercion import format_value
from tinyunit.case import TestReport
from tinyunit.reporting.base import FileReporter


def _failure_text(test: TestReport) -> str:
    lines = []
    for i, record in enumerate(test.records, start=1):
        if isinstance(record, Comparison) and not record.passed:
            label = f"#{i} - {record.message}" if record.message else f"#{i}"
            lines.append(
                f"{label}: expected {format_value(record.expected)}, "
                f"actual {format_value(record.actual)}"
            )
    return "\n".join(lines)


def build_junit(reports: list[TestReport]) -> JUnitXml:
    """One suite per module label (first-seen order), one case per test."""
    xml = JUnitXml()
    suites: dict[str, TestSuite] = {}

    for test in reports:
        suite = suites.get(test.module)
        if suite is None:
            suite = suites[test.module] = TestSuite(test.module)

        case = TestCase(test.title)
        case.classname = test.module
        error = next((r for r in test.records if r.is_error), None)
        if error is not None:
            case.result = [Error(error.error)]
        elif not test.passed:
            failed = test.total_count - test.passed_count
            failure = Failure(f"{failed}/{test.total_count} assertions failed")
            failure.text = _failure_text(test)
            case.result = [failure]
        case.time = test.elapsed_ms / 1000
        suite.add_testcase(case)

    for suite in suites.values():
        suite.update_statistics()
        xml.add_testsuite(suite)
    xml.update_statistics()
    return xml


class JUnitReporter(FileReporter):
    """Writes a JUnit XML file at the end of the run."""

    def write(self) -> None:
        build_junit(self.reports).write(str(self.path), pretty=True)
