from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from tinyunit.assertions.coercion import format_value
from tinyunit.case import TestReport
from tinyunit.reporting.base import FileReporter
from tinyunit.summary import summarize

ROOT_ID = "jsunit"


def render_html(reports: list[TestReport], title: str = "tinyunit") -> str:
    """Render finished reports to a standalone HTML page."""
    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    env.filters["display"] = format_value
    template = env.get_template("report.html.j2")
    return template.render(
        title=title,
        root_id=ROOT_ID,
        tests=reports,
        summary=summarize(reports),
    )


class HtmlReporter(FileReporter):
    """Writes the per-test result blocks to an HTML file at the end of the run."""

    def __init__(self, path: Path, title: str = "tinyunit"):
        super().__init__(path)
        self.title = title

    def write(self) -> None:
        self.path.write_text(render_html(self.reports, self.title), encoding="utf-8")
