from __future__ import annotations

import json

from tinyunit.reporting.base import FileReporter
from tinyunit.summary import summarize


class JsonReporter(FileReporter):
    """Writes ``{"summary": ..., "tests": [...]}`` to a JSON file."""

    def write(self) -> None:
        document = {
            "summary": summarize(self.reports).to_dict(),
            "tests": [r.to_dict() for r in self.reports],
        }
        self.path.write_text(json.dumps(document, indent=2, default=str))
