"""Reporters that render finished tests."""

from tinyunit.reporting.base import CollectingReporter, FileReporter, Reporter
from tinyunit.reporting.html import HtmlReporter
from tinyunit.reporting.json_report import JsonReporter
from tinyunit.reporting.junit import JUnitReporter
from tinyunit.reporting.text import TextReporter

__all__ = [
    "CollectingReporter",
    "FileReporter",
    "HtmlReporter",
    "JUnitReporter",
    "JsonReporter",
    "Reporter",
    "TextReporter",
]
