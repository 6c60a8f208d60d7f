"""Reporters for structure check results."""

from fences.application.reporters._base import BaseReporter
from fences.application.reporters.console import ConsoleReporter
from fences.application.reporters.json_reporter import JSONReporter
from fences.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
