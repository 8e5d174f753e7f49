"""Reporters for analysis results.

ConsoleReporter renders rich text; JSONReporter writes machine-readable JSON.
"""

from layercheck.application.reporters._base import BaseReporter
from layercheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from layercheck.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
