"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.result import AnalysisResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.
    layercheck provides ConsoleReporter and JSONReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: AnalysisResult) -> None:
                print(f"Findings: {result.finding_count}")
    """

    @abstractmethod
    def report(self, result: AnalysisResult) -> None:
        """Report analysis results.

        Implementation decides output format and destination.

        Args:
            result: Complete analysis result
        """
