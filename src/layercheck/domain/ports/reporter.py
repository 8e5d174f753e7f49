"""Reporter protocol for output formatting.

Rendering is outside the analysis core: reporters only read
an AnalysisResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from layercheck.domain.model.result import AnalysisResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    layercheck provides ConsoleReporter (rich) and JSONReporter.
    """

    def report(self, result: AnalysisResult) -> None:
        """Report analysis results.

        Implementation decides output format and destination.

        Args:
            result: Complete analysis result
        """
        ...
