"""File-level import cycle checker (strongly connected components)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.graphs.file_graph import FileGraph
from layercheck.domain.model.enums import FindingCategory

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.findings import CircularDependency
    from layercheck.domain.model.snapshot import DeclarationSnapshot

logger = logging.getLogger(__name__)


class FileCycleChecker(BaseChecker):
    """Import cycle checker.

    One CircularDependency per strongly connected component with
    two or more units. Singletons are never reported.
    """

    category = FindingCategory.FILE_CYCLES

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[CircularDependency, ...]:
        """Build the file graph and report its cycles."""
        graph = FileGraph.from_snapshot(snapshot)
        logger.debug("File graph: %d units, %d import edges", graph.unit_count, graph.edge_count)
        return graph.cycles()
