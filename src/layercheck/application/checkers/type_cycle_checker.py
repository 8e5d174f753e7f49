"""Injectable-type cycle checker."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.graphs.type_graph import TypeGraph
from layercheck.domain.model.enums import FindingCategory

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.findings import TypeCycle
    from layercheck.domain.model.snapshot import DeclarationSnapshot

logger = logging.getLogger(__name__)


class TypeCycleChecker(BaseChecker):
    """Provider cycle checker.

    Reports the first cycle reachable from each unvisited type.
    Representative, not exhaustive.
    """

    category = FindingCategory.TYPE_CYCLES

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[TypeCycle, ...]:
        """Build the type graph and report its cycles."""
        graph = TypeGraph.from_snapshot(snapshot)
        logger.debug("Type graph: %d types, %d requirement edges", graph.node_count, graph.edge_count)
        return graph.cycles()
