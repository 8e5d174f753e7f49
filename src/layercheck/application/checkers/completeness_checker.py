"""Dependency completeness checker.

Every type required by a provider or binding must itself be provided,
unless it matches the external/builtin allowlist. Types are compared by
simple name; the allowlist is matched against every spelling a type was
written with, so "java.io.File" is still external.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.graphs.type_graph import TypeGraph
from layercheck.domain.model.enums import FindingCategory
from layercheck.domain.model.findings import MissingDependency

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.snapshot import DeclarationSnapshot


class CompletenessChecker(BaseChecker):
    """Missing provider checker.

    One finding per (requiring type, missing type) pair.
    """

    category = FindingCategory.MISSING_DEPENDENCIES

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[MissingDependency, ...]:
        """Report required types without provider.

        Args:
            snapshot: Read-only declarations
            config: Analysis configuration (external type prefixes)

        Returns:
            Tuple of findings in type discovery order
        """
        graph = TypeGraph.from_snapshot(snapshot)
        missing: list[MissingDependency] = []

        for node in graph.provided:
            for required in node.requires:
                target = graph.get(required)
                if target is not None and target.is_provided:
                    continue
                if any(config.is_external_type(s) for s in graph.spellings_of(required)):
                    continue
                missing.append(
                    MissingDependency(
                        requiring_type=node.name,
                        missing_type=required,
                        declared_in=node.declared_by[0],
                    )
                )

        return tuple(missing)
