"""File dependency graph: source unit → source unit by resolved imports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.model.findings import CircularDependency
from layercheck.domain.model.graph import DiGraph, strongly_connected_components

if TYPE_CHECKING:
    from collections.abc import Iterator

    from layercheck.domain.model.snapshot import DeclarationSnapshot


@dataclass(frozen=True, slots=True)
class FileGraph:
    """Import dependencies between source units.

    Nodes: unit paths (every unit of the snapshot, isolated ones included)
    Edges: A → B means A imports a symbol owned by B (A ≠ B)

    Attributes:
        graph: Underlying directed graph
    """

    graph: DiGraph[str]

    @property
    def unit_count(self) -> int:
        """Number of units."""
        return self.graph.node_count

    @property
    def edge_count(self) -> int:
        """Number of import edges."""
        return self.graph.edge_count

    def cycles(self) -> tuple[CircularDependency, ...]:
        """Import cycles: strongly connected components with >= 2 members.

        Deterministic: components come out in the same order on every
        run over the same snapshot.
        """
        return tuple(
            CircularDependency.from_members(component)
            for component in strongly_connected_components(self.graph)
            if len(component) >= 2
        )

    @classmethod
    def from_snapshot(cls, snapshot: DeclarationSnapshot) -> FileGraph:
        """Build file graph from a snapshot.

        An import `ns.Name` creates an edge to every unit of namespace
        `ns` whose base name is `Name`. Unresolved imports are external
        and add no edge.

        Time: O(U * I) where U=units, I=avg imports per unit
        """

        def edges() -> Iterator[tuple[str, str]]:
            for record in snapshot.records:
                for symbol in record.imports:
                    for target in snapshot.resolve_import(symbol):
                        if target != record.path:
                            yield (record.path, target)

        return cls(graph=DiGraph.from_edges(edges(), extra_nodes=snapshot.paths))
