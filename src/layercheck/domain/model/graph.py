"""Immutable directed graph with O(1) bidirectional lookups.

Includes the two cycle algorithms used by the checkers:
- strongly_connected_components: Tarjan, iterative
- find_first_cycle: three-colour DFS with path reconstruction
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class DiGraph[T]:
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - forward[a] contains b ⟺ reverse[b] contains a
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node → set of successors (outgoing edges)
        reverse: Node → set of predecessors (incoming edges)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    reverse: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")
                if node not in self.reverse.get(succ, frozenset()):
                    raise ValueError(
                        f"inconsistent: {node}→{succ} in forward but {node} not in reverse[{succ}]"
                    )

        for node, predecessors in self.reverse.items():
            if node not in self.nodes:
                raise ValueError(f"reverse key '{node}' not in nodes")
            for pred in predecessors:
                if pred not in self.nodes:
                    raise ValueError(f"predecessor '{pred}' of '{node}' not in nodes")
                if node not in self.forward.get(pred, frozenset()):
                    raise ValueError(
                        f"inconsistent: {pred}→{node} in reverse but {node} not in forward[{pred}]"
                    )

    def successors(self, node: T) -> frozenset[T]:
        """Get direct successors (outgoing edges). O(1)."""
        return self.forward.get(node, frozenset())

    @property
    def edge_count(self) -> int:
        """Get total number of edges."""
        return sum(len(succs) for succs in self.forward.values())

    @property
    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self.nodes)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] | None = None,
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Args:
            edges: Iterable of (from, to) tuples
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes

        Time: O(E) where E is number of edges
        """
        forward: dict[T, set[T]] = {}
        reverse: dict[T, set[T]] = {}
        nodes: set[T] = set()

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)
            reverse.setdefault(to_node, set()).add(from_node)

        if extra_nodes is not None:
            nodes.update(extra_nodes)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            reverse={k: frozenset(v) for k, v in reverse.items()},
            nodes=frozenset(nodes),
        )


# =============================================================================
# GRAPH ALGORITHMS
# =============================================================================


def strongly_connected_components(graph: DiGraph[str]) -> tuple[tuple[str, ...], ...]:
    """Find strongly connected components with Tarjan's algorithm.

    Iterative: an explicit work stack replaces recursion, so depth is
    bounded by memory, not by the interpreter recursion limit.
    Nodes and successors are visited in sorted order, so repeated runs
    over the same graph return identical components in identical order.

    Args:
        graph: Directed graph

    Returns:
        All components (including single nodes), each ordered by
        discovery, in the order Tarjan closes them.
    """
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    components: list[tuple[str, ...]] = []
    counter = 0

    def ordered_successors(node: str) -> Iterator[str]:
        return iter(sorted(graph.successors(node)))

    for root in sorted(graph.nodes):
        if root in index:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work: list[tuple[str, Iterator[str]]] = [(root, ordered_successors(root))]

        while work:
            node, successors = work[-1]
            descended = False

            for succ in successors:
                if succ not in index:
                    index[succ] = lowlink[succ] = counter
                    counter += 1
                    stack.append(succ)
                    on_stack.add(succ)
                    work.append((succ, ordered_successors(succ)))
                    descended = True
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index[succ])

            if descended:
                continue

            # All successors done: propagate lowlink to parent
            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index[node]:
                component: list[str] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member == node:
                        break
                component.reverse()
                components.append(tuple(component))

    return tuple(components)


def find_first_cycle[T](
    root: T,
    successors: Callable[[T], Sequence[T]],
    visited: set[T],
) -> tuple[T, ...]:
    """Depth-first search from root, stopping at the first cycle.

    Three colours: unvisited, on the recursion stack, finished.
    `visited` is shared across roots by the caller; the recursion
    stack and path belong to this root only.

    When a successor is already on the recursion stack, the path is
    sliced from that successor's first occurrence and the successor
    is appended again to close the loop.

    Args:
        root: Start node (must not be in visited)
        successors: Node → ordered successors
        visited: Nodes already explored; updated in place

    Returns:
        Cycle chain (first == last), or () if no cycle is reachable.
    """
    path: list[T] = [root]
    on_path: set[T] = {root}
    visited.add(root)
    work: list[tuple[T, Iterator[T]]] = [(root, iter(successors(root)))]

    while work:
        node, pending = work[-1]

        for dep in pending:
            if dep in on_path:
                start = path.index(dep)
                return (*path[start:], dep)
            if dep not in visited:
                visited.add(dep)
                on_path.add(dep)
                path.append(dep)
                work.append((dep, iter(successors(dep))))
                break
        else:
            work.pop()
            on_path.discard(node)
            path.pop()

    return ()
