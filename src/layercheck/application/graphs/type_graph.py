"""Type dependency graph: injectable type → required types."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from layercheck.domain.model.declarations import simple_name
from layercheck.domain.model.findings import TypeCycle
from layercheck.domain.model.graph import find_first_cycle
from layercheck.domain.model.injectable import InjectableType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from layercheck.domain.model.snapshot import DeclarationSnapshot


@dataclass(frozen=True, slots=True)
class TypeGraph:
    """Dependency graph of injectable types.

    Edge T → U when a provider of T requires U, or T is bound to
    implementation U. Nodes are simple names, so "com.app.Api", "Api?"
    and "Api" are one node. Node order is discovery order: records by path,
    declarations in record order. Successor order is declaration order.

    Attributes:
        types: Simple name → InjectableType, in discovery order
        spellings: Simple name → distinct references it was written as
    """

    types: Mapping[str, InjectableType]
    spellings: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name, node in self.types.items():
            if name != node.name:
                raise ValueError(f"type key '{name}' does not match node '{node.name}'")
            for dep in node.requires:
                if dep not in self.types:
                    raise ValueError(f"dependency '{dep}' of '{name}' not in graph")
        for name in self.spellings:
            if name not in self.types:
                raise ValueError(f"spellings for unknown type '{name}'")

    def get(self, name: str) -> InjectableType | None:
        """Get node by symbol."""
        return self.types.get(name)

    def spellings_of(self, name: str) -> tuple[str, ...]:
        """References written for a node, the simple name when none recorded."""
        return self.spellings.get(name) or (name,)

    def successors(self, name: str) -> tuple[str, ...]:
        """Required types of a node, in declaration order."""
        node = self.types.get(name)
        return node.requires if node is not None else ()

    @property
    def node_count(self) -> int:
        """Number of types."""
        return len(self.types)

    @property
    def edge_count(self) -> int:
        """Number of requirement edges."""
        return sum(len(node.requires) for node in self.types.values())

    @property
    def provided(self) -> tuple[InjectableType, ...]:
        """Types with at least one provider or binding, discovery order."""
        return tuple(node for node in self.types.values() if node.is_provided)

    def cycles(self) -> tuple[TypeCycle, ...]:
        """First cycle reachable from each unvisited root.

        Bounded effort: not every cycle is enumerated. Different
        discovery orders may surface different members of the same
        underlying cycle.
        """
        visited: set[str] = set()
        found: list[TypeCycle] = []

        for root in self.types:
            if root in visited:
                continue
            chain = find_first_cycle(root, self.successors, visited)
            if chain:
                found.append(TypeCycle(chain=chain))

        return tuple(found)

    @classmethod
    def from_snapshot(cls, snapshot: DeclarationSnapshot) -> TypeGraph:
        """Build type graph from provider and binding declarations.

        Time: O(D) where D is the number of declared requirements
        """
        declared_by: dict[str, list[str]] = {}
        requires: dict[str, list[str]] = {}
        spellings: dict[str, list[str]] = {}

        def touch(reference: str) -> str:
            name = simple_name(reference)
            declared_by.setdefault(name, [])
            requires.setdefault(name, [])
            seen = spellings.setdefault(name, [])
            if reference not in seen:
                seen.append(reference)
            return name

        def add(produced: str, reference: str) -> None:
            produced = simple_name(produced)
            required = touch(reference)
            if required not in requires[produced]:
                requires[produced].append(required)

        def declare(reference: str, path: str) -> None:
            produced = touch(reference)
            if path not in declared_by[produced]:
                declared_by[produced].append(path)

        for record in snapshot.records:
            for provider in record.providers:
                declare(provider.produces, record.path)
                for required in provider.requires:
                    add(provider.produces, required)
            for binding in record.bindings:
                declare(binding.interface, record.path)
                add(binding.interface, binding.implementation)

        types = {
            name: InjectableType(
                name=name,
                declared_by=tuple(declared_by[name]),
                requires=tuple(requires[name]),
            )
            for name in declared_by
        }
        return cls(
            types=MappingProxyType(types),
            spellings=MappingProxyType({name: tuple(refs) for name, refs in spellings.items()}),
        )
