"""Injectable type: node of the type dependency graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InjectableType:
    """Named type participating in the dependency-declaration graph.

    Attributes:
        name: Type symbol (identity)
        declared_by: Paths of units with a provider or binding for this type
        requires: Required type symbols, declaration order, no duplicates
    """

    name: str
    declared_by: tuple[str, ...] = ()
    requires: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if len(set(self.requires)) != len(self.requires):
            raise ValueError(f"requires of '{self.name}' contains duplicates")

    @property
    def is_provided(self) -> bool:
        """Check if some provider or binding produces this type."""
        return bool(self.declared_by)
