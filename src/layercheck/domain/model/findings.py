"""Finding types: structural results of analysis.

Findings are informational data. They are never raised.
"""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.enums import BindingDefectKind, Layer, ModuleDefectKind


@dataclass(frozen=True, slots=True)
class ScanWarning:
    """Source unit dropped because its extraction failed.

    Attributes:
        path: File that failed
        reason: Why it failed
    """

    path: str
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        """Format as path: reason."""
        return f"{self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class LayerViolation:
    """Reference from one layer to another that the matrix forbids.

    Attributes:
        unit: Path of the referencing unit
        symbol: Referenced symbol
        source_layer: Layer of the referencing unit
        referenced_layer: Layer owning the symbol
        suggestion: Remediation message
    """

    unit: str
    symbol: str
    source_layer: Layer
    referenced_layer: Layer
    suggestion: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.unit:
            raise ValueError("unit must not be empty")
        if not self.symbol:
            raise ValueError("symbol must not be empty")
        if not self.suggestion:
            raise ValueError("suggestion must not be empty")
        if self.source_layer == self.referenced_layer:
            raise ValueError("source_layer must differ from referenced_layer")

    @property
    def rule_broken(self) -> tuple[Layer, Layer]:
        """The (source, target) pair that is not allowed."""
        return (self.source_layer, self.referenced_layer)

    @property
    def message(self) -> str:
        """Human-readable violation message."""
        return (
            f"Layer {self.source_layer.label} should not depend on layer "
            f"{self.referenced_layer.label}. Import: {self.symbol}"
        )

    def __str__(self) -> str:
        """Format as unit → symbol (layer → layer)."""
        return (
            f"{self.unit} → {self.symbol} "
            f"({self.source_layer.label} → {self.referenced_layer.label})"
        )


@dataclass(frozen=True, slots=True)
class CircularDependency:
    """Import cycle among source units (one strongly connected component).

    Attributes:
        members: Unit paths in discovery order (at least 2)
        description: Member file names joined by " <-> "
    """

    members: tuple[str, ...]
    description: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.members) < 2:
            raise ValueError(f"circular dependency needs >= 2 members, got {len(self.members)}")
        if len(set(self.members)) != len(self.members):
            raise ValueError("members must be distinct")
        if not self.description:
            raise ValueError("description must not be empty")

    @classmethod
    def from_members(cls, members: tuple[str, ...]) -> CircularDependency:
        """Build with the standard description from member file names."""
        names = " <-> ".join(m.replace("\\", "/").rsplit("/", 1)[-1] for m in members)
        return cls(
            members=members,
            description=f"Circular dependency detected in strongly connected component: {names}",
        )

    def __str__(self) -> str:
        """Format as description."""
        return self.description


@dataclass(frozen=True, slots=True)
class TypeCycle:
    """Cycle among injectable types.

    Attributes:
        chain: Ordered symbols, first == last ("A", "B", "A")
    """

    chain: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.chain) < 2:
            raise ValueError(f"chain needs >= 2 entries, got {len(self.chain)}")
        if self.chain[0] != self.chain[-1]:
            raise ValueError("chain must start and end on the same symbol")

    @property
    def members(self) -> frozenset[str]:
        """Distinct symbols in the cycle."""
        return frozenset(self.chain)

    @property
    def path(self) -> str:
        """Chain joined by " -> "."""
        return " -> ".join(self.chain)

    @property
    def message(self) -> str:
        """Human-readable message."""
        return f"Circular dependency detected: {self.path}"

    def __str__(self) -> str:
        """Format as A -> B -> A."""
        return self.path


@dataclass(frozen=True, slots=True)
class MissingDependency:
    """Required injectable type with no provider or binding.

    Attributes:
        requiring_type: Type whose declaration requires the missing type
        missing_type: Type without provider
        declared_in: Path of the requiring declaration ("" if unknown)
    """

    requiring_type: str
    missing_type: str
    declared_in: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.requiring_type:
            raise ValueError("requiring_type must not be empty")
        if not self.missing_type:
            raise ValueError("missing_type must not be empty")

    @property
    def message(self) -> str:
        """Human-readable message."""
        return f"{self.requiring_type} depends on {self.missing_type} but no provider found"

    def __str__(self) -> str:
        """Format as message."""
        return self.message


@dataclass(frozen=True, slots=True)
class BindingDefect:
    """Structural defect of a binding or of the interface/implementation pairing.

    Attributes:
        interface: Interface symbol
        implementation: Implementation symbol (None when it does not exist)
        kind: Defect kind
        detail: What is wrong
        fix: How to fix it
    """

    interface: str
    implementation: str | None
    kind: BindingDefectKind
    detail: str
    fix: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.interface:
            raise ValueError("interface must not be empty")
        if not self.detail:
            raise ValueError("detail must not be empty")
        if self.implementation == "":
            raise ValueError("implementation must be None or non-empty")

    def __str__(self) -> str:
        """Format as [KIND] detail."""
        return f"[{self.kind.name}] {self.detail}"


@dataclass(frozen=True, slots=True)
class ModuleDefect:
    """Module missing its annotations, or a member that does not fit it.

    Attributes:
        unit: Path of the declaring unit
        module: Module type name
        kind: Defect kind
        detail: What is wrong
        fix: How to fix it
        member: Offending provider or binding function (None for the module itself)
    """

    unit: str
    module: str
    kind: ModuleDefectKind
    detail: str
    fix: str
    member: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.unit:
            raise ValueError("unit must not be empty")
        if not self.module:
            raise ValueError("module must not be empty")
        if not self.detail:
            raise ValueError("detail must not be empty")
        if self.member == "":
            raise ValueError("member must be None or non-empty")

    def __str__(self) -> str:
        """Format as [KIND] detail."""
        return f"[{self.kind.name}] {self.detail}"


@dataclass(frozen=True, slots=True)
class PlacementViolation:
    """Type whose naming convention puts it in another layer.

    Attributes:
        unit: Path of the declaring unit
        type_name: Offending type
        expected_layer: Layer required by the convention
        actual_layer: Layer of the unit
        suggestion: Where to move it
    """

    unit: str
    type_name: str
    expected_layer: Layer
    actual_layer: Layer
    suggestion: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.unit:
            raise ValueError("unit must not be empty")
        if not self.type_name:
            raise ValueError("type_name must not be empty")
        if self.expected_layer == self.actual_layer:
            raise ValueError("expected_layer must differ from actual_layer")

    @property
    def message(self) -> str:
        """Human-readable message."""
        return f"{self.type_name} should be in {self.expected_layer.label} layer"

    def __str__(self) -> str:
        """Format as unit: message."""
        return f"{self.unit}: {self.message} (found in {self.actual_layer.label})"


type Finding = (
    LayerViolation
    | CircularDependency
    | TypeCycle
    | MissingDependency
    | BindingDefect
    | ModuleDefect
    | PlacementViolation
)
