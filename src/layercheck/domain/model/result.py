"""Analysis result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.findings import (
    BindingDefect,
    CircularDependency,
    LayerViolation,
    MissingDependency,
    ModuleDefect,
    PlacementViolation,
    ScanWarning,
    TypeCycle,
)


@dataclass(frozen=True, slots=True)
class AnalysisStats:
    """Statistics of one analysis run.

    Attributes:
        units_analyzed: Source units in the snapshot
        units_dropped: Files dropped during extraction
        providers_analyzed: Provider declarations
        bindings_analyzed: Binding declarations
        checkers_run: Checkers executed
        analysis_time_ms: Time spent in checkers
    """

    units_analyzed: int = 0
    units_dropped: int = 0
    providers_analyzed: int = 0
    bindings_analyzed: int = 0
    checkers_run: int = 0
    analysis_time_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in (
            "units_analyzed",
            "units_dropped",
            "providers_analyzed",
            "bindings_analyzed",
            "checkers_run",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Result of one analysis run.

    Four independently consumable collections (layer violations,
    file cycles, type cycles, missing dependencies + binding defects),
    module defects, placement findings, non-fatal scan warnings, and an
    error marker set only on total failure.

    Attributes:
        layer_violations: Disallowed cross-layer references
        circular_dependencies: File-level import cycles
        type_cycles: Injectable-type cycles
        missing_dependencies: Required types without provider
        binding_defects: Structural binding defects
        module_defects: Module annotation and scope defects
        placement_violations: Naming-convention placement mismatches
        warnings: Files dropped during extraction
        stats: Run statistics
        error: Total failure marker (None on success)
    """

    layer_violations: tuple[LayerViolation, ...] = ()
    circular_dependencies: tuple[CircularDependency, ...] = ()
    type_cycles: tuple[TypeCycle, ...] = ()
    missing_dependencies: tuple[MissingDependency, ...] = ()
    binding_defects: tuple[BindingDefect, ...] = ()
    module_defects: tuple[ModuleDefect, ...] = ()
    placement_violations: tuple[PlacementViolation, ...] = ()
    warnings: tuple[ScanWarning, ...] = ()
    stats: AnalysisStats = AnalysisStats()
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.error is not None:
            if not self.error:
                raise ValueError("error must be None or non-empty")
            if self.finding_count:
                raise ValueError("failed result must not carry findings")

    @property
    def finding_count(self) -> int:
        """Total number of findings (warnings excluded)."""
        return (
            len(self.layer_violations)
            + len(self.circular_dependencies)
            + len(self.type_cycles)
            + len(self.missing_dependencies)
            + len(self.binding_defects)
            + len(self.module_defects)
            + len(self.placement_violations)
        )

    @property
    def failed(self) -> bool:
        """Check if the run failed entirely."""
        return self.error is not None

    @property
    def passed(self) -> bool:
        """Check if the run succeeded with no findings."""
        return not self.failed and self.finding_count == 0

    @classmethod
    def failure(cls, error: str) -> AnalysisResult:
        """Create result of a total failure: no findings, error set."""
        return cls(error=error)

    @classmethod
    def empty(cls) -> AnalysisResult:
        """Create empty passed result."""
        return cls()
