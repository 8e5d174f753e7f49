"""Analysis configuration.

None/empty = feature default, value = override.
All fields have defaults; presets mirror typical CI and development runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from layercheck.domain.model.enums import FindingCategory, Layer
from layercheck.domain.model.layer_rules import DEFAULT_LAYER_RULES, LayerRule

# Required types that never need a provider: primitives, collections,
# platform/framework types and well-known third-party clients.
DEFAULT_EXTERNAL_TYPE_PREFIXES: tuple[str, ...] = (
    "String",
    "Int",
    "Long",
    "Boolean",
    "Float",
    "Double",
    "List",
    "Set",
    "Map",
    "Array",
    "Context",
    "Application",
    "Activity",
    "Fragment",
    "FirebaseAuth",
    "FirebaseFirestore",
    "OkHttpClient",
    "Retrofit",
    "Room",
    "Database",
    "Dao",
    "java.",
    "kotlin.",
    "android.",
    "androidx.",
    "com.google.",
    "retrofit2.",
    "okhttp3.",
)

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset({"build", ".gradle", ".git", ".idea"})


@dataclass(frozen=True, slots=True)
class BindingConvention:
    """Where bound interfaces and implementations are expected to live.

    Attributes:
        interface_layer: Layer every bound interface must classify as
        implementation_layer: Layer every bound implementation must classify as
        interface_location: Dotted fragment of interface units ("domain.repositories")
        implementation_location: Dotted fragment of implementation units
        implementation_suffix: Implementation name = interface name + suffix
    """

    interface_layer: Layer = Layer.DOMAIN
    implementation_layer: Layer = Layer.DATA
    interface_location: str = "domain.repositories"
    implementation_location: str = "data.repositories"
    implementation_suffix: str = "Impl"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.interface_layer is Layer.UNKNOWN or self.implementation_layer is Layer.UNKNOWN:
            raise ValueError("binding convention layers must not be UNKNOWN")
        if not self.interface_location:
            raise ValueError("interface_location must not be empty")
        if not self.implementation_location:
            raise ValueError("implementation_location must not be empty")
        if not self.implementation_suffix:
            raise ValueError("implementation_suffix must not be empty")

    def implementation_name(self, interface: str) -> str:
        """Expected implementation name for an interface."""
        return f"{interface}{self.implementation_suffix}"

    def interface_name(self, implementation: str) -> str:
        """Expected interface name for an implementation."""
        return implementation.removesuffix(self.implementation_suffix)


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Configuration of one analysis run.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        # Scanning
        source_suffixes: File suffixes to scan
        excluded_dirs: Directory names skipped while walking
        max_workers: Extraction/check threads. None = min(cpu_count, 8)

        # Classification
        layer_rules: Ordered layer pattern groups

        # Checks
        external_type_prefixes: Type prefixes exempt from completeness
        binding_convention: Expected binding locations and naming
        check_placement: Run naming-convention placement checks
        disabled_checks: Finding categories not computed
        parallel: Run checkers concurrently
    """

    # Scanning
    source_suffixes: tuple[str, ...] = (".kt",)
    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    max_workers: int | None = None

    # Classification
    layer_rules: tuple[LayerRule, ...] = DEFAULT_LAYER_RULES

    # Checks
    external_type_prefixes: tuple[str, ...] = DEFAULT_EXTERNAL_TYPE_PREFIXES
    binding_convention: BindingConvention = field(default_factory=BindingConvention)
    check_placement: bool = True
    disabled_checks: frozenset[FindingCategory] = frozenset()
    parallel: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source_suffixes:
            raise ValueError("source_suffixes must not be empty")
        for suffix in self.source_suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"source suffix must start with '.', got {suffix!r}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

        if not self.layer_rules:
            raise ValueError("layer_rules must not be empty")

        if any(not p for p in self.external_type_prefixes):
            raise ValueError("external_type_prefixes must not contain empty prefix")

    def is_enabled(self, category: FindingCategory) -> bool:
        """Check if a finding category is computed."""
        if category is FindingCategory.PLACEMENT and not self.check_placement:
            return False
        return category not in self.disabled_checks

    def is_external_type(self, name: str) -> bool:
        """Check if a type name matches the external/builtin allowlist."""
        return any(name.startswith(prefix) for prefix in self.external_type_prefixes)

    @classmethod
    def for_ci(cls) -> AnalysisConfig:
        """Sequential, placement off: stable output for pipelines."""
        return cls(parallel=False, check_placement=False)

    @classmethod
    def for_development(cls) -> AnalysisConfig:
        """Everything on, checks in parallel."""
        return cls(parallel=True, check_placement=True)

    def with_overrides(self, **changes: object) -> AnalysisConfig:
        """Copy with some fields replaced (validated again)."""
        return replace(self, **changes)  # type: ignore[arg-type]
