"""Domain model entities."""

from layercheck.domain.model.configuration import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_EXTERNAL_TYPE_PREFIXES,
    AnalysisConfig,
    BindingConvention,
)
from layercheck.domain.model.declarations import (
    BindingDeclaration,
    DeclarationRecord,
    ProviderDeclaration,
    TypeDeclaration,
    simple_name,
)
from layercheck.domain.model.enums import (
    BindingDefectKind,
    FindingCategory,
    Layer,
    ModuleDefectKind,
    ProviderKind,
    TypeKind,
)
from layercheck.domain.model.findings import (
    BindingDefect,
    CircularDependency,
    Finding,
    LayerViolation,
    MissingDependency,
    ModuleDefect,
    PlacementViolation,
    ScanWarning,
    TypeCycle,
)
from layercheck.domain.model.graph import (
    DiGraph,
    find_first_cycle,
    strongly_connected_components,
)
from layercheck.domain.model.injectable import InjectableType
from layercheck.domain.model.layer_rules import (
    ALLOWED_DEPENDENCIES,
    DEFAULT_LAYER_RULES,
    LayerRule,
    is_allowed,
    suggestion_for,
)
from layercheck.domain.model.result import AnalysisResult, AnalysisStats
from layercheck.domain.model.snapshot import DeclarationSnapshot

__all__ = [
    # Enums
    "Layer",
    "ProviderKind",
    "TypeKind",
    "BindingDefectKind",
    "ModuleDefectKind",
    "FindingCategory",
    # Declarations
    "ProviderDeclaration",
    "BindingDeclaration",
    "TypeDeclaration",
    "DeclarationRecord",
    "DeclarationSnapshot",
    "InjectableType",
    "simple_name",
    # Layer rules
    "LayerRule",
    "DEFAULT_LAYER_RULES",
    "ALLOWED_DEPENDENCIES",
    "is_allowed",
    "suggestion_for",
    # Graphs
    "DiGraph",
    "strongly_connected_components",
    "find_first_cycle",
    # Findings
    "Finding",
    "ScanWarning",
    "LayerViolation",
    "CircularDependency",
    "TypeCycle",
    "MissingDependency",
    "BindingDefect",
    "ModuleDefect",
    "PlacementViolation",
    # Results
    "AnalysisResult",
    "AnalysisStats",
    # Configuration
    "AnalysisConfig",
    "BindingConvention",
    "DEFAULT_EXTERNAL_TYPE_PREFIXES",
    "DEFAULT_EXCLUDED_DIRS",
]
