"""layercheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, re, types, pathlib, collections.abc
"""

from layercheck.domain.exceptions import (
    ConfigError,
    DuplicateUnitError,
    ExtractionError,
    LayerCheckError,
    RootNotFoundError,
)
from layercheck.domain.model import (
    AnalysisConfig,
    AnalysisResult,
    BindingDeclaration,
    BindingDefect,
    BindingDefectKind,
    CircularDependency,
    DeclarationRecord,
    DeclarationSnapshot,
    FindingCategory,
    Layer,
    LayerViolation,
    MissingDependency,
    ModuleDefect,
    ModuleDefectKind,
    PlacementViolation,
    ProviderDeclaration,
    ScanWarning,
    TypeCycle,
    TypeDeclaration,
)
from layercheck.domain.ports import (
    CheckerProtocol,
    DeclarationExtractorProtocol,
    ReporterProtocol,
)

__all__ = [
    # Exceptions
    "LayerCheckError",
    "ExtractionError",
    "RootNotFoundError",
    "ConfigError",
    "DuplicateUnitError",
    # Enums
    "Layer",
    "BindingDefectKind",
    "ModuleDefectKind",
    "FindingCategory",
    # Declarations
    "ProviderDeclaration",
    "BindingDeclaration",
    "TypeDeclaration",
    "DeclarationRecord",
    "DeclarationSnapshot",
    # Findings
    "ScanWarning",
    "LayerViolation",
    "CircularDependency",
    "TypeCycle",
    "MissingDependency",
    "BindingDefect",
    "ModuleDefect",
    "PlacementViolation",
    # Results / config
    "AnalysisResult",
    "AnalysisConfig",
    # Ports
    "CheckerProtocol",
    "DeclarationExtractorProtocol",
    "ReporterProtocol",
]
