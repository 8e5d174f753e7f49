"""layercheck - layered-architecture and dependency-declaration checks for Kotlin sources."""

__version__ = "0.1.0"

from layercheck.application.services import ArchitectureAnalyzer, SnapshotScanner
from layercheck.domain.exceptions import (
    ConfigError,
    ExtractionError,
    LayerCheckError,
    RootNotFoundError,
)
from layercheck.domain.model import (
    AnalysisConfig,
    AnalysisResult,
    DeclarationRecord,
    DeclarationSnapshot,
    Layer,
)
from layercheck.infrastructure.config_loader import load_config
from layercheck.presentation.api import analyze

__all__ = [
    "__version__",
    # Entry points
    "analyze",
    "load_config",
    "ArchitectureAnalyzer",
    "SnapshotScanner",
    # Model
    "AnalysisConfig",
    "AnalysisResult",
    "DeclarationRecord",
    "DeclarationSnapshot",
    "Layer",
    # Errors
    "LayerCheckError",
    "ExtractionError",
    "RootNotFoundError",
    "ConfigError",
]
