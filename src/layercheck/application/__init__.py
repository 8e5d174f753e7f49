"""Application layer for architecture analysis.

Components:
- classification: Path/namespace → Layer
- graphs: File import graph, injectable type graph
- checkers: Structural checks (layers, cycles, completeness, bindings, placement)
- reporters: Output formatting (Console, JSON)
- services: Scanner and ArchitectureAnalyzer facade
"""

from layercheck.application.checkers import (
    BaseChecker,
    BindingChecker,
    CompletenessChecker,
    FileCycleChecker,
    LayerChecker,
    PlacementChecker,
    TypeCycleChecker,
    checkers_from_config,
    default_checkers,
)
from layercheck.application.classification import LayerClassifier, classify
from layercheck.application.graphs import FileGraph, TypeGraph
from layercheck.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
)
from layercheck.application.services import ArchitectureAnalyzer, SnapshotScanner

__all__ = [
    # Classification
    "LayerClassifier",
    "classify",
    # Graphs
    "FileGraph",
    "TypeGraph",
    # Checkers
    "BaseChecker",
    "LayerChecker",
    "FileCycleChecker",
    "TypeCycleChecker",
    "CompletenessChecker",
    "BindingChecker",
    "PlacementChecker",
    "default_checkers",
    "checkers_from_config",
    # Reporters
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    # Services
    "ArchitectureAnalyzer",
    "SnapshotScanner",
]
