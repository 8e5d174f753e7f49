"""Application services: scanning and analysis orchestration."""

from layercheck.application.services.analyzer import ArchitectureAnalyzer
from layercheck.application.services.scanner import SnapshotScanner, find_source_files

__all__ = [
    "ArchitectureAnalyzer",
    "SnapshotScanner",
    "find_source_files",
]
