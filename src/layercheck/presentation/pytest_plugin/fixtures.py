"""pytest fixtures for architecture testing.

User overrides layer_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from layercheck.application.services import ArchitectureAnalyzer, SnapshotScanner
from layercheck.domain.exceptions import RootNotFoundError
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.result import AnalysisResult
from layercheck.domain.model.snapshot import DeclarationSnapshot
from layercheck.infrastructure.adapters import KotlinDeclarationExtractor


def _source_root(config: pytest.Config) -> Path:
    """Configured source root, relative to the pytest rootdir."""
    root_dir = Path(str(config.rootpath))
    return root_dir / str(config.getini("layercheck_root") or "src")


@pytest.fixture(scope="session")
def layer_config() -> AnalysisConfig:
    """Default analysis configuration.

    User overrides this fixture in their conftest.py to provide
    custom configuration.

    Returns:
        AnalysisConfig (defaults only)
    """
    return AnalysisConfig()


@pytest.fixture(scope="session")
def layer_snapshot(
    request: pytest.FixtureRequest,
    layer_config: AnalysisConfig,
) -> DeclarationSnapshot:
    """Scan the configured source root.

    Raises:
        RootNotFoundError: If layercheck_root does not exist
    """
    source_path = _source_root(request.config)
    if not source_path.is_dir():
        raise RootNotFoundError(source_path)

    scanner = SnapshotScanner(KotlinDeclarationExtractor(), layer_config)
    return scanner.scan(source_path)


@pytest.fixture(scope="session")
def layer_result(
    layer_snapshot: DeclarationSnapshot,
    layer_config: AnalysisConfig,
) -> AnalysisResult:
    """Run every checker enabled by layer_config.

    Returns:
        AnalysisResult of the snapshot
    """
    return ArchitectureAnalyzer.from_config(layer_snapshot, layer_config).analyze()
