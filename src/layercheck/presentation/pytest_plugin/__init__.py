"""pytest plugin for layercheck.

Provides fixtures for architecture testing:
    layer_config: Analysis configuration (override in conftest.py)
    layer_snapshot: Declaration snapshot of the configured source root
    layer_result: AnalysisResult of the snapshot

Configuration (pytest.ini or pyproject.toml):
    layercheck_root: Source root to analyze (default: "src")

Example:
    def test_no_layer_violations(layer_result):
        assert not layer_result.layer_violations
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from layercheck.presentation.pytest_plugin.fixtures import (
    layer_config,
    layer_result,
    layer_snapshot,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "layer_config",
    "layer_result",
    "layer_snapshot",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "layercheck_root",
        help="Source root analyzed by the layercheck fixtures (default: src)",
        default="src",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "layercheck: mark test as architecture test",
    )
