"""One-call entry point: scan a source tree and run every enabled checker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from layercheck.application.services import ArchitectureAnalyzer, SnapshotScanner
from layercheck.domain.exceptions import RootNotFoundError
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.result import AnalysisResult
from layercheck.infrastructure.adapters import KotlinDeclarationExtractor

if TYPE_CHECKING:
    from layercheck.domain.ports.extractor import DeclarationExtractorProtocol
    from layercheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


def analyze(
    root: Path | str,
    config: AnalysisConfig | None = None,
    *,
    extractor: DeclarationExtractorProtocol | None = None,
    reporter: ReporterProtocol | None = None,
) -> AnalysisResult:
    """Scan a source tree and analyze it.

    A missing root is the only total failure: it yields a result with
    no findings and `error` set. Files that fail extraction are dropped
    and surface as warnings.

    Args:
        root: Directory to scan
        config: Analysis configuration (defaults if None)
        extractor: Declaration extractor (Kotlin extractor if None)
        reporter: Optional reporter

    Returns:
        AnalysisResult

    Example:
        result = analyze("app/src/main/java")
        for violation in result.layer_violations:
            print(violation.message)
    """
    config = config or AnalysisConfig()
    scanner = SnapshotScanner(extractor or KotlinDeclarationExtractor(), config)

    try:
        snapshot = scanner.scan(Path(root))
    except RootNotFoundError as e:
        logger.error("%s", e)
        result = AnalysisResult.failure(str(e))
        if reporter is not None:
            reporter.report(result)
        return result

    return ArchitectureAnalyzer.from_config(snapshot, config, reporter=reporter).analyze()
