"""Analyzer service: runs checkers over a snapshot.

ArchitectureAnalyzer is the primary entry point for one analysis pass.
Composition-based: accepts a snapshot, checkers and an optional reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self

from layercheck.application.checkers import checkers_from_config, default_checkers
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.enums import FindingCategory
from layercheck.domain.model.result import AnalysisResult, AnalysisStats

if TYPE_CHECKING:
    from layercheck.domain.model.findings import Finding
    from layercheck.domain.model.snapshot import DeclarationSnapshot
    from layercheck.domain.ports.checker import CheckerProtocol
    from layercheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

# FindingCategory → AnalysisResult field
_RESULT_FIELDS: dict[FindingCategory, str] = {
    FindingCategory.LAYER_VIOLATIONS: "layer_violations",
    FindingCategory.FILE_CYCLES: "circular_dependencies",
    FindingCategory.TYPE_CYCLES: "type_cycles",
    FindingCategory.MISSING_DEPENDENCIES: "missing_dependencies",
    FindingCategory.BINDING_DEFECTS: "binding_defects",
    FindingCategory.MODULES: "module_defects",
    FindingCategory.PLACEMENT: "placement_violations",
}


class ArchitectureAnalyzer:
    """Runs checkers against one DeclarationSnapshot.

    Checkers share nothing but the read-only snapshot, so they may run
    concurrently. Each builds its own graph.

    Factory methods:
    - with_defaults(): Checkers enabled by the default configuration
    - from_config(): Checkers enabled by an AnalysisConfig

    Example:
        snapshot = SnapshotScanner(extractor).scan(Path("app/src"))
        analyzer = ArchitectureAnalyzer.with_defaults(snapshot)
        result = analyzer.analyze()
        if not result.passed:
            print(f"Findings: {result.finding_count}")
    """

    def __init__(
        self,
        snapshot: DeclarationSnapshot,
        *,
        checkers: Sequence[CheckerProtocol] = (),
        config: AnalysisConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize analyzer with dependencies.

        Args:
            snapshot: Declarations of this run
            checkers: Checkers to run
            config: Analysis configuration (defaults if None)
            reporter: Optional reporter for output
        """
        self._snapshot = snapshot
        self._checkers = tuple(checkers)
        self._config = config or AnalysisConfig()
        self._reporter = reporter

    @classmethod
    def with_defaults(
        cls,
        snapshot: DeclarationSnapshot,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create analyzer with the default checkers and configuration."""
        return cls(snapshot, checkers=default_checkers(), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create analyzer with checkers enabled by config.

        Args:
            snapshot: Declarations of this run
            config: Analysis configuration
            reporter: Optional reporter

        Returns:
            ArchitectureAnalyzer with config-based checkers
        """
        return cls(
            snapshot,
            checkers=checkers_from_config(config),
            config=config,
            reporter=reporter,
        )

    def analyze(self) -> AnalysisResult:
        """Run all checkers and return the grouped result.

        Reports the result if a reporter is configured.

        Returns:
            AnalysisResult with findings, scan warnings and stats
        """
        start_time = time.perf_counter()

        findings = self._run_checkers()

        elapsed = time.perf_counter() - start_time
        grouped: dict[str, tuple[Finding, ...]] = {}
        for checker, found in zip(self._checkers, findings, strict=True):
            field = _RESULT_FIELDS[checker.category]
            grouped[field] = grouped.get(field, ()) + found

        result = AnalysisResult(
            **grouped,  # type: ignore[arg-type]
            warnings=self._snapshot.warnings,
            stats=self._build_stats(elapsed),
        )
        logger.info(
            "Analysis finished: %d findings in %.1f ms",
            result.finding_count,
            result.stats.analysis_time_ms,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _run_checkers(self) -> list[tuple[Finding, ...]]:
        """Run checkers, concurrently if configured. Order follows self._checkers."""
        if not self._config.parallel or len(self._checkers) < 2:
            return [self._run_one(checker) for checker in self._checkers]

        workers = min(len(self._checkers), self._config.max_workers or len(self._checkers))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._run_one, checker) for checker in self._checkers]
            return [future.result() for future in futures]

    def _run_one(self, checker: CheckerProtocol) -> tuple[Finding, ...]:
        start = time.perf_counter()
        found = checker.check(self._snapshot, self._config)
        logger.debug(
            "%s: %d findings in %.1f ms",
            type(checker).__name__,
            len(found),
            (time.perf_counter() - start) * 1000,
        )
        return found

    def _build_stats(self, analysis_time_s: float) -> AnalysisStats:
        records = self._snapshot.records
        return AnalysisStats(
            units_analyzed=self._snapshot.unit_count,
            units_dropped=len(self._snapshot.warnings),
            providers_analyzed=sum(len(r.providers) for r in records),
            bindings_analyzed=sum(len(r.bindings) for r in records),
            checkers_run=len(self._checkers),
            analysis_time_ms=analysis_time_s * 1000,
        )

    @property
    def checker_count(self) -> int:
        """Number of configured checkers."""
        return len(self._checkers)

