"""Scanner service: source tree → DeclarationSnapshot.

Extraction is per file and independent, so files are extracted on a
thread pool. Records are merged into the snapshot in one
single-threaded reduction after all extractions complete.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING

from layercheck.domain.exceptions import ExtractionError, RootNotFoundError
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.findings import ScanWarning
from layercheck.domain.model.snapshot import DeclarationSnapshot

if TYPE_CHECKING:
    from layercheck.domain.model.declarations import DeclarationRecord
    from layercheck.domain.ports.extractor import DeclarationExtractorProtocol

logger = logging.getLogger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files a pool costs more than it saves
_PARALLEL_THRESHOLD = 10


def find_source_files(
    root: Path,
    suffixes: tuple[str, ...],
    exclude: frozenset[str],
) -> list[Path]:
    """Find all source files under root, excluding specified directories.

    Symlinked directories are not followed, so link loops cannot recurse.

    Returns:
        Paths sorted for deterministic extraction order
    """
    result: list[Path] = []

    for item in root.iterdir():
        if item.is_symlink() and item.is_dir():
            logger.debug("Not following symlinked directory %s", item)
        elif item.is_dir():
            if item.name not in exclude:
                result.extend(find_source_files(item, suffixes, exclude))
        elif item.is_file() and item.suffix in suffixes:
            result.append(item)

    return sorted(result)


class SnapshotScanner:
    """Walks a source tree and extracts one record per file.

    A file whose extraction raises ExtractionError is dropped and
    recorded as a ScanWarning. Nothing else is caught.

    Example:
        scanner = SnapshotScanner(KotlinDeclarationExtractor())
        snapshot = scanner.scan(Path("app/src/main/java"))
    """

    def __init__(
        self,
        extractor: DeclarationExtractorProtocol,
        config: AnalysisConfig | None = None,
    ) -> None:
        """Initialize with extractor and configuration.

        Args:
            extractor: Per-file declaration extractor
            config: Scanning options (suffixes, excluded dirs, workers)
        """
        self._extractor = extractor
        self._config = config or AnalysisConfig()
        self._max_workers = self._config.max_workers or _DEFAULT_WORKERS

    def scan(self, root: Path | str) -> DeclarationSnapshot:
        """Scan a source tree.

        Args:
            root: Directory to scan

        Returns:
            Snapshot of all extracted records plus warnings for dropped files

        Raises:
            RootNotFoundError: If root does not exist or is not a directory
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise RootNotFoundError(root_path)

        files = find_source_files(
            root_path,
            self._config.source_suffixes,
            self._config.excluded_dirs,
        )
        logger.info("Found %d source files under %s", len(files), root_path)

        outcomes = self._extract_all(files, root_path)

        # Single-threaded reduction
        records: list[DeclarationRecord] = []
        warnings: list[ScanWarning] = []
        for outcome in outcomes:
            if isinstance(outcome, ScanWarning):
                warnings.append(outcome)
            else:
                records.append(outcome)

        warnings.sort(key=lambda w: w.path)
        if warnings:
            logger.warning("Dropped %d of %d files", len(warnings), len(files))
        logger.info("Extracted %d source units", len(records))

        return DeclarationSnapshot.from_records(records, warnings, root=root_path)

    def _extract_all(
        self,
        files: list[Path],
        root: Path,
    ) -> list[DeclarationRecord | ScanWarning]:
        """Extract every file, sequentially or on a thread pool."""
        if not self._config.parallel or len(files) < _PARALLEL_THRESHOLD:
            return [self._extract_one(path, root) for path in files]

        outcomes: list[DeclarationRecord | ScanWarning] = []
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [executor.submit(self._extract_one, path, root) for path in files]
            for future in as_completed(futures):
                outcomes.append(future.result())
        return outcomes

    def _extract_one(self, path: Path, root: Path) -> DeclarationRecord | ScanWarning:
        """Extract one file, downgrading ExtractionError to a warning."""
        try:
            return self._extractor.extract(path, root)
        except ExtractionError as e:
            logger.warning("Skipping %s: %s", e.path, e.reason)
            return ScanWarning(path=e.path, reason=e.reason)
