"""Extractor protocol: one source file → one declaration record.

The only seam between raw source text and the analysis core.
A real parser can replace the regex extractor without touching graphs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.declarations import DeclarationRecord


class DeclarationExtractorProtocol(Protocol):
    """Contract for declaration extractors.

    Implementations must be safe to call from several threads at once
    (the scanner extracts files in parallel).
    """

    suffixes: tuple[str, ...]
    """File suffixes this extractor understands (".kt")."""

    def extract(self, path: Path, root: Path) -> DeclarationRecord:
        """Extract declarations from one file.

        Args:
            path: File to read
            root: Scan root (record paths are relative to it)

        Returns:
            Declaration record of the file

        Raises:
            ExtractionError: If the file cannot be read or understood
        """
        ...
