"""Domain exceptions: all public errors of layercheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Findings (violations, cycles, defects) are data, never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LayerCheckError(Exception):
    """Base for all layercheck error exceptions.

    Allows: except LayerCheckError to catch all library errors.
    """


class ExtractionError(LayerCheckError):
    """Failed to extract declarations from one source file.

    Per-file failure: the scanner downgrades it to a ScanWarning
    and drops the file from all graphs.

    Attributes:
        path: File that failed.
        reason: Error description.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initialize with file path and error reason."""
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to extract {path}: {reason}")


class RootNotFoundError(LayerCheckError, FileNotFoundError):
    """Scan root does not exist or is not a directory.

    The only total failure: analysis yields no results.

    Attributes:
        root: Requested root path.
    """

    def __init__(self, root: Path | str) -> None:
        """Initialize with missing root."""
        self.root = str(root)
        super().__init__(f"Source root not found: {root}")


class ConfigError(LayerCheckError, ValueError):
    """Invalid configuration file or value.

    Attributes:
        reason: Why configuration is invalid.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class DuplicateUnitError(LayerCheckError, ValueError):
    """Two declaration records share a canonical path.

    Attributes:
        path: Duplicated path.
    """

    def __init__(self, path: str) -> None:
        """Initialize with duplicated path."""
        self.path = path
        super().__init__(f"duplicate source unit: {path}")
