"""Base checker class for structural checks.

Provides default implementation of CheckerProtocol.
Concrete checkers inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.enums import FindingCategory
    from layercheck.domain.model.findings import Finding
    from layercheck.domain.model.snapshot import DeclarationSnapshot


class BaseChecker(ABC):
    """Base class for checkers implementing CheckerProtocol.

    Concrete checkers must:
    1. Set `category` class attribute
    2. Implement `check()` method
    3. Optionally override `from_config()` for conditional activation

    Example:
        class MyChecker(BaseChecker):
            category = FindingCategory.PLACEMENT

            def check(
                self,
                snapshot: DeclarationSnapshot,
                config: AnalysisConfig,
            ) -> tuple[Finding, ...]:
                # ... check logic ...
                return tuple(findings)
    """

    category: FindingCategory
    """Result collection this checker fills."""

    @abstractmethod
    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[Finding, ...]:
        """Run the check and return findings.

        Args:
            snapshot: Read-only declarations of this run
            config: Analysis configuration

        Returns:
            Tuple of findings (empty if none)
        """

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> Self | None:
        """Create checker from config.

        Default: enabled unless the category is switched off in config.

        Args:
            config: Analysis configuration

        Returns:
            Checker instance if enabled, None if disabled
        """
        if not config.is_enabled(cls.category):
            return None
        return cls()
