"""Checker protocol for structural checks.

Checkers are stateless: they read a DeclarationSnapshot, build
whatever graph they need, and return findings of one category.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.enums import FindingCategory
    from layercheck.domain.model.findings import Finding
    from layercheck.domain.model.snapshot import DeclarationSnapshot


class CheckerProtocol(Protocol):
    """Contract for checkers.

    Key pattern: from_config() returns None if the checker is disabled.

    Example:
        class TodoChecker:
            category = FindingCategory.PLACEMENT

            def check(
                self,
                snapshot: DeclarationSnapshot,
                config: AnalysisConfig,
            ) -> tuple[Finding, ...]:
                return ()

            @classmethod
            def from_config(cls, config: AnalysisConfig) -> Self | None:
                return cls()
    """

    category: FindingCategory
    """Result collection this checker fills."""

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
            Findings (empty if none)
        """
        ...

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> Self | None:
        """Create checker from config, None if disabled."""
        ...
