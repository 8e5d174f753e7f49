"""Console reporter: AnalysisResult → rich formatted string."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.result import AnalysisResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Rendering width in columns
        max_items: Max findings shown per section. None = unlimited.
        show_suggestions: Show remediation text under each finding
        show_stats: Show the statistics footer
    """

    width: int = 120
    max_items: int | None = None
    show_suggestions: bool = True
    show_stats: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
        if self.max_items is not None and self.max_items < 1:
            raise ValueError(f"max_items must be >= 1, got {self.max_items}")


class ConsoleReporter(BaseReporter):
    """Console reporter: renders rich formatted text.

    render() returns str; report() writes it to the output stream.
    """

    def __init__(
        self,
        config: ConsoleConfig | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            output: Stream used by report() (default: sys.stdout)
        """
        self._config = config or ConsoleConfig()
        self._output = output if output is not None else sys.stdout

    def report(self, result: AnalysisResult) -> None:
        """Write the rendered result to the output stream."""
        self._output.write(self.render(result))

    def render(self, result: AnalysisResult) -> str:
        """Format analysis result as rich formatted string.

        Args:
            result: Analysis result to format

        Returns:
            Formatted string with colors and tables
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        if result.failed:
            console.print(f"[bold red]ERROR[/bold red] {escape(result.error or "")}")
            console.print()
            return output.getvalue()

        self._render_layer_violations(console, result)
        self._render_circular(console, result)
        self._render_type_cycles(console, result)
        self._render_missing(console, result)
        self._render_binding_defects(console, result)
        self._render_module_defects(console, result)
        self._render_placement(console, result)
        self._render_warnings(console, result)

        if self._config.show_stats:
            self._render_stats(console, result)

        return output.getvalue()

    def _limit[T](self, items: tuple[T, ...]) -> tuple[T, ...]:
        if self._config.max_items is None:
            return items
        return items[: self._config.max_items]

    def _render_more(self, console: Console, total: int) -> None:
        if self._config.max_items is not None and total > self._config.max_items:
            console.print(f"  [dim]... and {total - self._config.max_items} more[/dim]")

    def _section(self, console: Console, title: str, count: int) -> None:
        console.print(f"[bold]{title}[/bold] ({count})")
        console.print()

    def _render_header(self, console: Console, result: AnalysisResult) -> None:
        console.print()
        console.rule("[bold]ARCHITECTURE ANALYSIS[/bold]")
        console.print()

        if result.failed:
            status = "[bold red]FAILED[/bold red]"
        elif result.passed:
            status = "[bold green]PASSED[/bold green]"
        else:
            status = f"[bold yellow]{result.finding_count} findings[/bold yellow]"

        console.print(f"[bold]Status:[/bold] {status}")
        console.print()

    def _render_layer_violations(self, console: Console, result: AnalysisResult) -> None:
        violations = result.layer_violations
        if not violations:
            return

        self._section(console, "LAYER VIOLATIONS", len(violations))
        table = Table(show_header=True, header_style="bold")
        table.add_column("Unit")
        table.add_column("Import")
        table.add_column("Rule")
        for violation in self._limit(violations):
            source, target = violation.rule_broken
            table.add_row(
                escape(violation.unit),
                escape(violation.symbol),
                f"[red]{source.label} → {target.label}[/red]",
            )
        console.print(table)
        self._render_more(console, len(violations))

        if self._config.show_suggestions:
            for suggestion in dict.fromkeys(v.suggestion for v in self._limit(violations)):
                console.print(f"  [dim]hint:[/dim] {escape(suggestion)}")
        console.print()

    def _render_circular(self, console: Console, result: AnalysisResult) -> None:
        cycles = result.circular_dependencies
        if not cycles:
            return

        self._section(console, "CIRCULAR DEPENDENCIES", len(cycles))
        for cycle in self._limit(cycles):
            console.print(f"  [red]{escape(cycle.description)}[/red]")
        self._render_more(console, len(cycles))
        console.print()

    def _render_type_cycles(self, console: Console, result: AnalysisResult) -> None:
        cycles = result.type_cycles
        if not cycles:
            return

        self._section(console, "DEPENDENCY CYCLES", len(cycles))
        for cycle in self._limit(cycles):
            console.print(f"  [red]{escape(cycle.path)}[/red]")
        self._render_more(console, len(cycles))
        console.print()

    def _render_missing(self, console: Console, result: AnalysisResult) -> None:
        missing = result.missing_dependencies
        if not missing:
            return

        self._section(console, "MISSING DEPENDENCIES", len(missing))
        for item in self._limit(missing):
            console.print(f"  [yellow]{escape(item.message)}[/yellow]")
        self._render_more(console, len(missing))
        console.print()

    def _render_binding_defects(self, console: Console, result: AnalysisResult) -> None:
        defects = result.binding_defects
        if not defects:
            return

        self._section(console, "BINDING DEFECTS", len(defects))
        for defect in self._limit(defects):
            console.print(f"  [yellow]{defect.kind.name}[/yellow] {escape(defect.detail)}")
            if self._config.show_suggestions and defect.fix:
                console.print(f"    [dim]fix:[/dim] {escape(defect.fix)}")
        self._render_more(console, len(defects))
        console.print()

    def _render_module_defects(self, console: Console, result: AnalysisResult) -> None:
        defects = result.module_defects
        if not defects:
            return

        self._section(console, "MODULE DEFECTS", len(defects))
        for defect in self._limit(defects):
            unit = escape(defect.unit)
            console.print(f"  {unit}: [yellow]{defect.kind.name}[/yellow] {escape(defect.detail)}")
            if self._config.show_suggestions:
                console.print(f"    [dim]fix:[/dim] {escape(defect.fix)}")
        self._render_more(console, len(defects))
        console.print()

    def _render_placement(self, console: Console, result: AnalysisResult) -> None:
        violations = result.placement_violations
        if not violations:
            return

        self._section(console, "PLACEMENT", len(violations))
        for violation in self._limit(violations):
            unit = escape(violation.unit)
            console.print(f"  {unit}: [yellow]{escape(violation.message)}[/yellow]")
            if self._config.show_suggestions:
                console.print(f"    [dim]fix:[/dim] {escape(violation.suggestion)}")
        self._render_more(console, len(violations))
        console.print()

    def _render_warnings(self, console: Console, result: AnalysisResult) -> None:
        if not result.warnings:
            return

        self._section(console, "SKIPPED FILES", len(result.warnings))
        for warning in result.warnings:
            console.print(f"  [dim]{escape(str(warning))}[/dim]")
        console.print()

    def _render_stats(self, console: Console, result: AnalysisResult) -> None:
        stats = result.stats
        console.print(
            f"[dim]{stats.units_analyzed} units, {stats.providers_analyzed} providers, "
            f"{stats.bindings_analyzed} bindings, {stats.checkers_run} checkers "
            f"in {stats.analysis_time_ms:.1f} ms[/dim]"
        )
        console.print()
