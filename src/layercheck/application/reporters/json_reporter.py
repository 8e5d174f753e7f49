"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.findings import (
        BindingDefect,
        CircularDependency,
        LayerViolation,
        MissingDependency,
        ModuleDefect,
        PlacementViolation,
        TypeCycle,
    )
    from layercheck.domain.model.result import AnalysisResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs analysis results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: AnalysisResult) -> None:
        """Report analysis results as JSON.

        Args:
            result: Complete analysis result
        """
        data = self.to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def to_dict(self, result: AnalysisResult) -> dict[str, object]:
        """Convert AnalysisResult to JSON-serializable dict.

        Args:
            result: Analysis result to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "passed": result.passed,
            "error": result.error,
            "summary": {
                "finding_count": result.finding_count,
                "layer_violations": len(result.layer_violations),
                "circular_dependencies": len(result.circular_dependencies),
                "type_cycles": len(result.type_cycles),
                "missing_dependencies": len(result.missing_dependencies),
                "binding_defects": len(result.binding_defects),
                "module_defects": len(result.module_defects),
                "placement_violations": len(result.placement_violations),
                "warnings": len(result.warnings),
            },
            "layer_violations": [self._layer_violation(v) for v in result.layer_violations],
            "circular_dependencies": [self._circular(c) for c in result.circular_dependencies],
            "type_cycles": [self._type_cycle(c) for c in result.type_cycles],
            "missing_dependencies": [self._missing(m) for m in result.missing_dependencies],
            "binding_defects": [self._binding_defect(d) for d in result.binding_defects],
            "module_defects": [self._module_defect(d) for d in result.module_defects],
            "placement_violations": [self._placement(p) for p in result.placement_violations],
            "warnings": [{"path": w.path, "reason": w.reason} for w in result.warnings],
            "stats": {
                "units_analyzed": result.stats.units_analyzed,
                "units_dropped": result.stats.units_dropped,
                "providers_analyzed": result.stats.providers_analyzed,
                "bindings_analyzed": result.stats.bindings_analyzed,
                "checkers_run": result.stats.checkers_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _layer_violation(self, violation: LayerViolation) -> dict[str, object]:
        return {
            "unit": violation.unit,
            "symbol": violation.symbol,
            "source_layer": violation.source_layer.name,
            "referenced_layer": violation.referenced_layer.name,
            "message": violation.message,
            "suggestion": violation.suggestion,
        }

    def _circular(self, cycle: CircularDependency) -> dict[str, object]:
        return {"members": list(cycle.members), "description": cycle.description}

    def _type_cycle(self, cycle: TypeCycle) -> dict[str, object]:
        return {"chain": list(cycle.chain), "path": cycle.path}

    def _missing(self, missing: MissingDependency) -> dict[str, object]:
        return {
            "requiring_type": missing.requiring_type,
            "missing_type": missing.missing_type,
            "declared_in": missing.declared_in,
            "message": missing.message,
        }

    def _binding_defect(self, defect: BindingDefect) -> dict[str, object]:
        return {
            "interface": defect.interface,
            "implementation": defect.implementation,
            "kind": defect.kind.name,
            "detail": defect.detail,
            "fix": defect.fix,
        }

    def _module_defect(self, defect: ModuleDefect) -> dict[str, object]:
        return {
            "unit": defect.unit,
            "module": defect.module,
            "member": defect.member,
            "kind": defect.kind.name,
            "detail": defect.detail,
            "fix": defect.fix,
        }

    def _placement(self, violation: PlacementViolation) -> dict[str, object]:
        return {
            "unit": violation.unit,
            "type_name": violation.type_name,
            "expected_layer": violation.expected_layer.name,
            "actual_layer": violation.actual_layer.name,
            "message": violation.message,
            "suggestion": violation.suggestion,
        }
