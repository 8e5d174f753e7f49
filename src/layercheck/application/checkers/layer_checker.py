"""Layer violation checker.

Validates that units only reference symbols of layers the
dependency matrix allows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.classification.layers import LayerClassifier
from layercheck.domain.model.enums import FindingCategory, Layer
from layercheck.domain.model.findings import LayerViolation
from layercheck.domain.model.layer_rules import is_allowed, suggestion_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.snapshot import DeclarationSnapshot


def owner_layers(
    symbol: str,
    snapshot: DeclarationSnapshot,
    classifier: LayerClassifier,
    unit_layers: Mapping[str, Layer],
) -> tuple[Layer, ...]:
    """Layers owning an imported symbol.

    Resolution order:
    1. Units the symbol resolves to (base name, then declared type)
    2. Symbol string itself, when its package is a project namespace
    3. Nothing: external, treated as UNKNOWN

    Returns:
        Distinct owner layers in owner order (never empty)
    """
    owners = snapshot.resolve_import(symbol)
    if owners:
        return tuple(dict.fromkeys(unit_layers[path] for path in owners))
    if snapshot.is_project_symbol(symbol):
        return (classifier.classify(symbol),)
    return (Layer.UNKNOWN,)


class LayerChecker(BaseChecker):
    """Layer boundary checker.

    Each distinct imported symbol of a unit is checked once.
    A symbol owned by several units yields at most one violation:
    the first owner layer the matrix forbids.
    """

    category = FindingCategory.LAYER_VIOLATIONS

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[LayerViolation, ...]:
        """Check every import of every unit against the dependency matrix.

        Args:
            snapshot: Read-only declarations
            config: Analysis configuration (layer rules)

        Returns:
            Tuple of violations, ordered by unit then import order
        """
        classifier = LayerClassifier(config.layer_rules)
        unit_layers = {record.path: classifier.classify_unit(record) for record in snapshot.records}
        violations: list[LayerViolation] = []

        for record in snapshot.records:
            source = unit_layers[record.path]
            for symbol in dict.fromkeys(record.imports):
                layers = owner_layers(symbol, snapshot, classifier, unit_layers)
                target = next((layer for layer in layers if not is_allowed(source, layer)), None)
                if target is None:
                    continue
                violations.append(
                    LayerViolation(
                        unit=record.path,
                        symbol=symbol,
                        source_layer=source,
                        referenced_layer=target,
                        suggestion=suggestion_for(source, target),
                    )
                )

        return tuple(violations)
