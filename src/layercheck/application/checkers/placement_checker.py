"""Naming-convention placement checker.

Types whose name or annotation implies a layer must live in that layer:
- *RepositoryImpl → DATA
- *Repository → DOMAIN
- *UseCase → DOMAIN
- *ViewModel → PRESENTATION
- @Module / @Component → CONFIGURATION
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.classification.layers import LayerClassifier
from layercheck.domain.model.enums import FindingCategory, Layer
from layercheck.domain.model.findings import PlacementViolation

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.declarations import TypeDeclaration
    from layercheck.domain.model.snapshot import DeclarationSnapshot

# (name suffix, expected layer), first match wins
_NAME_RULES: tuple[tuple[str, Layer], ...] = (
    ("RepositoryImpl", Layer.DATA),
    ("Repository", Layer.DOMAIN),
    ("UseCase", Layer.DOMAIN),
    ("ViewModel", Layer.PRESENTATION),
)

_CONFIGURATION_ANNOTATIONS = frozenset({"Module", "Component"})

_SUGGESTIONS: dict[Layer, str] = {
    Layer.DATA: "Move to data.repositories package",
    Layer.DOMAIN: "Move to the domain package (repositories or usecases)",
    Layer.PRESENTATION: "Move to presentation.viewmodels package",
    Layer.CONFIGURATION: "Move to di package",
}


def expected_layer(declared: TypeDeclaration) -> Layer | None:
    """Layer a type belongs to by convention, None if no convention applies."""
    if declared.annotations & _CONFIGURATION_ANNOTATIONS:
        return Layer.CONFIGURATION
    for suffix, layer in _NAME_RULES:
        if declared.name.endswith(suffix):
            return layer
    return None


class PlacementChecker(BaseChecker):
    """Placement checker. Disabled by `check_placement = False`."""

    category = FindingCategory.PLACEMENT

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[PlacementViolation, ...]:
        """Report types declared outside their conventional layer."""
        classifier = LayerClassifier(config.layer_rules)
        violations: list[PlacementViolation] = []

        for record in snapshot.records:
            actual = classifier.classify_unit(record)
            for declared in record.types:
                expected = expected_layer(declared)
                if expected is None or expected is actual:
                    continue
                violations.append(
                    PlacementViolation(
                        unit=record.path,
                        type_name=declared.name,
                        expected_layer=expected,
                        actual_layer=actual,
                        suggestion=_SUGGESTIONS[expected],
                    )
                )

        return tuple(violations)
