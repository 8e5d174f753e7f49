"""Binding structure checker.

Validates each declared binding (interface → implementation) and
cross-checks the interface/implementation naming convention.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.classification.layers import LayerClassifier, normalize
from layercheck.domain.model.declarations import simple_name
from layercheck.domain.model.enums import BindingDefectKind, FindingCategory
from layercheck.domain.model.findings import BindingDefect

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig, BindingConvention
    from layercheck.domain.model.declarations import BindingDeclaration, DeclarationRecord
    from layercheck.domain.model.snapshot import DeclarationSnapshot


def _in_location(record: DeclarationRecord, location: str) -> bool:
    """Check if a unit lives under a dotted location fragment (path or namespace)."""
    fragment = "." + location + "."
    return fragment in normalize(record.path) + "." or (
        bool(record.namespace) and fragment in normalize(record.namespace) + "."
    )


class BindingChecker(BaseChecker):
    """Binding resolver.

    Per binding:
    - interface owner must be in the convention's interface layer
    - implementation owner must be in the convention's implementation layer
    - implementation must declare the interface as a supertype

    Naming cross-check over the convention locations:
    - interface without implementation unit → MISSING_IMPLEMENTATION
    - implementation never bound → MISSING_BINDING_REGISTRATION
    - implementation without interface unit → MISSING_INTERFACE
    """

    category = FindingCategory.BINDING_DEFECTS

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[BindingDefect, ...]:
        """Validate bindings and the naming convention.

        Args:
            snapshot: Read-only declarations
            config: Analysis configuration (layer rules, binding convention)

        Returns:
            Tuple of defects: per-binding defects first, then naming defects
        """
        classifier = LayerClassifier(config.layer_rules)
        convention = config.binding_convention
        defects: list[BindingDefect] = []

        for record in snapshot.records:
            for binding in record.bindings:
                defects.extend(self._check_binding(binding, snapshot, classifier, convention))

        defects.extend(self._check_naming(snapshot, convention))
        return tuple(defects)

    def _check_binding(
        self,
        binding: BindingDeclaration,
        snapshot: DeclarationSnapshot,
        classifier: LayerClassifier,
        convention: BindingConvention,
    ) -> list[BindingDefect]:
        interface = binding.interface
        implementation = binding.implementation
        defects: list[BindingDefect] = []

        interface_owners = snapshot.owners_of_type(interface)
        interface_layers = {classifier.classify_unit(snapshot.record(p)) for p in interface_owners}
        if convention.interface_layer not in interface_layers:
            found = (
                ", ".join(sorted(layer.label for layer in interface_layers))
                if interface_owners
                else "no declaring unit"
            )
            defects.append(
                BindingDefect(
                    interface=interface,
                    implementation=implementation,
                    kind=BindingDefectKind.INTERFACE_MISPLACED,
                    detail=(
                        f"Interface {interface} should be in "
                        f"{convention.interface_layer.label} layer (found: {found})"
                    ),
                    fix=f"Move {simple_name(interface)} to {convention.interface_location}",
                )
            )

        impl_owners = snapshot.owners_of_type(implementation)
        impl_layers = {classifier.classify_unit(snapshot.record(p)) for p in impl_owners}
        if convention.implementation_layer not in impl_layers:
            found = (
                ", ".join(sorted(layer.label for layer in impl_layers))
                if impl_owners
                else "no declaring unit"
            )
            defects.append(
                BindingDefect(
                    interface=interface,
                    implementation=implementation,
                    kind=BindingDefectKind.IMPLEMENTATION_MISPLACED,
                    detail=(
                        f"Implementation {implementation} should be in "
                        f"{convention.implementation_layer.label} layer (found: {found})"
                    ),
                    fix=(
                        f"Move {simple_name(implementation)} to "
                        f"{convention.implementation_location}"
                    ),
                )
            )

        if impl_owners:
            declared = [
                t
                for p in impl_owners
                if (t := snapshot.record(p).type_named(implementation)) is not None
            ]
            if not any(t.conforms_to(interface) for t in declared):
                defects.append(
                    BindingDefect(
                        interface=interface,
                        implementation=implementation,
                        kind=BindingDefectKind.NOT_IMPLEMENTING,
                        detail=f"{implementation} doesn't implement {interface}",
                        fix=(
                            f"Declare {simple_name(implementation)} : {simple_name(interface)}"
                        ),
                    )
                )

        return defects

    def _check_naming(
        self,
        snapshot: DeclarationSnapshot,
        convention: BindingConvention,
    ) -> list[BindingDefect]:
        suffix = convention.implementation_suffix
        interfaces = [
            r.stem
            for r in snapshot.records
            if _in_location(r, convention.interface_location) and not r.stem.endswith(suffix)
        ]
        implementations = [
            r.stem
            for r in snapshot.records
            if _in_location(r, convention.implementation_location) and r.stem.endswith(suffix)
        ]
        bound = {
            simple_name(binding.implementation)
            for record in snapshot.records
            for binding in record.bindings
        }
        defects: list[BindingDefect] = []

        implementation_set = set(implementations)
        for interface in interfaces:
            expected = convention.implementation_name(interface)
            if expected not in implementation_set:
                defects.append(
                    BindingDefect(
                        interface=interface,
                        implementation=None,
                        kind=BindingDefectKind.MISSING_IMPLEMENTATION,
                        detail=f"Interface {interface} has no corresponding implementation",
                        fix=f"Create implementation class {expected}",
                    )
                )

        interface_set = set(interfaces)
        for implementation in implementations:
            interface = convention.interface_name(implementation)
            if implementation not in bound:
                defects.append(
                    BindingDefect(
                        interface=interface,
                        implementation=implementation,
                        kind=BindingDefectKind.MISSING_BINDING_REGISTRATION,
                        detail=f"Implementation {implementation} has no binding",
                        fix=f"Add @Binds for {implementation} in a di module",
                    )
                )
            if interface not in interface_set:
                defects.append(
                    BindingDefect(
                        interface=interface,
                        implementation=implementation,
                        kind=BindingDefectKind.MISSING_INTERFACE,
                        detail=f"Implementation {implementation} has no interface {interface}",
                        fix=f"Create interface {interface} in {convention.interface_location}",
                    )
                )

        return defects
