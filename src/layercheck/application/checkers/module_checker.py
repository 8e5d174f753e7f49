"""Dependency module checker.

Validates the declaration of each module (@Module, @InstallIn) and
that its members fit it: @Binds only in abstract modules, provider
scopes matching the installed component.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.domain.model.enums import FindingCategory, ModuleDefectKind, ProviderKind, TypeKind
from layercheck.domain.model.findings import ModuleDefect

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import AnalysisConfig
    from layercheck.domain.model.declarations import DeclarationRecord, TypeDeclaration
    from layercheck.domain.model.snapshot import DeclarationSnapshot


# Standard component → scope annotation of its providers
COMPONENT_SCOPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "SingletonComponent": "Singleton",
        "ViewModelComponent": "ViewModelScoped",
        "ActivityComponent": "ActivityScoped",
        "FragmentComponent": "FragmentScoped",
        "ServiceComponent": "ServiceScoped",
    }
)

_SCOPES = frozenset(COMPONENT_SCOPES.values())


def _modules(record: DeclarationRecord) -> list[TypeDeclaration]:
    """Types annotated @Module or owning a provider function or binding, in record order."""
    owners = {p.owner for p in record.providers if p.kind is ProviderKind.PROVIDES}
    owners.update(b.owner for b in record.bindings)
    return [t for t in record.types if "Module" in t.annotations or t.name in owners]


class ModuleChecker(BaseChecker):
    """Module declaration and scope checker.

    Per module:
    - @Module present → MISSING_MODULE_ANNOTATION
    - @InstallIn present → MISSING_INSTALL_IN
    - installed component is a standard one → UNKNOWN_COMPONENT
    - @Binds only in an abstract class or interface → BINDS_IN_CONCRETE_MODULE
    - each @Provides function carries the component's scope
      → MISSING_SCOPE / SCOPE_MISMATCH
    """

    category = FindingCategory.MODULES

    def check(
        self,
        snapshot: DeclarationSnapshot,
        config: AnalysisConfig,
    ) -> tuple[ModuleDefect, ...]:
        """Validate every module of the snapshot.

        Args:
            snapshot: Read-only declarations
            config: Analysis configuration (unused)

        Returns:
            Tuple of defects in record order, module defects before member defects
        """
        defects: list[ModuleDefect] = []

        for record in snapshot.records:
            for module in _modules(record):
                defects.extend(self._check_module(record, module))

        return tuple(defects)

    def _check_module(self, record: DeclarationRecord, module: TypeDeclaration) -> list[ModuleDefect]:
        defects: list[ModuleDefect] = []
        name = module.name

        def defect(kind: ModuleDefectKind, detail: str, fix: str, member: str | None = None) -> None:
            defects.append(
                ModuleDefect(
                    unit=record.path, module=name, kind=kind, detail=detail, fix=fix, member=member
                )
            )

        if "Module" not in module.annotations:
            defect(
                ModuleDefectKind.MISSING_MODULE_ANNOTATION,
                f"{name} declares providers or bindings but is missing @Module",
                f"Add @Module to {name}",
            )

        scope: str | None = None
        if "InstallIn" not in module.annotations:
            if "DisableInstallInCheck" not in module.annotations:
                defect(
                    ModuleDefectKind.MISSING_INSTALL_IN,
                    f"{name} is missing @InstallIn",
                    "Add @InstallIn with the component the module belongs to",
                )
        elif module.install_in not in COMPONENT_SCOPES:
            defect(
                ModuleDefectKind.UNKNOWN_COMPONENT,
                f"{name} is installed in unknown component {module.install_in or '?'}",
                f"Use one of: {', '.join(COMPONENT_SCOPES)}",
            )
        else:
            scope = COMPONENT_SCOPES[module.install_in]

        concrete = not module.abstract and module.kind is not TypeKind.INTERFACE
        for binding in record.bindings:
            if binding.owner == name and concrete:
                defect(
                    ModuleDefectKind.BINDS_IN_CONCRETE_MODULE,
                    f"@Binds function '{binding.name}' in non-abstract module {name}",
                    f"Make {name} abstract or use @Provides instead of @Binds",
                    member=binding.name,
                )

        if scope is None:
            return defects

        for provider in record.providers:
            if provider.owner != name or provider.kind is not ProviderKind.PROVIDES:
                continue
            declared = sorted(provider.annotations & _SCOPES)
            if not declared:
                defect(
                    ModuleDefectKind.MISSING_SCOPE,
                    f"Provider '{provider.name}' in {module.install_in} module {name} has no scope",
                    f"Add @{scope} to '{provider.name}'",
                    member=provider.name,
                )
            elif scope not in declared:
                defect(
                    ModuleDefectKind.SCOPE_MISMATCH,
                    f"Provider '{provider.name}' in {module.install_in} module {name} "
                    f"is scoped @{declared[0]}",
                    f"Use @{scope} for {module.install_in}",
                    member=provider.name,
                )

        return defects
