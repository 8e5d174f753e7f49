"""Tests for checkers/module_checker.py."""

import pytest

from layercheck.application.checkers.module_checker import COMPONENT_SCOPES, ModuleChecker
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.enums import FindingCategory, ModuleDefectKind, TypeKind
from tests.factories import (
    binds,
    injectable,
    make_record,
    make_snapshot,
    module,
    provides,
    unit_path,
)

SINGLETON = frozenset({"Singleton"})


def _check(*records):
    return ModuleChecker().check(make_snapshot(*records), AnalysisConfig())


class TestModuleAnnotations:
    """@Module and @InstallIn on the module itself."""

    def test_category(self) -> None:
        """Fills module defects."""
        assert ModuleChecker.category is FindingCategory.MODULES

    def test_valid_module(self) -> None:
        """Annotated, installed, scoped: nothing."""
        defects = _check(
            make_record(
                "di/DatabaseModule.kt",
                providers=(
                    provides(
                        "AppDatabase",
                        name="provideDatabase",
                        owner="DatabaseModule",
                        annotations=SINGLETON,
                    ),
                ),
                types=(module("DatabaseModule"),),
            ),
        )

        assert defects == ()

    def test_missing_install_in(self) -> None:
        """@Module without @InstallIn: one module-level defect."""
        defects = _check(
            make_record(
                "di/AnalyticsModule.kt",
                providers=(provides("Tracker", name="provideTracker", owner="AnalyticsModule"),),
                types=(module("AnalyticsModule", install_in=None),),
            ),
        )

        assert len(defects) == 1
        defect = defects[0]
        assert defect.kind is ModuleDefectKind.MISSING_INSTALL_IN
        assert defect.unit == unit_path("di/AnalyticsModule.kt")
        assert defect.module == "AnalyticsModule"
        assert defect.member is None
        assert defect.detail == "AnalyticsModule is missing @InstallIn"

    def test_install_in_check_disabled(self) -> None:
        """@DisableInstallInCheck opts a module out of the @InstallIn requirement."""
        defects = _check(
            make_record(
                "di/TestModule.kt",
                types=(
                    module(
                        "TestModule",
                        install_in=None,
                        annotations=frozenset({"Module", "DisableInstallInCheck"}),
                    ),
                ),
            ),
        )

        assert defects == ()

    def test_missing_module_annotation(self) -> None:
        """A type owning provider functions must be a @Module."""
        defects = _check(
            make_record(
                "di/NetworkModule.kt",
                providers=(
                    provides("Api", name="provideApi", owner="NetworkModule", annotations=SINGLETON),
                ),
                types=(module("NetworkModule", annotations=frozenset({"InstallIn"})),),
            ),
        )

        assert [d.kind for d in defects] == [ModuleDefectKind.MISSING_MODULE_ANNOTATION]
        assert defects[0].fix == "Add @Module to NetworkModule"

    def test_missing_both_annotations(self) -> None:
        """Neither annotation: two defects, @Module first."""
        defects = _check(
            make_record(
                "di/NetworkModule.kt",
                providers=(provides("Api", name="provideApi", owner="NetworkModule"),),
                types=(module("NetworkModule", install_in=None, annotations=frozenset()),),
            ),
        )

        assert [d.kind for d in defects] == [
            ModuleDefectKind.MISSING_MODULE_ANNOTATION,
            ModuleDefectKind.MISSING_INSTALL_IN,
        ]

    def test_unknown_component(self) -> None:
        """Custom components are reported; their providers are not scope-checked."""
        defects = _check(
            make_record(
                "di/WorkerModule.kt",
                providers=(provides("Worker", name="provideWorker", owner="WorkerModule"),),
                types=(module("WorkerModule", install_in="WorkerComponent"),),
            ),
        )

        assert [d.kind for d in defects] == [ModuleDefectKind.UNKNOWN_COMPONENT]
        assert defects[0].detail == "WorkerModule is installed in unknown component WorkerComponent"

    def test_unreadable_component(self) -> None:
        """@InstallIn whose component could not be read counts as unknown."""
        defects = _check(
            make_record(
                "di/AppModule.kt",
                types=(
                    module(
                        "AppModule",
                        install_in=None,
                        annotations=frozenset({"Module", "InstallIn"}),
                    ),
                ),
            ),
        )

        assert [d.kind for d in defects] == [ModuleDefectKind.UNKNOWN_COMPONENT]
        assert "component ?" in defects[0].detail

    def test_plain_types_ignored(self) -> None:
        """Types neither annotated nor owning module functions are not modules."""
        defects = _check(
            make_record(
                "data/repositories/FooRepositoryImpl.kt",
                providers=(injectable("FooRepositoryImpl", "FooDao"),),
            ),
            make_record("di/AppModule.kt", providers=(provides("Clock", name="provideClock"),)),
        )

        assert defects == ()


class TestBindsPlacement:
    """@Binds requires an abstract module."""

    def test_binds_in_object(self) -> None:
        """@Binds in an object module is reported per binding."""
        defects = _check(
            make_record(
                "di/RepositoryModule.kt",
                bindings=(
                    binds(
                        "FooRepository", "FooRepositoryImpl", name="bindFoo", owner="RepositoryModule"
                    ),
                ),
                types=(module("RepositoryModule"),),
            ),
        )

        assert len(defects) == 1
        assert defects[0].kind is ModuleDefectKind.BINDS_IN_CONCRETE_MODULE
        assert defects[0].member == "bindFoo"
        assert defects[0].fix == "Make RepositoryModule abstract or use @Provides instead of @Binds"

    def test_binds_in_abstract_class(self) -> None:
        """Abstract class modules may declare bindings."""
        defects = _check(
            make_record(
                "di/RepositoryModule.kt",
                bindings=(binds("FooRepository", "FooRepositoryImpl", owner="RepositoryModule"),),
                types=(module("RepositoryModule", abstract=True, kind=TypeKind.CLASS),),
            ),
        )

        assert defects == ()

    def test_binds_in_interface(self) -> None:
        """Interface modules are abstract."""
        defects = _check(
            make_record(
                "di/RepositoryModule.kt",
                bindings=(binds("FooRepository", "FooRepositoryImpl", owner="RepositoryModule"),),
                types=(module("RepositoryModule", kind=TypeKind.INTERFACE),),
            ),
        )

        assert defects == ()

    def test_binds_checked_without_component(self) -> None:
        """Binding placement is checked even when @InstallIn is missing."""
        defects = _check(
            make_record(
                "di/RepositoryModule.kt",
                bindings=(
                    binds(
                        "FooRepository", "FooRepositoryImpl", name="bindFoo", owner="RepositoryModule"
                    ),
                ),
                types=(module("RepositoryModule", install_in=None, kind=TypeKind.CLASS),),
            ),
        )

        assert [d.kind for d in defects] == [
            ModuleDefectKind.MISSING_INSTALL_IN,
            ModuleDefectKind.BINDS_IN_CONCRETE_MODULE,
        ]


class TestProviderScopes:
    """Provider functions carry the scope of their component."""

    def test_singleton_provider_without_scope(self) -> None:
        """A SingletonComponent provider without @Singleton is reported."""
        defects = _check(
            make_record(
                "di/DatabaseModule.kt",
                providers=(
                    provides(
                        "AppDatabase",
                        name="provideDatabase",
                        owner="DatabaseModule",
                        annotations=SINGLETON,
                    ),
                    provides(
                        "FoodDao", "AppDatabase", name="provideFoodDao", owner="DatabaseModule"
                    ),
                ),
                types=(module("DatabaseModule"),),
            ),
        )

        assert len(defects) == 1
        defect = defects[0]
        assert defect.kind is ModuleDefectKind.MISSING_SCOPE
        assert defect.member == "provideFoodDao"
        assert defect.detail == (
            "Provider 'provideFoodDao' in SingletonComponent module DatabaseModule has no scope"
        )
        assert defect.fix == "Add @Singleton to 'provideFoodDao'"

    def test_scope_mismatch(self) -> None:
        """A ViewModelComponent provider scoped @Singleton is a mismatch."""
        defects = _check(
            make_record(
                "di/ViewModelModule.kt",
                providers=(
                    provides(
                        "Formatter",
                        name="provideFormatter",
                        owner="ViewModelModule",
                        annotations=SINGLETON,
                    ),
                ),
                types=(module("ViewModelModule", install_in="ViewModelComponent"),),
            ),
        )

        assert [d.kind for d in defects] == [ModuleDefectKind.SCOPE_MISMATCH]
        assert defects[0].fix == "Use @ViewModelScoped for ViewModelComponent"

    def test_unrelated_annotations_are_not_scopes(self) -> None:
        """Qualifiers do not count as a scope."""
        defects = _check(
            make_record(
                "di/DispatcherModule.kt",
                providers=(
                    provides(
                        "Dispatcher",
                        name="provideIo",
                        owner="DispatcherModule",
                        annotations=frozenset({"Named"}),
                    ),
                ),
                types=(module("DispatcherModule"),),
            ),
        )

        assert [d.kind for d in defects] == [ModuleDefectKind.MISSING_SCOPE]

    @pytest.mark.parametrize(("component", "scope"), sorted(COMPONENT_SCOPES.items()))
    def test_component_scopes(self, component: str, scope: str) -> None:
        """Each standard component accepts exactly its own scope."""
        record = make_record(
            "di/AppModule.kt",
            providers=(
                provides("Foo", name="provideFoo", owner="AppModule", annotations=frozenset({scope})),
            ),
            types=(module("AppModule", install_in=component),),
        )

        assert _check(record) == ()

    def test_only_owned_providers_checked(self) -> None:
        """Providers of other types in the same unit are not this module's members."""
        defects = _check(
            make_record(
                "di/AppModule.kt",
                providers=(
                    provides("Clock", name="provideClock", owner="AppModule", annotations=SINGLETON),
                    provides("Helper", name="provideHelper", owner="Helpers"),
                    injectable("AppModuleHelper"),
                ),
                types=(module("AppModule"),),
            ),
        )

        assert defects == ()

    def test_order_and_idempotent(self) -> None:
        """Records by path, module defects before member defects; same input, same output."""
        snapshot = make_snapshot(
            make_record(
                "di/BModule.kt",
                providers=(provides("B", name="provideB", owner="BModule"),),
                types=(module("BModule"),),
            ),
            make_record(
                "di/AModule.kt",
                providers=(provides("A", name="provideA", owner="AModule"),),
                types=(module("AModule", install_in=None),),
            ),
        )
        checker = ModuleChecker()

        first = checker.check(snapshot, AnalysisConfig())

        assert [(d.module, d.kind) for d in first] == [
            ("AModule", ModuleDefectKind.MISSING_INSTALL_IN),
            ("BModule", ModuleDefectKind.MISSING_SCOPE),
        ]
        assert first == checker.check(snapshot, AnalysisConfig())
