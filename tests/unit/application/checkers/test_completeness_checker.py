"""Tests for checkers/completeness_checker.py."""

from layercheck.application.checkers.completeness_checker import CompletenessChecker
from layercheck.application.checkers.type_cycle_checker import TypeCycleChecker
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.enums import FindingCategory
from tests.factories import binds, injectable, make_record, make_snapshot, provides, unit_path


class TestCompletenessChecker:
    """Tests for CompletenessChecker."""

    def test_category(self) -> None:
        """Fills missing dependencies."""
        assert CompletenessChecker.category is FindingCategory.MISSING_DEPENDENCIES

    def test_missing_provider(self) -> None:
        """T requires unprovided U: one finding naming both."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("GetFoo", "FooRepository"),)),
        )

        missing = CompletenessChecker().check(snapshot, AnalysisConfig())

        assert len(missing) == 1
        assert missing[0].requiring_type == "GetFoo"
        assert missing[0].missing_type == "FooRepository"
        assert missing[0].declared_in == unit_path("di/AppModule.kt")
        assert missing[0].message == "GetFoo depends on FooRepository but no provider found"

    def test_builtin_requirement_ignored(self) -> None:
        """Builtin types never need a provider."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("Config", "String", "Int"),)),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_platform_requirements_ignored(self) -> None:
        """Framework and third-party types match the allowlist."""
        snapshot = make_snapshot(
            make_record(
                "di/NetworkModule.kt",
                providers=(
                    provides("FooApi", "Retrofit"),
                    provides("FooDao", "RoomDatabase"),
                    provides("Prefs", "Context"),
                ),
            ),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_custom_allowlist(self) -> None:
        """Only configured prefixes are exempt."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("Config", "String"),)),
        )
        config = AnalysisConfig(external_type_prefixes=("Int",))

        assert len(CompletenessChecker().check(snapshot, config)) == 1

    def test_provided_requirement(self) -> None:
        """A requirement with a provider is satisfied."""
        snapshot = make_snapshot(
            make_record(
                "di/AppModule.kt",
                providers=(provides("GetFoo", "FooRepository"), provides("FooRepository")),
            ),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_binding_provides_interface(self) -> None:
        """A bound interface counts as provided."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("GetFoo", "FooRepository"),)),
            make_record(
                "di/RepositoryModule.kt",
                bindings=(binds("FooRepository", "FooRepositoryImpl"),),
            ),
            make_record(
                "data/repositories/FooRepositoryImpl.kt",
                providers=(injectable("FooRepositoryImpl"),),
            ),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_unprovided_implementation(self) -> None:
        """A binding to an implementation nobody provides is incomplete."""
        snapshot = make_snapshot(
            make_record(
                "di/RepositoryModule.kt",
                bindings=(binds("FooRepository", "FooRepositoryImpl"),),
            ),
        )

        missing = CompletenessChecker().check(snapshot, AnalysisConfig())

        assert [(m.requiring_type, m.missing_type) for m in missing] == [
            ("FooRepository", "FooRepositoryImpl")
        ]

    def test_constructor_requirements_checked(self) -> None:
        """@Inject constructor parameters are requirements too."""
        snapshot = make_snapshot(
            make_record(
                "presentation/viewmodels/FooViewModel.kt",
                providers=(injectable("FooViewModel", "GetFoo"),),
            ),
        )

        missing = CompletenessChecker().check(snapshot, AnalysisConfig())

        assert [m.missing_type for m in missing] == ["GetFoo"]

    def test_idempotent(self) -> None:
        """Same snapshot, same findings."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("A", "B", "C"),)),
        )
        checker = CompletenessChecker()

        first = checker.check(snapshot, AnalysisConfig())

        assert first == checker.check(snapshot, AnalysisConfig())
        assert len(first) == 2

    def test_qualified_requirement_matches_provider(self) -> None:
        """A qualified reference is satisfied by the provider of its simple name."""
        snapshot = make_snapshot(
            make_record(
                "di/AppModule.kt",
                providers=(
                    provides("Api", "Repo", name="provideApi"),
                    provides("Repo", "com.example.data.Api", name="provideRepo"),
                ),
            ),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()
        cycles = TypeCycleChecker().check(snapshot, AnalysisConfig())
        assert [c.chain for c in cycles] == [("Api", "Repo", "Api")]

    def test_nullable_requirement_matches_provider(self) -> None:
        """A nullable reference is the same type."""
        snapshot = make_snapshot(
            make_record(
                "di/AppModule.kt",
                providers=(provides("GetFoo", "FooRepository?"), provides("FooRepository")),
            ),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_qualified_external_requirement_ignored(self) -> None:
        """The allowlist sees the qualified spelling of a requirement."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("Cache", "java.io.File"),)),
        )

        assert CompletenessChecker().check(snapshot, AnalysisConfig()) == ()

    def test_missing_type_reported_by_simple_name(self) -> None:
        """Findings name the unprovided type without its qualifier."""
        snapshot = make_snapshot(
            make_record(
                "di/AppModule.kt",
                providers=(provides("GetFoo", "com.example.domain.FooRepository"),),
            ),
        )

        missing = CompletenessChecker().check(snapshot, AnalysisConfig())

        assert [m.missing_type for m in missing] == ["FooRepository"]
