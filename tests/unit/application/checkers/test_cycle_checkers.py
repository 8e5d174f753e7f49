"""Tests for checkers/file_cycle_checker.py and checkers/type_cycle_checker.py."""

import logging

import pytest

from layercheck.application.checkers.file_cycle_checker import FileCycleChecker
from layercheck.application.checkers.type_cycle_checker import TypeCycleChecker
from layercheck.domain.model.configuration import AnalysisConfig
from layercheck.domain.model.enums import FindingCategory
from tests.factories import make_record, make_snapshot, provides, repository_scenario, symbol_of


class TestFileCycleChecker:
    """Tests for FileCycleChecker."""

    def test_category(self) -> None:
        """Fills file cycles."""
        assert FileCycleChecker.category is FindingCategory.FILE_CYCLES

    def test_three_file_cycle(self) -> None:
        """A → B → C → A: one finding."""
        snapshot = make_snapshot(
            make_record("data/A.kt", imports=(symbol_of("data/B.kt"),)),
            make_record("data/B.kt", imports=(symbol_of("data/C.kt"),)),
            make_record("data/C.kt", imports=(symbol_of("data/A.kt"),)),
        )

        cycles = FileCycleChecker().check(snapshot, AnalysisConfig())

        assert len(cycles) == 1
        assert len(cycles[0].members) == 3

    def test_two_separate_cycles(self) -> None:
        """Disjoint components are reported separately."""
        snapshot = make_snapshot(
            make_record("data/A.kt", imports=(symbol_of("data/B.kt"),)),
            make_record("data/B.kt", imports=(symbol_of("data/A.kt"),)),
            make_record("ui/X.kt", imports=(symbol_of("ui/Y.kt"),)),
            make_record("ui/Y.kt", imports=(symbol_of("ui/X.kt"),)),
        )

        assert len(FileCycleChecker().check(snapshot, AnalysisConfig())) == 2

    def test_acyclic(self) -> None:
        """Valid layout: no cycles."""
        assert FileCycleChecker().check(repository_scenario(), AnalysisConfig()) == ()

    def test_graph_size_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Graph size is logged at DEBUG."""
        snapshot = make_snapshot(
            make_record("data/A.kt", imports=(symbol_of("data/B.kt"),)),
            make_record("data/B.kt"),
        )

        with caplog.at_level(logging.DEBUG, logger="layercheck"):
            FileCycleChecker().check(snapshot, AnalysisConfig())

        assert "File graph: 2 units, 1 import edges" in caplog.text


class TestTypeCycleChecker:
    """Tests for TypeCycleChecker."""

    def test_category(self) -> None:
        """Fills type cycles."""
        assert TypeCycleChecker.category is FindingCategory.TYPE_CYCLES

    def test_two_type_cycle(self) -> None:
        """T1 requires T2, T2 requires T1: chain closes on its start."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("T1", "T2"), provides("T2", "T1"))),
        )

        cycles = TypeCycleChecker().check(snapshot, AnalysisConfig())

        assert len(cycles) == 1
        assert cycles[0].chain[0] == cycles[0].chain[-1]
        assert cycles[0].message == "Circular dependency detected: T1 -> T2 -> T1"

    def test_cycle_across_units(self) -> None:
        """Providers in different modules form one graph."""
        snapshot = make_snapshot(
            make_record("di/AModule.kt", providers=(provides("A", "B"),)),
            make_record("di/BModule.kt", providers=(provides("B", "C"),)),
            make_record("di/CModule.kt", providers=(provides("C", "A"),)),
        )

        cycles = TypeCycleChecker().check(snapshot, AnalysisConfig())

        assert [c.chain for c in cycles] == [("A", "B", "C", "A")]

    def test_acyclic(self) -> None:
        """Chain of providers: nothing."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("A", "B"), provides("B"))),
        )

        assert TypeCycleChecker().check(snapshot, AnalysisConfig()) == ()

    def test_graph_size_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Graph size is logged at DEBUG."""
        snapshot = make_snapshot(
            make_record("di/AppModule.kt", providers=(provides("A", "B"), provides("B"))),
        )

        with caplog.at_level(logging.DEBUG, logger="layercheck"):
            TypeCycleChecker().check(snapshot, AnalysisConfig())

        assert "Type graph: 2 types, 1 requirement edges" in caplog.text
