"""Checker registry.

Central registry of all checkers with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.checkers.binding_checker import BindingChecker
from layercheck.application.checkers.completeness_checker import CompletenessChecker
from layercheck.application.checkers.file_cycle_checker import FileCycleChecker
from layercheck.application.checkers.layer_checker import LayerChecker
from layercheck.application.checkers.module_checker import ModuleChecker
from layercheck.application.checkers.placement_checker import PlacementChecker
from layercheck.application.checkers.type_cycle_checker import TypeCycleChecker
from layercheck.domain.model.configuration import AnalysisConfig

if TYPE_CHECKING:
    from layercheck.domain.ports.checker import CheckerProtocol


# Registry - tuple for immutability
# Order matters: results of sequential runs follow this order
_ALL_CHECKERS: tuple[type[BaseChecker], ...] = (
    LayerChecker,
    FileCycleChecker,
    TypeCycleChecker,
    CompletenessChecker,
    BindingChecker,
    ModuleChecker,
    PlacementChecker,  # If config.check_placement
)


def default_checkers() -> tuple[CheckerProtocol, ...]:
    """Instantiate checkers enabled by the default configuration.

    Returns:
        Tuple of checkers
    """
    return checkers_from_config(AnalysisConfig())


def checkers_from_config(config: AnalysisConfig) -> tuple[CheckerProtocol, ...]:
    """Instantiate checkers based on config.

    Checkers are created using their from_config() factory method.
    If from_config() returns None, the checker is disabled.

    Args:
        config: Analysis configuration

    Returns:
        Tuple of enabled checkers
    """
    checkers: list[CheckerProtocol] = []

    for checker_cls in _ALL_CHECKERS:
        checker = checker_cls.from_config(config)
        if checker is not None:
            checkers.append(checker)

    return tuple(checkers)
