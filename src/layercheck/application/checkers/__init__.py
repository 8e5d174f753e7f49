"""Structural checkers over a declaration snapshot.

Each checker fills one result collection:
- LayerChecker: disallowed cross-layer imports
- FileCycleChecker: import cycles between units
- TypeCycleChecker: cycles between injectable types
- CompletenessChecker: required types without provider
- BindingChecker: binding structure and naming convention
- ModuleChecker: module annotations and provider scopes
- PlacementChecker: types outside their conventional layer
"""

from layercheck.application.checkers._base import BaseChecker
from layercheck.application.checkers._registry import (
    checkers_from_config,
    default_checkers,
)
from layercheck.application.checkers.binding_checker import BindingChecker
from layercheck.application.checkers.completeness_checker import CompletenessChecker
from layercheck.application.checkers.file_cycle_checker import FileCycleChecker
from layercheck.application.checkers.layer_checker import LayerChecker
from layercheck.application.checkers.module_checker import ModuleChecker
from layercheck.application.checkers.placement_checker import PlacementChecker
from layercheck.application.checkers.type_cycle_checker import TypeCycleChecker

__all__ = [
    # Base
    "BaseChecker",
    # Checkers
    "LayerChecker",
    "FileCycleChecker",
    "TypeCycleChecker",
    "CompletenessChecker",
    "BindingChecker",
    "ModuleChecker",
    "PlacementChecker",
    # Factory functions
    "default_checkers",
    "checkers_from_config",
]
