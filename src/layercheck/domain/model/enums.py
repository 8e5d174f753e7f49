"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class Layer(Enum):
    """Architectural layer inferred from a namespace or path."""

    DOMAIN = auto()
    DATA = auto()
    PRESENTATION = auto()
    UI = auto()
    CONFIGURATION = auto()  # dependency wiring (di)
    UNKNOWN = auto()

    @property
    def label(self) -> str:
        """Lowercase name for messages."""
        return self.name.lower()


class ProviderKind(Enum):
    """How a provider declaration produces its type."""

    PROVIDES = auto()  # module provider function
    CONSTRUCTOR = auto()  # injectable constructor


class TypeKind(Enum):
    """Kind of declared type."""

    CLASS = auto()
    INTERFACE = auto()
    OBJECT = auto()


class BindingDefectKind(Enum):
    """Structural defect of a binding declaration."""

    INTERFACE_MISPLACED = auto()
    IMPLEMENTATION_MISPLACED = auto()
    NOT_IMPLEMENTING = auto()
    MISSING_IMPLEMENTATION = auto()
    MISSING_BINDING_REGISTRATION = auto()
    MISSING_INTERFACE = auto()


class ModuleDefectKind(Enum):
    """Defect of a dependency module declaration or its scopes."""

    MISSING_MODULE_ANNOTATION = auto()
    MISSING_INSTALL_IN = auto()
    UNKNOWN_COMPONENT = auto()
    BINDS_IN_CONCRETE_MODULE = auto()
    MISSING_SCOPE = auto()
    SCOPE_MISMATCH = auto()


class FindingCategory(Enum):
    """Result collection a checker contributes to.

    Each checker owns exactly one category; AnalysisResult
    exposes one tuple per category.
    """

    LAYER_VIOLATIONS = auto()
    FILE_CYCLES = auto()
    TYPE_CYCLES = auto()
    MISSING_DEPENDENCIES = auto()
    BINDING_DEFECTS = auto()
    MODULES = auto()
    PLACEMENT = auto()

    @property
    def key(self) -> str:
        """Config/CLI spelling: lowercase with dashes."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_key(cls, key: str) -> FindingCategory:
        """Parse config/CLI spelling.

        Raises:
            ValueError: If key names no category
        """
        normalized = key.strip().upper().replace("-", "_")
        try:
            return cls[normalized]
        except KeyError:
            valid = ", ".join(c.key for c in cls)
            raise ValueError(f"unknown check '{key}', expected one of: {valid}") from None
