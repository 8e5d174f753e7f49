"""Declaration records: the narrow interface between extraction and analysis.

An extractor turns one source file into one DeclarationRecord.
Everything downstream works on these records, never on source text.
"""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.enums import ProviderKind, TypeKind


def simple_name(symbol: str) -> str:
    """Strip qualifier, type arguments and nullability from a type reference.

    Examples:
        "com.app.domain.FooRepository" → "FooRepository"
        "List<Food>" → "List"
        "Foo?" → "Foo"
    """
    name = symbol.strip()
    generic = name.find("<")
    if generic != -1:
        name = name[:generic]
    name = name.rstrip("?").strip()
    return name.rsplit(".", 1)[-1]


@dataclass(frozen=True, slots=True)
class ProviderDeclaration:
    """Declaration that produces a type from required types.

    Attributes:
        produces: Produced type symbol
        requires: Required type symbols, in declaration order
        kind: Module provider function or injectable constructor
        name: Provider function name (None for constructors)
        annotations: Annotation names of the provider function without '@'
        owner: Enclosing type of a provider function (None if unknown)
    """

    produces: str
    requires: tuple[str, ...] = ()
    kind: ProviderKind = ProviderKind.PROVIDES
    name: str | None = None
    annotations: frozenset[str] = frozenset()
    owner: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.produces:
            raise ValueError("produces must not be empty")
        if any(not r for r in self.requires):
            raise ValueError(f"requires of '{self.produces}' contains empty symbol")


@dataclass(frozen=True, slots=True)
class BindingDeclaration:
    """Declared mapping from an abstract interface to an implementation.

    Attributes:
        interface: Interface type symbol
        implementation: Implementation type symbol
        name: Binding function name
        owner: Enclosing module type (None if unknown)
    """

    interface: str
    implementation: str
    name: str | None = None
    owner: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.interface:
            raise ValueError("interface must not be empty")
        if not self.implementation:
            raise ValueError("implementation must not be empty")


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """Type declared in a source unit.

    Supertypes are the structural conformance markers checked by
    the binding resolver.

    Attributes:
        name: Declared type name
        kind: class / interface / object
        supertypes: Simple names of declared supertypes
        annotations: Annotation names without '@' (e.g. "Module")
        abstract: Declared with the abstract modifier
        install_in: Component named by @InstallIn (simple name, None if absent)
    """

    name: str
    kind: TypeKind = TypeKind.CLASS
    supertypes: tuple[str, ...] = ()
    annotations: frozenset[str] = frozenset()
    abstract: bool = False
    install_in: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    def conforms_to(self, interface: str) -> bool:
        """Check if this type declares conformance to interface (simple names)."""
        target = simple_name(interface)
        return any(simple_name(s) == target for s in self.supertypes)


@dataclass(frozen=True, slots=True)
class DeclarationRecord:
    """Everything extracted from one source unit.

    Attributes:
        path: Canonical path (identity)
        namespace: Declared package/namespace ("" if none)
        imports: Imported symbols, in source order
        providers: Provider declarations
        bindings: Binding declarations
        types: Declared types
    """

    path: str
    namespace: str = ""
    imports: tuple[str, ...] = ()
    providers: tuple[ProviderDeclaration, ...] = ()
    bindings: tuple[BindingDeclaration, ...] = ()
    types: tuple[TypeDeclaration, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")

    @property
    def stem(self) -> str:
        """File base name without directory and suffix."""
        name = self.path.replace("\\", "/").rsplit("/", 1)[-1]
        return name.rsplit(".", 1)[0] if "." in name else name

    def type_named(self, name: str) -> TypeDeclaration | None:
        """Get declared type by simple name."""
        target = simple_name(name)
        for declared in self.types:
            if declared.name == target:
                return declared
        return None
