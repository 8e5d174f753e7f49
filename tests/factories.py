"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from layercheck.domain.model.declarations import (
    BindingDeclaration,
    DeclarationRecord,
    ProviderDeclaration,
    TypeDeclaration,
)
from layercheck.domain.model.enums import ProviderKind, TypeKind
from layercheck.domain.model.snapshot import DeclarationSnapshot

# Default source root prefix - consistent across all tests
SRC = "app/src/main/java/com/example/app"


def unit_path(relative: str) -> str:
    """Full unit path for a path relative to the app package.

    Example:
        unit_path("domain/repositories/FooRepository.kt")
        → "app/src/main/java/com/example/app/domain/repositories/FooRepository.kt"
    """
    return f"{SRC}/{relative}"


def namespace_of(relative: str) -> str:
    """Dotted namespace of a path relative to the app package."""
    directory = relative.rsplit("/", 1)[0] if "/" in relative else ""
    base = "com.example.app"
    return f"{base}.{directory.replace('/', '.')}" if directory else base


def make_record(
    relative: str,
    *,
    imports: tuple[str, ...] = (),
    providers: tuple[ProviderDeclaration, ...] = (),
    bindings: tuple[BindingDeclaration, ...] = (),
    types: tuple[TypeDeclaration, ...] | None = None,
    namespace: str | None = None,
) -> DeclarationRecord:
    """Create a DeclarationRecord for a unit under the app package.

    Args:
        relative: Path relative to the app package ("data/FooDao.kt")
        imports: Imported symbols
        providers: Provider declarations
        bindings: Binding declarations
        types: Declared types (default: one class named after the file)
        namespace: Namespace (default: derived from the path)

    Returns:
        DeclarationRecord instance
    """
    stem = relative.rsplit("/", 1)[-1].rsplit(".", 1)[0]
    return DeclarationRecord(
        path=unit_path(relative),
        namespace=namespace if namespace is not None else namespace_of(relative),
        imports=imports,
        providers=providers,
        bindings=bindings,
        types=types if types is not None else (TypeDeclaration(name=stem),),
    )


def symbol_of(relative: str) -> str:
    """Import symbol of the type named after a unit ("data/FooDao.kt" → "com.example.app.data.FooDao")."""
    stem = relative.rsplit("/", 1)[-1].rsplit(".", 1)[0]
    return f"{namespace_of(relative)}.{stem}"


def make_snapshot(*records: DeclarationRecord) -> DeclarationSnapshot:
    """Create a DeclarationSnapshot from records."""
    return DeclarationSnapshot.from_records(records)


def provides(
    produces: str,
    *requires: str,
    name: str | None = None,
    owner: str | None = None,
    annotations: frozenset[str] = frozenset(),
) -> ProviderDeclaration:
    """Create a @Provides-style provider declaration."""
    return ProviderDeclaration(
        produces=produces, requires=requires, name=name, annotations=annotations, owner=owner
    )


def injectable(produces: str, *requires: str) -> ProviderDeclaration:
    """Create an @Inject constructor provider declaration."""
    return ProviderDeclaration(produces=produces, requires=requires, kind=ProviderKind.CONSTRUCTOR)


def binds(
    interface: str,
    implementation: str,
    *,
    name: str | None = None,
    owner: str | None = None,
) -> BindingDeclaration:
    """Create a binding declaration."""
    return BindingDeclaration(
        interface=interface, implementation=implementation, name=name, owner=owner
    )


def interface(name: str) -> TypeDeclaration:
    """Create an interface type declaration."""
    return TypeDeclaration(name=name, kind=TypeKind.INTERFACE)


def klass(name: str, *supertypes: str, annotations: frozenset[str] = frozenset()) -> TypeDeclaration:
    """Create a class type declaration."""
    return TypeDeclaration(name=name, supertypes=supertypes, annotations=annotations)


def repository_scenario(*, implements: bool = True) -> DeclarationSnapshot:
    """FooRepository bound to FooRepositoryImpl in a di module.

    Args:
        implements: Whether FooRepositoryImpl declares FooRepository as supertype

    Returns:
        Snapshot with interface, implementation and module units
    """
    supertypes = ("FooRepository",) if implements else ()
    return make_snapshot(
        make_record(
            "domain/repositories/FooRepository.kt",
            types=(interface("FooRepository"),),
        ),
        make_record(
            "data/repositories/FooRepositoryImpl.kt",
            imports=(symbol_of("domain/repositories/FooRepository.kt"),),
            types=(klass("FooRepositoryImpl", *supertypes),),
        ),
        make_record(
            "di/RepositoryModule.kt",
            imports=(
                symbol_of("domain/repositories/FooRepository.kt"),
                symbol_of("data/repositories/FooRepositoryImpl.kt"),
            ),
            bindings=(binds("FooRepository", "FooRepositoryImpl"),),
            types=(klass("RepositoryModule", annotations=frozenset({"Module"})),),
        ),
    )


def module(
    name: str,
    *,
    install_in: str | None = "SingletonComponent",
    abstract: bool = False,
    kind: TypeKind = TypeKind.OBJECT,
    annotations: frozenset[str] | None = None,
) -> TypeDeclaration:
    """Create a dependency module declaration.

    Annotations default to @Module plus @InstallIn when install_in is set.
    """
    if annotations is None:
        annotations = frozenset({"Module", "InstallIn"} if install_in else {"Module"})
    return TypeDeclaration(
        name=name,
        kind=kind,
        annotations=annotations,
        abstract=abstract,
        install_in=install_in,
    )
