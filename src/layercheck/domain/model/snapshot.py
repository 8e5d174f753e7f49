"""Declaration snapshot: immutable per-run input of all checkers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from layercheck.domain.exceptions import DuplicateUnitError
from layercheck.domain.model.declarations import simple_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from layercheck.domain.model.declarations import DeclarationRecord
    from layercheck.domain.model.findings import ScanWarning


@dataclass(frozen=True, slots=True)
class DeclarationSnapshot:
    """All declaration records of one run, plus the files that failed extraction.

    Built once per run, read concurrently by every checker.
    Records are kept sorted by path; the lookup indexes are built in
    __post_init__ and exposed read-only.

    Attributes:
        records: One record per source unit, sorted by path
        warnings: Files dropped during extraction
        root: Scanned root (None for synthetic snapshots)
    """

    records: tuple[DeclarationRecord, ...] = ()
    warnings: tuple[ScanWarning, ...] = ()
    root: Path | None = None
    _by_path: Mapping[str, DeclarationRecord] = field(init=False, repr=False, compare=False)
    _by_namespace: Mapping[str, tuple[str, ...]] = field(init=False, repr=False, compare=False)
    _by_type: Mapping[str, tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Sort records and build indexes. FAIL-FIRST on duplicate paths."""
        records = tuple(sorted(self.records, key=lambda r: r.path))
        object.__setattr__(self, "records", records)

        by_path: dict[str, DeclarationRecord] = {}
        by_namespace: dict[str, list[str]] = {}
        by_type: dict[str, list[str]] = {}

        for record in records:
            if record.path in by_path:
                raise DuplicateUnitError(record.path)
            by_path[record.path] = record
            by_namespace.setdefault(record.namespace, []).append(record.path)

            names = {record.stem} | {t.name for t in record.types}
            for name in names:
                by_type.setdefault(name, []).append(record.path)

        object.__setattr__(self, "_by_path", MappingProxyType(by_path))
        object.__setattr__(
            self,
            "_by_namespace",
            MappingProxyType({ns: tuple(paths) for ns, paths in by_namespace.items()}),
        )
        object.__setattr__(
            self,
            "_by_type",
            MappingProxyType({name: tuple(paths) for name, paths in by_type.items()}),
        )

    @property
    def paths(self) -> tuple[str, ...]:
        """All unit paths, sorted."""
        return tuple(self._by_path)

    @property
    def namespaces(self) -> frozenset[str]:
        """All declared namespaces (project namespaces)."""
        return frozenset(self._by_namespace)

    @property
    def unit_count(self) -> int:
        """Number of source units."""
        return len(self.records)

    def record(self, path: str) -> DeclarationRecord:
        """Get record by path.

        Raises:
            KeyError: If path is not in snapshot
        """
        return self._by_path[path]

    def has_unit(self, path: str) -> bool:
        """Check if path is a unit of this snapshot."""
        return path in self._by_path

    def files_in_namespace(self, namespace: str) -> tuple[str, ...]:
        """Get paths of units declaring this namespace (sorted)."""
        return self._by_namespace.get(namespace, ())

    def resolve_import(self, symbol: str) -> tuple[str, ...]:
        """Resolve an imported symbol to the units that own it.

        The namespace part selects candidate files; the trailing
        identifier must equal a file's base name. Files declaring a
        type with that name are used only when no base name matches.

        Returns:
            Owning unit paths (empty if external or unresolved)
        """
        namespace, _, name = symbol.rpartition(".")
        candidates = self.files_in_namespace(namespace)
        if not candidates or not name:
            return ()

        by_stem = tuple(p for p in candidates if self._by_path[p].stem == name)
        if by_stem:
            return by_stem
        return tuple(p for p in candidates if self._by_path[p].type_named(name) is not None)

    def is_project_symbol(self, symbol: str) -> bool:
        """Check if symbol, or its package, is a namespace of this snapshot."""
        if symbol in self._by_namespace:
            return True
        return symbol.rpartition(".")[0] in self._by_namespace

    def owners_of_type(self, name: str) -> tuple[str, ...]:
        """Get units that declare a type (or are named after it), by simple name."""
        return self._by_type.get(simple_name(name), ())

    @classmethod
    def from_records(
        cls,
        records: Iterable[DeclarationRecord],
        warnings: Iterable[ScanWarning] = (),
        root: Path | None = None,
    ) -> DeclarationSnapshot:
        """Build snapshot from any iterable of records."""
        return cls(records=tuple(records), warnings=tuple(warnings), root=root)

    @classmethod
    def empty(cls) -> DeclarationSnapshot:
        """Create snapshot with no units."""
        return cls()
