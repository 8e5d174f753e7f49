"""Kotlin declaration extractor.

Regex-based, line-oriented extraction of the declarations the checkers
need: package, imports, @Provides / @Binds module functions,
@Inject constructors, type headers with supertypes and annotations.

Works on symbol names only. No type resolution.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from layercheck.domain.exceptions import ExtractionError
from layercheck.domain.model.declarations import (
    BindingDeclaration,
    DeclarationRecord,
    ProviderDeclaration,
    TypeDeclaration,
)
from layercheck.domain.model.enums import ProviderKind, TypeKind

if TYPE_CHECKING:
    from pathlib import Path

# Strings are matched so that comment markers inside them survive
_COMMENTS = re.compile(r'("(?:\\.|[^"\\\n])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)

_PACKAGE = re.compile(r"^\s*package\s+([\w.]+)\s*;?\s*$", re.MULTILINE)
_IMPORT = re.compile(r"^\s*import\s+([\w.]+)(?:\.\*)?(?:\s+as\s+\w+)?\s*;?\s*$", re.MULTILINE)

# Type reference: qualified name, one level of nested type arguments, nullability
_TYPE = r"[\w.]+(?:<(?:[^<>]|<[^<>]*>)*>)?\??"
# Parenthesized list allowing one level of nested parentheses
_PARAMS = r"\((?P<params>(?:[^()]|\([^()]*\))*)\)"
_ANNOTATION = r"@[\w.]+(?:\([^()]*\))?"
_FUN_MODIFIERS = r"(?:(?:public|private|internal|protected|abstract|open|override)\s+)*"

_FUNCTION = rf"{_FUN_MODIFIERS}fun\s+(?P<name>\w+)\s*{_PARAMS}\s*:\s*(?P<type>{_TYPE})"

# Annotations may sit on either side of the marker annotation
_PROVIDES = re.compile(
    rf"(?P<before>(?:{_ANNOTATION}\s+)*)@Provides\s+(?P<after>(?:{_ANNOTATION}\s+)*){_FUNCTION}"
)
_BINDS = re.compile(rf"@Binds\s+(?:{_ANNOTATION}\s+)*{_FUNCTION}")
_PARAM = re.compile(rf"(\w+)\s*:\s*({_TYPE})")

_DECLARATION = re.compile(
    rf"(?P<annotations>(?:{_ANNOTATION}\s+)*)"
    r"(?P<modifiers>(?:(?:public|private|internal|protected|abstract|open|sealed|final|data|enum|"
    r"inner|annotation|value|fun|companion)\s+)*)"
    r"(?<!::)\b(?P<kind>class|interface|object)\s+(?P<name>\w+)"
)
_INSTALL_IN = re.compile(r"@(?:[\w.]+\.)?InstallIn\(\s*(?:value\s*=\s*)?\[?\s*([\w.]+)::class")
_CONSTRUCTOR = re.compile(
    rf"(?P<annotations>(?:{_ANNOTATION}\s*)*)(?:(?:public|private|internal|protected)\s+)?constructor\b"
)

_KINDS = {
    "class": TypeKind.CLASS,
    "interface": TypeKind.INTERFACE,
    "object": TypeKind.OBJECT,
}


class _Body(NamedTuple):
    """Brace-delimited body of a declared type: [start, end) in code."""

    name: str
    start: int
    end: int


def strip_comments(source: str) -> str:
    """Remove line and block comments, keeping string literals intact."""
    return _COMMENTS.sub(lambda m: m.group(1) or "", source)


def _clean_type(reference: str) -> str:
    """Drop nullability and surrounding whitespace from a type reference."""
    return reference.strip().rstrip("?")


def _annotation_names(text: str) -> frozenset[str]:
    """Annotation simple names without '@' ("@dagger.Module" → "Module")."""
    return frozenset(
        m.group(1).rsplit(".", 1)[-1] for m in re.finditer(r"@([\w.]+)", text)
    )


def _skip_balanced(text: str, pos: int, opening: str, closing: str) -> int:
    """Index just after the bracket group starting at pos."""
    depth = 0
    for index in range(pos, len(text)):
        char = text[index]
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return index + 1
    return len(text)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _split_top_level(text: str) -> list[str]:
    """Split on commas outside brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "(<":
            depth += 1
        elif char in ")>":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return [p.strip() for p in parts if p.strip()]


def _read_supertypes(text: str, pos: int) -> tuple[tuple[str, ...], int]:
    """Read a supertype list starting after ':' up to the body or end of header.

    Returns the supertypes and the index where the list ends.

    The list ends at '{', '=', a 'where' clause, or a line break that is
    neither preceded nor followed by a comma.
    """
    depth = 0
    end = pos
    while end < len(text):
        char = text[end]
        if char in "(<":
            depth += 1
        elif char in ")>":
            depth -= 1
        elif depth == 0 and char in "{=":
            break
        elif depth == 0 and char == "\n":
            before = text[pos:end].rstrip()
            after = text[end:].lstrip()
            if before and not before.endswith(",") and not after.startswith(","):
                break
        end += 1

    header = re.split(r"\bwhere\b", text[pos:end], maxsplit=1)[0]
    supertypes: list[str] = []
    for entry in _split_top_level(header):
        entry = re.split(r"\bby\b", entry, maxsplit=1)[0]
        entry = entry.split("(", 1)[0].split("<", 1)[0].strip()
        if entry:
            supertypes.append(entry.rsplit(".", 1)[-1])
    return tuple(supertypes), end


def _parse_types(
    code: str,
) -> tuple[tuple[TypeDeclaration, ...], tuple[ProviderDeclaration, ...], tuple[_Body, ...]]:
    """Type headers, the constructor providers of @Inject classes, and type bodies."""
    types: list[TypeDeclaration] = []
    providers: list[ProviderDeclaration] = []
    bodies: list[_Body] = []

    for match in _DECLARATION.finditer(code):
        name = match.group("name")
        pos = _skip_whitespace(code, match.end())

        if code.startswith("<", pos):
            pos = _skip_whitespace(code, _skip_balanced(code, pos, "<", ">"))

        injectable = False
        constructor = _CONSTRUCTOR.match(code, pos)
        if constructor is not None:
            injectable = "Inject" in _annotation_names(constructor.group("annotations"))
            pos = _skip_whitespace(code, constructor.end())

        params = ""
        if code.startswith("(", pos):
            close = _skip_balanced(code, pos, "(", ")")
            params = code[pos + 1 : close - 1]
            pos = close

        supertypes: tuple[str, ...] = ()
        colon = _skip_whitespace(code, pos)
        if code.startswith(":", colon):
            supertypes, pos = _read_supertypes(code, colon + 1)

        modifiers = match.group("modifiers").split()

        # Members of a companion object belong to the enclosing type
        brace = _skip_whitespace(code, pos)
        if code.startswith("{", brace) and "companion" not in modifiers:
            bodies.append(_Body(name, brace, _skip_balanced(code, brace, "{", "}")))

        annotations = match.group("annotations")
        install_in = _INSTALL_IN.search(annotations)
        types.append(
            TypeDeclaration(
                name=name,
                kind=_KINDS[match.group("kind")],
                supertypes=supertypes,
                annotations=_annotation_names(annotations),
                abstract="abstract" in modifiers,
                install_in=install_in.group(1).rsplit(".", 1)[-1] if install_in else None,
            )
        )
        if injectable:
            providers.append(
                ProviderDeclaration(
                    produces=name,
                    requires=tuple(_clean_type(t) for _, t in _PARAM.findall(params)),
                    kind=ProviderKind.CONSTRUCTOR,
                )
            )

    return tuple(types), tuple(providers), tuple(bodies)


def _owner_at(bodies: tuple[_Body, ...], pos: int) -> str | None:
    """Innermost declared type whose body contains pos."""
    owner: _Body | None = None
    for body in bodies:
        if body.start < pos < body.end and (owner is None or body.start > owner.start):
            owner = body
    return owner.name if owner is not None else None


class KotlinDeclarationExtractor:
    """Extracts a DeclarationRecord from one Kotlin source file.

    Stateless: safe to share between scanner threads.

    Example:
        extractor = KotlinDeclarationExtractor()
        record = extractor.extract(Path("app/src/di/AppModule.kt"), Path("app/src"))
    """

    suffixes: tuple[str, ...] = (".kt",)

    def extract(self, path: Path, root: Path) -> DeclarationRecord:
        """Read and extract one file.

        Args:
            path: Kotlin file
            root: Scan root (record path is relative to it)

        Returns:
            DeclarationRecord

        Raises:
            ExtractionError: File unreadable, not UTF-8, or outside root
        """
        try:
            relative = path.relative_to(root).as_posix()
        except ValueError as e:
            raise ExtractionError(path, f"not under scan root {root}") from e

        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ExtractionError(relative, f"not valid UTF-8: {e.reason}") from e
        except OSError as e:
            raise ExtractionError(relative, e.strerror or str(e)) from e

        return self.extract_source(relative, source)

    def extract_source(self, path: str, source: str) -> DeclarationRecord:
        """Extract declarations from source text.

        Args:
            path: Canonical path of the unit
            source: Kotlin source

        Returns:
            DeclarationRecord
        """
        code = strip_comments(source)

        package = _PACKAGE.search(code)
        imports = tuple(dict.fromkeys(m.group(1) for m in _IMPORT.finditer(code)))

        types, constructors, bodies = _parse_types(code)

        providers = [
            ProviderDeclaration(
                produces=_clean_type(m.group("type")),
                requires=tuple(_clean_type(t) for _, t in _PARAM.findall(m.group("params"))),
                name=m.group("name"),
                annotations=_annotation_names(m.group("before") + m.group("after")),
                owner=_owner_at(bodies, m.start()),
            )
            for m in _PROVIDES.finditer(code)
        ]

        bindings: list[BindingDeclaration] = []
        for m in _BINDS.finditer(code):
            params = _PARAM.findall(m.group("params"))
            if params:
                bindings.append(
                    BindingDeclaration(
                        interface=_clean_type(m.group("type")),
                        implementation=_clean_type(params[0][1]),
                        name=m.group("name"),
                        owner=_owner_at(bodies, m.start()),
                    )
                )

        return DeclarationRecord(
            path=path,
            namespace=package.group(1) if package else "",
            imports=imports,
            providers=tuple(providers) + constructors,
            bindings=tuple(bindings),
            types=types,
        )
