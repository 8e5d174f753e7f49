"""Layer pattern groups and the allowed-dependency matrix.

Static configuration of the layered architecture:
- DEFAULT_LAYER_RULES: ordered pattern groups, first match wins
- ALLOWED_DEPENDENCIES: source layer → layers it may reference
- suggestion_for: canned remediation per broken (source, target) pair
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType

from layercheck.domain.model.enums import Layer


@dataclass(frozen=True, slots=True)
class LayerRule:
    """One pattern group of the classifier.

    Fragments are dotted namespace suffixes ("domain.entities").
    A fragment matches when it appears after a dot and ends at a
    word boundary, so "data" matches ".data" and ".data.local" but
    not ".database".

    Attributes:
        layer: Layer assigned on match
        fragments: Dotted fragments, tried in order
    """

    layer: Layer
    fragments: tuple[str, ...]
    _patterns: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants and compile patterns. FAIL-FIRST."""
        if self.layer is Layer.UNKNOWN:
            raise ValueError("UNKNOWN is the fallback layer, it cannot have a rule")
        if not self.fragments:
            raise ValueError(f"rule for {self.layer.name} must have at least one fragment")
        for fragment in self.fragments:
            if not fragment or fragment.startswith(".") or fragment.endswith("."):
                raise ValueError(f"invalid fragment {fragment!r} for {self.layer.name}")

        patterns = tuple(
            re.compile(r"\." + re.escape(fragment) + r"\b") for fragment in self.fragments
        )
        object.__setattr__(self, "_patterns", patterns)

    def matches(self, normalized: str) -> bool:
        """Check if any fragment matches a normalized (dotted, dot-prefixed) string."""
        return any(p.search(normalized) for p in self._patterns)


DEFAULT_LAYER_RULES: tuple[LayerRule, ...] = (
    LayerRule(
        Layer.DOMAIN,
        (
            "domain.entities",
            "domain.repositories",
            "domain.usecases",
            "domain.common",
            "domain.exceptions",
        ),
    ),
    LayerRule(
        Layer.DATA,
        ("data.repositories", "data.mappers", "data", "network", "database"),
    ),
    LayerRule(Layer.PRESENTATION, ("presentation.viewmodels", "presentation")),
    LayerRule(Layer.UI, ("ui", "pages", "components", "screens")),
    LayerRule(Layer.CONFIGURATION, ("di",)),
)

_ALL_LAYERS = frozenset(Layer)

ALLOWED_DEPENDENCIES: MappingProxyType[Layer, frozenset[Layer]] = MappingProxyType(
    {
        Layer.DOMAIN: frozenset({Layer.DOMAIN}),
        Layer.DATA: frozenset({Layer.DOMAIN, Layer.DATA}),
        Layer.PRESENTATION: frozenset({Layer.DOMAIN, Layer.DATA, Layer.PRESENTATION}),
        Layer.UI: _ALL_LAYERS,
        Layer.CONFIGURATION: _ALL_LAYERS,
        Layer.UNKNOWN: _ALL_LAYERS,
    }
)


def is_allowed(source: Layer, target: Layer) -> bool:
    """Check if a unit in source layer may reference a symbol in target layer.

    UNKNOWN targets are external or unresolved and always allowed.
    """
    if target is Layer.UNKNOWN:
        return True
    return target in ALLOWED_DEPENDENCIES[source]


_SUGGESTIONS: MappingProxyType[tuple[Layer, Layer], str] = MappingProxyType(
    {
        (Layer.DOMAIN, Layer.DATA): (
            "Use dependency inversion: introduce an abstraction in domain "
            "and implement it in data before depending on it"
        ),
        (Layer.DOMAIN, Layer.PRESENTATION): (
            "Domain should not know about presentation. "
            "Move shared logic to domain entities or use cases"
        ),
        (Layer.DOMAIN, Layer.UI): (
            "Domain should not depend on UI. "
            "Use dependency inversion or move UI-specific logic to presentation"
        ),
        (Layer.DOMAIN, Layer.CONFIGURATION): (
            "Domain should not reference dependency wiring. "
            "Let the di modules depend on domain, not the reverse"
        ),
        (Layer.DATA, Layer.PRESENTATION): (
            "Data should not depend on presentation. "
            "Use dependency inversion or move the logic to domain"
        ),
        (Layer.DATA, Layer.UI): (
            "Data should not depend on UI. Move UI-specific logic to presentation"
        ),
        (Layer.DATA, Layer.CONFIGURATION): (
            "Data should not reference dependency wiring. Receive collaborators by injection"
        ),
        (Layer.PRESENTATION, Layer.UI): (
            "Consider if this dependency is necessary. "
            "ViewModels should be UI-agnostic when possible"
        ),
        (Layer.PRESENTATION, Layer.CONFIGURATION): (
            "ViewModels should receive dependencies by injection, not reach into di modules"
        ),
    }
)

_DEFAULT_SUGGESTION = "Review the dependency and consider architectural boundaries"


def suggestion_for(source: Layer, target: Layer) -> str:
    """Get remediation message for a broken (source, target) pair. Never empty."""
    return _SUGGESTIONS.get((source, target), _DEFAULT_SUGGESTION)
