"""Layer classifier: namespace or path → Layer.

Pure, total and deterministic. Never raises for string input.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import Layer
from layercheck.domain.model.layer_rules import DEFAULT_LAYER_RULES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layercheck.domain.model.declarations import DeclarationRecord
    from layercheck.domain.model.layer_rules import LayerRule

_SEPARATORS = re.compile(r"[\\/]+")


def normalize(path_or_namespace: str) -> str:
    """Normalize a path or namespace to a dot-prefixed dotted string.

    Path separators become dots and a file suffix is dropped,
    so a path and its namespace classify the same way.

    Examples:
        "app/src/com/x/data/FooDao.kt" → ".app.src.com.x.data.FooDao"
        "com.x.domain.usecases" → ".com.x.domain.usecases"
    """
    text = path_or_namespace.strip()
    if "/" in text or "\\" in text:
        parts = [p for p in _SEPARATORS.split(text) if p and p != "."]
        if parts and "." in parts[-1]:
            parts[-1] = parts[-1].rsplit(".", 1)[0]
        text = ".".join(parts)
    return "." + text.strip(".")


class LayerClassifier:
    """Classifier over an ordered tuple of layer rules (first match wins)."""

    def __init__(self, rules: Sequence[LayerRule] = DEFAULT_LAYER_RULES) -> None:
        """Initialize with rules.

        Args:
            rules: Ordered pattern groups

        Raises:
            ValueError: If rules is empty (FAIL-FIRST)
        """
        if not rules:
            raise ValueError("rules must not be empty")
        self._rules = tuple(rules)

    def classify(self, path_or_namespace: str) -> Layer:
        """Map a path or namespace to its layer. UNKNOWN if nothing matches."""
        normalized = normalize(path_or_namespace)
        for rule in self._rules:
            if rule.matches(normalized):
                return rule.layer
        return Layer.UNKNOWN

    def classify_unit(self, record: DeclarationRecord) -> Layer:
        """Layer of a source unit: by path, else by namespace."""
        layer = self.classify(record.path)
        if layer is Layer.UNKNOWN and record.namespace:
            layer = self.classify(record.namespace)
        return layer


_DEFAULT = LayerClassifier()


def classify(path_or_namespace: str) -> Layer:
    """Classify with the default layer rules."""
    return _DEFAULT.classify(path_or_namespace)
