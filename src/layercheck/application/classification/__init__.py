"""Layer classification of namespaces and paths."""

from layercheck.application.classification.layers import (
    LayerClassifier,
    classify,
    normalize,
)

__all__ = [
    "LayerClassifier",
    "classify",
    "normalize",
]
