"""Infrastructure adapters implementing domain ports."""

from layercheck.infrastructure.adapters.kotlin_extractor import KotlinDeclarationExtractor

__all__ = ["KotlinDeclarationExtractor"]
