"""Infrastructure: source extraction, configuration files, logging."""

from layercheck.infrastructure.adapters import KotlinDeclarationExtractor
from layercheck.infrastructure.config_loader import build_config, load_config
from layercheck.infrastructure.logging_config import setup_logging

__all__ = [
    "KotlinDeclarationExtractor",
    "build_config",
    "load_config",
    "setup_logging",
]
