"""Domain ports: contracts implemented by adapters and users."""

from layercheck.domain.ports.checker import CheckerProtocol
from layercheck.domain.ports.extractor import DeclarationExtractorProtocol
from layercheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CheckerProtocol",
    "DeclarationExtractorProtocol",
    "ReporterProtocol",
]
