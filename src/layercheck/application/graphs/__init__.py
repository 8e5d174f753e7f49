"""Graph builders over a DeclarationSnapshot."""

from layercheck.application.graphs.file_graph import FileGraph
from layercheck.application.graphs.type_graph import TypeGraph

__all__ = [
    "FileGraph",
    "TypeGraph",
]
