"""Graph extraction from parsed networks.

This package provides the graph types (`types`), geometry resolution
(`geometry`), the graph builder (`builder`) and export helpers (`convert`,
`wkt`).
"""

from ptvnet.graph.builder import (
    DanglingReferenceError,
    GeometryResolutionError,
    GraphBuildError,
    MalformedFieldError,
    MissingTableError,
    build_graph,
)
from ptvnet.graph.geometry import resolve_geometry, reverse_geometry
from ptvnet.graph.types import Edge, Graph, Vertex

__all__ = [
    "build_graph",
    "resolve_geometry",
    "reverse_geometry",
    "Graph",
    "Vertex",
    "Edge",
    "GraphBuildError",
    "MissingTableError",
    "DanglingReferenceError",
    "GeometryResolutionError",
    "MalformedFieldError",
]
