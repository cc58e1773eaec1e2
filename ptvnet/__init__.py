"""ptvnet: PTV Visum network reader and graph extraction.

Reads the semicolon-delimited, section-structured network format into typed
tables and derives a directed graph whose edges carry polyline geometry.

Primary API:
    read_network_file() - Parse a network file into NetworkData
    build_graph() - Extract vertices and geometric edges
    to_networkx() - Convert the graph to a NetworkX MultiDiGraph

Example:
    from ptvnet import build_graph, read_network_file

    network = read_network_file("example.net")
    graph = build_graph(network)
    for edge in graph.iter_edges():
        print(edge.id, edge.source, edge.target, edge.geometry)
"""

from __future__ import annotations

from ptvnet import cli, logging
from ptvnet._version import __version__
from ptvnet.graph.builder import (
    DanglingReferenceError,
    GeometryResolutionError,
    GraphBuildError,
    MalformedFieldError,
    MissingTableError,
    build_graph,
)
from ptvnet.graph.convert import to_networkx, to_node_link
from ptvnet.graph.types import Edge, Graph, Vertex
from ptvnet.io.reader import FormatError, read_network, read_network_file
from ptvnet.model.network import NetworkData
from ptvnet.units import parse_length_value, parse_speed_value

__all__ = [
    # Version
    "__version__",
    # Reading
    "read_network",
    "read_network_file",
    "NetworkData",
    "FormatError",
    # Graph
    "build_graph",
    "Graph",
    "Vertex",
    "Edge",
    "GraphBuildError",
    "MissingTableError",
    "DanglingReferenceError",
    "GeometryResolutionError",
    "MalformedFieldError",
    # Export
    "to_networkx",
    "to_node_link",
    # Units
    "parse_length_value",
    "parse_speed_value",
    # Utilities
    "cli",
    "logging",
]
