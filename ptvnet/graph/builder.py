"""Extraction of a routable graph from parsed network tables.

:func:`build_graph` turns every node into a :class:`Vertex` and every link, in
file order, into a directed :class:`Edge` whose geometry comes from
:func:`ptvnet.graph.geometry.resolve_geometry`. Link order matters: the
direction processed first may receive a straight-line geometry that is later
replaced when the opposite direction carries a link polygon.

Any failure aborts the build; a partially built graph is never returned.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ptvnet.graph.geometry import resolve_geometry
from ptvnet.graph.types import Edge, Graph, Vertex
from ptvnet.logging import get_logger
from ptvnet.model.network import Link, NetworkData, NodePair
from ptvnet.units import parse_length_value, parse_speed_value

logger = get_logger(__name__)


class GraphBuildError(ValueError):
    """Base class for errors raised while building a graph."""


class MissingTableError(GraphBuildError):
    """A table required for graph construction is absent or empty."""

    def __init__(self, table: str) -> None:
        super().__init__(f"No {table} found in the network data")
        self.table = table


class DanglingReferenceError(GraphBuildError):
    """A link references a node that is not in the node table."""

    def __init__(self, link_id: int, node_id: int, role: str) -> None:
        super().__init__(f"{role} node {node_id} not found for link {link_id}")
        self.link_id = link_id
        self.node_id = node_id
        self.role = role


class GeometryResolutionError(GraphBuildError):
    """No geometry could be derived for a link."""

    def __init__(self, link_id: int) -> None:
        super().__init__(f"No geometry found for link {link_id}")
        self.link_id = link_id


class MalformedFieldError(GraphBuildError):
    """A numeric link field could not be parsed."""

    def __init__(self, link_id: int, field: str, value: str) -> None:
        super().__init__(f"Failed to parse {field} '{value}' for link {link_id}")
        self.link_id = link_id
        self.field = field
        self.value = value


def _parse_link_field(
    link: Link, field: str, value: str, parser: Callable[[str], float]
) -> float:
    try:
        return parser(value)
    except ValueError as exc:
        raise MalformedFieldError(link.no, field, value) from exc


def _lookup_vertex(
    vertices: Dict[int, Vertex], link: Link, node_id: int, role: str
) -> Vertex:
    vertex: Optional[Vertex] = vertices.get(node_id)
    if vertex is None:
        raise DanglingReferenceError(link.no, node_id, role)
    return vertex


def build_graph(network: NetworkData) -> Graph:
    """Build the graph of vertices and geometric edges for a parsed network.

    Args:
        network: Parsed network tables.

    Returns:
        Graph whose edge ids run from 1 to the number of links.

    Raises:
        MissingTableError: If the node or link table is empty.
        DanglingReferenceError: If a link references an unknown node.
        GeometryResolutionError: If no geometry could be resolved for a link.
        MalformedFieldError: If a link's length or speed cannot be parsed.
    """
    if not network.nodes:
        raise MissingTableError("nodes")
    if not network.links:
        raise MissingTableError("links")

    vertices: Dict[int, Vertex] = {
        node.no: Vertex(id=node.no, x=node.x, y=node.y) for node in network.nodes
    }

    edges: Dict[int, Edge] = {}
    pair_index: Dict[NodePair, int] = {}
    edge_id = 0

    for link in network.links:
        from_vertex = _lookup_vertex(vertices, link, link.from_node, "From")
        to_vertex = _lookup_vertex(vertices, link, link.to_node, "To")

        geometry = resolve_geometry(
            network, link, from_vertex, to_vertex, edges, pair_index
        )
        if geometry is None:
            raise GeometryResolutionError(link.no)

        length = _parse_link_field(link, "length", link.length, parse_length_value)
        speed = _parse_link_field(
            link, "free flow speed", link.v0_prt, parse_speed_value
        )

        edge_id += 1
        edges[edge_id] = Edge(
            id=edge_id,
            source=from_vertex.id,
            target=to_vertex.id,
            geometry=geometry,
            link_id=link.no,
            lanes=link.num_lanes,
            length=length,
            free_flow_speed=speed,
            capacity=link.cap_prt,
        )
        pair_index[(from_vertex.id, to_vertex.id)] = edge_id

    logger.info("Built graph with %d vertices and %d edges", len(vertices), len(edges))
    return Graph(vertices=vertices, edges=edges)
