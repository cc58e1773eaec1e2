"""Vertex, Edge and Graph types produced by the graph builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

Coordinate = Tuple[float, float]
Geometry = List[Coordinate]


@dataclass(frozen=True)
class Vertex:
    """Graph vertex created from a network node.

    Attributes:
        id (int): Node number.
        x (float): X coordinate.
        y (float): Y coordinate.
    """

    id: int
    x: float
    y: float

    @property
    def coord(self) -> Coordinate:
        return (self.x, self.y)


@dataclass(frozen=True)
class Edge:
    """Directed graph edge created from one link record.

    Attributes:
        id (int): Sequential edge id (1..N in link order), not the link number.
        source (int): Source vertex id.
        target (int): Target vertex id.
        geometry (Geometry): Polyline from source to target, at least 2 points.
        link_id (int): Number of the originating link.
        lanes (int): Number of lanes.
        length (float): Length in meters.
        free_flow_speed (float): Free-flow speed in km/h.
        capacity (int): Capacity for private transport.
    """

    id: int
    source: int
    target: int
    geometry: Geometry
    link_id: int
    lanes: int = 0
    length: float = 0.0
    free_flow_speed: float = 0.0
    capacity: int = 0


@dataclass
class Graph:
    """Vertices and edges extracted from a network.

    Attributes:
        vertices (Dict[int, Vertex]): Mapping from node number to vertex.
        edges (Dict[int, Edge]): Mapping from edge id to edge, in build order.
    """

    vertices: Dict[int, Vertex] = field(default_factory=dict)
    edges: Dict[int, Edge] = field(default_factory=dict)

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over edges in ascending edge id order."""
        for edge_id in sorted(self.edges):
            yield self.edges[edge_id]

    def edges_between(self, source: int, target: int) -> List[Edge]:
        """Return all edges from ``source`` to ``target`` in id order."""
        return [
            edge
            for edge in self.iter_edges()
            if edge.source == source and edge.target == target
        ]
