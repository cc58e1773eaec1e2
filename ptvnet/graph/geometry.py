"""Resolution of the polyline geometry of a directed link.

Network exports describe link shapes in more than one place, and often only
for one direction of a two-way road. :func:`resolve_geometry` picks the best
available source for one direction, in this order:

1. Intermediate points (``$EDGEITEM``) keyed by the link number.
2. The link polygon (``$LINKPOLY``) keyed by the directed node pair. When the
   opposite direction was already built as a straight line, its geometry is
   replaced by the reverse of the new polyline.
3. The reversed geometry of the already built opposite edge, when that edge is
   more than a straight line.
4. A straight line between the two vertices.

Edges built so far are passed in as an id-addressed table plus an index from
directed node pair to edge id, so the back-fill in step 2 is a plain indexed
replacement of the stored edge.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional, Sequence

from ptvnet.graph.types import Coordinate, Edge, Geometry, Vertex
from ptvnet.logging import get_logger
from ptvnet.model.network import Link, NetworkData, NodePair

logger = get_logger(__name__)


def reverse_geometry(geometry: Sequence[Coordinate]) -> Geometry:
    """Return a new polyline with the point order reversed.

    The input is left unchanged.
    """
    return [(x, y) for x, y in reversed(geometry)]


def _from_intermediate_points(
    network: NetworkData, link: Link, from_vertex: Vertex, to_vertex: Vertex
) -> Optional[Geometry]:
    items = network.get_intermediate_points(link.no)
    if not items:
        return None
    return [from_vertex.coord, *((item.x, item.y) for item in items), to_vertex.coord]


def _from_link_polygon(
    network: NetworkData, from_vertex: Vertex, to_vertex: Vertex
) -> Optional[Geometry]:
    points = network.get_link_polygon(from_vertex.id, to_vertex.id)
    if len(points) < 2:
        return None
    # Elevation is dropped
    return [from_vertex.coord, *((p.x, p.y) for p in points), to_vertex.coord]


def resolve_geometry(
    network: NetworkData,
    link: Link,
    from_vertex: Vertex,
    to_vertex: Vertex,
    edges: Dict[int, Edge],
    pair_index: Dict[NodePair, int],
) -> Optional[Geometry]:
    """Compute the polyline of one directed link.

    Args:
        network: Parsed network providing intermediate points and polygons.
        link: Link record being converted.
        from_vertex: Vertex of the link's origin node.
        to_vertex: Vertex of the link's destination node.
        edges: Edges built so far, by edge id. The opposite edge may be
            replaced in place with back-filled geometry.
        pair_index: Directed node pair -> id of the edge built for it.

    Returns:
        Polyline with at least two points, starting at ``from_vertex`` and
        ending at ``to_vertex``. ``None`` is only returned if no rule applies,
        which the straight-line fallback rules out.
    """
    geometry = _from_intermediate_points(network, link, from_vertex, to_vertex)
    if geometry is not None:
        return geometry

    reverse_id = pair_index.get((to_vertex.id, from_vertex.id))
    reverse_edge = edges.get(reverse_id) if reverse_id is not None else None

    geometry = _from_link_polygon(network, from_vertex, to_vertex)
    if geometry is not None:
        if reverse_edge is not None and len(reverse_edge.geometry) == 2:
            edges[reverse_edge.id] = replace(
                reverse_edge, geometry=reverse_geometry(geometry)
            )
            logger.debug(
                "Back-filled geometry of edge %d (link %d) from link polygon %d->%d",
                reverse_edge.id,
                reverse_edge.link_id,
                from_vertex.id,
                to_vertex.id,
            )
        return geometry

    if reverse_edge is not None and len(reverse_edge.geometry) > 2:
        return reverse_geometry(reverse_edge.geometry)

    return [from_vertex.coord, to_vertex.coord]
