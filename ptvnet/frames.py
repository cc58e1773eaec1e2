"""Tabular views of a built graph as pandas DataFrames.

Geometry is rendered as WKT so the frames can be written straight to CSV and
loaded into GIS tools.
"""

from __future__ import annotations

import pandas as pd

from ptvnet.graph.types import Graph
from ptvnet.graph.wkt import linestring_to_wkt, point_to_wkt

VERTEX_COLUMNS = ["id", "x", "y", "geom"]
EDGE_COLUMNS = [
    "id",
    "source",
    "target",
    "link_id",
    "lanes",
    "length",
    "free_flow_speed",
    "capacity",
    "geom",
]


def vertices_frame(graph: Graph) -> pd.DataFrame:
    """Return one row per vertex with columns ``id``, ``x``, ``y``, ``geom``."""
    rows = [
        (vertex.id, vertex.x, vertex.y, point_to_wkt(vertex.coord))
        for vertex in graph.vertices.values()
    ]
    return pd.DataFrame(rows, columns=VERTEX_COLUMNS)


def edges_frame(graph: Graph) -> pd.DataFrame:
    """Return one row per edge, ordered by edge id, with a WKT ``geom`` column."""
    rows = [
        (
            edge.id,
            edge.source,
            edge.target,
            edge.link_id,
            edge.lanes,
            edge.length,
            edge.free_flow_speed,
            edge.capacity,
            linestring_to_wkt(edge.geometry),
        )
        for edge in graph.iter_edges()
    ]
    return pd.DataFrame(rows, columns=EDGE_COLUMNS)
