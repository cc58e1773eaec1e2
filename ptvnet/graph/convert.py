"""Conversion of a built :class:`Graph` to other graph representations.

`to_networkx` produces a ``networkx.MultiDiGraph`` keyed by vertex id with edge
keys equal to edge ids, so parallel links between the same node pair are kept.
`to_node_link` returns a dictionary suitable for direct JSON serialization.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import networkx as nx

from ptvnet.graph.types import Edge, Graph


def _edge_attrs(edge: Edge) -> Dict[str, Any]:
    attrs = asdict(edge)
    for key in ("id", "source", "target"):
        attrs.pop(key)
    attrs["geometry"] = [list(point) for point in edge.geometry]
    return attrs


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Convert a graph to a ``networkx.MultiDiGraph``.

    Nodes carry ``x`` and ``y`` attributes. Edges are keyed by edge id and
    carry ``geometry``, ``link_id``, ``lanes``, ``length``,
    ``free_flow_speed`` and ``capacity``.

    Args:
        graph: Graph to convert.

    Returns:
        A new MultiDiGraph.
    """
    nx_graph = nx.MultiDiGraph()
    for vertex in graph.vertices.values():
        nx_graph.add_node(vertex.id, x=vertex.x, y=vertex.y)
    for edge in graph.iter_edges():
        nx_graph.add_edge(edge.source, edge.target, key=edge.id, **_edge_attrs(edge))
    return nx_graph


def to_node_link(graph: Graph) -> Dict[str, Any]:
    """Return a node-link representation of the graph.

    Layout::

        {"graph": {},
         "nodes": [{"id": vertex_id, "attr": {"x": ..., "y": ...}}, ...],
         "links": [{"source": node_n, "target": node_n, "key": edge_id,
                    "attr": {...}}, ...]}

    ``source`` and ``target`` are positions in the ``nodes`` list.
    """
    node_map = {vertex_id: num for num, vertex_id in enumerate(graph.vertices)}

    return {
        "graph": {},
        "nodes": [
            {"id": vertex.id, "attr": {"x": vertex.x, "y": vertex.y}}
            for vertex in graph.vertices.values()
        ],
        "links": [
            {
                "source": node_map[edge.source],
                "target": node_map[edge.target],
                "key": edge.id,
                "attr": _edge_attrs(edge),
            }
            for edge in graph.iter_edges()
        ],
    }
