"""Network data model.

This package defines the typed tables read from a network file and the
`NetworkData` container consumed by the graph builder.
"""

from ptvnet.model.network import (
    IntermediatePoint,
    Link,
    LinkPolyPoint,
    NetworkData,
    Node,
    Point,
    Section,
    ShapeEdge,
    Version,
)

__all__ = [
    "NetworkData",
    "Section",
    "Version",
    "Node",
    "Link",
    "IntermediatePoint",
    "LinkPolyPoint",
    "Point",
    "ShapeEdge",
]
