"""Typed tables of a parsed network file.

This module provides the record classes (Node, Link, IntermediatePoint,
LinkPolyPoint, Point, ShapeEdge, Version) and the NetworkData container that
the format reader fills and the graph builder consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

NodePair = Tuple[int, int]


@dataclass
class Version:
    """Contents of the ``$VERSION`` section.

    Attributes:
        version (str): File format version number (``VERSNR``).
        file_type (str): File type, e.g. ``"Net"``.
        language (str): Language of the attribute identifiers.
        unit (str): Unit of lengths, e.g. ``"KM"``.
    """

    version: str = ""
    file_type: str = ""
    language: str = ""
    unit: str = ""


@dataclass
class Node:
    """Represents a network node (typically an intersection).

    Attributes:
        no (int): Node number, unique within the file.
        x (float): X coordinate.
        y (float): Y coordinate.
        z (float): Elevation (0 when not given).
        code (str): Optional node code.
        name (str): Optional node name.
        type_no (int): Node type number.
    """

    no: int
    x: float
    y: float
    z: float = 0.0
    code: str = ""
    name: str = ""
    type_no: int = 0


@dataclass
class Link:
    """Represents one directed link as stored in the ``$LINK`` table.

    Length and speed are kept as raw strings with their unit suffix; the graph
    builder converts them with :mod:`ptvnet.units`.

    Attributes:
        no (int): Link number. Both directions of a road usually share it.
        from_node (int): Origin node number.
        to_node (int): Destination node number.
        length (str): Length with unit (e.g. ``"0.081km"``).
        v0_prt (str): Free-flow speed for private transport (e.g. ``"50km/h"``).
        num_lanes (int): Number of lanes.
        cap_prt (int): Capacity for private transport.
        name (str): Optional link name.
        type_no (int): Link type number.
        tsys_set (str): Comma-separated transport systems allowed on the link.
    """

    no: int
    from_node: int
    to_node: int
    length: str = ""
    v0_prt: str = ""
    num_lanes: int = 0
    cap_prt: int = 0
    name: str = ""
    type_no: int = 0
    tsys_set: str = ""


@dataclass
class IntermediatePoint:
    """Intermediate shape point of a link (``$EDGEITEM`` row).

    Attributes:
        edge_id (int): Number of the link this point belongs to.
        index (int): Sequence number along the link; only relative order matters.
        x (float): X coordinate.
        y (float): Y coordinate.
    """

    edge_id: int
    index: int
    x: float
    y: float


@dataclass
class LinkPolyPoint:
    """Point of a link polygon (``$LINKPOLY`` row), keyed by node pair.

    Attributes:
        from_node (int): Origin node number.
        to_node (int): Destination node number.
        index (int): Sequence number within the polygon.
        x (float): X coordinate.
        y (float): Y coordinate.
        z (float): Elevation.
    """

    from_node: int
    to_node: int
    index: int
    x: float
    y: float
    z: float = 0.0


@dataclass
class Point:
    """Geometric point primitive (``$POINT`` row)."""

    id: int
    x: float
    y: float


@dataclass
class ShapeEdge:
    """Edge primitive between two points (``$EDGE`` row)."""

    id: int
    from_point: int
    to_point: int


@dataclass
class Section:
    """Raw contents of one section as read from the file.

    Attributes:
        name (str): Section name without the leading ``$``.
        headers (List[str]): Declared column names (may be empty).
        rows (List[List[str]]): Data rows split into fields.
    """

    name: str
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class NetworkData:
    """Container for all tables read from a network file.

    Typed tables keep file order. Lookups used during graph construction are
    served from indexes built on first access.

    Attributes:
        version (Optional[Version]): Contents of ``$VERSION``, if present.
        nodes (List[Node]): ``$NODE`` records.
        links (List[Link]): ``$LINK`` records in file order.
        intermediate_points (List[IntermediatePoint]): ``$EDGEITEM`` records.
        link_poly_points (List[LinkPolyPoint]): ``$LINKPOLY`` records.
        points (List[Point]): ``$POINT`` records.
        shape_edges (List[ShapeEdge]): ``$EDGE`` records.
        sections (Dict[str, Section]): Every section in raw form, by name.
    """

    version: Optional[Version] = None
    nodes: List[Node] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    intermediate_points: List[IntermediatePoint] = field(default_factory=list)
    link_poly_points: List[LinkPolyPoint] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    shape_edges: List[ShapeEdge] = field(default_factory=list)
    sections: Dict[str, Section] = field(default_factory=dict)
    _items_by_edge: Optional[Dict[int, List[IntermediatePoint]]] = field(
        default=None, init=False, repr=False
    )
    _poly_by_pair: Optional[Dict[NodePair, List[LinkPolyPoint]]] = field(
        default=None, init=False, repr=False
    )

    def invalidate_indexes(self) -> None:
        """Drop lookup indexes; call after mutating the point tables."""
        self._items_by_edge = None
        self._poly_by_pair = None

    def get_intermediate_points(self, link_no: int) -> List[IntermediatePoint]:
        """Return intermediate points of a link sorted by sequence index.

        Duplicate indices keep their file order.

        Args:
            link_no: Link number the points are keyed by.

        Returns:
            Sorted list of points; empty if the link has none.
        """
        if self._items_by_edge is None:
            self._items_by_edge = _group_sorted(
                self.intermediate_points, lambda item: item.edge_id
            )
        return self._items_by_edge.get(link_no, [])

    def get_link_polygon(self, from_node: int, to_node: int) -> List[LinkPolyPoint]:
        """Return link polygon points for a directed node pair in sequence order.

        Args:
            from_node: Origin node number.
            to_node: Destination node number.

        Returns:
            Sorted list of polygon points; empty if the pair has none.
        """
        if self._poly_by_pair is None:
            self._poly_by_pair = _group_sorted(
                self.link_poly_points, lambda point: (point.from_node, point.to_node)
            )
        return self._poly_by_pair.get((from_node, to_node), [])

    def section_counts(self) -> Dict[str, int]:
        """Return the number of data rows per section, in file order."""
        return {name: len(section.rows) for name, section in self.sections.items()}


def _group_sorted(records, key_func) -> Dict:
    groups: Dict = {}
    for record in records:
        groups.setdefault(key_func(record), []).append(record)
    # sort() is stable, so duplicate indices keep file order
    for members in groups.values():
        members.sort(key=lambda record: record.index)
    return groups
