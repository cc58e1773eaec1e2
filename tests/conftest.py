"""Shared fixtures for ptvnet tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

import pytest

from ptvnet.model.network import (
    IntermediatePoint,
    Link,
    LinkPolyPoint,
    NetworkData,
    Node,
)

SAMPLE_DATA = Path(__file__).parent / "sample_data"


def make_network(
    nodes: Iterable[Tuple[int, float, float]],
    links: Iterable[Tuple[int, int, int]],
    items: Optional[Iterable[Tuple[int, int, float, float]]] = None,
    polys: Optional[Iterable[Tuple[int, int, int, float, float, float]]] = None,
) -> NetworkData:
    """Build NetworkData from plain tuples.

    nodes: (no, x, y); links: (no, from, to); items: (edge_id, index, x, y);
    polys: (from, to, index, x, y, z).
    """
    return NetworkData(
        nodes=[Node(no=no, x=x, y=y) for no, x, y in nodes],
        links=[
            Link(no=no, from_node=u, to_node=v, length="100m", v0_prt="50km/h")
            for no, u, v in links
        ],
        intermediate_points=[IntermediatePoint(*row) for row in items or []],
        link_poly_points=[LinkPolyPoint(*row) for row in polys or []],
    )


@pytest.fixture
def sample_net_path() -> Path:
    return SAMPLE_DATA / "small.net"


@pytest.fixture
def network_factory():
    """Factory fixture returning :func:`make_network`."""
    return make_network
