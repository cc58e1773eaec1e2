"""Well-known text rendering of vertices and edge geometries."""

from __future__ import annotations

from typing import Sequence


def _fmt(value: float) -> str:
    # Shortest round-tripping form without a trailing ".0"
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def point_to_wkt(coord: Sequence[float]) -> str:
    """Return ``POINT(x y)`` for a coordinate pair.

    Returns ``POINT EMPTY`` when fewer than two values are given.
    """
    if len(coord) < 2:
        return "POINT EMPTY"
    return f"POINT({_fmt(coord[0])} {_fmt(coord[1])})"


def linestring_to_wkt(coords: Sequence[Sequence[float]]) -> str:
    """Return ``LINESTRING(x1 y1, x2 y2, ...)`` for a polyline.

    Coordinates with fewer than two values are skipped. Returns
    ``LINESTRING EMPTY`` when nothing remains.
    """
    parts = [f"{_fmt(c[0])} {_fmt(c[1])}" for c in coords if len(c) >= 2]
    if not parts:
        return "LINESTRING EMPTY"
    return f"LINESTRING({', '.join(parts)})"
