"""Fixed geometry of the unit hex tile.

Labelling of vertices and edges::

                 0 1                0
    Vertices:   5 * 2     Edges:  5   1
                 4 3              4   2
                                    3

The hexagon is inscribed in the unit circle and centred on the origin,
with y pointing up.  Edge *i* runs from vertex *i* to vertex *i + 1*.
Two internal "hub" vertices sit on the x axis near the centre; every
edge's wedge fans in from its edge to one or both hubs.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .models import EDGE_COUNT, Point, Segment

EDGE_RANGE = range(EDGE_COUNT)

UNIT_HEX_HEIGHT = math.sqrt(3.0) / 2.0
HEX_AREA = 3.0 * math.sqrt(3.0) / 2.0


def _vertex(i: int) -> Point:
    angle = (i + 4) * math.pi / 3.0
    return (math.cos(angle), -math.sin(angle))


VERTICES: tuple[Point, ...] = tuple(_vertex(i) for i in EDGE_RANGE)

EDGE_SEGMENTS: tuple[Segment, ...] = tuple(
    (VERTICES[i], VERTICES[(i + 1) % EDGE_COUNT]) for i in EDGE_RANGE
)

INTERNAL_VERTICES: tuple[Point, Point] = (
    (-UNIT_HEX_HEIGHT / 4.0, 0.0),
    (UNIT_HEX_HEIGHT / 4.0, 0.0),
)

# Hub indices appended after each edge's two outer vertices.  N and S
# span both hubs; the side wedges each touch the hub on their own side.
_WEDGE_HUBS: tuple[tuple[int, ...], ...] = (
    (1, 0),  # N
    (1,),    # NE
    (1,),    # SE
    (0, 1),  # S
    (0,),    # SW
    (0,),    # NW
)

WEDGE_POLYGONS: tuple[tuple[Point, ...], ...] = tuple(
    EDGE_SEGMENTS[i] + tuple(INTERNAL_VERTICES[h] for h in _WEDGE_HUBS[i])
    for i in EDGE_RANGE
)

# SPOKES[i] joins outer vertex i to the hub shared by wedges i - 1 and i.
SPOKES: tuple[Segment, ...] = tuple(
    (VERTICES[i], WEDGE_POLYGONS[i][-1]) for i in EDGE_RANGE
)


def _check_index(i: int) -> int:
    if i not in EDGE_RANGE:
        raise ValueError(f"edge index must be in 0..{EDGE_COUNT - 1}, got {i}")
    return int(i)


def vertex(i: int) -> Point:
    """Outer vertex *i* of the unit hexagon."""
    return VERTICES[_check_index(i)]


def edge_segment(i: int) -> Segment:
    """Edge *i*, from vertex *i* to vertex *(i + 1) % 6*."""
    return EDGE_SEGMENTS[_check_index(i)]


def wedge_polygon(i: int) -> tuple[Point, ...]:
    """Boundary of the wedge owned by edge *i*."""
    return WEDGE_POLYGONS[_check_index(i)]


def spoke(i: int) -> Segment:
    return SPOKES[_check_index(i)]


def signed_area(points: Sequence[Point]) -> float:
    """Signed area via the shoelace formula.

    Positive for counter-clockwise winding, negative for clockwise.  The
    wedges and the hex outline are clockwise, so they come out negative.
    """
    area = 0.0
    n = len(points)
    for k in range(n):
        x1, y1 = points[k]
        x2, y2 = points[(k + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    return abs(signed_area(points))


def boundary_segments(points: Sequence[Point]) -> list[Segment]:
    """Directed segments of a closed boundary, in order."""
    n = len(points)
    return [(points[k], points[(k + 1) % n]) for k in range(n)]


def bounding_box(points: Iterable[Point]) -> tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)``."""
    pts = list(points)
    if not pts:
        raise ValueError("bounding_box needs at least one point")
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return (min(xs), min(ys), max(xs), max(ys))
