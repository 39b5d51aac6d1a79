from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Generic, Hashable, Tuple, TypeVar

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

T = TypeVar("T", bound=Hashable)

EDGE_COUNT = 6


class Direction(IntEnum):
    """Edge positions of a hex tile, clockwise from the top."""

    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5


class InvalidEdgeCount(ValueError):
    """A tile was built from a label sequence whose length is not 6."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Must specify {EDGE_COUNT} edge values, got {count}")
        self.count = count


@dataclass(frozen=True)
class Polygon(Generic[T]):
    """One renderable shape tagged with the state it depicts.

    *points* is the boundary in drawing order, not closed (the last point
    connects back to the first).  *edge_indices* lists the tile edges
    whose wedges this polygon covers, in ascending order.
    """

    label: T
    points: tuple[Point, ...]
    edge_indices: tuple[int, ...] = field(default_factory=tuple)

    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def signed_area(self) -> float:
        from .geometry import signed_area

        return signed_area(self.points)

    @property
    def area(self) -> float:
        return abs(self.signed_area)
