from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Union

from .geometry import EDGE_RANGE
from .merge import merge_labels
from .models import EDGE_COUNT, Direction, InvalidEdgeCount, Polygon, T


@dataclass(frozen=True)
class HexTile(Generic[T]):
    """A single hex tile with one label per edge.

    *edges* is indexed by :class:`Direction` (N, NE, SE, S, SW, NW).  Any
    iterable of labels is accepted and stored as a tuple.

    >>> tile = HexTile(["sea", "sea", "land", "land", "land", "sea"])
    >>> [p.edge_indices for p in tile.polygons()]
    [(0, 1, 5), (2, 3, 4)]
    """

    edges: tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))
        if len(self.edges) != EDGE_COUNT:
            raise InvalidEdgeCount(len(self.edges))
        for index, label in enumerate(self.edges):
            try:
                hash(label)
            except TypeError as exc:
                raise TypeError(f"Edge {index} label {label!r} is not hashable") from exc

    @classmethod
    def uniform(cls, state: T) -> "HexTile[T]":
        """Tile whose six edges all carry *state*."""
        return cls(tuple(state for _ in EDGE_RANGE))

    def __getitem__(self, direction: Union[int, Direction]) -> T:
        return self.edges[direction]

    def __len__(self) -> int:
        return len(self.edges)

    def labels(self) -> List[T]:
        """Distinct labels in order of first appearance."""
        return list(dict.fromkeys(self.edges))

    def is_uniform(self) -> bool:
        return len(set(self.edges)) == 1

    def polygons(self) -> List[Polygon[T]]:
        """Return the minimal labelled polygon set for this tile.

        Edges are grouped by label and each label's neighbouring wedges
        are fused.  A label on non-neighbouring edges (e.g. N and S)
        yields one polygon per run of neighbouring edges.
        """
        return merge_labels(self.edges)

    def to_svg(self, **kwargs) -> str:
        from .svg import to_svg

        return to_svg(self.polygons(), **kwargs)
