"""Grouping and merging of edge wedges.

Edges are grouped by label; within a group, wedges that share a spoke
(the seam from an outer vertex in to a hub) are connected, and each
connected set is dissolved into one boundary by cancelling the
segments its wedges share.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Sequence

from .geometry import SPOKES, WEDGE_POLYGONS, boundary_segments
from .models import Point, Polygon, Segment, T


def group_edges_by_label(labels: Sequence[T]) -> Dict[T, List[int]]:
    """Map each label to the edge indices carrying it.

    Groups are ordered by the first appearance of their label.
    """
    groups: dict[T, list[int]] = {}
    for index, label in enumerate(labels):
        groups.setdefault(label, []).append(index)
    return groups


def _undirected(segment: Segment) -> frozenset:
    return frozenset(segment)


_SPOKE_KEYS = {_undirected(s) for s in SPOKES}


def wedge_adjacency(edge_indices: Iterable[int]) -> Dict[int, List[int]]:
    """Return adjacency between the given wedges based on shared spokes.

    The N and S wedges also touch along the seam between the two hubs,
    but they are not neighbouring edges and are never connected by it.
    """
    indices = sorted(set(edge_indices))
    spoke_to_wedges: dict[frozenset, list[int]] = defaultdict(list)
    for index in indices:
        for segment in boundary_segments(WEDGE_POLYGONS[index]):
            key = _undirected(segment)
            if key in _SPOKE_KEYS:
                spoke_to_wedges[key].append(index)

    neighbors: dict[int, set[int]] = {index: set() for index in indices}
    for wedges in spoke_to_wedges.values():
        for i, a in enumerate(wedges):
            for b in wedges[i + 1 :]:
                neighbors[a].add(b)
                neighbors[b].add(a)

    return {index: sorted(neigh) for index, neigh in neighbors.items()}


def connected_wedges(edge_indices: Iterable[int]) -> List[List[int]]:
    """Split *edge_indices* into connected sets of wedges.

    Each set is sorted, and sets are ordered by their lowest index.
    """
    adjacency = wedge_adjacency(edge_indices)
    visited: set[int] = set()
    components: list[list[int]] = []
    for start in sorted(adjacency):
        if start in visited:
            continue
        visited.add(start)
        component = [start]
        frontier = [start]
        while frontier:
            current = frontier.pop()
            for neighbor in adjacency[current]:
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                component.append(neighbor)
                frontier.append(neighbor)
        components.append(sorted(component))
    return components


def dissolve_wedges(edge_indices: Sequence[int]) -> tuple[Point, ...]:
    """Outline of the union of a connected set of wedges.

    *edge_indices* must be one component as returned by
    :func:`connected_wedges`; N and S alone touch only along the hub seam
    and are rejected.

    Every directed segment whose reverse also occurs belongs to two of the
    wedges and is dropped; the rest form a single loop, walked from the
    first point of the lowest-index wedge.
    """
    if not edge_indices:
        raise ValueError("dissolve_wedges needs at least one edge index")
    if len(connected_wedges(edge_indices)) != 1:
        raise ValueError(f"Wedges {list(edge_indices)} are not connected by spokes")

    segments: list[Segment] = []
    for index in sorted(set(edge_indices)):
        segments.extend(boundary_segments(WEDGE_POLYGONS[index]))

    present = set(segments)
    outline = [(a, b) for a, b in segments if (b, a) not in present]

    next_point: dict[Point, Point] = {}
    for a, b in outline:
        if a in next_point:
            raise ValueError(f"Wedges {list(edge_indices)} do not form a simple outline")
        next_point[a] = b

    start = WEDGE_POLYGONS[min(edge_indices)][0]
    cycle = [start]
    current = next_point[start]
    while current != start:
        if len(cycle) > len(outline):
            raise ValueError(f"Wedges {list(edge_indices)} do not form a closed outline")
        cycle.append(current)
        current = next_point[current]

    if len(cycle) != len(outline):
        raise ValueError(f"Wedges {list(edge_indices)} are not connected")
    return tuple(cycle)


def merge_group(label: T, edge_indices: Iterable[int]) -> List[Polygon[T]]:
    """Merge the wedges of one label into as few polygons as possible."""
    return [
        Polygon(label, dissolve_wedges(component), tuple(component))
        for component in connected_wedges(edge_indices)
    ]


def merge_labels(labels: Sequence[Hashable]) -> List[Polygon]:
    """Polygons for a full labelling: one per connected same-label run."""
    polygons: list[Polygon] = []
    for label, indices in group_edges_by_label(labels).items():
        polygons.extend(merge_group(label, indices))
    return polygons
