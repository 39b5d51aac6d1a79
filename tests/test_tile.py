"""Tests for HexTile construction and polygon merging."""

import itertools

import pytest

from hextile.geometry import HEX_AREA, INTERNAL_VERTICES, VERTICES, WEDGE_POLYGONS
from hextile.models import Direction, InvalidEdgeCount
from hextile.tile import HexTile

V = VERTICES
I0, I1 = INTERNAL_VERTICES


# ═══════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════

class TestConstruction:

    @pytest.mark.parametrize("count", [0, 1, 5, 7, 12])
    def test_wrong_edge_count_fails(self, count):
        with pytest.raises(InvalidEdgeCount) as info:
            HexTile(["a"] * count)
        assert info.value.count == count

    def test_invalid_edge_count_is_value_error(self):
        with pytest.raises(ValueError):
            HexTile([1, 2, 3])

    def test_six_edges_succeed(self):
        tile = HexTile([1, 2, 3, 4, 5, 6])
        assert tile.edges == (1, 2, 3, 4, 5, 6)
        assert len(tile) == 6

    def test_accepts_any_iterable(self):
        tile = HexTile(iter("abcdef"))
        assert tile.edges == ("a", "b", "c", "d", "e", "f")

    def test_uniform(self):
        tile = HexTile.uniform("sea")
        assert tile.edges == ("sea",) * 6
        assert tile.is_uniform()

    def test_index_by_direction(self):
        tile = HexTile(["n", "ne", "se", "s", "sw", "nw"])
        assert tile[Direction.N] == "n"
        assert tile[Direction.SW] == "sw"
        assert tile[5] == "nw"

    def test_labels_in_first_seen_order(self):
        tile = HexTile(["b", "a", "b", "c", "a", "a"])
        assert tile.labels() == ["b", "a", "c"]

    def test_tiles_are_immutable_values(self):
        tile = HexTile([1, 1, 2, 2, 3, 3])
        assert tile == HexTile((1, 1, 2, 2, 3, 3))
        assert hash(tile) == hash(HexTile((1, 1, 2, 2, 3, 3)))
        with pytest.raises(AttributeError):
            tile.edges = (0,) * 6

    def test_unhashable_label_fails_at_construction(self):
        with pytest.raises(TypeError, match="Edge 2"):
            HexTile([1, 1, [2], 2, 3, 3])


# ═══════════════════════════════════════════════════════════════════
# polygons()
# ═══════════════════════════════════════════════════════════════════

class TestPolygons:

    def test_uniform_tile_is_hexagon_outline(self):
        polygons = HexTile.uniform("L").polygons()
        assert len(polygons) == 1
        polygon = polygons[0]
        assert polygon.label == "L"
        assert polygon.points == VERTICES
        assert not set(polygon.points) & set(INTERNAL_VERTICES)
        assert polygon.edge_indices == (0, 1, 2, 3, 4, 5)
        assert polygon.area == pytest.approx(HEX_AREA)

    def test_distinct_labels_give_unmerged_wedges(self):
        polygons = HexTile(range(6)).polygons()
        assert len(polygons) == 6
        for i, polygon in enumerate(polygons):
            assert polygon.label == i
            assert polygon.edge_indices == (i,)
            assert polygon.points == WEDGE_POLYGONS[i]

    def test_north_and_north_east_merge(self):
        polygons = HexTile(["A", "A", "c", "d", "e", "f"]).polygons()
        assert len(polygons) == 5
        merged = [p for p in polygons if p.label == "A"]
        assert len(merged) == 1
        assert merged[0].edge_indices == (0, 1)
        assert merged[0].points == (V[0], V[1], V[2], I1, I0)
        singles = [p for p in polygons if p.label != "A"]
        assert [p.points for p in singles] == [WEDGE_POLYGONS[i] for i in range(2, 6)]

    def test_north_and_south_stay_apart(self):
        polygons = HexTile(["A", "b", "c", "A", "d", "e"]).polygons()
        assert len(polygons) == 6
        a_polys = [p for p in polygons if p.label == "A"]
        assert [p.edge_indices for p in a_polys] == [(0,), (3,)]
        assert a_polys[0].points == WEDGE_POLYGONS[0]
        assert a_polys[1].points == WEDGE_POLYGONS[3]

    def test_merge_wraps_from_north_west_to_north(self):
        polygons = HexTile(["A", "b", "c", "d", "e", "A"]).polygons()
        merged = [p for p in polygons if p.label == "A"]
        assert len(merged) == 1
        assert merged[0].edge_indices == (0, 5)
        assert merged[0].points == (V[0], V[1], I1, I0, V[5])

    def test_run_through_both_hubs_drops_inner_seam(self):
        polygons = HexTile(["A", "A", "A", "A", "b", "c"]).polygons()
        merged = polygons[0]
        assert merged.edge_indices == (0, 1, 2, 3)
        assert merged.points == (V[0], V[1], V[2], V[3], V[4], I0)
        assert I1 not in merged.points

    def test_two_halves(self):
        polygons = HexTile(["sea", "sea", "land", "land", "land", "sea"]).polygons()
        assert [(p.label, p.edge_indices) for p in polygons] == [
            ("sea", (0, 1, 5)),
            ("land", (2, 3, 4)),
        ]
        assert sum(p.area for p in polygons) == pytest.approx(HEX_AREA)

    def test_alternating_labels_never_merge(self):
        polygons = HexTile(["x", "y"] * 3).polygons()
        assert len(polygons) == 6
        assert all(len(p.edge_indices) == 1 for p in polygons)

    def test_labels_use_equality_not_identity(self):
        polygons = HexTile([(1, 2), (1, 2), 3, 3, 3, 3]).polygons()
        assert [p.edge_indices for p in polygons] == [(0, 1), (2, 3, 4, 5)]


# ═══════════════════════════════════════════════════════════════════
# Properties over every labelling drawn from three labels
# ═══════════════════════════════════════════════════════════════════

ALL_LABELLINGS = list(itertools.product("abc", repeat=6))


def test_every_edge_is_covered_exactly_once():
    for labels in ALL_LABELLINGS:
        polygons = HexTile(labels).polygons()
        covered = sorted(i for p in polygons for i in p.edge_indices)
        assert covered == [0, 1, 2, 3, 4, 5], labels
        for polygon in polygons:
            assert all(labels[i] == polygon.label for i in polygon.edge_indices)


def test_areas_sum_to_hexagon():
    for labels in ALL_LABELLINGS:
        polygons = HexTile(labels).polygons()
        assert sum(p.area for p in polygons) == pytest.approx(HEX_AREA), labels
        for polygon in polygons:
            assert polygon.signed_area < 0
            assert len(set(polygon.points)) == polygon.vertex_count()


def test_polygon_count_matches_label_runs():
    for labels in ALL_LABELLINGS:
        polygons = HexTile(labels).polygons()
        changes = sum(labels[i] != labels[(i + 1) % 6] for i in range(6))
        expected = max(changes, 1)
        assert len(polygons) == expected, labels
