"""hextile — labelled polygons for a single hex tile.

Each of a tile's six edges owns a wedge of the hexagon; neighbouring
wedges with the same label are fused into one polygon.

- **Core** — models, geometry table, merging, :class:`HexTile`
- **Output** — SVG, PNG (requires matplotlib) and JSON
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import Direction, InvalidEdgeCount, Point, Polygon, Segment
from .geometry import (
    EDGE_SEGMENTS,
    HEX_AREA,
    INTERNAL_VERTICES,
    SPOKES,
    VERTICES,
    WEDGE_POLYGONS,
    edge_segment,
    polygon_area,
    signed_area,
    vertex,
    wedge_polygon,
)
from .merge import connected_wedges, dissolve_wedges, group_edges_by_label, merge_labels
from .tile import HexTile

# ── Output ──────────────────────────────────────────────────────────
from .svg import save_svg, to_svg
from .io import (
    load_tile,
    polygons_from_dict,
    polygons_to_dict,
    save_polygons,
    save_tile,
    tile_from_dict,
    tile_to_dict,
)

__all__ = [
    "Direction",
    "InvalidEdgeCount",
    "Point",
    "Polygon",
    "Segment",
    "EDGE_SEGMENTS",
    "HEX_AREA",
    "INTERNAL_VERTICES",
    "SPOKES",
    "VERTICES",
    "WEDGE_POLYGONS",
    "edge_segment",
    "polygon_area",
    "signed_area",
    "vertex",
    "wedge_polygon",
    "connected_wedges",
    "dissolve_wedges",
    "group_edges_by_label",
    "merge_labels",
    "HexTile",
    "save_svg",
    "to_svg",
    "load_tile",
    "polygons_from_dict",
    "polygons_to_dict",
    "save_polygons",
    "save_tile",
    "tile_from_dict",
    "tile_to_dict",
]
