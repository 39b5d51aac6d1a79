from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from .models import Polygon
from .tile import HexTile

PathLike = Union[str, Path]

VERSION = 1


def tile_to_dict(tile: HexTile) -> dict:
    return {"version": VERSION, "edges": list(tile.edges)}


def _label_from_json(value):
    # JSON has no tuples; labels saved as tuples come back as lists.
    if isinstance(value, list):
        return tuple(_label_from_json(item) for item in value)
    return value


def tile_from_dict(payload: dict) -> HexTile:
    if "edges" not in payload:
        raise KeyError("Tile payload has no 'edges' list")
    return HexTile(_label_from_json(label) for label in payload["edges"])


def polygons_to_dict(polygons: Sequence[Polygon]) -> dict:
    return {
        "version": VERSION,
        "polygons": [
            {
                "label": polygon.label,
                "edges": list(polygon.edge_indices),
                "points": [[x, y] for x, y in polygon.points],
                "area": polygon.area,
            }
            for polygon in polygons
        ],
    }


def polygons_from_dict(payload: dict) -> List[Polygon]:
    return [
        Polygon(
            label=_label_from_json(item["label"]),
            points=tuple((float(x), float(y)) for x, y in item["points"]),
            edge_indices=tuple(item.get("edges", [])),
        )
        for item in payload.get("polygons", [])
    ]


def load_tile(path: PathLike) -> HexTile:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return tile_from_dict(data)


def save_tile(tile: HexTile, path: PathLike) -> None:
    Path(path).write_text(json.dumps(tile_to_dict(tile), indent=2), encoding="utf-8")


def save_polygons(polygons: Sequence[Polygon], path: PathLike) -> None:
    Path(path).write_text(json.dumps(polygons_to_dict(polygons), indent=2), encoding="utf-8")
