"""hextile command-line interface."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .io import load_tile, save_polygons
from .models import InvalidEdgeCount
from .tile import HexTile


def _add_tile_source(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--edges", nargs="+", metavar="LABEL",
                        help="Edge labels in order N NE SE S SW NW")
    source.add_argument("--in", dest="input_path", help="Tile JSON file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="hextile CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    polygons = sub.add_parser("polygons", help="List the merged polygons of a tile")
    _add_tile_source(polygons)
    polygons.add_argument("--out", dest="output_path", help="Write polygons as JSON")

    svg = sub.add_parser("svg", help="Render a tile to SVG")
    _add_tile_source(svg)
    svg.add_argument("--out", dest="output_path", required=True)
    svg.add_argument("--size", type=int, default=200)

    render = sub.add_parser("render", help="Render a tile to PNG")
    _add_tile_source(render)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--wedges", action="store_true", help="Outline the six wedges")
    render.add_argument("--labels", action="store_true", help="Annotate polygon labels")
    render.add_argument("--dpi", type=int, default=150)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        tile = _load_tile(args)
    except (InvalidEdgeCount, KeyError) as exc:
        print(exc.args[0])
        raise SystemExit(1)

    if args.command == "polygons":
        _cmd_polygons(tile, args)

    elif args.command == "svg":
        from .svg import save_svg
        save_svg(tile.polygons(), args.output_path, size=args.size)
        print(f"Saved {args.output_path}")

    elif args.command == "render":
        from .render import render_png
        render_png(
            tile.polygons(),
            args.output_path,
            dpi=args.dpi,
            show_wedges=args.wedges,
            show_labels=args.labels,
        )
        print(f"Saved {args.output_path}")


def _load_tile(args) -> HexTile:
    if args.input_path:
        return load_tile(args.input_path)
    return HexTile(args.edges)


def _cmd_polygons(tile: HexTile, args) -> None:
    polygons = tile.polygons()
    if args.output_path:
        save_polygons(polygons, args.output_path)
        print(f"Saved {args.output_path}")
        return
    for polygon in polygons:
        print(f"{polygon.label}: edges {list(polygon.edge_indices)} area {polygon.area:.4f}")


if __name__ == "__main__":
    main()
