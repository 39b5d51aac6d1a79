import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hextile import HexTile, save_svg


def main() -> None:
    tile = HexTile(["sea", "sea", "land", "land", "river", "sea"])
    polygons = tile.polygons()

    print("Edges:", tile.edges)
    print("Polygons:", len(polygons))
    for polygon in polygons:
        print(f"  {polygon.label}: edges {list(polygon.edge_indices)}, "
              f"{polygon.vertex_count()} points, area {polygon.area:.4f}")

    out = ROOT / "exports" / "demo_tile.svg"
    save_svg(polygons, out, colors={"sea": "#5aa9e6", "land": "#66a182", "river": "#1f4e79"})
    print(f"Saved {out}")


if __name__ == "__main__":
    main()
