"""SVG rendering of labelled tile polygons."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Hashable, Mapping, Optional, Sequence
from xml.sax.saxutils import quoteattr

from .models import Polygon

PALETTE: tuple[str, ...] = (
    "#5aa9e6",
    "#d1495b",
    "#edae49",
    "#66a182",
    "#8d6a9f",
    "#f4845f",
)


def label_colors(
    polygons: Sequence[Polygon],
    colors: Optional[Mapping[Hashable, str]] = None,
    palette: Sequence[str] = PALETTE,
) -> Dict[Hashable, str]:
    """Assign a fill colour to each label.

    Labels present in *colors* keep their colour; the rest take palette
    entries in first-seen order, cycling if there are more labels than
    palette entries.
    """
    colors = dict(colors or {})
    assigned: dict[Hashable, str] = {}
    next_slot = 0
    for polygon in polygons:
        if polygon.label in assigned:
            continue
        if polygon.label in colors:
            assigned[polygon.label] = colors[polygon.label]
        else:
            assigned[polygon.label] = palette[next_slot % len(palette)]
            next_slot += 1
    return assigned


def _fmt(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def polygon_points_attr(polygon: Polygon) -> str:
    """``points`` attribute for *polygon*, with y flipped to screen space."""
    return " ".join(f"{_fmt(x)},{_fmt(-y)}" for x, y in polygon.points)


def to_svg(
    polygons: Sequence[Polygon],
    colors: Optional[Mapping[Hashable, str]] = None,
    size: int = 200,
    stroke: str = "#2b2b2b",
    stroke_width: float = 0.01,
) -> str:
    """Render *polygons* as a standalone SVG document.

    The unit hexagon is mapped onto a *size* × *size* pixel canvas.  Each
    polygon becomes one filled ``<polygon>`` element carrying its label in
    a ``data-label`` attribute.
    """
    if size <= 0:
        raise ValueError("size must be > 0")
    fills = label_colors(polygons, colors)

    lines = [
        '<svg version="1.1" xmlns="http://www.w3.org/2000/svg" '
        f'width="{size}" height="{size}" viewBox="-1.05 -1.05 2.1 2.1">'
    ]
    for polygon in polygons:
        lines.append(
            f'  <polygon points="{polygon_points_attr(polygon)}" '
            f"fill={quoteattr(fills[polygon.label])} "
            f"stroke={quoteattr(stroke)} stroke-width=\"{_fmt(stroke_width)}\" "
            f"data-label={quoteattr(str(polygon.label))} />"
        )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def save_svg(polygons: Sequence[Polygon], output_path: str | Path, **kwargs) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_svg(polygons, **kwargs), encoding="utf-8")
