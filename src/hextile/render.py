from __future__ import annotations

from pathlib import Path
from typing import Hashable, Mapping, Optional, Sequence

from .geometry import VERTICES, WEDGE_POLYGONS, bounding_box
from .models import Polygon
from .svg import label_colors


def render_png(
    polygons: Sequence[Polygon],
    output_path: str | Path,
    colors: Optional[Mapping[Hashable, str]] = None,
    face_alpha: float = 0.85,
    edge_color: str = "#2b2b2b",
    wedge_color: str = "#7a7a7a",
    padding: float = 0.1,
    dpi: int = 150,
    show_wedges: bool = False,
    show_labels: bool = False,
) -> None:
    """Render labelled tile polygons to PNG.

    Requires matplotlib (the `render` extra); imported lazily to keep core
    package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon as PolygonPatch
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    if not polygons:
        raise ValueError("Nothing to render: polygon list is empty.")

    fills = label_colors(polygons, colors)
    fig, ax = plt.subplots()

    for polygon in polygons:
        patch = PolygonPatch(
            list(polygon.points),
            closed=True,
            facecolor=fills[polygon.label],
            alpha=face_alpha,
            edgecolor=edge_color,
            linewidth=1.0,
        )
        ax.add_patch(patch)
        if show_labels:
            cx, cy = _centroid(polygon)
            ax.text(cx, cy, str(polygon.label), ha="center", va="center", fontsize=8)

    if show_wedges:
        _draw_wedges(ax, wedge_color)

    min_x, min_y, max_x, max_y = bounding_box(VERTICES)
    ax.set_aspect("equal", "box")
    ax.set_xlim(min_x - padding, max_x + padding)
    ax.set_ylim(min_y - padding, max_y + padding)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)


def _centroid(polygon: Polygon) -> tuple[float, float]:
    n = len(polygon.points)
    cx = sum(x for x, _ in polygon.points) / n
    cy = sum(y for _, y in polygon.points) / n
    return (cx, cy)


def _draw_wedges(ax, color: str) -> None:
    for wedge in WEDGE_POLYGONS:
        xs, ys = zip(*(wedge + (wedge[0],)))
        ax.plot(xs, ys, color=color, linewidth=0.6, linestyle=(0, (3, 3)))
