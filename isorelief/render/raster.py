from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # headless-safe for servers/CI
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.collections import PolyCollection  # noqa: E402

from isorelief.color import RGBA, ColorMapper, colormap_mapper
from isorelief.render.pipeline import SurfaceRequest, render_surface
from isorelief.render.primitives import FillTriangle, Primitive, StrokeTriangle
from isorelief.surface.depth import DepthMode

LIGHT_BACKGROUND = "#ffffff"
DARK_BACKGROUND = "#121212"


def _rgba01(color: RGBA) -> tuple[float, float, float, float]:
    return tuple(float(ch) / 255.0 for ch in color)  # type: ignore[return-value]


def draw_primitives(ax, primitives: Sequence[Primitive]) -> None:
    """
    Draw primitives onto a matplotlib axes in list order.

    Consecutive primitives of the same kind are batched into a single
    PolyCollection so painter's order is preserved.
    """
    batch: list[Primitive] = []

    def _flush() -> None:
        if not batch:
            return
        polys = [list(p.points) for p in batch]
        if isinstance(batch[0], FillTriangle):
            coll = PolyCollection(polys, closed=True, facecolors=[_rgba01(p.color) for p in batch], edgecolors="none", linewidths=0.0)
        else:
            coll = PolyCollection(
                polys,
                closed=True,
                facecolors="none",
                edgecolors=[_rgba01(p.color) for p in batch],
                linewidths=[float(p.width) for p in batch],  # type: ignore[union-attr]
            )
        ax.add_collection(coll)
        batch.clear()

    for prim in primitives:
        if batch and type(prim) is not type(batch[0]):
            _flush()
        if isinstance(prim, (FillTriangle, StrokeTriangle)):
            batch.append(prim)
    _flush()


def write_surface_png(
    request: SurfaceRequest,
    out_path: Path,
    *,
    color_mapper: Optional[ColorMapper] = None,
    depth_mode: DepthMode = DepthMode.HEURISTIC,
    dpi: int = 100,
) -> Path:
    out_path = Path(out_path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    mapper = color_mapper or colormap_mapper()
    primitives = render_surface(request, mapper, depth_mode)

    width = max(float(request.width), 1.0)
    height = max(float(request.height), 1.0)
    background = DARK_BACKGROUND if request.is_dark else LIGHT_BACKGROUND
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor=background)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_facecolor(background)
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)  # screen coordinates: y grows downward
    ax.set_axis_off()
    draw_primitives(ax, primitives)
    fig.savefig(out_path, dpi=dpi, facecolor=background)
    plt.close(fig)
    return out_path
