"""
Surface render pipeline.

grid + range -> normalize -> isometric projection -> triangle mesh (shaded)
-> depth sort -> fill pass, then wireframe pass.

Every call rebuilds all intermediate state; identical requests give
identical primitive lists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from isorelief.color import ColorMapper, apply_shade
from isorelief.render.primitives import FillTriangle, Primitive, StrokeTriangle, WIRE_WIDTH, wire_color
from isorelief.surface.depth import DepthMode, depth_sort_triangles
from isorelief.surface.mesh import SurfaceTriangle, build_triangles
from isorelief.surface.preprocess import normalize_grid
from isorelief.surface.projection import IsometricProjector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SurfaceRequest:
    grid: Sequence[Sequence[float]] | np.ndarray
    min_value: float
    max_value: float
    metric_label: str
    width: float
    height: float
    is_dark: bool = False


def needs_repaint(old: SurfaceRequest, new: SurfaceRequest) -> bool:
    """Grid is compared by identity, everything else by value."""
    return (
        old.grid is not new.grid
        or old.metric_label != new.metric_label
        or old.min_value != new.min_value
        or old.max_value != new.max_value
        or old.is_dark != new.is_dark
        or old.width != new.width
        or old.height != new.height
    )


def build_surface(request: SurfaceRequest, depth_mode: DepthMode = DepthMode.HEURISTIC) -> List[SurfaceTriangle]:
    if request.width <= 0 or request.height <= 0:
        return []
    norm = normalize_grid(request.grid, request.min_value, request.max_value)
    if norm.rows == 0 or norm.cols == 0:
        return []
    projector = IsometricProjector(norm.rows, norm.cols, float(request.width), float(request.height))
    sx, sy = projector.project_grid(norm.heights)
    tris = build_triangles(norm, sx, sy)
    logger.debug(
        "surface %dx%d: %d triangles (%d dropped)",
        norm.rows, norm.cols, len(tris), 2 * max(norm.rows - 1, 0) * max(norm.cols - 1, 0) - len(tris),
    )
    return depth_sort_triangles(tris, mode=depth_mode)


def render_surface(
    request: SurfaceRequest,
    color_mapper: ColorMapper,
    depth_mode: DepthMode = DepthMode.HEURISTIC,
) -> List[Primitive]:
    tris = build_surface(request, depth_mode)
    out: List[Primitive] = []
    for tri in tris:
        base = color_mapper(tri.value, request.min_value, request.max_value, request.metric_label)
        out.append(FillTriangle(points=tri.points, color=apply_shade(base, tri.shade)))
    stroke = wire_color(request.is_dark)
    for tri in tris:
        out.append(StrokeTriangle(points=tri.points, color=stroke, width=WIRE_WIDTH))
    return out
