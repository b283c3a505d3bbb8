from isorelief.surface.depth import DepthMode, depth_sort_triangles
from isorelief.surface.mesh import SurfaceTriangle, build_triangles
from isorelief.surface.preprocess import (
    GridShapeError,
    NormalizedGrid,
    display_range,
    normalize_grid,
    normalize_value,
    safe_range,
)
from isorelief.surface.projection import IsometricProjector
from isorelief.surface.shading import LIGHT_DIRECTION, shade_factor

__all__ = [
    "DepthMode",
    "depth_sort_triangles",
    "SurfaceTriangle",
    "build_triangles",
    "GridShapeError",
    "NormalizedGrid",
    "display_range",
    "normalize_grid",
    "normalize_value",
    "safe_range",
    "IsometricProjector",
    "LIGHT_DIRECTION",
    "shade_factor",
]
