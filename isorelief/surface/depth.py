from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from isorelief.surface.mesh import SurfaceTriangle


class DepthMode(Enum):
    HEURISTIC = "heuristic"
    CENTROID = "centroid"


def centroid_depth(tri: SurfaceTriangle) -> float:
    """Mean screen y of the vertices; larger is nearer the viewer."""
    return (tri.a[1] + tri.b[1] + tri.c[1]) / 3.0


def depth_sort_triangles(
    triangles: Sequence[SurfaceTriangle],
    *,
    mode: DepthMode = DepthMode.HEURISTIC,
    back_to_front: bool = True,
) -> List[SurfaceTriangle]:
    """Painter's-algorithm ordering; ties keep build order."""
    if mode is DepthMode.CENTROID:
        key = centroid_depth
    else:
        key = lambda t: t.depth  # noqa: E731
    out = list(triangles)
    out.sort(key=key, reverse=not back_to_front)
    return out
