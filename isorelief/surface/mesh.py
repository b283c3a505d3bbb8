from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from isorelief.surface.preprocess import NormalizedGrid
from isorelief.surface.shading import shade_factor_xyz


Point2 = Tuple[float, float]

LOWER_DEPTH_OFFSET = 0.2


@dataclass(frozen=True)
class SurfaceTriangle:
    a: Point2
    b: Point2
    c: Point2
    value: float
    shade: float
    depth: float
    row: int
    col: int
    upper: bool

    @property
    def points(self) -> List[Point2]:
        return [self.a, self.b, self.c]


def mean_finite(values: Iterable[float]) -> Optional[float]:
    finite = [float(v) for v in values if math.isfinite(v)]
    if not finite:
        return None
    return sum(finite) / len(finite)


def build_triangles(grid: NormalizedGrid, screen_x: np.ndarray, screen_y: np.ndarray) -> List[SurfaceTriangle]:
    """
    Split every grid quad along the (r, c+1)-(r+1, c) diagonal.

    Upper triangle: (r,c), (r,c+1), (r+1,c); depth key r + c.
    Lower triangle: (r+1,c+1), (r+1,c), (r,c+1); depth key r + c + 0.2.
    A triangle is skipped when any vertex has no screen position or none of
    its source values is finite.
    """
    rows, cols = grid.rows, grid.cols
    if rows < 2 or cols < 2:
        return []

    values = grid.values.tolist()
    heights = np.where(grid.missing, 0.0, grid.heights).tolist()
    defined = (~grid.missing).tolist()
    xs = screen_x.tolist()
    ys = screen_y.tolist()

    out: List[SurfaceTriangle] = []
    for r in range(rows - 1):
        for c in range(cols - 1):
            d00, d10 = defined[r][c], defined[r][c + 1]
            d01, d11 = defined[r + 1][c], defined[r + 1][c + 1]
            if not (d10 and d01):
                continue
            p10 = (xs[r][c + 1], ys[r][c + 1])
            p01 = (xs[r + 1][c], ys[r + 1][c])
            h10, h01 = heights[r][c + 1], heights[r + 1][c]

            if d00:
                val = mean_finite((values[r][c], values[r][c + 1], values[r + 1][c]))
                if val is not None:
                    shade = shade_factor_xyz(
                        c, heights[r][c], r,
                        c + 1, h10, r,
                        c, h01, r + 1,
                    )
                    p00 = (xs[r][c], ys[r][c])
                    out.append(SurfaceTriangle(p00, p10, p01, val, shade, float(r + c), r, c, True))

            if d11:
                val = mean_finite((values[r + 1][c + 1], values[r + 1][c], values[r][c + 1]))
                if val is not None:
                    shade = shade_factor_xyz(
                        c + 1, heights[r + 1][c + 1], r + 1,
                        c, h01, r + 1,
                        c + 1, h10, r,
                    )
                    p11 = (xs[r + 1][c + 1], ys[r + 1][c + 1])
                    out.append(SurfaceTriangle(p11, p01, p10, val, shade, r + c + LOWER_DEPTH_OFFSET, r, c, False))
    return out
