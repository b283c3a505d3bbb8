"""
Isometric projection of grid cells onto the canvas.

Column increases right-and-down, row increases left-and-down, and the
normalized value lifts a point upward by one cell height at t = 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


Point2 = Tuple[float, float]

COS_30 = 0.866
SIN_30 = 0.5
ORIGIN_X_FRACTION = 0.5
ORIGIN_Y_FRACTION = 0.2


@dataclass(frozen=True)
class IsometricProjector:
    rows: int
    cols: int
    width: float
    height: float

    @property
    def cell(self) -> float:
        # Diamond footprint spans cols + rows cells; keep one cell of margin per side.
        return float(self.width) / (self.cols + self.rows + 2)

    @property
    def cell_x(self) -> float:
        return self.cell * COS_30

    @property
    def cell_y(self) -> float:
        return self.cell * SIN_30

    @property
    def height_scale(self) -> float:
        return self.cell

    @property
    def origin(self) -> Point2:
        return (float(self.width) * ORIGIN_X_FRACTION, float(self.height) * ORIGIN_Y_FRACTION)

    def project(self, row: float, col: float, t: Optional[float]) -> Optional[Point2]:
        if t is None or not math.isfinite(t):
            return None
        ox, oy = self.origin
        sx = ox + (col - row) * self.cell_x
        sy = oy + (col + row) * self.cell_y - t * self.height_scale
        return (float(sx), float(sy))

    def project_grid(self, heights: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Screen x/y arrays for a rows x cols height field; NaN marks undefined cells."""
        h = np.asarray(heights, dtype=float)
        r, c = np.indices(h.shape, dtype=float)
        ox, oy = self.origin
        sx = ox + (c - r) * self.cell_x
        sy = oy + (c + r) * self.cell_y - h * self.height_scale
        sx = np.where(np.isfinite(h), sx, np.nan)
        return sx, sy
