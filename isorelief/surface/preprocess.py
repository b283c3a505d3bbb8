from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from isorelief.tolerance import EPS_RANGE, UNIT_RANGE


class GridShapeError(ValueError):
    pass


@dataclass(frozen=True)
class NormalizedGrid:
    values: np.ndarray   # rows x cols raw values (float)
    heights: np.ndarray  # rows x cols in [0, 1], NaN where missing
    missing: np.ndarray  # rows x cols bool

    @property
    def rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def cols(self) -> int:
        return int(self.values.shape[1])


def as_grid_array(grid: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    if isinstance(grid, np.ndarray):
        arr = np.asarray(grid, dtype=float)
        if arr.ndim != 2:
            raise GridShapeError(f"grid must be 2D, got shape {arr.shape}")
        return arr
    rows = [list(r) for r in grid]
    if not rows:
        return np.zeros((0, 0), dtype=float)
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise GridShapeError(f"row {i} has {len(row)} values, expected {width}")
    if width == 0:
        return np.zeros((len(rows), 0), dtype=float)
    return np.asarray(rows, dtype=float)


def safe_range(min_value: float, max_value: float) -> float:
    span = float(max_value) - float(min_value)
    return UNIT_RANGE if abs(span) < EPS_RANGE else span


def normalize_value(value: float, min_value: float, max_value: float) -> Optional[float]:
    """Map a raw value into [0, 1]; None for non-finite input."""
    v = float(value)
    if not math.isfinite(v):
        return None
    t = (v - float(min_value)) / safe_range(min_value, max_value)
    return min(max(t, 0.0), 1.0)


def normalize_grid(grid: Sequence[Sequence[float]] | np.ndarray, min_value: float, max_value: float) -> NormalizedGrid:
    values = as_grid_array(grid)
    missing = ~np.isfinite(values)
    with np.errstate(invalid="ignore"):
        heights = np.clip((values - float(min_value)) / safe_range(min_value, max_value), 0.0, 1.0)
    heights[missing] = np.nan
    return NormalizedGrid(values=values, heights=heights, missing=missing)


def display_range(grid: Sequence[Sequence[float]] | np.ndarray) -> Tuple[float, float]:
    arr = as_grid_array(grid).reshape(-1)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return (0.0, 1.0)
    return (float(np.min(arr)), float(np.max(arr)))
