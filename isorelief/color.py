"""
Value-to-colour mapping.

The renderer never decides colours itself: it takes any callable matching
ColorMapper and darkens its output by the face shade factor.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Protocol

import matplotlib
matplotlib.use("Agg")
from matplotlib import colormaps  # noqa: E402

from isorelief.surface.preprocess import safe_range


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


class ColorMapper(Protocol):
    def __call__(self, value: float, min_value: float, max_value: float, label: str) -> RGBA:
        ...


MISSING_COLOR = RGBA(128, 128, 128, 255)


def _channel(v: float) -> int:
    return int(min(max(v, 0.0), 255.0))


def apply_shade(color: RGBA, factor: float) -> RGBA:
    r, g, b, a = color
    return RGBA(_channel(r * factor), _channel(g * factor), _channel(b * factor), int(a))


def _unit(value: float, min_value: float, max_value: float) -> float:
    t = (float(value) - float(min_value)) / safe_range(min_value, max_value)
    return min(max(t, 0.0), 1.0)


def colormap_mapper(cmap: str = "inferno") -> ColorMapper:
    """Build a mapper backed by a named matplotlib colormap."""
    lut = colormaps[cmap]

    def _map(value: float, min_value: float, max_value: float, label: str) -> RGBA:
        if not math.isfinite(value):
            return MISSING_COLOR
        r, g, b, a = lut(_unit(value, min_value, max_value))
        return RGBA(_channel(r * 255.0), _channel(g * 255.0), _channel(b * 255.0), _channel(a * 255.0))

    return _map


def grayscale_mapper(value: float, min_value: float, max_value: float, label: str) -> RGBA:
    if not math.isfinite(value):
        return MISSING_COLOR
    level = _channel(round(_unit(value, min_value, max_value) * 255.0))
    return RGBA(level, level, level, 255)
