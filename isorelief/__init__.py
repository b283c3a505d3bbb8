"""
Isorelief

Shaded isometric relief rendering of 2D scalar grids.
"""

from isorelief.color import RGBA, ColorMapper, apply_shade, colormap_mapper, grayscale_mapper
from isorelief.render.pipeline import SurfaceRequest, build_surface, needs_repaint, render_surface
from isorelief.render.primitives import FillTriangle, StrokeTriangle
from isorelief.surface.depth import DepthMode

__version__ = "0.1.0"

__all__ = [
    "RGBA",
    "ColorMapper",
    "apply_shade",
    "colormap_mapper",
    "grayscale_mapper",
    "SurfaceRequest",
    "build_surface",
    "needs_repaint",
    "render_surface",
    "FillTriangle",
    "StrokeTriangle",
    "DepthMode",
]
