from isorelief.render.pipeline import SurfaceRequest, build_surface, needs_repaint, render_surface
from isorelief.render.primitives import FillTriangle, Primitive, StrokeTriangle, wire_color

__all__ = [
    "SurfaceRequest",
    "build_surface",
    "needs_repaint",
    "render_surface",
    "FillTriangle",
    "Primitive",
    "StrokeTriangle",
    "wire_color",
]
