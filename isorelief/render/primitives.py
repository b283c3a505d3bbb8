from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple, Union

from isorelief.color import RGBA


Point2 = Tuple[float, float]

WIRE_WIDTH = 0.5
WIRE_LIGHT = RGBA(0, 0, 0, 31)
WIRE_DARK = RGBA(255, 255, 255, 31)


@dataclass(frozen=True)
class FillTriangle:
    points: List[Point2] = field(default_factory=list)
    color: RGBA = RGBA(0, 0, 0, 255)
    kind: Literal["fill"] = "fill"


@dataclass(frozen=True)
class StrokeTriangle:
    """Closed three-edge outline."""
    points: List[Point2] = field(default_factory=list)
    color: RGBA = WIRE_LIGHT
    width: float = WIRE_WIDTH
    kind: Literal["stroke"] = "stroke"


Primitive = Union[FillTriangle, StrokeTriangle]


def wire_color(is_dark: bool) -> RGBA:
    return WIRE_DARK if is_dark else WIRE_LIGHT
