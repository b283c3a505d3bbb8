"""
Flat Lambertian shading against a fixed directional light.

Vertices are given in logical space as (column, normalized height, row).
The shade factor is floored at AMBIENT_FLOOR so no face renders fully dark.
"""

from __future__ import annotations

import math

from isorelief.core.vector import Vector3
from isorelief.tolerance import EPS_NORMAL


LIGHT_DIRECTION = Vector3(1.0, 1.8, 0.8).normalize()
AMBIENT_FLOOR = 0.75
DIFFUSE_WEIGHT = 0.25

_LX, _LY, _LZ = LIGHT_DIRECTION.to_tuple()


def face_normal(v1: Vector3, v2: Vector3, v3: Vector3) -> Vector3:
    e1 = v2 - v1
    e2 = v3 - v1
    return e1.cross(e2).normalize()


def shade_factor(v1: Vector3, v2: Vector3, v3: Vector3) -> float:
    n = face_normal(v1, v2, v3)
    d = min(max(n.dot(LIGHT_DIRECTION), 0.0), 1.0)
    return AMBIENT_FLOOR + DIFFUSE_WEIGHT * d


def shade_factor_xyz(
    x1: float, y1: float, z1: float,
    x2: float, y2: float, z2: float,
    x3: float, y3: float, z3: float,
) -> float:
    """Scalar form of shade_factor for the per-triangle hot path."""
    ax, ay, az = x2 - x1, y2 - y1, z2 - z1
    bx, by, bz = x3 - x1, y3 - y1, z3 - z1
    nx = ay * bz - az * by
    ny = az * bx - ax * bz
    nz = ax * by - ay * bx
    ln = math.sqrt(nx * nx + ny * ny + nz * nz)
    if ln > EPS_NORMAL:
        nx, ny, nz = nx / ln, ny / ln, nz / ln
    d = min(max(nx * _LX + ny * _LY + nz * _LZ, 0.0), 1.0)
    return AMBIENT_FLOOR + DIFFUSE_WEIGHT * d
