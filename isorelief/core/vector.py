"""
Isorelief vector math

Minimal 3D vector used for per-face shading normals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from isorelief.tolerance import EPS_NORMAL


@dataclass(frozen=True)
class Vector3:
    """3D vector for face normals and light directions."""
    x: float
    y: float
    z: float

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> 'Vector3':
        """
        Return unit vector.

        Vectors no longer than EPS_NORMAL are returned unchanged so a
        collapsed face yields a near-zero normal instead of NaN.
        """
        L = self.length()
        if L <= EPS_NORMAL:
            return self
        return Vector3(self.x / L, self.y / L, self.z / L)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)
