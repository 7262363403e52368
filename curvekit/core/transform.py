from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import numpy as np

from curvekit.core.coordinates import Axis2
from curvekit.core.types import Direction2, Point2, Vector2
from curvekit.geometry.tolerance import EPS_ANG


S = TypeVar("S")
U = TypeVar("U")


def _identity() -> np.ndarray:
    return np.eye(3, dtype=float)


@dataclass(frozen=True, eq=False)
class Transform2(Generic[S, U]):
    """
    2D similarity transform stored as a 3x3 homogeneous matrix.

    Only translations, rotations, mirrors and uniform scalings (and their
    compositions) are representable; these are exactly the transforms under
    which every curve kind maps to a curve of the same kind.
    """

    matrix: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        m = np.asarray(self.matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError("Transform2 matrix must be 3x3")
        if not np.isfinite(m).all():
            raise ValueError("Transform2 matrix must be finite")
        if not np.allclose(m[2], [0.0, 0.0, 1.0]):
            raise ValueError("Transform2 matrix must be affine")
        lin = m[:2, :2]
        peak = float(np.abs(lin).max())
        # A zero scale maps every direction to the zero vector, so directions
        # (and with them elliptical-arc axes) have no image.
        if peak == 0.0:
            raise ValueError("Transform2 scale must be non-zero")
        # Compare columns at unit magnitude so tiny scales are judged like any other.
        unit = lin / peak
        gram = unit.T @ unit
        k2 = float(gram[0, 0])
        if abs(float(gram[1, 1]) - k2) > EPS_ANG * k2 or abs(float(gram[0, 1])) > EPS_ANG * k2:
            raise ValueError("Transform2 must be a similarity (uniform scale, no shear)")
        object.__setattr__(self, "matrix", m)

    @classmethod
    def identity(cls) -> Transform2:
        return cls()

    @classmethod
    def translation(cls, v: Vector2[S, U]) -> Transform2[S, U]:
        m = _identity()
        m[0, 2] = float(v.x)
        m[1, 2] = float(v.y)
        return cls(m)

    @classmethod
    def rotation_around(cls, center: Point2[S, U], angle: float) -> Transform2[S, U]:
        c, s = math.cos(angle), math.sin(angle)
        rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        return cls(_about(center, rot))

    @classmethod
    def mirror_across(cls, axis: Axis2[S, U]) -> Transform2[S, U]:
        dx, dy = float(axis.direction.x), float(axis.direction.y)
        # Householder reflection across the axis line.
        ref = np.array(
            [
                [dx * dx - dy * dy, 2.0 * dx * dy, 0.0],
                [2.0 * dx * dy, dy * dy - dx * dx, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )
        return cls(_about(axis.origin, ref))

    @classmethod
    def scaling_about(cls, center: Point2[S, U], k: float) -> Transform2[S, U]:
        sc = np.diag([float(k), float(k), 1.0])
        return cls(_about(center, sc))

    def then(self, other: Transform2[S, U]) -> Transform2[S, U]:
        """Apply self first, then other."""
        return Transform2(other.matrix @ self.matrix)

    # -- decomposition ---------------------------------------------------------

    def determinant(self) -> float:
        m = self.matrix
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

    def is_mirrored(self) -> bool:
        return self.determinant() < 0.0

    def scale_factor(self) -> float:
        m = self.matrix
        return math.hypot(float(m[0, 0]), float(m[1, 0]))

    def is_rigid(self) -> bool:
        return abs(self.scale_factor() - 1.0) <= EPS_ANG

    # -- application -----------------------------------------------------------

    def apply_point(self, p: Point2[S, U]) -> Point2[S, U]:
        m = self.matrix
        return Point2(
            float(m[0, 0] * p.x + m[0, 1] * p.y + m[0, 2]),
            float(m[1, 0] * p.x + m[1, 1] * p.y + m[1, 2]),
        )

    def apply_vector(self, v: Vector2[S, U]) -> Vector2[S, U]:
        m = self.matrix
        return Vector2(float(m[0, 0] * v.x + m[0, 1] * v.y), float(m[1, 0] * v.x + m[1, 1] * v.y))

    def apply_direction(self, d: Direction2[S]) -> Direction2[S]:
        v = self.apply_vector(Vector2(d.x, d.y))
        n = v.length()
        return Direction2(v.x / n, v.y / n)

    def apply_length(self, length: float) -> float:
        return length * self.scale_factor()

    def apply_angle(self, angle: float) -> float:
        """Image of a polar angle; the result is not wrapped to [-pi, pi]."""
        m = self.matrix
        base = math.atan2(float(m[1, 0]), float(m[0, 0]))
        # Rotation adds its angle; a reflection about angle phi maps a -> 2*phi - a.
        return base - angle if self.is_mirrored() else base + angle


def _about(center: Point2, linear: np.ndarray) -> np.ndarray:
    to_origin = _identity()
    to_origin[0, 2] = -float(center.x)
    to_origin[1, 2] = -float(center.y)
    back = _identity()
    back[0, 2] = float(center.x)
    back[1, 2] = float(center.y)
    return back @ linear @ to_origin


__all__ = ["Transform2"]
