"""
Point, vector and direction value types.

Every type is generic over a coordinate-space marker ``S`` and (except
``Direction2``, which is dimensionless) a unit marker ``U``. The markers
exist only for static type checking; instances carry plain float
coordinates. ``curvekit.core.coordinates.Frame2`` is the only way to move a
value between spaces and ``curvekit.core.units.Rate`` the only way to change
its units.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

import numpy as np

from curvekit.core.units import Quantity, Rate
from curvekit.geometry.tolerance import EPS_ANG, EPS_POS, EPS_WELD


class GlobalSpace:
    """Default coordinate-space marker."""


class LocalSpace:
    """Marker for coordinates expressed in some local Frame2."""


S = TypeVar("S")
U = TypeVar("U")


# =============================================================================
# 2D
# =============================================================================

@dataclass(frozen=True)
class Vector2(Generic[S, U]):
    x: float
    y: float

    def __add__(self, other: Vector2[S, U]) -> Vector2[S, U]:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2[S, U]) -> Vector2[S, U]:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2[S, U]:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2[S, U]:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2[S, U]:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2[S, U]:
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def direction(self) -> Optional[Direction2[S]]:
        n = self.length()
        if n <= EPS_POS:
            return None
        return Direction2(self.x / n, self.y / n)


@dataclass(frozen=True)
class Direction2(Generic[S]):
    x: float
    y: float

    def __post_init__(self) -> None:
        if abs(math.hypot(self.x, self.y) - 1.0) > EPS_ANG:
            raise ValueError(f"Direction2 must be a unit vector, got ({self.x}, {self.y})")

    @staticmethod
    def from_angle(angle: float) -> Direction2:
        return Direction2(math.cos(angle), math.sin(angle))

    @staticmethod
    def positive_x() -> Direction2:
        return Direction2(1.0, 0.0)

    @staticmethod
    def positive_y() -> Direction2:
        return Direction2(0.0, 1.0)

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def perpendicular(self) -> Direction2[S]:
        """Counterclockwise perpendicular."""
        return Direction2(-self.y, self.x)

    def reverse(self) -> Direction2[S]:
        return Direction2(-self.x, -self.y)

    def dot(self, other: Direction2[S]) -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Point2(Generic[S, U]):
    x: float
    y: float

    def __add__(self, v: Vector2[S, U]) -> Point2[S, U]:
        return Point2(self.x + v.x, self.y + v.y)

    def __sub__(self, other: Point2[S, U]) -> Vector2[S, U]:
        return Vector2(self.x - other.x, self.y - other.y)

    def distance_from(self, other: Point2[S, U]) -> Quantity[U]:
        return Quantity(math.hypot(self.x - other.x, self.y - other.y))

    def midpoint(self, other: Point2[S, U]) -> Point2[S, U]:
        return Point2(self.x + 0.5 * (other.x - self.x), self.y + 0.5 * (other.y - self.y))

    def interpolate_from(self, other: Point2[S, U], t: float) -> Point2[S, U]:
        """Point at fraction ``t`` of the way from self to other."""
        if t <= 0.5:
            return Point2(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))
        # Interpolate from the far end so t == 1 reproduces other exactly.
        s = 1.0 - t
        return Point2(other.x + s * (self.x - other.x), other.y + s * (self.y - other.y))

    def scaled_coordinates(self, rate: Rate) -> Point2:
        return Point2(self.x * rate.value, self.y * rate.value)

    def unscaled_coordinates(self, rate: Rate) -> Point2:
        return Point2(self.x / rate.value, self.y / rate.value)

    def equals_within(self, other: Point2[S, U], tolerance: float = EPS_WELD) -> bool:
        return math.hypot(self.x - other.x, self.y - other.y) <= tolerance

    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @staticmethod
    def origin() -> Point2:
        return Point2(0.0, 0.0)


# =============================================================================
# 3D
# =============================================================================

@dataclass(frozen=True)
class Vector3(Generic[S, U]):
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3[S, U]) -> Vector3[S, U]:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3[S, U]) -> Vector3[S, U]:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3[S, U]:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3[S, U]:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector3[S, U]:
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Point3(Generic[S, U]):
    x: float
    y: float
    z: float

    def __add__(self, v: Vector3[S, U]) -> Point3[S, U]:
        return Point3(self.x + v.x, self.y + v.y, self.z + v.z)

    def __sub__(self, other: Point3[S, U]) -> Vector3[S, U]:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_from(self, other: Point3[S, U]) -> Quantity[U]:
        return Quantity(math.dist(self.coordinates(), other.coordinates()))

    def midpoint(self, other: Point3[S, U]) -> Point3[S, U]:
        return Point3(
            self.x + 0.5 * (other.x - self.x),
            self.y + 0.5 * (other.y - self.y),
            self.z + 0.5 * (other.z - self.z),
        )

    def equals_within(self, other: Point3[S, U], tolerance: float = EPS_WELD) -> bool:
        return math.dist(self.coordinates(), other.coordinates()) <= tolerance

    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


__all__ = [
    "GlobalSpace",
    "LocalSpace",
    "Vector2",
    "Direction2",
    "Point2",
    "Vector3",
    "Point3",
]
