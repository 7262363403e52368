from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from curvekit.core.types import Direction2, Point2, Vector2
from curvekit.geometry.tolerance import EPS_ANG


G = TypeVar("G")  # global (parent) space
L = TypeVar("L")  # local space
S = TypeVar("S")
U = TypeVar("U")


@dataclass(frozen=True)
class Axis2(Generic[S, U]):
    origin: Point2[S, U]
    direction: Direction2[S]

    @staticmethod
    def x() -> Axis2:
        return Axis2(Point2.origin(), Direction2.positive_x())


@dataclass(frozen=True)
class Frame2(Generic[G, L, U]):
    """Rigid 2D frame: an origin plus orthonormal x/y directions.

    The y direction may be either perpendicular of x, so left-handed
    (mirrored) frames are allowed. ``place_in`` maps local coordinates to the
    parent space, ``relative_to`` maps parent coordinates into the frame.
    """

    origin: Point2[G, U]
    x_direction: Direction2[G]
    y_direction: Direction2[G]

    def __post_init__(self) -> None:
        if abs(self.x_direction.dot(self.y_direction)) > EPS_ANG:
            raise ValueError("Frame2 axes must be orthogonal")

    @staticmethod
    def at_origin() -> Frame2:
        return Frame2(Point2.origin(), Direction2.positive_x(), Direction2.positive_y())

    @staticmethod
    def with_x_direction(origin: Point2[G, U], x_direction: Direction2[G]) -> Frame2[G, L, U]:
        return Frame2(origin, x_direction, x_direction.perpendicular())

    @staticmethod
    def with_angle(origin: Point2[G, U], angle: float) -> Frame2[G, L, U]:
        return Frame2.with_x_direction(origin, Direction2.from_angle(angle))

    def is_right_handed(self) -> bool:
        return (self.x_direction.x * self.y_direction.y - self.x_direction.y * self.y_direction.x) > 0.0

    def reverse_y(self) -> Frame2[G, L, U]:
        return Frame2(self.origin, self.x_direction, self.y_direction.reverse())

    # -- points ---------------------------------------------------------------

    def place_point(self, p: Point2[L, U]) -> Point2[G, U]:
        o, xd, yd = self.origin, self.x_direction, self.y_direction
        return Point2(o.x + p.x * xd.x + p.y * yd.x, o.y + p.x * xd.y + p.y * yd.y)

    def localize_point(self, p: Point2[G, U]) -> Point2[L, U]:
        dx = p.x - self.origin.x
        dy = p.y - self.origin.y
        xd, yd = self.x_direction, self.y_direction
        return Point2(dx * xd.x + dy * xd.y, dx * yd.x + dy * yd.y)

    # -- vectors and directions -------------------------------------------------

    def place_vector(self, v: Vector2[L, U]) -> Vector2[G, U]:
        xd, yd = self.x_direction, self.y_direction
        return Vector2(v.x * xd.x + v.y * yd.x, v.x * xd.y + v.y * yd.y)

    def localize_vector(self, v: Vector2[G, U]) -> Vector2[L, U]:
        xd, yd = self.x_direction, self.y_direction
        return Vector2(v.x * xd.x + v.y * xd.y, v.x * yd.x + v.y * yd.y)

    def place_direction(self, d: Direction2[L]) -> Direction2[G]:
        v = self.place_vector(Vector2(d.x, d.y))
        return _renormalized(v)

    def localize_direction(self, d: Direction2[G]) -> Direction2[L]:
        v = self.localize_vector(Vector2(d.x, d.y))
        return _renormalized(v)

    # -- angles ---------------------------------------------------------------

    def orientation(self) -> float:
        """+1.0 for right-handed frames, -1.0 for mirrored ones."""
        return 1.0 if self.is_right_handed() else -1.0

    def place_angle(self, angle: float) -> float:
        """Global polar angle of a local polar angle (not wrapped to [-pi, pi])."""
        a = self.x_direction.angle()
        return a + angle if self.is_right_handed() else a - angle

    def localize_angle(self, angle: float) -> float:
        a = self.x_direction.angle()
        return angle - a if self.is_right_handed() else a - angle


def _renormalized(v: Vector2) -> Direction2:
    d = v.direction()
    if d is None:
        raise ValueError("cannot convert a zero-length direction")
    return d


__all__ = ["Axis2", "Frame2"]
