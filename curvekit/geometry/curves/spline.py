from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Sequence, Tuple, TypeVar

from curvekit.core.coordinates import Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Vector2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2
from curvekit.geometry.curves.approximation import sample_segments, second_derivative_segment_count
from curvekit.geometry.curves.contract import CurveKindMixin, PolylineResult, SegmentCount


S = TypeVar("S")
U = TypeVar("U")


def _de_casteljau(points: Sequence[Point2], t: float) -> Point2:
    d: List[Tuple[float, float]] = [(float(p.x), float(p.y)) for p in points]
    n = len(d) - 1
    for r in range(1, n + 1):
        for j in range(0, n - r + 1):
            d[j] = (
                (1.0 - t) * d[j][0] + t * d[j + 1][0],
                (1.0 - t) * d[j][1] + t * d[j + 1][1],
            )
    return Point2(d[0][0], d[0][1])


def _second_difference(a: Point2, b: Point2, c: Point2) -> Vector2:
    return Vector2(a.x - 2.0 * b.x + c.x, a.y - 2.0 * b.y + c.y)


def _hull(points: Sequence[Point2]) -> BoundingBox2:
    return BoundingBox2.from_extrema([p.x for p in points], [p.y for p in points])


@dataclass(frozen=True)
class QuadraticSpline(CurveKindMixin, Generic[S, U]):
    """Quadratic Bezier curve on t in [0, 1]."""

    p1: Point2[S, U]
    p2: Point2[S, U]
    p3: Point2[S, U]

    @staticmethod
    def from_control_points(points: Sequence[Point2[S, U]]) -> QuadraticSpline[S, U]:
        if len(points) != 3:
            raise ValueError(f"QuadraticSpline needs exactly 3 control points, got {len(points)}")
        return QuadraticSpline(points[0], points[1], points[2])

    @property
    def control_points(self) -> Tuple[Point2[S, U], Point2[S, U], Point2[S, U]]:
        return (self.p1, self.p2, self.p3)

    @property
    def start_point(self) -> Point2[S, U]:
        return self.p1

    @property
    def end_point(self) -> Point2[S, U]:
        return self.p3

    def point_on(self, t: float) -> Point2[S, U]:
        return _de_casteljau(self.control_points, float(t))

    def first_derivative(self, t: float) -> Vector2[S, U]:
        v1 = self.p2 - self.p1
        v2 = self.p3 - self.p2
        return (v1 * (1.0 - t) + v2 * t) * 2.0

    def second_derivative(self, t: float = 0.0) -> Vector2[S, U]:
        return _second_difference(self.p1, self.p2, self.p3) * 2.0

    def max_second_derivative_magnitude(self) -> float:
        return self.second_derivative().length()

    def reverse(self) -> QuadraticSpline[S, U]:
        return QuadraticSpline(self.p3, self.p2, self.p1)

    def transform_by(self, transform: Transform2[S, U]) -> QuadraticSpline[S, U]:
        return QuadraticSpline(*(transform.apply_point(p) for p in self.control_points))

    def at(self, rate: Rate) -> QuadraticSpline:
        return QuadraticSpline(*(p.scaled_coordinates(rate) for p in self.control_points))

    def at_(self, rate: Rate) -> QuadraticSpline:
        return QuadraticSpline(*(p.unscaled_coordinates(rate) for p in self.control_points))

    def place_in(self, frame: Frame2) -> QuadraticSpline:
        return QuadraticSpline(*(frame.place_point(p) for p in self.control_points))

    def relative_to(self, frame: Frame2) -> QuadraticSpline:
        return QuadraticSpline(*(frame.localize_point(p) for p in self.control_points))

    def bounding_box(self) -> BoundingBox2[S, U]:
        # Convex hull property: the curve never leaves its control polygon.
        return _hull(self.control_points)

    def segments(self, n: int) -> PolylineResult:
        return sample_segments(self.point_on, self.p1, self.p3, n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return second_derivative_segment_count(self.max_second_derivative_magnitude(), max_error)


@dataclass(frozen=True)
class CubicSpline(CurveKindMixin, Generic[S, U]):
    """Cubic Bezier curve on t in [0, 1]."""

    p1: Point2[S, U]
    p2: Point2[S, U]
    p3: Point2[S, U]
    p4: Point2[S, U]

    @staticmethod
    def from_control_points(points: Sequence[Point2[S, U]]) -> CubicSpline[S, U]:
        if len(points) != 4:
            raise ValueError(f"CubicSpline needs exactly 4 control points, got {len(points)}")
        return CubicSpline(points[0], points[1], points[2], points[3])

    @property
    def control_points(self) -> Tuple[Point2[S, U], Point2[S, U], Point2[S, U], Point2[S, U]]:
        return (self.p1, self.p2, self.p3, self.p4)

    @property
    def start_point(self) -> Point2[S, U]:
        return self.p1

    @property
    def end_point(self) -> Point2[S, U]:
        return self.p4

    def point_on(self, t: float) -> Point2[S, U]:
        return _de_casteljau(self.control_points, float(t))

    def first_derivative(self, t: float) -> Vector2[S, U]:
        v1 = self.p2 - self.p1
        v2 = self.p3 - self.p2
        v3 = self.p4 - self.p3
        s = 1.0 - t
        return (v1 * (s * s) + v2 * (2.0 * s * t) + v3 * (t * t)) * 3.0

    def second_derivative(self, t: float) -> Vector2[S, U]:
        d1 = _second_difference(self.p1, self.p2, self.p3)
        d2 = _second_difference(self.p2, self.p3, self.p4)
        return (d1 * (1.0 - t) + d2 * t) * 6.0

    def max_second_derivative_magnitude(self) -> float:
        # C'' is linear in t, so its magnitude peaks at an endpoint.
        d1 = _second_difference(self.p1, self.p2, self.p3)
        d2 = _second_difference(self.p2, self.p3, self.p4)
        return 6.0 * max(d1.length(), d2.length())

    def reverse(self) -> CubicSpline[S, U]:
        return CubicSpline(self.p4, self.p3, self.p2, self.p1)

    def transform_by(self, transform: Transform2[S, U]) -> CubicSpline[S, U]:
        return CubicSpline(*(transform.apply_point(p) for p in self.control_points))

    def at(self, rate: Rate) -> CubicSpline:
        return CubicSpline(*(p.scaled_coordinates(rate) for p in self.control_points))

    def at_(self, rate: Rate) -> CubicSpline:
        return CubicSpline(*(p.unscaled_coordinates(rate) for p in self.control_points))

    def place_in(self, frame: Frame2) -> CubicSpline:
        return CubicSpline(*(frame.place_point(p) for p in self.control_points))

    def relative_to(self, frame: Frame2) -> CubicSpline:
        return CubicSpline(*(frame.localize_point(p) for p in self.control_points))

    def bounding_box(self) -> BoundingBox2[S, U]:
        return _hull(self.control_points)

    def segments(self, n: int) -> PolylineResult:
        return sample_segments(self.point_on, self.p1, self.p4, n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return second_derivative_segment_count(self.max_second_derivative_magnitude(), max_error)


__all__ = ["QuadraticSpline", "CubicSpline"]
