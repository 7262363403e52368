from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from curvekit.core.coordinates import Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Vector2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2
from curvekit.geometry.curves.approximation import line_segment_count, sample_segments
from curvekit.geometry.curves.contract import CurveKindMixin, PolylineResult, SegmentCount, check_tolerance


S = TypeVar("S")
U = TypeVar("U")


@dataclass(frozen=True)
class LineSegment(CurveKindMixin, Generic[S, U]):
    start: Point2[S, U]
    end: Point2[S, U]

    @property
    def start_point(self) -> Point2[S, U]:
        return self.start

    @property
    def end_point(self) -> Point2[S, U]:
        return self.end

    def point_on(self, t: float) -> Point2[S, U]:
        return self.start.interpolate_from(self.end, t)

    def vector(self) -> Vector2[S, U]:
        return self.end - self.start

    def length(self) -> Quantity[U]:
        return self.start.distance_from(self.end)

    def midpoint(self) -> Point2[S, U]:
        return self.start.midpoint(self.end)

    def reverse(self) -> LineSegment[S, U]:
        return LineSegment(self.end, self.start)

    def transform_by(self, transform: Transform2[S, U]) -> LineSegment[S, U]:
        return LineSegment(transform.apply_point(self.start), transform.apply_point(self.end))

    def at(self, rate: Rate) -> LineSegment:
        return LineSegment(self.start.scaled_coordinates(rate), self.end.scaled_coordinates(rate))

    def at_(self, rate: Rate) -> LineSegment:
        return LineSegment(self.start.unscaled_coordinates(rate), self.end.unscaled_coordinates(rate))

    def place_in(self, frame: Frame2) -> LineSegment:
        return LineSegment(frame.place_point(self.start), frame.place_point(self.end))

    def relative_to(self, frame: Frame2) -> LineSegment:
        return LineSegment(frame.localize_point(self.start), frame.localize_point(self.end))

    def bounding_box(self) -> BoundingBox2[S, U]:
        a, b = self.start, self.end
        return BoundingBox2(min(a.x, b.x), max(a.x, b.x), min(a.y, b.y), max(a.y, b.y))

    def segments(self, n: int) -> PolylineResult:
        return sample_segments(self.point_on, self.start, self.end, n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return line_segment_count(max_error)

    def approximate(self, max_error: Quantity[U]) -> PolylineResult:
        # A straight segment has zero deviation from itself at any tolerance.
        from curvekit.geometry.polyline import Polyline2

        failure = check_tolerance(max_error)
        if failure is not None:
            return failure
        return Polyline2([self.start, self.end])


__all__ = ["LineSegment"]
