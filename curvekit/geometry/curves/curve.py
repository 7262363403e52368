from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union, assert_never

from curvekit.core.coordinates import Axis2, Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Vector2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2
from curvekit.geometry.curves.arc import Arc, Circle
from curvekit.geometry.curves.contract import PolylineResult, SegmentCount
from curvekit.geometry.curves.ellipse import Ellipse, EllipticalArc
from curvekit.geometry.curves.line import LineSegment
from curvekit.geometry.curves.spline import CubicSpline, QuadraticSpline


S = TypeVar("S")
U = TypeVar("U")
U2 = TypeVar("U2")
G = TypeVar("G")
L = TypeVar("L")

CurvePrimitive = Union[LineSegment, Arc, EllipticalArc, QuadraticSpline, CubicSpline]
CurveKindName = Literal["line_segment", "arc", "elliptical_arc", "quadratic_spline", "cubic_spline"]


def kind_of(p: CurvePrimitive) -> CurveKindName:
    if isinstance(p, LineSegment):
        return "line_segment"
    if isinstance(p, Arc):
        return "arc"
    if isinstance(p, EllipticalArc):
        return "elliptical_arc"
    if isinstance(p, QuadraticSpline):
        return "quadratic_spline"
    if isinstance(p, CubicSpline):
        return "cubic_spline"
    assert_never(p)


@dataclass(frozen=True)
class Curve(Generic[S, U]):
    """
    Closed union over the five curve kinds.

    Every operation forwards to the wrapped primitive and re-wraps the
    result, so the kind is preserved. Since ``primitive`` is typed as the
    CurvePrimitive union, a type checker rejects any forwarded call that one
    of the kinds does not implement; ``kind_of`` additionally matches the
    union exhaustively.
    """

    primitive: CurvePrimitive

    def __post_init__(self) -> None:
        if not isinstance(self.primitive, (LineSegment, Arc, EllipticalArc, QuadraticSpline, CubicSpline)):
            raise TypeError(f"Unsupported curve kind: {type(self.primitive).__name__}")

    # -- construction ----------------------------------------------------------

    @staticmethod
    def line_segment(segment: LineSegment[S, U]) -> Curve[S, U]:
        return Curve(segment)

    @staticmethod
    def arc(arc: Arc[S, U]) -> Curve[S, U]:
        return Curve(arc)

    @staticmethod
    def elliptical_arc(arc: EllipticalArc[S, U]) -> Curve[S, U]:
        return Curve(arc)

    @staticmethod
    def quadratic_spline(spline: QuadraticSpline[S, U]) -> Curve[S, U]:
        return Curve(spline)

    @staticmethod
    def cubic_spline(spline: CubicSpline[S, U]) -> Curve[S, U]:
        return Curve(spline)

    @staticmethod
    def circle(circle: Circle[S, U]) -> Curve[S, U]:
        """Full counterclockwise arc starting at angle 0; there is no way back."""
        return Curve(circle.to_arc())

    @staticmethod
    def ellipse(ellipse: Ellipse[S, U]) -> Curve[S, U]:
        return Curve(ellipse.to_elliptical_arc())

    # -- queries ---------------------------------------------------------------

    @property
    def kind(self) -> CurveKindName:
        return kind_of(self.primitive)

    @property
    def start_point(self) -> Point2[S, U]:
        return self.primitive.start_point

    @property
    def end_point(self) -> Point2[S, U]:
        return self.primitive.end_point

    def point_on(self, t: float) -> Point2[S, U]:
        return self.primitive.point_on(t)

    def bounding_box(self) -> BoundingBox2[S, U]:
        return self.primitive.bounding_box()

    # -- transforms ------------------------------------------------------------

    def reverse(self) -> Curve[S, U]:
        return Curve(self.primitive.reverse())

    def transform_by(self, transform: Transform2[S, U]) -> Curve[S, U]:
        return Curve(self.primitive.transform_by(transform))

    def translate_by(self, displacement: Vector2[S, U]) -> Curve[S, U]:
        return Curve(self.primitive.translate_by(displacement))

    def rotate_around(self, center: Point2[S, U], angle: float) -> Curve[S, U]:
        return Curve(self.primitive.rotate_around(center, angle))

    def mirror_across(self, axis: Axis2[S, U]) -> Curve[S, U]:
        return Curve(self.primitive.mirror_across(axis))

    def scale_about(self, center: Point2[S, U], k: float) -> Curve[S, U]:
        return Curve(self.primitive.scale_about(center, k))

    def at(self, rate: Rate[U, U2]) -> Curve[S, U2]:
        return Curve(self.primitive.at(rate))

    def at_(self, rate: Rate[U2, U]) -> Curve[S, U2]:
        return Curve(self.primitive.at_(rate))

    def place_in(self, frame: Frame2[G, S, U]) -> Curve[G, U]:
        return Curve(self.primitive.place_in(frame))

    def relative_to(self, frame: Frame2[S, L, U]) -> Curve[L, U]:
        return Curve(self.primitive.relative_to(frame))

    # -- discretization --------------------------------------------------------

    def segments(self, n: int) -> PolylineResult:
        return self.primitive.segments(n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return self.primitive.num_approximation_segments(max_error)

    def approximate(self, max_error: Quantity[U]) -> PolylineResult:
        return self.primitive.approximate(max_error)


__all__ = ["Curve", "CurvePrimitive", "CurveKindName", "kind_of"]
