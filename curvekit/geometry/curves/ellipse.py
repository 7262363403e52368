from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Tuple, TypeVar

from curvekit.core.coordinates import Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Direction2, Point2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2
from curvekit.geometry.curves.approximation import sample_segments, second_derivative_segment_count
from curvekit.geometry.curves.arc import TWO_PI, angle_in_sweep
from curvekit.geometry.curves.contract import CurveKindMixin, PolylineResult, SegmentCount
from curvekit.geometry.tolerance import EPS_ANG


S = TypeVar("S")
U = TypeVar("U")


def _check_axes(x_direction: Direction2, y_direction: Direction2) -> None:
    if abs(x_direction.dot(y_direction)) > EPS_ANG:
        raise ValueError("ellipse axes must be orthogonal")


def _check_radii(x_radius: float, y_radius: float) -> None:
    for r in (x_radius, y_radius):
        if not math.isfinite(r) or r < 0.0:
            raise ValueError(f"ellipse radii must be finite and non-negative, got {r}")


@dataclass(frozen=True)
class Ellipse(Generic[S, U]):
    axes: Frame2
    x_radius: float
    y_radius: float

    def __post_init__(self) -> None:
        _check_radii(self.x_radius, self.y_radius)

    def to_elliptical_arc(self) -> EllipticalArc[S, U]:
        return EllipticalArc(
            center=self.axes.origin,
            x_direction=self.axes.x_direction,
            y_direction=self.axes.y_direction,
            x_radius=self.x_radius,
            y_radius=self.y_radius,
            start_angle=0.0,
            end_angle=TWO_PI,
        )


@dataclass(frozen=True)
class EllipticalArc(CurveKindMixin, Generic[S, U]):
    """
    Elliptical arc parameterised by its eccentric angle:

        p(theta) = center + x_radius * cos(theta) * x_direction
                          + y_radius * sin(theta) * y_direction

    with theta running from start_angle to end_angle. The axes may be
    left-handed, which is how mirrored arcs are represented without
    touching the angles.
    """

    center: Point2[S, U]
    x_direction: Direction2[S]
    y_direction: Direction2[S]
    x_radius: float
    y_radius: float
    start_angle: float
    end_angle: float

    def __post_init__(self) -> None:
        _check_axes(self.x_direction, self.y_direction)
        _check_radii(self.x_radius, self.y_radius)
        if not (math.isfinite(self.start_angle) and math.isfinite(self.end_angle)):
            raise ValueError("elliptical arc angles must be finite")

    @property
    def swept_angle(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def axes(self) -> Frame2:
        return Frame2(self.center, self.x_direction, self.y_direction)

    @property
    def start_point(self) -> Point2[S, U]:
        return self._point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point2[S, U]:
        return self._point_at_angle(self.end_angle)

    def _point_at_angle(self, theta: float) -> Point2[S, U]:
        a = self.x_radius * math.cos(theta)
        b = self.y_radius * math.sin(theta)
        xd, yd = self.x_direction, self.y_direction
        return Point2(
            float(self.center.x + a * xd.x + b * yd.x),
            float(self.center.y + a * xd.y + b * yd.y),
        )

    def point_on(self, t: float) -> Point2[S, U]:
        return self._point_at_angle(self.start_angle + float(t) * self.swept_angle)

    def max_second_derivative_magnitude(self) -> float:
        # |p''(t)| = sweep**2 * |x_r cos * xd + y_r sin * yd| <= sweep**2 * max radius
        return max(self.x_radius, self.y_radius) * self.swept_angle * self.swept_angle

    def reverse(self) -> EllipticalArc[S, U]:
        return EllipticalArc(
            center=self.center,
            x_direction=self.x_direction,
            y_direction=self.y_direction,
            x_radius=self.x_radius,
            y_radius=self.y_radius,
            start_angle=self.end_angle,
            end_angle=self.start_angle,
        )

    def _with_frame(self, center: Point2, xd: Direction2, yd: Direction2, scale: float = 1.0) -> EllipticalArc:
        return EllipticalArc(
            center=center,
            x_direction=xd,
            y_direction=yd,
            x_radius=self.x_radius * scale,
            y_radius=self.y_radius * scale,
            start_angle=self.start_angle,
            end_angle=self.end_angle,
        )

    def transform_by(self, transform: Transform2[S, U]) -> EllipticalArc[S, U]:
        return self._with_frame(
            transform.apply_point(self.center),
            transform.apply_direction(self.x_direction),
            transform.apply_direction(self.y_direction),
            transform.scale_factor(),
        )

    def at(self, rate: Rate) -> EllipticalArc:
        return self._with_frame(self.center.scaled_coordinates(rate), self.x_direction, self.y_direction, rate.value)

    def at_(self, rate: Rate) -> EllipticalArc:
        return EllipticalArc(
            center=self.center.unscaled_coordinates(rate),
            x_direction=self.x_direction,
            y_direction=self.y_direction,
            x_radius=self.x_radius / rate.value,
            y_radius=self.y_radius / rate.value,
            start_angle=self.start_angle,
            end_angle=self.end_angle,
        )

    def place_in(self, frame: Frame2) -> EllipticalArc:
        return self._with_frame(
            frame.place_point(self.center),
            frame.place_direction(self.x_direction),
            frame.place_direction(self.y_direction),
        )

    def relative_to(self, frame: Frame2) -> EllipticalArc:
        return self._with_frame(
            frame.localize_point(self.center),
            frame.localize_direction(self.x_direction),
            frame.localize_direction(self.y_direction),
        )

    def _axis_extremes(self, ux: float, uy: float) -> Tuple[float, float]:
        """Eccentric angle and amplitude of the extremum of p . (ux, uy)."""
        cx = self.x_radius * (self.x_direction.x * ux + self.x_direction.y * uy)
        cy = self.y_radius * (self.y_direction.x * ux + self.y_direction.y * uy)
        return math.atan2(cy, cx), math.hypot(cx, cy)

    def bounding_box(self) -> BoundingBox2[S, U]:
        ends = [self.start_point, self.end_point]
        xs: List[float] = [p.x for p in ends]
        ys: List[float] = [p.y for p in ends]
        sweep = self.swept_angle
        theta_x, amp_x = self._axis_extremes(1.0, 0.0)
        theta_y, amp_y = self._axis_extremes(0.0, 1.0)
        if angle_in_sweep(self.start_angle, sweep, theta_x):
            xs.append(self.center.x + amp_x)
        if angle_in_sweep(self.start_angle, sweep, theta_x + math.pi):
            xs.append(self.center.x - amp_x)
        if angle_in_sweep(self.start_angle, sweep, theta_y):
            ys.append(self.center.y + amp_y)
        if angle_in_sweep(self.start_angle, sweep, theta_y + math.pi):
            ys.append(self.center.y - amp_y)
        return BoundingBox2.from_extrema(xs, ys)

    def segments(self, n: int) -> PolylineResult:
        return sample_segments(self.point_on, self.start_point, self.end_point, n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return second_derivative_segment_count(self.max_second_derivative_magnitude(), max_error)


__all__ = ["Ellipse", "EllipticalArc"]
