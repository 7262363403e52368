from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from curvekit.core.coordinates import Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2
from curvekit.geometry.curves.approximation import arc_segment_count, sample_segments
from curvekit.geometry.curves.contract import CurveKindMixin, PolylineResult, SegmentCount
from curvekit.geometry.tolerance import EPS_POS, EPS_WELD


S = TypeVar("S")
U = TypeVar("U")

TWO_PI = 2.0 * math.pi


def _norm_angle(a: float) -> float:
    out = float(a) % TWO_PI
    if out < 0.0:
        out += TWO_PI
    return out


def _ccw_delta(a0: float, a1: float) -> float:
    d = _norm_angle(a1) - _norm_angle(a0)
    if d < 0.0:
        d += TWO_PI
    return d


def angle_in_sweep(start_angle: float, swept_angle: float, a: float, eps: float = 0.0) -> bool:
    if abs(swept_angle) >= TWO_PI:
        return True
    if swept_angle >= 0.0:
        return _ccw_delta(start_angle, a) <= swept_angle + eps
    return _ccw_delta(a, start_angle) <= -swept_angle + eps


@dataclass(frozen=True)
class Circle(Generic[S, U]):
    center: Point2[S, U]
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0.0:
            raise ValueError(f"circle radius must be finite and non-negative, got {self.radius}")

    def to_arc(self) -> Arc[S, U]:
        return Arc(center=self.center, radius=self.radius, start_angle=0.0, end_angle=TWO_PI)


@dataclass(frozen=True)
class Arc(CurveKindMixin, Generic[S, U]):
    """Circular arc swept from ``start_angle`` to ``end_angle`` (radians).

    The sweep is signed: ``end_angle > start_angle`` runs counterclockwise.
    Storing both angles (rather than a start angle plus sweep) keeps
    ``reverse`` an exact swap.
    """

    center: Point2[S, U]
    radius: float
    start_angle: float
    end_angle: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0.0:
            raise ValueError(f"arc radius must be finite and non-negative, got {self.radius}")
        if not (math.isfinite(self.start_angle) and math.isfinite(self.end_angle)):
            raise ValueError("arc angles must be finite")

    @staticmethod
    def from_endpoints(start: Point2[S, U], end: Point2[S, U], swept_angle: float) -> Arc[S, U]:
        theta = float(swept_angle)
        half = 0.5 * theta
        if abs(math.sin(half)) <= EPS_POS:
            raise ValueError("swept angle must be non-zero and not a full turn")
        x1, y1 = float(start.x), float(start.y)
        x2, y2 = float(end.x), float(end.y)
        chord = math.hypot(x2 - x1, y2 - y1)
        if chord <= EPS_POS:
            raise ValueError("arc requires distinct endpoints")
        radius = abs(chord / (2.0 * math.sin(half)))

        mx, my = (x1 + x2) * 0.5, (y1 + y2) * 0.5
        nx, ny = -(y2 - y1) / chord, (x2 - x1) / chord
        # Signed offset of the center to the left of the chord; negative for
        # sweeps past a half turn and for clockwise arcs.
        h = 0.5 * chord / math.tan(half)
        cx, cy = mx + h * nx, my + h * ny

        a0 = math.atan2(y1 - cy, x1 - cx)
        return Arc(center=Point2(cx, cy), radius=radius, start_angle=a0, end_angle=a0 + theta)

    @staticmethod
    def from_bulge(start: Point2[S, U], end: Point2[S, U], bulge: float) -> Arc[S, U]:
        b = float(bulge)
        if abs(b) <= EPS_POS:
            raise ValueError("bulge cannot be zero for arc")
        return Arc.from_endpoints(start, end, 4.0 * math.atan(b))

    @staticmethod
    def through_points(p1: Point2[S, U], p2: Point2[S, U], p3: Point2[S, U]) -> Optional[Arc[S, U]]:
        """Arc starting at p1, passing through p2 and ending at p3; None if collinear."""
        ax, ay = p1.x, p1.y
        bx, by = p2.x, p2.y
        cx, cy = p3.x, p3.y
        d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
        if abs(d) <= EPS_POS:
            return None
        a2 = ax * ax + ay * ay
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
        uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
        center = Point2(ux, uy)
        radius = math.hypot(ax - ux, ay - uy)
        a_start = math.atan2(ay - uy, ax - ux)
        a_end = math.atan2(cy - uy, cx - ux)
        turn = (bx - ax) * (cy - by) - (by - ay) * (cx - bx)
        if turn > 0.0:
            sweep = _ccw_delta(a_start, a_end)
        else:
            sweep = -_ccw_delta(a_end, a_start)
        return Arc(center=center, radius=radius, start_angle=a_start, end_angle=a_start + sweep)

    @property
    def center_point(self) -> Point2[S, U]:
        return self.center

    @property
    def swept_angle(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def start_point(self) -> Point2[S, U]:
        return self._point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point2[S, U]:
        return self._point_at_angle(self.end_angle)

    def _point_at_angle(self, a: float) -> Point2[S, U]:
        return Point2(
            float(self.center.x + self.radius * math.cos(a)),
            float(self.center.y + self.radius * math.sin(a)),
        )

    def point_on(self, t: float) -> Point2[S, U]:
        return self._point_at_angle(self.start_angle + float(t) * self.swept_angle)

    def contains_angle(self, a: float, eps: float = EPS_WELD) -> bool:
        return angle_in_sweep(self.start_angle, self.swept_angle, a, eps)

    def reverse(self) -> Arc[S, U]:
        return Arc(center=self.center, radius=self.radius, start_angle=self.end_angle, end_angle=self.start_angle)

    def transform_by(self, transform: Transform2[S, U]) -> Arc[S, U]:
        return Arc(
            center=transform.apply_point(self.center),
            radius=transform.apply_length(self.radius),
            start_angle=transform.apply_angle(self.start_angle),
            end_angle=transform.apply_angle(self.end_angle),
        )

    def at(self, rate: Rate) -> Arc:
        return Arc(self.center.scaled_coordinates(rate), self.radius * rate.value, self.start_angle, self.end_angle)

    def at_(self, rate: Rate) -> Arc:
        return Arc(self.center.unscaled_coordinates(rate), self.radius / rate.value, self.start_angle, self.end_angle)

    def place_in(self, frame: Frame2) -> Arc:
        return Arc(
            center=frame.place_point(self.center),
            radius=self.radius,
            start_angle=frame.place_angle(self.start_angle),
            end_angle=frame.place_angle(self.end_angle),
        )

    def relative_to(self, frame: Frame2) -> Arc:
        return Arc(
            center=frame.localize_point(self.center),
            radius=self.radius,
            start_angle=frame.localize_angle(self.start_angle),
            end_angle=frame.localize_angle(self.end_angle),
        )

    def bounding_box(self) -> BoundingBox2[S, U]:
        pts: List[Point2[S, U]] = [self.start_point, self.end_point]
        cx, cy, r = self.center.x, self.center.y, self.radius
        extremes = (
            (0.0, Point2(cx + r, cy)),
            (0.5 * math.pi, Point2(cx, cy + r)),
            (math.pi, Point2(cx - r, cy)),
            (1.5 * math.pi, Point2(cx, cy - r)),
        )
        for angle, p in extremes:
            if angle_in_sweep(self.start_angle, self.swept_angle, angle):
                pts.append(p)
        return BoundingBox2.from_extrema([p.x for p in pts], [p.y for p in pts])

    def segments(self, n: int) -> PolylineResult:
        return sample_segments(self.point_on, self.start_point, self.end_point, n)

    def num_approximation_segments(self, max_error: Quantity[U]) -> SegmentCount:
        return arc_segment_count(self.radius, self.swept_angle, max_error)


__all__ = ["Arc", "Circle", "angle_in_sweep"]
