from __future__ import annotations

import math
from typing import List

import numpy as np
import pytest

from curvekit.core.coordinates import Frame2
from curvekit.core.types import Direction2, Point2
from curvekit.geometry.curves import (
    Arc,
    Circle,
    CubicSpline,
    Curve,
    Ellipse,
    EllipticalArc,
    LineSegment,
    QuadraticSpline,
    kind_of,
)
from curvekit.geometry.curves.contract import CurveKindMixin


def test_curve_kind_tags(sample_curves: List[Curve]) -> None:
    kinds = [c.kind for c in sample_curves]
    assert kinds == ["line_segment", "arc", "arc", "elliptical_arc", "quadratic_spline", "cubic_spline"]
    assert kind_of(LineSegment(Point2(0.0, 0.0), Point2(1.0, 0.0))) == "line_segment"


def test_curve_rejects_unknown_primitive() -> None:
    with pytest.raises(TypeError):
        Curve("not a curve")  # type: ignore[arg-type]


def test_reverse_twice_is_identity_and_swaps_endpoints(sample_curves: List[Curve]) -> None:
    for c in sample_curves:
        r = c.reverse()
        assert r.kind == c.kind
        assert r.reverse() == c
        assert np.allclose(r.start_point.to_array(), c.end_point.to_array())
        assert np.allclose(r.end_point.to_array(), c.start_point.to_array())
        assert np.allclose(r.point_on(0.25).to_array(), c.point_on(0.75).to_array())


def test_point_on_hits_endpoints(sample_curves: List[Curve]) -> None:
    for c in sample_curves:
        assert np.allclose(c.point_on(0.0).to_array(), c.start_point.to_array())
        assert np.allclose(c.point_on(1.0).to_array(), c.end_point.to_array())


def test_bounding_box_contains_dense_samples(sample_curves: List[Curve]) -> None:
    for c in sample_curves:
        box = c.bounding_box()
        for t in np.linspace(0.0, 1.0, 721):
            assert box.contains(c.point_on(float(t)), tolerance=1e-9), (c.kind, float(t))


def test_arc_bounding_box_is_tight() -> None:
    arc = Arc(center=Point2(0.0, 0.0), radius=2.0, start_angle=0.25 * math.pi, end_angle=0.75 * math.pi)
    box = arc.bounding_box()
    assert box.max_y == 2.0
    assert box.min_y == pytest.approx(math.sqrt(2.0))
    assert box.min_x == pytest.approx(-math.sqrt(2.0))
    assert box.max_x == pytest.approx(math.sqrt(2.0))


def test_elliptical_arc_bounding_box_is_tight() -> None:
    full = Ellipse(Frame2.with_angle(Point2(1.0, 1.0), 0.5 * math.pi), 3.0, 1.0).to_elliptical_arc()
    box = full.bounding_box()
    assert box.min_x == pytest.approx(0.0)
    assert box.max_x == pytest.approx(2.0)
    assert box.min_y == pytest.approx(-2.0)
    assert box.max_y == pytest.approx(4.0)


def test_arc_from_bulge_semicircle() -> None:
    arc = Arc.from_bulge(Point2(0.0, 0.0), Point2(2.0, 0.0), 1.0)
    assert arc.radius == pytest.approx(1.0)
    assert arc.swept_angle == pytest.approx(math.pi)
    assert np.allclose(arc.start_point.to_array(), [0.0, 0.0])
    assert np.allclose(arc.end_point.to_array(), [2.0, 0.0])
    # Positive bulge runs counterclockwise, so the arc dips below the chord.
    assert np.allclose(arc.point_on(0.5).to_array(), [1.0, -1.0])
    with pytest.raises(ValueError):
        Arc.from_bulge(Point2(0.0, 0.0), Point2(2.0, 0.0), 0.0)


def test_arc_from_endpoints_quarter_turn() -> None:
    arc = Arc.from_endpoints(Point2(1.0, 0.0), Point2(0.0, 1.0), 0.5 * math.pi)
    assert np.allclose(arc.center_point.to_array(), [0.0, 0.0])
    assert arc.radius == pytest.approx(1.0)
    assert arc.contains_angle(0.25 * math.pi)
    assert not arc.contains_angle(math.pi)


def test_arc_through_three_points() -> None:
    arc = Arc.through_points(Point2(0.0, 0.0), Point2(1.0, 1.0), Point2(2.0, 0.0))
    assert arc is not None
    assert np.allclose(arc.center.to_array(), [1.0, 0.0])
    assert arc.radius == pytest.approx(1.0)
    assert arc.swept_angle == pytest.approx(-math.pi)
    assert np.allclose(arc.point_on(0.5).to_array(), [1.0, 1.0])
    assert Arc.through_points(Point2(0.0, 0.0), Point2(1.0, 1.0), Point2(2.0, 2.0)) is None


def test_circle_and_ellipse_convert_to_arc_kinds() -> None:
    c = Curve.circle(Circle(Point2(1.0, 2.0), 2.0))
    assert c.kind == "arc"
    assert isinstance(c.primitive, Arc)
    assert c.primitive.swept_angle == 2.0 * math.pi
    assert np.allclose(c.start_point.to_array(), c.end_point.to_array())

    e = Curve.ellipse(Ellipse(Frame2.at_origin(), 3.0, 1.0))
    assert e.kind == "elliptical_arc"
    assert isinstance(e.primitive, EllipticalArc)
    assert e.primitive.swept_angle == 2.0 * math.pi
    assert np.allclose(e.point_on(0.25).to_array(), [0.0, 1.0])


def test_primitive_constructors_validate_geometry() -> None:
    with pytest.raises(ValueError):
        Arc(center=Point2(0.0, 0.0), radius=-1.0, start_angle=0.0, end_angle=1.0)
    with pytest.raises(ValueError):
        Circle(Point2(0.0, 0.0), math.nan)
    with pytest.raises(ValueError):
        EllipticalArc(
            center=Point2(0.0, 0.0),
            x_direction=Direction2.positive_x(),
            y_direction=Direction2.from_angle(1.0),
            x_radius=1.0,
            y_radius=1.0,
            start_angle=0.0,
            end_angle=1.0,
        )
    with pytest.raises(ValueError):
        QuadraticSpline.from_control_points([Point2(0.0, 0.0), Point2(1.0, 1.0)])


def test_degenerate_primitives_are_legal() -> None:
    p = Point2(1.0, 1.0)
    seg = LineSegment(p, p)
    assert seg.length().value == 0.0
    zero_arc = Arc(center=p, radius=0.0, start_angle=0.0, end_angle=1.0)
    assert zero_arc.start_point == zero_arc.end_point
    assert zero_arc.bounding_box().dimensions() == (0.0, 0.0)


def test_spline_derivatives() -> None:
    q = QuadraticSpline(Point2(0.0, 0.0), Point2(2.0, 3.0), Point2(4.0, 0.0))
    d0 = q.first_derivative(0.0)
    assert (d0.x, d0.y) == (4.0, 6.0)
    dd = q.second_derivative()
    assert (dd.x, dd.y) == (0.0, -12.0)
    assert q.max_second_derivative_magnitude() == 12.0

    c = CubicSpline.from_control_points([Point2(0.0, 0.0), Point2(1.0, 3.0), Point2(3.0, -2.0), Point2(4.0, 1.0)])
    d1 = c.first_derivative(1.0)
    assert (d1.x, d1.y) == (3.0, 9.0)
    # |p1 - 2p2 + p3| = |(1, -8)|, |p2 - 2p3 + p4| = |(-1, 8)|
    assert c.max_second_derivative_magnitude() == pytest.approx(6.0 * math.hypot(1.0, 8.0))
    s0 = c.second_derivative(0.0)
    assert (s0.x, s0.y) == (6.0, -48.0)


def test_every_kind_implements_its_own_transform() -> None:
    assert "transform_by" not in vars(CurveKindMixin)
    for cls in (LineSegment, Arc, EllipticalArc, QuadraticSpline, CubicSpline):
        assert "transform_by" in vars(cls), cls.__name__


def test_bounding_boxes_of_several_curves_union(sample_curves: List[Curve]) -> None:
    boxes = [c.bounding_box() for c in sample_curves]
    total = boxes[0]
    for box in boxes[1:]:
        total = total.union(box)
    for c in sample_curves:
        for t in (0.0, 0.5, 1.0):
            assert total.contains(c.point_on(t), tolerance=1e-9)
    assert total.min_x == min(b.min_x for b in boxes)
    assert total.max_y == max(b.max_y for b in boxes)
