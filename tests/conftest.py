from __future__ import annotations

from typing import List

import pytest

from curvekit.core.types import Direction2, Point2
from curvekit.geometry.curves import Arc, CubicSpline, Curve, EllipticalArc, LineSegment, QuadraticSpline


def _sample_curves() -> List[Curve]:
    xd = Direction2.from_angle(0.3)
    return [
        Curve.line_segment(LineSegment(Point2(0.0, 0.0), Point2(3.0, 4.0))),
        Curve.arc(Arc(center=Point2(1.0, -1.0), radius=2.0, start_angle=0.25, end_angle=2.0)),
        Curve.arc(Arc(center=Point2(-2.0, 0.5), radius=1.5, start_angle=1.0, end_angle=-3.5)),
        Curve.elliptical_arc(
            EllipticalArc(
                center=Point2(0.5, 0.5),
                x_direction=xd,
                y_direction=xd.perpendicular(),
                x_radius=3.0,
                y_radius=1.0,
                start_angle=-0.4,
                end_angle=2.5,
            )
        ),
        Curve.quadratic_spline(QuadraticSpline(Point2(0.0, 0.0), Point2(2.0, 3.0), Point2(4.0, 0.0))),
        Curve.cubic_spline(CubicSpline(Point2(0.0, 0.0), Point2(1.0, 3.0), Point2(3.0, -2.0), Point2(4.0, 1.0))),
    ]


@pytest.fixture
def sample_curves() -> List[Curve]:
    return _sample_curves()
