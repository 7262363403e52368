from .approximation import (
    arc_segment_count,
    line_segment_count,
    sample_segments,
    second_derivative_segment_count,
)
from .arc import Arc, Circle
from .contract import CurveKind, DiscretizationFailure, is_failure
from .curve import Curve, CurveKindName, CurvePrimitive, kind_of
from .ellipse import Ellipse, EllipticalArc
from .line import LineSegment
from .spline import CubicSpline, QuadraticSpline

__all__ = [
    "Curve",
    "CurvePrimitive",
    "CurveKindName",
    "kind_of",
    "CurveKind",
    "DiscretizationFailure",
    "is_failure",
    "LineSegment",
    "Arc",
    "Circle",
    "EllipticalArc",
    "Ellipse",
    "QuadraticSpline",
    "CubicSpline",
    "sample_segments",
    "line_segment_count",
    "arc_segment_count",
    "second_derivative_segment_count",
]
