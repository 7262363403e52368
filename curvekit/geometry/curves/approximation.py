"""
Error-bounded discretization.

Given a tolerance ``e`` these functions return the smallest segment count
``n`` for which the polyline through ``n + 1`` uniformly spaced parameter
values stays within ``e`` of the true curve. Counts may be conservative but
are never too small.

Two bounds are used:

 - arcs use the sagitta of a circular segment: a chord spanning angle ``phi``
   deviates from its arc by ``r * (1 - cos(phi / 2))``;
 - everything else uses the linear interpolation error bound
   ``|C(t) - L(t)| <= h**2 * M / 8`` for a parameter step ``h`` and
   ``M = max |C''(t)|``.
"""

from __future__ import annotations

import math
import warnings
from typing import Callable, TYPE_CHECKING

from curvekit.core.types import Point2
from curvekit.core.units import Quantity
from curvekit.geometry.curves.contract import (
    DiscretizationFailure,
    PolylineResult,
    SegmentCount,
    check_segment_count,
    check_tolerance,
)
from curvekit.geometry.tolerance import LARGE_SEGMENT_COUNT

if TYPE_CHECKING:
    from curvekit.geometry.curves.contract import CurveKind


def sample_segments(point_on: Callable[[float], Point2], start: Point2, end: Point2, n: int) -> PolylineResult:
    """Polyline through point_on(i / n) for i = 0..n, endpoints pinned exactly."""
    from curvekit.geometry.polyline import Polyline2

    failure = check_segment_count(n)
    if failure is not None:
        return failure
    vertices = [start]
    for i in range(1, n):
        vertices.append(point_on(float(i) / float(n)))
    vertices.append(end)
    return Polyline2(vertices)


def approximate(curve: CurveKind, max_error: Quantity) -> PolylineResult:
    n = curve.num_approximation_segments(max_error)
    if isinstance(n, DiscretizationFailure):
        return n
    return curve.segments(n)


def line_segment_count(max_error: Quantity) -> SegmentCount:
    failure = check_tolerance(max_error)
    if failure is not None:
        return failure
    return 1


def arc_segment_count(radius: float, swept_angle: float, max_error: Quantity) -> SegmentCount:
    failure = check_tolerance(max_error)
    if failure is not None:
        return failure
    e = float(max_error.value)
    r = abs(float(radius))
    sweep = abs(float(swept_angle))
    if sweep == 0.0 or e >= 2.0 * r:
        return 1
    if e >= r:
        # Chords spanning more than half a circle deviate from the arc by
        # more than their sagitta, so never let one segment exceed pi.
        max_segment_angle = math.pi
    else:
        # 2 * acos(1 - e / r), rewritten to stay accurate for e << r.
        max_segment_angle = 4.0 * math.asin(math.sqrt(e / (2.0 * r)))
    if max_segment_angle <= 0.0:
        return _too_fine(e)
    return _finalize(sweep / max_segment_angle, e)


def second_derivative_segment_count(max_second_derivative: float, max_error: Quantity) -> SegmentCount:
    failure = check_tolerance(max_error)
    if failure is not None:
        return failure
    m = abs(float(max_second_derivative))
    if m == 0.0:
        return 1
    e = float(max_error.value)
    return _finalize(math.sqrt(m / (8.0 * e)), e)


def _finalize(raw: float, e: float) -> SegmentCount:
    if not math.isfinite(raw):
        return _too_fine(e)
    n = max(1, int(math.ceil(raw)))
    if n > LARGE_SEGMENT_COUNT:
        warnings.warn(
            f"approximation tolerance {e!r} requires {n} segments",
            RuntimeWarning,
            stacklevel=3,
        )
    return n


def _too_fine(e: float) -> DiscretizationFailure:
    return DiscretizationFailure(
        code="invalid_tolerance",
        message=f"approximation tolerance {e!r} is too small to yield a finite segment count",
    )


__all__ = [
    "sample_segments",
    "approximate",
    "line_segment_count",
    "arc_segment_count",
    "second_derivative_segment_count",
]
