from __future__ import annotations

import numpy as np

from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Point3, Vector2
from curvekit.core.units import Quantity
from curvekit.geometry.bounds import BoundingBox2, BoundingBox3
from curvekit.geometry.curves import LineSegment
from curvekit.geometry.polyline import Polyline2, Polyline3


def _staircase() -> Polyline3:
    return Polyline3(
        [
            Point3(0.0, 0.0, 0.0),
            Point3(1.0, 0.0, 0.0),
            Point3(1.0, 2.0, 0.0),
            Point3(1.0, 2.0, 3.0),
        ]
    )


def test_polyline3_length_and_bounding_box() -> None:
    poly = _staircase()
    assert poly.length() == Quantity(6.0)
    assert poly.bounding_box() == BoundingBox3(0.0, 1.0, 0.0, 2.0, 0.0, 3.0)
    assert len(poly.segments()) == 3
    assert poly.reverse().vertices[0] == Point3(1.0, 2.0, 3.0)


def test_empty_polyline_measurements() -> None:
    for poly in (Polyline2([]), Polyline3([])):
        assert poly.length() == Quantity(0.0)
        assert poly.bounding_box() is None
        assert poly.centroid() is None
        assert poly.segments() == []


def test_single_vertex_polyline() -> None:
    p = Point2(2.5, -1.0)
    poly = Polyline2([p])
    assert poly.length() == Quantity(0.0)
    assert poly.segments() == []
    assert poly.bounding_box() == BoundingBox2(2.5, 2.5, -1.0, -1.0)
    assert poly.centroid() == p


def test_coincident_vertices_centroid_is_first_vertex() -> None:
    p = Point3(1.0, 1.0, 1.0)
    poly = Polyline3([p, p, p])
    assert poly.length() == Quantity(0.0)
    assert poly.centroid() == p


def test_centroid_folds_midpoints_in_vertex_order() -> None:
    poly = Polyline2([Point2(0.0, 0.0), Point2(2.0, 0.0), Point2(2.0, 2.0)])
    # Start at the box center (1, 1); each segment carries half the length.
    # (1, 1) -> (1, 0.5) after midpoint (1, 0) -> (1.5, 0.75) after midpoint (2, 1).
    assert poly.centroid() == Point2(1.5, 0.75)
    assert poly.reverse().centroid() != poly.centroid()


def test_centroid_of_straight_polylines() -> None:
    assert Polyline2([Point2(0.0, 0.0), Point2(4.0, 0.0)]).centroid() == Point2(2.0, 0.0)
    assert Polyline3([Point3(0.0, 0.0, 0.0), Point3(2.0, 0.0, 0.0)]).centroid() == Point3(1.0, 0.0, 0.0)


def test_polyline2_segments_and_length() -> None:
    poly = Polyline2([Point2(0.0, 0.0), Point2(3.0, 4.0), Point2(3.0, 0.0)])
    segs = poly.segments()
    assert segs == [
        LineSegment(Point2(0.0, 0.0), Point2(3.0, 4.0)),
        LineSegment(Point2(3.0, 4.0), Point2(3.0, 0.0)),
    ]
    assert poly.length() == Quantity(9.0)
    assert sum(s.length().value for s in segs) == 9.0


def test_polyline2_transforms_map_every_vertex() -> None:
    poly = Polyline2([Point2(0.0, 0.0), Point2(1.0, 0.0), Point2(1.0, 1.0)])
    moved = poly.translate_by(Vector2(2.0, 3.0))
    assert moved.vertices == (Point2(2.0, 3.0), Point2(3.0, 3.0), Point2(3.0, 4.0))
    rot = Transform2.rotation_around(Point2(0.0, 0.0), 0.9)
    turned = poly.transform_by(rot)
    assert np.isclose(turned.length().value, poly.length().value)
    scaled = poly.scale_about(Point2(0.0, 0.0), 3.0)
    assert scaled.length() == Quantity(6.0)


def test_polyline2_on_plane_lifts_to_3d() -> None:
    poly = Polyline2([Point2(0.0, 0.0), Point2(3.0, 4.0)])
    lifted = poly.on_plane(2.0)
    assert lifted.vertices == (Point3(0.0, 0.0, 2.0), Point3(3.0, 4.0, 2.0))
    assert lifted.length() == poly.length()
    box = lifted.bounding_box()
    assert box is not None
    assert (box.min_z, box.max_z) == (2.0, 2.0)


def test_length_is_the_vertex_order_sum_of_segment_lengths() -> None:
    poly = Polyline2([Point2(0.0, 0.0), Point2(1.0, 1.0), Point2(3.0, 2.0), Point2(3.5, -1.0), Point2(0.1, 0.2)])
    lengths = [s.length().value for s in poly.segments()]
    total = 0.0
    for x in lengths:
        total += x
    assert poly.length().value == total

    box = poly.bounding_box()
    assert box is not None
    estimate = box.center_point()
    for seg, x in zip(poly.segments(), lengths):
        estimate = estimate + (seg.midpoint() - estimate) * (x / total)
    assert poly.centroid() == estimate


def test_bounding_box_union() -> None:
    a = BoundingBox2(0.0, 1.0, 0.0, 1.0)
    b = BoundingBox2(2.0, 3.0, -1.0, 0.5)
    assert a.union(b) == BoundingBox2(0.0, 3.0, -1.0, 1.0)
    assert a.union(b) == b.union(a)

    lower = _staircase().bounding_box()
    upper = Polyline3([Point3(-1.0, 5.0, 1.0), Point3(0.5, 6.0, 4.0)]).bounding_box()
    assert lower is not None and upper is not None
    assert lower.union(upper) == BoundingBox3(-1.0, 1.0, 0.0, 6.0, 0.0, 4.0)
