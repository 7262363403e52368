from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from curvekit.core.coordinates import Axis2, Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Point3, Vector2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2, BoundingBox3, hull2, hull3
from curvekit.geometry.curves.line import LineSegment


S = TypeVar("S")
U = TypeVar("U")


def _segment_lengths(vertices: Sequence[Any]) -> List[float]:
    return [a.distance_from(b).value for a, b in zip(vertices[:-1], vertices[1:])]


def _refined_centroid(vertices: Sequence[Any], rough: Any, lengths: List[float]) -> Any:
    """Fold every segment midpoint into a running estimate.

    Starting from ``rough``, each segment pulls the estimate toward its
    midpoint by the fraction of the total length it represents. The result
    approximates (and is not identical to) the length-weighted centroid, and
    depends on traversal order, which is always vertex order.
    """
    total = sum(lengths, 0.0)
    if total == 0.0:
        return vertices[0]
    estimate = rough
    for i in range(len(vertices) - 1):
        midpoint = vertices[i].midpoint(vertices[i + 1])
        weight = lengths[i] / total
        estimate = estimate + (midpoint - estimate) * weight
    return estimate


@dataclass(frozen=True, init=False)
class Polyline2(Generic[S, U]):
    vertices: Tuple[Point2[S, U], ...]

    def __init__(self, vertices: Sequence[Point2[S, U]]) -> None:
        object.__setattr__(self, "vertices", tuple(vertices))

    def segments(self) -> List[LineSegment[S, U]]:
        return [LineSegment(a, b) for a, b in zip(self.vertices[:-1], self.vertices[1:])]

    def length(self) -> Quantity[U]:
        return Quantity(sum(_segment_lengths(self.vertices), 0.0))

    def bounding_box(self) -> Optional[BoundingBox2[S, U]]:
        return hull2(self.vertices)

    def centroid(self) -> Optional[Point2[S, U]]:
        box = self.bounding_box()
        if box is None:
            return None
        return _refined_centroid(self.vertices, box.center_point(), _segment_lengths(self.vertices))

    def reverse(self) -> Polyline2[S, U]:
        return Polyline2(self.vertices[::-1])

    def transform_by(self, transform: Transform2[S, U]) -> Polyline2[S, U]:
        return Polyline2([transform.apply_point(p) for p in self.vertices])

    def translate_by(self, displacement: Vector2[S, U]) -> Polyline2[S, U]:
        return self.transform_by(Transform2.translation(displacement))

    def rotate_around(self, center: Point2[S, U], angle: float) -> Polyline2[S, U]:
        return self.transform_by(Transform2.rotation_around(center, angle))

    def mirror_across(self, axis: Axis2[S, U]) -> Polyline2[S, U]:
        return self.transform_by(Transform2.mirror_across(axis))

    def scale_about(self, center: Point2[S, U], k: float) -> Polyline2[S, U]:
        return self.transform_by(Transform2.scaling_about(center, k))

    def at(self, rate: Rate) -> Polyline2:
        return Polyline2([p.scaled_coordinates(rate) for p in self.vertices])

    def at_(self, rate: Rate) -> Polyline2:
        return Polyline2([p.unscaled_coordinates(rate) for p in self.vertices])

    def place_in(self, frame: Frame2) -> Polyline2:
        return Polyline2([frame.place_point(p) for p in self.vertices])

    def relative_to(self, frame: Frame2) -> Polyline2:
        return Polyline2([frame.localize_point(p) for p in self.vertices])

    def on_plane(self, z: float = 0.0) -> Polyline3[S, U]:
        return Polyline3([Point3(p.x, p.y, float(z)) for p in self.vertices])


@dataclass(frozen=True, init=False)
class Polyline3(Generic[S, U]):
    vertices: Tuple[Point3[S, U], ...]

    def __init__(self, vertices: Sequence[Point3[S, U]]) -> None:
        object.__setattr__(self, "vertices", tuple(vertices))

    def segments(self) -> List[Tuple[Point3[S, U], Point3[S, U]]]:
        return list(zip(self.vertices[:-1], self.vertices[1:]))

    def length(self) -> Quantity[U]:
        return Quantity(sum(_segment_lengths(self.vertices), 0.0))

    def bounding_box(self) -> Optional[BoundingBox3[S, U]]:
        return hull3(self.vertices)

    def centroid(self) -> Optional[Point3[S, U]]:
        box = self.bounding_box()
        if box is None:
            return None
        return _refined_centroid(self.vertices, box.center_point(), _segment_lengths(self.vertices))

    def reverse(self) -> Polyline3[S, U]:
        return Polyline3(self.vertices[::-1])


__all__ = ["Polyline2", "Polyline3"]
