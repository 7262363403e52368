from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Optional, Protocol, TypeVar, Union

from curvekit.core.coordinates import Axis2, Frame2
from curvekit.core.transform import Transform2
from curvekit.core.types import Point2, Vector2
from curvekit.core.units import Quantity, Rate
from curvekit.geometry.bounds import BoundingBox2

if TYPE_CHECKING:
    from curvekit.geometry.polyline import Polyline2


FailureCode = Literal["invalid_segment_count", "invalid_tolerance"]

T = TypeVar("T")


@dataclass(frozen=True)
class DiscretizationFailure:
    code: FailureCode
    message: str


SegmentCount = Union[int, DiscretizationFailure]
PolylineResult = Union["Polyline2[Any, Any]", DiscretizationFailure]


def is_failure(result: object) -> bool:
    return isinstance(result, DiscretizationFailure)


def check_segment_count(n: object) -> Optional[DiscretizationFailure]:
    # bool is an int subclass but never a meaningful count.
    if isinstance(n, bool) or not isinstance(n, int):
        return DiscretizationFailure(
            code="invalid_segment_count",
            message=f"segment count must be a positive integer, got {n!r}",
        )
    if n <= 0:
        return DiscretizationFailure(code="invalid_segment_count", message=f"segment count must be positive, got {n}")
    return None


def check_tolerance(max_error: Quantity) -> Optional[DiscretizationFailure]:
    if not max_error.is_positive():
        return DiscretizationFailure(
            code="invalid_tolerance",
            message=f"approximation tolerance must be strictly positive, got {max_error.value!r}",
        )
    return None


class CurveKind(Protocol):
    """Operations every curve primitive provides.

    Transform-like methods return an instance of the same primitive class.
    ``segments``/``approximate`` never raise for bad input; they return a
    DiscretizationFailure instead.
    """

    @property
    def start_point(self) -> Point2: ...

    @property
    def end_point(self) -> Point2: ...

    def point_on(self, t: float) -> Point2: ...

    def reverse(self: T) -> T: ...

    def transform_by(self: T, transform: Transform2) -> T: ...

    def translate_by(self: T, displacement: Vector2) -> T: ...

    def rotate_around(self: T, center: Point2, angle: float) -> T: ...

    def mirror_across(self: T, axis: Axis2) -> T: ...

    def scale_about(self: T, center: Point2, k: float) -> T: ...

    def at(self, rate: Rate) -> Any: ...

    def at_(self, rate: Rate) -> Any: ...

    def place_in(self, frame: Frame2) -> Any: ...

    def relative_to(self, frame: Frame2) -> Any: ...

    def bounding_box(self) -> BoundingBox2: ...

    def segments(self, n: int) -> PolylineResult: ...

    def num_approximation_segments(self, max_error: Quantity) -> SegmentCount: ...

    def approximate(self, max_error: Quantity) -> PolylineResult: ...


class CurveKindMixin:
    """Shared plumbing: named transforms route through ``transform_by`` and
    ``approximate`` composes the segment count with ``segments``."""

    def translate_by(self: T, displacement: Vector2) -> T:
        return self.transform_by(Transform2.translation(displacement))  # type: ignore[attr-defined]

    def rotate_around(self: T, center: Point2, angle: float) -> T:
        return self.transform_by(Transform2.rotation_around(center, angle))  # type: ignore[attr-defined]

    def mirror_across(self: T, axis: Axis2) -> T:
        return self.transform_by(Transform2.mirror_across(axis))  # type: ignore[attr-defined]

    def scale_about(self: T, center: Point2, k: float) -> T:
        return self.transform_by(Transform2.scaling_about(center, k))  # type: ignore[attr-defined]

    def approximate(self, max_error: Quantity) -> PolylineResult:
        from curvekit.geometry.curves.approximation import approximate

        return approximate(self, max_error)  # type: ignore[arg-type]


__all__ = [
    "CurveKind",
    "CurveKindMixin",
    "DiscretizationFailure",
    "FailureCode",
    "PolylineResult",
    "SegmentCount",
    "check_segment_count",
    "check_tolerance",
    "is_failure",
]
