from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Sequence, TypeVar

import numpy as np

from curvekit.core.types import Point2, Point3


S = TypeVar("S")
U = TypeVar("U")


@dataclass(frozen=True)
class BoundingBox2(Generic[S, U]):
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("BoundingBox2 extrema are inverted")

    @staticmethod
    def from_extrema(xs: Sequence[float], ys: Sequence[float]) -> BoundingBox2:
        return BoundingBox2(float(min(xs)), float(max(xs)), float(min(ys)), float(max(ys)))

    def union(self, other: BoundingBox2[S, U]) -> BoundingBox2[S, U]:
        return BoundingBox2(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
        )

    def center_point(self) -> Point2[S, U]:
        return Point2(self.min_x + 0.5 * (self.max_x - self.min_x), self.min_y + 0.5 * (self.max_y - self.min_y))

    def contains(self, p: Point2[S, U], tolerance: float = 0.0) -> bool:
        return (
            self.min_x - tolerance <= p.x <= self.max_x + tolerance
            and self.min_y - tolerance <= p.y <= self.max_y + tolerance
        )

    def dimensions(self) -> tuple[float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y)


@dataclass(frozen=True)
class BoundingBox3(Generic[S, U]):
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y or self.min_z > self.max_z:
            raise ValueError("BoundingBox3 extrema are inverted")

    def union(self, other: BoundingBox3[S, U]) -> BoundingBox3[S, U]:
        return BoundingBox3(
            min(self.min_x, other.min_x),
            max(self.max_x, other.max_x),
            min(self.min_y, other.min_y),
            max(self.max_y, other.max_y),
            min(self.min_z, other.min_z),
            max(self.max_z, other.max_z),
        )

    def center_point(self) -> Point3[S, U]:
        return Point3(
            self.min_x + 0.5 * (self.max_x - self.min_x),
            self.min_y + 0.5 * (self.max_y - self.min_y),
            self.min_z + 0.5 * (self.max_z - self.min_z),
        )

    def contains(self, p: Point3[S, U], tolerance: float = 0.0) -> bool:
        return (
            self.min_x - tolerance <= p.x <= self.max_x + tolerance
            and self.min_y - tolerance <= p.y <= self.max_y + tolerance
            and self.min_z - tolerance <= p.z <= self.max_z + tolerance
        )


def hull2(points: Iterable[Point2[S, U]]) -> Optional[BoundingBox2[S, U]]:
    pts = list(points)
    if not pts:
        return None
    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    lo, hi = arr.min(axis=0), arr.max(axis=0)
    return BoundingBox2(float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]))


def hull3(points: Iterable[Point3[S, U]]) -> Optional[BoundingBox3[S, U]]:
    pts = list(points)
    if not pts:
        return None
    arr = np.array([(p.x, p.y, p.z) for p in pts], dtype=float)
    lo, hi = arr.min(axis=0), arr.max(axis=0)
    return BoundingBox3(float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]), float(lo[2]), float(hi[2]))


__all__ = ["BoundingBox2", "BoundingBox3", "hull2", "hull3"]
