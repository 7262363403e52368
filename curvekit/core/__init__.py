from curvekit.core.units import Meters, Pixels, Quantity, Rate, Unitless, at, at_, conversion_rate
from curvekit.core.types import Direction2, GlobalSpace, LocalSpace, Point2, Point3, Vector2, Vector3
from curvekit.core.coordinates import Axis2, Frame2
from curvekit.core.transform import Transform2

__all__ = [
    "Meters",
    "Pixels",
    "Unitless",
    "Quantity",
    "Rate",
    "at",
    "at_",
    "conversion_rate",
    "GlobalSpace",
    "LocalSpace",
    "Point2",
    "Vector2",
    "Direction2",
    "Point3",
    "Vector3",
    "Axis2",
    "Frame2",
    "Transform2",
]
