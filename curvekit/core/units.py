from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict, Generic, Type, TypeVar


class Unitless:
    symbol: ClassVar[str] = ""
    scale_to_m: ClassVar[float] = 1.0


class Meters:
    symbol: ClassVar[str] = "m"
    scale_to_m: ClassVar[float] = 1.0


class Millimeters:
    symbol: ClassVar[str] = "mm"
    scale_to_m: ClassVar[float] = 0.001


class Centimeters:
    symbol: ClassVar[str] = "cm"
    scale_to_m: ClassVar[float] = 0.01


class Feet:
    symbol: ClassVar[str] = "ft"
    scale_to_m: ClassVar[float] = 0.3048


class Inches:
    symbol: ClassVar[str] = "in"
    scale_to_m: ClassVar[float] = 0.0254


class Pixels:
    # Screen space; only reachable from physical units through an explicit Rate.
    symbol: ClassVar[str] = "px"
    scale_to_m: ClassVar[float] = math.nan


U = TypeVar("U")
U1 = TypeVar("U1")
U2 = TypeVar("U2")

_LENGTH_UNITS: Dict[str, type] = {
    cls.symbol: cls for cls in (Meters, Millimeters, Centimeters, Feet, Inches)
}


@dataclass(frozen=True, order=True)
class Quantity(Generic[U]):
    """A float tagged with a unit marker.

    The unit only exists for the type checker: ``Quantity[Meters]`` and
    ``Quantity[Pixels]`` cannot be added or compared without a ``Rate``.
    """

    value: float

    @staticmethod
    def zero() -> "Quantity[U]":
        return Quantity(0.0)

    def __add__(self, other: "Quantity[U]") -> "Quantity[U]":
        return Quantity(self.value + other.value)

    def __sub__(self, other: "Quantity[U]") -> "Quantity[U]":
        return Quantity(self.value - other.value)

    def __neg__(self) -> "Quantity[U]":
        return Quantity(-self.value)

    def __abs__(self) -> "Quantity[U]":
        return Quantity(abs(self.value))

    def __mul__(self, scale: float) -> "Quantity[U]":
        return Quantity(self.value * float(scale))

    def __rmul__(self, scale: float) -> "Quantity[U]":
        return self.__mul__(scale)

    def ratio(self, other: "Quantity[U]") -> float:
        return self.value / other.value

    def is_positive(self) -> bool:
        # NaN compares false and is therefore rejected.
        return self.value > 0.0


@dataclass(frozen=True)
class Rate(Generic[U1, U2]):
    """Conversion factor: ``value`` units of U2 per unit of U1."""

    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value) or self.value <= 0.0:
            raise ValueError("conversion rate must be finite and positive")

    def inverse(self) -> "Rate[U2, U1]":
        return Rate(1.0 / self.value)


def at(rate: Rate[U1, U2], quantity: Quantity[U1]) -> Quantity[U2]:
    return Quantity(quantity.value * rate.value)


def at_(rate: Rate[U1, U2], quantity: Quantity[U2]) -> Quantity[U1]:
    return Quantity(quantity.value / rate.value)


def conversion_rate(source: Type[U1], target: Type[U2]) -> Rate[U1, U2]:
    src = float(getattr(source, "scale_to_m", math.nan))
    dst = float(getattr(target, "scale_to_m", math.nan))
    if not (math.isfinite(src) and math.isfinite(dst)):
        raise ValueError(f"no fixed conversion between {source.__name__} and {target.__name__}")
    if source is target:
        return Rate(1.0)
    return Rate(src / dst)


def unit_for_symbol(symbol: str) -> type:
    u = str(symbol).lower()
    if u not in _LENGTH_UNITS:
        raise ValueError(f"Unknown length unit: {symbol}")
    return _LENGTH_UNITS[u]


def parse_length(value: float, unit: str) -> Quantity[Meters]:
    return Quantity(float(value) * unit_for_symbol(unit).scale_to_m)


__all__ = [
    "Unitless",
    "Meters",
    "Millimeters",
    "Centimeters",
    "Feet",
    "Inches",
    "Pixels",
    "Quantity",
    "Rate",
    "at",
    "at_",
    "conversion_rate",
    "unit_for_symbol",
    "parse_length",
]
