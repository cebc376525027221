from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple


Point3 = Tuple[float, float, float]

UpAxis = Literal["Z_UP", "Y_UP"]

UP_AXES = ("Z_UP", "Y_UP")


@dataclass(frozen=True)
class AxisConvention:
    """
    Mapping from planar footprint coordinates plus height into 3D.

    Z_UP keeps the footprint in the XY plane. Y_UP puts it in the XZ plane
    with height along +Y, the layout used by common game/AR engines.
    """

    up_axis: UpAxis = "Z_UP"

    def __post_init__(self) -> None:
        if self.up_axis not in UP_AXES:
            raise ValueError(f"Unsupported up axis: {self.up_axis!r}")

    @property
    def up(self) -> Point3:
        return up_vector(self.up_axis)

    def lift(self, x: float, y: float, height: float) -> Point3:
        return lift(x, y, height, self.up_axis)


def up_vector(up_axis: UpAxis = "Z_UP") -> Point3:
    if up_axis == "Y_UP":
        return (0.0, 1.0, 0.0)
    return (0.0, 0.0, 1.0)


def lift(x: float, y: float, height: float, up_axis: UpAxis = "Z_UP") -> Point3:
    if up_axis == "Y_UP":
        return (float(x), float(height), float(y))
    return (float(x), float(y), float(height))
