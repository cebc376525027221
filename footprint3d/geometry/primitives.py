from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple


Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]
TriangleIdx = Tuple[int, int, int]


def as_points(points: Iterable[Iterable[float]]) -> List[Point2]:
    out: List[Point2] = []
    for p in points:
        x, y = p
        out.append((float(x), float(y)))
    return out


@dataclass(frozen=True)
class Footprint2D:
    """
    Building outline in local projected coordinates (meters).

    The ring is implicitly closed; callers are expected to pass it without a
    repeated closing point. Short rings are accepted here and rejected later,
    where an empty mesh is the defined result.
    """

    points: List[Point2] = field(default_factory=list)
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", as_points(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def reversed(self) -> "Footprint2D":
        return Footprint2D(points=list(reversed(self.points)), name=self.name)
