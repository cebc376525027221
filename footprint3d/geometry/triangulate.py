from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from footprint3d.geometry.polygon2d import is_convex_vertex, point_in_triangle, signed_area
from footprint3d.geometry.primitives import Point2, TriangleIdx
from footprint3d.geometry.tolerance import EPS_CONVEX


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriangulationConfig:
    """Ear clipping knobs; defaults suit footprints measured in meters."""

    # Upper bound on scan passes, as a multiple of the point count.
    max_pass_factor: int = 2
    convex_eps: float = EPS_CONVEX


@dataclass(frozen=True)
class TriangulationResult:
    triangles: List[TriangleIdx] = field(default_factory=list)
    method: str = "none"
    warnings: List[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return self.method == "fan"

    def to_dict(self) -> dict:
        return {
            "method": str(self.method),
            "triangle_count": len(self.triangles),
            "warnings": list(self.warnings),
        }


def _is_ear(
    points: Sequence[Point2],
    remaining: Sequence[int],
    prev: int,
    cur: int,
    nxt: int,
    convex_eps: float,
) -> bool:
    a, b, c = points[prev], points[cur], points[nxt]
    # remaining indices are kept counter-clockwise
    if not is_convex_vertex(a, b, c, 1, eps=convex_eps):
        return False
    for idx in remaining:
        if idx == prev or idx == cur or idx == nxt:
            continue
        if point_in_triangle(points[idx], a, b, c):
            return False
    return True


def ear_clip(points: Sequence[Point2], config: Optional[TriangulationConfig] = None) -> List[TriangleIdx]:
    """
    Ear clipping over an index list; the point sequence is never modified.

    Returns an empty list unless exactly ``len(points) - 2`` triangles were
    clipped, so callers can tell a complete triangulation from a stuck one.
    """
    cfg = config or TriangulationConfig()
    n = len(points)
    if n < 3:
        return []

    if signed_area(points) > 0.0:
        remaining = list(range(n))
    else:
        remaining = list(range(n - 1, -1, -1))

    tris: List[TriangleIdx] = []
    max_passes = max(1, int(cfg.max_pass_factor)) * n
    passes = 0
    while len(remaining) > 2 and passes < max_passes:
        passes += 1
        m = len(remaining)
        clipped = False
        for i in range(m):
            prev = remaining[(i - 1) % m]
            cur = remaining[i]
            nxt = remaining[(i + 1) % m]
            if _is_ear(points, remaining, prev, cur, nxt, cfg.convex_eps):
                tris.append((prev, cur, nxt))
                del remaining[i]
                clipped = True
                break
        if not clipped:
            break

    if len(tris) != n - 2:
        return []
    return tris


def fan(count: int) -> List[TriangleIdx]:
    """Fan from vertex 0; exact for convex rings only."""
    if count < 3:
        return []
    return [(0, i, i + 1) for i in range(1, count - 1)]


def triangulate(points: Sequence[Point2], config: Optional[TriangulationConfig] = None) -> TriangulationResult:
    n = len(points)
    if n < 3:
        return TriangulationResult(
            triangles=[],
            method="none",
            warnings=[f"Insufficient points for triangulation: {n} (need at least 3)."],
        )

    tris = ear_clip(points, config)
    if tris:
        return TriangulationResult(triangles=tris, method="ear_clip")

    logger.warning("Ear clipping failed for %d-point polygon; using triangle fan fallback.", n)
    return TriangulationResult(
        triangles=fan(n),
        method="fan",
        warnings=["Ear clipping did not complete; triangle fan fallback used (exact only for convex outlines)."],
    )
