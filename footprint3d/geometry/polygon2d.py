from __future__ import annotations

import math
from typing import List, Sequence

from footprint3d.geometry.primitives import Point2
from footprint3d.geometry.tolerance import (
    EPS_BARYCENTRIC,
    EPS_CENTROID_AREA,
    EPS_CLOSING,
    EPS_CONVEX,
    EPS_EDGE,
    EPS_TRI_DENOM,
)


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def signed_area(poly: Sequence[Point2]) -> float:
    """Shoelace area; positive for counter-clockwise rings."""
    n = len(poly)
    if n < 3:
        return 0.0
    s = 0.0
    for i in range(n):
        x1, y1 = poly[i]
        x2, y2 = poly[(i + 1) % n]
        s += x1 * y2 - x2 * y1
    return 0.5 * s


def orientation_sign(poly: Sequence[Point2]) -> int:
    return -1 if signed_area(poly) < 0.0 else 1


def centroid(poly: Sequence[Point2], area_eps: float = EPS_CENTROID_AREA) -> Point2:
    """
    Area centroid of a simple polygon.

    Near-degenerate rings (collinear, collapsed) have an area close to zero and
    the 1/(6A) factor would blow up; those fall back to the mean of the points.
    Sums are taken relative to the first point so projected coordinates in the
    millions keep their precision.
    """
    n = len(poly)
    if n == 0:
        return (0.0, 0.0)

    ox, oy = float(poly[0][0]), float(poly[0][1])
    area = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        x1, y1 = poly[i][0] - ox, poly[i][1] - oy
        x2, y2 = poly[(i + 1) % n][0] - ox, poly[(i + 1) % n][1] - oy
        cross = x1 * y2 - x2 * y1
        area += cross
        cx += (x1 + x2) * cross
        cy += (y1 + y2) * cross
    area *= 0.5

    if abs(area) < area_eps:
        return (
            ox + sum(float(p[0]) - ox for p in poly) / n,
            oy + sum(float(p[1]) - oy for p in poly) / n,
        )
    factor = 1.0 / (6.0 * area)
    return (ox + cx * factor, oy + cy * factor)


def is_convex_vertex(prev: Point2, cur: Point2, nxt: Point2, orientation: int = 1, eps: float = EPS_CONVEX) -> bool:
    turn = _cross(cur[0] - prev[0], cur[1] - prev[1], nxt[0] - cur[0], nxt[1] - cur[1])
    return turn * (1.0 if orientation >= 0 else -1.0) > eps


def point_in_triangle(p: Point2, a: Point2, b: Point2, c: Point2) -> bool:
    """Barycentric containment test; edges and corners count as inside."""
    denom = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
    if abs(denom) < EPS_TRI_DENOM:
        return False
    w1 = ((b[1] - c[1]) * (p[0] - c[0]) + (c[0] - b[0]) * (p[1] - c[1])) / denom
    w2 = ((c[1] - a[1]) * (p[0] - c[0]) + (a[0] - c[0]) * (p[1] - c[1])) / denom
    w3 = 1.0 - w1 - w2
    return w1 >= -EPS_BARYCENTRIC and w2 >= -EPS_BARYCENTRIC and w3 >= -EPS_BARYCENTRIC


def triangle_area(a: Point2, b: Point2, c: Point2) -> float:
    return 0.5 * abs(_cross(b[0] - a[0], b[1] - a[1], c[0] - a[0], c[1] - a[1]))


def strip_closing_duplicate(points: Sequence[Point2], tol: float = EPS_CLOSING) -> List[Point2]:
    out = [(float(x), float(y)) for x, y in points]
    if len(out) >= 2:
        first, last = out[0], out[-1]
        if abs(first[0] - last[0]) < tol and abs(first[1] - last[1]) < tol:
            out.pop()
    return out


def drop_short_edges(points: Sequence[Point2], min_length: float = EPS_EDGE) -> List[Point2]:
    out: List[Point2] = []
    for x, y in points:
        p = (float(x), float(y))
        if out and math.hypot(p[0] - out[-1][0], p[1] - out[-1][1]) < min_length:
            continue
        out.append(p)
    # wrap edge: last -> first
    while len(out) >= 2 and math.hypot(out[0][0] - out[-1][0], out[0][1] - out[-1][1]) < min_length:
        out.pop()
    return out


def clean_footprint(
    points: Sequence[Point2],
    *,
    closing_tol: float = EPS_CLOSING,
    min_edge: float = EPS_EDGE,
) -> List[Point2]:
    """Strip a repeated closing point and collapse zero-length edges; order is kept."""
    return drop_short_edges(strip_closing_duplicate(points, tol=closing_tol), min_length=min_edge)


def localize(points: Sequence[Point2], origin: Point2) -> List[Point2]:
    ox, oy = float(origin[0]), float(origin[1])
    return [(float(x) - ox, float(y) - oy) for x, y in points]
