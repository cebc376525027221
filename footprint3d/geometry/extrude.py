from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from footprint3d.core.coordinates import UP_AXES, AxisConvention, UpAxis
from footprint3d.geometry.mesh import MeshBuffers, compute_bounds
from footprint3d.geometry.polygon2d import orientation_sign
from footprint3d.geometry.primitives import Point2, Point3, TriangleIdx, as_points
from footprint3d.geometry.tolerance import EPS_EDGE, EPS_THICKNESS
from footprint3d.geometry.triangulate import TriangulationConfig, TriangulationResult, triangulate


logger = logging.getLogger(__name__)

WALL_UV_MODES = ("unit", "metric")


@dataclass(frozen=True)
class ExtrusionParams:
    """
    Slab settings.

    ``thickness`` is split evenly above and below the footprint plane and is
    used by absolute value. ``wall_uv_mode`` selects 0..1 wall quads
    (``"unit"``) or quads sized by edge length and thickness (``"metric"``),
    both multiplied by ``uv_scale`` in metric mode.
    """

    thickness: float = 1.0
    uv_scale: Tuple[float, float] = (0.1, 0.1)
    wall_uv_mode: str = "unit"
    up_axis: UpAxis = "Z_UP"

    def __post_init__(self) -> None:
        if not math.isfinite(float(self.thickness)):
            raise ValueError(f"Extrusion thickness must be finite, got {self.thickness!r}")
        if len(self.uv_scale) != 2:
            raise ValueError("uv_scale must be a (u, v) pair")
        su, sv = (float(s) for s in self.uv_scale)
        if not (math.isfinite(su) and math.isfinite(sv)) or su <= 0.0 or sv <= 0.0:
            raise ValueError(f"uv_scale components must be finite and positive, got {self.uv_scale!r}")
        if self.wall_uv_mode not in WALL_UV_MODES:
            raise ValueError(f"Unsupported wall UV mode: {self.wall_uv_mode!r}")
        if self.up_axis not in UP_AXES:
            raise ValueError(f"Unsupported up axis: {self.up_axis!r}")
        object.__setattr__(self, "thickness", float(self.thickness))
        object.__setattr__(self, "uv_scale", (su, sv))

    @property
    def half_thickness(self) -> float:
        return 0.5 * abs(self.thickness)

    @property
    def has_sides(self) -> bool:
        return abs(self.thickness) > EPS_THICKNESS

    def to_dict(self) -> dict:
        return {
            "thickness": float(self.thickness),
            "uv_scale": [float(self.uv_scale[0]), float(self.uv_scale[1])],
            "wall_uv_mode": str(self.wall_uv_mode),
            "up_axis": str(self.up_axis),
        }


def _sub(a: Point3, b: Point3) -> Point3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Point3, b: Point3) -> Point3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Point3, b: Point3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def orient_triangle(tri: TriangleIdx, vertices: Sequence[Point3], target_normal: Point3) -> TriangleIdx:
    """Swap the last two indices when the triangle faces away from ``target_normal``."""
    a, b, c = tri
    va = vertices[a]
    n = _cross(_sub(vertices[b], va), _sub(vertices[c], va))
    if _dot(n, target_normal) < 0.0:
        return (a, c, b)
    return (a, b, c)


def _usable_triangles(triangles: Sequence[Sequence[int]], count: int) -> List[TriangleIdx]:
    out: List[TriangleIdx] = []
    for tri in triangles:
        a, b, c = (int(i) for i in tri)
        if a == b or b == c or a == c or min(a, b, c) < 0 or max(a, b, c) >= count:
            logger.debug("Skipping invalid triangle %r for %d-point polygon", tuple(tri), count)
            continue
        out.append((a, b, c))
    return out


def _wall_uvs(edge_length: float, thickness: float, params: ExtrusionParams) -> List[Point2]:
    if params.wall_uv_mode == "metric":
        u = edge_length * params.uv_scale[0]
        v = thickness * params.uv_scale[1]
    else:
        u = 1.0
        v = 1.0
    # top-start, bottom-start, top-end, bottom-end
    return [(0.0, v), (0.0, 0.0), (u, v), (u, 0.0)]


def extrude(
    points: Sequence[Point2],
    triangles: Sequence[Sequence[int]],
    params: Optional[ExtrusionParams] = None,
    *,
    name: str = "",
) -> MeshBuffers:
    """
    Build a closed slab from a footprint and its cap triangulation.

    Top vertices come first and share the polygon's numbering, so cap
    triangles index them directly; bottom vertices follow at an offset of
    ``len(points)``; every wall edge then gets its own four vertices. All
    faces are wound to match their vertex normal whatever the input winding.
    """
    cfg = params or ExtrusionParams()
    poly = as_points(points)
    n = len(poly)
    cap_tris = _usable_triangles(triangles, n) if n >= 3 else []
    if not cap_tris:
        return MeshBuffers.empty(name)

    axes = AxisConvention(cfg.up_axis)
    up = axes.up
    down = (-up[0], -up[1], -up[2])
    half = cfg.half_thickness
    su, sv = cfg.uv_scale

    vertices: List[Point3] = []
    normals: List[Point3] = []
    uvs: List[Point2] = []
    out_tris: List[TriangleIdx] = []
    groups = {}

    for x, y in poly:
        vertices.append(axes.lift(x, y, half))
        normals.append(up)
        uvs.append((x * su, y * sv))
    for tri in cap_tris:
        out_tris.append(orient_triangle(tri, vertices, up))
    groups["top"] = (0, len(out_tris))

    bottom_start = len(vertices)
    for x, y in poly:
        vertices.append(axes.lift(x, y, -half))
        normals.append(down)
        uvs.append((x * su, y * sv))
    first = len(out_tris)
    for a, b, c in cap_tris:
        mirrored = (bottom_start + a, bottom_start + c, bottom_start + b)
        out_tris.append(orient_triangle(mirrored, vertices, down))
    groups["bottom"] = (first, len(out_tris) - first)

    if cfg.has_sides:
        thickness = abs(cfg.thickness)
        sign = float(orientation_sign(poly))
        first = len(out_tris)
        for i in range(n):
            x0, y0 = poly[i]
            x1, y1 = poly[(i + 1) % n]
            ex, ey = x1 - x0, y1 - y0
            length = math.hypot(ex, ey)
            if length < EPS_EDGE:
                continue
            # edge turned clockwise points outward on a CCW ring
            normal = axes.lift(sign * ey / length, -sign * ex / length, 0.0)

            base = len(vertices)
            vertices.extend(
                [
                    axes.lift(x0, y0, half),
                    axes.lift(x0, y0, -half),
                    axes.lift(x1, y1, half),
                    axes.lift(x1, y1, -half),
                ]
            )
            normals.extend([normal] * 4)
            uvs.extend(_wall_uvs(length, thickness, cfg))
            out_tris.append(orient_triangle((base, base + 1, base + 2), vertices, normal))
            out_tris.append(orient_triangle((base + 2, base + 1, base + 3), vertices, normal))
        groups["sides"] = (first, len(out_tris) - first)

    return MeshBuffers(
        vertices=vertices,
        normals=normals,
        uvs=uvs,
        triangles=out_tris,
        bounds=compute_bounds(vertices),
        groups=groups,
        name=name,
    )


def extrude_footprint(
    points: Sequence[Point2],
    params: Optional[ExtrusionParams] = None,
    *,
    config: Optional[TriangulationConfig] = None,
    name: str = "",
) -> Tuple[MeshBuffers, TriangulationResult]:
    poly = as_points(points)
    result = triangulate(poly, config)
    return extrude(poly, result.triangles, params, name=name), result
