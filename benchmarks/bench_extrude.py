from __future__ import annotations

import math
import time

from footprint3d.building import build_footprint_meshes
from footprint3d.geometry.extrude import ExtrusionParams
from footprint3d.geometry.primitives import Footprint2D


def _star(cx: float, cy: float, spikes: int = 12, r_outer: float = 20.0, r_inner: float = 9.0) -> list[tuple[float, float]]:
    pts: list[tuple[float, float]] = []
    for k in range(2 * spikes):
        r = r_outer if k % 2 == 0 else r_inner
        a = math.pi * k / spikes
        pts.append((cx + r * math.cos(a), cy + r * math.sin(a)))
    return pts


def _build_district(nx: int = 30, ny: int = 30) -> list[Footprint2D]:
    # Non-convex outlines so every footprint goes through full ear clipping.
    out: list[Footprint2D] = []
    for j in range(ny):
        for i in range(nx):
            out.append(Footprint2D(points=_star(2600000.0 + 50.0 * i, 1200000.0 + 50.0 * j), name=f"b_{i}_{j}"))
    return out


def main() -> int:
    footprints = _build_district()
    params = ExtrusionParams(thickness=12.0, wall_uv_mode="metric")

    t0 = time.perf_counter()
    serial = build_footprint_meshes(footprints, params)
    t1 = time.perf_counter()
    parallel = build_footprint_meshes(footprints, params, processes=4)
    t2 = time.perf_counter()

    built = [m for m in serial if m is not None]
    degraded = sum(1 for m in built if m.triangulation_method != "ear_clip")
    print("bench_extrude")
    print(f"  footprints: {len(footprints)}")
    print(f"  triangles: {sum(m.mesh.triangle_count for m in built)}")
    print(f"  degraded: {degraded}")
    print(f"  serial_s: {t1 - t0:.4f}")
    print(f"  parallel_s: {t2 - t1:.4f}")
    print(f"  results_match: {[m.to_dict() for m in built] == [m.to_dict() for m in parallel if m is not None]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
