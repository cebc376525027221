from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from footprint3d.geometry.primitives import Point3, TriangleIdx
from footprint3d.geometry.tolerance import EPS_POS, EPS_WELD


def weld_positions(vertices: Sequence[Point3], eps: float = EPS_WELD) -> Tuple[List[Point3], List[int]]:
    """
    Collapse coincident positions onto one index.

    Buckets come from epsilon quantisation; the first vertex seen in a bucket
    keeps its position, so the result is stable across runs.
    """
    inv = 1.0 / max(eps, EPS_POS)
    welded: List[Point3] = []
    remap: List[int] = []
    bucket_to_idx: Dict[Tuple[int, int, int], int] = {}
    for x, y, z in vertices:
        key = (int(round(float(x) * inv)), int(round(float(y) * inv)), int(round(float(z) * inv)))
        idx = bucket_to_idx.get(key)
        if idx is None:
            idx = len(welded)
            bucket_to_idx[key] = idx
            welded.append((float(x), float(y), float(z)))
        remap.append(idx)
    return welded, remap


def edge_incidence(triangles: Sequence[TriangleIdx]) -> Dict[Tuple[int, int], int]:
    out: Dict[Tuple[int, int], int] = {}
    for a, b, c in triangles:
        for u, v in ((a, b), (b, c), (c, a)):
            key = (u, v) if u < v else (v, u)
            out[key] = out.get(key, 0) + 1
    return out


def open_edges(triangles: Sequence[TriangleIdx]) -> List[Tuple[int, int]]:
    return sorted(e for e, count in edge_incidence(triangles).items() if count == 1)
