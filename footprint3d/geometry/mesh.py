from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from footprint3d.geometry.cleaning import open_edges, weld_positions
from footprint3d.geometry.primitives import Point2, Point3, TriangleIdx
from footprint3d.geometry.tolerance import EPS_POS, EPS_WELD


Bounds = Tuple[Point3, Point3]


class MeshValidationError(ValueError):
    pass


def compute_bounds(vertices: Sequence[Point3]) -> Optional[Bounds]:
    if not vertices:
        return None
    arr = np.asarray(vertices, dtype=float)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return (
        (float(lo[0]), float(lo[1]), float(lo[2])),
        (float(hi[0]), float(hi[1]), float(hi[2])),
    )


@dataclass
class MeshBuffers:
    """
    Render-ready triangle soup with per-vertex normals and UVs.

    Caps and walls duplicate corner positions so each face keeps its own
    normal; ``groups`` maps ``"top"``, ``"bottom"`` and ``"sides"`` to
    ``(first_triangle, triangle_count)`` ranges in ``triangles``.
    """

    vertices: List[Point3] = field(default_factory=list)
    normals: List[Point3] = field(default_factory=list)
    uvs: List[Point2] = field(default_factory=list)
    triangles: List[TriangleIdx] = field(default_factory=list)
    bounds: Optional[Bounds] = None
    groups: Dict[str, Tuple[int, int]] = field(default_factory=dict)
    name: str = ""

    @classmethod
    def empty(cls, name: str = "") -> "MeshBuffers":
        return cls(name=name)

    @property
    def is_empty(self) -> bool:
        return not self.vertices or not self.triangles

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def validate(self) -> None:
        n = len(self.vertices)
        if len(self.normals) != n or len(self.uvs) != n:
            raise MeshValidationError(
                f"Vertex attribute length mismatch: vertices={n}, normals={len(self.normals)}, uvs={len(self.uvs)}"
            )
        for tri in self.triangles:
            if len(tri) != 3:
                raise MeshValidationError("Mesh triangles must have exactly 3 indices")
            for idx in tri:
                if idx < 0 or idx >= n:
                    raise MeshValidationError(f"Triangle index out of range: {idx}")
            if len(set(tri)) != 3:
                raise MeshValidationError(f"Triangle repeats a vertex: {tuple(tri)}")
        for name, (start, count) in self.groups.items():
            if start < 0 or count < 0 or start + count > len(self.triangles):
                raise MeshValidationError(f"Group '{name}' exceeds triangle range")

    def as_arrays(self) -> Dict[str, np.ndarray]:
        return {
            "vertices": np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3),
            "normals": np.asarray(self.normals, dtype=np.float64).reshape(-1, 3),
            "uvs": np.asarray(self.uvs, dtype=np.float64).reshape(-1, 2),
            "triangles": np.asarray(self.triangles, dtype=np.int64).reshape(-1, 3),
        }

    def group_triangles(self, name: str) -> List[TriangleIdx]:
        if name not in self.groups:
            return []
        start, count = self.groups[name]
        return list(self.triangles[start:start + count])

    def face_normals(self, triangles: Optional[Sequence[TriangleIdx]] = None) -> np.ndarray:
        tris = self.triangles if triangles is None else triangles
        if not tris:
            return np.zeros((0, 3), dtype=float)
        verts = np.asarray(self.vertices, dtype=float)
        idx = np.asarray(tris, dtype=np.int64)
        n = np.cross(verts[idx[:, 1]] - verts[idx[:, 0]], verts[idx[:, 2]] - verts[idx[:, 0]])
        lengths = np.linalg.norm(n, axis=1)
        lengths[lengths < EPS_POS] = 1.0
        return n / lengths[:, None]

    def surface_area(self, group: Optional[str] = None) -> float:
        tris = self.triangles if group is None else self.group_triangles(group)
        if not tris:
            return 0.0
        verts = np.asarray(self.vertices, dtype=float)
        idx = np.asarray(tris, dtype=np.int64)
        n = np.cross(verts[idx[:, 1]] - verts[idx[:, 0]], verts[idx[:, 2]] - verts[idx[:, 0]])
        return 0.5 * float(np.linalg.norm(n, axis=1).sum())

    def open_edges(self, eps: float = EPS_WELD) -> List[Tuple[int, int]]:
        """Boundary edges after welding coincident positions; empty for a closed slab."""
        _welded, remap = weld_positions(self.vertices, eps=eps)
        welded_tris = [(remap[a], remap[b], remap[c]) for a, b, c in self.triangles]
        return open_edges(welded_tris)
