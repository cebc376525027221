from __future__ import annotations

import logging
import multiprocessing as mp
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from footprint3d.geometry.extrude import ExtrusionParams, extrude
from footprint3d.geometry.mesh import MeshBuffers
from footprint3d.geometry.polygon2d import centroid, clean_footprint, localize, signed_area
from footprint3d.geometry.primitives import Footprint2D, Point2, as_points
from footprint3d.geometry.triangulate import TriangulationConfig, triangulate


logger = logging.getLogger(__name__)


@dataclass
class FootprintMesh:
    """
    Slab mesh in local coordinates plus the point it is centred on.

    ``reference_point`` is expressed in the input coordinate system (for
    example a projected CRS); placing the mesh in the world is up to the
    caller, typically by converting that point to a geographic coordinate.
    """

    name: str
    mesh: MeshBuffers
    reference_point: Point2
    altitude: float = 0.0
    footprint_area: float = 0.0
    triangulation_method: str = "ear_clip"
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "reference_point": [float(self.reference_point[0]), float(self.reference_point[1])],
            "altitude": float(self.altitude),
            "footprint_area": float(self.footprint_area),
            "vertex_count": self.mesh.vertex_count,
            "triangle_count": self.mesh.triangle_count,
            "bounds": None if self.mesh.bounds is None else [list(self.mesh.bounds[0]), list(self.mesh.bounds[1])],
            "triangulation_method": self.triangulation_method,
            "warnings": list(self.warnings),
        }


def mesh_name(name: str) -> str:
    return f"ProjectedBuilding_{name}" if name.strip() else "ProjectedBuilding"


def build_footprint_mesh(
    points: Sequence[Point2],
    params: Optional[ExtrusionParams] = None,
    *,
    name: str = "",
    altitude: float = 0.0,
    config: Optional[TriangulationConfig] = None,
) -> Optional[FootprintMesh]:
    """
    Turn one projected footprint ring into a slab mesh centred on its centroid.

    Returns None when fewer than three usable points remain; callers treat
    that as nothing to render.
    """
    ring = clean_footprint(as_points(points))
    if len(ring) < 3:
        logger.warning("Footprint %r has %d usable point(s); skipping.", name, len(ring))
        return None

    origin = centroid(ring)
    local = localize(ring, origin)
    if len(clean_footprint(local)) < 3:
        logger.warning("Footprint %r collapsed after localisation; skipping.", name)
        return None

    tri = triangulate(local, config)
    mesh = extrude(local, tri.triangles, params, name=mesh_name(name))
    if mesh.is_empty:
        logger.warning("Footprint %r produced an empty mesh; skipping.", name)
        return None

    logger.debug(
        "Built %s: %d vertices, %d triangles (%s) at %.3f, %.3f",
        mesh.name,
        mesh.vertex_count,
        mesh.triangle_count,
        tri.method,
        origin[0],
        origin[1],
    )
    return FootprintMesh(
        name=name,
        mesh=mesh,
        reference_point=origin,
        altitude=float(altitude),
        footprint_area=abs(signed_area(local)),
        triangulation_method=tri.method,
        warnings=list(tri.warnings),
    )


def _build_task(task: Tuple[Footprint2D, Optional[ExtrusionParams], Optional[TriangulationConfig]]) -> Optional[FootprintMesh]:
    footprint, params, config = task
    return build_footprint_mesh(footprint.points, params, name=footprint.name, config=config)


def build_footprint_meshes(
    footprints: Iterable[Footprint2D],
    params: Optional[ExtrusionParams] = None,
    *,
    processes: Optional[int] = None,
    config: Optional[TriangulationConfig] = None,
) -> List[Optional[FootprintMesh]]:
    """Build many footprints, one independent call each; output order follows input order."""
    tasks = [(fp, params, config) for fp in footprints]
    if not tasks:
        return []
    if processes is None or processes <= 1 or len(tasks) == 1:
        return [_build_task(t) for t in tasks]
    with mp.Pool(processes=min(processes, len(tasks))) as pool:
        return list(pool.imap(_build_task, tasks))
