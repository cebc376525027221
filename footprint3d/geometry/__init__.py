"""
Footprint geometry: polygon predicates, cap triangulation and slab extrusion.
"""

from footprint3d.geometry.extrude import ExtrusionParams, extrude, extrude_footprint, orient_triangle
from footprint3d.geometry.mesh import MeshBuffers, MeshValidationError
from footprint3d.geometry.polygon2d import (
    centroid,
    clean_footprint,
    is_convex_vertex,
    point_in_triangle,
    signed_area,
)
from footprint3d.geometry.primitives import Footprint2D, Point2, Point3, TriangleIdx
from footprint3d.geometry.triangulate import TriangulationConfig, TriangulationResult, ear_clip, fan, triangulate

__all__ = [
    "ExtrusionParams",
    "Footprint2D",
    "MeshBuffers",
    "MeshValidationError",
    "Point2",
    "Point3",
    "TriangleIdx",
    "TriangulationConfig",
    "TriangulationResult",
    "centroid",
    "clean_footprint",
    "ear_clip",
    "extrude",
    "extrude_footprint",
    "fan",
    "is_convex_vertex",
    "orient_triangle",
    "point_in_triangle",
    "signed_area",
    "triangulate",
]
