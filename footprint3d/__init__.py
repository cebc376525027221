"""
footprint3d

Extrudes planar building footprints into closed slab meshes with per-face
normals and UVs, ready to hand to a renderer or physics engine.
"""

from footprint3d.building import FootprintMesh, build_footprint_mesh, build_footprint_meshes
from footprint3d.geometry.extrude import ExtrusionParams, extrude, extrude_footprint
from footprint3d.geometry.mesh import MeshBuffers
from footprint3d.geometry.primitives import Footprint2D
from footprint3d.geometry.triangulate import TriangulationResult, triangulate

__version__ = "0.1.0"

__all__ = [
    "ExtrusionParams",
    "Footprint2D",
    "FootprintMesh",
    "MeshBuffers",
    "TriangulationResult",
    "build_footprint_mesh",
    "build_footprint_meshes",
    "extrude",
    "extrude_footprint",
    "triangulate",
]
