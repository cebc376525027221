from __future__ import annotations

import inspect
import re
from pathlib import Path

from footprint3d.geometry import cleaning, mesh, polygon2d
from footprint3d.geometry.tolerance import (
    EPS_BARYCENTRIC,
    EPS_CENTROID_AREA,
    EPS_CLOSING,
    EPS_CONVEX,
    EPS_EDGE,
    EPS_POS,
    EPS_THICKNESS,
    EPS_TRI_DENOM,
    EPS_WELD,
)
from footprint3d.geometry.triangulate import TriangulationConfig


def test_tolerance_constants_exist() -> None:
    for eps in (
        EPS_POS,
        EPS_CONVEX,
        EPS_BARYCENTRIC,
        EPS_TRI_DENOM,
        EPS_CENTROID_AREA,
        EPS_EDGE,
        EPS_THICKNESS,
        EPS_CLOSING,
        EPS_WELD,
    ):
        assert eps > 0.0


def test_key_geometry_functions_use_central_tolerance_defaults() -> None:
    assert inspect.signature(polygon2d.centroid).parameters["area_eps"].default == EPS_CENTROID_AREA
    assert inspect.signature(polygon2d.is_convex_vertex).parameters["eps"].default == EPS_CONVEX
    assert inspect.signature(polygon2d.clean_footprint).parameters["closing_tol"].default == EPS_CLOSING
    assert inspect.signature(polygon2d.clean_footprint).parameters["min_edge"].default == EPS_EDGE
    assert inspect.signature(cleaning.weld_positions).parameters["eps"].default == EPS_WELD
    assert inspect.signature(mesh.MeshBuffers.open_edges).parameters["eps"].default == EPS_WELD
    assert TriangulationConfig().convex_eps == EPS_CONVEX


def test_geometry_package_has_no_inline_scientific_epsilon_literals() -> None:
    root = Path(__file__).resolve().parents[1] / "footprint3d" / "geometry"
    pattern = re.compile(r"\b1e-\d+\b")
    offenders: list[str] = []
    for p in sorted(root.rglob("*.py")):
        if p.name == "tolerance.py":
            continue
        text = p.read_text(encoding="utf-8")
        if pattern.search(text):
            offenders.append(str(p.relative_to(root.parent.parent)))
    assert offenders == []
