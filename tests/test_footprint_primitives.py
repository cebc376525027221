from __future__ import annotations

from footprint3d.geometry.primitives import Footprint2D, as_points


def test_footprint_normalises_points_to_float_tuples() -> None:
    fp = Footprint2D(points=[[0, 0], (1, 0), (1, 1)], name="x")
    assert fp.points == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
    assert all(isinstance(v, float) for p in fp.points for v in p)
    assert len(fp) == 3


def test_short_footprint_is_accepted_and_reversible() -> None:
    fp = Footprint2D(points=[(0.0, 0.0), (1.0, 0.0)])
    assert len(fp) == 2
    assert fp.reversed().points == [(1.0, 0.0), (0.0, 0.0)]
    assert as_points([]) == []
