from __future__ import annotations

import math

import pytest

from footprint3d.geometry.polygon2d import (
    centroid,
    clean_footprint,
    drop_short_edges,
    is_convex_vertex,
    localize,
    orientation_sign,
    point_in_triangle,
    signed_area,
    strip_closing_duplicate,
    triangle_area,
)


UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
L_SHAPE = [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)]


def test_signed_area_is_positive_for_ccw_and_antisymmetric_under_reversal() -> None:
    assert signed_area(UNIT_SQUARE) == pytest.approx(1.0)
    assert signed_area(L_SHAPE) == pytest.approx(3.0)
    assert signed_area(list(reversed(L_SHAPE))) == pytest.approx(-signed_area(L_SHAPE))
    assert orientation_sign(UNIT_SQUARE) == 1
    assert orientation_sign(list(reversed(UNIT_SQUARE))) == -1


def test_signed_area_of_short_or_collinear_input_is_zero() -> None:
    assert signed_area([]) == 0.0
    assert signed_area([(0.0, 0.0), (1.0, 1.0)]) == 0.0
    assert signed_area([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]) == pytest.approx(0.0)


def test_centroid_of_unit_square_and_l_shape() -> None:
    assert centroid(UNIT_SQUARE) == pytest.approx((0.5, 0.5))
    assert centroid(L_SHAPE) == pytest.approx((2.5 / 3.0, 2.5 / 3.0))
    assert centroid(list(reversed(L_SHAPE))) == pytest.approx((2.5 / 3.0, 2.5 / 3.0))


def test_near_collinear_centroid_falls_back_to_point_mean() -> None:
    pts = [(0.0, 0.0), (1.0, 0.0), (2.0, 1e-9)]
    cx, cy = centroid(pts)
    assert math.isfinite(cx) and math.isfinite(cy)
    assert (cx, cy) == pytest.approx((1.0, 1e-9 / 3.0))


def test_centroid_of_empty_input_is_origin() -> None:
    assert centroid([]) == (0.0, 0.0)


def test_convexity_follows_orientation_and_rejects_collinear_corners() -> None:
    assert is_convex_vertex((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), 1)
    assert not is_convex_vertex((0.0, 0.0), (1.0, 0.0), (1.0, -1.0), 1)
    assert is_convex_vertex((0.0, 0.0), (1.0, 0.0), (1.0, -1.0), -1)
    assert not is_convex_vertex((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), 1)
    assert not is_convex_vertex((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), -1)


def test_point_in_triangle_counts_edges_and_rejects_degenerate_triangles() -> None:
    a, b, c = (0.0, 0.0), (4.0, 0.0), (0.0, 4.0)
    assert point_in_triangle((1.0, 1.0), a, b, c)
    assert point_in_triangle((2.0, 0.0), a, b, c)
    assert point_in_triangle((2.0, 2.0), a, b, c)
    assert not point_in_triangle((3.0, 3.0), a, b, c)
    assert not point_in_triangle((1.0, 0.0), (0.0, 0.0), (1.0, 0.0), (2.0, 0.0))


def test_triangle_area_is_unsigned() -> None:
    assert triangle_area((0.0, 0.0), (2.0, 0.0), (0.0, 2.0)) == pytest.approx(2.0)
    assert triangle_area((0.0, 0.0), (0.0, 2.0), (2.0, 0.0)) == pytest.approx(2.0)


def test_clean_footprint_strips_closing_point_and_zero_length_edges() -> None:
    ring = [(0.0, 0.0), (10.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0005, 0.0)]
    assert strip_closing_duplicate(ring)[-1] == (0.0, 10.0)
    assert drop_short_edges([(0.0, 0.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]) == [
        (0.0, 0.0),
        (1.0, 0.0),
        (1.0, 1.0),
    ]
    assert clean_footprint(ring) == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def test_localize_subtracts_reference_point() -> None:
    pts = [(2600000.0, 1200000.0), (2600010.0, 1200000.0), (2600010.0, 1200010.0)]
    assert localize(pts, (2600000.0, 1200000.0)) == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]
