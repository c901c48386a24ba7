"""Unit tests for spatial_vectors.metrics."""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from spatial_vectors.metrics import (
    cross,
    direction_to,
    distance,
    distance_from,
    is_beyond,
    is_beyond_box,
    is_within,
    is_within_box,
    magnitude,
    manhattan_distance_from,
    perp,
    perp_xy,
    perp_xz,
    perp_yz,
    sqr_distance_from,
    sqr_magnitude,
)
from spatial_vectors.types import float2, float3, int2, int3

coord = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False)


# ---------------------------------------------------------------------------
# magnitude
# ---------------------------------------------------------------------------


def test_magnitude_known():
    assert magnitude(float2(3.0, 4.0)) == pytest.approx(5.0)
    assert magnitude(int3(2, 3, 6)) == pytest.approx(7.0)


def test_magnitude_is_float32():
    assert isinstance(magnitude(float3(1.0, 2.0, 2.0)), np.float32)


def test_magnitude_large_components_do_not_overflow():
    # squaring 1e20 overflows float32; the widened sum does not
    v = float2(1e20, 1e20)
    assert np.isfinite(magnitude(v))
    assert magnitude(v) == pytest.approx(1.41421356e20, rel=1e-6)


@given(coord, coord, coord)
def test_sqr_magnitude_matches_magnitude_squared(x, y, z):
    v = float3(x, y, z)
    assert float(sqr_magnitude(v)) == pytest.approx(
        float(magnitude(v)) ** 2, rel=1e-5, abs=1e-5
    )


# ---------------------------------------------------------------------------
# distances
# ---------------------------------------------------------------------------


def test_distance_from():
    a = float3(1.0, 1.0, 1.0)
    b = float3(1.0, 4.0, 5.0)
    assert distance_from(a, b) == pytest.approx(5.0)
    assert sqr_distance_from(a, b) == pytest.approx(25.0)


def test_manhattan_distance():
    assert manhattan_distance_from(int2(1, 1), int2(-2, 5)) == pytest.approx(7.0)


def test_distance_dispatch():
    a = float2(0.0, 0.0)
    b = float2(3.0, 4.0)
    assert distance(a, b) == pytest.approx(5.0)
    assert distance(a, b, "sqr_euclidean") == pytest.approx(25.0)
    assert distance(a, b, "manhattan") == pytest.approx(7.0)


def test_distance_invalid_metric():
    with pytest.raises(ValueError, match="Unknown metric"):
        distance(float2(0, 0), float2(1, 1), "chebyshev")  # type: ignore


# ---------------------------------------------------------------------------
# directions / cross / perp
# ---------------------------------------------------------------------------


def test_direction_to_is_unit():
    d = direction_to(float3(1.0, 1.0, 1.0), float3(1.0, 1.0, 11.0))
    assert d.tolist() == pytest.approx([0.0, 0.0, 1.0])


def test_direction_to_same_point_is_nan():
    d = direction_to(float2(1.0, 1.0), float2(1.0, 1.0))
    assert np.all(np.isnan(d))


def test_cross_3d():
    out = cross(float3(1.0, 0.0, 0.0), float3(0.0, 1.0, 0.0))
    assert out.tolist() == [0.0, 0.0, 1.0]


def test_cross_2d_scalar():
    assert cross(float2(2.0, 0.0), float2(0.0, 3.0)) == pytest.approx(6.0)


def test_perp_2d():
    assert perp(float2(1.0, 2.0)).tolist() == [2.0, -1.0]


@pytest.mark.parametrize("fn", [perp_xy, perp_xz, perp_yz])
def test_perp_3d_is_perpendicular(fn):
    v = float3(1.0, 2.0, 3.0)
    assert float(np.dot(fn(v), v)) == pytest.approx(0.0)


# ---------------------------------------------------------------------------
# radius predicates
# ---------------------------------------------------------------------------


def test_within_and_beyond_radius():
    origin = float2(0.0, 0.0)
    assert is_within(float2(1.0, 1.0), origin, 2.0)
    assert not is_beyond(float2(1.0, 1.0), origin, 2.0)
    assert is_beyond(float2(3.0, 0.0), origin, 2.0)
    assert not is_within(float2(3.0, 0.0), origin, 2.0)


def test_radius_boundary_is_neither():
    origin = float3(0.0, 0.0, 0.0)
    p = float3(3.0, 4.0, 0.0)
    assert not is_within(p, origin, 5.0)
    assert not is_beyond(p, origin, 5.0)


# ---------------------------------------------------------------------------
# box predicates
# ---------------------------------------------------------------------------


def test_box_inside_and_outside():
    lo = float3(0.0, 0.0, 0.0)
    hi = float3(10.0, 10.0, 10.0)
    assert is_within_box(float3(5.0, 5.0, 5.0), lo, hi)
    assert is_beyond_box(float3(5.0, 11.0, 5.0), lo, hi)
    assert not is_within_box(float3(5.0, 11.0, 5.0), lo, hi)


def test_box_boundary_is_neither():
    lo = int2(0, 0)
    hi = int2(4, 4)
    edge = int2(0, 2)
    assert not is_within_box(edge, lo, hi)
    assert not is_beyond_box(edge, lo, hi)
