"""Unit tests for spatial_vectors.rounding."""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from spatial_vectors.rounding import (
    ceil,
    clamp,
    clamp_magnitude,
    clamp_vector,
    floor,
    floor_to_int,
    round_,
    set_magnitude,
    to_float,
    to_int,
)
from spatial_vectors.metrics import magnitude
from spatial_vectors.types import float2, float3, int2, int3

coord = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)
step = st.sampled_from([0.25, 0.5, 1.0, 2.0, 5.0, 16.0])


# ---------------------------------------------------------------------------
# round / floor / ceil
# ---------------------------------------------------------------------------


def test_round_whole_numbers():
    assert round_(float3(1.4, 1.6, -1.6)).tolist() == [1.0, 2.0, -2.0]


def test_round_half_to_even():
    assert round_(float2(0.5, 1.5)).tolist() == [0.0, 2.0]


def test_floor_and_ceil():
    v = float2(-1.5, 2.5)
    assert floor(v).tolist() == [-2.0, 2.0]
    assert ceil(v).tolist() == [-1.0, 3.0]


def test_round_scalar_multiple():
    assert round_(float2(7.0, 13.0), 5.0).tolist() == [5.0, 15.0]


def test_floor_per_axis_multiple():
    v = float3(7.0, 7.0, 7.0)
    out = floor(v, float3(2.0, 3.0, 4.0))
    assert out.tolist() == [6.0, 6.0, 4.0]


def test_ceil_per_axis_multiple():
    out = ceil(float2(1.0, 1.0), float2(4.0, 0.5))
    assert out.tolist() == [4.0, 1.0]


def test_round_keeps_dtype():
    assert round_(float3(0.1, 0.2, 0.3), 0.5).dtype == np.float32


@given(coord, coord, step)
def test_snap_to_grid_identity(x, y, m):
    v = float2(x, y)
    for fn in (round_, floor, ceil):
        assert fn(v, m).tolist() == (fn(v / m) * m).tolist()


def test_snap_stays_in_vector_precision():
    # the halved subnormal underflows to 0 in float32
    v = float2(0.0, 1.4e-45)
    assert ceil(v, 2.0).tolist() == (ceil(v / 2.0) * 2.0).tolist()
    assert ceil(v, 2.0).tolist() == [0.0, 0.0]


# ---------------------------------------------------------------------------
# floor_to_int / conversions
# ---------------------------------------------------------------------------


def test_floor_to_int_goes_toward_negative_infinity():
    out = floor_to_int(float2(-0.5, 1.9))
    assert out.dtype == np.int32
    assert out.tolist() == [-1, 1]


def test_floor_to_int_multiple():
    assert floor_to_int(float2(-1.0, 9.0), 4).tolist() == [-4, 8]
    assert floor_to_int(float2(5.0, 5.0), int2(2, 3)).tolist() == [4, 3]


def test_floor_to_int_fractional_multiple():
    assert floor_to_int(float2(1.3, 2.6), 0.5).tolist() == [1, 2]
    assert floor_to_int(float2(-1.3, 2.6), 0.5).tolist() == [-2, 2]


def test_to_int_rounds():
    out = to_int(float3(1.4, 2.6, -0.6))
    assert out.dtype == np.int32
    assert out.tolist() == [1, 3, -1]


def test_to_int_changes_arity():
    assert to_int(float2(1.2, 2.2), arity=3).tolist() == [1, 2, 0]
    assert to_int(float3(1.2, 2.2, 3.2), arity=2).tolist() == [1, 2]


def test_to_int_bad_arity():
    with pytest.raises(ValueError):
        to_int(float2(0.0, 0.0), arity=4)


def test_to_float():
    out = to_float(int3(1, 2, 3))
    assert out.dtype == np.float32
    assert out.tolist() == [1.0, 2.0, 3.0]


# ---------------------------------------------------------------------------
# clamp
# ---------------------------------------------------------------------------


def test_clamp_only_given_bounds():
    out = clamp(float3(-5.0, 5.0, 50.0), min_x=0.0, max_z=10.0)
    assert out.tolist() == [0.0, 5.0, 10.0]


def test_clamp_int_keeps_dtype():
    out = clamp(int2(-3, 9), min_x=-1, max_y=4)
    assert out.dtype == np.int32
    assert out.tolist() == [-1, 4]


def test_clamp_rejects_missing_axis():
    with pytest.raises(ValueError, match="'z'"):
        clamp(float2(1.0, 2.0), min_z=0.0)
    with pytest.raises(ValueError, match="'z'"):
        clamp(int2(1, 2), max_z=3)


def test_clamp_vector():
    out = clamp_vector(float2(-1.0, 3.0), lower=float2(0.0, 0.0), upper=float2(2.0, 2.0))
    assert out.tolist() == [0.0, 2.0]
    assert clamp_vector(int2(5, -5), upper=int2(1, 1)).tolist() == [1, -5]


# ---------------------------------------------------------------------------
# magnitude setters
# ---------------------------------------------------------------------------


def test_set_magnitude():
    out = set_magnitude(float2(3.0, 4.0), 10.0)
    assert out.tolist() == pytest.approx([6.0, 8.0])


def test_clamp_magnitude_long_vector_is_shortened():
    out = clamp_magnitude(float3(0.0, 0.0, 5.0), 2.0)
    assert magnitude(out) == pytest.approx(2.0)


def test_clamp_magnitude_short_vector_unchanged():
    v = float2(0.3, 0.4)
    assert clamp_magnitude(v).tolist() == v.tolist()
