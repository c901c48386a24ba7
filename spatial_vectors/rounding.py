"""Rounding, snapping and clamping for spatial-vectors.

round_ / floor / ceil — whole numbers, or snap-to-grid when a scalar or
                        per-axis ``multiple`` is given:
                        ``op(vector / multiple) * multiple``
floor_to_int          — floor then narrow to int32
to_int / to_float     — conversions between the float and int families
clamp / clamp_vector  — per-axis bounds, absent bounds are open
set_magnitude / clamp_magnitude
"""

from __future__ import annotations

from typing import Callable, Optional, Union

import numpy as np

from .metrics import magnitude
from .types import AXES, FLOAT_DTYPE, INT_DTYPE, is_integer, like

Multiple = Union[None, float, np.ndarray]


def _snap(
    vector: np.ndarray,
    multiple: Multiple,
    fn: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    v = np.asarray(vector)
    if multiple is None:
        return like(fn(v), v)
    m = np.asarray(multiple, dtype=None if is_integer(v) else v.dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        return like(fn(v / m) * m, v)


def round_(vector: np.ndarray, multiple: Multiple = None) -> np.ndarray:
    """Round every axis to a whole number, or to the nearest ``multiple``.

    Halves round to even.
    """
    return _snap(vector, multiple, np.round)


def floor(vector: np.ndarray, multiple: Multiple = None) -> np.ndarray:
    return _snap(vector, multiple, np.floor)


def ceil(vector: np.ndarray, multiple: Multiple = None) -> np.ndarray:
    return _snap(vector, multiple, np.ceil)


def floor_to_int(vector: np.ndarray, multiple: Multiple = None) -> np.ndarray:
    """Floor every axis (toward negative infinity) and narrow to int32.

    With a ``multiple`` the result is ``floor_to_int(vector / multiple) *
    multiple``.
    """
    v = np.asarray(vector, dtype=FLOAT_DTYPE)
    if multiple is None:
        out = np.floor(v).astype(INT_DTYPE)
    else:
        m = np.asarray(multiple, dtype=FLOAT_DTYPE)
        out = np.floor(np.floor(v / m) * m).astype(INT_DTYPE)
    out.flags.writeable = False
    return out


def to_int(vector: np.ndarray, arity: Optional[int] = None) -> np.ndarray:
    """Round to the nearest integers and convert to int2 / int3.

    ``arity`` defaults to the source arity; a 2-component source is padded
    with 0 for arity 3 and a 3-component source keeps XY for arity 2.
    """
    v = np.round(np.asarray(vector, dtype=FLOAT_DTYPE))
    n = len(v) if arity is None else arity
    if n not in (2, 3):
        raise ValueError(f"arity must be 2 or 3, got {n}")
    out = np.zeros(n, dtype=INT_DTYPE)
    k = min(n, len(v))
    out[:k] = v[:k]
    out.flags.writeable = False
    return out


def to_float(vector: np.ndarray) -> np.ndarray:
    """Convert an integer vector to the float vector of the same arity."""
    out = np.asarray(vector, dtype=FLOAT_DTYPE).copy()
    out.flags.writeable = False
    return out


# ---------------------------------------------------------------------------
# Clamping
# ---------------------------------------------------------------------------


def _bounds(values, fill: float) -> np.ndarray:
    return np.array([fill if b is None else b for b in values], dtype=np.float64)


def clamp(
    vector: np.ndarray,
    min_x: Optional[float] = None,
    min_y: Optional[float] = None,
    min_z: Optional[float] = None,
    max_x: Optional[float] = None,
    max_y: Optional[float] = None,
    max_z: Optional[float] = None,
) -> np.ndarray:
    """Clamp each axis to its own optional [min, max] range."""
    v = np.asarray(vector)
    n = len(v)
    if n < 3 and (min_z is not None or max_z is not None):
        raise ValueError(
            f"Axis {AXES[2]!r} does not exist on a {n}-component vector."
        )
    lower = _bounds((min_x, min_y, min_z)[:n], -np.inf)
    upper = _bounds((max_x, max_y, max_z)[:n], np.inf)
    return like(np.clip(v, lower, upper), v)


def clamp_vector(
    vector: np.ndarray,
    lower: Optional[np.ndarray] = None,
    upper: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Clamp between two corner vectors; a missing corner is unbounded."""
    v = np.asarray(vector)
    lo = np.full(len(v), -np.inf) if lower is None else np.asarray(lower)
    hi = np.full(len(v), np.inf) if upper is None else np.asarray(upper)
    return like(np.clip(v, lo, hi), v)


# ---------------------------------------------------------------------------
# Magnitude setters
# ---------------------------------------------------------------------------


def set_magnitude(vector: np.ndarray, length: float) -> np.ndarray:
    """Rescale ``vector`` to ``length``. A zero vector yields NaN."""
    v = np.asarray(vector, dtype=FLOAT_DTYPE)
    with np.errstate(divide="ignore", invalid="ignore"):
        return like(v / magnitude(v) * FLOAT_DTYPE(length), v)


def clamp_magnitude(vector: np.ndarray, max_length: float = 1.0) -> np.ndarray:
    """Copy of ``vector`` with its magnitude capped at ``max_length``."""
    v = np.asarray(vector, dtype=FLOAT_DTYPE)
    if magnitude(v) <= max_length:
        return like(v, v)
    return set_magnitude(v, max_length)
