"""Magnitude, distance and spatial predicates for spatial-vectors.

Magnitudes accumulate the squared components in float64 before the single
square root and are narrowed back to float32 afterwards.

Metrics
-------
euclidean     — straight-line distance
sqr_euclidean — squared straight-line distance (no square root)
manhattan     — sum of absolute per-axis differences
"""

from __future__ import annotations

from typing import Literal, Union

import numpy as np

from .types import FLOAT_DTYPE, WIDE_DTYPE, like

DistanceMetric = Literal["euclidean", "sqr_euclidean", "manhattan"]


def _wide(vector: np.ndarray) -> np.ndarray:
    return np.asarray(vector, dtype=WIDE_DTYPE)


# ---------------------------------------------------------------------------
# Magnitude
# ---------------------------------------------------------------------------


def sqr_magnitude(vector: np.ndarray) -> np.float32:
    """Squared length of the vector. Avoids a square root."""
    v = _wide(vector)
    return FLOAT_DTYPE(np.dot(v, v))


def magnitude(vector: np.ndarray) -> np.float32:
    """Euclidean length of the vector."""
    v = _wide(vector)
    return FLOAT_DTYPE(np.sqrt(np.dot(v, v)))


# ---------------------------------------------------------------------------
# Distances
# ---------------------------------------------------------------------------


def distance_from(vector: np.ndarray, target: np.ndarray) -> np.float32:
    return magnitude(_wide(vector) - _wide(target))


def sqr_distance_from(vector: np.ndarray, target: np.ndarray) -> np.float32:
    """Squared distance; prefer this when only the ordering matters."""
    return sqr_magnitude(_wide(vector) - _wide(target))


def manhattan_distance_from(vector: np.ndarray, target: np.ndarray) -> np.float32:
    """Axis-aligned movement cost from ``vector`` to ``target``."""
    return FLOAT_DTYPE(np.sum(np.abs(_wide(target) - _wide(vector))))


def distance(
    a: np.ndarray,
    b: np.ndarray,
    metric: DistanceMetric = "euclidean",
) -> np.float32:
    """Distance between two vectors using the specified metric.

    Parameters
    ----------
    a, b   : vectors of the same arity.
    metric : one of 'euclidean', 'sqr_euclidean', 'manhattan'.
    """
    if metric == "euclidean":
        return distance_from(a, b)
    elif metric == "sqr_euclidean":
        return sqr_distance_from(a, b)
    elif metric == "manhattan":
        return manhattan_distance_from(a, b)
    else:
        raise ValueError(
            f"Unknown metric {metric!r}. "
            "Valid options: 'euclidean', 'sqr_euclidean', 'manhattan'."
        )


# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------


def direction_to(source: np.ndarray, destination: np.ndarray) -> np.ndarray:
    """Normalized direction from ``source`` towards ``destination``."""
    delta = np.asarray(destination, dtype=FLOAT_DTYPE) - np.asarray(source, dtype=FLOAT_DTYPE)
    with np.errstate(divide="ignore", invalid="ignore"):
        return like(delta / magnitude(delta), delta)


def cross(a: np.ndarray, b: np.ndarray) -> Union[np.ndarray, np.float32]:
    """Cross product; the scalar z-component for 2-component vectors."""
    a = np.asarray(a)
    b = np.asarray(b)
    if len(a) == 2:
        return FLOAT_DTYPE(a[0] * b[1] - a[1] * b[0])
    return like(np.cross(a, b), a)


def perp(vector: np.ndarray) -> np.ndarray:
    """Clockwise perpendicular of a 2-component vector."""
    x, y = np.asarray(vector)
    return like((y, -x), vector)


def perp_xy(vector: np.ndarray) -> np.ndarray:
    x, y, _ = np.asarray(vector)
    return like((y, -x, 0), vector)


def perp_xz(vector: np.ndarray) -> np.ndarray:
    x, _, z = np.asarray(vector)
    return like((z, 0, -x), vector)


def perp_yz(vector: np.ndarray) -> np.ndarray:
    _, y, z = np.asarray(vector)
    return like((0, z, -y), vector)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_within(vector: np.ndarray, origin: np.ndarray, radius: float) -> bool:
    """True if ``vector`` lies strictly inside the circle/sphere."""
    return bool(sqr_distance_from(vector, origin) < FLOAT_DTYPE(radius * radius))


def is_beyond(vector: np.ndarray, origin: np.ndarray, radius: float) -> bool:
    """True if ``vector`` lies strictly outside the circle/sphere."""
    return bool(sqr_distance_from(vector, origin) > FLOAT_DTYPE(radius * radius))


def is_within_box(vector: np.ndarray, lower: np.ndarray, upper: np.ndarray) -> bool:
    """True if every axis lies strictly between ``lower`` and ``upper``."""
    v = np.asarray(vector)
    return bool(np.all((v > np.asarray(lower)) & (v < np.asarray(upper))))


def is_beyond_box(vector: np.ndarray, lower: np.ndarray, upper: np.ndarray) -> bool:
    """True if any axis lies strictly outside ``lower`` or ``upper``.

    Boundary points are neither within nor beyond.
    """
    v = np.asarray(vector)
    return bool(np.any((v < np.asarray(lower)) | (v > np.asarray(upper))))
