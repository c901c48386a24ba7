"""Quaternion rotation for spatial-vectors.

Quaternions are stored as (x, y, z, w).  Nothing here normalizes its
input: a non-unit quaternion scales and skews the rotated vector.
Componentwise builders for quaternions live in ``builders``.
"""

from __future__ import annotations

import numpy as np

from .metrics import magnitude
from .types import FLOAT_DTYPE, WIDE_DTYPE, as_vector, like


def multiply(rotation: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """Rotate a 3-component ``vector`` by ``rotation`` (q * v)."""
    q = np.asarray(rotation, dtype=WIDE_DTYPE)
    v = np.asarray(vector, dtype=WIDE_DTYPE)
    axis, w = q[:3], q[3]
    t = 2.0 * np.cross(axis, v)
    return as_vector(v + w * t + np.cross(axis, t), "float3")


def euler(angles: np.ndarray) -> np.ndarray:
    """Quaternion for Euler ``angles`` in radians.

    Rotation about Z is applied first, then X, then Y.
    """
    half = 0.5 * np.asarray(angles, dtype=WIDE_DTYPE)
    sx, sy, sz = np.sin(half)
    cx, cy, cz = np.cos(half)
    return as_vector(
        (
            sx * cy * cz + sy * sz * cx,
            sy * cx * cz - sx * sz * cy,
            sz * cx * cy - sx * sy * cz,
            cx * cy * cz + sy * sz * sx,
        ),
        "quaternion",
    )


def conjugate(rotation: np.ndarray) -> np.ndarray:
    x, y, z, w = np.asarray(rotation)
    return as_vector((-x, -y, -z, w), "quaternion")


def inverse(rotation: np.ndarray) -> np.ndarray:
    """Conjugate divided by the squared norm."""
    q = np.asarray(rotation, dtype=WIDE_DTYPE)
    c = np.asarray(conjugate(rotation), dtype=WIDE_DTYPE)
    with np.errstate(divide="ignore", invalid="ignore"):
        return as_vector(c / np.dot(q, q), "quaternion")


def normalize(rotation: np.ndarray) -> np.ndarray:
    q = np.asarray(rotation, dtype=FLOAT_DTYPE)
    with np.errstate(divide="ignore", invalid="ignore"):
        return like(q / magnitude(q), q)


def rotate(
    world_position: np.ndarray,
    center: np.ndarray,
    rotation: np.ndarray,
) -> np.ndarray:
    """Rotate ``world_position`` around ``center``.

    Parameters
    ----------
    world_position : point to rotate.
    center         : world-space pivot.
    rotation       : quaternion (4 components) or Euler angles in radians
                     (3 components, converted with ``euler``).

    Returns
    -------
    float3 — the rotated point, back in world space.
    """
    r = np.asarray(rotation)
    if len(r) == 3:
        r = euler(r)
    elif len(r) != 4:
        raise ValueError(
            f"rotation must be a quaternion or Euler angles, got {len(r)} components."
        )
    pivot = np.asarray(center, dtype=WIDE_DTYPE)
    local = np.asarray(world_position, dtype=WIDE_DTYPE) - pivot
    return as_vector(np.asarray(multiply(r, local), dtype=WIDE_DTYPE) + pivot, "float3")
