"""Arity conversions, swizzles and matrix export for spatial-vectors.

Pure relabelling: values are copied in the order the function name
spells out (``to_xz`` keeps X first).  The int/float family of the source
is kept.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .types import like


def _pick(vector: np.ndarray, *indices: int) -> np.ndarray:
    v = np.asarray(vector)
    return like(v[list(indices)], v)


# ---------------------------------------------------------------------------
# 3 -> 2
# ---------------------------------------------------------------------------


def to_xy(vector: np.ndarray) -> np.ndarray:
    return _pick(vector, 0, 1)


def to_xz(vector: np.ndarray) -> np.ndarray:
    return _pick(vector, 0, 2)


def to_yz(vector: np.ndarray) -> np.ndarray:
    return _pick(vector, 1, 2)


# ---------------------------------------------------------------------------
# 2 -> 3
# ---------------------------------------------------------------------------


def from_xy(vector: np.ndarray, z: float = 0) -> np.ndarray:
    """Place a 2-component vector on the XY plane at height ``z``."""
    x, y = np.asarray(vector)
    return like((x, y, z), vector)


def from_xz(vector: np.ndarray, y: float = 0) -> np.ndarray:
    """Place a 2-component vector on the XZ plane at height ``y``."""
    x, z = np.asarray(vector)
    return like((x, y, z), vector)


def from_yz(vector: np.ndarray, x: float = 0) -> np.ndarray:
    y, z = np.asarray(vector)
    return like((x, y, z), vector)


def flat(vector: np.ndarray, level: float = 0) -> np.ndarray:
    """Flatten the vector onto ``y = level``."""
    v = np.array(vector)
    v[1] = level
    return like(v, vector)


# ---------------------------------------------------------------------------
# Swizzles
# ---------------------------------------------------------------------------


def swap(vector: np.ndarray) -> np.ndarray:
    """(x, y) -> (y, x)."""
    return _pick(vector, 1, 0)


def swap_forwards(vector: np.ndarray) -> np.ndarray:
    """Cycle components forwards: x becomes y, y becomes z, z becomes x."""
    return _pick(vector, 2, 0, 1)


def swap_backwards(vector: np.ndarray) -> np.ndarray:
    """Cycle components backwards: x becomes z, y becomes x, z becomes y."""
    return _pick(vector, 1, 2, 0)


# ---------------------------------------------------------------------------
# Export / bulk
# ---------------------------------------------------------------------------


def to_matrix(vector: np.ndarray) -> np.ndarray:
    """Column-vector layout, shape (n, 1)."""
    v = np.asarray(vector)
    out = v.reshape(len(v), 1).copy()
    out.flags.writeable = False
    return out


def translate(points: Iterable[np.ndarray], translation: np.ndarray) -> List[np.ndarray]:
    """Offset every point by ``translation``, preserving input order."""
    t = np.asarray(translation)
    return [like(np.asarray(p) + t, p) for p in points]
