"""Value types for spatial-vectors.

float2 / float3 — float32 vectors of arity 2 and 3.
int2 / int3     — int32 vectors of arity 2 and 3.
quaternion      — float32 rotation stored as (x, y, z, w).

Every value is a 1-D read-only numpy array; operations never mutate their
inputs and always hand back a fresh array.

AxisOperand — per-axis "mask or identity element" parameter object used by
              the componentwise builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Optional, Tuple

import numpy as np

VectorKind = Literal["float2", "float3", "int2", "int3", "quaternion"]

FLOAT_DTYPE = np.float32
INT_DTYPE = np.int32
WIDE_DTYPE = np.float64

AXES: Tuple[str, ...] = ("x", "y", "z", "w")

_KINDS: Dict[str, Tuple[type, int]] = {
    "float2": (FLOAT_DTYPE, 2),
    "float3": (FLOAT_DTYPE, 3),
    "int2": (INT_DTYPE, 2),
    "int3": (INT_DTYPE, 3),
    "quaternion": (FLOAT_DTYPE, 4),
}


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def as_vector(values: Iterable[float], kind: VectorKind) -> np.ndarray:
    """Validate ``values`` and return a read-only vector of ``kind``.

    Parameters
    ----------
    values : 1-D sequence (list, tuple or array) of components.
    kind   : one of 'float2', 'float3', 'int2', 'int3', 'quaternion'.

    Returns
    -------
    np.ndarray — fresh, non-writeable array of the kind's dtype.
    """
    if kind not in _KINDS:
        raise ValueError(
            f"Unknown kind {kind!r}. "
            "Valid options: 'float2', 'float3', 'int2', 'int3', 'quaternion'."
        )
    dtype, arity = _KINDS[kind]
    arr = np.array(values, dtype=dtype)
    if arr.ndim != 1:
        raise ValueError("Vector must be a 1-D array.")
    if len(arr) != arity:
        raise ValueError(
            f"Arity mismatch for {kind}: expected {arity}, got {len(arr)}."
        )
    return _freeze(arr)


def float2(x: float, y: float) -> np.ndarray:
    return as_vector((x, y), "float2")


def float3(x: float, y: float, z: float) -> np.ndarray:
    return as_vector((x, y, z), "float3")


def int2(x: int, y: int) -> np.ndarray:
    return as_vector((x, y), "int2")


def int3(x: int, y: int, z: int) -> np.ndarray:
    return as_vector((x, y, z), "int3")


def quaternion(x: float, y: float, z: float, w: float) -> np.ndarray:
    return as_vector((x, y, z, w), "quaternion")


def quaternion_identity() -> np.ndarray:
    """The no-rotation quaternion (0, 0, 0, 1)."""
    return quaternion(0.0, 0.0, 0.0, 1.0)


def kind_of(vector: np.ndarray) -> VectorKind:
    """Recover the kind of a vector from its dtype and length."""
    arr = np.asarray(vector)
    if arr.ndim != 1:
        raise ValueError("Vector must be a 1-D array.")
    is_int = np.issubdtype(arr.dtype, np.integer)
    n = len(arr)
    if n == 4 and not is_int:
        return "quaternion"
    if n in (2, 3):
        return f"{'int' if is_int else 'float'}{n}"  # type: ignore[return-value]
    raise ValueError(f"No vector kind has arity {n} and dtype {arr.dtype}.")


def like(values: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """Cast ``values`` to the dtype of ``vector`` and freeze the result."""
    return _freeze(np.array(values, dtype=np.asarray(vector).dtype))


def is_integer(vector: np.ndarray) -> bool:
    return np.issubdtype(np.asarray(vector).dtype, np.integer)


def zero(kind: VectorKind) -> np.ndarray:
    """Additive identity of ``kind``."""
    dtype, arity = _KINDS[kind]
    return _freeze(np.zeros(arity, dtype=dtype))


def infinity(kind: VectorKind) -> np.ndarray:
    """The "infinitely far" sentinel: +inf on every axis.

    Integer kinds cannot hold infinity, so they get the float vector of
    the same arity.
    """
    _, arity = _KINDS[kind]
    return _freeze(np.full(arity, np.inf, dtype=FLOAT_DTYPE))


# ---------------------------------------------------------------------------
# AxisOperand
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AxisOperand:
    """Optional per-axis operand for componentwise builders.

    Schema
    ------
    x, y, z, w : operand for that axis, or None when the axis is untouched.

    An absent axis is filled with the operator's identity element by
    ``values`` and masked out by ``mask``, so operators without an
    identity (mod, with) still leave it unchanged.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    w: Optional[float] = None

    def _components(self, arity: int) -> Tuple[Optional[float], ...]:
        given = (self.x, self.y, self.z, self.w)
        for axis, value in zip(AXES[arity:], given[arity:]):
            if value is not None:
                raise ValueError(
                    f"Axis {axis!r} does not exist on a {arity}-component vector."
                )
        return given[:arity]

    def mask(self, arity: int) -> np.ndarray:
        """True where an operand was supplied."""
        return np.array([v is not None for v in self._components(arity)])

    def values(self, arity: int, identity: float, dtype=FLOAT_DTYPE) -> np.ndarray:
        """Operand array with ``identity`` in every absent slot."""
        return np.array(
            [identity if v is None else v for v in self._components(arity)],
            dtype=dtype,
        )

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in (self.x, self.y, self.z, self.w))
