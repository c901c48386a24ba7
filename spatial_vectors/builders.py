"""Componentwise builders for spatial-vectors.

All builders take a vector (any kind, quaternions included) and an
optional operand per axis.  An absent operand leaves that axis unchanged:

with_ — replace the axis
add   — identity 0
sub   — identity 0
mul   — identity 1
div   — identity 1
mod   — no identity; absent axes are masked out

Integer division truncates toward zero and ``mod`` is the truncated
remainder (sign of the dividend) on both integer and float kinds.
Division by zero is left to numpy: inf/NaN for floats, a
``FloatingPointError`` for integers.
"""

from __future__ import annotations

from typing import Callable, Dict, Literal, Optional, Tuple

import numpy as np

from .types import AxisOperand, is_integer, like

BuilderOp = Literal["with", "add", "sub", "mul", "div", "mod"]

_Operator = Callable[[np.ndarray, np.ndarray], np.ndarray]


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


def _replace(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return b


def _div(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if is_integer(a):
        with np.errstate(divide="raise", invalid="raise"):
            return (a - np.fmod(a, b)) // b
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(a, b)


def _mod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if is_integer(a):
        with np.errstate(divide="raise", invalid="raise"):
            return np.fmod(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.fmod(a, b)


# op -> (operator, identity element used to fill absent axes)
_OPERATORS: Dict[str, Tuple[_Operator, float]] = {
    "with": (_replace, 0),
    "add": (np.add, 0),
    "sub": (np.subtract, 0),
    "mul": (np.multiply, 1),
    "div": (_div, 1),
    "mod": (_mod, 1),
}


def componentwise(
    vector: np.ndarray,
    operand: AxisOperand,
    op: BuilderOp = "with",
) -> np.ndarray:
    """Apply ``op`` on every axis that ``operand`` supplies.

    Parameters
    ----------
    vector  : source vector; never modified.
    operand : per-axis operands; absent axes pass through untouched.
    op      : one of 'with', 'add', 'sub', 'mul', 'div', 'mod'.

    Returns
    -------
    np.ndarray — new vector of the same kind as ``vector``.
    """
    if op not in _OPERATORS:
        raise ValueError(
            f"Unknown op {op!r}. "
            "Valid options: 'with', 'add', 'sub', 'mul', 'div', 'mod'."
        )
    fn, identity = _OPERATORS[op]
    v = np.asarray(vector)
    arity = len(v)
    if operand.is_empty:
        return like(v, v)
    mask = operand.mask(arity)
    result = fn(v, operand.values(arity, identity, dtype=v.dtype))
    return like(np.where(mask, result, v), v)


# ---------------------------------------------------------------------------
# Named builders
# ---------------------------------------------------------------------------


def with_(
    vector: np.ndarray,
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    w: Optional[float] = None,
) -> np.ndarray:
    """Set x, y, z and/or w to a new value."""
    return componentwise(vector, AxisOperand(x, y, z, w), "with")


def add(vector, x=None, y=None, z=None, w=None) -> np.ndarray:
    """Add a value to x, y, z and/or w."""
    return componentwise(vector, AxisOperand(x, y, z, w), "add")


def sub(vector, x=None, y=None, z=None, w=None) -> np.ndarray:
    """Subtract a value from x, y, z and/or w."""
    return componentwise(vector, AxisOperand(x, y, z, w), "sub")


def mul(vector, x=None, y=None, z=None, w=None) -> np.ndarray:
    return componentwise(vector, AxisOperand(x, y, z, w), "mul")


def div(vector, x=None, y=None, z=None, w=None) -> np.ndarray:
    return componentwise(vector, AxisOperand(x, y, z, w), "div")


def mod(vector, x=None, y=None, z=None, w=None) -> np.ndarray:
    return componentwise(vector, AxisOperand(x, y, z, w), "mod")


def add_vector(vector: np.ndarray, other: np.ndarray) -> np.ndarray:
    return like(np.asarray(vector) + np.asarray(other), vector)


def sub_vector(vector: np.ndarray, other: np.ndarray) -> np.ndarray:
    return like(np.asarray(vector) - np.asarray(other), vector)


def div_vector(vector: np.ndarray, divisor) -> np.ndarray:
    """Whole-vector division with the same truncation and zero rules as ``div``."""
    v = np.asarray(vector)
    return like(_div(v, np.asarray(divisor, dtype=v.dtype)), v)


def with_origin(vector: np.ndarray, origin: np.ndarray) -> np.ndarray:
    """Re-express ``vector`` relative to a new ``origin`` (vector + origin)."""
    return add_vector(vector, origin)
