"""Nearest / farthest search, averaging and closeness comparisons.

closest / farthest — reduce a collection to one vector relative to a target
average            — componentwise mean
is_closer_than / closeness_than / is_closer_to — pairwise comparisons
Closeness / fold_closest — running-best accumulator for lazy sequences

All comparisons are on squared distance with strict inequality, so ties
never replace the current best (first seen wins).
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Tuple

import numpy as np

from .builders import div_vector
from .metrics import sqr_distance_from
from .types import VectorKind, infinity, kind_of, like, zero

logger = logging.getLogger("spatial_vectors.search")

EmptyPolicy = Literal["legacy", "none"]


def _check_policy(on_empty: str) -> None:
    if on_empty not in ("legacy", "none"):
        raise ValueError(
            f"Unknown on_empty policy {on_empty!r}. Valid options: 'legacy', 'none'."
        )


# ---------------------------------------------------------------------------
# Closest / farthest
# ---------------------------------------------------------------------------


def closest(
    target: np.ndarray,
    candidates: Iterable[np.ndarray],
    on_empty: EmptyPolicy = "legacy",
) -> Optional[np.ndarray]:
    """Candidate nearest to ``target``.

    Parameters
    ----------
    target     : reference vector.
    candidates : iterable of vectors, consumed once in order.
    on_empty   : 'legacy' returns the +inf sentinel for no candidates;
                 'none' returns None instead.

    Returns
    -------
    The first candidate with the smallest squared distance to ``target``.
    """
    _check_policy(on_empty)
    best = infinity(kind_of(target))
    seen = False
    for candidate in candidates:
        seen = True
        if sqr_distance_from(candidate, target) < sqr_distance_from(best, target):
            best = candidate
    if not seen:
        logger.debug("closest: no candidates, on_empty=%s", on_empty)
        return None if on_empty == "none" else best
    return like(best, best)


def farthest(
    target: np.ndarray,
    candidates: Iterable[np.ndarray],
    on_empty: EmptyPolicy = "legacy",
) -> Optional[np.ndarray]:
    """Candidate farthest from ``target``.

    The search is seeded with the zero vector, which competes as a real
    candidate: if it is farther than every candidate it is returned.
    Empty input yields the zero vector ('legacy') or None ('none').
    """
    _check_policy(on_empty)
    best = zero(kind_of(target))
    seen = False
    for candidate in candidates:
        seen = True
        if sqr_distance_from(candidate, target) > sqr_distance_from(best, target):
            best = candidate
    if not seen:
        logger.debug("farthest: no candidates, on_empty=%s", on_empty)
        return None if on_empty == "none" else best
    return like(best, best)


def average(
    vectors: Iterable[np.ndarray],
    kind: Optional[VectorKind] = None,
) -> np.ndarray:
    """Componentwise mean of ``vectors``.

    ``kind`` is only consulted for empty input (default 'float3'): empty
    float input gives NaN, empty integer input raises FloatingPointError.
    Integer means truncate toward zero.
    """
    total: Optional[np.ndarray] = None
    count = 0
    for v in vectors:
        total = np.asarray(v).copy() if total is None else total + v
        count += 1
    if total is None:
        total = zero(kind or "float3")
        logger.debug("average: empty input for kind %s", kind_of(total))
    return div_vector(total, count)


# ---------------------------------------------------------------------------
# Pairwise closeness
# ---------------------------------------------------------------------------


def is_closer_than(
    position: np.ndarray,
    compared: np.ndarray,
    origin: np.ndarray,
) -> bool:
    """True if ``position`` is strictly closer to ``origin`` than ``compared``."""
    return bool(sqr_distance_from(position, origin) < sqr_distance_from(compared, origin))


def closeness_than(
    position: np.ndarray,
    compared: np.ndarray,
    origin: np.ndarray,
) -> Tuple[bool, np.float32]:
    """Like ``is_closer_than`` but also return the winning squared distance."""
    mine = sqr_distance_from(position, origin)
    theirs = sqr_distance_from(compared, origin)
    closer = bool(mine < theirs)
    return closer, (mine if closer else theirs)


def is_closer_to(
    position: np.ndarray,
    origin: np.ndarray,
    closest_value: float,
) -> Tuple[bool, float]:
    """Compare ``position`` against a running best squared distance.

    Returns
    -------
    (closer, closeness) where ``closeness`` is the new running best.
    """
    mine = sqr_distance_from(position, origin)
    closer = bool(mine < closest_value)
    return closer, (mine if closer else closest_value)


@dataclass(frozen=True, eq=False)
class Closeness:
    """Running best of a nearest-search.

    value : squared distance of ``best`` to the origin (inf when empty).
    best  : closest vector offered so far, or None.
    """

    value: float = float("inf")
    best: Optional[np.ndarray] = None

    @classmethod
    def start(cls) -> "Closeness":
        return cls()

    def offer(self, position: np.ndarray, origin: np.ndarray) -> "Closeness":
        """Return a new accumulator holding the closer of ``best`` and ``position``."""
        closer, value = is_closer_to(position, origin, self.value)
        if closer:
            return Closeness(value=float(value), best=position)
        return self


def fold_closest(vectors: Iterable[np.ndarray], origin: np.ndarray) -> Closeness:
    """Fold a (possibly lazy) sequence into a ``Closeness`` accumulator."""
    return functools.reduce(
        lambda acc, v: acc.offer(v, origin), vectors, Closeness.start()
    )


def closest_to(vectors: Iterable[np.ndarray], reference: np.ndarray) -> np.ndarray:
    """Iterable-first form of ``closest``; empty input gives the +inf sentinel."""
    acc = fold_closest(vectors, reference)
    if acc.best is None:
        return infinity(kind_of(reference))
    return like(acc.best, acc.best)
