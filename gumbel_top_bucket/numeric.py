"""
Combine native score values with double-precision noise.

:func:`float_add` is a single-dispatch generic function so new score
types can be supported without touching the bucket:

    @float_add.register
    def _(score: MyScore, other: float) -> float:
        return score.as_float() + other

Types that carry their own ``float_add(other)`` method are honoured
without registration.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class SupportsFloatAdd(Protocol):
    def float_add(self, other: float) -> float: ...


@singledispatch
def float_add(score: object, other: float) -> float:
    """Return ``score + other`` as a Python float (IEEE double)."""
    if isinstance(score, SupportsFloatAdd):
        return float(score.float_add(other))
    if isinstance(score, (str, bytes)):
        raise TypeError(f"Score must be numeric, got {type(score).__name__}")
    try:
        return float(score) + other  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise TypeError(
            f"Score of type {type(score).__name__} cannot be promoted to float; "
            "register it with float_add.register"
        ) from None


@float_add.register
def _(score: float, other: float) -> float:
    return score + other


@float_add.register
def _(score: int, other: float) -> float:
    return float(score) + other


@float_add.register
def _(score: np.floating, other: float) -> float:
    # float16/float32 are widened before the add
    return float(np.float64(score)) + other


@float_add.register
def _(score: np.integer, other: float) -> float:
    return float(score) + other


@float_add.register
def _(score: Decimal, other: float) -> float:
    return float(score) + other


@float_add.register
def _(score: Fraction, other: float) -> float:
    return float(score) + other


def add_noise(scores: Sequence[object] | np.ndarray, noise: np.ndarray) -> np.ndarray:
    """
    Element-wise ``float_add(scores[i], noise[i])`` as a float64 array.

    Real-valued numpy arrays skip the per-item dispatch.
    """
    noise = np.asarray(noise, dtype=np.float64)
    if isinstance(scores, np.ndarray):
        if scores.ndim != 1:
            raise ValueError(f"Scores must be 1-D. Got shape {scores.shape}.")
        if scores.dtype.kind in "fiub":
            return scores.astype(np.float64) + noise

    if len(scores) != noise.shape[0]:
        raise ValueError(
            f"Got {len(scores)} scores but {noise.shape[0]} noise values"
        )
    return np.array(
        [float_add(s, float(n)) for s, n in zip(scores, noise)],
        dtype=np.float64,
    )
