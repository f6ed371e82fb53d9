from __future__ import annotations

from functools import lru_cache
from typing import Optional, Protocol, Sequence

import numpy as np
from loguru import logger

from .config import SEED_ENV_VAR, seed_from_env


class UniformSource(Protocol):
    """Subset of ``numpy.random.Generator`` used by the noise generator."""

    def uniform(self, low: float, high: float, size: int) -> np.ndarray: ...


@lru_cache(maxsize=1)
def default_rng() -> np.random.Generator:
    """
    Process-wide generator shared by every caller that does not inject one.

    Not safe to share across threads; use :func:`make_rng` per thread.
    """
    seed = seed_from_env()
    if seed is not None:
        logger.info("Seeding default generator from {}={}", SEED_ENV_VAR, seed)
    return np.random.default_rng(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


class PreDrawnUniforms:
    """
    Replays a fixed stream of uniform variates.

    ``low``/``high`` are ignored; values come straight from the stream in
    order. Handy for tests and for callers that draw uniforms elsewhere.
    """

    def __init__(self, values: Sequence[float] | np.ndarray):
        self._buffer = np.asarray(values, dtype=np.float64).ravel().copy()
        self._cursor = 0

    @property
    def remaining(self) -> int:
        return int(self._buffer.size - self._cursor)

    def uniform(self, low: float = 0.0, high: float = 1.0, size: int = 1) -> np.ndarray:
        if size > self.remaining:
            raise RuntimeError(
                f"PreDrawnUniforms exhausted: asked for {size}, {self.remaining} left"
            )
        out = self._buffer[self._cursor: self._cursor + size]
        self._cursor += size
        return out.copy()
