"""
Weighted sampling without replacement via the Gumbel-Top-k trick.

A :class:`GumbelTopBucket` adds one Gumbel noise sample to every score,
sorts once by the noisy scores and then hands out indices from the top.
Each draw is equivalent to taking the arg-max over the items not drawn
yet, so no softmax has to be recomputed between draws, and an index is
never returned twice. When scores are log-weights and the temperature is
1.0 the draw order matches iterative categorical sampling without
replacement.

The bucket keeps its own copy of the ranked pairs; the caller's scores
are not referenced after construction.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from .config import DEFAULT_TEMPERATURE, SamplerSettings, UNIFORM_EPS
from .noise import gumbel_noise
from .numeric import add_noise
from .ranking import NoisyScorePair, rank_pairs
from .rng import UniformSource


class GumbelTopBucket:
    """
    Draws indices of ``scores`` in Gumbel-perturbed order, each at most once.

    Draws return ``None`` once the bucket is empty, and keep doing so.
    Not thread-safe; guard a shared instance with a lock.
    """

    def __init__(
        self,
        scores: Sequence[object] | np.ndarray,
        temperature: float = DEFAULT_TEMPERATURE,
        rng: Optional[UniformSource] = None,
        eps: float = UNIFORM_EPS,
    ):
        n = len(scores)
        noise = gumbel_noise(n, temperature, rng=rng, eps=eps)
        noisy = add_noise(scores, noise)

        self._ranked: Deque[NoisyScorePair] = deque(rank_pairs(noisy))
        self._size = n
        logger.debug("Built GumbelTopBucket: items={} temperature={}", n, temperature)

    @classmethod
    def from_settings(
        cls,
        scores: Sequence[object] | np.ndarray,
        settings: SamplerSettings,
        rng: Optional[UniformSource] = None,
    ) -> "GumbelTopBucket":
        return cls(scores, settings.temperature, rng=rng, eps=settings.uniform_eps)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def remaining_count(self) -> int:
        return len(self._ranked)

    @property
    def is_exhausted(self) -> bool:
        return not self._ranked

    def __len__(self) -> int:
        return len(self._ranked)

    def __repr__(self) -> str:
        return f"GumbelTopBucket(size={self._size}, remaining={len(self._ranked)})"

    # ------------------------------------------------------------------
    # Draws
    # ------------------------------------------------------------------

    def draw_with_score(self) -> Optional[Tuple[int, float]]:
        """
        Remove the top item and return ``(original_index, noisy_score)``.

        Returns ``None`` when nothing is left. The noisy score is only a
        ranking key, not a probability.
        """
        if not self._ranked:
            return None
        pair = self._ranked.popleft()
        if not self._ranked:
            logger.debug("GumbelTopBucket exhausted after {} draws", self._size)
        return pair.as_tuple()

    def draw(self) -> Optional[int]:
        drawn = self.draw_with_score()
        if drawn is None:
            return None
        return drawn[0]

    def draw_k(self, k: int) -> List[int]:
        """Draw up to ``k`` indices; fewer if the bucket runs out."""
        if k < 0:
            raise ValueError(f"k must be >= 0. Got {k}.")
        out: List[int] = []
        while len(out) < k:
            idx = self.draw()
            if idx is None:
                break
            out.append(idx)
        return out

    def __iter__(self) -> Iterator[int]:
        # Consuming: each yielded index is removed from the bucket
        while True:
            idx = self.draw()
            if idx is None:
                return
            yield idx


def sample_without_replacement(
    scores: Sequence[object] | np.ndarray,
    k: int,
    temperature: float = DEFAULT_TEMPERATURE,
    rng: Optional[UniformSource] = None,
) -> List[int]:
    """
    One-shot Gumbel-Top-k: the first ``k`` indices of a fresh bucket.

    Returns all ``len(scores)`` indices when ``k`` exceeds the item count.
    """
    return GumbelTopBucket(scores, temperature, rng=rng).draw_k(k)
