"""Typed pairs and the one-off descending sort behind a bucket."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class NoisyScorePair:
    """An item's position in the caller's scores and its score plus noise."""

    original_index: int
    noisy_score: float

    def as_tuple(self) -> Tuple[int, float]:
        return self.original_index, self.noisy_score


def _compare_desc(a: NoisyScorePair, b: NoisyScorePair) -> int:
    # NaN compares false both ways and lands on 0 (equal)
    if a.noisy_score > b.noisy_score:
        return -1
    if a.noisy_score < b.noisy_score:
        return 1
    return 0


def rank_pairs(noisy_scores: Iterable[float]) -> List[NoisyScorePair]:
    """
    Pack ``(index, noisy_score)`` pairs and sort them by score, highest first.

    The sort is stable, so equal scores keep ascending index order. NaN
    compares equal to everything: the sort still completes, with NaN
    entries placed arbitrarily.
    """
    pairs = [
        NoisyScorePair(original_index=i, noisy_score=float(s))
        for i, s in enumerate(noisy_scores)
    ]
    pairs.sort(key=cmp_to_key(_compare_desc))
    return pairs
