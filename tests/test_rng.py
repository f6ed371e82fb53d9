import numpy as np
import pytest

from gumbel_top_bucket import rng as rng_mod
from gumbel_top_bucket.rng import PreDrawnUniforms, default_rng, make_rng


def test_predrawn_replays_in_order_and_exhausts():
    src = PreDrawnUniforms([0.1, 0.2, 0.3])
    assert src.uniform(0.0, 1.0, 2).tolist() == [0.1, 0.2]
    assert src.remaining == 1
    assert src.uniform(0.0, 1.0, 1).tolist() == [0.3]
    with pytest.raises(RuntimeError):
        src.uniform(0.0, 1.0, 1)


def test_make_rng_is_reproducible():
    a = make_rng(99).uniform(0.0, 1.0, 5)
    b = make_rng(99).uniform(0.0, 1.0, 5)
    assert np.array_equal(a, b)


def test_default_rng_is_shared():
    assert default_rng() is default_rng()


def test_default_rng_seeded_from_env(monkeypatch):
    monkeypatch.setenv("GUMBEL_SEED", "5")
    rng_mod.default_rng.cache_clear()
    try:
        first = default_rng().uniform(0.0, 1.0, 3)
        assert np.array_equal(first, make_rng(5).uniform(0.0, 1.0, 3))
    finally:
        rng_mod.default_rng.cache_clear()
