from __future__ import annotations

import math
from typing import Optional

import numpy as np
from loguru import logger

from .config import DEFAULT_TEMPERATURE, UNIFORM_EPS
from .rng import UniformSource, default_rng


def _check_temperature(temperature: float) -> None:
    # Not an error: degenerate temperatures only yield zero/inf/NaN noise
    if not math.isfinite(temperature) or temperature <= 0.0:
        logger.warning(
            "Temperature {} is not a positive finite number; noise will be degenerate.",
            temperature,
        )


def gumbel_noise(
    size: int,
    temperature: float = DEFAULT_TEMPERATURE,
    rng: Optional[UniformSource] = None,
    eps: float = UNIFORM_EPS,
) -> np.ndarray:
    """
    Draw ``size`` independent Gumbel(0, 1) samples scaled by ``temperature``.

    Uniforms are clamped into ``[eps, 1 - eps]`` before the inverse-CDF
    transform ``-log(-log(u))``, so the result is always finite for a
    finite temperature. The i-th value belongs to the i-th item.

    Parameters
    ----------
    size :
        Number of samples. ``0`` returns an empty array and does not touch
        the random source.
    temperature :
        Noise scale. Not validated.
    rng :
        Anything with ``uniform(low, high, size)``; defaults to the
        process-wide generator.
    eps :
        Clamp margin away from 0 and 1.

    Returns
    -------
    np.ndarray
        float64 array of shape ``(size,)``.
    """
    size = int(size)
    if size < 0:
        raise ValueError(f"Noise size must be >= 0. Got {size}.")

    temperature = float(temperature)
    _check_temperature(temperature)

    if size == 0:
        return np.empty(0, dtype=np.float64)

    source = rng if rng is not None else default_rng()
    u = np.asarray(source.uniform(eps, 1.0 - eps, size), dtype=np.float64)
    if u.shape != (size,):
        raise ValueError(f"Uniform source returned shape {u.shape}, expected ({size},)")
    u = np.clip(u, eps, 1.0 - eps)

    with np.errstate(invalid="ignore", over="ignore"):
        return -np.log(-np.log(u)) * temperature
