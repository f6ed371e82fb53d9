from __future__ import annotations

import os

from pydantic import BaseModel, Field


# ---------------------------
# Noise settings
# ---------------------------

# Default noise scale; 1.0 matches softmax sampling when scores are log-weights
DEFAULT_TEMPERATURE = float(os.getenv("GUMBEL_TEMPERATURE", "1.0"))

# Uniform variates are clamped to [UNIFORM_EPS, 1 - UNIFORM_EPS] so that
# -log(-log(u)) stays finite
UNIFORM_EPS = 1e-10


# ---------------------------
# Random source
# ---------------------------

# Seeds the process-wide generator when set (useful for reproducible runs)
SEED_ENV_VAR = "GUMBEL_SEED"


def seed_from_env() -> int | None:
    raw = os.getenv(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    return int(raw)


# ---------------------------
# Pydantic models
# ---------------------------

class SamplerSettings(BaseModel):
    """
    Structured settings for building buckets.

    ``temperature`` is not validated: zero, negative or
    non-finite values are accepted and produce degenerate noise.
    """

    temperature: float = DEFAULT_TEMPERATURE
    uniform_eps: float = Field(default=UNIFORM_EPS, gt=0.0, lt=0.5)
