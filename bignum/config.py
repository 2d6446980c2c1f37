"""Environment-driven configuration for `bignum`.

Variables:
- ``BIGNUM_MAX_INPUT_DIGITS``: maximum length of decimal text after the optional
  sign (0 = unbounded). Longer input is rejected as ``too_long``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

MAX_INPUT_DIGITS_ENV = "BIGNUM_MAX_INPUT_DIGITS"
MAX_INPUT_DIGITS_CAP: int = 10_000_000


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


@dataclass(frozen=True)
class BignumConfig:
    max_input_digits: int = 0


def load_config() -> BignumConfig:
    """Read configuration from the environment (bad values fall back to defaults)."""
    return BignumConfig(
        max_input_digits=_env_int(MAX_INPUT_DIGITS_ENV, 0, lo=0, hi=MAX_INPUT_DIGITS_CAP),
    )


@lru_cache(maxsize=1)
def get_config() -> BignumConfig:
    """Process-wide configuration. Call ``get_config.cache_clear()`` to reload."""
    return load_config()
