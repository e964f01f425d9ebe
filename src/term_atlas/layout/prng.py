"""Seeded, stateless pseudo-random values for reproducible placement.

Not suitable for anything security related.
"""

import math
import zlib


def prng(seed: float) -> float:
    """Map a seed to a value in [0, 1) via ``frac(sin(seed) * 10000)``."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def seed_for(identifier: int | str) -> int:
    """Stable numeric seed for a record identifier.

    Integers are used as-is; anything else is CRC-32 hashed from its string
    form so the seed survives process restarts (unlike ``hash()``).
    """
    if isinstance(identifier, int) and not isinstance(identifier, bool):
        return identifier
    return zlib.crc32(str(identifier).encode("utf-8"))


def jitter(seed: float, amount: float) -> float:
    """Symmetric offset in [-amount / 2, amount / 2)."""
    return (prng(seed) - 0.5) * amount
