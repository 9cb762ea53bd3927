"""
Entropy sources consumed by prime sampling and encryption.

Any object exposing ``randbelow(n)`` and ``randbits(k)`` can be supplied.
Failures raised by the source are re-raised as EntropyError and never
retried: a scheme without working randomness must stop.
"""

import logging
import secrets
from typing import Protocol

from paillier_he.crypto.errors import EntropyError

logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    def randbelow(self, n: int) -> int:
        ...

    def randbits(self, k: int) -> int:
        ...


class SystemEntropy:
    """OS CSPRNG via the ``secrets`` module. Safe to share between threads."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def randbits(self, k: int) -> int:
        return secrets.randbits(k)


class RandomEntropy:
    """Adapter over a ``random.Random``-like generator (seeded tests)."""

    def __init__(self, rng):
        self.rng = rng

    def randbelow(self, n: int) -> int:
        return self.rng.randrange(n)

    def randbits(self, k: int) -> int:
        return self.rng.getrandbits(k)


def draw_below(source: EntropySource, n: int) -> int:
    try:
        value = source.randbelow(n)
    except Exception as exc:
        logger.error("entropy source failed: %s", exc)
        raise EntropyError("entropy source failed") from exc
    if not 0 <= value < n:
        logger.error("entropy source returned a value outside [0, n)")
        raise EntropyError("entropy source returned an out-of-range value")
    return value


def draw_bits(source: EntropySource, k: int) -> int:
    try:
        value = source.randbits(k)
    except Exception as exc:
        logger.error("entropy source failed: %s", exc)
        raise EntropyError("entropy source failed") from exc
    if not 0 <= value < (1 << k):
        logger.error("entropy source returned more than %d bits", k)
        raise EntropyError("entropy source returned an out-of-range value")
    return value
