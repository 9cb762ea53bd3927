import logging
import os

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ── Defaults ───────────────────────────────────────
DEFAULT_KEY_BITS = 128  # per prime, so n is ~256 bits
MIN_KEY_BITS = 8
RECOMMENDED_MIN_KEY_BITS = 1024
DEFAULT_MR_ROUNDS = 16


class SchemeSettings(BaseModel):
    key_bits: int = Field(default=DEFAULT_KEY_BITS, ge=MIN_KEY_BITS)
    mr_rounds: int = Field(default=DEFAULT_MR_ROUNDS, ge=1, le=256)


def get_settings() -> SchemeSettings:
    """
    Build settings from the environment.
    PAILLIER_KEY_BITS is the bit length of each prime, not of n.
    """
    return SchemeSettings(
        key_bits=int(os.getenv("PAILLIER_KEY_BITS", str(DEFAULT_KEY_BITS))),
        mr_rounds=int(os.getenv("PAILLIER_MR_ROUNDS", str(DEFAULT_MR_ROUNDS))),
    )


def warn_if_weak(key_bits: int) -> bool:
    if key_bits < RECOMMENDED_MIN_KEY_BITS:
        logger.warning(
            "%d-bit primes are below the recommended %d bits", key_bits, RECOMMENDED_MIN_KEY_BITS
        )
        return True
    return False
