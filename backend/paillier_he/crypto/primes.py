import logging

from paillier_he.config import DEFAULT_MR_ROUNDS
from paillier_he.crypto.entropy import EntropySource, draw_below, draw_bits
from paillier_he.crypto.errors import KeySizeError, RoundsError

logger = logging.getLogger(__name__)

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def check_rounds(rounds: int) -> None:
    # zero rounds would accept any composite without a small factor
    if rounds < 1:
        raise RoundsError(f"at least one Miller-Rabin round is required, got {rounds}")


def is_probable_prime(n: int, entropy: EntropySource, rounds: int = DEFAULT_MR_ROUNDS) -> bool:
    check_rounds(rounds)
    if n < 2:
        return False
    if n in SMALL_PRIMES:
        return True
    if any((n % p) == 0 for p in SMALL_PRIMES):
        return False

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = draw_below(entropy, n - 3) + 2
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(bits: int, entropy: EntropySource, rounds: int = DEFAULT_MR_ROUNDS) -> int:
    """
    Sample a random prime of exactly ``bits`` bits.

    The two top bits are forced so that the product of two such primes
    is exactly ``2 * bits`` long. Blocks until a candidate passes.
    """
    if bits < 2:
        raise KeySizeError(f"prime bit length must be at least 2, got {bits}")
    check_rounds(rounds)
    if bits == 2:
        return 3

    rejected = 0
    while True:
        candidate = draw_bits(entropy, bits)
        candidate |= 1 | (3 << (bits - 2))
        if is_probable_prime(candidate, entropy, rounds):
            logger.debug("found %d-bit prime after %d rejected candidates", bits, rejected)
            return candidate
        rejected += 1
