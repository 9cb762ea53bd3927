import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from paillier_he.config import DEFAULT_MR_ROUNDS, MIN_KEY_BITS, get_settings, warn_if_weak
from paillier_he.crypto.arith import dec, inc, l_function, lcm, modinv, modmul, modpow, square
from paillier_he.crypto.entropy import EntropySource, SystemEntropy, draw_below
from paillier_he.crypto.errors import InverseError, KeySizeError
from paillier_he.crypto.primes import check_rounds, generate_prime

logger = logging.getLogger(__name__)

Plaintext = int
Ciphertext = int


@dataclass(frozen=True)
class PublicKey:
    n: int
    n_squared: int
    g: int

    @classmethod
    def from_n(cls, n: int) -> "PublicKey":
        return cls(n=n, n_squared=square(n), g=inc(n))


@dataclass(frozen=True)
class PrivateKey:
    public_key: PublicKey
    h: int
    u: int

    @property
    def n(self) -> int:
        return self.public_key.n

    @property
    def n_squared(self) -> int:
        return self.public_key.n_squared


class PaillierScheme(ABC):
    """
    Capability interface of an additively homomorphic Paillier scheme.
    Alternative arithmetic backends implement this without touching callers.
    """

    @abstractmethod
    def generate_keypair(self) -> PrivateKey:
        ...

    @abstractmethod
    def encrypt(self, public_key: PublicKey, plaintext: Plaintext, r: int | None = None) -> Ciphertext:
        ...

    @abstractmethod
    def decrypt(self, private_key: PrivateKey, ciphertext: Ciphertext) -> Plaintext:
        ...

    @abstractmethod
    def add(self, a: Ciphertext, b: Ciphertext, public_key: PublicKey) -> Ciphertext:
        ...

    @abstractmethod
    def multiply(self, a: Ciphertext, k: int, public_key: PublicKey) -> Ciphertext:
        ...

    @abstractmethod
    def subtract(self, a: Ciphertext, b: Ciphertext, public_key: PublicKey) -> Ciphertext:
        ...

    # ── Derived operations ─────────────────────────
    def add_plain(self, c: Ciphertext, k: int, public_key: PublicKey) -> Ciphertext:
        """Add a plaintext constant to an encrypted value."""
        return self.add(c, self.encrypt(public_key, k % public_key.n, r=1), public_key)

    def negate(self, c: Ciphertext, public_key: PublicKey) -> Ciphertext:
        return self.subtract(1, c, public_key)

    def aggregate(self, ciphertexts: Iterable[Ciphertext], public_key: PublicKey) -> Ciphertext:
        """Homomorphic sum; the empty sum is the trivial encryption of 0."""
        total = 1
        for c in ciphertexts:
            total = self.add(total, c, public_key)
        return total


class Paillier(PaillierScheme):
    """Scheme bound to one pair of primes and one entropy source."""

    def __init__(self, p: int, q: int, entropy: EntropySource | None = None):
        self.p = p
        self.q = q
        self.entropy = entropy if entropy is not None else SystemEntropy()

    def __repr__(self) -> str:
        # primes are secret
        return f"{type(self).__name__}(bits={self.p.bit_length()})"

    def generate_keypair(self) -> PrivateKey:
        n = self.p * self.q
        n_squared = square(n)
        g = inc(n)

        h = lcm(dec(self.p), dec(self.q))
        try:
            u = modinv(l_function(modpow(g, h, n_squared), n), n)
        except InverseError:
            logger.error("key generation failed: primes are not a valid distinct pair")
            raise

        logger.info("generated Paillier key pair with %d-bit modulus", n.bit_length())
        return PrivateKey(public_key=PublicKey(n=n, n_squared=n_squared, g=g), h=h, u=u)

    def encrypt(self, public_key: PublicKey, plaintext: Plaintext, r: int | None = None) -> Ciphertext:
        """
        Encrypt ``plaintext`` with blinding factor ``r``, drawn uniformly from
        [0, n) when not given. Only an ``r`` coprime to n decrypts correctly;
        any other draw reveals a factor of n and has probability about
        (p + q) / n, negligible for real key sizes.
        """
        if r is None:
            r = draw_below(self.entropy, public_key.n)
        s1 = modpow(public_key.g, plaintext, public_key.n_squared)
        s2 = modpow(r, public_key.n, public_key.n_squared)
        return modmul(s1, s2, public_key.n_squared)

    def decrypt(self, private_key: PrivateKey, ciphertext: Ciphertext) -> Plaintext:
        ch = modpow(ciphertext, private_key.h, private_key.n_squared)
        return modmul(l_function(ch, private_key.n), private_key.u, private_key.n)

    def add(self, a: Ciphertext, b: Ciphertext, public_key: PublicKey) -> Ciphertext:
        return modmul(a, b, public_key.n_squared)

    def multiply(self, a: Ciphertext, k: int, public_key: PublicKey) -> Ciphertext:
        if k < 0:
            # same plaintext product mod n
            k %= public_key.n
        return modpow(a, k, public_key.n_squared)

    def subtract(self, a: Ciphertext, b: Ciphertext, public_key: PublicKey) -> Ciphertext:
        return self.add(a, modinv(b, public_key.n_squared), public_key)


def new_scheme(
    entropy: EntropySource,
    key_bit_length: int,
    rounds: int = DEFAULT_MR_ROUNDS,
) -> Paillier:
    """Draw the two generating primes now; ``key_bit_length`` applies to each prime."""
    if key_bit_length < MIN_KEY_BITS:
        raise KeySizeError(f"prime bit length must be at least {MIN_KEY_BITS}, got {key_bit_length}")
    check_rounds(rounds)
    warn_if_weak(key_bit_length)

    p = generate_prime(key_bit_length, entropy, rounds)
    q = generate_prime(key_bit_length, entropy, rounds)
    while q == p:
        q = generate_prime(key_bit_length, entropy, rounds)

    logger.info("Paillier scheme ready with %d-bit primes", key_bit_length)
    return Paillier(p, q, entropy)


def new_default_scheme() -> Paillier:
    settings = get_settings()
    return new_scheme(SystemEntropy(), settings.key_bits, settings.mr_rounds)
