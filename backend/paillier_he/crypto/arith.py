import math

from paillier_he.crypto.errors import InverseError


def square(x: int) -> int:
    return x * x


def inc(x: int) -> int:
    return x + 1


def dec(x: int) -> int:
    return x - 1


def lcm(a: int, b: int) -> int:
    return abs(a * b) // math.gcd(a, b)


def modpow(base: int, exp: int, mod: int) -> int:
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exp, mod)


def modinv(a: int, mod: int) -> int:
    """Inverse of ``a`` modulo ``mod``; raises InverseError when gcd(a, mod) != 1."""
    try:
        return pow(a, -1, mod)
    except ValueError as exc:
        raise InverseError(a, mod) from exc


def l_function(x: int, n: int) -> int:
    # x must be congruent to 1 mod n; not checked here
    return (x - 1) // n


def modmul(a: int, b: int, mod: int) -> int:
    return (a * b) % mod
