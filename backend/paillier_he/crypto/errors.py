"""Exceptions raised by the Paillier core."""


class PaillierError(Exception):
    """Base class for every error raised by the scheme."""


class InverseError(PaillierError, ArithmeticError):
    """No modular inverse exists for the requested operand."""

    def __init__(self, value: int, modulus: int):
        super().__init__("mod inverse error: operand is not invertible")
        self.value = value
        self.modulus = modulus


class EntropyError(PaillierError):
    """The entropy source failed to produce random data."""


class KeySizeError(PaillierError, ValueError):
    """Invalid prime bit length."""


class RoundsError(PaillierError, ValueError):
    """Invalid number of Miller-Rabin rounds."""
