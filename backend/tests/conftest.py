"""Shared pytest fixtures for the Paillier test suite."""

import random

import pytest

from paillier_he.crypto.entropy import RandomEntropy
from paillier_he.crypto.paillier import Paillier, new_scheme

TEST_KEY_BITS = 64


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def entropy():
    """Seeded entropy so failures are reproducible."""
    return RandomEntropy(random.Random(1234))


@pytest.fixture()
def scheme(entropy):
    return new_scheme(entropy, TEST_KEY_BITS)


@pytest.fixture()
def keypair(scheme):
    priv = scheme.generate_keypair()
    return priv.public_key, priv


@pytest.fixture()
def toy_scheme():
    """p=3, q=5: n=15, n²=225, g=16."""
    return Paillier(3, 5)
