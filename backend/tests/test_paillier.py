import pytest

from paillier_he.crypto.errors import InverseError
from paillier_he.crypto.paillier import Paillier, PaillierScheme, PrivateKey, PublicKey


def test_encrypt_decrypt_roundtrip(scheme, keypair):
    pub, priv = keypair
    for msg in [0, 1, 5, 42, pub.n - 1]:
        c = scheme.encrypt(pub, msg)
        assert 0 <= c < pub.n_squared
        assert scheme.decrypt(priv, c) == msg


def test_homomorphic_addition(scheme, keypair):
    pub, priv = keypair
    m1, m2 = 1234, 5678
    agg = scheme.add(scheme.encrypt(pub, m1), scheme.encrypt(pub, m2), pub)
    assert scheme.decrypt(priv, agg) == m1 + m2


def test_addition_wraps_modulo_n(scheme, keypair):
    pub, priv = keypair
    m1, m2 = pub.n - 3, 10
    agg = scheme.add(scheme.encrypt(pub, m1), scheme.encrypt(pub, m2), pub)
    assert scheme.decrypt(priv, agg) == 7


def test_scalar_multiplication(scheme, keypair):
    pub, priv = keypair
    for m, k in [(7, 6), (0, 99), (123, 0), (pub.n - 1, 2)]:
        c = scheme.multiply(scheme.encrypt(pub, m), k, pub)
        assert scheme.decrypt(priv, c) == (m * k) % pub.n


def test_scalar_multiplication_by_negative(scheme, keypair):
    pub, priv = keypair
    c = scheme.multiply(scheme.encrypt(pub, 5), -2, pub)
    assert scheme.decrypt(priv, c) == pub.n - 10


def test_homomorphic_subtraction(scheme, keypair):
    pub, priv = keypair
    c1, c2 = scheme.encrypt(pub, 50), scheme.encrypt(pub, 8)
    assert scheme.decrypt(priv, scheme.subtract(c1, c2, pub)) == 42
    assert scheme.decrypt(priv, scheme.subtract(c2, c1, pub)) == pub.n - 42


def test_subtract_rejects_non_invertible_operand(scheme, keypair):
    pub, _ = keypair
    c1 = scheme.encrypt(pub, 3)
    with pytest.raises(InverseError) as excinfo:
        scheme.subtract(c1, pub.n, pub)
    assert excinfo.value.modulus == pub.n_squared


def test_encryption_is_probabilistic(scheme, keypair):
    pub, priv = keypair
    c1, c2 = scheme.encrypt(pub, 9), scheme.encrypt(pub, 9)
    assert c1 != c2
    assert scheme.decrypt(priv, c1) == scheme.decrypt(priv, c2) == 9


def test_add_plain(scheme, keypair):
    pub, priv = keypair
    base = scheme.encrypt(pub, 3)
    assert scheme.decrypt(priv, scheme.add_plain(base, 4, pub)) == 7
    assert scheme.decrypt(priv, scheme.add_plain(base, -5, pub)) == pub.n - 2


def test_negate(scheme, keypair):
    pub, priv = keypair
    c = scheme.negate(scheme.encrypt(pub, 11), pub)
    assert scheme.decrypt(priv, c) == pub.n - 11


def test_aggregate(scheme, keypair):
    pub, priv = keypair
    votes = [1, 0, 1, 1, 0, 1]
    total = scheme.aggregate((scheme.encrypt(pub, v) for v in votes), pub)
    assert scheme.decrypt(priv, total) == 4
    assert scheme.decrypt(priv, scheme.aggregate([], pub)) == 0


def test_keypair_shape(scheme, keypair):
    pub, priv = keypair
    assert pub.n_squared == pub.n * pub.n
    assert pub.g == pub.n + 1
    assert pub.n.bit_length() == 128
    assert priv.public_key is pub
    assert PublicKey.from_n(pub.n) == pub


def test_keys_are_immutable(keypair):
    pub, priv = keypair
    with pytest.raises(AttributeError):
        pub.n = 7
    with pytest.raises(AttributeError):
        priv.h = 7


def test_scheme_is_a_paillier_scheme(scheme):
    assert isinstance(scheme, PaillierScheme)
    assert "bits=64" in repr(scheme)


# ── Small-prime vector (p=3, q=5) ─────────────────


def test_toy_keypair(toy_scheme):
    priv = toy_scheme.generate_keypair()
    assert priv.public_key == PublicKey(n=15, n_squared=225, g=16)
    assert priv == PrivateKey(public_key=priv.public_key, h=4, u=4)


def test_toy_vector(toy_scheme):
    priv = toy_scheme.generate_keypair()
    pub = priv.public_key

    c1 = toy_scheme.encrypt(pub, 2, r=7)
    c2 = toy_scheme.encrypt(pub, 3, r=4)
    assert c1 == 58
    assert c2 == 154
    assert toy_scheme.decrypt(priv, 58) == 2
    assert toy_scheme.decrypt(priv, 154) == 3

    total = toy_scheme.add(c1, c2, pub)
    assert total == 157
    assert toy_scheme.decrypt(priv, total) == 5


def test_keygen_with_invalid_primes_fails():
    with pytest.raises(InverseError):
        Paillier(2, 3).generate_keypair()


def test_toy_roundtrip_for_every_coprime_blinding_factor(toy_scheme):
    priv = toy_scheme.generate_keypair()
    pub = priv.public_key
    for r in [1, 2, 4, 7, 8, 11, 13, 14]:
        for m in range(15):
            assert toy_scheme.decrypt(priv, toy_scheme.encrypt(pub, m, r=r)) == m
