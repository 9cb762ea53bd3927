"""
Async helpers for callers running inside an event loop.

Prime sampling and large modular exponentiations block, so they are
pushed to worker threads. The scheme is stateless apart from its entropy
source, which must tolerate concurrent reads (SystemEntropy does).
"""

from typing import Sequence

import anyio
from anyio import to_thread

from paillier_he.config import DEFAULT_MR_ROUNDS
from paillier_he.crypto.entropy import EntropySource
from paillier_he.crypto.paillier import (
    Ciphertext,
    Paillier,
    PaillierScheme,
    Plaintext,
    PrivateKey,
    PublicKey,
    new_scheme,
)


async def new_scheme_async(
    entropy: EntropySource, key_bit_length: int, rounds: int = DEFAULT_MR_ROUNDS
) -> Paillier:
    return await to_thread.run_sync(new_scheme, entropy, key_bit_length, rounds)


async def generate_keypair_async(scheme: PaillierScheme) -> PrivateKey:
    return await to_thread.run_sync(scheme.generate_keypair)


async def encrypt_async(scheme: PaillierScheme, public_key: PublicKey, plaintext: Plaintext) -> Ciphertext:
    return await to_thread.run_sync(scheme.encrypt, public_key, plaintext)


async def decrypt_async(scheme: PaillierScheme, private_key: PrivateKey, ciphertext: Ciphertext) -> Plaintext:
    return await to_thread.run_sync(scheme.decrypt, private_key, ciphertext)


async def encrypt_many(
    scheme: PaillierScheme, public_key: PublicKey, plaintexts: Sequence[Plaintext]
) -> list[Ciphertext]:
    """Encrypt concurrently; results keep the order of ``plaintexts``."""
    results: list[Ciphertext | None] = [None] * len(plaintexts)

    async def worker(index: int, m: Plaintext) -> None:
        results[index] = await encrypt_async(scheme, public_key, m)

    async with anyio.create_task_group() as tg:
        for index, m in enumerate(plaintexts):
            tg.start_soon(worker, index, m)
    return results
