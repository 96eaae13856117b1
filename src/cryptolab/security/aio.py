"""Awaitable versions of the engine operations.

Key generation, PBKDF2 and RSA are CPU-bound and block; each coroutine here
runs the synchronous call in the loop's default executor so several
operations can proceed concurrently without blocking the event loop. There is
no shared state between calls. Wrapping one of these in ``asyncio.wait_for``
is fine: a timeout is a failure and a retry draws fresh salt, nonce and keys.
"""

from __future__ import annotations

import asyncio
import functools
from typing import Callable, TypeVar

from cryptolab.core import hashing
from cryptolab.core.config import PBKDF2_ITERATIONS
from cryptolab.core.models import DecryptionResult, EncryptionResult, HashResult, SignatureResult

from . import asymmetric
from .keys import KeyHandle, KeyPair
from .symmetric import SymmetricEngine, get_engine

T = TypeVar("T")


async def _run(func: Callable[..., T], *args, **kwargs) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


async def encrypt_password(
    plaintext: str, password: str, key_bits: int = 256, engine: SymmetricEngine | None = None
) -> EncryptionResult:
    return await _run((engine or get_engine()).encrypt, plaintext, password, key_bits)


async def decrypt_password(
    encrypted: str, password: str, key_bits: int = 256, engine: SymmetricEngine | None = None
) -> DecryptionResult:
    return await _run((engine or get_engine()).decrypt, encrypted, password, key_bits)


async def generate_encryption_key_pair(modulus_bits: int = 2048) -> KeyPair:
    return await _run(asymmetric.generate_encryption_key_pair, modulus_bits)


async def generate_signing_key_pair(modulus_bits: int = 2048) -> KeyPair:
    return await _run(asymmetric.generate_signing_key_pair, modulus_bits)


async def encrypt_with_public_key(
    plaintext: str, public_key_pem: str, modulus_bits: int = 2048
) -> EncryptionResult:
    return await _run(asymmetric.encrypt_with_public_key, plaintext, public_key_pem, modulus_bits)


async def decrypt_with_private_key(encrypted: str, private_key_pem: str) -> DecryptionResult:
    return await _run(asymmetric.decrypt_with_private_key, encrypted, private_key_pem)


async def sign_message(message: str, private_key: KeyHandle) -> str:
    return await _run(asymmetric.sign_message, message, private_key)


async def verify_signature(message: str, signature: str, public_key: KeyHandle) -> bool:
    return await _run(asymmetric.verify_signature, message, signature, public_key)


async def create_signature(message: str, modulus_bits: int = 2048) -> SignatureResult:
    return await _run(asymmetric.create_signature, message, modulus_bits)


async def compute_digest(text: str, algorithm: str) -> HashResult:
    return await _run(hashing.compute_digest, text, algorithm)


async def derive_stretched_key(password: str, salt: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    return await _run(hashing.derive_stretched_key, password, salt, iterations)
