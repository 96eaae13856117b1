"""
Password-based authenticated encryption for CryptoLab.

Blob layout (before base64):

- 16 bytes: PBKDF2 salt
- 12 bytes: AES-GCM nonce
- N bytes: ciphertext followed by the 16-byte GCM tag

The password is the only secret needed to reverse a blob; salt and nonce
travel with it. Salt and nonce are drawn fresh for every call, so a retry
after a failure never reuses random material.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cryptolab.core.catalog import SymmetricAlgorithm, parse_symmetric_algorithm
from cryptolab.core.config import NONCE_SIZE, PBKDF2_ITERATIONS, SALT_SIZE
from cryptolab.core.exceptions import CryptoLabError, EncryptionFailureError
from cryptolab.core.models import (
    DecryptionFailure,
    DecryptionResult,
    DecryptionSuccess,
    EncryptionResult,
)

from .encoding import b64decode_text, b64encode_text
from .kdf import derive_key
from .rng import RandomSource, default_source

logger = logging.getLogger(__name__)

HEADER_SIZE = SALT_SIZE + NONCE_SIZE
DECRYPTION_FAILED_MESSAGE = "Decryption failed. Please check your password and encrypted data."


class SymmetricEngine:
    """
    AES-GCM encryption keyed by a password.

    The key is derived per message with PBKDF2-HMAC-SHA256 (100,000 rounds)
    from the password and a random salt. It only ever exists inside a single
    call and is never returned.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng or default_source()

    def _derive(self, password: str, salt: bytes, algorithm: SymmetricAlgorithm) -> AESGCM:
        key = derive_key(
            password,
            salt,
            iterations=PBKDF2_ITERATIONS,
            key_len=algorithm.key_bits // 8,
        )
        return AESGCM(key)

    def encrypt(
        self,
        plaintext: str,
        password: str,
        key_bits: Union[int, SymmetricAlgorithm] = 256,
    ) -> EncryptionResult:
        """
        Encrypt ``plaintext`` under ``password``.

        Raises:
            UnsupportedAlgorithmError: ``key_bits`` is not 128, 192 or 256
            EncryptionFailureError: key derivation or the cipher failed
        """
        algorithm = parse_symmetric_algorithm(key_bits)
        salt = self._rng.token_bytes(SALT_SIZE)
        nonce = self._rng.token_bytes(NONCE_SIZE)

        try:
            aead = self._derive(password, salt, algorithm)
            ct = aead.encrypt(nonce, plaintext.encode("utf-8"), None)
        except (ValueError, TypeError, OverflowError) as e:
            raise EncryptionFailureError(f"AES encryption failed: {e}") from e

        blob = salt + nonce + ct
        logger.debug("encrypted %d bytes with %s", len(ct), algorithm.label)
        return EncryptionResult(
            encrypted=b64encode_text(blob),
            algorithm=algorithm.label,
        )

    def decrypt(
        self,
        encrypted: str,
        password: str,
        key_bits: Union[int, SymmetricAlgorithm] = 256,
    ) -> DecryptionResult:
        """
        Decrypt a blob produced by :meth:`encrypt`.

        Never raises for bad input: malformed base64, a truncated blob, the
        wrong password, a wrong key length and tampered bytes all return the
        same :class:`DecryptionFailure`.
        """
        try:
            algorithm = parse_symmetric_algorithm(key_bits)
            blob = b64decode_text(encrypted)
            if len(blob) < HEADER_SIZE:
                raise ValueError("Ciphertext too short to contain salt and nonce")

            salt = blob[:SALT_SIZE]
            nonce = blob[SALT_SIZE:HEADER_SIZE]
            ct = blob[HEADER_SIZE:]

            aead = self._derive(password, salt, algorithm)
            plaintext = aead.decrypt(nonce, ct, None).decode("utf-8")
        except (InvalidTag, ValueError, TypeError, CryptoLabError) as e:
            # Every cause collapses to one message; only the type is logged.
            logger.debug("symmetric decryption rejected (%s)", type(e).__name__)
            return DecryptionFailure(error=DECRYPTION_FAILED_MESSAGE)

        return DecryptionSuccess(decrypted=plaintext)

    def generate_random_key_hex(self, key_bits: Union[int, SymmetricAlgorithm] = 256) -> str:
        """Random AES key rendered as hex, for demonstration only."""
        algorithm = parse_symmetric_algorithm(key_bits)
        return self._rng.token_bytes(algorithm.key_bits // 8).hex()


# module-level default engine wired to the OS RNG
_default_engine = SymmetricEngine()


def get_engine() -> SymmetricEngine:
    return _default_engine


def encrypt_password(plaintext: str, password: str, key_bits: int = 256) -> EncryptionResult:
    return get_engine().encrypt(plaintext, password, key_bits)


def decrypt_password(encrypted: str, password: str, key_bits: int = 256) -> DecryptionResult:
    return get_engine().decrypt(encrypted, password, key_bits)


def generate_random_key_hex(key_bits: int = 256) -> str:
    return get_engine().generate_random_key_hex(key_bits)
