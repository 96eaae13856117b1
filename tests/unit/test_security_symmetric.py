"""
Unit tests for password-based AES-GCM encryption.
"""

import base64
import random

import pytest

from cryptolab.core.exceptions import EncryptionFailureError, ErrorKind, UnsupportedAlgorithmError
from cryptolab.core.models import DecryptionFailure, DecryptionSuccess
from cryptolab.security import symmetric
from cryptolab.security.symmetric import (
    DECRYPTION_FAILED_MESSAGE,
    HEADER_SIZE,
    SymmetricEngine,
    decrypt_password,
    encrypt_password,
    generate_random_key_hex,
)


class SeededSource:
    """Reproducible random source for tests only."""

    def __init__(self, seed):
        self._random = random.Random(seed)

    def token_bytes(self, length):
        return self._random.randbytes(length)


def _tamper(encrypted: str, index: int) -> str:
    blob = bytearray(base64.b64decode(encrypted))
    blob[index] ^= 0x01
    return base64.b64encode(bytes(blob)).decode("ascii")


# ==============================================================================
# Fixtures
# ==============================================================================

@pytest.fixture
def engine():
    """Engine wired to the OS random source."""
    return SymmetricEngine()


@pytest.fixture
def encrypted(engine):
    return engine.encrypt("attack at dawn", "correct-password", 256).encrypted


# ==============================================================================
# Tests: Round trips
# ==============================================================================

@pytest.mark.parametrize("key_bits", [128, 192, 256])
def test_round_trip_each_key_length(engine, key_bits):
    """Encrypt then decrypt with the same password and key length."""
    result = engine.encrypt("Hello, World!", "pw", key_bits)
    assert result.algorithm == f"AES-{key_bits}-GCM"

    plain = engine.decrypt(result.encrypted, "pw", key_bits)
    assert isinstance(plain, DecryptionSuccess)
    assert plain.success
    assert plain.decrypted == "Hello, World!"


def test_round_trip_unicode(engine):
    text = "Grüße, 世界! 🔐"
    result = engine.encrypt(text, "pässwörd")
    assert engine.decrypt(result.encrypted, "pässwörd").decrypted == text


def test_round_trip_module_helpers():
    """The module-level helpers share one default engine."""
    result = encrypt_password("secret", "pw", 192)
    assert decrypt_password(result.encrypted, "pw", 192).decrypted == "secret"
    assert symmetric.get_engine() is symmetric.get_engine()


def test_blob_layout_length(engine):
    """Decoded blob is 16 salt + 12 nonce + ciphertext + 16 tag bytes."""
    plaintext = "x" * 37
    blob = base64.b64decode(engine.encrypt(plaintext, "pw").encrypted)
    assert len(blob) == HEADER_SIZE + len(plaintext) + 16


def test_encryption_is_randomized(engine):
    """Same input encrypted twice gives different blobs."""
    a = engine.encrypt("same", "pw").encrypted
    b = engine.encrypt("same", "pw").encrypted
    assert a != b


def test_seeded_source_is_reproducible():
    """Two engines seeded alike produce byte-identical output."""
    a = SymmetricEngine(rng=SeededSource(7)).encrypt("msg", "pw").encrypted
    b = SymmetricEngine(rng=SeededSource(7)).encrypt("msg", "pw").encrypted
    assert a == b


def test_seeded_source_controls_salt_and_nonce():
    """Salt is drawn first, then the nonce."""
    expected = SeededSource(3)
    salt, nonce = expected.token_bytes(16), expected.token_bytes(12)

    blob = base64.b64decode(SymmetricEngine(rng=SeededSource(3)).encrypt("msg", "pw").encrypted)
    assert blob[:16] == salt
    assert blob[16:28] == nonce


def test_decrypt_accepts_whitespace_in_base64(engine, encrypted):
    """Line-wrapped ciphertext pasted from elsewhere still decrypts."""
    wrapped = "\n".join(encrypted[i:i + 20] for i in range(0, len(encrypted), 20))
    assert engine.decrypt(wrapped, "correct-password").decrypted == "attack at dawn"


# ==============================================================================
# Tests: Failures
# ==============================================================================

def test_wrong_password_fails_generically(engine, encrypted):
    result = engine.decrypt(encrypted, "wrong-password")
    assert isinstance(result, DecryptionFailure)
    assert not result.success
    assert result.error == DECRYPTION_FAILED_MESSAGE


def test_wrong_key_length_fails(engine, encrypted):
    result = engine.decrypt(encrypted, "correct-password", 128)
    assert result.error == DECRYPTION_FAILED_MESSAGE


@pytest.mark.parametrize("index", [0, 15, 16, 27, 28, -1])
def test_tampering_any_region_fails(engine, encrypted, index):
    """Flipping one bit in salt, nonce, ciphertext or tag is detected."""
    result = engine.decrypt(_tamper(encrypted, index), "correct-password")
    assert result == DecryptionFailure(error=DECRYPTION_FAILED_MESSAGE)


def test_short_blob_fails(engine):
    short = base64.b64encode(b"\x00" * 27).decode("ascii")
    assert engine.decrypt(short, "pw").error == DECRYPTION_FAILED_MESSAGE


def test_header_only_blob_fails(engine):
    header_only = base64.b64encode(b"\x00" * 28).decode("ascii")
    assert engine.decrypt(header_only, "pw").error == DECRYPTION_FAILED_MESSAGE


@pytest.mark.parametrize("bad", ["not base64!!", "abc", "====", "@@@@"])
def test_invalid_base64_fails(engine, bad):
    assert engine.decrypt(bad, "pw").error == DECRYPTION_FAILED_MESSAGE


def test_decrypt_unsupported_key_bits_fails_without_raising(engine, encrypted):
    assert engine.decrypt(encrypted, "correct-password", 512).error == DECRYPTION_FAILED_MESSAGE


def test_encrypt_unsupported_key_bits_raises(engine):
    with pytest.raises(UnsupportedAlgorithmError) as exc:
        engine.encrypt("msg", "pw", 512)
    assert exc.value.kind is ErrorKind.UNSUPPORTED_ALGORITHM


def test_encrypt_wraps_cipher_errors(engine, monkeypatch):
    """A failure inside the cipher surfaces as EncryptionFailureError."""
    def broken(*args, **kwargs):
        raise ValueError("boom")

    monkeypatch.setattr(symmetric, "derive_key", broken)
    with pytest.raises(EncryptionFailureError) as exc:
        engine.encrypt("msg", "pw")
    assert exc.value.kind is ErrorKind.ENCRYPTION_FAILURE
    assert isinstance(exc.value.__cause__, ValueError)


# ==============================================================================
# Tests: Random key helper
# ==============================================================================

@pytest.mark.parametrize("key_bits", [128, 192, 256])
def test_generate_random_key_hex(key_bits):
    key = generate_random_key_hex(key_bits)
    assert len(key) == key_bits // 4
    int(key, 16)


def test_generate_random_key_hex_rejects_bad_length():
    with pytest.raises(UnsupportedAlgorithmError):
        generate_random_key_hex(100)
