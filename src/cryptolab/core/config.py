"""Runtime settings for CryptoLab.

Wire constants (salt, nonce and tag sizes, the PBKDF2 work factor used for
ciphertext) are fixed: changing them would make existing ciphertext
undecryptable. Only caller-facing defaults can be overridden through the
environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

SALT_SIZE = 16
NONCE_SIZE = 12
TAG_SIZE = 16
PBKDF2_ITERATIONS = 100_000
PUBLIC_EXPONENT = 65537
PSS_SALT_LENGTH = 32
# OAEP with SHA-256: 2 * 32-byte digest + 2
OAEP_SHA256_OVERHEAD = 66

PLAINTEXT_MAX_CHARS = 10_000
CIPHERTEXT_MAX_CHARS = 50_000

SYMMETRIC_KEY_BITS = (128, 192, 256)
RSA_MODULUS_BITS = (2048, 4096)


@dataclass(frozen=True)
class CryptoSettings:
    """Defaults used when a caller does not pick a value explicitly."""

    default_key_bits: int = 256
    default_modulus_bits: int = 2048
    stretch_iterations: int = PBKDF2_ITERATIONS
    log_level: int = logging.INFO


def _int_from_env(name: str, default: int, allowed: tuple[int, ...] | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if allowed is not None and value not in allowed:
        raise ValueError(f"{name} must be one of {allowed}, got {value}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> CryptoSettings:
    """
    Build settings from ``CRYPTOLAB_*`` environment variables.

    - ``CRYPTOLAB_DEFAULT_KEY_BITS``: 128, 192 or 256
    - ``CRYPTOLAB_DEFAULT_MODULUS_BITS``: 2048 or 4096
    - ``CRYPTOLAB_STRETCH_ITERATIONS``: PBKDF2 rounds for stretched password hashes
    - ``CRYPTOLAB_LOG_LEVEL``: a logging level name such as ``DEBUG``
    """
    level_name = os.getenv("CRYPTOLAB_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"CRYPTOLAB_LOG_LEVEL is not a logging level: {level_name!r}")

    return CryptoSettings(
        default_key_bits=_int_from_env(
            "CRYPTOLAB_DEFAULT_KEY_BITS", 256, SYMMETRIC_KEY_BITS
        ),
        default_modulus_bits=_int_from_env(
            "CRYPTOLAB_DEFAULT_MODULUS_BITS", 2048, RSA_MODULUS_BITS
        ),
        stretch_iterations=_int_from_env(
            "CRYPTOLAB_STRETCH_ITERATIONS", PBKDF2_ITERATIONS
        ),
        log_level=level,
    )
