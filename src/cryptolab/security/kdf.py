from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from cryptolab.core.config import PBKDF2_ITERATIONS, SALT_SIZE
from .rng import RandomSource, default_source


def generate_salt(length: int = SALT_SIZE, rng: Optional[RandomSource] = None) -> bytes:
    """Return a cryptographically secure random salt."""
    return (rng or default_source()).token_bytes(length)


def derive_key(
    password: Union[str, bytes],
    salt: bytes,
    iterations: int = PBKDF2_ITERATIONS,
    key_len: int = 32,
) -> bytes:
    """
    Derive key bytes from a password using PBKDF2-HMAC-SHA256.
    Returns raw derived key bytes.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=key_len,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password)
