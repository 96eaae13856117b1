""" Digest computation, constant-time comparison and password stretching. """

import hashlib
import logging
from pathlib import Path
from typing import Optional, Union

from cryptolab.security.kdf import derive_key, generate_salt as _generate_salt_bytes
from cryptolab.security.rng import RandomSource

from .catalog import HashAlgorithm, parse_hash_algorithm
from .config import PBKDF2_ITERATIONS
from .exceptions import InvalidParameterError
from .models import HashResult

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536  # 64KB
STRETCHED_KEY_BYTES = 32

_HASHLIB_NAMES = {
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA512: "sha512",
    HashAlgorithm.MD5: "md5",
}


_NOT_FOR_SECURITY = frozenset({HashAlgorithm.SHA1, HashAlgorithm.MD5})


def _new_hash(algorithm: HashAlgorithm):
    # MD5 and SHA-1 are offered for comparison, not for security decisions
    return hashlib.new(
        _HASHLIB_NAMES[algorithm],
        usedforsecurity=algorithm not in _NOT_FOR_SECURITY,
    )


def compute_digest(text: str, algorithm: Union[str, HashAlgorithm]) -> HashResult:
    """Hash the UTF-8 bytes of ``text`` and return a lowercase hex digest."""
    algo = parse_hash_algorithm(algorithm)
    h = _new_hash(algo)
    h.update(text.encode("utf-8"))
    logger.debug("computed %s digest over %d chars", algo.value, len(text))
    return HashResult(hash=h.hexdigest(), algorithm=algo.value, input=text)


def compute_file_digest(file_path: Path, algorithm: Union[str, HashAlgorithm] = HashAlgorithm.SHA256) -> str:

    # Hashes a file in chunks and returns the hex digest.

    h = _new_hash(parse_hash_algorithm(algorithm))
    with open(file_path, 'rb') as f:
        while True:
            data = f.read(CHUNK_SIZE)
            if not data:
                break
            h.update(data)
    return h.hexdigest()


def compare_digests(a: str, b: str) -> bool:
    """
    Compare two digest strings in time that depends only on their length.

    Every character pair is XORed into an accumulator; there is no early exit
    once the lengths match.
    """
    if len(a) != len(b):
        return False

    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)
    return result == 0


def generate_salt(byte_length: int = 16, rng: Optional[RandomSource] = None) -> str:
    """Return ``byte_length`` secure random bytes as hex."""
    return _generate_salt_bytes(byte_length, rng=rng).hex()


def derive_stretched_key(password: str, salt: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    """
    PBKDF2-HMAC-SHA256 of ``password`` for password storage, as hex.

    ``salt`` is the text produced by :func:`generate_salt` and is fed to PBKDF2
    as its UTF-8 bytes, so a stored ``(salt, hash)`` pair can be re-checked
    from the strings alone.
    """
    if iterations <= 0:
        raise InvalidParameterError(f"Iterations must be positive, got {iterations}")
    key = derive_key(password, salt.encode("utf-8"), iterations=iterations, key_len=STRETCHED_KEY_BYTES)
    return key.hex()
