"""Static catalog of the algorithms CryptoLab supports.

The UI reads these lists to build its pickers; the engines parse caller
supplied ids through :func:`parse_hash_algorithm` and
:func:`parse_symmetric_algorithm` so an unknown id fails the same way
everywhere.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from .exceptions import UnsupportedAlgorithmError
from .models import AlgorithmKind, CryptoAlgorithm, HashAlgorithmInfo


class HashAlgorithm(Enum):
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"
    MD5 = "MD5"


class SymmetricAlgorithm(Enum):
    AES_128_GCM = 128
    AES_192_GCM = 192
    AES_256_GCM = 256

    @property
    def key_bits(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return f"AES-{self.value}-GCM"


CRYPTO_ALGORITHMS: Tuple[CryptoAlgorithm, ...] = (
    CryptoAlgorithm(
        id="aes-256-gcm",
        name="AES-256-GCM",
        kind=AlgorithmKind.SYMMETRIC,
        key_lengths=(256,),
        description="Advanced Encryption Standard with 256-bit key and Galois Counter Mode",
        use_cases=("File encryption", "Database encryption", "Secure communications"),
    ),
    CryptoAlgorithm(
        id="aes-192-gcm",
        name="AES-192-GCM",
        kind=AlgorithmKind.SYMMETRIC,
        key_lengths=(192,),
        description="Advanced Encryption Standard with 192-bit key and Galois Counter Mode",
        use_cases=("Secure messaging", "Data protection", "Cloud storage"),
    ),
    CryptoAlgorithm(
        id="aes-128-gcm",
        name="AES-128-GCM",
        kind=AlgorithmKind.SYMMETRIC,
        key_lengths=(128,),
        description="Advanced Encryption Standard with 128-bit key and Galois Counter Mode",
        use_cases=("Web applications", "Mobile apps", "IoT devices"),
    ),
    CryptoAlgorithm(
        id="rsa-2048",
        name="RSA-2048",
        kind=AlgorithmKind.ASYMMETRIC,
        key_lengths=(2048,),
        description="RSA encryption with 2048-bit key length",
        use_cases=("Digital signatures", "Key exchange", "Certificate authorities"),
    ),
    CryptoAlgorithm(
        id="rsa-4096",
        name="RSA-4096",
        kind=AlgorithmKind.ASYMMETRIC,
        key_lengths=(4096,),
        description="RSA encryption with 4096-bit key length for maximum security",
        use_cases=("High-security applications", "Government communications", "Financial systems"),
    ),
)

HASH_ALGORITHMS: Tuple[HashAlgorithmInfo, ...] = (
    HashAlgorithmInfo("SHA-256", "SHA-256", "Secure Hash Algorithm 256-bit"),
    HashAlgorithmInfo("SHA-512", "SHA-512", "Secure Hash Algorithm 512-bit"),
    HashAlgorithmInfo(
        "SHA-1", "SHA-1", "Secure Hash Algorithm 160-bit (deprecated)", deprecated=True
    ),
    HashAlgorithmInfo(
        "MD5", "MD5", "Message Digest 5 (deprecated, for comparison only)", deprecated=True
    ),
)

# Sample inputs shown by front ends
ENCRYPTION_EXAMPLES = {
    "plaintext": "Hello, World! This is a secret message.",
    "weak_password": "password123",
    "strong_password": "MyStr0ng&SecureP@ssw0rd2024!",
}


def get_algorithm(algorithm_id: str) -> CryptoAlgorithm:
    for algorithm in CRYPTO_ALGORITHMS:
        if algorithm.id == algorithm_id:
            return algorithm
    raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm_id}")


def get_hash_algorithm(algorithm_id: str) -> HashAlgorithmInfo:
    for info in HASH_ALGORITHMS:
        if info.id == algorithm_id:
            return info
    raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm_id}")


def algorithms_of_kind(kind: AlgorithmKind) -> Tuple[CryptoAlgorithm, ...]:
    return tuple(a for a in CRYPTO_ALGORITHMS if a.kind is kind)


def parse_hash_algorithm(algorithm: Union[str, HashAlgorithm]) -> HashAlgorithm:
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    try:
        return HashAlgorithm(algorithm)
    except ValueError:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm}") from None


def parse_symmetric_algorithm(key_bits: Union[int, SymmetricAlgorithm]) -> SymmetricAlgorithm:
    if isinstance(key_bits, SymmetricAlgorithm):
        return key_bits
    try:
        return SymmetricAlgorithm(key_bits)
    except ValueError:
        raise UnsupportedAlgorithmError(
            f"Unsupported AES key length: {key_bits} (expected 128, 192 or 256)"
        ) from None


def check_modulus_bits(modulus_bits: int) -> int:
    """Return ``modulus_bits`` if an RSA entry of the catalog offers it."""
    for algorithm in algorithms_of_kind(AlgorithmKind.ASYMMETRIC):
        if algorithm.supports_key_length(modulus_bits):
            return modulus_bits
    raise UnsupportedAlgorithmError(
        f"Unsupported RSA modulus: {modulus_bits} (expected 2048 or 4096)"
    )
