"""
Result and catalog data models returned by the CryptoLab engines
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple, Union, Dict, Any


def utc_timestamp() -> str:
    # ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T10:00:00.000Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AlgorithmKind(Enum):
    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"


class InputKind(Enum):
    # What a free-text field holds, which decides its size ceiling
    PLAINTEXT = "plaintext"
    CIPHERTEXT = "encrypted"


class StrengthLevel(Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


@dataclass(frozen=True)
class EncryptionResult:
    encrypted: str
    algorithm: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "encrypted": self.encrypted,
            "algorithm": self.algorithm,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class DecryptionSuccess:
    decrypted: str

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class DecryptionFailure:
    """
    Failed decryption. ``error`` is one fixed message per engine; it never says
    whether the key was wrong or the data was damaged.
    """

    error: str

    @property
    def success(self) -> bool:
        return False


DecryptionResult = Union[DecryptionSuccess, DecryptionFailure]


@dataclass(frozen=True)
class HashResult:
    hash: str
    algorithm: str
    # kept for display only
    input: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "algorithm": self.algorithm,
            "input": self.input,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class StretchResult:
    """PBKDF2 output; ``salt`` is needed to recompute ``hash`` later."""

    hash: str
    salt: str
    iterations: int
    algorithm: str = "PBKDF2-SHA256"
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "salt": self.salt,
            "iterations": self.iterations,
            "algorithm": self.algorithm,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class SignatureResult:
    """
    Output of a signing run.

    ``private_key`` is secret material. It is bundled here so a learning UI can
    show the whole key pair next to the signature; it is excluded from ``repr``
    and :meth:`without_private_key` returns a copy safe to keep around.
    """

    signature: str
    public_key: str
    private_key: str = field(repr=False)
    message: str = ""
    verified: Optional[bool] = None

    def without_private_key(self) -> "SignatureResult":
        return replace(self, private_key="")

    def with_verification(self, verified: bool) -> "SignatureResult":
        return replace(self, verified=verified)


@dataclass(frozen=True)
class KeyStrengthScore:
    score: int
    feedback: str
    level: StrengthLevel


@dataclass(frozen=True)
class CryptoAlgorithm:
    id: str
    name: str
    kind: AlgorithmKind
    key_lengths: Tuple[int, ...]
    description: str
    use_cases: Tuple[str, ...] = ()

    def supports_key_length(self, bits: int) -> bool:
        return bits in self.key_lengths


@dataclass(frozen=True)
class HashAlgorithmInfo:
    id: str
    name: str
    description: str
    # SHA-1 and MD5 are for comparison only; UIs must mark them as non-secure
    deprecated: bool = False
