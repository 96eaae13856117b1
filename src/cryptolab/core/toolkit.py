"""
High-level entry point wiring validation into the engines.

``CryptoToolkit`` runs the same sequence for every request: validate the raw
text, sanitize it, then hand it to the symmetric, asymmetric or digest
engine. Front ends should call this instead of the engines so that input
limits and sanitization are applied consistently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cryptolab.security import asymmetric
from cryptolab.security.keys import export_private_key, export_public_key
from cryptolab.security.symmetric import SymmetricEngine

from . import hashing
from .catalog import HashAlgorithm
from .config import CryptoSettings
from .exceptions import EmptyInputError, MissingCredentialError, UnsupportedAlgorithmError
from .models import (
    DecryptionResult,
    EncryptionResult,
    HashResult,
    InputKind,
    KeyStrengthScore,
    SignatureResult,
    StretchResult,
)
from .validation import require_valid_input, sanitize_input, score_key_strength

logger = logging.getLogger(__name__)


class Method(Enum):
    AES = "aes"
    RSA = "rsa"


def _parse_method(method: Union[str, Method]) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(str(method).lower())
    except ValueError:
        raise UnsupportedAlgorithmError(f"Unsupported encryption method: {method}") from None


@dataclass(frozen=True)
class RSAKeyExport:
    """PEM text of a generated encryption pair. ``private_key`` is secret."""

    public_key: str
    private_key: str


@dataclass(frozen=True)
class EncryptionOutcome:
    result: EncryptionResult
    # set only when the toolkit generated a fresh RSA pair for this call
    generated_keys: Optional[RSAKeyExport] = None


class CryptoToolkit:
    """
    Validation-first facade over the CryptoLab engines.

    - ``encrypt`` / ``decrypt``: AES-GCM with a password or RSA-OAEP with PEM keys
    - ``hash``: digest of sanitized text
    - ``stretch``: PBKDF2 password hash with its salt
    - ``sign`` / ``verify``: RSA-PSS signatures
    - ``strength``: password scoring

    Validation errors propagate as :class:`~cryptolab.core.exceptions.ValidationError`
    subclasses with a message fit for display.
    """

    def __init__(
        self,
        settings: Optional[CryptoSettings] = None,
        symmetric: Optional[SymmetricEngine] = None,
    ):
        self.settings = settings or CryptoSettings()
        self.symmetric = symmetric or SymmetricEngine()

    @staticmethod
    def _prepare(text: str, kind: InputKind) -> str:
        require_valid_input(text, kind)
        return sanitize_input(text)

    def encrypt(
        self,
        text: str,
        method: Union[str, Method] = Method.AES,
        password: Optional[str] = None,
        key_bits: Optional[int] = None,
        public_key_pem: Optional[str] = None,
    ) -> EncryptionOutcome:
        """
        Encrypt ``text`` with the chosen method.

        For RSA without ``public_key_pem`` a fresh encryption pair of
        ``key_bits`` (default: settings modulus) is generated and returned in
        :attr:`EncryptionOutcome.generated_keys`.
        """
        method = _parse_method(method)
        plaintext = self._prepare(text, InputKind.PLAINTEXT)

        if method is Method.AES:
            if not password:
                raise MissingCredentialError("Password is required for AES encryption")
            bits = key_bits or self.settings.default_key_bits
            return EncryptionOutcome(self.symmetric.encrypt(plaintext, password, bits))

        bits = key_bits or self.settings.default_modulus_bits
        generated = None
        if not public_key_pem:
            pair = asymmetric.generate_encryption_key_pair(bits)
            generated = RSAKeyExport(
                public_key=export_public_key(pair.public_key),
                private_key=export_private_key(pair.private_key),
            )
            public_key_pem = generated.public_key
            logger.info("generated a fresh RSA-%d pair for encryption", bits)
        result = asymmetric.encrypt_with_public_key(plaintext, public_key_pem, bits)
        return EncryptionOutcome(result, generated)

    def decrypt(
        self,
        text: str,
        method: Union[str, Method] = Method.AES,
        password: Optional[str] = None,
        key_bits: Optional[int] = None,
        private_key_pem: Optional[str] = None,
    ) -> DecryptionResult:
        method = _parse_method(method)
        encrypted = self._prepare(text, InputKind.CIPHERTEXT)

        if method is Method.AES:
            if not password:
                raise MissingCredentialError("Password is required for AES decryption")
            bits = key_bits or self.settings.default_key_bits
            return self.symmetric.decrypt(encrypted, password, bits)

        if not private_key_pem or not private_key_pem.strip():
            raise MissingCredentialError("Private key is required for RSA decryption")
        return asymmetric.decrypt_with_private_key(encrypted, private_key_pem)

    def hash(self, text: str, algorithm: Union[str, HashAlgorithm] = HashAlgorithm.SHA256) -> HashResult:
        return hashing.compute_digest(self._prepare(text, InputKind.PLAINTEXT), algorithm)

    def sign(self, message: str, modulus_bits: Optional[int] = None) -> SignatureResult:
        if not message.strip():
            raise EmptyInputError("Message is required")
        return asymmetric.create_signature(message, modulus_bits or self.settings.default_modulus_bits)

    def verify(self, message: str, signature: str, public_key_pem: str) -> bool:
        if not (message.strip() and signature.strip() and public_key_pem.strip()):
            raise MissingCredentialError(
                "Please provide message, signature, and public key for verification"
            )
        return asymmetric.verify_signature_pem(message, signature.strip(), public_key_pem)

    def stretch(
        self,
        password: str,
        salt: Optional[str] = None,
        iterations: Optional[int] = None,
    ) -> StretchResult:
        """
        PBKDF2-HMAC-SHA256 of ``password`` for password storage.

        A fresh hex salt is drawn when ``salt`` is blank; ``iterations``
        defaults to ``settings.stretch_iterations``.
        """
        if not password:
            raise MissingCredentialError("Password is required")
        salt = salt.strip() if salt and salt.strip() else hashing.generate_salt()
        rounds = self.settings.stretch_iterations if iterations is None else iterations
        digest = hashing.derive_stretched_key(password, salt, rounds)
        logger.debug("stretched a password with %d iterations", rounds)
        return StretchResult(hash=digest, salt=salt, iterations=rounds)

    def strength(self, password: str) -> KeyStrengthScore:
        return score_key_strength(password)
