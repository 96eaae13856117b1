"""
RSA public-key encryption and signatures.

- RSA-OAEP (SHA-256, MGF1-SHA-256): encryption of short messages
- RSA-PSS (SHA-256, MGF1-SHA-256, 32-byte salt): signatures

RSA is not a bulk cipher. A 2048-bit key carries at most 190 bytes under
OAEP/SHA-256; larger payloads belong to the symmetric engine.

Key pairs are generated fresh on every request. Nothing here keeps a key
between calls; callers that want to reuse a pair hold on to the
:class:`KeyPair` themselves.
"""

from __future__ import annotations

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cryptolab.core.catalog import check_modulus_bits
from cryptolab.core.config import (
    OAEP_SHA256_OVERHEAD,
    PSS_SALT_LENGTH,
    PUBLIC_EXPONENT,
)
from cryptolab.core.exceptions import (
    CryptoLabError,
    EncryptionFailureError,
    PlaintextTooLargeError,
    UnsupportedAlgorithmError,
)
from cryptolab.core.models import (
    DecryptionFailure,
    DecryptionResult,
    DecryptionSuccess,
    EncryptionResult,
    SignatureResult,
)

from .encoding import b64decode_text, b64encode_text
from .keys import (
    KeyHandle,
    KeyPair,
    KeyScheme,
    export_private_key,
    export_public_key,
    import_private_key,
    import_public_key,
)

logger = logging.getLogger(__name__)

RSA_DECRYPTION_FAILED_MESSAGE = (
    "RSA decryption failed. Please check your private key and encrypted data."
)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def _pss() -> padding.PSS:
    return padding.PSS(
        mgf=padding.MGF1(hashes.SHA256()),
        salt_length=PSS_SALT_LENGTH,
    )


def max_plaintext_bytes(modulus_bits: int) -> int:
    """Largest OAEP/SHA-256 payload for a modulus, e.g. 190 bytes for 2048 bits."""
    return modulus_bits // 8 - OAEP_SHA256_OVERHEAD


def _generate(modulus_bits: int, scheme: KeyScheme) -> KeyPair:
    check_modulus_bits(modulus_bits)
    private_key = rsa.generate_private_key(
        public_exponent=PUBLIC_EXPONENT,
        key_size=modulus_bits,
    )
    logger.debug("generated %d-bit %s key pair", modulus_bits, scheme.value)
    private = KeyHandle(private_key, scheme)
    return KeyPair(public_key=private.public_handle(), private_key=private)


def generate_encryption_key_pair(modulus_bits: int = 2048) -> KeyPair:
    """Fresh RSA pair bound to OAEP encryption, public exponent 65537."""
    return _generate(modulus_bits, KeyScheme.OAEP)


def generate_signing_key_pair(modulus_bits: int = 2048) -> KeyPair:
    """Fresh RSA pair bound to PSS signing, public exponent 65537."""
    return _generate(modulus_bits, KeyScheme.PSS)


#  ENCRYPTION (RSA-OAEP)

def encrypt_with_public_key(
    plaintext: str,
    public_key_pem: str,
    modulus_bits: int = 2048,
) -> EncryptionResult:
    """
    Encrypt ``plaintext`` for the holder of ``public_key_pem``.

    Raises:
        UnsupportedAlgorithmError: ``modulus_bits`` is not 2048 or 4096, or the
            key's own size differs from it
        PlaintextTooLargeError: UTF-8 plaintext exceeds ``modulus_bits/8 - 66`` bytes
        EncryptionFailureError: the key could not be used or the cipher failed
    """
    check_modulus_bits(modulus_bits)
    try:
        public_key = import_public_key(public_key_pem, KeyScheme.OAEP)
    except CryptoLabError as e:
        raise EncryptionFailureError(f"RSA encryption failed: {e}") from e
    if public_key.key_size != modulus_bits:
        raise UnsupportedAlgorithmError(
            f"Public key is RSA-{public_key.key_size}, not RSA-{modulus_bits}"
        )

    data = plaintext.encode("utf-8")
    limit = max_plaintext_bytes(modulus_bits)
    if len(data) > limit:
        raise PlaintextTooLargeError(limit, len(data))

    try:
        ciphertext = public_key.require(KeyScheme.OAEP, private=False).encrypt(data, _oaep())
    except (CryptoLabError, ValueError, TypeError) as e:
        raise EncryptionFailureError(f"RSA encryption failed: {e}") from e

    logger.debug("encrypted %d bytes with RSA-%d", len(data), modulus_bits)
    return EncryptionResult(
        encrypted=b64encode_text(ciphertext),
        algorithm=f"RSA-{modulus_bits}",
    )


def decrypt_with_private_key(encrypted: str, private_key_pem: str) -> DecryptionResult:
    """
    Decrypt an OAEP ciphertext. Bad base64, a malformed key, the wrong key and
    bad padding all give the same :class:`DecryptionFailure`.
    """
    try:
        private_key = import_private_key(private_key_pem, KeyScheme.OAEP)
        ciphertext = b64decode_text(encrypted)
        data = private_key.require(KeyScheme.OAEP, private=True).decrypt(ciphertext, _oaep())
        plaintext = data.decode("utf-8")
    except (CryptoLabError, ValueError, TypeError) as e:
        logger.debug("RSA decryption rejected (%s)", type(e).__name__)
        return DecryptionFailure(error=RSA_DECRYPTION_FAILED_MESSAGE)

    return DecryptionSuccess(decrypted=plaintext)


#  SIGNATURES (RSA-PSS)

def sign_message(message: str, private_key: KeyHandle) -> str:
    """
    Sign the UTF-8 bytes of ``message`` and return the signature as base64.

    Raises:
        KeyUsageError: ``private_key`` is not a private PSS signing key
    """
    key = private_key.require(KeyScheme.PSS, private=True)
    signature = key.sign(message.encode("utf-8"), _pss(), hashes.SHA256())
    return b64encode_text(signature)


def verify_signature(message: str, signature: str, public_key: KeyHandle) -> bool:
    """
    Check a PSS signature. Returns False for a mismatch, a malformed
    signature or an unsuitable key alike; nothing is raised.
    """
    try:
        key = public_key.require(KeyScheme.PSS, private=False)
        key.verify(
            b64decode_text(signature),
            message.encode("utf-8"),
            _pss(),
            hashes.SHA256(),
        )
        return True
    except InvalidSignature:
        return False
    except (CryptoLabError, ValueError, TypeError) as e:
        logger.debug("signature check rejected (%s)", type(e).__name__)
        return False


def verify_signature_pem(message: str, signature: str, public_key_pem: str) -> bool:
    """Verify against pasted PEM text; an unreadable key counts as a rejection."""
    try:
        public_key = import_public_key(public_key_pem, KeyScheme.PSS)
    except CryptoLabError:
        return False
    return verify_signature(message, signature, public_key)


def create_signature(message: str, modulus_bits: int = 2048) -> SignatureResult:
    """
    Generate a signing pair, sign ``message`` and export both keys.

    The returned result includes the private key for display in a learning
    tool; call :meth:`SignatureResult.without_private_key` before keeping it.
    """
    pair = generate_signing_key_pair(modulus_bits)
    return SignatureResult(
        signature=sign_message(message, pair.private_key),
        public_key=export_public_key(pair.public_key),
        private_key=export_private_key(pair.private_key),
        message=message,
    )


def signature_info(signature: str, modulus_bits: int = 2048) -> dict:
    """
    Describe a base64 signature: its size against what ``modulus_bits``
    expects, and the parameters used to produce it.
    """
    expected = modulus_bits // 8
    try:
        size = len(b64decode_text(signature))
    except ValueError:
        size = None

    return {
        "size_bytes": size,
        "size_bits": size * 8 if size is not None else None,
        "expected_size_bytes": expected,
        "is_valid_size": size == expected,
        "algorithm": KeyScheme.PSS.value,
        "hash_algorithm": "SHA-256",
        "mgf": "MGF1-SHA256",
        "salt_length": PSS_SALT_LENGTH,
    }
