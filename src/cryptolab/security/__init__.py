"""Security helpers: key derivation, AES-GCM and RSA engines for CryptoLab.

This package provides:
- PBKDF2-HMAC-SHA256 key derivation
- password-based AES-GCM encryption with a self-describing blob
- RSA-OAEP encryption and RSA-PSS signatures with scheme-bound key handles
- an injectable random source
"""

from .kdf import generate_salt, derive_key
from .rng import RandomSource, SystemRandomSource, default_source
from .keys import (
    KeyHandle,
    KeyPair,
    KeyScheme,
    export_public_key,
    export_private_key,
    import_public_key,
    import_private_key,
)
from .symmetric import SymmetricEngine, encrypt_password, decrypt_password, generate_random_key_hex
from .asymmetric import (
    generate_encryption_key_pair,
    generate_signing_key_pair,
    encrypt_with_public_key,
    decrypt_with_private_key,
    sign_message,
    verify_signature,
    verify_signature_pem,
    create_signature,
    signature_info,
    max_plaintext_bytes,
)

__all__ = [
    "generate_salt",
    "derive_key",
    "RandomSource",
    "SystemRandomSource",
    "default_source",
    "KeyHandle",
    "KeyPair",
    "KeyScheme",
    "export_public_key",
    "export_private_key",
    "import_public_key",
    "import_private_key",
    "SymmetricEngine",
    "encrypt_password",
    "decrypt_password",
    "generate_random_key_hex",
    "generate_encryption_key_pair",
    "generate_signing_key_pair",
    "encrypt_with_public_key",
    "decrypt_with_private_key",
    "sign_message",
    "verify_signature",
    "verify_signature_pem",
    "create_signature",
    "signature_info",
    "max_plaintext_bytes",
]
