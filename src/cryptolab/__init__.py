"""CryptoLab: password-based encryption, RSA, signatures and hashing.

The functions re-exported here are the whole public surface. Each takes
strings and integers and returns one of the immutable result types in
:mod:`cryptolab.core.models`, or raises a :class:`CryptoLabError` subclass
whose ``kind`` tells callers what went wrong. Decryption and signature
verification never raise; they return a failure value instead.
"""

from .core.exceptions import (
    CryptoLabError,
    ErrorKind,
    ValidationError,
    EmptyInputError,
    InputTooLargeError,
    MissingCredentialError,
    InvalidParameterError,
    UnsupportedAlgorithmError,
    PlaintextTooLargeError,
    EncryptionFailureError,
    KeyImportError,
    KeyUsageError,
)
from .core.models import (
    EncryptionResult,
    DecryptionSuccess,
    DecryptionFailure,
    HashResult,
    SignatureResult,
    StretchResult,
    KeyStrengthScore,
    StrengthLevel,
    InputKind,
    CryptoAlgorithm,
)
from .core.catalog import CRYPTO_ALGORITHMS, HASH_ALGORITHMS, HashAlgorithm, get_algorithm
from .core.validation import validate_input, sanitize_input, score_key_strength
from .core.hashing import compute_digest, compare_digests, generate_salt, derive_stretched_key
from .core.toolkit import CryptoToolkit, Method
from .security import (
    KeyScheme,
    encrypt_password,
    decrypt_password,
    generate_encryption_key_pair,
    generate_signing_key_pair,
    export_public_key,
    export_private_key,
    import_public_key,
    import_private_key,
    encrypt_with_public_key,
    decrypt_with_private_key,
    sign_message,
    verify_signature,
)

__version__ = "0.1.0"

__all__ = [
    "CryptoLabError",
    "ErrorKind",
    "ValidationError",
    "EmptyInputError",
    "InputTooLargeError",
    "MissingCredentialError",
    "InvalidParameterError",
    "UnsupportedAlgorithmError",
    "PlaintextTooLargeError",
    "EncryptionFailureError",
    "KeyImportError",
    "KeyUsageError",
    "EncryptionResult",
    "DecryptionSuccess",
    "DecryptionFailure",
    "HashResult",
    "StretchResult",
    "SignatureResult",
    "KeyStrengthScore",
    "StrengthLevel",
    "InputKind",
    "CryptoAlgorithm",
    "CRYPTO_ALGORITHMS",
    "HASH_ALGORITHMS",
    "HashAlgorithm",
    "get_algorithm",
    "validate_input",
    "sanitize_input",
    "score_key_strength",
    "compute_digest",
    "compare_digests",
    "generate_salt",
    "derive_stretched_key",
    "CryptoToolkit",
    "Method",
    "KeyScheme",
    "encrypt_password",
    "decrypt_password",
    "generate_encryption_key_pair",
    "generate_signing_key_pair",
    "export_public_key",
    "export_private_key",
    "import_public_key",
    "import_private_key",
    "encrypt_with_public_key",
    "decrypt_with_private_key",
    "sign_message",
    "verify_signature",
]
