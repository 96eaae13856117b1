"""
Exceptions for CryptoLab
Every error raised at the public boundary is a CryptoLabError carrying an ErrorKind,
so callers can branch on the kind instead of parsing messages.
"""

from enum import Enum


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    INPUT_TOO_LARGE = "input_too_large"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    PLAINTEXT_TOO_LARGE = "plaintext_too_large"
    ENCRYPTION_FAILURE = "encryption_failure"
    DECRYPTION_FAILURE = "decryption_failure"
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_KEY = "invalid_key"
    INVALID_PARAMETER = "invalid_parameter"


class CryptoLabError(Exception):
    # general container for errors
    kind: ErrorKind = ErrorKind.ENCRYPTION_FAILURE


class ValidationError(CryptoLabError):
    # raised when caller input is rejected before reaching an engine
    pass


class EmptyInputError(ValidationError):
    # raised when the trimmed input is empty
    kind = ErrorKind.EMPTY_INPUT


class InputTooLargeError(ValidationError):
    # raised when input exceeds its kind-specific ceiling
    kind = ErrorKind.INPUT_TOO_LARGE


class MissingCredentialError(ValidationError):
    # raised when a password or key required by the chosen method is absent
    kind = ErrorKind.MISSING_CREDENTIAL


class InvalidParameterError(ValidationError):
    # raised when a numeric tuning parameter such as an iteration count is out of range
    kind = ErrorKind.INVALID_PARAMETER


class UnsupportedAlgorithmError(CryptoLabError):
    # raised for an algorithm id or key length outside the catalog
    kind = ErrorKind.UNSUPPORTED_ALGORITHM


class PlaintextTooLargeError(CryptoLabError):
    # raised when plaintext exceeds what RSA-OAEP can carry for a modulus
    kind = ErrorKind.PLAINTEXT_TOO_LARGE

    def __init__(self, max_bytes: int, actual_bytes: int):
        self.max_bytes = max_bytes
        self.actual_bytes = actual_bytes
        super().__init__(
            f"RSA can only encrypt up to {max_bytes} bytes. "
            "Use hybrid encryption for larger data."
        )


class EncryptionFailureError(CryptoLabError):
    # raised when key derivation or the cipher itself fails; wraps the cause
    kind = ErrorKind.ENCRYPTION_FAILURE


class KeyImportError(CryptoLabError):
    # raised when PEM text cannot be turned into a key
    kind = ErrorKind.INVALID_KEY


class KeyUsageError(CryptoLabError):
    # raised when a key is used outside the scheme or role it was created for
    kind = ErrorKind.INVALID_KEY
