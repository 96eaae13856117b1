"""Unit tests for CryptoLab data models."""

import dataclasses
import re

import pytest

from cryptolab.core.models import (
    DecryptionFailure,
    DecryptionSuccess,
    EncryptionResult,
    HashResult,
    KeyStrengthScore,
    SignatureResult,
    StrengthLevel,
    utc_timestamp,
)

ISO_MS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


# --- Timestamps ---

def test_utc_timestamp_format():
    """Timestamps are ISO-8601 UTC with milliseconds and a Z suffix."""
    assert ISO_MS.match(utc_timestamp())


# --- EncryptionResult ---

def test_encryption_result_defaults_timestamp():
    result = EncryptionResult(encrypted="abc", algorithm="AES-256-GCM")
    assert ISO_MS.match(result.timestamp)


def test_encryption_result_to_dict():
    result = EncryptionResult(encrypted="abc", algorithm="RSA-2048", timestamp="2024-01-01T00:00:00.000Z")
    assert result.to_dict() == {
        "encrypted": "abc",
        "algorithm": "RSA-2048",
        "timestamp": "2024-01-01T00:00:00.000Z",
    }


def test_results_are_immutable():
    result = EncryptionResult(encrypted="abc", algorithm="AES-256-GCM")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.encrypted = "other"


# --- Decryption results ---

def test_decryption_success_and_failure_flags():
    assert DecryptionSuccess(decrypted="hi").success is True
    assert DecryptionFailure(error="nope").success is False


def test_decryption_failure_equality():
    assert DecryptionFailure(error="x") == DecryptionFailure(error="x")


# --- HashResult ---

def test_hash_result_to_dict():
    result = HashResult(hash="00ff", algorithm="MD5", input="abc", timestamp="t")
    assert result.to_dict() == {"hash": "00ff", "algorithm": "MD5", "input": "abc", "timestamp": "t"}


# --- SignatureResult ---

@pytest.fixture
def signature_result():
    return SignatureResult(
        signature="c2ln",
        public_key="PUBLIC",
        private_key="SECRET-PRIVATE",
        message="hello",
    )


def test_signature_result_repr_hides_private_key(signature_result):
    assert "SECRET-PRIVATE" not in repr(signature_result)
    assert "PUBLIC" in repr(signature_result)


def test_signature_result_without_private_key(signature_result):
    stripped = signature_result.without_private_key()
    assert stripped.private_key == ""
    assert stripped.signature == signature_result.signature
    # the original is untouched
    assert signature_result.private_key == "SECRET-PRIVATE"


def test_signature_result_with_verification(signature_result):
    assert signature_result.verified is None
    assert signature_result.with_verification(True).verified is True
    assert signature_result.with_verification(False).verified is False


# --- KeyStrengthScore ---

def test_strength_level_labels():
    assert StrengthLevel.VERY_STRONG.value == "Very Strong"
    score = KeyStrengthScore(score=7, feedback="Good password strength", level=StrengthLevel.VERY_STRONG)
    assert score.level.value == "Very Strong"
