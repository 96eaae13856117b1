"""Clipboard utilities for the CLI frontend.

Uses pyperclip for cross-platform clipboard access.
"""

from __future__ import annotations

import logging
from typing import Union

import pyperclip

from cryptolab.core.models import EncryptionResult, HashResult, SignatureResult, StretchResult

logger = logging.getLogger(__name__)


def clipboard_text(result: Union[EncryptionResult, HashResult, StretchResult, SignatureResult]) -> str:
    """The field of a result a user expects to paste elsewhere."""
    if isinstance(result, EncryptionResult):
        return result.encrypted
    if isinstance(result, (HashResult, StretchResult)):
        return result.hash
    if isinstance(result, SignatureResult):
        return result.signature
    raise TypeError(f"Nothing to copy from {type(result).__name__}")


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Args:
        text: The text to copy.

    Returns:
        True on success, False when no clipboard mechanism is available
        (headless sessions, missing xclip/xsel).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("clipboard unavailable: %s", e)
        return False
    return True
