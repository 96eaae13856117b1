"""Small helper to build a CryptoLab app context for the TUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cryptolab.core.config import CryptoSettings, load_settings
from cryptolab.core.toolkit import CryptoToolkit


@dataclass
class AppContext:
    """Container for runtime objects the UI needs."""

    settings: CryptoSettings
    toolkit: CryptoToolkit
    # PEM text of the last generated RSA encryption pair, reused until replaced
    rsa_public_key: Optional[str] = None
    rsa_private_key: Optional[str] = field(default=None, repr=False)

    def remember_rsa_keys(self, public_key: str, private_key: str) -> None:
        self.rsa_public_key = public_key
        self.rsa_private_key = private_key

    def forget_rsa_keys(self) -> None:
        self.rsa_public_key = None
        self.rsa_private_key = None


def build_context(settings: Optional[CryptoSettings] = None) -> AppContext:
    """
    Build the toolkit the TUI talks to.

    Settings come from the ``CRYPTOLAB_*`` environment variables unless given
    explicitly (see :func:`cryptolab.core.config.load_settings`). The context
    keeps no secrets beyond the RSA pair the user generated in this session;
    nothing is written to disk.
    """
    settings = settings or load_settings()
    return AppContext(settings=settings, toolkit=CryptoToolkit(settings=settings))
