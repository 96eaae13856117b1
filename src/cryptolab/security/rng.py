"""Randomness as an explicit capability.

Engines take a ``RandomSource`` instead of calling ``os.urandom`` directly, so
tests can substitute a seeded source and get reproducible salts and nonces.
Production code always uses :class:`SystemRandomSource`.
"""

from __future__ import annotations

import os
from typing import Protocol


class RandomSource(Protocol):
    def token_bytes(self, length: int) -> bytes:
        ...


class SystemRandomSource:
    """Operating-system CSPRNG."""

    def token_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must be non-negative")
        return os.urandom(length)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


_system_source = SystemRandomSource()


def default_source() -> RandomSource:
    return _system_source
