"""Base64 helpers shared by the engines and the PEM codec."""

import base64


def b64encode_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode_text(text: str) -> bytes:
    """
    Decode base64 text, ignoring ASCII whitespace anywhere in it.

    Raises ``binascii.Error`` (a ``ValueError``) for any other non-alphabet
    character or bad padding.
    """
    compact = "".join(text.split())
    return base64.b64decode(compact, validate=True)
