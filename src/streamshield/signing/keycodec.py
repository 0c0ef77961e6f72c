# src/streamshield/signing/keycodec.py
from __future__ import annotations

import base64
import binascii

from streamshield.errors import DecodeError


def _restore_padding(text: str) -> str:
    return text + "=" * ((4 - len(text) % 4) % 4)


def decode_secret(secret_key: str) -> bytes:
    """Raw key bytes from a wire-alphabet secret. Padding may be stripped."""
    text = secret_key.replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(_restore_padding(text), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Secret key is not valid base64: {e}") from e


def encode_to_wire_alphabet(base64_text: str) -> str:
    """Standard base64 -> wire alphabet. Wire-alphabet input is accepted too.

    Trailing '=' padding is kept; the remote service compares signatures
    with padding included.
    """
    text = base64_text.replace("-", "+").replace("_", "/")
    try:
        raw = base64.b64decode(_restore_padding(text), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Not valid base64: {e}") from e
    return base64.b64encode(raw).decode("ascii").replace("+", "-").replace("/", "_")


def digest_to_wire(digest: bytes) -> str:
    return encode_to_wire_alphabet(base64.b64encode(digest).decode("ascii"))
