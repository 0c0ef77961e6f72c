# src/streamshield/signing/signer.py
"""HMAC-SHA256 signer/verifier.

Two signing domains share one primitive:

  sign(payload)   -- canonical JSON of a mapping (request signatures)
  sign_raw(text)  -- UTF-8 bytes of a plain string (file hash checks)

They are kept as separate methods so a raw identifier is never signed as if
it were a payload, or vice versa.
"""
from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping

from streamshield.config import Credential
from .canonical import canonicalize
from .keycodec import decode_secret, digest_to_wire


class Signer:
    def __init__(self, credential: Credential):
        self.credential = credential
        self._key = decode_secret(credential.secret_key)

    @property
    def access_key(self) -> str:
        return self.credential.access_key

    def _sign_bytes(self, data: bytes) -> str:
        return digest_to_wire(hmac.new(self._key, data, hashlib.sha256).digest())

    def sign(self, payload: Mapping[str, Any]) -> str:
        return self._sign_bytes(canonicalize(payload))

    def sign_raw(self, text: str) -> str:
        return self._sign_bytes(text.encode("utf-8"))

    def verify_file_hash(self, identifier: str, signature: str) -> bool:
        """True iff signature is exactly sign_raw(identifier)."""
        if not isinstance(signature, str):
            return False
        expected = self.sign_raw(identifier)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
