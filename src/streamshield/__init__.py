"""StreamShield client SDK.

Signs requests to the StreamShield moderation service with an HMAC-SHA256
shared secret, registers an installation to obtain a tenant id, and submits
content for moderation.
"""

from .client import StreamshieldClient
from .config import ClientConfig, Credential
from .errors import (
    ConfigError,
    DecodeError,
    ModerationError,
    NetworkError,
    NotRegisteredError,
    RegistrationError,
    SigningError,
    StreamshieldError,
)
from .signing import Signer, canonicalize, decode_secret, encode_to_wire_alphabet

__all__ = [
    "ClientConfig",
    "ConfigError",
    "Credential",
    "DecodeError",
    "ModerationError",
    "NetworkError",
    "NotRegisteredError",
    "RegistrationError",
    "Signer",
    "SigningError",
    "StreamshieldClient",
    "StreamshieldError",
    "canonicalize",
    "decode_secret",
    "encode_to_wire_alphabet",
]
