# src/streamshield/errors.py
from __future__ import annotations

from typing import Optional


class StreamshieldError(RuntimeError):
    pass


class ConfigError(StreamshieldError):
    """Missing or invalid credential configuration."""


class DecodeError(StreamshieldError, ValueError):
    """Secret key is not valid (URL-safe) base64. Not retryable."""


class SigningError(StreamshieldError):
    pass


class NotRegisteredError(StreamshieldError):
    pass


class NetworkError(StreamshieldError):
    """Transport failure or non-2xx response.

    status is None when no response was received at all.
    """

    def __init__(self, status: Optional[int], body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"{status} - {body}")


class RegistrationError(NetworkError):
    pass


class ModerationError(NetworkError):
    pass
