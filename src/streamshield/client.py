# src/streamshield/client.py
"""StreamShield client: credential, registration and moderation calls.

Network and tenant-file access are the only suspension points; signing is
synchronous and stateless apart from reading the credential.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

import httpx

from .config import ClientConfig, Credential, env
from .errors import ConfigError, ModerationError, RegistrationError, SigningError
from .signing import Signer, canonicalize
from .tenant_store import TenantStore
from .transport import post_json

logger = logging.getLogger(__name__)

META_KEY = "streamshield_meta"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_utc(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and an explicit +00:00 offset."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def _is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


class StreamshieldClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config or ClientConfig()
        self._transport = transport
        self._clock = clock
        self._signer: Optional[Signer] = None
        self.credential_error: Optional[ConfigError] = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "StreamshieldClient":
        client = cls(ClientConfig.from_env(), **kwargs)
        access_key = env("STREAMSHIELD_ACCESS_KEY")
        secret_key = env("STREAMSHIELD_SECRET_KEY")
        if access_key or secret_key:
            client.set_credential(access_key, secret_key)
        return client

    # -----------------------------
    # Configuration
    # -----------------------------
    @property
    def credential(self) -> Optional[Credential]:
        return self._signer.credential if self._signer else None

    @property
    def tenant_store(self) -> TenantStore:
        return TenantStore(self.config.tenant_path)

    def set_credential(self, access_key: Any, secret_key: Any) -> bool:
        """Install the access/secret key pair.

        Non-string arguments are logged and rejected without raising; the
        rejection is kept on ``credential_error`` and any later signing
        attempt fails with SigningError. A secret that is not valid base64
        raises DecodeError.
        """
        if not isinstance(access_key, str) or not isinstance(secret_key, str):
            logger.error("[Streamshield] Missing Access Key or Secret Key")
            self.credential_error = ConfigError("Access key and secret key must be strings")
            return False
        self._signer = Signer(Credential(access_key=access_key, secret_key=secret_key))
        self.credential_error = None
        return True

    def set_sandbox_mode(self, enabled: bool = True) -> None:
        self.config = self.config.model_copy(update={"sandbox": enabled})

    # -----------------------------
    # Signing
    # -----------------------------
    def _require_signer(self) -> Signer:
        if self._signer is None:
            raise SigningError("No credential configured") from self.credential_error
        return self._signer

    def sign(self, payload: Mapping[str, Any]) -> str:
        return self._require_signer().sign(payload)

    def verify_file_hash(self, identifier: str, signature: str) -> bool:
        return self._require_signer().verify_file_hash(identifier, signature)

    def _auth_params(self, signer: Signer, signature: str) -> Dict[str, str]:
        return {"access_key": signer.access_key, "signature": signature}

    # -----------------------------
    # Registration
    # -----------------------------
    async def register(self, client_name: str, client_version: str, integration_version: str) -> bool:
        signer = self._require_signer()
        payload = {
            "client_name": client_name,
            "client_version": client_version,
            "integration_version": integration_version,
        }
        response = await post_json(
            f"{self.config.administration_base}plugins",
            params=self._auth_params(signer, signer.sign(payload)),
            body=canonicalize(payload),
            timeout_s=self.config.timeout_s,
            transport=self._transport,
        )
        if not _is_success(response):
            logger.warning("Registration failed with HTTP %s", response.status_code)
            raise RegistrationError(response.status_code, response.text)

        try:
            data = response.json().get("data")
        except (ValueError, AttributeError):
            data = None
        if not isinstance(data, dict) or not data.get("tenant_id"):
            raise RegistrationError(response.status_code, "Tenant ID not found")

        await self.tenant_store.write(data)
        logger.info("Registered tenant %s", data["tenant_id"])
        return True

    async def get_tenant_id(self) -> str:
        return await self.tenant_store.tenant_id()

    def is_registered(self) -> bool:
        return self.tenant_store.exists()

    # -----------------------------
    # Moderation
    # -----------------------------
    def build_moderation_payload(
        self,
        *,
        tenant_id: str,
        meta: Mapping[str, Any],
        fields: Iterable[Mapping[str, Any]],
        access_key: str,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            META_KEY: {
                **meta,
                "access_key": access_key,
                "tenant_id": tenant_id,
                "utc_datetime": format_utc(self._clock()),
            }
        }
        for field in fields:
            entry = dict(field)
            if "id" not in entry:
                raise ValueError("Each moderation field must carry an 'id'")
            field_id = str(entry.pop("id"))
            if field_id == META_KEY:
                raise ValueError(f"Field id {META_KEY!r} is reserved")
            payload[field_id] = entry
        return payload

    async def moderate(self, meta: Mapping[str, Any], fields: Iterable[Mapping[str, Any]]) -> bool:
        tenant_id = await self.get_tenant_id()
        signer = self._require_signer()
        payload = self.build_moderation_payload(
            tenant_id=tenant_id, meta=meta, fields=fields, access_key=signer.access_key,
        )
        # only the metadata block is signed; fields ride along unsigned
        signature = signer.sign(payload[META_KEY])
        response = await post_json(
            self.config.moderation_base,
            params=self._auth_params(signer, signature),
            body=canonicalize(payload),
            timeout_s=self.config.timeout_s,
            transport=self._transport,
        )
        if not _is_success(response):
            logger.warning("Moderation failed with HTTP %s", response.status_code)
            raise ModerationError(response.status_code, response.text)
        logger.info("Moderation request accepted (HTTP %s)", response.status_code)
        return True
