# src/streamshield/config.py
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_NAME = "StreamShield"

ADMINISTRATION_API_URL = "https://api.streamshield.ai/"
MODERATION_API_URL = "https://moderation.streamshield.ai/"
ADMINISTRATION_SANDBOX_API_URL = "https://api.dev.streamshield.ai/"
MODERATION_SANDBOX_API_URL = "https://moderation.dev.streamshield.ai/"


def env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def default_config_dir() -> Path:
    """Per-user config directory for StreamShield."""
    override = env("STREAMSHIELD_CONFIG_DIR")
    if override:
        return Path(override)
    home = Path.home()
    if sys.platform == "win32":
        base = env("APPDATA") or str(home / "AppData" / "Roaming")
        return Path(base) / APP_NAME / "Config"
    if sys.platform == "darwin":
        return home / "Library" / "Preferences" / APP_NAME
    base = env("XDG_CONFIG_HOME") or str(home / ".config")
    return Path(base) / APP_NAME


class Credential(BaseModel):
    access_key: str
    # URL-safe base64 encoded; never transmitted
    secret_key: str = Field(..., repr=False)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ClientConfig(BaseModel):
    sandbox: bool = False
    timeout_s: float = Field(30.0, gt=0, le=120)
    config_dir: Path = Field(default_factory=default_config_dir)
    tenant_filename: str = Field("tenant.json", min_length=1)
    administration_url: Optional[str] = None
    moderation_url: Optional[str] = None

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    @field_validator("administration_url", "moderation_url")
    @classmethod
    def _trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v and not v.endswith("/"):
            return v + "/"
        return v

    @property
    def administration_base(self) -> str:
        if self.administration_url:
            return self.administration_url
        return ADMINISTRATION_SANDBOX_API_URL if self.sandbox else ADMINISTRATION_API_URL

    @property
    def moderation_base(self) -> str:
        if self.moderation_url:
            return self.moderation_url
        return MODERATION_SANDBOX_API_URL if self.sandbox else MODERATION_API_URL

    @property
    def tenant_path(self) -> Path:
        return self.config_dir / self.tenant_filename

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from STREAMSHIELD_* environment variables."""
        kwargs = {
            "sandbox": env("STREAMSHIELD_SANDBOX", "0").lower() in ("1", "true"),
            "timeout_s": float(env("STREAMSHIELD_TIMEOUT_S", "30")),
        }
        admin = env("STREAMSHIELD_ADMINISTRATION_URL")
        if admin:
            kwargs["administration_url"] = admin
        moderation = env("STREAMSHIELD_MODERATION_URL")
        if moderation:
            kwargs["moderation_url"] = moderation
        return cls(**kwargs)
