"""Tests for config — endpoint selection, env loading, config directory."""
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from streamshield.config import (
    ADMINISTRATION_API_URL,
    ADMINISTRATION_SANDBOX_API_URL,
    MODERATION_API_URL,
    MODERATION_SANDBOX_API_URL,
    ClientConfig,
    Credential,
    default_config_dir,
)


def test_production_endpoints_by_default(tmp_path):
    cfg = ClientConfig(config_dir=tmp_path)
    assert cfg.administration_base == ADMINISTRATION_API_URL
    assert cfg.moderation_base == MODERATION_API_URL


def test_sandbox_endpoints(tmp_path):
    cfg = ClientConfig(config_dir=tmp_path, sandbox=True)
    assert cfg.administration_base == ADMINISTRATION_SANDBOX_API_URL
    assert cfg.moderation_base == MODERATION_SANDBOX_API_URL


def test_explicit_urls_override_sandbox(tmp_path):
    cfg = ClientConfig(
        config_dir=tmp_path,
        sandbox=True,
        administration_url="http://localhost:8000/",
        moderation_url="http://localhost:8001/",
    )
    assert cfg.administration_base == "http://localhost:8000/"
    assert cfg.moderation_base == "http://localhost:8001/"


def test_tenant_path(tmp_path):
    assert ClientConfig(config_dir=tmp_path).tenant_path == tmp_path / "tenant.json"


def test_rejects_unknown_fields(tmp_path):
    with pytest.raises(ValidationError):
        ClientConfig(config_dir=tmp_path, retries=3)


@pytest.mark.parametrize("timeout", [0, -1, 500])
def test_timeout_bounds(tmp_path, timeout):
    with pytest.raises(ValidationError):
        ClientConfig(config_dir=tmp_path, timeout_s=timeout)


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("STREAMSHIELD_SANDBOX", "1")
    monkeypatch.setenv("STREAMSHIELD_TIMEOUT_S", "5")
    monkeypatch.setenv("STREAMSHIELD_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("STREAMSHIELD_MODERATION_URL", "http://localhost:9000/")
    monkeypatch.delenv("STREAMSHIELD_ADMINISTRATION_URL", raising=False)
    cfg = ClientConfig.from_env()
    assert cfg.sandbox is True
    assert cfg.timeout_s == 5.0
    assert cfg.config_dir == tmp_path
    assert cfg.moderation_base == "http://localhost:9000/"
    assert cfg.administration_base == ADMINISTRATION_SANDBOX_API_URL


def test_config_dir_linux(monkeypatch, tmp_path):
    monkeypatch.delenv("STREAMSHIELD_CONFIG_DIR", raising=False)
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_dir() == tmp_path / "StreamShield"

    monkeypatch.delenv("XDG_CONFIG_HOME")
    assert default_config_dir() == Path.home() / ".config" / "StreamShield"


def test_config_dir_windows(monkeypatch, tmp_path):
    monkeypatch.delenv("STREAMSHIELD_CONFIG_DIR", raising=False)
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert default_config_dir() == tmp_path / "StreamShield" / "Config"


def test_config_dir_macos(monkeypatch):
    monkeypatch.delenv("STREAMSHIELD_CONFIG_DIR", raising=False)
    monkeypatch.setattr(sys, "platform", "darwin")
    assert default_config_dir() == Path.home() / "Library" / "Preferences" / "StreamShield"


def test_credential_is_frozen():
    cred = Credential(access_key="AK", secret_key="c2VjcmV0")
    with pytest.raises(ValidationError):
        cred.access_key = "other"


def test_url_overrides_get_trailing_slash(tmp_path):
    cfg = ClientConfig(
        config_dir=tmp_path,
        administration_url="http://localhost:8000",
        moderation_url=" http://localhost:8001/mod ",
    )
    assert cfg.administration_base == "http://localhost:8000/"
    assert cfg.moderation_base == "http://localhost:8001/mod/"
