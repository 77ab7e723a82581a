"""
Unit tests for API configuration loading and validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from workshop_api.api.api_config import ApiConfig, load_api_config


def test_load_api_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_BASE_PATH", "API_PORT", "API_ENABLE_REQUEST_LOGGING", "API_TIMEZONE", "API_ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    config = load_api_config(load_env=False)

    assert config.api_base_path == "/api"
    assert config.port == 8000
    assert config.enable_request_logging is False
    assert config.allowed_origins == []
    assert config.timezone is None


def test_load_api_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_BASE_PATH", "/service/")
    monkeypatch.setenv("API_PORT", "9001")
    monkeypatch.setenv("API_ENABLE_REQUEST_LOGGING", "yes")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("API_TIMEZONE", "Asia/Tokyo")

    config = load_api_config(load_env=False)

    assert config.api_base_path == "/service"
    assert config.port == 9001
    assert config.enable_request_logging is True
    assert config.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.timezone == "Asia/Tokyo"


def test_boolean_env_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_ENABLE_REQUEST_LOGGING", "sometimes")
    with pytest.raises(ValueError, match="boolean-like"):
        load_api_config(load_env=False)


@pytest.mark.parametrize("base_path", ["api", "/"])
def test_invalid_base_path_is_rejected(base_path: str) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(api_base_path=base_path)


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Unknown timezone"):
        ApiConfig(timezone="Mars/Olympus_Mons")


def test_non_positive_port_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ApiConfig(port=0)
