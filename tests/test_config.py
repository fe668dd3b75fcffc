"""Tests for environment based configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from binance_rest import BINANCE_URL, AccountClient, BinanceError, Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "BINANCE_API_KEY",
        "BINANCE_SECRET_KEY",
        "BINANCE_BASE_URL",
        "BINANCE_TIMEOUT",
        "BINANCE_CONNECT_TIMEOUT",
        "BINANCE_RECV_WINDOW",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.api_key is None
    assert settings.secret is None
    assert settings.base_url == BINANCE_URL
    assert settings.timeout == 10.0
    assert settings.recv_window is None


def test_settings_read_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BINANCE_API_KEY", "env-key")
    monkeypatch.setenv("BINANCE_SECRET_KEY", "env-secret")
    monkeypatch.setenv("BINANCE_BASE_URL", "https://testnet.binance.vision/")
    monkeypatch.setenv("BINANCE_RECV_WINDOW", "5000")

    settings = get_settings()

    assert settings.api_key == "env-key"
    assert settings.secret == "env-secret"
    assert "env-secret" not in repr(settings)
    assert settings.base_url == "https://testnet.binance.vision"
    assert settings.recv_window == 5000
    assert get_settings() is settings


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("BINANCE_BASE_URL", "ftp://api.binance.com"),
        ("BINANCE_RECV_WINDOW", "60001"),
        ("BINANCE_TIMEOUT", "0"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_account_client_from_settings(monkeypatch: pytest.MonkeyPatch, http, frozen_clock) -> None:
    monkeypatch.setenv("BINANCE_API_KEY", "env-key")
    monkeypatch.setenv("BINANCE_SECRET_KEY", "env-secret")
    monkeypatch.setenv("BINANCE_RECV_WINDOW", "5000")

    client = AccountClient.from_settings(Settings(_env_file=None), http=http)
    request = client.get_account().prepare()

    assert client.api_key == "env-key"
    assert request.query.startswith(f"recvWindow=5000&timestamp={frozen_clock}&signature=")


def test_account_client_from_settings_requires_credentials() -> None:
    with pytest.raises(BinanceError):
        AccountClient.from_settings(Settings(_env_file=None))
