from __future__ import annotations

from qrng_cli import config
from qrng_cli.http import make_client
from qrng_client.config_types import API_KEY_ENDPOINT, LEGACY_ENDPOINT, AuthMode


def test_make_client_defaults_to_legacy(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    client = make_client(config.default_config())
    try:
        assert client.endpoint == LEGACY_ENDPOINT
        assert client.config.auth_mode is AuthMode.LEGACY
        assert client.config.api_key == ""
        assert client.config.user_agent.startswith("qrng-cli/")
    finally:
        client.close()


def test_make_client_api_key_override_switches_endpoint(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    client = make_client(config.default_config(), api_key_override="secret", timeout_s=2.0)
    try:
        assert client.endpoint == API_KEY_ENDPOINT
        assert client.config.api_key == "secret"
        assert client.config.timeout_s == 2.0
    finally:
        client.close()


def test_make_client_legacy_flag_drops_key(monkeypatch) -> None:
    cfg = config.default_config()
    cfg.mode = AuthMode.API_KEY
    cfg.api_key = "stored"
    client = make_client(cfg, legacy=True)
    try:
        assert client.endpoint == LEGACY_ENDPOINT
        assert client.config.api_key == ""
    finally:
        client.close()


def test_make_client_normalizes_endpoint_override(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_API_KEY, "env-key")
    cfg = config.default_config()
    cfg.mode = AuthMode.API_KEY
    client = make_client(cfg, endpoint_override="localhost:9000/random")
    try:
        assert client.endpoint == "http://localhost:9000/random"
        assert client.config.api_key == "env-key"
    finally:
        client.close()
