from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from qrng_client.config_types import API_KEY_ENDPOINT, DEFAULT_TIMEOUT_S, LEGACY_ENDPOINT, AuthMode

APP_NAME = "qrng"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "QRNG_API_KEY"


@dataclass
class AppConfig:
    mode: AuthMode = AuthMode.LEGACY
    endpoint: str = ""
    api_key: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(mode=AuthMode.LEGACY, endpoint="", api_key="", timeout_s=DEFAULT_TIMEOUT_S)


def normalize_endpoint(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value
    host = value.split("/", 1)[0].split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        return f"http://{value}"
    return f"https://{value}"


def parse_mode(raw: str | None) -> AuthMode:
    value = (raw or "").strip().lower().replace("-", "_")
    try:
        return AuthMode(value)
    except ValueError:
        raise ValueError(f"unknown mode {raw!r}, expected 'legacy' or 'api_key'") from None


def effective_endpoint(cfg: AppConfig) -> str:
    if cfg.endpoint:
        return cfg.endpoint
    return API_KEY_ENDPOINT if cfg.mode is AuthMode.API_KEY else LEGACY_ENDPOINT


def resolve_api_key(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_API_KEY, "").strip()
    if env_value:
        return env_value
    return cfg.api_key.strip()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"mode": cfg.mode.value, "timeout_s": float(cfg.timeout_s)}
    if cfg.endpoint:
        data["endpoint"] = cfg.endpoint
    if cfg.api_key:
        data["api_key"] = cfg.api_key
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    try:
        cfg.mode = parse_mode(str(data.get("mode") or AuthMode.LEGACY.value))
    except ValueError:
        cfg.mode = AuthMode.LEGACY
    cfg.endpoint = normalize_endpoint(str(data.get("endpoint") or ""))
    cfg.api_key = str(data.get("api_key") or "")
    timeout = data.get("timeout_s")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        cfg.timeout_s = float(timeout)
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    # file may hold an API key
    os.chmod(path, 0o600)
    return path
