from __future__ import annotations

from importlib import metadata

from qrng_client import QRNGClient
from qrng_client.config_types import AuthMode, ClientConfig

from .config import AppConfig, effective_endpoint, normalize_endpoint, resolve_api_key


def cli_version() -> str:
    try:
        return metadata.version("anu-qrng")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(
    cfg: AppConfig,
    *,
    api_key_override: str | None = None,
    legacy: bool = False,
    endpoint_override: str | None = None,
    timeout_s: float | None = None,
) -> QRNGClient:
    api_key = (api_key_override or "").strip() or resolve_api_key(cfg)
    if legacy:
        mode = AuthMode.LEGACY
    elif api_key_override or cfg.mode is AuthMode.API_KEY:
        mode = AuthMode.API_KEY
    else:
        mode = AuthMode.LEGACY

    resolved = AppConfig(mode=mode, endpoint=cfg.endpoint if mode is cfg.mode else "")
    endpoint = normalize_endpoint(endpoint_override) or effective_endpoint(resolved)
    return QRNGClient(
        ClientConfig(
            endpoint=endpoint,
            api_key=api_key if mode is AuthMode.API_KEY else "",
            auth_mode=mode,
            timeout_s=timeout_s or cfg.timeout_s,
            user_agent=f"qrng-cli/{cli_version()}",
        )
    )
