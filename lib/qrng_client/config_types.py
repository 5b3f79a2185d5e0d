from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LEGACY_ENDPOINT = "https://qrng.anu.edu.au/API/jsonI.php"
API_KEY_ENDPOINT = "https://api.quantumnumbers.anu.edu.au"
DEFAULT_TIMEOUT_S = 10.0
API_KEY_HEADER = "x-api-key"


class AuthMode(str, Enum):
    LEGACY = "legacy"
    API_KEY = "api_key"


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = LEGACY_ENDPOINT
    api_key: str = ""
    auth_mode: AuthMode = AuthMode.LEGACY
    timeout_s: float = DEFAULT_TIMEOUT_S
    max_sampling_attempts: int | None = None
    user_agent: str = "qrng-client/0.1.0"

    @property
    def requires_api_key(self) -> bool:
        return self.auth_mode is AuthMode.API_KEY

    @classmethod
    def legacy(cls, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> "ClientConfig":
        return cls(endpoint=LEGACY_ENDPOINT, auth_mode=AuthMode.LEGACY, timeout_s=timeout_s)

    @classmethod
    def authenticated(cls, api_key: str, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> "ClientConfig":
        return cls(
            endpoint=API_KEY_ENDPOINT,
            api_key=api_key,
            auth_mode=AuthMode.API_KEY,
            timeout_s=timeout_s,
        )
