from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, DecodeError, NetworkError

logger = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, http_client: httpx.Client | None = None):
        self._cfg = cfg
        self._owns_client = http_client is None
        self._client = http_client or self._build_client(cfg)

    @staticmethod
    def _build_client(cfg: ClientConfig) -> httpx.Client:
        return httpx.Client(
            timeout=cfg.timeout_s,
            headers={"User-Agent": cfg.user_agent},
            follow_redirects=True,
        )

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    @http_client.setter
    def http_client(self, value: httpx.Client) -> None:
        if self._owns_client:
            self._client.close()
        self._client = value
        self._owns_client = False

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get_json(self, url: str, *, params: dict[str, Any], headers: dict[str, str] | None = None) -> Any:
        logger.debug("GET %s params=%s", url, params)
        try:
            r = self._client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise NetworkError(f"request timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"request failed: {e}") from e

        if not r.is_success:
            msg = f"unexpected status code {r.status_code}"
            details = None
            data: Any = None
            try:
                data = r.json()
            except ValueError:
                pass

            if isinstance(data, dict) and (data.get("error") or data.get("message")):
                details = json.dumps(data, ensure_ascii=False)
                msg = f"{msg}: {data.get('error') or data.get('message')}"
            elif r.text:
                details = r.text[:1000]
                msg = f"{msg}: {details}"

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"json parse error: {e}") from e
