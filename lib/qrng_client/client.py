from __future__ import annotations

from typing import Any

import httpx

from .config_types import API_KEY_HEADER, DEFAULT_TIMEOUT_S, ClientConfig
from .envelope import HEX_TYPES, QRNGResponse, decode_envelope
from .errors import InvalidBlockSizeError, InvalidHexTypeError, MissingAPIKeyError, ValidationError
from .reshape import extract_bits, format_hex, to_uint8, to_uint16
from .sampler import MAX_BITS, sample_uniform
from .transport import Transport

MAX_UINT8_LENGTH = 1024
MAX_UINT16_LENGTH = 1024
MAX_HEX_BLOCKS = 1024
MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 10
UINT_TYPES = {"uint8": MAX_UINT8_LENGTH, "uint16": MAX_UINT16_LENGTH}
DATA_TYPES = ", ".join([*UINT_TYPES, *HEX_TYPES])


def _check_count(name: str, value: int, upper: int) -> None:
    if not 1 <= value <= upper:
        raise ValidationError(f"{name} must be between 1 and {upper}")


def check_request(length: int, data_type: str, block_size: int) -> None:
    """Reject a round trip the service would refuse, before it is sent."""
    if data_type in HEX_TYPES:
        if not MIN_BLOCK_SIZE <= block_size <= MAX_BLOCK_SIZE:
            raise InvalidBlockSizeError(block_size)
        _check_count("block_count", length, MAX_HEX_BLOCKS)
        return
    if data_type.startswith("hex"):
        raise InvalidHexTypeError(data_type)
    if data_type not in UINT_TYPES:
        raise ValidationError(f"unknown data type {data_type!r}, must be one of {DATA_TYPES}")
    _check_count("length", length, UINT_TYPES[data_type])


class QRNGClient:
    def __init__(self, cfg: ClientConfig | None = None, *, http_client: httpx.Client | None = None):
        self._cfg = cfg or ClientConfig.legacy()
        self.endpoint = self._cfg.endpoint
        self._t = Transport(self._cfg, http_client)

    @classmethod
    def legacy(cls, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> "QRNGClient":
        return cls(ClientConfig.legacy(timeout_s=timeout_s))

    @classmethod
    def with_api_key(cls, api_key: str, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> "QRNGClient":
        return cls(ClientConfig.authenticated(api_key, timeout_s=timeout_s))

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def http_client(self) -> httpx.Client:
        return self._t.http_client

    @http_client.setter
    def http_client(self, value: httpx.Client) -> None:
        self._t.http_client = value

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "QRNGClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self, length: int, data_type: str, block_size: int = 0) -> QRNGResponse:
        """Run one round trip and return the validated envelope."""
        check_request(length, data_type, block_size)
        if self._cfg.requires_api_key and not self._cfg.api_key:
            raise MissingAPIKeyError()

        params: dict[str, Any] = {"length": int(length), "type": data_type}
        if data_type in HEX_TYPES:
            params["size"] = int(block_size)

        headers = {}
        if self._cfg.requires_api_key:
            headers[API_KEY_HEADER] = self._cfg.api_key

        payload = self._t.get_json(self.endpoint, params=params, headers=headers)
        return decode_envelope(payload, length=length, data_type=data_type)

    # --- typed accessors ---
    def get_random_bits(self, num_bits: int) -> list[int]:
        _check_count("num_bits", num_bits, MAX_BITS)
        required_bytes = (num_bits + 7) // 8
        qr = self.fetch(required_bytes, "uint8")
        return extract_bits(to_uint8(qr.data), num_bits)

    def get_random_uint8(self, num_bytes: int) -> list[int]:
        qr = self.fetch(num_bytes, "uint8")
        return to_uint8(qr.data)

    def get_random_uint16(self, num_shorts: int) -> list[int]:
        qr = self.fetch(num_shorts, "uint16")
        return to_uint16(qr.data)

    def get_random_hex(self, block_count: int, block_size: int, hex_type: str) -> list[str]:
        if hex_type not in HEX_TYPES:
            raise InvalidHexTypeError(hex_type)
        qr = self.fetch(block_count, hex_type, block_size)
        return format_hex(qr.data, hex_type, block_size)

    def get_random_number(self, min_value: int, max_value: int) -> int:
        return sample_uniform(
            self.get_random_uint8,
            min_value,
            max_value,
            max_attempts=self._cfg.max_sampling_attempts,
        )
