"""Decoding of the JSON envelope returned by the QRNG service.

The service wraps every payload in an object of the form::

    {"type": "uint8", "length": 2, "data": [12, 200], "success": true,
     "completionTime": "...", "seed": "...", "refresh": false, "info": []}

Only ``success``, ``error`` and ``data`` drive behaviour; the remaining
fields are carried through on :class:`QRNGResponse` for callers that want them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import DecodeError, InsufficientDataError, UpstreamError

HEX_TYPES = ("hex8", "hex16")


@dataclass(frozen=True)
class QRNGResponse:
    success: bool
    data: list[int]
    type: str = ""
    length: int = 0
    error: str | None = None
    completion_time: str = ""
    seed: str = ""
    refresh: bool = False
    info: list[str] = field(default_factory=list)


def _coerce_item(value: Any, data_type: str) -> int:
    # bool is an int subclass; true/false in data is drift, not a number
    if isinstance(value, bool):
        raise DecodeError(f"unexpected data entry: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise DecodeError(f"negative data entry: {value}")
        return value
    if isinstance(value, str) and data_type in HEX_TYPES:
        try:
            return int(value, 16)
        except ValueError:
            raise DecodeError(f"invalid hex data entry: {value!r}") from None
    raise DecodeError(f"unexpected data entry: {value!r}")


def decode_envelope(payload: Any, *, length: int, data_type: str) -> QRNGResponse:
    """Validate a parsed JSON body and return the envelope.

    Raises :class:`UpstreamError` when the service reports failure and
    :class:`InsufficientDataError` when fewer than ``length`` values came back.
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")

    raw_data = payload.get("data")
    if raw_data is None:
        raw_data = []
    if not isinstance(raw_data, list):
        raise DecodeError("envelope field 'data' is not a list")

    success = payload.get("success") is True
    error = payload.get("error")
    error = str(error) if error else None

    if not success:
        if error:
            raise UpstreamError(f"api error: {error}")
        raise UpstreamError("api request failed")

    if len(raw_data) < length:
        raise InsufficientDataError(length, len(raw_data))

    info = payload.get("info")
    reported_length = payload.get("length")
    return QRNGResponse(
        success=success,
        data=[_coerce_item(v, data_type) for v in raw_data],
        type=str(payload.get("type") or ""),
        length=reported_length if isinstance(reported_length, int) else 0,
        error=error,
        completion_time=str(payload.get("completionTime") or ""),
        seed=str(payload.get("seed") or ""),
        refresh=bool(payload.get("refresh")),
        info=[str(i) for i in info] if isinstance(info, list) else [],
    )
