from __future__ import annotations

import pytest

from qrng_client import DecodeError, InsufficientDataError, UpstreamError
from qrng_client.envelope import decode_envelope


def test_decode_carries_metadata() -> None:
    payload = {
        "type": "uint8",
        "length": 2,
        "data": [1, 2],
        "success": True,
        "completionTime": "2026-10-19T12:00:00Z",
        "seed": "abc",
        "refresh": True,
        "info": ["ok"],
    }
    qr = decode_envelope(payload, length=2, data_type="uint8")
    assert qr.data == [1, 2]
    assert qr.completion_time == "2026-10-19T12:00:00Z"
    assert qr.seed == "abc"
    assert qr.refresh is True
    assert qr.info == ["ok"]
    assert qr.error is None


def test_decode_rejects_non_object() -> None:
    with pytest.raises(DecodeError):
        decode_envelope([1, 2, 3], length=1, data_type="uint8")


def test_decode_short_data_with_success_false_is_still_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_envelope({"success": False, "data": []}, length=1, data_type="uint8")


def test_decode_missing_success_flag_is_failure() -> None:
    with pytest.raises(UpstreamError):
        decode_envelope({"data": [1]}, length=1, data_type="uint8")


def test_decode_missing_data_is_insufficient() -> None:
    with pytest.raises(InsufficientDataError):
        decode_envelope({"success": True}, length=1, data_type="uint8")


@pytest.mark.parametrize("entry", [-1, True, 1.5, "ff"])
def test_decode_rejects_bad_uint_entries(entry) -> None:
    with pytest.raises(DecodeError):
        decode_envelope({"success": True, "data": [entry]}, length=1, data_type="uint8")


def test_decode_rejects_bad_hex_string() -> None:
    with pytest.raises(DecodeError):
        decode_envelope({"success": True, "data": ["zz"]}, length=1, data_type="hex8")
