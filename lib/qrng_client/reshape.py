from __future__ import annotations

from typing import Iterable, Sequence

from .errors import DecodeError, InvalidHexTypeError

HEX16_WIDTH = 4


def extract_bits(data: Iterable[int], num_bits: int) -> list[int]:
    """Unpack bytes most-significant bit first, stopping after ``num_bits``."""
    bits: list[int] = []
    if num_bits <= 0:
        return bits
    for byte_val in data:
        for i in range(7, -1, -1):
            bits.append((byte_val >> i) & 1)
            if len(bits) == num_bits:
                return bits
    return bits


def narrow(data: Iterable[int], width_bits: int) -> list[int]:
    limit = 1 << width_bits
    result = []
    for v in data:
        if not 0 <= v < limit:
            raise DecodeError(f"value {v} does not fit in uint{width_bits}")
        result.append(v)
    return result


def to_uint8(data: Iterable[int]) -> list[int]:
    return narrow(data, 8)


def to_uint16(data: Iterable[int]) -> list[int]:
    return narrow(data, 16)


def hex_width(hex_type: str, block_size: int) -> int:
    if hex_type == "hex8":
        return block_size * 2
    if hex_type == "hex16":
        return HEX16_WIDTH
    raise InvalidHexTypeError(hex_type)


def format_hex(data: Iterable[int], hex_type: str, block_size: int) -> list[str]:
    width = hex_width(hex_type, block_size)
    result = []
    for v in data:
        if v.bit_length() > width * 4:
            raise DecodeError(f"value {v} does not fit in {width} hex digits")
        result.append(f"{v:0{width}x}")
    return result


def bytes_to_int(data: Sequence[int]) -> int:
    result = 0
    for b in data:
        result = (result << 8) | b
    return result
