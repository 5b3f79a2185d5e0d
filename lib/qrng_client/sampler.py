"""Bounded uniform integer sampling over remote random bytes.

Draws are taken from the smallest power-of-two bucket covering the range and
rejected when they land outside it, so every value in ``[min, max]`` is equally
likely. Each attempt fetches fresh bytes; a rejected draw is never reused.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable, Sequence

from .errors import InvalidRangeError, RangeTooLargeError, SamplingExhaustedError, ValidationError
from .reshape import bytes_to_int

logger = logging.getLogger(__name__)

MAX_BYTES = 1024
MAX_BITS = MAX_BYTES * 8


def bit_width(range_size: int) -> int:
    """Smallest ``b >= 1`` with ``2**b >= range_size``."""
    return max(1, (range_size - 1).bit_length())


def plan(min_value: int, max_value: int) -> tuple[int, int]:
    """Validate bounds; return ``(range_size, bits)``."""
    try:
        min_value = operator.index(min_value)
        max_value = operator.index(max_value)
    except TypeError:
        raise ValidationError(f"bounds must be integers, got {min_value!r} and {max_value!r}") from None
    if min_value > max_value:
        raise InvalidRangeError()
    range_size = max_value - min_value + 1
    bits = bit_width(range_size)
    if bits > MAX_BITS:
        raise RangeTooLargeError(
            f"range size exceeds maximum supported value: maximum supported bits is {MAX_BITS}"
        )
    return range_size, bits


def sample_uniform(
        draw_bytes: Callable[[int], Sequence[int]],
        min_value: int,
        max_value: int,
        *,
        max_attempts: int | None = None,
) -> int:
    range_size, bits = plan(min_value, max_value)
    required_bytes = (bits + 7) // 8
    mask = (1 << bits) - 1

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        value = bytes_to_int(draw_bytes(required_bytes)) & mask
        if value < range_size:
            return min_value + value
        logger.debug("rejected draw %d for range size %d (attempt %d)", value, range_size, attempts)

    raise SamplingExhaustedError(attempts)
