from __future__ import annotations


class QRNGError(Exception):
    """Base client error."""


class ConfigError(QRNGError):
    """Client is not configured for the requested operation."""


class MissingAPIKeyError(ConfigError):
    def __init__(self, message: str = "API key required for this endpoint"):
        super().__init__(message)


class ValidationError(QRNGError, ValueError):
    """Argument rejected before any network call."""


class InvalidRangeError(ValidationError):
    def __init__(self, message: str = "min cannot be greater than max"):
        super().__init__(message)


class RangeTooLargeError(ValidationError):
    def __init__(self, message: str = "range size exceeds maximum supported value"):
        super().__init__(message)


class InvalidHexTypeError(ValidationError):
    def __init__(self, hex_type: str):
        super().__init__(f"invalid hex type {hex_type!r}, must be hex8 or hex16")
        self.hex_type = hex_type


class InvalidBlockSizeError(ValidationError):
    def __init__(self, block_size: int):
        super().__init__(f"block size must be between 1-10, got {block_size}")
        self.block_size = block_size


class TransportError(QRNGError):
    """Transport/network layer error."""


class NetworkError(TransportError):
    """Request could not be sent or its body could not be read."""


class ApiError(TransportError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class DecodeError(QRNGError):
    """Response body is not a usable envelope."""


class UpstreamError(DecodeError):
    """Envelope reported success=false."""


class InsufficientDataError(DecodeError):
    def __init__(self, expected: int, got: int):
        super().__init__(f"insufficient data: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class SamplingExhaustedError(QRNGError):
    def __init__(self, attempts: int):
        super().__init__(f"no draw accepted after {attempts} attempts")
        self.attempts = attempts
