from .client import QRNGClient
from .config_types import AuthMode, ClientConfig
from .envelope import QRNGResponse
from .errors import (
    ApiError,
    AuthError,
    ConfigError,
    DecodeError,
    InsufficientDataError,
    InvalidBlockSizeError,
    InvalidHexTypeError,
    InvalidRangeError,
    MissingAPIKeyError,
    NetworkError,
    QRNGError,
    RangeTooLargeError,
    SamplingExhaustedError,
    TransportError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "QRNGClient",
    "AuthMode",
    "ClientConfig",
    "QRNGResponse",
    "ApiError",
    "AuthError",
    "ConfigError",
    "DecodeError",
    "InsufficientDataError",
    "InvalidBlockSizeError",
    "InvalidHexTypeError",
    "InvalidRangeError",
    "MissingAPIKeyError",
    "NetworkError",
    "QRNGError",
    "RangeTooLargeError",
    "SamplingExhaustedError",
    "TransportError",
    "UpstreamError",
    "ValidationError",
]
