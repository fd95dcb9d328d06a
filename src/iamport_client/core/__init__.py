"""Core Iamport Client модули."""

from .config import (
    DEFAULT_AUTHORIZATION_HEADER_NAME,
    DEFAULT_BASE_URL,
    IamportClientOptions,
    TimeoutConfig,
)
from .exceptions import (
    IamportClientException,
    InvalidArgumentError,
    ConfigurationError,
    InvalidURLFormatError,
    InvalidConfigurationValueError,
    ConfigValidationError,
    ObjectDisposedError,
    IamportResponseError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    HTTPError,
    InvalidResponseError,
    classify_transport_exception,
)
from .transport import (
    Transport,
    TransportRequest,
    TransportResponse,
    HttpxTransport,
    RequestsTransport,
    RecordingTransport,
)
from .utils import build_api_url, sanitize_url, sanitize_headers

__all__ = [
    # Config
    "DEFAULT_AUTHORIZATION_HEADER_NAME",
    "DEFAULT_BASE_URL",
    "IamportClientOptions",
    "TimeoutConfig",
    # Exceptions
    "IamportClientException",
    "InvalidArgumentError",
    "ConfigurationError",
    "InvalidURLFormatError",
    "InvalidConfigurationValueError",
    "ConfigValidationError",
    "ObjectDisposedError",
    "IamportResponseError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "HTTPError",
    "InvalidResponseError",
    "classify_transport_exception",
    # Transport
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "HttpxTransport",
    "RequestsTransport",
    "RecordingTransport",
    # Utils
    "build_api_url",
    "sanitize_url",
    "sanitize_headers",
]
