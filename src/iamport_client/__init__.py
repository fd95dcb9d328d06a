"""Iamport Client - async SDK for the Iamport payment gateway REST API."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.config import IamportClientOptions, TimeoutConfig
from .core.exceptions import (
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
)
from .core.transport import (
    Transport,
    TransportRequest,
    TransportResponse,
    HttpxTransport,
    RequestsTransport,
    RecordingTransport,
)
from .core.utils import build_api_url
from .core.http_client import IamportHttpClient, ClientState
from .core.logging import LoggingConfig
from .core.env_config import load_from_env, ConfigFileLoader
from .models import HttpMethod, IamportRequest, IamportResponse, IamportToken, IamportTokenRequest
from .apis import UsersApi, PaymentsApi, SubscriptionsApi

# Users can configure logging themselves using logging.getLogger('iamport_client')
logging.getLogger('iamport_client').addHandler(logging.NullHandler())

try:
    __version__ = version("iamport-client")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Core
    "IamportHttpClient",
    "ClientState",
    "build_api_url",

    # Config
    "IamportClientOptions",
    "TimeoutConfig",
    "LoggingConfig",
    "load_from_env",
    "ConfigFileLoader",

    # Transport
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "HttpxTransport",
    "RequestsTransport",
    "RecordingTransport",

    # Models
    "HttpMethod",
    "IamportRequest",
    "IamportResponse",
    "IamportToken",
    "IamportTokenRequest",

    # APIs
    "UsersApi",
    "PaymentsApi",
    "SubscriptionsApi",

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

    # Version
    "__version__",
]
