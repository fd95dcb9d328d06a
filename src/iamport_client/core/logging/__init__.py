"""
Logging system for Iamport Client.

Structured logging with JSON/text formats, console/file handlers and
correlation ids.

Example:
    >>> from iamport_client.core.logging import LoggingConfig
    >>> from iamport_client import IamportHttpClient
    >>>
    >>> config = LoggingConfig.create(level="DEBUG", format="json")
    >>> client = IamportHttpClient(options, logging_config=config)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import IamportClientLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    reset_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "IamportClientLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "reset_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
