"""
Main logger for Iamport Client.
"""

import logging
from typing import Any, Optional

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler
from ...utils.sanitizer import add_sensitive_keys, mask_sensitive_data


class IamportClientLogger:
    """
    Structured logger: keyword arguments become record fields.

    Sensitive values (tokens, keys, secrets, Authorization headers) are
    masked before they reach any handler.

    Example:
        >>> logger = IamportClientLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request started", method="GET", url="https://api.iamport.kr/payments/imp_1")
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "iamport_client"):
        """
        Args:
            config: Logging configuration (uses defaults if None)
            name: Logger name
        """
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        self._logger = logging.getLogger(name)
        self._logger.setLevel(self._get_level(self.config.level))
        self._logger.propagate = False

        # Reinitialization replaces handlers
        self._logger.handlers.clear()

        if self.config.sensitive_keys:
            add_sensitive_keys(*self.config.sensitive_keys)

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)
        level = self._get_level(self.config.level)

        if self.config.enable_console:
            self._logger.addHandler(create_console_handler(level, formatter, filters))

        if self.config.enable_file and self.config.file_path:
            self._logger.addHandler(create_file_handler(
                file_path=self.config.file_path,
                level=level,
                formatter=formatter,
                max_bytes=self.config.max_bytes,
                backup_count=self.config.backup_count,
                filters=filters,
            ))

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=mask_sensitive_data(kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """
        Log error message.

        Example:
            >>> logger.error("Gateway error", code=-1, gateway_message="Unauthorized")
        """
        self.log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log error with traceback; call from an exception handler."""
        self._logger.exception(message, extra=mask_sensitive_data(kwargs))

    def close(self) -> None:
        """
        Flush and close all handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            try:
                handler.flush()
                handler.close()
            except (OSError, ValueError):
                # Already closed stream
                pass
            self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
