"""
Log formatters: JSON for log shippers, key=value text for terminals.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord has; anything else came in through `extra`
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields passed via ``extra`` (and added by filters)."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line.

    Example output:
        {"timestamp": "2026-01-15T10:30:45.123000+00:00", "level": "INFO",
         "logger": "iamport_client", "message": "Request finished",
         "method": "GET", "status_code": 200}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(extra_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """
    Format: [timestamp] [level] [logger] message key=value ...
    """

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in extra_fields(record).items())
        return f"{base_msg} {pairs}" if pairs else base_msg


def get_formatter(format_type: str) -> logging.Formatter:
    """
    Get formatter by type ("json" or "text").

    Raises:
        ValueError: If format_type is unknown
    """
    formatters = {
        "json": JSONFormatter,
        "text": TextFormatter,
    }

    formatter_class = formatters.get(format_type.lower())
    if not formatter_class:
        raise ValueError(
            f"Unknown format type: {format_type}. "
            f"Available: {', '.join(formatters.keys())}"
        )

    return formatter_class()
