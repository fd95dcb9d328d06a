"""
Logging configuration for Iamport Client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Configuration for client logging.

    Attributes:
        level: Log level
        format: Output format (json, text)
        enable_console: Log to stdout
        enable_file: Log to a rotating file
        file_path: Path to log file (required if enable_file=True)
        max_bytes: Max log file size before rotation (default: 10MB)
        backup_count: Number of rotated files to keep
        enable_correlation_id: Add the current request's correlation id
        extra_fields: Fields added to every record
        sensitive_keys: Extra field/header names masked in log output

    Example:
        >>> config = LoggingConfig.create(level="DEBUG", format="json")
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    enable_console: bool = True
    enable_file: bool = False
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    enable_correlation_id: bool = True
    extra_fields: Dict[str, Any] = field(default_factory=dict)
    sensitive_keys: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.enable_file and not self.file_path:
            raise ValueError("file_path is required when enable_file=True")
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must be non-negative")

    @classmethod
    def create(
        cls,
        level: str = "INFO",
        format: str = "text",
        enable_console: bool = True,
        enable_file: bool = False,
        file_path: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        enable_correlation_id: bool = True,
        extra_fields: Optional[Dict[str, Any]] = None,
        sensitive_keys: Tuple[str, ...] = ()
    ) -> "LoggingConfig":
        """Create LoggingConfig from plain string values."""
        return cls(
            level=LogLevel(level.upper()),
            format=LogFormat(format.lower()),
            enable_console=enable_console,
            enable_file=enable_file,
            file_path=file_path,
            max_bytes=max_bytes,
            backup_count=backup_count,
            enable_correlation_id=enable_correlation_id,
            extra_fields=extra_fields or {},
            sensitive_keys=tuple(sensitive_keys)
        )
