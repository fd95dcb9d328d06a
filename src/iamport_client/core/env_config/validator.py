"""
Pydantic settings for environment configuration.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_AUTHORIZATION_HEADER_NAME, DEFAULT_BASE_URL, TimeoutConfig
from ..logging.config import LoggingConfig


class IamportSettings(BaseSettings):
    """
    Client configuration from environment variables.

    Reads from:
    1. Environment variables (IAMPORT_*)
    2. .env file
    3. Defaults

    Example .env file:
        IAMPORT_ACCOUNT_ID=imp12345678
        IAMPORT_API_KEY=1234567890123456
        IAMPORT_API_SECRET=secret
        IAMPORT_BASE_URL=https://api.iamport.kr
        IAMPORT_TIMEOUT_READ=10
        IAMPORT_LOG_LEVEL=DEBUG

    Credentials are not validated here; IamportClientOptions does that
    so errors are the same whatever the source.
    """

    model_config = SettingsConfigDict(
        env_prefix='IAMPORT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Credentials
    account_id: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None

    # Endpoint
    authorization_header_name: str = DEFAULT_AUTHORIZATION_HEADER_NAME
    base_url: str = DEFAULT_BASE_URL

    # Transport
    timeout_connect: float = Field(default=5.0, gt=0)
    timeout_read: float = Field(default=30.0, gt=0)
    verify_ssl: bool = True

    # Logging (disabled unless a level is set)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_format: Literal["json", "text"] = "text"
    log_file_path: Optional[str] = None

    def to_timeout_config(self) -> TimeoutConfig:
        return TimeoutConfig(connect=self.timeout_connect, read=self.timeout_read)

    def to_logging_config(self) -> Optional[LoggingConfig]:
        """LoggingConfig if IAMPORT_LOG_LEVEL is set, else None."""
        if self.log_level is None:
            return None

        return LoggingConfig.create(
            level=self.log_level,
            format=self.log_format,
            enable_file=self.log_file_path is not None,
            file_path=self.log_file_path,
        )
