"""
Pytest configuration and fixtures for iamport-client tests.
"""

import pytest

from iamport_client.core.config import IamportClientOptions
from iamport_client.core.http_client import IamportHttpClient
from iamport_client.core.logging.config import LoggingConfig
from iamport_client.core.transport import RecordingTransport


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.iamport.test"


@pytest.fixture
def options_data(base_url):
    """Valid key/value configuration."""
    return {
        "ImportId": "abcd",
        "ApiKey": "1234",
        "ApiSecret": "5678",
        "BaseUrl": base_url,
    }


@pytest.fixture
def options(options_data):
    """Valid client options."""
    return IamportClientOptions.from_mapping(options_data)


@pytest.fixture
def transport():
    """Transport that records requests and answers with success envelopes."""
    return RecordingTransport()


@pytest.fixture
def client(options, transport):
    """Client wired to the recording transport."""
    return IamportHttpClient(options, transport=transport)


@pytest.fixture
def logging_config_with_file(tmp_path):
    """
    LoggingConfig writing JSON to a temporary file.
    """
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "iamport.log"),
    )
