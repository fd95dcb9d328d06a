"""Тесты иерархии исключений."""

import httpx
import pytest
import requests

from iamport_client.core.exceptions import (
    ConfigurationError,
    ConnectionError,
    HTTPError,
    IamportClientException,
    IamportResponseError,
    InvalidArgumentError,
    InvalidConfigurationValueError,
    InvalidURLFormatError,
    NetworkError,
    ObjectDisposedError,
    TimeoutError,
    classify_transport_exception,
)


def test_all_errors_share_base():
    errors = [
        InvalidArgumentError("x"),
        InvalidURLFormatError("uuu"),
        InvalidConfigurationValueError("base_url", "bad scheme"),
        ObjectDisposedError("IamportHttpClient"),
        IamportResponseError(1, "bad"),
        HTTPError(500, "https://api.iamport.kr"),
    ]
    for error in errors:
        assert isinstance(error, IamportClientException)


def test_url_errors_are_configuration_errors():
    assert isinstance(InvalidURLFormatError("uuu"), ConfigurationError)
    assert isinstance(InvalidConfigurationValueError("base_url", "x"), ConfigurationError)
    assert not isinstance(InvalidConfigurationValueError("base_url", "x"), InvalidURLFormatError)


def test_invalid_argument_message():
    error = InvalidArgumentError("api_key")
    assert error.argument_name == "api_key"
    assert "api_key" in str(error)


def test_disposed_error_is_runtime_error():
    error = ObjectDisposedError("IamportHttpClient")
    assert isinstance(error, RuntimeError)
    assert "IamportHttpClient" in str(error)


def test_response_error_carries_code_and_message():
    error = IamportResponseError(42, "bad")
    assert error.code == 42
    assert error.gateway_message == "bad"
    assert str(error) == "Iamport responded with code 42: bad"


def test_response_error_without_message():
    error = IamportResponseError(-1)
    assert str(error) == "Iamport responded with code -1"
    assert error.gateway_message is None


def test_response_error_gateway_message_is_verbatim():
    error = IamportResponseError(1, "  존재하지 않는 결제정보입니다  ")
    assert error.gateway_message == "  존재하지 않는 결제정보입니다  "
    assert str(error) != error.gateway_message


class TestClassifyTransportException:

    @pytest.mark.parametrize("exc", [
        httpx.ReadTimeout("timed out"),
        httpx.ConnectTimeout("timed out"),
        requests.exceptions.ReadTimeout(),
        requests.exceptions.ConnectTimeout(),
    ])
    def test_timeouts(self, exc):
        result = classify_transport_exception(exc, "https://api.iamport.kr")
        assert isinstance(result, TimeoutError)
        assert isinstance(result, NetworkError)
        assert result.url == "https://api.iamport.kr"

    @pytest.mark.parametrize("exc", [
        httpx.ConnectError("refused"),
        requests.exceptions.ConnectionError("refused"),
    ])
    def test_connection_errors(self, exc):
        result = classify_transport_exception(exc, "https://api.iamport.kr")
        assert isinstance(result, ConnectionError)

    def test_unknown(self):
        result = classify_transport_exception(RuntimeError("boom"), "https://api.iamport.kr")
        assert type(result) is IamportClientException
        assert "boom" in str(result)
