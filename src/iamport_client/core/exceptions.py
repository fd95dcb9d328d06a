"""
Иерархия исключений Iamport Client.

Классификация:
- локальная валидация (InvalidArgumentError, ConfigurationError, ObjectDisposedError)
  - поднимается синхронно, до любого I/O
- ответ шлюза (IamportResponseError) - единственная ошибка из удалённых данных
- транспорт (NetworkError, HTTPError, InvalidResponseError)
"""

from typing import Optional

import httpx
import requests

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class IamportClientException(Exception):
    """Базовое исключение Iamport Client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ЛОКАЛЬНАЯ ВАЛИДАЦИЯ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class InvalidArgumentError(IamportClientException, ValueError):
    """
    Отсутствующий или пустой обязательный аргумент.

    Args:
        argument_name: Имя аргумента (поля опций)
        message: Дополнительное сообщение
    """

    def __init__(self, argument_name: str, message: str = ""):
        self.argument_name = argument_name
        msg = message or f"'{argument_name}' must not be empty"
        super().__init__(msg)


class ConfigurationError(IamportClientException):
    """Ошибка конфигурации."""


class InvalidURLFormatError(ConfigurationError, ValueError):
    """Base URL не является абсолютным URI."""

    def __init__(self, url: str, argument_name: str = "base_url"):
        self.url = url
        self.argument_name = argument_name
        super().__init__(f"Invalid URL format for '{argument_name}': {url!r}")


class InvalidConfigurationValueError(ConfigurationError, ValueError):
    """
    Значение разбирается, но семантически неверно.

    Пример: base URL со схемой, отличной от http/https.
    """

    def __init__(self, argument_name: str, message: str):
        self.argument_name = argument_name
        super().__init__(message)


class ConfigValidationError(ConfigurationError, ValueError):
    """Невалидный файл конфигурации."""


class ObjectDisposedError(IamportClientException, RuntimeError):
    """Операция над уже закрытым клиентом."""

    def __init__(self, object_name: str):
        self.object_name = object_name
        super().__init__(f"Cannot access a disposed object: {object_name}")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОТВЕТ ШЛЮЗА
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class IamportResponseError(IamportClientException):
    """
    Envelope шлюза с ненулевым code.

    Args:
        code: Код ответа шлюза
        message: Сообщение шлюза (как есть)

    Attributes:
        code: Код из envelope
        gateway_message: Поле ``message`` envelope дословно (может быть None).
            ``str(exc)`` - отформатированный текст с кодом, а не сообщение шлюза.
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        self.gateway_message = message

        msg = f"Iamport responded with code {code}"
        if message:
            msg += f": {message}"

        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ТРАНСПОРТ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class NetworkError(IamportClientException):
    """Сетевая ошибка."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        full_message = message
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)


class TimeoutError(NetworkError):
    """Таймаут запроса."""


class ConnectionError(NetworkError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - DNS resolution failed
    """


class HTTPError(IamportClientException):
    """
    HTTP ошибка без валидного envelope в теле.

    Args:
        status_code: HTTP статус
        url: URL
        message: Сообщение
    """

    def __init__(self, status_code: int, url: str, message: str = ""):
        self.status_code = status_code
        self.url = url

        msg = f"HTTP {status_code} error for {url}"
        if message:
            msg += f": {message}"

        super().__init__(msg)


class InvalidResponseError(IamportClientException):
    """
    Невалидный ответ.

    Примеры:
    - Битый JSON
    - JSON без полей envelope
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_transport_exception(exc: Exception, url: str) -> IamportClientException:
    """
    Конвертировать исключения httpx/requests в наши исключения.

    Args:
        exc: Исключение транспортной библиотеки
        url: URL запроса

    Returns:
        Наше исключение

    Examples:
        >>> exc = httpx.ReadTimeout("timed out")
        >>> our_exc = classify_transport_exception(exc, "https://api.iamport.kr")
        >>> assert isinstance(our_exc, TimeoutError)
    """
    if isinstance(exc, (httpx.TimeoutException, requests.exceptions.Timeout)):
        return TimeoutError("Request timeout", url)

    elif isinstance(exc, (httpx.TransportError, requests.exceptions.ConnectionError)):
        return ConnectionError(f"Connection error: {exc}", url)

    else:
        return IamportClientException(str(exc))
