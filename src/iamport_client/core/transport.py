"""
Транспортный слой: абстрактная возможность отправить HTTP запрос.

Ядро клиента зависит только от Transport. Реализации:
- HttpxTransport - production, httpx.AsyncClient
- RequestsTransport - requests.Session в executor (для sync стека)
- RecordingTransport - записывает запросы вместо сетевого I/O (тесты)
"""

import asyncio
import functools
import json
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from urllib.parse import urlsplit

import httpx
import requests

from .config import TimeoutConfig
from .exceptions import classify_transport_exception


@dataclass(frozen=True)
class TransportRequest:
    """
    Готовый к отправке HTTP запрос.

    Attributes:
        method: HTTP метод
        url: Абсолютный URL
        headers: Заголовки
        content: Тело запроса (байты) или None
    """
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    def json(self) -> Any:
        """Декодировать JSON тело запроса (None если тела нет)."""
        if not self.content:
            return None
        return json.loads(self.content)


@dataclass(frozen=True)
class TransportResponse:
    """HTTP ответ: статус, заголовки, тело."""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    url: str = ""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)

    @classmethod
    def from_json(cls, data: Any, status_code: int = 200, url: str = "") -> "TransportResponse":
        """Собрать ответ с JSON телом."""
        return cls(
            status_code=status_code,
            headers={"Content-Type": "application/json"},
            content=json.dumps(data).encode("utf-8"),
            url=url,
        )


class Transport(ABC):
    """
    Абстрактный транспорт.

    Любая реализация, умеющая отправить TransportRequest и вернуть
    TransportResponse, подключается к IamportHttpClient.
    """

    @abstractmethod
    async def send(self, request: TransportRequest) -> TransportResponse:
        """
        Отправить запрос.

        Raises:
            NetworkError: Таймаут или ошибка соединения
        """

    async def close(self) -> None:
        """Освободить ресурсы транспорта."""


class HttpxTransport(Transport):
    """
    Production транспорт на базе httpx.AsyncClient.

    Example:
        >>> transport = HttpxTransport(timeout=TimeoutConfig(connect=3, read=10))
        >>> response = await transport.send(TransportRequest("GET", "https://api.iamport.kr/"))
        >>> await transport.close()
    """

    def __init__(
        self,
        timeout: Optional[TimeoutConfig] = None,
        *,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            timeout: Таймауты (по умолчанию TimeoutConfig())
            verify_ssl: Проверять SSL сертификаты
            client: Готовый httpx.AsyncClient (тогда транспорт им не владеет)
        """
        timeout = timeout or TimeoutConfig()
        if client is not None:
            self._client = client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    connect=timeout.connect,
                    read=timeout.read,
                    write=timeout.read,
                    pool=timeout.connect,
                ),
                verify=verify_ssl,
            )
            self._owns_client = True

    async def send(self, request: TransportRequest) -> TransportResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
            )
        except httpx.TransportError as e:
            raise classify_transport_exception(e, request.url) from e

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
            url=str(response.url),
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class RequestsTransport(Transport):
    """
    Транспорт на базе requests.Session.

    Блокирующий вызов выполняется в executor, чтобы не блокировать event loop.
    """

    def __init__(
        self,
        timeout: Optional[TimeoutConfig] = None,
        *,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self._timeout = timeout or TimeoutConfig()
        self._verify_ssl = verify_ssl
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    async def send(self, request: TransportRequest) -> TransportResponse:
        loop = asyncio.get_running_loop()
        call = functools.partial(
            self._session.request,
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.content,
            timeout=self._timeout.as_tuple(),
            verify=self._verify_ssl,
        )
        try:
            response = await loop.run_in_executor(None, call)
        except requests.exceptions.RequestException as e:
            raise classify_transport_exception(e, request.url) from e

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
            url=response.url,
        )

    async def close(self) -> None:
        if self._owns_session:
            self._session.close()


ResponseHandler = Callable[[TransportRequest], Union[TransportResponse, Dict[str, Any]]]

TOKEN_PATH = "/users/getToken"


def default_envelope(request: TransportRequest) -> Dict[str, Any]:
    """
    Успешный envelope для RecordingTransport.

    Для token endpoint возвращает токен, иначе пустой ``response``.
    """
    if urlsplit(request.url).path.endswith(TOKEN_PATH):
        now = int(time.time())
        return {
            "code": 0,
            "message": None,
            "response": {
                "access_token": "recorded-access-token",
                "now": now,
                "expired_at": now + 1800,
            },
        }
    return {"code": 0, "message": None, "response": None}


class RecordingTransport(Transport):
    """
    Транспорт, записывающий запросы вместо сетевого I/O.

    Args:
        handler: Функция request -> TransportResponse или dict (JSON envelope).
            По умолчанию default_envelope.

    Example:
        >>> transport = RecordingTransport()
        >>> async with IamportHttpClient(options, transport=transport) as client:
        ...     await client.authorize()
        >>> transport.requests[0].url
        'https://api.iamport.kr/users/getToken'
    """

    def __init__(self, handler: Optional[ResponseHandler] = None):
        self._handler = handler or default_envelope
        self.requests: List[TransportRequest] = []
        self.close_count = 0

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        result = self._handler(request)
        if isinstance(result, TransportResponse):
            return result
        return TransportResponse.from_json(result, url=request.url)

    async def close(self) -> None:
        self.close_count += 1

    @property
    def urls(self) -> List[str]:
        return [r.url for r in self.requests]
