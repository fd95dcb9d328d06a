"""
HTTP клиент Iamport: авторизация bearer токеном, отправка через
подключаемый транспорт и разбор envelope ответа.
"""

import asyncio
import dataclasses
import json
import time
import uuid
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import ValidationError

from .config import IamportClientOptions
from .exceptions import (
    HTTPError,
    IamportClientException,
    InvalidArgumentError,
    InvalidResponseError,
    ObjectDisposedError,
)
from .logging import IamportClientLogger, LoggingConfig
from .logging.filters import get_correlation_id, reset_correlation_id, set_correlation_id
from .transport import TOKEN_PATH, HttpxTransport, Transport, TransportRequest, TransportResponse
from .utils import build_api_url, sanitize_headers, sanitize_url
from ..models import (
    HttpMethod,
    IamportRequest,
    IamportResponse,
    IamportToken,
    IamportTokenRequest,
    to_json_payload,
)


class ClientState(str, Enum):
    """Состояние жизненного цикла клиента."""
    ACTIVE = "active"
    DISPOSED = "disposed"


class IamportHttpClient:
    """
    Асинхронный клиент Iamport REST API.

    Владеет транспортом на всё время жизни; ``close()`` освобождает его
    ровно один раз, после чего любая операция поднимает ObjectDisposedError.

    Example:
        >>> options = IamportClientOptions(account_id="imp_1234", api_key="key", api_secret="secret")
        >>> async with IamportHttpClient(options) as client:
        ...     response = await client.request(IamportRequest("/payments/imp_1"), Payment)
        ...     payment = response.ensure_success()

    Concurrency:
        Слот токена защищён asyncio.Lock: параллельные authorize()
        выполняются по очереди, каждый запрос видит целостный токен.
    """

    def __init__(
        self,
        options: IamportClientOptions,
        *,
        transport: Optional[Transport] = None,
        logging_config: Optional[LoggingConfig] = None,
    ):
        """
        Args:
            options: Валидированные опции клиента
            transport: Транспорт (по умолчанию HttpxTransport)
            logging_config: Конфигурация логирования (None - без логов)

        Raises:
            InvalidArgumentError: Если options не передан
        """
        if options is None:
            raise InvalidArgumentError("options")

        self._options = options
        self._transport = transport if transport is not None else HttpxTransport()
        self._state = ClientState.ACTIVE
        self._token: Optional[IamportToken] = None
        self._token_lock = asyncio.Lock()

        self._logger: Optional[IamportClientLogger] = None
        if logging_config is not None:
            netloc = urlsplit(options.base_url).netloc
            logging_config = dataclasses.replace(
                logging_config,
                sensitive_keys=logging_config.sensitive_keys + (options.authorization_header_name,),
            )
            # Свой logger на каждый экземпляр: IamportClientLogger сбрасывает handlers по имени
            self._logger = IamportClientLogger(
                config=logging_config,
                name=f"iamport_client.{netloc}.{uuid.uuid4().hex[:8]}",
            )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "IamportHttpClient":
        """
        Создать клиент из переменных окружения IAMPORT_* (и .env файла).

        Таймауты, verify_ssl и логирование берутся из тех же настроек.
        """
        from .env_config import load_from_env, load_settings

        settings = load_settings(env_file)
        options = load_from_env(env_file, **overrides)
        transport = HttpxTransport(
            settings.to_timeout_config(),
            verify_ssl=settings.verify_ssl,
        )
        return cls(options, transport=transport, logging_config=settings.to_logging_config())

    async def __aenter__(self) -> "IamportHttpClient":
        self._ensure_active()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ==================== Properties ====================

    @property
    def options(self) -> IamportClientOptions:
        return self._options

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def is_disposed(self) -> bool:
        return self._state is ClientState.DISPOSED

    @property
    def token(self) -> Optional[IamportToken]:
        """Последний выданный токен (None до первой авторизации)."""
        return self._token

    # ==================== Lifecycle ====================

    def _ensure_active(self) -> None:
        if self._state is ClientState.DISPOSED:
            raise ObjectDisposedError(type(self).__name__)

    async def close(self) -> None:
        """
        Освободить транспорт и перевести клиент в DISPOSED.

        Повторный вызов ничего не делает.
        """
        if self._state is ClientState.DISPOSED:
            return
        self._state = ClientState.DISPOSED

        try:
            await self._transport.close()
        finally:
            if self._logger is not None:
                self._logger.info("Client closed")
                self._logger.close()

    # ==================== Requests ====================

    async def request_raw(
        self,
        request: TransportRequest,
        result_type: Any = None,
    ) -> IamportResponse:
        """
        Отправить готовый транспортный запрос как есть и разобрать envelope.

        ``code`` не проверяется - это решает вызывающий код.

        Args:
            request: Транспортный запрос
            result_type: Тип ``content`` в envelope (None - без преобразования)

        Returns:
            IamportResponse[result_type]

        Raises:
            ObjectDisposedError: Клиент закрыт
            InvalidArgumentError: request is None
            NetworkError: Ошибка транспорта
            InvalidResponseError / HTTPError: Тело ответа не envelope
        """
        self._ensure_active()
        if request is None:
            raise InvalidArgumentError("request")

        url = sanitize_url(request.url)
        if self._logger:
            self._logger.debug(
                "Request started",
                method=request.method,
                url=url,
                headers=sanitize_headers(
                    dict(request.headers),
                    extra_keys={self._options.authorization_header_name},
                ),
            )

        start_time = time.monotonic()
        try:
            response = await self._transport.send(request)
            envelope = self._decode(response, result_type)
        except IamportClientException as e:
            if self._logger:
                self._logger.error(
                    "Request failed",
                    method=request.method,
                    url=url,
                    error_type=type(e).__name__,
                    error=str(e),
                )
            raise

        if self._logger:
            self._logger.info(
                "Request finished",
                method=request.method,
                url=url,
                status_code=response.status_code,
                code=envelope.code,
                duration_ms=round((time.monotonic() - start_time) * 1000, 2),
            )

        return envelope

    async def request(
        self,
        request: IamportRequest,
        result_type: Any = None,
    ) -> IamportResponse:
        """
        Выполнить вызов по дескриптору.

        Если ``require_authorization``, сначала выполняется authorize(), и
        только после его завершения отправляется основной запрос с
        заголовком авторизации.

        Args:
            request: Дескриптор запроса
            result_type: Тип ``content`` в envelope

        Returns:
            IamportResponse[result_type] (code не проверяется)

        Raises:
            ObjectDisposedError: Клиент закрыт
            InvalidArgumentError: request is None или путь не начинается с '/'
            IamportResponseError: Авторизация отклонена шлюзом
        """
        self._ensure_active()
        if request is None:
            raise InvalidArgumentError("request")

        cid_token = None
        if self._logger and get_correlation_id() is None:
            cid_token = set_correlation_id(uuid.uuid4().hex)

        try:
            headers = {"Accept": "application/json"}

            if request.require_authorization:
                token = await self.authorize()
                headers[self._options.authorization_header_name] = f"Bearer {token.access_token}"

            url = build_api_url(self._options.base_url, request.path_and_query)

            content = None
            payload = to_json_payload(request.content)
            if payload is not None:
                content = json.dumps(payload, ensure_ascii=False).encode("utf-8")
                headers["Content-Type"] = "application/json; charset=utf-8"

            method = request.method
            if isinstance(method, HttpMethod):
                method = method.value

            transport_request = TransportRequest(
                method=str(method).upper(),
                url=url,
                headers=headers,
                content=content,
            )
            return await self.request_raw(transport_request, result_type)
        finally:
            if cid_token is not None:
                reset_correlation_id(cid_token)

    async def authorize(self) -> IamportToken:
        """
        Получить новый токен и сохранить его как текущий.

        Это же явная операция принудительной переавторизации.

        Returns:
            Выданный токен

        Raises:
            ObjectDisposedError: Клиент закрыт
            IamportResponseError: Шлюз отклонил учетные данные (токен не меняется)
        """
        self._ensure_active()

        async with self._token_lock:
            token_request = IamportTokenRequest(
                account_id=self._options.account_id,
                api_key=self._options.api_key,
                api_secret=self._options.api_secret,
            )
            response = await self.request(
                IamportRequest(
                    path_and_query=TOKEN_PATH,
                    method=HttpMethod.POST,
                    content=token_request,
                    require_authorization=False,
                ),
                IamportToken,
            )

            token = response.ensure_success()
            if token is None:
                raise InvalidResponseError("Token response has no content", TOKEN_PATH)

            self._token = token
            if self._logger:
                self._logger.info("Authorized", expired_at=token.expired_at.isoformat())
            return token

    # ==================== Decoding ====================

    @staticmethod
    def _decode(response: TransportResponse, result_type: Any) -> IamportResponse:
        model = IamportResponse[result_type] if result_type is not None else IamportResponse[Any]

        try:
            payload = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                raise HTTPError(response.status_code, response.url, response.text[:200]) from e
            raise InvalidResponseError(f"Response body is not JSON: {e}", response.url) from e

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            if response.status_code >= 400:
                raise HTTPError(response.status_code, response.url, response.text[:200]) from e
            raise InvalidResponseError(f"Unexpected response envelope: {e}", response.url) from e
