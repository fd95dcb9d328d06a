"""
Система конфигурации для Iamport Client.

Все конфиги immutable (frozen dataclasses) для потокобезопасности.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from .exceptions import (
    InvalidArgumentError,
    InvalidConfigurationValueError,
    InvalidURLFormatError,
)

DEFAULT_BASE_URL = "https://api.iamport.kr"
DEFAULT_AUTHORIZATION_HEADER_NAME = "Authorization"
ALLOWED_SCHEMES = frozenset({"http", "https"})

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов транспорта.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLIENT OPTIONS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

# Нормализованный ключ (lower, без '_' и '-') -> имя поля
_KEY_ALIASES = {
    "accountid": "account_id",
    "importid": "account_id",
    "impid": "account_id",
    "apikey": "api_key",
    "impkey": "api_key",
    "apisecret": "api_secret",
    "impsecret": "api_secret",
    "authorizationheadername": "authorization_header_name",
    "baseurl": "base_url",
}


def _normalize_key(key: str) -> str:
    return key.replace("_", "").replace("-", "").lower()


def _as_text(name: str, value: Any) -> Optional[str]:
    # Числовые ключи из YAML/JSON (ApiKey: 1234567890123456) приводятся к строке
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    raise InvalidArgumentError(
        name,
        f"'{name}' must be a string, got {type(value).__name__}",
    )


def _require(name: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        raise InvalidArgumentError(name)


@dataclass(frozen=True)
class IamportClientOptions:
    """
    Опции клиента Iamport.

    Валидируются сразу при создании; первая найденная ошибка поднимается
    в порядке объявления полей.

    Args:
        account_id: Идентификатор аккаунта (код магазина)
        api_key: REST API ключ
        api_secret: REST API секрет
        authorization_header_name: Имя заголовка для bearer токена
        base_url: Базовый URL шлюза (http или https)

    Raises:
        InvalidArgumentError: Пустое обязательное поле
        InvalidURLFormatError: base_url не абсолютный URI
        InvalidConfigurationValueError: Схема base_url не http/https,
            или в base_url есть query string/fragment

    Examples:
        >>> IamportClientOptions(account_id="imp_1234", api_key="key", api_secret="secret")
        >>> IamportClientOptions.from_mapping({"ImportId": "imp_1234", "ApiKey": "key", "ApiSecret": "secret"})
    """
    account_id: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    authorization_header_name: Optional[str] = DEFAULT_AUTHORIZATION_HEADER_NAME
    base_url: Optional[str] = DEFAULT_BASE_URL

    def __post_init__(self):
        """Валидация."""
        for f in fields(self):
            value = _as_text(f.name, getattr(self, f.name))
            object.__setattr__(self, f.name, value)
            _require(f.name, value)
        self._validate_base_url(self.base_url)

    @staticmethod
    def _validate_base_url(url: str) -> None:
        try:
            parsed = urlsplit(url)
        except ValueError:
            raise InvalidURLFormatError(url)

        scheme = parsed.scheme.lower()
        # "c:/path" парсится как схема "c"
        if len(scheme) < 2:
            raise InvalidURLFormatError(url)

        if scheme not in ALLOWED_SCHEMES:
            raise InvalidConfigurationValueError(
                "base_url",
                f"base_url scheme must be http or https, got {parsed.scheme!r}",
            )

        if not parsed.netloc:
            raise InvalidURLFormatError(url)

        # Путь API дописывается в конец base_url
        if parsed.query or parsed.fragment:
            raise InvalidConfigurationValueError(
                "base_url",
                f"base_url must not contain a query string or fragment, got {url!r}",
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "IamportClientOptions":
        """
        Создать опции из key/value источника конфигурации.

        Ключи сопоставляются без учёта регистра, '_' и '-', поэтому
        ``BaseUrl``, ``base_url`` и ``BASE-URL`` эквивалентны. ``ImportId``
        принимается как синоним ``account_id``. Неизвестные ключи игнорируются,
        отсутствующие берут значения по умолчанию.

        Args:
            data: Mapping с настройками

        Returns:
            IamportClientOptions
        """
        if data is None:
            raise InvalidArgumentError("data")

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            field_name = _KEY_ALIASES.get(_normalize_key(str(key)))
            if field_name is not None:
                kwargs[field_name] = value

        return cls(**kwargs)

    def masked(self) -> Dict[str, Any]:
        """Словарь опций с замаскированными секретами (для логов и отладки)."""
        from .env_config.secrets import mask_secret

        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["api_key"] = mask_secret(self.api_key)
        data["api_secret"] = mask_secret(self.api_secret)
        return data
