"""
Маскирование чувствительных данных в логах.

Защищает токены доступа, REST API ключи/секреты, данные карт и
заголовок авторизации от попадания в логи.
"""

import re
from typing import Any, Dict


# Чувствительные поля (case-insensitive, точное совпадение)
SENSITIVE_KEYS = {
    # Токены
    'token', 'access_token', 'refresh_token', 'bearer_token',
    # Учетные данные шлюза
    'imp_key', 'imp_secret', 'api_key', 'api_secret', 'secret',
    # Аутентификация
    'authorization', 'password',
    # Карты (billing key регистрация)
    'card_number', 'expiry', 'birth', 'pwd_2digit', 'cvc',
}

# Суффиксы ключей, которые маскируются всегда
SENSITIVE_SUFFIXES = ('_token', '_secret', '_key', '_password')

# Sensitive данные внутри строк
SENSITIVE_PATTERNS = [
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1***REDACTED***'),
    (re.compile(r'((?:imp_key|imp_secret|access_token)[\s:="\']+)([^\s&,;"\']+)', re.IGNORECASE),
     r'\1***REDACTED***'),
]


def mask_sensitive_data(data: Any, mask: str = "***REDACTED***") -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: Данные для маскирования
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными полями

    Examples:
        >>> mask_sensitive_data({"imp_key": "1234", "merchant_uid": "order_1"})
        {'imp_key': '***REDACTED***', 'merchant_uid': 'order_1'}

        >>> mask_sensitive_data("Authorization: Bearer abc.def")
        'Authorization: Bearer ***REDACTED***'
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, str):
        result = data
        for pattern, replacement in SENSITIVE_PATTERNS:
            result = pattern.sub(replacement.replace('***REDACTED***', mask), result)
        return result

    if isinstance(data, dict):
        return _mask_dict(data, mask)

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    return data


def _mask_dict(data: Dict[Any, Any], mask: str) -> Dict[Any, Any]:
    result = {}
    for key, value in data.items():
        if is_sensitive_key(str(key)):
            result[key] = mask
        else:
            result[key] = mask_sensitive_data(value, mask)
    return result


def is_sensitive_key(key: str) -> bool:
    """
    Проверяет, является ли ключ чувствительным.

    Examples:
        >>> is_sensitive_key("Authorization")
        True
        >>> is_sensitive_key("require_authorization")
        False
    """
    key = key.lower()
    return key in SENSITIVE_KEYS or key.endswith(SENSITIVE_SUFFIXES)


def add_sensitive_keys(*keys: str) -> None:
    """
    Добавляет ключи в SENSITIVE_KEYS.

    Используется для нестандартного имени заголовка авторизации.
    """
    for key in keys:
        SENSITIVE_KEYS.add(key.lower())
