"""
Utility functions for the Iamport client.

Includes:
- API URL composition
- URL/header sanitization for safe logging
"""

from typing import Optional, Set
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .exceptions import InvalidArgumentError


# Default sensitive parameter names that should be masked in logs
DEFAULT_SENSITIVE_PARAMS = {
    'token',
    'access_token',
    'imp_key',
    'imp_secret',
    'api_key',
    'api_secret',
    'secret',
    'password',
    'authorization',
    'card_number',
    'cvc',
}


def build_api_url(base_url: str, path_and_query: str) -> str:
    """
    Compose an absolute API URL from the base URL and a path with optional query.

    Pure function: the same inputs always produce the same output.

    Args:
        base_url: Absolute base URL (trailing slashes are ignored)
        path_and_query: Path beginning with '/', may include a query string

    Returns:
        Absolute URL

    Raises:
        InvalidArgumentError: If an argument is empty, the path is relative,
            or the base URL carries a query string or fragment

    Examples:
        >>> build_api_url('https://api.iamport.kr/', '/users/getToken')
        'https://api.iamport.kr/users/getToken'

        >>> build_api_url('https://api.iamport.kr', '/payments/status/paid?page=2')
        'https://api.iamport.kr/payments/status/paid?page=2'
    """
    if not base_url:
        raise InvalidArgumentError('base_url')
    if not path_and_query:
        raise InvalidArgumentError('path_and_query')
    if not path_and_query.startswith('/'):
        raise InvalidArgumentError(
            'path_and_query',
            f"path_and_query must start with '/', got {path_and_query!r}",
        )

    base = urlsplit(base_url)
    if base.query or base.fragment:
        raise InvalidArgumentError(
            'base_url',
            f"base_url must not contain a query string or fragment, got {base_url!r}",
        )

    return base_url.rstrip('/') + '/' + path_and_query.lstrip('/')


def sanitize_url(
    url: str,
    extra_params: Optional[Set[str]] = None,
    mask: str = 'REDACTED'
) -> str:
    """
    Mask sensitive query parameters in URL for safe logging.

    Args:
        url: The URL to sanitize
        extra_params: Additional parameter names to mask (case-insensitive)
        mask: The string to use for masking (default: 'REDACTED')

    Returns:
        Sanitized URL with sensitive parameters masked

    Examples:
        >>> sanitize_url('https://api.iamport.kr/payments?imp_key=secret123')
        'https://api.iamport.kr/payments?imp_key=REDACTED'
    """
    if not url:
        return url

    sensitive = {p.lower() for p in DEFAULT_SENSITIVE_PARAMS}
    if extra_params:
        sensitive |= {p.lower() for p in extra_params}

    parts = urlsplit(url)
    if not parts.query:
        return url

    query = [
        (key, mask if key.lower() in sensitive else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe=mask)))


def sanitize_headers(
    headers: dict,
    extra_keys: Optional[Set[str]] = None,
    mask: str = 'REDACTED'
) -> dict:
    """
    Mask sensitive header values (Authorization, cookies, API keys).

    Args:
        headers: Headers to sanitize
        extra_keys: Additional header names to mask (case-insensitive)
        mask: Replacement string

    Returns:
        New dict with masked values
    """
    if not headers:
        return {}

    sensitive = {'authorization', 'cookie', 'set-cookie', 'x-api-key'}
    if extra_keys:
        sensitive |= {k.lower() for k in extra_keys}
    return {
        key: mask if key.lower() in sensitive else value
        for key, value in headers.items()
    }
