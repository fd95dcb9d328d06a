"""Common plumbing for resource APIs."""

from typing import Any, Optional
from urllib.parse import quote

from ..core.exceptions import InvalidArgumentError
from ..core.http_client import IamportHttpClient
from ..models import IamportRequest


class IamportApi:
    """
    Base resource API: builds descriptors under ``base_path`` and unwraps
    successful envelopes.
    """

    base_path: str = ""

    def __init__(self, client: IamportHttpClient):
        if client is None:
            raise InvalidArgumentError("client")
        self.client = client

    def _path(self, *segments: str) -> str:
        encoded = "/".join(quote(str(s), safe="") for s in segments)
        return f"{self.base_path}/{encoded}" if encoded else self.base_path

    async def _call(self, request: IamportRequest, result_type: Any = None) -> Optional[Any]:
        response = await self.client.request(request, result_type)
        return response.ensure_success()


def require_identifier(name: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(name)
    return value
