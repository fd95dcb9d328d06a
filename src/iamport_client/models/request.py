"""Request descriptor and response envelope shared by every gateway call."""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..core.exceptions import IamportResponseError

TBody = TypeVar("TBody")
TContent = TypeVar("TContent")


class HttpMethod(str, Enum):
    """HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class IamportModel(BaseModel):
    """Base for gateway DTOs: snake_case wire names, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


@dataclass(frozen=True)
class IamportRequest(Generic[TBody]):
    """
    Descriptor of a single gateway call, created by a resource API.

    Attributes:
        path_and_query: API path beginning with '/', may include a query string
        method: HTTP method
        content: Request body, serialized as JSON (None for no body)
        require_authorization: Authorize before sending and attach the bearer token

    Example:
        >>> IamportRequest("/payments/imp_123")
        >>> IamportRequest("/users/getToken", HttpMethod.POST, body, require_authorization=False)
    """

    path_and_query: str
    method: HttpMethod = HttpMethod.GET
    content: Optional[TBody] = None
    require_authorization: bool = True


class IamportResponse(BaseModel, Generic[TContent]):
    """
    Gateway response envelope ``{code, message, response}``.

    ``code == 0`` means success. The payload is read from ``response``
    (``content`` is accepted too).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: int
    message: Optional[str] = None
    content: Optional[TContent] = Field(
        default=None,
        validation_alias=AliasChoices("response", "content"),
    )

    @property
    def is_success(self) -> bool:
        return self.code == 0

    def ensure_success(self) -> Optional[TContent]:
        """
        Return the content of a successful envelope.

        Raises:
            IamportResponseError: If ``code != 0``
        """
        if self.code != 0:
            raise IamportResponseError(self.code, self.message)
        return self.content


def to_json_payload(content: Any) -> Any:
    """Convert a request body into JSON-compatible data."""
    if content is None:
        return None
    if isinstance(content, BaseModel):
        return content.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(content) and not isinstance(content, type):
        return dataclasses.asdict(content)
    return content
