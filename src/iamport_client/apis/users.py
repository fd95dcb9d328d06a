"""Users API."""

from ..core.exceptions import InvalidArgumentError
from ..models import HttpMethod, IamportRequest, IamportToken, IamportTokenRequest
from .base import IamportApi


class UsersApi(IamportApi):
    """Authentication endpoints under ``/users``."""

    base_path = "/users"

    async def get_token(self, token_request: IamportTokenRequest) -> IamportToken:
        """
        Issue a token for the given credentials and return it.

        Does not touch the client's stored token or Authorization header;
        use ``IamportHttpClient.authorize()`` for that.

        Raises:
            InvalidArgumentError: token_request is None
            IamportResponseError: Credentials rejected by the gateway
        """
        if token_request is None:
            raise InvalidArgumentError("token_request")

        request = IamportRequest(
            path_and_query=self._path("getToken"),
            method=HttpMethod.POST,
            content=token_request,
            require_authorization=False,
        )
        return await self._call(request, IamportToken)
