"""Token endpoint models."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from .request import IamportModel


class IamportTokenRequest(IamportModel):
    """Credentials sent to ``POST /users/getToken``."""

    account_id: Optional[str] = None
    api_key: str = Field(alias="imp_key")
    api_secret: str = Field(alias="imp_secret")


class IamportToken(IamportModel):
    """Issued access token."""

    access_token: str
    expired_at: datetime
    now: Optional[datetime] = None

    def is_expired(self, at: Optional[datetime] = None) -> bool:
        at = at or datetime.now(timezone.utc)
        return at >= self.expired_at
