"""Resource APIs built on top of IamportHttpClient."""

from .base import IamportApi
from .users import UsersApi
from .payments import PaymentsApi
from .subscriptions import SubscriptionsApi

__all__ = [
    "IamportApi",
    "UsersApi",
    "PaymentsApi",
    "SubscriptionsApi",
]
