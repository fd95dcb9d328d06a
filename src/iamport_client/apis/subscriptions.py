"""Subscriptions API (billing keys and recurring payments)."""

from ..core.exceptions import InvalidArgumentError
from ..models import AgainPaymentRequest, HttpMethod, IamportRequest, Payment, SubscriptionCustomer
from .base import IamportApi, require_identifier


class SubscriptionsApi(IamportApi):
    base_path = "/subscribe"

    async def get_customer(self, customer_uid: str) -> SubscriptionCustomer:
        require_identifier("customer_uid", customer_uid)
        request = IamportRequest(self._path("customers", customer_uid))
        return await self._call(request, SubscriptionCustomer)

    async def delete_customer(self, customer_uid: str) -> SubscriptionCustomer:
        """Delete the billing key; returns the removed customer."""
        require_identifier("customer_uid", customer_uid)
        request = IamportRequest(self._path("customers", customer_uid), HttpMethod.DELETE)
        return await self._call(request, SubscriptionCustomer)

    async def pay_again(self, again_request: AgainPaymentRequest) -> Payment:
        """Charge a registered billing key."""
        if again_request is None:
            raise InvalidArgumentError("again_request")

        request = IamportRequest(self._path("payments", "again"), HttpMethod.POST, again_request)
        return await self._call(request, Payment)
