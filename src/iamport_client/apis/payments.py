"""Payments API."""

from ..core.exceptions import InvalidArgumentError
from ..models import (
    HttpMethod,
    IamportRequest,
    Payment,
    PaymentCancelRequest,
    PaymentPrepareRequest,
    PaymentPreparation,
)
from .base import IamportApi, require_identifier


class PaymentsApi(IamportApi):
    """
    Payment lookup, cancellation and amount pre-registration.

    Example:
        >>> payments = PaymentsApi(client)
        >>> payment = await payments.get("imp_448280090638")
        >>> cancelled = await payments.cancel(PaymentCancelRequest(imp_uid=payment.imp_uid, reason="out of stock"))
    """

    base_path = "/payments"

    async def get(self, imp_uid: str) -> Payment:
        """``GET /payments/{imp_uid}``."""
        require_identifier("imp_uid", imp_uid)
        return await self._call(IamportRequest(self._path(imp_uid)), Payment)

    async def get_by_merchant_uid(self, merchant_uid: str) -> Payment:
        """``GET /payments/find/{merchant_uid}``: latest payment of a merchant order."""
        require_identifier("merchant_uid", merchant_uid)
        return await self._call(IamportRequest(self._path("find", merchant_uid)), Payment)

    async def prepare(self, prepare_request: PaymentPrepareRequest) -> PaymentPreparation:
        """Register the expected amount of an order before checkout."""
        if prepare_request is None:
            raise InvalidArgumentError("prepare_request")

        request = IamportRequest(self._path("prepare"), HttpMethod.POST, prepare_request)
        return await self._call(request, PaymentPreparation)

    async def cancel(self, cancel_request: PaymentCancelRequest) -> Payment:
        """
        Cancel a payment fully, or partially when ``amount`` is set.

        Raises:
            InvalidArgumentError: Neither imp_uid nor merchant_uid is given
        """
        if cancel_request is None:
            raise InvalidArgumentError("cancel_request")
        if not cancel_request.imp_uid and not cancel_request.merchant_uid:
            raise InvalidArgumentError(
                "imp_uid",
                "either imp_uid or merchant_uid is required to cancel a payment",
            )

        request = IamportRequest(self._path("cancel"), HttpMethod.POST, cancel_request)
        return await self._call(request, Payment)
