"""Gateway request/response models."""

from .request import (
    HttpMethod,
    IamportModel,
    IamportRequest,
    IamportResponse,
    to_json_payload,
)
from .token import IamportToken, IamportTokenRequest
from .payments import (
    Payment,
    PaymentCancellation,
    PaymentCancelRequest,
    PaymentPrepareRequest,
    PaymentPreparation,
)
from .subscriptions import AgainPaymentRequest, SubscriptionCustomer

__all__ = [
    # Core
    "HttpMethod",
    "IamportModel",
    "IamportRequest",
    "IamportResponse",
    "to_json_payload",
    # Token
    "IamportToken",
    "IamportTokenRequest",
    # Payments
    "Payment",
    "PaymentCancellation",
    "PaymentCancelRequest",
    "PaymentPrepareRequest",
    "PaymentPreparation",
    # Subscriptions
    "AgainPaymentRequest",
    "SubscriptionCustomer",
]
