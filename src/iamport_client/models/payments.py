"""Payment models."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from .request import IamportModel


class PaymentCancellation(IamportModel):
    """One entry of a payment's cancel history."""

    pg_tid: Optional[str] = None
    amount: Decimal = Decimal(0)
    cancelled_at: Optional[datetime] = None
    reason: Optional[str] = None
    receipt_url: Optional[str] = None


class Payment(IamportModel):
    """Payment as returned by ``/payments``."""

    imp_uid: str
    merchant_uid: str
    pay_method: Optional[str] = None
    channel: Optional[str] = None
    pg_provider: Optional[str] = None
    pg_tid: Optional[str] = None
    name: Optional[str] = None
    amount: Decimal = Decimal(0)
    cancel_amount: Decimal = Decimal(0)
    currency: Optional[str] = None
    buyer_name: Optional[str] = None
    buyer_email: Optional[str] = None
    buyer_tel: Optional[str] = None
    status: Optional[str] = None
    paid_at: Optional[datetime] = None
    failed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    fail_reason: Optional[str] = None
    cancel_reason: Optional[str] = None
    receipt_url: Optional[str] = None
    cancel_history: List[PaymentCancellation] = Field(default_factory=list)


class PaymentCancelRequest(IamportModel):
    """Body of ``POST /payments/cancel``; one of imp_uid/merchant_uid is required."""

    imp_uid: Optional[str] = None
    merchant_uid: Optional[str] = None
    amount: Optional[Decimal] = None
    tax_free: Optional[Decimal] = None
    checksum: Optional[Decimal] = None
    reason: Optional[str] = None


class PaymentPrepareRequest(IamportModel):
    """Body of ``POST /payments/prepare``."""

    merchant_uid: str
    amount: Decimal


class PaymentPreparation(IamportModel):
    """Registered expected amount for a merchant order."""

    merchant_uid: str
    amount: Decimal
