"""Subscription (billing key) models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .request import IamportModel


class SubscriptionCustomer(IamportModel):
    """Billing key holder registered under ``customer_uid``."""

    customer_uid: str
    pg_provider: Optional[str] = None
    pg_id: Optional[str] = None
    card_name: Optional[str] = None
    card_code: Optional[str] = None
    card_number: Optional[str] = None
    card_type: Optional[int] = None
    customer_name: Optional[str] = None
    customer_tel: Optional[str] = None
    customer_email: Optional[str] = None
    customer_addr: Optional[str] = None
    customer_postcode: Optional[str] = None
    inserted: Optional[datetime] = None
    updated: Optional[datetime] = None


class AgainPaymentRequest(IamportModel):
    """Body of ``POST /subscribe/payments/again``."""

    customer_uid: str
    merchant_uid: str
    amount: Decimal
    name: str
    tax_free: Optional[Decimal] = None
    buyer_name: Optional[str] = None
    buyer_email: Optional[str] = None
    buyer_tel: Optional[str] = None
    notice_url: Optional[str] = None
    custom_data: Optional[str] = None
