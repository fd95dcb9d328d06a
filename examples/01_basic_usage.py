"""
Basic Iamport Client Usage Examples

Demonstrates payment lookup, cancellation and low-level requests.
Runs against the sandbox credentials in IAMPORT_* environment variables.
"""

import asyncio
from decimal import Decimal

from iamport_client import (
    IamportClientOptions,
    IamportHttpClient,
    IamportRequest,
    IamportResponseError,
    PaymentsApi,
    load_from_env,
)
from iamport_client.models import PaymentCancelRequest, PaymentPrepareRequest


async def lookup_payment(options: IamportClientOptions):
    """Find a payment by imp_uid."""
    print("\n=== Payment Lookup ===")

    async with IamportHttpClient(options) as client:
        payments = PaymentsApi(client)
        try:
            payment = await payments.get("imp_448280090638")
            print(f"Status: {payment.status}, amount: {payment.amount}")
        except IamportResponseError as e:
            print(f"Gateway error {e.code}: {e.gateway_message}")


async def prepare_and_cancel(options: IamportClientOptions):
    """Register the expected amount, then cancel part of a payment."""
    print("\n=== Prepare / Cancel ===")

    async with IamportHttpClient(options) as client:
        payments = PaymentsApi(client)

        preparation = await payments.prepare(
            PaymentPrepareRequest(merchant_uid="order_20260101_0001", amount=Decimal("15000"))
        )
        print(f"Prepared {preparation.merchant_uid}: {preparation.amount}")

        cancelled = await payments.cancel(PaymentCancelRequest(
            merchant_uid="order_20260101_0001",
            amount=Decimal("5000"),
            reason="partial refund",
        ))
        print(f"Cancelled amount: {cancelled.cancel_amount}")


async def low_level_request(options: IamportClientOptions):
    """Call an endpoint without a resource API and inspect the envelope."""
    print("\n=== Low-level Request ===")

    async with IamportHttpClient(options) as client:
        response = await client.request(IamportRequest("/payments/status/paid?limit=5"))
        print(f"code={response.code} message={response.message}")
        if response.is_success:
            print(f"Content: {response.content}")


async def main():
    options = load_from_env()
    await lookup_payment(options)
    await prepare_and_cancel(options)
    await low_level_request(options)


if __name__ == "__main__":
    asyncio.run(main())
