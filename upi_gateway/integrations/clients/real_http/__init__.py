"""
Real HTTP integration clients.

These clients talk to the payment gateway over HTTP:
- RazorpayX contacts, fund accounts and payouts
- Razorpay orders and payment links

Important:
- Services call the gateway only through GatewayClient
- Credentials are taken from the GatewayConfig passed in, never from os.environ
"""

from .gateway import (
    CONTACTS_ENDPOINT,
    FUND_ACCOUNTS_ENDPOINT,
    ORDERS_ENDPOINT,
    PAYMENT_LINKS_ENDPOINT,
    PAYOUTS_ENDPOINT,
    GatewayClient,
)

__all__ = [
    "GatewayClient",
    "CONTACTS_ENDPOINT",
    "FUND_ACCOUNTS_ENDPOINT",
    "ORDERS_ENDPOINT",
    "PAYMENT_LINKS_ENDPOINT",
    "PAYOUTS_ENDPOINT",
]
