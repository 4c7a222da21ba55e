"""
Integrations layer.
This package contains all code used to communicate with the payment gateway:
- contracts: request bodies sent to the gateway
- clients/real_http: the authenticated HTTP client
- policy: services that sequence gateway calls (collect, payout)

Key rule:
- API endpoints MUST NOT call the gateway directly.
- Endpoints call the services under policy/, which call GatewayClient.
"""

from .contracts.payments import (
    ContactRequest,
    FundAccountRequest,
    OrderRequest,
    PaymentLinkRequest,
    PayoutProgress,
    PayoutRequest,
    PayoutStage,
    missing_fields,
)

__all__ = [
    "ContactRequest", "FundAccountRequest", "OrderRequest", "PaymentLinkRequest",
    "PayoutProgress", "PayoutRequest", "PayoutStage", "missing_fields",
]
