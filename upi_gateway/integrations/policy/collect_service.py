"""
Collect Service for Razorpay

Creates the payer-facing artifact for a wallet top-up: an order, or a UPI
payment link, depending on ``collect.kind`` in the gateway config.
"""

import logging
from typing import Any, Dict, Optional

from upi_gateway.error_handler import CollectionRequestFailed, MissingParameters, UpstreamTransportError
from upi_gateway.integrations.clients.real_http.gateway import ORDERS_ENDPOINT, PAYMENT_LINKS_ENDPOINT
from upi_gateway.integrations.contracts.payments import OrderRequest, PaymentLinkRequest, missing_fields
from upi_gateway.utils.amount import normalize_amount
from upi_gateway.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)


class CollectService:
    def __init__(self, client, config: GatewayConfig):
        self.client = client
        self.config = config

    async def collect(self, amount: Optional[str], user_id: Optional[str]) -> Dict[str, Any]:
        """
        Calls the gateway once and returns its response unchanged.
        """
        if missing_fields(amount=amount, user_id=user_id):
            raise MissingParameters()

        amount_paise = normalize_amount(amount)
        logger.info("UPI Collect request - amount in paise: %s", amount_paise)

        notes = {"user_id": user_id}
        if self.config.collect.kind == "payment_link":
            endpoint = PAYMENT_LINKS_ENDPOINT
            payload = PaymentLinkRequest(
                amount=amount_paise,
                currency=self.config.currency,
                description=f"{self.config.collect.description} for user {user_id}",
                notes=notes,
            ).to_payload()
        else:
            endpoint = ORDERS_ENDPOINT
            payload = OrderRequest(amount=amount_paise, currency=self.config.currency, notes=notes).to_payload()

        try:
            response = await self.client.call(endpoint, payload)
        except UpstreamTransportError as e:
            raise CollectionRequestFailed(endpoint=endpoint) from e

        logger.info("UPI Collect request created id=%s via %s", response.get("id"), endpoint)
        return response
