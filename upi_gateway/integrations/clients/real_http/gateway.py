"""
Razorpay HTTP Client.

The ONLY place where outbound gateway calls are made. Every call is a single
authenticated JSON POST; the response body is returned as-is whatever the
HTTP status, so callers decide what a gateway-level error means.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from upi_gateway.error_handler import UpstreamTransportError
from upi_gateway.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)

CONTACTS_ENDPOINT = "/v1/contacts"
FUND_ACCOUNTS_ENDPOINT = "/v1/fund_accounts"
PAYOUTS_ENDPOINT = "/v1/payouts"
ORDERS_ENDPOINT = "/v1/orders"
PAYMENT_LINKS_ENDPOINT = "/v1/payment_links"


class GatewayClient:
    def __init__(
        self,
        config: GatewayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.timeout_seconds = config.timeout_seconds
        self._auth = httpx.BasicAuth(
            config.credentials.key_id,
            config.credentials.key_secret.get_secret_value(),
        )
        self._transport = transport

    async def call(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        url = f"{self.base_url}{endpoint}"

        logger.info("Calling gateway endpoint %s", endpoint)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers, auth=self._auth)
        except httpx.RequestError as e:
            logger.error("Request error calling gateway endpoint %s: %s", endpoint, e.__class__.__name__)
            raise UpstreamTransportError(f"Gateway request to {endpoint} failed", endpoint=endpoint) from e

        if response.is_error:
            logger.warning("Gateway endpoint %s answered with status=%s", endpoint, response.status_code)
        else:
            logger.info("Gateway endpoint %s answered with status=%s", endpoint, response.status_code)

        return self._decode(endpoint, response)

    @staticmethod
    def _decode(endpoint: str, response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            logger.warning("Gateway endpoint %s returned an empty body", endpoint)
            return {}
        try:
            data = response.json()
        except ValueError:
            logger.warning("Gateway endpoint %s returned a non-JSON body", endpoint)
            return {}
        if not isinstance(data, dict):
            logger.warning("Gateway endpoint %s returned JSON %s instead of an object", endpoint, type(data).__name__)
            return {}
        return data
