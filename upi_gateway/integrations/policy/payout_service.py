"""
Payout Service for RazorpayX

Sequences the three gateway calls a UPI payout needs:
contact -> fund account (vpa) -> payout.

Each step feeds the id it receives into the next request. Nothing is retried
and nothing is rolled back: if a later step fails, the contact / fund account
created earlier stay on the gateway and are logged as orphaned.
"""

import logging
from typing import Any, Dict, Optional, Type

from upi_gateway.error_handler import (
    ContactCreationFailed,
    ContactIdMissing,
    FundAccountCreationFailed,
    FundAccountIdMissing,
    MissingParameters,
    PaymentError,
    PayoutCreationFailed,
    UpstreamProtocolError,
    UpstreamTransportError,
)
from upi_gateway.integrations.clients.real_http.gateway import (
    CONTACTS_ENDPOINT,
    FUND_ACCOUNTS_ENDPOINT,
    PAYOUTS_ENDPOINT,
)
from upi_gateway.integrations.contracts.payments import (
    ContactRequest,
    FundAccountRequest,
    PayoutProgress,
    PayoutRequest,
    PayoutStage,
    missing_fields,
)
from upi_gateway.integrations.policy.response_wrappers import gateway_error_description, require_entity_id
from upi_gateway.utils.amount import normalize_amount
from upi_gateway.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)


class PayoutService:
    def __init__(self, client, config: GatewayConfig):
        self.client = client
        self.config = config

    async def create_contact(self, name: str, email: str, phone: str) -> str:
        """Create a gateway contact and return its id."""
        missing = missing_fields(name=name, email=email, phone=phone)
        if missing:
            raise MissingParameters()
        return await self._create_contact(ContactRequest(name=name, email=email, contact=phone, type=self.config.contact.type))

    async def create_fund_account(self, contact_id: str, upi_id: str) -> str:
        """Bind a UPI address to an existing contact and return the fund account id."""
        missing = missing_fields(contact_id=contact_id, upi_id=upi_id)
        if missing:
            raise MissingParameters()
        return await self._create_fund_account(FundAccountRequest(contact_id=contact_id, upi_id=upi_id))

    async def payout(self, amount: Optional[str], user_id: Optional[str], upi_id: Optional[str]) -> Dict[str, Any]:
        """
        Run contact -> fund account -> payout for one withdrawal and return the
        gateway's payout response verbatim (or the sandbox placeholder).
        """
        account_number = self.config.credentials.account_number
        missing = missing_fields(amount=amount, user_id=user_id, upi_id=upi_id, account_number=account_number)
        if missing:
            logger.warning("UPI PayOut rejected, missing: %s", ", ".join(missing))
            raise MissingParameters()

        amount_paise = normalize_amount(amount)
        logger.info("UPI PayOut request - amount in paise: %s", amount_paise)

        if self.config.sandbox_mode:
            logger.info("Sandbox mode: skipping gateway calls for user %s", user_id)
            return self._sandbox_payout(amount_paise)

        progress = PayoutProgress(user_id=user_id, amount=amount_paise)
        try:
            contact = self.config.contact
            progress.contact_id = await self._create_contact(
                ContactRequest(
                    name=f"{contact.name_prefix}{user_id}",
                    email=contact.email,
                    contact=contact.phone,
                    type=contact.type,
                )
            )
            progress.stage = PayoutStage.CONTACT_CREATED

            progress.fund_account_id = await self._create_fund_account(
                FundAccountRequest(contact_id=progress.contact_id, upi_id=upi_id)
            )
            progress.stage = PayoutStage.FUND_ACCOUNT_CREATED

            request = PayoutRequest(
                account_number=account_number,
                fund_account_id=progress.fund_account_id,
                amount=amount_paise,
                currency=self.config.currency,
                mode=self.config.payout.mode,
                purpose=self.config.payout.purpose,
                queue_if_low_balance=self.config.payout.queue_if_low_balance,
                notes={"user_id": user_id},
            )
            try:
                response = await self.client.call(PAYOUTS_ENDPOINT, request.to_payload())
            except UpstreamTransportError as e:
                raise PayoutCreationFailed(endpoint=PAYOUTS_ENDPOINT) from e
            progress.stage = PayoutStage.PAYOUT_CREATED
        except PaymentError as e:
            failed_at = progress.stage
            progress.stage = PayoutStage.FAILED
            e.stage = failed_at.value
            orphaned = progress.orphaned_resources()
            if orphaned:
                logger.warning("UPI PayOut for user %s failed after %s; orphaned gateway resources: %s",
                               user_id, failed_at.value, orphaned)
            raise

        logger.info("UPI PayOut created id=%s status=%s", response.get("id"), response.get("status"))
        return response

    async def _create_contact(self, request: ContactRequest) -> str:
        try:
            data = await self.client.call(CONTACTS_ENDPOINT, request.to_payload())
        except UpstreamTransportError as e:
            raise ContactCreationFailed(endpoint=CONTACTS_ENDPOINT) from e
        contact_id = self._entity_id(data, ContactIdMissing, CONTACTS_ENDPOINT)
        logger.info("Contact created successfully: %s", contact_id)
        return contact_id

    async def _create_fund_account(self, request: FundAccountRequest) -> str:
        try:
            data = await self.client.call(FUND_ACCOUNTS_ENDPOINT, request.to_payload())
        except UpstreamTransportError as e:
            raise FundAccountCreationFailed(endpoint=FUND_ACCOUNTS_ENDPOINT) from e
        fund_account_id = self._entity_id(data, FundAccountIdMissing, FUND_ACCOUNTS_ENDPOINT)
        logger.info("Fund account created successfully: %s", fund_account_id)
        return fund_account_id

    @staticmethod
    def _entity_id(data: Dict[str, Any], error_type: Type[UpstreamProtocolError], endpoint: str) -> str:
        try:
            return require_entity_id(data, error_type)
        except UpstreamProtocolError:
            logger.error("No id in response from %s (gateway error: %s)", endpoint, gateway_error_description(data))
            raise

    def _sandbox_payout(self, amount_paise: int) -> Dict[str, Any]:
        return {
            "id": self.config.sandbox.payout_id,
            "status": self.config.sandbox.status,
            "amount": amount_paise,
            "currency": self.config.currency,
            "mode": self.config.payout.mode,
            "purpose": self.config.payout.purpose,
        }
