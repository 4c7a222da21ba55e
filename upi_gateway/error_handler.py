"""Error taxonomy and handling helpers for the payment proxy."""
from typing import Any, Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class PaymentError(Exception):
    """Base class for every error surfaced to an API caller."""

    status_code = 500
    default_message = "Payment request failed"

    def __init__(self, message: Optional[str] = None, *, stage: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.stage = stage


# ---------------------------------------------------------------------------
# Invalid input (400)
# ---------------------------------------------------------------------------

class InvalidInput(PaymentError):
    status_code = 400
    default_message = "Invalid request parameters"


class MissingParameters(InvalidInput):
    default_message = "Missing required parameters"


class InvalidAmount(InvalidInput):
    default_message = "Invalid amount format, must be a whole number in INR"


# ---------------------------------------------------------------------------
# Upstream failures (500)
# ---------------------------------------------------------------------------

class UpstreamTransportError(PaymentError):
    """The gateway could not be reached or did not answer in time."""

    default_message = "Payment gateway is unreachable"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        endpoint: Optional[str] = None,
        stage: Optional[str] = None,
    ) -> None:
        super().__init__(message, stage=stage)
        self.endpoint = endpoint


class ContactCreationFailed(UpstreamTransportError):
    default_message = "Failed to create contact"


class FundAccountCreationFailed(UpstreamTransportError):
    default_message = "Failed to create fund account"


class PayoutCreationFailed(UpstreamTransportError):
    default_message = "Failed to process UPI PayOut"


class CollectionRequestFailed(UpstreamTransportError):
    default_message = "Failed to initiate UPI Collect request"


class UpstreamProtocolError(PaymentError):
    """The gateway answered but a field we depend on is absent."""

    default_message = "Unexpected response from payment gateway"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        payload: Optional[Dict[str, Any]] = None,
        stage: Optional[str] = None,
    ) -> None:
        super().__init__(message, stage=stage)
        self.payload = payload or {}


class ContactIdMissing(UpstreamProtocolError):
    default_message = "Failed to retrieve Contact ID"


class FundAccountIdMissing(UpstreamProtocolError):
    default_message = "Failed to retrieve Fund Account ID"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Tuple[int, Dict[str, Any]]:
        context = context or {}
        if isinstance(exc, InvalidInput):
            logger.warning("Rejected request %s: %s", context, exc.message)
            return exc.status_code, {"error": exc.message}

        if isinstance(exc, PaymentError):
            logger.error(
                "Payment request failed: %s (endpoint=%s stage=%s context=%s)",
                exc.message,
                getattr(exc, "endpoint", None),
                exc.stage,
                context,
                exc_info=exc if exc.__cause__ is not None else None,
            )
            return exc.status_code, {"error": exc.message}

        logger.error("Unhandled exception in payment proxy: %s", exc, exc_info=exc)
        return 500, {"error": "An internal error occurred while processing your request. Please try again later."}
