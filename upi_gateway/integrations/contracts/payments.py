from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

"""
Payment contracts.

Defines the request bodies sent to the gateway for each operation:
- contact creation
- VPA fund account creation
- payout creation
- collection (order or UPI payment link)

Gateway responses are relayed as plain dicts; only the ``id`` field of the
intermediate contact and fund account responses is ever read.
"""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PayoutStage(str, Enum):
    START = "START"
    CONTACT_CREATED = "CONTACT_CREATED"
    FUND_ACCOUNT_CREATED = "FUND_ACCOUNT_CREATED"
    PAYOUT_CREATED = "PAYOUT_CREATED"
    FAILED = "FAILED"


# ---------------------------------------------------------------------------
# Gateway request bodies
# ---------------------------------------------------------------------------

@dataclass
class ContactRequest:
    name: str
    email: str
    contact: str                         # phone number
    type: str = "customer"

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FundAccountRequest:
    contact_id: str
    upi_id: str
    account_type: str = "vpa"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "contact_id": self.contact_id,
            "account_type": self.account_type,
            "vpa": {"address": self.upi_id},
        }


@dataclass
class PayoutRequest:
    account_number: str
    fund_account_id: str
    amount: int                          # minor units
    currency: str
    mode: str
    purpose: str
    queue_if_low_balance: bool = True
    notes: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class OrderRequest:
    amount: int                          # minor units
    currency: str
    notes: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PaymentLinkRequest:
    amount: int                          # minor units
    currency: str
    description: str
    upi_link: bool = True
    notes: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Orchestration bookkeeping
# ---------------------------------------------------------------------------

@dataclass
class PayoutProgress:
    """Where a single payout orchestration got to, and what it created upstream."""
    user_id: str
    amount: int
    stage: PayoutStage = PayoutStage.START
    contact_id: Optional[str] = None
    fund_account_id: Optional[str] = None

    def orphaned_resources(self) -> Dict[str, str]:
        created: Dict[str, str] = {}
        if self.contact_id:
            created["contact_id"] = self.contact_id
        if self.fund_account_id:
            created["fund_account_id"] = self.fund_account_id
        return created


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def missing_fields(**values: Optional[str]) -> List[str]:
    """
    Return the names of parameters that are absent or blank.
    Empty list means every parameter was supplied.
    """
    return [name for name, value in values.items() if value is None or not str(value).strip()]
