from .collect_service import CollectService
from .payout_service import PayoutService

__all__ = ["CollectService", "PayoutService"]
