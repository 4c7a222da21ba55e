from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from upi_gateway.error_handler import UpstreamProtocolError


class GatewayEntityModel(BaseModel):
    """Any gateway object we chain on: only a non-empty string ``id`` is required."""

    model_config = ConfigDict(extra="allow")

    id: StrictStr = Field(min_length=1)


def require_entity_id(
    raw: Dict[str, Any],
    error_type: Type[UpstreamProtocolError] = UpstreamProtocolError,
) -> str:
    """Return ``raw["id"]`` or raise ``error_type`` carrying the gateway payload."""
    try:
        return GatewayEntityModel.model_validate(raw).id
    except ValidationError as exc:
        raise error_type(payload=raw) from exc


def gateway_error_description(raw: Dict[str, Any]) -> Optional[str]:
    """Razorpay reports failures as ``{"error": {"description": ...}}``."""
    error = raw.get("error")
    if isinstance(error, dict):
        description = error.get("description") or error.get("code")
        return str(description) if description else None
    return None
