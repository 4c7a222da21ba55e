"""
Gateway configuration loader (endpoints, payout defaults, credentials).

Non-secret settings live in config/gateway_config.yml. Credentials and the
sandbox switch are read from the environment once, at process start.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class CollectConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["order", "payment_link"] = "order"
    description: str = "Wallet top-up"


class PayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: str = "UPI"
    purpose: str = "refund"
    queue_if_low_balance: bool = True


class ContactConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name_prefix: str = "User "
    email: str = "user@example.com"
    phone: str = "9999999999"
    type: str = "customer"


class SandboxConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    payout_id: str = "pout_TEST123456"
    status: str = "processed"


class GatewayCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    key_id: str = ""
    key_secret: SecretStr = SecretStr("")
    account_number: str = ""


class GatewayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = "https://api.razorpay.com"
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    currency: str = "INR"
    sandbox_mode: bool = False
    credentials: GatewayCredentials = Field(default_factory=GatewayCredentials)
    collect: CollectConfig = Field(default_factory=CollectConfig)
    payout: PayoutConfig = Field(default_factory=PayoutConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    sandbox: SandboxConfig = Field(default_factory=SandboxConfig)


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_gateway_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> GatewayConfig:
    """
    Load and validate gateway configuration.

    Args:
        config_path: Path to YAML settings. Defaults to config/gateway_config.yml
        env: Environment mapping to read credentials from. Defaults to os.environ

    Returns:
        Frozen GatewayConfig

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValidationError: If settings or environment values are malformed
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "gateway_config.yml"
    if env is None:
        env = os.environ

    if not config_path.exists():
        raise FileNotFoundError(f"Gateway config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data["credentials"] = {
        "key_id": env.get("RAZORPAY_KEY", ""),
        "key_secret": env.get("RAZORPAY_SECRET", ""),
        "account_number": env.get("RAZORPAY_ACCOUNT_NUMBER", ""),
    }
    data["sandbox_mode"] = _env_flag(env.get("RAZORPAY_SANDBOX_MODE"))
    if env.get("RAZORPAY_BASE_URL"):
        data["base_url"] = env["RAZORPAY_BASE_URL"]
    if env.get("RAZORPAY_TIMEOUT_SECONDS"):
        data["timeout_seconds"] = env["RAZORPAY_TIMEOUT_SECONDS"]

    try:
        cfg = GatewayConfig(**data)
    except ValidationError as e:
        logger.error("Gateway config validation failed: %s", e)
        raise

    if not cfg.credentials.key_id or not cfg.credentials.key_secret.get_secret_value():
        logger.warning("Gateway key id or secret is not set; outbound calls will be rejected by the gateway.")
    logger.info(
        "Loaded gateway config from %s (base_url=%s sandbox_mode=%s collect=%s)",
        config_path,
        cfg.base_url,
        cfg.sandbox_mode,
        cfg.collect.kind,
    )
    return cfg
