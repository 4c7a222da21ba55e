from functools import lru_cache

from fastapi import Depends

from upi_gateway.integrations.clients.real_http.gateway import GatewayClient
from upi_gateway.integrations.policy.collect_service import CollectService
from upi_gateway.integrations.policy.payout_service import PayoutService
from upi_gateway.utils.config_loader import GatewayConfig, load_gateway_config


@lru_cache(maxsize=1)
def get_gateway_config() -> GatewayConfig:
    # Loaded once per process; the config object is frozen.
    return load_gateway_config()


def get_gateway_client(config: GatewayConfig = Depends(get_gateway_config)) -> GatewayClient:
    return GatewayClient(config)


def get_payout_service(
    client: GatewayClient = Depends(get_gateway_client),
    config: GatewayConfig = Depends(get_gateway_config),
) -> PayoutService:
    return PayoutService(client, config)


def get_collect_service(
    client: GatewayClient = Depends(get_gateway_client),
    config: GatewayConfig = Depends(get_gateway_config),
) -> CollectService:
    return CollectService(client, config)
