"""
Utility modules for the payment proxy
"""
from .amount import MINOR_UNITS_PER_MAJOR, normalize_amount
from .config_loader import GatewayConfig, GatewayCredentials, load_gateway_config

__all__ = [
    'MINOR_UNITS_PER_MAJOR',
    'normalize_amount',
    'GatewayConfig',
    'GatewayCredentials',
    'load_gateway_config',
]
