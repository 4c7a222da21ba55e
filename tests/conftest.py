"""Pytest fixtures for gateway, payout and collect tests."""

import pytest

from upi_gateway.utils.config_loader import GatewayConfig, GatewayCredentials


class FakeGatewayClient:
    """Stands in for GatewayClient: records calls and replays queued responses."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    async def call(self, endpoint, payload):
        self.calls.append((endpoint, payload))
        if not self.responses:
            return {}
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def endpoints(self):
        return [endpoint for endpoint, _ in self.calls]


@pytest.fixture
def gateway_config():
    return GatewayConfig(
        credentials=GatewayCredentials(
            key_id="rzp_test_key",
            key_secret="s3cr3t-value",
            account_number="2323230000000000",
        )
    )


@pytest.fixture
def sandbox_config(gateway_config):
    return gateway_config.model_copy(update={"sandbox_mode": True})


@pytest.fixture
def make_gateway():
    def _make(*responses):
        return FakeGatewayClient(responses)

    return _make
