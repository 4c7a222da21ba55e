import sys
import uuid

import pytest
from fastapi.testclient import TestClient

from upi_gateway.api.dependencies import get_gateway_client, get_gateway_config
from upi_gateway.api.main import app
from upi_gateway.error_handler import UpstreamTransportError


@pytest.fixture
def gateway(make_gateway):
    return make_gateway()


@pytest.fixture
def client(gateway, gateway_config):
    app.dependency_overrides[get_gateway_config] = lambda: gateway_config
    app.dependency_overrides[get_gateway_client] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sandbox_client(gateway, sandbox_config):
    app.dependency_overrides[get_gateway_config] = lambda: sandbox_config
    app.dependency_overrides[get_gateway_client] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["sandbox_mode"] is False


@pytest.mark.parametrize("params", [{"amount": "500"}, {"user_id": "42"}, {}])
def test_collect_missing_parameters_is_400_without_calls(client, gateway, params):
    response = client.get("/upi/collect", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameters"}
    assert gateway.calls == []


def test_collect_invalid_amount_is_400(client, gateway):
    response = client.get("/upi/collect", params={"amount": "12.5", "user_id": "42"})

    assert response.status_code == 400
    assert "whole number" in response.json()["error"]
    assert gateway.calls == []


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit on this interpreter")
def test_collect_oversized_amount_is_400(client, gateway):
    response = client.get("/upi/collect", params={"amount": "9" * 5000, "user_id": "42"})

    assert response.status_code == 400
    assert "whole number" in response.json()["error"]
    assert gateway.calls == []


def test_collect_relays_gateway_response(client, gateway):
    gateway.responses.append({"id": "order_1", "amount": 50000, "status": "created"})

    response = client.get("/upi/collect", params={"amount": "500", "user_id": "42"})

    assert response.status_code == 200
    assert response.json() == {"id": "order_1", "amount": 50000, "status": "created"}
    assert gateway.endpoints == ["/v1/orders"]


def test_collect_accepts_post_with_json_body(client, gateway):
    gateway.responses.append({"id": "order_2"})

    response = client.post("/upi/collect", json={"amount": 20, "user_id": "42"})

    assert response.status_code == 200
    assert response.json()["id"] == "order_2"
    assert gateway.calls[0][1]["amount"] == 2000


def test_post_with_malformed_body_is_400(client, gateway):
    response = client.post("/upi/collect", content=b"[1, 2]", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error"]
    assert gateway.calls == []


def test_collect_transport_failure_is_500(client, gateway):
    gateway.responses.append(UpstreamTransportError("refused", endpoint="/v1/orders"))

    response = client.get("/upi/collect", params={"amount": "10", "user_id": "42"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to initiate UPI Collect request"}


def test_payout_happy_path(client, gateway):
    gateway.responses.extend([{"id": "cont_1"}, {"id": "fa_1"}, {"id": "pout_1", "status": "processed"}])

    response = client.get("/upi/payout", params={"amount": "500", "user_id": "42", "upi_id": "alice@upi"})

    assert response.status_code == 200
    assert response.json()["id"] == "pout_1"
    assert gateway.endpoints == ["/v1/contacts", "/v1/fund_accounts", "/v1/payouts"]


def test_payout_missing_contact_id_is_500(client, gateway):
    gateway.responses.append({"entity": "contact"})

    response = client.post("/upi/payout", params={"amount": "500", "user_id": "42", "upi_id": "alice@upi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to retrieve Contact ID"}
    assert len(gateway.calls) == 1


def test_payout_missing_upi_id_is_400(client, gateway):
    response = client.get("/upi/payout", params={"amount": "500", "user_id": "42"})

    assert response.status_code == 400
    assert gateway.calls == []


def test_payout_in_sandbox_mode_returns_placeholder(sandbox_client, gateway):
    response = sandbox_client.get("/upi/payout", params={"amount": "5", "user_id": "42", "upi_id": "alice@upi"})

    assert response.status_code == 200
    assert response.json()["id"] == "pout_TEST123456"
    assert response.json()["amount"] == 500
    assert gateway.calls == []


def test_create_contact_endpoint(client, gateway):
    gateway.responses.append({"id": "cont_7"})

    response = client.post("/create/contact", params={"name": "Asha", "email": "asha@example.com", "phone": "9876543210"})

    assert response.status_code == 200
    assert response.json() == {"contact_id": "cont_7"}


def test_create_contact_endpoint_requires_all_params(client, gateway):
    response = client.post("/create/contact", params={"name": "Asha"})

    assert response.status_code == 400
    assert gateway.calls == []


def test_create_fund_account_endpoint(client, gateway):
    gateway.responses.append({"id": "fa_7"})

    response = client.post("/create/fund_account", json={"contact_id": "cont_7", "upi_id": "asha@upi"})

    assert response.status_code == 200
    assert response.json() == {"fund_account_id": "fa_7"}
    assert gateway.calls[0][1]["vpa"] == {"address": "asha@upi"}


def test_create_fund_account_transport_failure(client, gateway):
    gateway.responses.append(UpstreamTransportError("refused", endpoint="/v1/fund_accounts"))

    response = client.post("/create/fund_account", params={"contact_id": "cont_7", "upi_id": "asha@upi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create fund account"}


def test_create_user_returns_uuid(client):
    response = client.post("/create/user")

    assert response.status_code == 200
    assert uuid.UUID(response.json()["user_id"])


def test_unexpected_errors_are_masked(gateway, gateway_config):
    gateway.responses.append(RuntimeError("database password is hunter2"))
    app.dependency_overrides[get_gateway_config] = lambda: gateway_config
    app.dependency_overrides[get_gateway_client] = lambda: gateway
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/upi/collect", params={"amount": "1", "user_id": "42"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert "hunter2" not in response.text
    assert response.json()["error"]


def test_wrong_method_is_405_with_error_body(client, gateway):
    response = client.get("/create/contact", params={"name": "Asha"})

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert "POST" in response.headers["allow"]
    assert gateway.calls == []


def test_unknown_path_is_404_with_error_body(client):
    response = client.get("/upi/refund")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
