import uuid
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from upi_gateway.api.dependencies import get_collect_service, get_payout_service
from upi_gateway.error_handler import InvalidInput
from upi_gateway.integrations.policy.collect_service import CollectService
from upi_gateway.integrations.policy.payout_service import PayoutService


api = APIRouter()
payments_api = api


async def _request_params(request: Request) -> Dict[str, str]:
    """Query string parameters, overlaid with a JSON object body on POST."""
    params: Dict[str, str] = dict(request.query_params)
    if request.method != "POST" or not await request.body():
        return params

    try:
        body = await request.json()
    except ValueError as exc:
        raise InvalidInput("Request body must be a JSON object") from exc
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")

    params.update({key: str(value) for key, value in body.items() if value is not None})
    return params


@api.post("/create/user", tags=["Accounts"])
async def create_user() -> Dict[str, str]:
    return {"user_id": str(uuid.uuid4())}


@api.post("/create/contact", tags=["Accounts"])
async def create_contact(request: Request, service: PayoutService = Depends(get_payout_service)):
    params = await _request_params(request)
    contact_id = await service.create_contact(params.get("name"), params.get("email"), params.get("phone"))
    return {"contact_id": contact_id}


@api.post("/create/fund_account", tags=["Accounts"])
async def create_fund_account(request: Request, service: PayoutService = Depends(get_payout_service)):
    params = await _request_params(request)
    fund_account_id = await service.create_fund_account(params.get("contact_id"), params.get("upi_id"))
    return {"fund_account_id": fund_account_id}


@api.api_route("/upi/collect", methods=["GET", "POST"], tags=["UPI"])
async def upi_collect(request: Request, service: CollectService = Depends(get_collect_service)) -> Dict[str, Any]:
    params = await _request_params(request)
    return await service.collect(params.get("amount"), params.get("user_id"))


@api.api_route("/upi/payout", methods=["GET", "POST"], tags=["UPI"])
async def upi_payout(request: Request, service: PayoutService = Depends(get_payout_service)) -> Dict[str, Any]:
    params = await _request_params(request)
    return await service.payout(params.get("amount"), params.get("user_id"), params.get("upi_id"))
