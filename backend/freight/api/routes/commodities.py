"""Commodity Routes — uniqueness-checked create and list (authenticated)."""

from fastapi import APIRouter, Depends

from freight.api.deps import current_claims, get_commodity_service
from freight.api.responses import render
from freight.schemas.commodity import CommodityResponse, CreateCommodityRequest
from freight.services.commodities import CommodityService

router = APIRouter(
    prefix="/api/commodity", tags=["commodity"],
    dependencies=[Depends(current_claims)],
)


@router.post("")
async def create_commodity(
    body: CreateCommodityRequest,
    service: CommodityService = Depends(get_commodity_service),
):
    outcome = await service.create(body.name, body.code)
    data = CommodityResponse.model_validate(outcome.data).dump() if outcome.ok else None
    return render(outcome, data)


@router.get("")
async def list_commodities(
    service: CommodityService = Depends(get_commodity_service),
):
    outcome = await service.list_all()
    data = None
    if outcome.ok:
        data = [CommodityResponse.model_validate(c).dump() for c in outcome.data]
    return render(outcome, data)
