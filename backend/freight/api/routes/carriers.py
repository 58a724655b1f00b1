"""Carrier Routes — create, list, fetch, update (authenticated).

Invariants:
    - Reads return the nested commodity plus audit timestamps
    - Writes echo the flat commodity_id
"""

from fastapi import APIRouter, Depends

from freight.api.deps import current_claims, get_carrier_service
from freight.api.responses import render
from freight.schemas.carrier import (
    CarrierRequest, CarrierResponse, CarrierWriteResponse,
)
from freight.services.carriers import CarrierService

router = APIRouter(
    prefix="/api/carrier", tags=["carrier"],
    dependencies=[Depends(current_claims)],
)


@router.post("")
async def create_carrier(
    body: CarrierRequest,
    service: CarrierService = Depends(get_carrier_service),
):
    outcome = await service.create(body.name, body.logo_url, body.commodity_id)
    data = CarrierWriteResponse.model_validate(outcome.data).dump() if outcome.ok else None
    return render(outcome, data)


@router.get("")
async def list_carriers(service: CarrierService = Depends(get_carrier_service)):
    outcome = await service.list_all()
    data = None
    if outcome.ok:
        data = [CarrierResponse.model_validate(c).dump() for c in outcome.data]
    return render(outcome, data)


@router.get("/{carrier_id}")
async def get_carrier(
    carrier_id: int, service: CarrierService = Depends(get_carrier_service),
):
    outcome = await service.get(carrier_id)
    data = CarrierResponse.model_validate(outcome.data).dump() if outcome.ok else None
    return render(outcome, data)


@router.put("/{carrier_id}")
async def update_carrier(
    carrier_id: int,
    body: CarrierRequest,
    service: CarrierService = Depends(get_carrier_service),
):
    outcome = await service.update(
        carrier_id, body.name, body.logo_url, body.commodity_id,
    )
    data = CarrierWriteResponse.model_validate(outcome.data).dump() if outcome.ok else None
    return render(outcome, data)
