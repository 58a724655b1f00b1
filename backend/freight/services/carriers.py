"""Carrier Service — create, list, fetch and update carriers.

Invariants:
    - name, logo_url required and commodity_id > 0 (else ValidationFailure, no store access)
    - commodity_id must reference an existing commodity (else NotFound)
    - Updates go through persist_audited: created_at survives, updated_at advances
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from freight.core.outcome import Outcome
from freight.models import Carrier, Commodity
from freight.services.persistence import fail_internal, persist_audited

logger = logging.getLogger(__name__)

INVALID_CARRIER = "Invalid carrier data."
CARRIER_NOT_FOUND = "Carrier not found."
COMMODITY_NOT_FOUND = "Commodity not found."


def _invalid(name: str | None, logo_url: str | None, commodity_id: int | None) -> bool:
    return (
        not name or not name.strip()
        or not logo_url or not logo_url.strip()
        or commodity_id is None or commodity_id <= 0
    )


class CarrierService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, name: str | None, logo_url: str | None, commodity_id: int | None,
    ) -> Outcome[Carrier]:
        if _invalid(name, logo_url, commodity_id):
            return Outcome.validation_failure(INVALID_CARRIER)
        try:
            if await self.session.get(Commodity, commodity_id) is None:
                return Outcome.not_found(COMMODITY_NOT_FOUND)
            carrier = Carrier(name=name, logo_url=logo_url, commodity_id=commodity_id)
            await persist_audited(self.session, carrier, is_new=True)
            await self.session.refresh(carrier)
        except SQLAlchemyError:
            return await fail_internal(self.session, "create_carrier")
        logger.info(
            "Carrier created",
            extra={"entity_kind": "carrier", "operation": "create_carrier"},
        )
        return Outcome.success(carrier, "Carrier created successfully.")

    async def list_all(self) -> Outcome[list[Carrier]]:
        try:
            result = await self.session.scalars(select(Carrier).order_by(Carrier.id))
            carriers = list(result.all())
        except SQLAlchemyError:
            return await fail_internal(self.session, "list_carriers")
        return Outcome.success(carriers, "Carriers retrieved successfully.")

    async def get(self, carrier_id: int) -> Outcome[Carrier]:
        try:
            carrier = await self.session.get(Carrier, carrier_id)
        except SQLAlchemyError:
            return await fail_internal(self.session, "get_carrier")
        if carrier is None:
            return Outcome.not_found(CARRIER_NOT_FOUND)
        return Outcome.success(carrier, "Carrier retrieved successfully.")

    async def update(
        self,
        carrier_id: int,
        name: str | None,
        logo_url: str | None,
        commodity_id: int | None,
    ) -> Outcome[Carrier]:
        if _invalid(name, logo_url, commodity_id):
            return Outcome.validation_failure(INVALID_CARRIER)
        try:
            carrier = await self.session.get(Carrier, carrier_id)
            if carrier is None:
                return Outcome.not_found(CARRIER_NOT_FOUND)
            if await self.session.get(Commodity, commodity_id) is None:
                return Outcome.not_found(COMMODITY_NOT_FOUND)
            carrier.name = name
            carrier.logo_url = logo_url
            carrier.commodity_id = commodity_id
            await persist_audited(self.session, carrier, is_new=False)
            await self.session.refresh(carrier)
        except SQLAlchemyError:
            return await fail_internal(self.session, "update_carrier")
        return Outcome.success(carrier, "Carrier updated successfully.")
