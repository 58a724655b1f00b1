"""Commodity Service — uniqueness-checked creation and listing.

Invariants:
    - name and code both required (blank → ValidationFailure, no store access)
    - A commodity reusing EITHER an existing name OR an existing code is a Conflict
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from freight.core.domain_types import EntityKind
from freight.core.outcome import Outcome
from freight.models import Commodity
from freight.services.persistence import create_unique_checked, fail_internal


class CommodityService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: str | None, code: str | None) -> Outcome[Commodity]:
        if not name or not name.strip() or not code or not code.strip():
            return Outcome.validation_failure("Invalid commodity data.")
        return await create_unique_checked(
            self.session, EntityKind.COMMODITY, {"name": name, "code": code},
        )

    async def list_all(self) -> Outcome[list[Commodity]]:
        try:
            result = await self.session.scalars(
                select(Commodity).order_by(Commodity.id),
            )
            commodities = list(result.all())
        except SQLAlchemyError:
            return await fail_internal(self.session, "list_commodities")
        return Outcome.success(commodities, "Commodities retrieved successfully.")
