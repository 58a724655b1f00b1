"""Carrier Schemas — create/update body, flat write response, nested read response.

Design Decisions:
    - Reads nest the commodity and expose audit timestamps; writes echo commodity_id only
"""

from datetime import datetime

from pydantic import Field

from freight.schemas.common import CamelModel
from freight.schemas.commodity import CommodityResponse


class CarrierRequest(CamelModel):
    name: str | None = Field(None, max_length=200)
    logo_url: str | None = Field(None, max_length=500)
    commodity_id: int | None = None


class CarrierWriteResponse(CamelModel):
    id: int
    name: str
    logo_url: str
    commodity_id: int


class CarrierResponse(CamelModel):
    id: int
    name: str
    logo_url: str
    commodity: CommodityResponse | None
    created_at: datetime
    updated_at: datetime
