"""Commodity Schemas."""

from pydantic import Field

from freight.schemas.common import CamelModel


class CreateCommodityRequest(CamelModel):
    name: str | None = Field(None, max_length=200)
    code: str | None = Field(None, max_length=50)


class CommodityResponse(CamelModel):
    id: int
    name: str
    code: str
