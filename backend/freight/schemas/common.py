"""Common Schema Base — camelCase wire names over snake_case attributes.

Invariants:
    - Requests accept camelCase (fullName) and snake_case (full_name)
    - Responses are dumped by alias, so clients always see camelCase

Design Decisions:
    - from_attributes=True: response schemas validate straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
