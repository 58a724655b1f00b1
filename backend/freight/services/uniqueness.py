"""Uniqueness Guard — pre-insert lookup of business-key collisions.

Invariants:
    - Read-only: never inserts, never locks, never mutates the store
    - Keys of one entity kind are OR-ed: a match on ANY key is a conflict
    - Equality is exact (case-sensitive as stored)

Design Decisions:
    - Check-then-write is not atomic: two concurrent creates can both pass. The unique
      constraints on the tables are the backstop (persistence.create_unique_checked maps
      their IntegrityError to a Conflict outcome)
    - Rules keyed by EntityKind: adding a constrained entity is one dict entry
"""

from typing import Any, Mapping

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from freight.core.domain_types import EntityKind
from freight.models import Carrier, Commodity, User

MODEL_BY_KIND: dict[EntityKind, type] = {
    EntityKind.USER: User,
    EntityKind.COMMODITY: Commodity,
    EntityKind.CARRIER: Carrier,
}

UNIQUE_KEYS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.USER: ("email",),
    EntityKind.COMMODITY: ("name", "code"),
}

CONFLICT_MESSAGES: dict[EntityKind, str] = {
    EntityKind.USER: "A user with this email already exists.",
    EntityKind.COMMODITY: "A commodity with the same name or code already exists.",
}


def unique_keys_for(kind: EntityKind) -> tuple[str, ...]:
    try:
        return UNIQUE_KEYS[kind]
    except KeyError:
        raise ValueError(f"No uniqueness rule for entity kind '{kind.value}'") from None


async def find_conflict(
    session: AsyncSession, kind: EntityKind, candidate: Mapping[str, Any],
):
    """Return an existing entity sharing any business key with `candidate`, else None."""
    model = MODEL_BY_KIND[kind]
    clauses = [
        getattr(model, key) == candidate[key] for key in unique_keys_for(kind)
    ]
    result = await session.scalars(select(model).where(or_(*clauses)).limit(1))
    return result.first()
