"""Entity Persistence — audited writes and uniqueness-checked creation.

Invariants:
    - Every write goes through session.commit(), hence through the audit hook
    - create_unique_checked runs the guard read BEFORE issuing the insert
    - On conflict nothing is added to the session
    - A unique-constraint violation at commit (lost check-then-write race) is a Conflict
    - persist_audited returns the session-managed instance; a detached update is merged first

Design Decisions:
    - Store failures are caught here, at the I/O boundary, logged with the operation
      name, rolled back, and returned as InternalError with a generic message
"""

import logging
from typing import Any, Mapping, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from freight.core.domain_types import EntityKind
from freight.core.outcome import Outcome
from freight.services.uniqueness import (
    CONFLICT_MESSAGES, MODEL_BY_KIND, find_conflict,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "An error occurred while processing your request."

E = TypeVar("E")


async def persist_audited(session: AsyncSession, entity: E, is_new: bool) -> E:
    """Write one entity and return the instance `session` tracks.

    A detached entity passed with `is_new=False` is merged onto the stored row, so
    its changed columns are written instead of silently dropped.
    """
    if is_new:
        session.add(entity)
    elif entity not in session:
        entity = await session.merge(entity)
    await session.commit()
    return entity


async def fail_internal(
    session: AsyncSession, operation: str, message: str = GENERIC_FAILURE,
) -> Outcome:
    """Roll back and log the active exception; call only from an except block."""
    await session.rollback()
    logger.exception(
        f"{operation}: store operation failed",
        extra={"operation": operation},
    )
    return Outcome.internal_error(message)


async def create_unique_checked(
    session: AsyncSession,
    kind: EntityKind,
    candidate: Mapping[str, Any],
    failure_message: str = GENERIC_FAILURE,
) -> Outcome:
    """Guard read, then insert. Conflict if any business key is taken."""
    operation = f"create_{kind.value}"
    try:
        existing = await find_conflict(session, kind, candidate)
        if existing is not None:
            logger.info(
                f"{operation}: rejected duplicate business key",
                extra={"entity_kind": kind.value, "operation": operation},
            )
            return Outcome.conflict(CONFLICT_MESSAGES[kind])

        entity = MODEL_BY_KIND[kind](**candidate)
        await persist_audited(session, entity, is_new=True)
    except IntegrityError:
        await session.rollback()
        logger.warning(
            f"{operation}: unique constraint rejected insert after guard passed",
            extra={"entity_kind": kind.value, "operation": operation},
        )
        return Outcome.conflict(CONFLICT_MESSAGES[kind])
    except SQLAlchemyError:
        return await fail_internal(session, operation, failure_message)

    return Outcome.success(entity, f"{kind.value.capitalize()} created successfully.")
