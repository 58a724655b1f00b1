"""Audit Stamper — before_flush hook enforcing created_at/updated_at on every audited entity.

Invariants:
    - One clock read per flush: every entity in the unit of work gets the same instant
    - New entities: created_at = updated_at = now (caller-supplied values overwritten)
    - Modified entities: created_at is restored to its committed value, then updated_at = now
      only if the entity still has net changes
    - Applies to every AuditMixin subclass without per-type registration

Design Decisions:
    - Listener on sqlalchemy.orm.Session (class-level): AsyncSession delegates flushes to a
      sync Session, so every engine and every test session is covered
    - set_committed_value to drop a created_at edit: restores the value without marking the
      attribute dirty, so it never reaches the UPDATE statement
    - Clock looked up through this module at flush time so tests can freeze it
"""

import logging
from datetime import datetime

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from freight.db.base import AuditMixin, utc_now

logger = logging.getLogger(__name__)


def _protect_created_at(session: Session, entity: AuditMixin) -> None:
    history = inspect(entity).attrs.created_at.history
    if not history.has_changes():
        return
    if history.deleted:
        set_committed_value(entity, "created_at", history.deleted[0])
    else:
        # original was never loaded: discard the pending value, reload on access
        session.expire(entity, ["created_at"])
    logger.warning(
        f"Discarded created_at change on {type(entity).__name__}",
        extra={"entity_kind": type(entity).__name__},
    )


def stamp_pending(session: Session, now: datetime) -> None:
    """Stamp every new or modified AuditMixin entity in the session with `now`."""
    for entity in session.new:
        if isinstance(entity, AuditMixin):
            entity.created_at = now
            entity.updated_at = now

    for entity in session.dirty:
        if not isinstance(entity, AuditMixin):
            continue
        _protect_created_at(session, entity)
        if session.is_modified(entity, include_collections=False):
            entity.updated_at = now


def _before_flush(session: Session, flush_context, instances) -> None:
    stamp_pending(session, utc_now())


def register_audit_hook() -> None:
    """Attach the stamper to every Session. Safe to call more than once."""
    if not event.contains(Session, "before_flush", _before_flush):
        event.listen(Session, "before_flush", _before_flush)
