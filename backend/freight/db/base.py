"""SQLAlchemy Declarative Base and AuditMixin — shared base classes for all ORM models.

Invariants:
    - All models inherit from Base
    - Every persisted business entity also mixes in AuditMixin (created_at, updated_at)
    - Audit columns are written only by the audit hook (db/auditing.py)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Mixin over a shared parent table: each entity keeps its own table, the audit hook
      dispatches on isinstance(obj, AuditMixin)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all Freight ORM models."""
    pass


class AuditMixin:
    """Creation/modification timestamps, stamped at flush time."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
