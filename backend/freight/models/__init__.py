"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base and AuditMixin (db/base.py)
    - Importing this package registers the audit hook before any session can flush a model

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from freight.db.auditing import register_audit_hook
from freight.models.user import User  # noqa: F401
from freight.models.commodity import Commodity  # noqa: F401
from freight.models.carrier import Carrier  # noqa: F401

register_audit_hook()
