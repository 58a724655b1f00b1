"""User ORM — persists an identity that can sign in.

Invariants:
    - email is unique and compared case-sensitively, exactly as stored
    - password_hash holds a bcrypt hash, never plaintext; not rewritten after creation
    - created_at/updated_at owned by the audit hook

Design Decisions:
    - Storage-level unique constraint on email backs up the pre-insert uniqueness check
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from freight.db.base import AuditMixin, Base


class User(Base, AuditMixin):
    """Identity entity, the subject of session tokens."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
