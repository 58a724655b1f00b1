"""Commodity ORM — a kind of goods a carrier transports.

Invariants:
    - name and code are each unique: a clash on either one is a conflict
    - created_at/updated_at owned by the audit hook
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from freight.db.base import AuditMixin, Base


class Commodity(Base, AuditMixin):
    __tablename__ = "commodities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    carriers: Mapped[list["Carrier"]] = relationship(
        "Carrier", back_populates="commodity",
    )
