"""Carrier ORM — a transport company bound to one commodity.

Invariants:
    - commodity_id references an existing commodity
    - created_at/updated_at owned by the audit hook

Design Decisions:
    - commodity loaded with selectin: carrier listings always render the nested commodity
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from freight.db.base import AuditMixin, Base


class Carrier(Base, AuditMixin):
    __tablename__ = "carriers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    logo_url: Mapped[str] = mapped_column(String(500), nullable=False)
    commodity_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("commodities.id"), nullable=False,
    )

    commodity: Mapped["Commodity"] = relationship(
        "Commodity", back_populates="carriers", lazy="selectin",
    )
