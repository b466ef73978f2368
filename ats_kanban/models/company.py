"""
Company model.

Represents the employer that owns one or more positions.
"""

from typing import List, TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.position import Position


class Company(Base):
    """Company table - the hiring organisation."""

    __tablename__ = "company"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    positions: Mapped[List["Position"]] = relationship(
        "Position",
        back_populates="company",
    )
