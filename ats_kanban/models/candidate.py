"""
Candidate model.

Represents a job seeker who applies to positions.
"""

from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.application import Application


class Candidate(Base):
    """Candidate table - personal and contact info of an applicant."""

    __tablename__ = "candidate"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)

    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    phone: Mapped[Optional[str]] = mapped_column(String(15), nullable=True)

    address: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="candidate",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
