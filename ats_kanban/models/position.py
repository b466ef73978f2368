"""
Position model.

Represents an open (or closed, draft, filled) job opening.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.application import Application
    from ats_kanban.models.company import Company
    from ats_kanban.models.interview_flow import InterviewFlow


class Position(Base):
    """
    Position table - a job opening at a company.

    Each position follows one interview flow, which defines the stages
    shown as columns on the Kanban board.
    """

    __tablename__ = "position"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    company_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("company.id"),
        nullable=True,
    )

    interview_flow_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("interview_flow.id"),
        nullable=True,
    )

    title: Mapped[str] = mapped_column(String(100), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Lifecycle label, e.g. "Open", "Draft", "Closed", "Filled"
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="Draft",
    )

    is_visible: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    employment_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    salary_min: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    salary_max: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    application_deadline: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    company: Mapped[Optional["Company"]] = relationship(
        "Company",
        back_populates="positions",
    )

    interview_flow: Mapped[Optional["InterviewFlow"]] = relationship(
        "InterviewFlow",
        back_populates="positions",
    )

    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="position",
    )
