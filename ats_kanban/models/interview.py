"""
Interview model.

One interview held for an application, optionally scored 0-5.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.application import Application


class Interview(Base):
    """Interview table - an interview held at some step of an application."""

    __tablename__ = "interview"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    application_id: Mapped[int] = mapped_column(
        ForeignKey("application.id"),
        nullable=False,
        index=True,
    )

    interview_step_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("interview_step.id"),
        nullable=True,
    )

    interview_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    result: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Not bounded here; the UI convention is 0-5
    score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    application: Mapped["Application"] = relationship(
        "Application",
        back_populates="interviews",
    )
