"""
Application model.

Links one candidate to one position and tracks the interview step the
candidate is currently at.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.candidate import Candidate
    from ats_kanban.models.interview import Interview
    from ats_kanban.models.interview_flow import InterviewStep
    from ats_kanban.models.position import Position


class Application(Base):
    """Application table - a candidate's application to a position."""

    __tablename__ = "application"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    position_id: Mapped[int] = mapped_column(
        ForeignKey("position.id"),
        nullable=False,
        index=True,
    )

    candidate_id: Mapped[int] = mapped_column(
        ForeignKey("candidate.id"),
        nullable=False,
        index=True,
    )

    application_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Must be a step of the position's interview flow
    current_interview_step: Mapped[int] = mapped_column(
        ForeignKey("interview_step.id"),
        nullable=False,
    )

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    position: Mapped["Position"] = relationship(
        "Position",
        back_populates="applications",
    )

    candidate: Mapped["Candidate"] = relationship(
        "Candidate",
        back_populates="applications",
    )

    interview_step: Mapped["InterviewStep"] = relationship("InterviewStep")

    interviews: Mapped[List["Interview"]] = relationship(
        "Interview",
        back_populates="application",
    )
