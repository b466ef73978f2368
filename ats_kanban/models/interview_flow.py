"""
Interview flow models.

An interview flow is the ordered pipeline of steps a position uses.
"""

from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ats_kanban.db.base import Base

if TYPE_CHECKING:
    from ats_kanban.models.position import Position


class InterviewFlow(Base):
    """InterviewFlow table - a named hiring pipeline."""

    __tablename__ = "interview_flow"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    interview_steps: Mapped[List["InterviewStep"]] = relationship(
        "InterviewStep",
        back_populates="interview_flow",
    )

    positions: Mapped[List["Position"]] = relationship(
        "Position",
        back_populates="interview_flow",
    )


class InterviewType(Base):
    """InterviewType table - the kind of interview a step runs (technical, HR, ...)."""

    __tablename__ = "interview_type"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class InterviewStep(Base):
    """
    InterviewStep table - one stage of an interview flow.

    ``order_index`` defines the display order of the stage within its flow.
    """

    __tablename__ = "interview_step"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    interview_flow_id: Mapped[int] = mapped_column(
        ForeignKey("interview_flow.id"),
        nullable=False,
        index=True,
    )

    interview_type_id: Mapped[int] = mapped_column(
        ForeignKey("interview_type.id"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    order_index: Mapped[int] = mapped_column(Integer, nullable=False)

    interview_flow: Mapped["InterviewFlow"] = relationship(
        "InterviewFlow",
        back_populates="interview_steps",
    )

    interview_type: Mapped["InterviewType"] = relationship("InterviewType")
