"""
Position repository - database operations for Position.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ats_kanban.models.application import Application
from ats_kanban.models.interview_flow import InterviewFlow
from ats_kanban.models.position import Position


class PositionRepository:
    """Repository for Position database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_with_company(self) -> List[Position]:
        """List every position with its company loaded, ordered by id."""
        result = await self.db.execute(
            select(Position)
            .options(selectinload(Position.company))
            .order_by(Position.id.asc())
        )
        return list(result.scalars().all())

    async def get_with_interview_flow(self, position_id: int) -> Optional[Position]:
        """Get a position with its interview flow and the flow's steps loaded."""
        result = await self.db.execute(
            select(Position)
            .where(Position.id == position_id)
            .options(
                selectinload(Position.interview_flow).selectinload(
                    InterviewFlow.interview_steps
                )
            )
        )
        return result.scalar_one_or_none()

    async def list_applications(self, position_id: int) -> List[Application]:
        """
        List the applications of a position.

        Loads the candidate, the interviews and the current interview step
        of every application.
        """
        result = await self.db.execute(
            select(Application)
            .where(Application.position_id == position_id)
            .options(
                selectinload(Application.candidate),
                selectinload(Application.interviews),
                selectinload(Application.interview_step),
            )
            .order_by(Application.id.asc())
        )
        return list(result.scalars().all())
