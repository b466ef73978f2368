"""
Application repository - database operations for Application.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ats_kanban.models.application import Application
from ats_kanban.models.interview_flow import InterviewStep


class ApplicationRepository:
    """Repository for Application database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_for_candidate(
        self,
        candidate_id: int,
        application_id: int,
    ) -> Optional[Application]:
        """Get an application only if it belongs to the given candidate."""
        result = await self.db.execute(
            select(Application)
            .where(
                Application.id == application_id,
                Application.candidate_id == candidate_id,
            )
            .options(selectinload(Application.position))
        )
        return result.scalar_one_or_none()

    async def get_step(self, step_id: int) -> Optional[InterviewStep]:
        result = await self.db.execute(
            select(InterviewStep).where(InterviewStep.id == step_id)
        )
        return result.scalar_one_or_none()

    async def set_current_step(
        self,
        application: Application,
        step_id: int,
    ) -> Application:
        """Move an application to another interview step."""
        application.current_interview_step = step_id
        await self.db.flush()
        await self.db.refresh(application)
        return application
