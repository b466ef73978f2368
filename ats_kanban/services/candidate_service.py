"""
Candidate business logic service.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ats_kanban.errors import CandidateStageError, ErrorKind
from ats_kanban.models.application import Application
from ats_kanban.repositories.application_repository import ApplicationRepository

logger = logging.getLogger(__name__)


class CandidateService:
    """Service for candidate pipeline changes."""

    def __init__(self, db: AsyncSession):
        self.repository = ApplicationRepository(db)

    async def update_candidate_stage(
        self,
        candidate_id: int,
        application_id: int,
        interview_step_id: int,
    ) -> Application:
        """
        Move a candidate's application to another interview step.

        The step must belong to the interview flow of the application's
        position.
        """
        application = await self.repository.get_for_candidate(candidate_id, application_id)
        if application is None:
            raise CandidateStageError(
                ErrorKind.NOT_FOUND,
                "Application not found for candidate",
            )

        step = await self.repository.get_step(interview_step_id)
        if step is None:
            raise CandidateStageError(
                ErrorKind.INVALID_STEP,
                f"Interview step {interview_step_id} does not exist",
            )

        if step.interview_flow_id != application.position.interview_flow_id:
            raise CandidateStageError(
                ErrorKind.INVALID_STEP,
                f"Interview step {interview_step_id} is not part of the position's interview flow",
            )

        logger.info(
            "Moving application %s of candidate %s to step %s",
            application_id,
            candidate_id,
            interview_step_id,
        )
        return await self.repository.set_current_step(application, interview_step_id)
