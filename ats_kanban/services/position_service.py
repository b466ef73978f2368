"""
Position query service.

Turns the position, application and interview-flow rows into the read DTOs
served by the /position endpoints.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ats_kanban.errors import ErrorKind, PositionQueryError
from ats_kanban.models.application import Application
from ats_kanban.repositories.position_repository import PositionRepository
from ats_kanban.schemas.position import (
    CandidateOnPosition,
    InterviewFlowRead,
    InterviewStepRead,
    PositionInterviewFlow,
    PositionSummary,
)
from ats_kanban.services.scoring import InterviewScore, average_score

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "Unknown"


def _candidate_from_application(application: Application) -> CandidateOnPosition:
    scores = [InterviewScore(score=interview.score) for interview in application.interviews]
    return CandidateOnPosition(
        full_name=application.candidate.full_name,
        current_interview_step=application.interview_step.name,
        average_score=average_score(scores),
        id=application.candidate.id,
        application_id=application.id,
    )


class PositionService:
    """Service for the read operations of a position."""

    def __init__(self, db: AsyncSession):
        self.repository = PositionRepository(db)

    async def list_positions(self) -> List[PositionSummary]:
        """List all positions ordered by id, with their company name."""
        try:
            positions = await self.repository.list_with_company()
        except SQLAlchemyError as exc:
            logger.exception("Error retrieving all positions")
            raise PositionQueryError(
                ErrorKind.STORE_FAILURE,
                "Error retrieving all positions",
                detail=str(exc),
            ) from exc

        return [
            PositionSummary(
                id=position.id,
                title=position.title,
                status=position.status,
                location=position.location,
                company_name=position.company.name if position.company else UNKNOWN_COMPANY,
                application_deadline=position.application_deadline,
            )
            for position in positions
        ]

    async def list_candidates_for_position(self, position_id: int) -> List[CandidateOnPosition]:
        """List the candidates that applied to a position, with their average score."""
        try:
            applications = await self.repository.list_applications(position_id)
        except SQLAlchemyError as exc:
            logger.exception("Error retrieving candidates by position %s", position_id)
            raise PositionQueryError(
                ErrorKind.STORE_FAILURE,
                "Error retrieving candidates by position",
                detail=str(exc),
            ) from exc

        return [_candidate_from_application(application) for application in applications]

    async def get_interview_flow(self, position_id: int) -> PositionInterviewFlow:
        """
        Get the position's name and interview flow.

        Raises:
            PositionQueryError: NOT_FOUND when the position does not exist,
                FLOW_MISSING when it has no interview flow, STORE_FAILURE when
                the query fails.
        """
        try:
            position = await self.repository.get_with_interview_flow(position_id)
        except SQLAlchemyError as exc:
            logger.exception("Error retrieving interview flow of position %s", position_id)
            raise PositionQueryError(
                ErrorKind.STORE_FAILURE,
                "Error retrieving interview flow",
                detail=str(exc),
            ) from exc

        if position is None:
            logger.warning("Position %s not found", position_id)
            raise PositionQueryError(ErrorKind.NOT_FOUND, "Position not found")

        flow = position.interview_flow
        if flow is None:
            logger.warning("Position %s does not have an interview flow", position_id)
            raise PositionQueryError(
                ErrorKind.FLOW_MISSING,
                "Position does not have an interview flow",
            )

        return PositionInterviewFlow(
            position_name=position.title,
            interview_flow=InterviewFlowRead(
                id=flow.id,
                description=flow.description,
                interview_steps=[
                    InterviewStepRead(
                        id=step.id,
                        interview_flow_id=step.interview_flow_id,
                        interview_type_id=step.interview_type_id,
                        name=step.name,
                        order_index=step.order_index,
                    )
                    for step in flow.interview_steps
                ],
            ),
        )
