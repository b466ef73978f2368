"""
Candidate router - moves a candidate's application between interview steps.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ats_kanban.db.session import get_db
from ats_kanban.errors import AppError, CandidateStageError
from ats_kanban.schemas.candidate import (
    ApplicationRead,
    CandidateStageUpdate,
    CandidateStageUpdateResponse,
)
from ats_kanban.services.candidate_service import CandidateService

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.put("/{candidate_id}", response_model=CandidateStageUpdateResponse)
async def update_candidate_stage(
    candidate_id: int,
    data: CandidateStageUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update the current interview step of a candidate's application."""
    service = CandidateService(db)
    try:
        application = await service.update_candidate_stage(
            candidate_id=candidate_id,
            application_id=data.application_id,
            interview_step_id=data.current_interview_step,
        )
    except CandidateStageError as exc:
        raise AppError.from_service_error(exc, "Error updating candidate stage") from exc

    return CandidateStageUpdateResponse(
        message="Candidate stage updated successfully",
        data=ApplicationRead(
            id=application.id,
            position_id=application.position_id,
            candidate_id=application.candidate_id,
            application_date=application.application_date,
            current_interview_step=application.current_interview_step,
            notes=application.notes,
        ),
    )
