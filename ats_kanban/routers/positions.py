"""
Position router - read endpoints for positions and their pipelines.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ats_kanban.db.session import get_db
from ats_kanban.errors import AppError, ErrorKind, PositionQueryError
from ats_kanban.schemas.position import (
    CandidateOnPosition,
    InterviewFlowResponse,
    PositionSummary,
)
from ats_kanban.services.position_service import PositionService

router = APIRouter(prefix="/position", tags=["positions"])


@router.get("", response_model=List[PositionSummary])
async def list_positions(db: AsyncSession = Depends(get_db)):
    """List all positions ordered by id."""
    service = PositionService(db)
    try:
        return await service.list_positions()
    except PositionQueryError as exc:
        raise AppError.from_service_error(exc, "Error retrieving positions") from exc


@router.get("/{position_id}/candidates", response_model=List[CandidateOnPosition])
async def list_position_candidates(
    position_id: int,
    db: AsyncSession = Depends(get_db),
):
    """List the candidates of a position with their current step and average score."""
    service = PositionService(db)
    try:
        return await service.list_candidates_for_position(position_id)
    except PositionQueryError as exc:
        raise AppError.from_service_error(exc, "Error retrieving candidates") from exc


@router.get("/{position_id}/interviewflow", response_model=InterviewFlowResponse)
async def get_position_interview_flow(
    position_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get the interview flow of a position.

    A missing position and a position without flow both answer 404.
    """
    service = PositionService(db)
    try:
        flow = await service.get_interview_flow(position_id)
    except PositionQueryError as exc:
        if exc.kind in (ErrorKind.NOT_FOUND, ErrorKind.FLOW_MISSING):
            raise AppError(status.HTTP_404_NOT_FOUND, "Position not found", exc.message) from exc
        raise AppError.from_service_error(exc, "Server error") from exc

    return InterviewFlowResponse(interview_flow=flow)
