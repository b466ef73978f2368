"""
Candidate schemas - stage update request and response.
"""

from datetime import datetime
from typing import Optional

from ats_kanban.schemas.base import CamelModel


class CandidateStageUpdate(CamelModel):
    """Body of PUT /candidates/{id}."""

    application_id: int
    # Destination interview step id
    current_interview_step: int


class ApplicationRead(CamelModel):
    id: int
    position_id: int
    candidate_id: int
    application_date: Optional[datetime] = None
    current_interview_step: int
    notes: Optional[str] = None


class CandidateStageUpdateResponse(CamelModel):
    message: str
    data: ApplicationRead
