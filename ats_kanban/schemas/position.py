"""
Position schemas - the read DTOs returned by the /position endpoints.
"""

from datetime import datetime
from typing import List, Optional

from ats_kanban.schemas.base import CamelModel


class PositionSummary(CamelModel):
    """One row of the positions list."""

    id: int
    title: str
    status: str
    location: Optional[str] = None
    company_name: str
    application_deadline: Optional[datetime] = None


class CandidateOnPosition(CamelModel):
    """A candidate as shown on a position's board."""

    full_name: str
    current_interview_step: str
    average_score: float
    id: int
    application_id: int


class InterviewStepRead(CamelModel):
    id: int
    interview_flow_id: int
    interview_type_id: int
    name: str
    order_index: int


class InterviewFlowRead(CamelModel):
    id: int
    description: Optional[str] = None
    interview_steps: List[InterviewStepRead]


class PositionInterviewFlow(CamelModel):
    """A position's name together with its interview flow."""

    position_name: str
    interview_flow: InterviewFlowRead


class InterviewFlowResponse(CamelModel):
    """Envelope returned by GET /position/{id}/interviewflow."""

    interview_flow: PositionInterviewFlow
