"""
Schemas package.

Import all schemas here for easy access.
"""

from ats_kanban.schemas.position import (
    PositionSummary,
    CandidateOnPosition,
    InterviewStepRead,
    InterviewFlowRead,
    PositionInterviewFlow,
    InterviewFlowResponse,
)
from ats_kanban.schemas.candidate import (
    CandidateStageUpdate,
    ApplicationRead,
    CandidateStageUpdateResponse,
)

__all__ = [
    # Position
    "PositionSummary",
    "CandidateOnPosition",
    "InterviewStepRead",
    "InterviewFlowRead",
    "PositionInterviewFlow",
    "InterviewFlowResponse",
    # Candidate
    "CandidateStageUpdate",
    "ApplicationRead",
    "CandidateStageUpdateResponse",
]
