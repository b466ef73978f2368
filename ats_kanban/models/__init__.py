"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from ats_kanban.models.company import Company
from ats_kanban.models.interview_flow import InterviewFlow, InterviewStep, InterviewType
from ats_kanban.models.position import Position
from ats_kanban.models.candidate import Candidate
from ats_kanban.models.application import Application
from ats_kanban.models.interview import Interview

# Export all models
__all__ = [
    "Company",
    "InterviewFlow",
    "InterviewStep",
    "InterviewType",
    "Position",
    "Candidate",
    "Application",
    "Interview",
]
