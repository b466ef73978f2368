"""
FastAPI dependencies for the UI routes.
"""

from fastapi import Request

from ats_kanban.clients.candidates import CandidateApiClient
from ats_kanban.clients.positions import PositionApiClient


def get_position_client(request: Request) -> PositionApiClient:
    return PositionApiClient(request.app.state.api_client)


def get_candidate_client(request: Request) -> CandidateApiClient:
    return CandidateApiClient(request.app.state.api_client)
