"""
HTTP client services used by the UI to talk to the API.
"""

from ats_kanban.clients.base import (
    ApiClientError,
    create_http_client,
    describe_api_error,
)
from ats_kanban.clients.candidates import CandidateApiClient
from ats_kanban.clients.positions import PositionApiClient

__all__ = [
    "ApiClientError",
    "CandidateApiClient",
    "PositionApiClient",
    "create_http_client",
    "describe_api_error",
]
