"""Client service for the /candidates endpoints."""

from typing import Any

from ats_kanban.clients.base import ApiService


class CandidateApiClient(ApiService):
    """Changes a candidate's interview step through the API."""

    async def update_candidate_stage(
        self,
        candidate_id: int,
        application_id: int,
        interview_step_id: int,
    ) -> Any:
        """Persist the move. Any 2xx reply counts as success, with or without a body."""
        return await self._request(
            "PUT",
            f"/candidates/{candidate_id}",
            "updating candidate stage",
            strict_json=False,
            json={
                "applicationId": application_id,
                "currentInterviewStep": interview_step_id,
            },
        )
