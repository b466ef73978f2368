"""Client service for the /position endpoints."""

from typing import Any, Dict, List

from ats_kanban.clients.base import ApiService


class PositionApiClient(ApiService):
    """Fetches positions, candidates and interview flows from the API."""

    async def list_positions(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/position", "fetching all positions")

    async def get_interview_flow(self, position_id: int) -> Dict[str, Any]:
        return await self._request(
            "GET",
            f"/position/{position_id}/interviewflow",
            "fetching position interview flow",
        )

    async def get_candidates(self, position_id: int) -> List[Dict[str, Any]]:
        return await self._request(
            "GET",
            f"/position/{position_id}/candidates",
            "fetching position candidates",
        )
