"""
Positions routes for UI.

The pages fetch their data through the API client services, the same way a
browser front end would.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import Field

from ats_kanban.clients.base import ApiClientError, describe_api_error
from ats_kanban.clients.candidates import CandidateApiClient
from ats_kanban.clients.positions import PositionApiClient
from ats_kanban.kanban.board import (
    LOAD_FAILED_ERROR,
    DropLocation,
    DropResult,
    KanbanBoard,
    TransitionState,
)
from ats_kanban.schemas.base import CamelModel
from ats_kanban.ui.dependencies import get_candidate_client, get_position_client
from ats_kanban.ui.formatting import format_deadline, status_badge_class, status_label

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))
templates.env.filters["deadline"] = format_deadline
templates.env.filters["status_badge"] = status_badge_class
templates.env.filters["status_label"] = status_label

POSITIONS_LOAD_ERROR = "Failed to load positions. Please try again."

# Filter controls shown above the list; they do not filter yet.
STATUS_FILTER_OPTIONS = [
    ("open", "Open"),
    ("filled", "Filled"),
    ("closed", "Closed"),
    ("draft", "Draft"),
]
MANAGER_FILTER_OPTIONS = [
    ("john_doe", "John Doe"),
    ("jane_smith", "Jane Smith"),
    ("alex_jones", "Alex Jones"),
]


class DropLocationIn(CamelModel):
    droppable_id: str
    index: int = Field(ge=0)


class MoveRequest(CamelModel):
    """A drag-end event posted by the board page."""

    candidate_id: int
    application_id: Optional[int] = None
    source: DropLocationIn
    destination: Optional[DropLocationIn] = None

    def to_drop_result(self) -> DropResult:
        destination = None
        if self.destination is not None:
            destination = DropLocation(self.destination.droppable_id, self.destination.index)
        return DropResult(
            source=DropLocation(self.source.droppable_id, self.source.index),
            destination=destination,
            candidate_id=self.candidate_id,
            application_id=self.application_id,
        )


@router.get("/ui/positions", response_class=HTMLResponse)
async def positions_list(
    request: Request,
    client: PositionApiClient = Depends(get_position_client),
):
    """
    Positions list page.
    """
    positions = []
    error = ""
    try:
        positions = await client.list_positions()
    except ApiClientError as exc:
        error = describe_api_error(exc, POSITIONS_LOAD_ERROR)

    return templates.TemplateResponse(
        request,
        "positions.html",
        {
            "active_page": "positions",
            "positions": positions,
            "error": error,
            "status_options": STATUS_FILTER_OPTIONS,
            "manager_options": MANAGER_FILTER_OPTIONS,
        },
    )


@router.get("/ui/positions/{position_id}", response_class=HTMLResponse)
async def position_kanban(
    request: Request,
    position_id: int,
    client: PositionApiClient = Depends(get_position_client),
):
    """
    Kanban board of a position: one column per interview step.
    """
    try:
        board = await KanbanBoard.load(client, position_id)
    except ApiClientError as exc:
        logger.error("Error fetching position %s data: %s", position_id, exc)
        return templates.TemplateResponse(
            request,
            "position_error.html",
            {
                "active_page": "positions",
                "error": exc.server_message or LOAD_FAILED_ERROR,
            },
        )

    return templates.TemplateResponse(
        request,
        "position_kanban.html",
        {
            "active_page": "positions",
            "position_id": position_id,
            "board": board,
        },
    )


@router.post("/ui/positions/{position_id}/moves")
async def move_candidate(
    position_id: int,
    move: MoveRequest,
    positions: PositionApiClient = Depends(get_position_client),
    candidates: CandidateApiClient = Depends(get_candidate_client),
):
    """
    Apply a drag-end event to the board and persist the stage change.

    Answers with the resulting buckets so the page can re-render after a
    revert.
    """
    try:
        board = await KanbanBoard.load(positions, position_id)
    except ApiClientError as exc:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={
                "status": "rejected",
                "error": exc.server_message or LOAD_FAILED_ERROR,
                "candidatesByStep": None,
            },
        )

    transition = await board.handle_drop(move.to_drop_result(), candidates.update_candidate_stage)

    if transition is None:
        outcome = "rejected" if board.error else "noop"
    elif transition.state == TransitionState.COMMITTED:
        outcome = "committed"
    else:
        outcome = "reverted"

    return {
        "status": outcome,
        "error": board.error or None,
        "candidatesByStep": board.buckets_payload(),
    }
