"""
Kanban board state for one position.

The board holds the position's interview steps (sorted by ``order_index``)
and a bucket of candidates per step name. Dropping a card runs a
``StageTransition`` through IDLE -> PENDING -> COMMITTED | REVERTED: the move
is applied to the buckets before the stage update is sent, and the snapshot
captured by the transition is restored if the update fails.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from ats_kanban.clients.base import ApiClientError
from ats_kanban.clients.positions import PositionApiClient

logger = logging.getLogger(__name__)

MAX_SCORE = 5

MISSING_INFO_ERROR = "Unable to update candidate stage. Missing required information."
UPDATE_FAILED_ERROR = "Failed to update candidate stage. Please try again."
LOAD_FAILED_ERROR = "Failed to load position data. Please try again."

Buckets = Dict[str, List["BoardCandidate"]]
UpdateStage = Callable[[int, int, int], Awaitable[Any]]


@dataclass(frozen=True)
class BoardStep:
    id: int
    interview_flow_id: int
    interview_type_id: int
    name: str
    order_index: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BoardStep":
        return cls(
            id=payload["id"],
            interview_flow_id=payload["interviewFlowId"],
            interview_type_id=payload["interviewTypeId"],
            name=payload["name"],
            order_index=payload["orderIndex"],
        )


@dataclass(frozen=True)
class BoardCandidate:
    full_name: str
    current_interview_step: str
    average_score: float
    id: Optional[int] = None
    application_id: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BoardCandidate":
        return cls(
            full_name=payload["fullName"],
            current_interview_step=payload.get("currentInterviewStep") or "",
            average_score=payload.get("averageScore") or 0,
            id=payload.get("id"),
            application_id=payload.get("applicationId"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "fullName": self.full_name,
            "currentInterviewStep": self.current_interview_step,
            "averageScore": self.average_score,
            "id": self.id,
            "applicationId": self.application_id,
        }

    def score_slots(self, max_score: int = MAX_SCORE) -> List[bool]:
        """Filled/empty flags of the score indicator; the score saturates at ``max_score``."""
        filled = min(self.average_score, max_score)
        return [slot < filled for slot in range(max_score)]


@dataclass(frozen=True)
class DropLocation:
    step_name: str
    index: int


@dataclass(frozen=True)
class DropResult:
    """
    Where a dragged card came from and where it was released.

    ``candidate_id`` names the dragged card. When set it takes precedence over
    ``source.index``, which reflects the order on the page that sent the drop.
    """

    source: DropLocation
    destination: Optional[DropLocation] = None
    candidate_id: Optional[int] = None
    application_id: Optional[int] = None

    @property
    def is_noop(self) -> bool:
        return self.destination is None or self.destination == self.source


class TransitionState(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    COMMITTED = "committed"
    REVERTED = "reverted"


class StageTransitionError(Exception):
    """A drop that cannot be turned into a stage transition."""


@dataclass
class StageTransition:
    """One candidate move, with the bucket snapshot taken before it was applied."""

    candidate: BoardCandidate
    source: DropLocation
    destination: DropLocation
    destination_step: BoardStep
    snapshot: Buckets
    state: TransitionState = TransitionState.IDLE
    error: Optional[str] = None


def sort_steps(steps: Sequence[BoardStep]) -> List[BoardStep]:
    """Steps in ascending ``order_index``; ties keep their input order."""
    return sorted(steps, key=lambda step: step.order_index)


def copy_buckets(buckets: Buckets) -> Buckets:
    return {name: list(candidates) for name, candidates in buckets.items()}


def bucket_candidates(
    steps: Sequence[BoardStep],
    candidates: Sequence[BoardCandidate],
) -> Buckets:
    """
    Place every candidate in the bucket of its current step.

    ``steps`` must already be sorted. A candidate whose step is unknown goes
    to the first step's bucket. Without steps no candidate can be placed.
    """
    buckets: Buckets = {step.name: [] for step in steps}
    for candidate in candidates:
        bucket = buckets.get(candidate.current_interview_step)
        if bucket is None:
            if not steps:
                logger.warning("No interview steps to place candidate %s", candidate.full_name)
                continue
            bucket = buckets[steps[0].name]
        bucket.append(candidate)
    return buckets


@dataclass
class KanbanBoard:
    position_name: str
    interview_steps: List[BoardStep]
    candidates_by_step: Buckets = field(default_factory=dict)
    error: str = ""

    @classmethod
    def from_payloads(
        cls,
        flow_payload: Mapping[str, Any],
        candidates_payload: Sequence[Mapping[str, Any]],
    ) -> "KanbanBoard":
        """
        Build a board from the interview-flow and candidates responses.

        Accepts both ``{"interviewFlow": {"positionName", "interviewFlow"}}``
        and the unwrapped inner object.
        """
        if "positionName" in flow_payload:
            flow_data = flow_payload
        else:
            flow_data = flow_payload.get("interviewFlow") or {}
        inner_flow = flow_data.get("interviewFlow") or {}

        steps = sort_steps(
            [BoardStep.from_payload(step) for step in inner_flow.get("interviewSteps") or []]
        )
        candidates = [BoardCandidate.from_payload(item) for item in candidates_payload]
        return cls(
            position_name=flow_data.get("positionName") or "",
            interview_steps=steps,
            candidates_by_step=bucket_candidates(steps, candidates),
        )

    @classmethod
    async def load(cls, client: PositionApiClient, position_id: int) -> "KanbanBoard":
        """Fetch the flow and the candidates concurrently; both must succeed."""
        flow_payload, candidates_payload = await asyncio.gather(
            client.get_interview_flow(position_id),
            client.get_candidates(position_id),
        )
        return cls.from_payloads(flow_payload, candidates_payload)

    @property
    def candidate_count(self) -> int:
        return sum(len(bucket) for bucket in self.candidates_by_step.values())

    def find_step(self, name: str) -> Optional[BoardStep]:
        return next((step for step in self.interview_steps if step.name == name), None)

    @staticmethod
    def _locate(bucket: Sequence[BoardCandidate], drop: DropResult) -> int:
        """Index of the dragged card in its source bucket."""
        if drop.candidate_id is None:
            if 0 <= drop.source.index < len(bucket):
                return drop.source.index
            raise StageTransitionError(MISSING_INFO_ERROR)

        for index, candidate in enumerate(bucket):
            if candidate.id != drop.candidate_id:
                continue
            if drop.application_id is None or candidate.application_id == drop.application_id:
                return index
        raise StageTransitionError(MISSING_INFO_ERROR)

    def begin_transition(self, drop: DropResult) -> Optional[StageTransition]:
        """
        Validate a drop and capture the pre-move snapshot.

        Returns ``None`` for a drop that changes nothing.

        Raises:
            StageTransitionError: the card, the destination step or the
                candidate/application ids cannot be resolved.
        """
        if drop.is_noop:
            return None
        destination = drop.destination
        if destination.index < 0:
            raise StageTransitionError(MISSING_INFO_ERROR)

        source_bucket = self.candidates_by_step.get(drop.source.step_name) or []
        source_index = self._locate(source_bucket, drop)
        candidate = source_bucket[source_index]
        source = DropLocation(drop.source.step_name, source_index)
        if source == destination:
            return None

        destination_step = self.find_step(destination.step_name)
        if destination_step is None or not candidate.id or not candidate.application_id:
            raise StageTransitionError(MISSING_INFO_ERROR)

        return StageTransition(
            candidate=candidate,
            source=source,
            destination=destination,
            destination_step=destination_step,
            snapshot=copy_buckets(self.candidates_by_step),
        )

    def apply(self, transition: StageTransition) -> None:
        """Apply the move to the buckets ahead of the server's answer."""
        buckets = copy_buckets(self.candidates_by_step)
        del buckets[transition.source.step_name][transition.source.index]
        buckets.setdefault(transition.destination.step_name, []).insert(
            transition.destination.index,
            replace(transition.candidate, current_interview_step=transition.destination.step_name),
        )
        self.candidates_by_step = buckets
        transition.state = TransitionState.PENDING

    def revert(self, transition: StageTransition, error: str) -> None:
        self.candidates_by_step = transition.snapshot
        transition.state = TransitionState.REVERTED
        transition.error = error
        self.error = error

    async def handle_drop(
        self,
        drop: DropResult,
        update_stage: UpdateStage,
    ) -> Optional[StageTransition]:
        """
        Run a drop through the full transition.

        ``update_stage(candidate_id, application_id, step_id)`` persists the
        move and raises ``ApiClientError`` on failure. Returns ``None`` when
        the drop was a no-op or was rejected; a rejection sets ``error``.
        """
        try:
            transition = self.begin_transition(drop)
        except StageTransitionError as exc:
            self.error = str(exc)
            return None
        if transition is None:
            return None

        self.apply(transition)

        try:
            await update_stage(
                transition.candidate.id,
                transition.candidate.application_id,
                transition.destination_step.id,
            )
        except ApiClientError as exc:
            logger.warning(
                "Reverting move of candidate %s to %s: %s",
                transition.candidate.id,
                transition.destination.step_name,
                exc,
            )
            self.revert(transition, exc.server_message or UPDATE_FAILED_ERROR)
            return transition

        transition.state = TransitionState.COMMITTED
        return transition

    def buckets_payload(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            name: [candidate.to_payload() for candidate in candidates]
            for name, candidates in self.candidates_by_step.items()
        }
