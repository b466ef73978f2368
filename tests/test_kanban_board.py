import pytest

from ats_kanban.clients.base import ApiClientError
from ats_kanban.kanban.board import (
    MISSING_INFO_ERROR,
    UPDATE_FAILED_ERROR,
    BoardCandidate,
    DropLocation,
    DropResult,
    KanbanBoard,
    TransitionState,
)

pytestmark = pytest.mark.unit


def flow_response(steps):
    return {
        "interviewFlow": {
            "positionName": "Senior Full-Stack Engineer",
            "interviewFlow": {
                "id": 1,
                "description": "Standard development interview process",
                "interviewSteps": [
                    {
                        "id": step_id,
                        "interviewFlowId": 1,
                        "interviewTypeId": 1,
                        "name": name,
                        "orderIndex": order_index,
                    }
                    for step_id, name, order_index in steps
                ],
            },
        }
    }


STEPS = [
    (3, "Manager Interview", 3),
    (1, "Initial Screening", 1),
    (2, "Technical Interview", 2),
]

CANDIDATES = [
    {"fullName": "John Doe", "currentInterviewStep": "Technical Interview", "averageScore": 4, "id": 1, "applicationId": 11},
    {"fullName": "Jane Smith", "currentInterviewStep": "Initial Screening", "averageScore": 0, "id": 2, "applicationId": 12},
    {"fullName": "Carlos García", "currentInterviewStep": "Technical Interview", "averageScore": 6, "id": 3, "applicationId": 13},
    {"fullName": "Ana Ruiz", "currentInterviewStep": "Offer", "averageScore": 2, "id": 4, "applicationId": 14},
]


def make_board(candidates=CANDIDATES, steps=STEPS):
    return KanbanBoard.from_payloads(flow_response(steps), candidates)


def names(board, step):
    return [c.full_name for c in board.candidates_by_step[step]]


def drop(source_step, source_index, destination_step=None, destination_index=0):
    destination = None
    if destination_step is not None:
        destination = DropLocation(destination_step, destination_index)
    return DropResult(source=DropLocation(source_step, source_index), destination=destination)


class RecordingUpdate:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    async def __call__(self, candidate_id, application_id, step_id):
        self.calls.append((candidate_id, application_id, step_id))
        if self.error is not None:
            raise self.error
        return {"message": "Candidate stage updated successfully"}


def test_steps_sorted_by_order_index():
    board = make_board()
    assert [s.order_index for s in board.interview_steps] == [1, 2, 3]
    assert [s.name for s in board.interview_steps] == [
        "Initial Screening",
        "Technical Interview",
        "Manager Interview",
    ]


def test_steps_with_equal_order_index_keep_input_order():
    board = make_board(candidates=[], steps=[(1, "B", 1), (2, "A", 1), (3, "C", 0)])
    assert [s.name for s in board.interview_steps] == ["C", "B", "A"]


def test_candidates_bucketed_by_step_with_fallback_to_first_step():
    board = make_board()
    assert board.position_name == "Senior Full-Stack Engineer"
    assert names(board, "Initial Screening") == ["Jane Smith", "Ana Ruiz"]
    assert names(board, "Technical Interview") == ["John Doe", "Carlos García"]
    assert names(board, "Manager Interview") == []
    assert board.candidate_count == 4


def test_unwrapped_flow_payload_is_accepted():
    board = KanbanBoard.from_payloads(flow_response(STEPS)["interviewFlow"], CANDIDATES)
    assert board.position_name == "Senior Full-Stack Engineer"
    assert len(board.interview_steps) == 3


def test_board_without_steps_places_no_candidates():
    board = make_board(steps=[])
    assert board.candidates_by_step == {}
    assert board.candidate_count == 0


@pytest.mark.asyncio
async def test_drop_without_destination_is_noop():
    board = make_board()
    before = board.candidates_by_step
    update = RecordingUpdate()

    assert await board.handle_drop(drop("Technical Interview", 0), update) is None
    assert board.candidates_by_step == before
    assert update.calls == []
    assert board.error == ""


@pytest.mark.asyncio
async def test_drop_on_same_place_is_noop():
    board = make_board()
    before = {step: list(bucket) for step, bucket in board.candidates_by_step.items()}
    update = RecordingUpdate()

    result = await board.handle_drop(drop("Technical Interview", 1, "Technical Interview", 1), update)

    assert result is None
    assert board.candidates_by_step == before
    assert update.calls == []


@pytest.mark.asyncio
async def test_successful_move_to_destination_index():
    board = make_board()
    update = RecordingUpdate()

    transition = await board.handle_drop(drop("Technical Interview", 1, "Initial Screening", 1), update)

    assert transition.state == TransitionState.COMMITTED
    assert update.calls == [(3, 13, 1)]
    assert names(board, "Technical Interview") == ["John Doe"]
    assert names(board, "Initial Screening") == ["Jane Smith", "Carlos García", "Ana Ruiz"]
    moved = board.candidates_by_step["Initial Screening"][1]
    assert moved.current_interview_step == "Initial Screening"
    assert moved.average_score == 6
    assert board.candidate_count == 4
    assert board.error == ""


@pytest.mark.asyncio
async def test_move_into_empty_column():
    board = make_board()
    transition = await board.handle_drop(drop("Initial Screening", 0, "Manager Interview", 0), RecordingUpdate())

    assert transition.state == TransitionState.COMMITTED
    assert names(board, "Manager Interview") == ["Jane Smith"]
    assert names(board, "Initial Screening") == ["Ana Ruiz"]


@pytest.mark.asyncio
async def test_reorder_within_same_column():
    board = make_board()
    update = RecordingUpdate()

    transition = await board.handle_drop(drop("Technical Interview", 0, "Technical Interview", 1), update)

    assert transition.state == TransitionState.COMMITTED
    assert names(board, "Technical Interview") == ["Carlos García", "John Doe"]
    assert update.calls == [(1, 11, 2)]
    assert board.candidate_count == 4


@pytest.mark.asyncio
async def test_move_is_applied_before_update_completes():
    board = make_board()
    seen = {}

    async def update(candidate_id, application_id, step_id):
        seen["manager"] = names(board, "Manager Interview")
        seen["technical"] = names(board, "Technical Interview")

    await board.handle_drop(drop("Technical Interview", 0, "Manager Interview", 0), update)

    assert seen == {"manager": ["John Doe"], "technical": ["Carlos García"]}


@pytest.mark.asyncio
async def test_failed_update_restores_snapshot():
    board = make_board()
    before = {step: list(bucket) for step, bucket in board.candidates_by_step.items()}
    update = RecordingUpdate(error=ApiClientError("Request failed with status code 500", status_code=500))

    transition = await board.handle_drop(drop("Technical Interview", 0, "Manager Interview", 0), update)

    assert transition.state == TransitionState.REVERTED
    assert board.candidates_by_step == before
    assert transition.snapshot == before
    assert board.candidate_count == 4
    assert board.error == UPDATE_FAILED_ERROR
    assert transition.error == UPDATE_FAILED_ERROR


@pytest.mark.asyncio
async def test_failed_update_uses_server_message():
    board = make_board()
    error = ApiClientError(
        "Request failed with status code 404",
        status_code=404,
        body={"message": "Error updating candidate stage", "error": "Application not found for candidate"},
    )

    await board.handle_drop(drop("Initial Screening", 0, "Technical Interview", 2), RecordingUpdate(error=error))

    assert board.error == "Error updating candidate stage"


@pytest.mark.asyncio
async def test_drop_on_unknown_step_is_rejected_without_change():
    board = make_board()
    before = {step: list(bucket) for step, bucket in board.candidates_by_step.items()}
    update = RecordingUpdate()

    result = await board.handle_drop(drop("Technical Interview", 0, "Offer", 0), update)

    assert result is None
    assert board.error == MISSING_INFO_ERROR
    assert board.candidates_by_step == before
    assert update.calls == []


@pytest.mark.asyncio
async def test_candidate_without_ids_is_rejected_without_change():
    candidates = [{"fullName": "No Ids", "currentInterviewStep": "Initial Screening", "averageScore": 1}]
    board = make_board(candidates=candidates)
    update = RecordingUpdate()

    result = await board.handle_drop(drop("Initial Screening", 0, "Technical Interview", 0), update)

    assert result is None
    assert board.error == MISSING_INFO_ERROR
    assert names(board, "Initial Screening") == ["No Ids"]
    assert update.calls == []


@pytest.mark.asyncio
async def test_stale_source_index_is_rejected():
    board = make_board()
    result = await board.handle_drop(drop("Manager Interview", 0, "Technical Interview", 0), RecordingUpdate())
    assert result is None
    assert board.error == MISSING_INFO_ERROR


@pytest.mark.asyncio
async def test_card_is_located_by_candidate_id_not_page_index():
    board = make_board()
    update = RecordingUpdate()
    move = DropResult(
        source=DropLocation("Technical Interview", 0),
        destination=DropLocation("Manager Interview", 0),
        candidate_id=3,
        application_id=13,
    )

    transition = await board.handle_drop(move, update)

    assert transition.state == TransitionState.COMMITTED
    assert transition.source == DropLocation("Technical Interview", 1)
    assert update.calls == [(3, 13, 3)]
    assert names(board, "Manager Interview") == ["Carlos García"]
    assert names(board, "Technical Interview") == ["John Doe"]


@pytest.mark.asyncio
@pytest.mark.parametrize("candidate_id, application_id", [(2, None), (1, 99)])
async def test_card_missing_from_source_bucket_is_rejected(candidate_id, application_id):
    board = make_board()
    update = RecordingUpdate()
    move = DropResult(
        source=DropLocation("Technical Interview", 0),
        destination=DropLocation("Manager Interview", 0),
        candidate_id=candidate_id,
        application_id=application_id,
    )

    assert await board.handle_drop(move, update) is None
    assert board.error == MISSING_INFO_ERROR
    assert names(board, "Technical Interview") == ["John Doe", "Carlos García"]
    assert update.calls == []


@pytest.mark.asyncio
async def test_negative_destination_index_is_rejected():
    board = make_board()
    update = RecordingUpdate()

    result = await board.handle_drop(drop("Technical Interview", 0, "Manager Interview", -1), update)

    assert result is None
    assert board.error == MISSING_INFO_ERROR
    assert update.calls == []


def test_score_slots_saturate_at_five():
    candidate = BoardCandidate(full_name="Carlos García", current_interview_step="x", average_score=7)
    assert candidate.score_slots() == [True] * 5
    assert candidate.average_score == 7


def test_score_slots_partial_and_empty():
    assert BoardCandidate("A", "x", 3).score_slots() == [True, True, True, False, False]
    assert BoardCandidate("B", "x", 0).score_slots() == [False] * 5
    assert BoardCandidate("C", "x", 3.5).score_slots() == [True, True, True, True, False]


class FakePositionClient:
    def __init__(self, fail_candidates=False):
        self.fail_candidates = fail_candidates
        self.calls = []

    async def get_interview_flow(self, position_id):
        self.calls.append(("flow", position_id))
        return flow_response(STEPS)

    async def get_candidates(self, position_id):
        self.calls.append(("candidates", position_id))
        if self.fail_candidates:
            raise ApiClientError("Network Error", is_connection_error=True)
        return CANDIDATES


@pytest.mark.asyncio
async def test_load_fetches_flow_and_candidates():
    client = FakePositionClient()
    board = await KanbanBoard.load(client, 7)

    assert sorted(client.calls) == [("candidates", 7), ("flow", 7)]
    assert board.candidate_count == 4


@pytest.mark.asyncio
async def test_load_fails_when_either_fetch_fails():
    with pytest.raises(ApiClientError):
        await KanbanBoard.load(FakePositionClient(fail_candidates=True), 7)
