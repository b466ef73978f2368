import json

import httpx
import pytest

from ats_kanban.clients import (
    ApiClientError,
    CandidateApiClient,
    PositionApiClient,
    create_http_client,
    describe_api_error,
)

pytestmark = pytest.mark.unit

BASE_URL = "http://api.test"


def mock_http(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)


@pytest.mark.asyncio
async def test_list_positions_returns_parsed_json():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/position"
        return httpx.Response(200, json=[{"id": 1, "title": "Engineer"}])

    async with mock_http(handler) as http:
        positions = await PositionApiClient(http).list_positions()

    assert positions == [{"id": 1, "title": "Engineer"}]


@pytest.mark.asyncio
async def test_position_detail_paths():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, json={} if request.url.path.endswith("interviewflow") else [])

    async with mock_http(handler) as http:
        client = PositionApiClient(http)
        await client.get_interview_flow(5)
        await client.get_candidates(5)

    assert seen == ["/position/5/interviewflow", "/position/5/candidates"]


@pytest.mark.asyncio
async def test_update_candidate_stage_sends_put_body():
    captured = {}

    def handler(request):
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"message": "Candidate stage updated successfully"})

    async with mock_http(handler) as http:
        result = await CandidateApiClient(http).update_candidate_stage(3, 13, 2)

    assert captured == {
        "method": "PUT",
        "path": "/candidates/3",
        "body": {"applicationId": 13, "currentInterviewStep": 2},
    }
    assert result["message"] == "Candidate stage updated successfully"


@pytest.mark.asyncio
async def test_error_status_raises_with_body():
    def handler(request):
        return httpx.Response(500, json={"message": "Error retrieving positions", "error": "boom"})

    async with mock_http(handler) as http:
        with pytest.raises(ApiClientError) as exc_info:
            await PositionApiClient(http).list_positions()

    error = exc_info.value
    assert error.status_code == 500
    assert error.server_message == "Error retrieving positions"
    assert error.server_error == "boom"
    assert not error.is_connection_error


@pytest.mark.asyncio
async def test_transport_failure_raises_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_http(handler) as http:
        with pytest.raises(ApiClientError) as exc_info:
            await PositionApiClient(http).list_positions()

    assert exc_info.value.is_connection_error
    assert exc_info.value.status_code is None


def test_describe_api_error_prefers_server_message():
    error = ApiClientError("x", status_code=500, body={"message": "Error retrieving positions", "error": "boom"})
    assert describe_api_error(error) == "Error retrieving positions"


def test_describe_api_error_falls_back_to_error_field():
    error = ApiClientError("x", status_code=400, body={"error": "bad step"})
    assert describe_api_error(error) == "bad step"


def test_describe_api_error_by_status():
    assert "not found" in describe_api_error(ApiClientError("x", status_code=404, body="Not Found"))
    assert describe_api_error(ApiClientError("x", status_code=503)) == "Server error. Please try again later."
    assert describe_api_error(ApiClientError("x", status_code=418), "fallback") == "fallback"


def test_describe_api_error_connection():
    error = ApiClientError("Network Error", is_connection_error=True)
    assert describe_api_error(error).startswith("Cannot connect to the server")


@pytest.mark.asyncio
async def test_create_http_client_uses_base_url():
    async with create_http_client(base_url=BASE_URL, timeout=2.5) as http:
        assert str(http.base_url).rstrip("/") == BASE_URL
        assert http.timeout.connect == 2.5


@pytest.mark.asyncio
async def test_stage_update_accepts_empty_success_reply():
    def handler(request):
        return httpx.Response(204)

    async with mock_http(handler) as http:
        result = await CandidateApiClient(http).update_candidate_stage(3, 13, 2)

    assert result is None


@pytest.mark.asyncio
async def test_stage_update_accepts_non_json_success_reply():
    def handler(request):
        return httpx.Response(200, text="OK")

    async with mock_http(handler) as http:
        result = await CandidateApiClient(http).update_candidate_stage(3, 13, 2)

    assert result == "OK"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [httpx.Response(200, text="<html>maintenance</html>"), httpx.Response(200), httpx.Response(204)],
)
async def test_unreadable_success_body_raises_client_error(response):
    def handler(request):
        return response

    async with mock_http(handler) as http:
        with pytest.raises(ApiClientError) as exc_info:
            await PositionApiClient(http).list_positions()

    error = exc_info.value
    assert error.status_code == response.status_code
    assert not error.is_connection_error
    assert describe_api_error(error, "fallback") == "fallback"
