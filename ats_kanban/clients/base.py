"""
Shared plumbing for the HTTP client services the UI uses to reach the API.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ats_kanban.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again."


class ApiClientError(Exception):
    """A failed API call: transport error, non-2xx response or unreadable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
        is_connection_error: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.is_connection_error = is_connection_error

    @property
    def server_message(self) -> Optional[str]:
        """The ``message`` field of a JSON error body, if any."""
        if isinstance(self.body, dict) and self.body.get("message"):
            return str(self.body["message"])
        return None

    @property
    def server_error(self) -> Optional[str]:
        """The ``error`` field of a JSON error body, if any."""
        if isinstance(self.body, dict) and self.body.get("error"):
            return str(self.body["error"])
        return None


def create_http_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Build the AsyncClient shared by the client services."""
    return httpx.AsyncClient(
        base_url=base_url or settings.API_BASE_URL,
        timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
        **kwargs,
    )


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class ApiService:
    """Base class for a client service bound to a shared AsyncClient."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(
        self,
        method: str,
        url: str,
        action: str,
        strict_json: bool = True,
        **kwargs: Any,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        ``action`` describes the call in log lines, e.g. "fetching all positions".
        With ``strict_json`` a 2xx reply whose body is empty or not JSON raises
        ``ApiClientError``; without it such a body comes back as text or None.
        """
        try:
            response = await self.http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Error %s: HTTP %s from %s",
                action,
                exc.response.status_code,
                exc.request.url,
            )
            raise ApiClientError(
                f"Request failed with status code {exc.response.status_code}",
                status_code=exc.response.status_code,
                body=_response_body(exc.response),
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Error %s: %s", action, exc)
            raise ApiClientError(
                str(exc) or "Network Error",
                is_connection_error=True,
            ) from exc

        if not strict_json:
            return _response_body(response)
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "Error %s: HTTP %s from %s is not JSON",
                action,
                response.status_code,
                response.request.url,
            )
            raise ApiClientError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                body=response.text or None,
            ) from exc


def describe_api_error(exc: ApiClientError, fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Turn a failed call into the message shown in the UI banner."""
    if exc.status_code is not None:
        if exc.server_message:
            return exc.server_message
        if exc.server_error:
            return exc.server_error
        if exc.status_code == 404:
            return "Endpoint not found. Please check if the backend server is running."
        if exc.status_code >= 500:
            return "Server error. Please try again later."
        return fallback
    if exc.is_connection_error:
        return "Cannot connect to the server. Please make sure the backend is running."
    return fallback
