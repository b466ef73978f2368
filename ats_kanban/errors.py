"""Typed service errors and the ``{message, error}`` API error shape."""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ErrorKind(str, enum.Enum):
    """What went wrong in a service call, independent of HTTP."""

    STORE_FAILURE = "store_failure"
    NOT_FOUND = "not_found"
    FLOW_MISSING = "flow_missing"
    INVALID_STEP = "invalid_step"


# Default HTTP status per kind. Routers may override per route.
STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FLOW_MISSING: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_STEP: status.HTTP_400_BAD_REQUEST,
}


class ServiceError(Exception):
    """Base class for errors raised at a service boundary."""

    def __init__(self, kind: ErrorKind, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class PositionQueryError(ServiceError):
    """Raised by the position query service."""


class CandidateStageError(ServiceError):
    """Raised when a candidate's interview step cannot be changed."""


def build_error_payload(message: str, error: str) -> Dict[str, Any]:
    return {"message": message, "error": error}


class AppError(Exception):
    """Application-scoped error rendered as ``{message, error}``."""

    def __init__(self, status_code: int, message: str, error: str):
        self.status_code = status_code
        self.payload = build_error_payload(message, error)

    @classmethod
    def from_service_error(cls, exc: ServiceError, message: str) -> "AppError":
        """Wrap a service error under a route-level message."""
        return cls(exc.status_code, message, exc.message)


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)
