"""
Custom exception hierarchy for the Movement Ranking API.

Every application error carries a machine-readable `code` for logs and an
`http_status` used by the handlers below. The wire envelope stays minimal:
clients only ever see `{"error": ...}` (plus `message` / `path` where noted).
"""
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_BODY = {
    "error": "Internal server error",
    "message": "An unexpected error occurred.",
}


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class RankingAPIException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class MovementNotFoundError(RankingAPIException):
    """Movement key did not resolve, or the movement has nothing to rank."""
    http_status = status.HTTP_404_NOT_FOUND
    code = "MOVEMENT_NOT_FOUND"

    def __init__(self, movement_key: str):
        super().__init__(
            message="Movement not found",
            details={"movement_key": movement_key},
        )


class DataSourceError(RankingAPIException):
    """The record store could not complete a read."""
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "DATA_SOURCE_ERROR"

    def __init__(self, operation: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Record store operation '{operation}' failed.",
            details={"operation": operation, **(details or {})},
        )

    def to_dict(self) -> dict:
        # Internal detail stays in the logs.
        return dict(INTERNAL_ERROR_BODY)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def ranking_exception_handler(request: Request, exc: RankingAPIException) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "code": exc.code, "details": exc.details},
        )
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and disallowed methods."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content = {"error": "Endpoint not found", "path": request.url.path}
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=dict(INTERNAL_ERROR_BODY),
    )
