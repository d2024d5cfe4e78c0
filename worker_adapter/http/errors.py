"""Error payloads returned by the gateway HTTP surface."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from worker_adapter.errors import CodeCacheError, ConfigurationError, WorkerConnectionError

LOGGER = logging.getLogger(__name__)

_STATUS_ERROR_CODES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal_error",
    status.HTTP_502_BAD_GATEWAY: "bad_gateway",
}


def error_payload(
    message: str,
    *,
    error: Optional[str] = None,
    status_code: Optional[int] = None,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "error": error or _STATUS_ERROR_CODES.get(status_code or 0, "error"),
        "message": message,
    }
    if details:
        payload["details"] = details
    return payload


def _error_response(status_code: int, message: str, *, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_payload(message, error=error, status_code=status_code),
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    LOGGER.warning("Action configuration error on %s: %s", request.url.path, exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), error="configuration_error")


async def code_cache_error_handler(request: Request, exc: CodeCacheError) -> JSONResponse:
    LOGGER.error("Local action failed on %s: %s", request.url.path, exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), error="code_cache_error")


async def worker_connection_error_handler(request: Request, exc: WorkerConnectionError) -> JSONResponse:
    LOGGER.error("Worker call failed on %s: %s", request.url.path, exc)
    return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc), error="worker_unavailable")


def register_error_handlers(app) -> None:
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(CodeCacheError, code_cache_error_handler)
    app.add_exception_handler(WorkerConnectionError, worker_connection_error_handler)
