"""Problem+JSON utilities and global exception handlers.

Defines the RFC 7807 media type and handler callables that produce
application/problem+json responses.
"""

from __future__ import annotations

import logging
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from formbind.logic.errors import SelectConfigurationError
from formbind.logic.problem_factory import problem_internal_error, problem_select_configuration

PROBLEM_MEDIA_TYPE = "application/problem+json"

logger = logging.getLogger(__name__)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    status_code = int(getattr(exc, "status_code", 500) or 500)
    if isinstance(exc.detail, dict):
        detail = exc.detail
    else:
        detail = {"title": "Error", "status": status_code, "detail": str(exc.detail or "")}
    headers = {str(k): str(v) for k, v in (exc.headers or {}).items()}
    return JSONResponse(
        detail,
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers or None,
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    problem = {
        "title": "Invalid Request",
        "status": 422,
        "detail": "Request validation failed",
        "errors": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ],
    }
    logger.info("request_validation_failed path=%s errors=%s", request.url.path, len(problem["errors"]))
    return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)


async def handle_select_configuration_error(request: Request, exc: SelectConfigurationError) -> JSONResponse:  # noqa: D401
    problem = problem_select_configuration(exc)
    logger.info("select_configuration_rejected path=%s code=%s", request.url.path, exc.code)
    return JSONResponse(problem, status_code=int(problem["status"]), media_type=PROBLEM_MEDIA_TYPE)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error path=%s", request.url.path, exc_info=exc)
    return JSONResponse(problem_internal_error(), status_code=500, media_type=PROBLEM_MEDIA_TYPE)


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_select_configuration_error",
    "handle_unexpected_error",
]
