"""
hollywood_stars.api.errors

Exception handlers that render every failure as `{message, error}`.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hollywood_stars.observability.logging import get_logger
from hollywood_stars.services.errors import StarServiceError

log = get_logger(__name__)


async def _star_service_error(_: Request, exc: StarServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("request_failed", status_code=exc.status_code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_body()))


async def _request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request", "error": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarServiceError, _star_service_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_error)  # type: ignore[arg-type]
