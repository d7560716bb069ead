from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from litterbook.application.errors import AppError, InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


def _request_context(request: Request) -> dict[str, Any]:
    context: dict[str, Any] = {"path": request.url.path, "method": request.method}
    litter_id = request.path_params.get("litter_id")
    kitten_id = request.path_params.get("kitten_id")
    if litter_id is not None:
        context["litter_id"] = str(litter_id)
    if kitten_id is not None:
        context["kitten_id"] = str(kitten_id)
    return context


def _error_body(code: str, message: str, details: Any = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        payload["details"] = details
    return payload


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        logger.info(
            "%s %s rejected: %s - %s (status: %d)",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
            exc.status_code,
            extra=_request_context(request),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "%s %s has an invalid body or parameters",
            request.method,
            request.url.path,
            extra=_request_context(request),
        )
        body = _error_body(
            ValidationError.code,
            "Request body or parameters are invalid",
            {"errors": jsonable_encoder(exc.errors())},
        )
        return JSONResponse(status_code=ValidationError.status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        return JSONResponse(
            status_code=exc.status_code, content=_error_body("http_error", exc.detail)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        context = _request_context(request)
        logger.error(
            "Unexpected error on %s %s (litter=%s kitten=%s)",
            request.method,
            request.url.path,
            context.get("litter_id", "-"),
            context.get("kitten_id", "-"),
            exc_info=exc,
            extra=context,
        )
        error = InfrastructureError("Unexpected server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(error.code, error.message),
        )
