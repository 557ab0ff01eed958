"""
Error handling.

- ErrorHandlerMiddleware: outermost catch-all, answers 500 with a generic
  message and an errorId; the traceback stays in the server log.
- register_exception_handlers: maps validation errors, domain errors and
  HTTPException to ``{"message": ...}`` bodies.
"""

import traceback
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from educhain.config import settings
from educhain.exceptions import EduChainError

logger = structlog.get_logger(__name__)

GENERIC_ERROR = "An internal error occurred. Please try again later."
INVALID_REQUEST = "Invalid request"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catches everything the routers did not handle."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            error_id = str(uuid.uuid4())
            logger.error(
                "unhandled_exception",
                error_id=error_id,
                path=request.url.path,
                method=request.method,
                error=str(exc),
                traceback=traceback.format_exc(),
            )

            body: dict = {"message": GENERIC_ERROR, "errorId": error_id}
            if settings.debug:
                body["debugHint"] = type(exc).__name__
            return JSONResponse(status_code=500, content=body)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        errors=exc.errors(),
    )
    return JSONResponse(status_code=400, content={"message": INVALID_REQUEST})


async def _domain_error(request: Request, exc: EduChainError) -> JSONResponse:
    logger.warning(
        "request_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(EduChainError, _domain_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
