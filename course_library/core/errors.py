from collections.abc import Mapping, Sequence
from typing import Any, cast
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
    HTTP_422_UNPROCESSABLE_CONTENT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from course_library.core.logging import get_logger


class MissingArgumentError(ValueError):
    """A required argument was None or the nil identifier."""

    def __init__(self, argument: str):
        self.argument: str = argument
        super().__init__(f"{argument} is required")


class EntityNotTrackedError(ValueError):
    """An update was requested for an entity that was never added or loaded."""

    def __init__(self, entity: object):
        self.entity_type: str = type(entity).__name__
        super().__init__(
            f"{self.entity_type} is not tracked by the repository; add it before updating"
        )


class ErrorBody(BaseModel):
    """Structured error body."""
    type: str
    message: str
    details: dict[str, object] | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorBody
    meta: dict[str, object]


def _build_meta(request: Request) -> dict[str, object]:
    """Collect metadata for error responses."""
    return {
        "request_id": getattr(request.state, "correlation_id", "-"),
        "path": request.url.path,
        "method": request.method,
    }

def _serialize_validation_errors(errors: Sequence[Mapping[Any, Any]]) -> list[dict[str, object]]:
    """Serialize validation errors, stringifying exceptions kept in the context."""

    serialized_errors: list[dict[str, object]] = []

    for error in errors:
        serialized_error: dict[str, object] = dict(error)

        if "ctx" in serialized_error and isinstance(serialized_error["ctx"], dict):
            ctx: dict[str, object] = cast(dict[str, object], serialized_error["ctx"]).copy()
            if "error" in ctx:
                ctx["error"] = str(ctx["error"])
            serialized_error["ctx"] = ctx
        serialized_errors.append(serialized_error)
    return serialized_errors


def _envelope(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: dict[str, object] | None = None,
) -> JSONResponse:
    body = ErrorEnvelope(
        error=ErrorBody(type=error_type, message=message, details=details),
        meta=_build_meta(request),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error", extra={"status_code": exc.status_code})
        if isinstance(exc.detail, dict):
            details = cast(dict[str, object], exc.detail)
            message = str(details.get("message", "Request failed"))
        else:
            message = exc.detail or "HTTP error"
            details = None
        return _envelope(request, exc.status_code, "http_error", message, details)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Validation error")
        return _envelope(
            request,
            HTTP_422_UNPROCESSABLE_CONTENT,
            "validation_error",
            "Invalid request payload",
            {"errors": _serialize_validation_errors(exc.errors())},
        )

    @app.exception_handler(MissingArgumentError)
    async def missing_argument_handler(
        request: Request, exc: MissingArgumentError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Missing argument", extra={"argument": exc.argument})
        return _envelope(
            request,
            HTTP_400_BAD_REQUEST,
            "invalid_argument",
            str(exc),
            {"argument": exc.argument},
        )

    @app.exception_handler(EntityNotTrackedError)
    async def entity_not_tracked_handler(
        request: Request, exc: EntityNotTrackedError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("Update of untracked entity", extra={"entity": exc.entity_type})
        return _envelope(request, HTTP_409_CONFLICT, "entity_not_tracked", str(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("Database integrity error", extra={"error": str(exc)})

        error_message = str(exc.orig) if exc.orig else str(exc)

        lowered = error_message.lower()
        if "foreign key constraint" in lowered:
            message = "Referenced resource not found"
            error_type = "reference_not_found"
        elif "unique constraint" in lowered:
            message = "Resource already exists"
            error_type = "duplicate_resource"
        elif "not null constraint" in lowered:
            message = "Missing required value"
            error_type = "invalid_value"
        else:
            message = "Data integrity violation"
            error_type = "integrity_error"

        return _envelope(request, HTTP_400_BAD_REQUEST, error_type, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.exception("Unhandled server error", exc_info=exc)
        return _envelope(
            request, HTTP_500_INTERNAL_SERVER_ERROR, "server_error", "Internal Server Error"
        )
