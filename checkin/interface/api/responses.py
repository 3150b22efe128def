"""Response envelope and exception handlers.

Successful responses are wrapped as ``{"data": ...}``, failures as
``{"error": ...}`` with the matching HTTP status.
"""

from typing import Generic, TypeVar

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Success envelope."""

    data: T


class ErrorResponse(BaseModel):
    """Failure envelope."""

    error: str | dict[str, list[str]]


def validation_messages(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group validation errors by field, e.g. ``{"value": ["Field required"]}``."""
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        # Drop the location prefix ("body", "path", ...)
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location) or "request"
        messages.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return messages


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors in the failure envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors as 400 in the failure envelope."""
    messages = validation_messages(exc)
    logfire.warn(
        "Request validation failed", path=request.url.path, fields=sorted(messages)
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=messages).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope exception handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
