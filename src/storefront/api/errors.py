"""Translate domain exceptions into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidDataError, InvalidOperationError, ObjectNotFoundError, ValidationError

from storefront.domain import logger


def _error_body(exc) -> dict:
    messages = getattr(exc, "messages", None)
    return {"detail": messages if messages else str(exc)}


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=_error_body(exc))


async def validation_error_handler(request: Request, exc: ValidationError | InvalidDataError) -> JSONResponse:
    return JSONResponse(status_code=400, content=_error_body(exc))


async def invalid_operation_handler(request: Request, exc: InvalidOperationError) -> JSONResponse:
    return JSONResponse(status_code=409, content=_error_body(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidDataError, validation_error_handler)
    app.add_exception_handler(InvalidOperationError, invalid_operation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
