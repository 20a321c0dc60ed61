"""Exception handlers translating errors into the response envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from milkcoop.contracts.envelope import error
from milkcoop.exceptions import MilkCoopError

logger = logging.getLogger(__name__)


async def milkcoop_error_handler(request: Request, exc: MilkCoopError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON or bad query/path parameters
    logger.warning(
        "Rejected request",
        extra={"path": request.url.path, "errors": exc.errors()},
    )
    return error(400, "Invalid request.")


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
    return error(500, "Internal server error.")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MilkCoopError, milkcoop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
