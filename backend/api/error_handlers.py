"""Exception handlers: every failure becomes {"error": ..., "type": ...}."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from services.errors import ConversionError, InternalError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "type": error_type},
    )


async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    logger.error("Conversion error in %s: %s", request.url.path, exc)
    return _error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(404, "Endpoint not found", "NotFound")


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error in %s", request.url.path)
    err = InternalError()
    return _error_response(err.status_code, str(err), err.__class__.__name__)
