"""
Exception handlers for the Locais API.

Domain errors are rendered as ``{"message": ...}`` with their own status
code. Anything else is logged with its traceback and answered with a 500,
so no exception escapes the request boundary.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .errors import LocaisError

logger = logging.getLogger(__name__)


async def locais_error_handler(request: Request, exc: LocaisError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled %s in %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LocaisError, locais_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
