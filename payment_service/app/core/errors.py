"""
Application‑wide error handlers.

Endpoints raise ``HTTPException`` for expected failures (for example
a configuration that is not wired yet).  Anything else that escapes a
handler, such as a failure while collecting properties or serialising
the configuration, is logged with its traceback and answered with a
generic 500 so that internal details do not leak to clients.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors."""
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""
    app.add_exception_handler(Exception, generic_error_handler)
