"""Centralized exception handlers for the FastAPI application.

Routers already convert their own failures to envelopes. These handlers
cover what escapes before a router runs, such as dependency wiring,
and answer with the same ServerError body.

Usage:
    from gatehouse.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gatehouse.application.exceptions import MissingCollaboratorError
from gatehouse.presentation.http import HttpResponse

logger = logging.getLogger(__name__)


def _server_error_response() -> JSONResponse:
    envelope = HttpResponse.server_error()
    return JSONResponse(status_code=envelope.status_code, content=envelope.body)


def setup_exception_handlers(app: FastAPI) -> None:
    """Attach the wiring-failure and catch-all handlers to ``app``."""

    @app.exception_handler(MissingCollaboratorError)
    async def missing_collaborator_handler(
        request: Request,
        exc: MissingCollaboratorError,
    ) -> JSONResponse:
        logger.critical(
            "Misconfigured collaborator on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _server_error_response()

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _server_error_response()
