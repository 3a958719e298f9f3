"""Bridge between FastAPI requests and router envelopes."""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from gatehouse.presentation.http import HttpRequest
from gatehouse.presentation.routers import Router

logger = logging.getLogger(__name__)


async def adapt(router: Router, request: Request) -> JSONResponse:
    """Run ``router`` on the JSON body of ``request``.

    A body that is not valid JSON is handed over as absent.
    """
    http_request = HttpRequest(body=await _read_json_body(request))
    http_response = await router.route(http_request)
    return JSONResponse(
        status_code=http_response.status_code,
        content=http_response.body,
    )


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        logger.debug("Unreadable JSON body on %s: %s", request.url.path, e)
        return None
