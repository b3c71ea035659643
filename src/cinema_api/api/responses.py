"""Translation between HTTP requests/responses and handler envelopes."""

import logging
from typing import Any

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from cinema_api.handlers.envelope import Envelope, Failure

logger = logging.getLogger(__name__)


async def read_json(request: Request) -> Any:
    """
    Decoded JSON body of the request, or None when it is empty or malformed.

    Handlers reject a None body the same way as one that fails validation.
    """
    try:
        return await request.json()
    except ValueError as e:
        logger.debug(f"Unreadable JSON body on {request.url.path}: {e}")
        return None


def render(envelope: Envelope) -> Response:
    """
    Turn an envelope into a response.

    Failures carry ``{"detail": message}``; a bare success has an empty body.
    """
    if isinstance(envelope, Failure):
        return JSONResponse(
            status_code=envelope.status,
            content={"detail": envelope.message},
        )
    if envelope.payload is None:
        return Response(status_code=envelope.status)
    return JSONResponse(
        status_code=envelope.status,
        content=jsonable_encoder(envelope.payload, by_alias=True),
    )
