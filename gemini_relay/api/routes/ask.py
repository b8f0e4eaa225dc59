"""Ask Route — the relay endpoint: browser message in, Gemini reply out.

Invariants:
    - Answers every HTTP verb on every path not claimed by another router
    - OPTIONS → 200 empty body; non-POST → 405; both before the body is read
    - Expected failures rendered from Err results; anything raised while
      reading the body or calling Gemini becomes 500 "Server error"
    - Exactly one response per request

Design Decisions:
    - Catch-all path: the relay was deployed as a single-function endpoint,
      so the path carries no meaning
    - RelayService provided through a dependency so tests inject credentials
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from gemini_relay.api.error_handlers import error_response
from gemini_relay.config import get_settings
from gemini_relay.core.domain_types import Err, HttpMethod
from gemini_relay.core.enforce_request import (
    check_method, decode_body, extract_message,
)
from gemini_relay.core.errors import InternalRelayError, RelayError
from gemini_relay.schemas.ask import AskReply, ErrorBody
from gemini_relay.services.relay_message import RelayService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["relay"])

RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_relay_service() -> RelayService:
    return RelayService.from_settings(get_settings())


def _log_context(request: Request) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "origin": request.headers.get("origin"),
    }


def _reject(request: Request, error: RelayError) -> JSONResponse:
    logger.warning(
        f"Relay rejected: {error.message}",
        extra={"error_code": error.code, **_log_context(request)},
    )
    return error_response(error)


@router.api_route(
    "/{path:path}",
    methods=RELAY_METHODS,
    responses={
        status.HTTP_200_OK: {"model": AskReply},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorBody},
        status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorBody},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody},
    },
)
async def ask(
    request: Request,
    path: str,
    service: RelayService = Depends(get_relay_service),
):
    """Relay `{"message": ...}` to Gemini and return `{"reply": ...}`."""
    method = check_method(request.method)
    if isinstance(method, Err):
        return _reject(request, method.error)
    if method.value is HttpMethod.OPTIONS:
        return Response(status_code=status.HTTP_200_OK)

    try:
        return await _relay(request, service)
    except Exception as e:
        logger.error(
            f"Unhandled relay failure: {e}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", **_log_context(request)},
        )
        return error_response(InternalRelayError())


async def _relay(request: Request, service: RelayService) -> JSONResponse:
    """Body → message → Gemini → reply, returning early on the first Err."""
    message = extract_message(decode_body(await request.body()))
    if isinstance(message, Err):
        return _reject(request, message.error)

    reply = await service.relay(message.value)
    if isinstance(reply, Err):
        return _reject(request, reply.error)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=AskReply(reply=reply.value).model_dump(),
    )
