"""Error Handlers — rendering of relay errors and the global exception handlers.

Invariants:
    - RelayError → {"error": message} with the error's own status
    - Framework HTTPException → {"error": ...}; 405 uses the relay's own message
    - RequestValidationError → 400 {"error": "Invalid request data"}
    - Exception (catch-all) → 500 {"error": "Server error"}, never leaks internals,
      and carries CORS headers itself (it runs outside the origin middleware)

Design Decisions:
    - Four-layer handler: domain (RelayError), framework (HTTPException),
      validation (Pydantic), catch-all (Exception)
    - The relay route renders its own Err results through error_response();
      these handlers cover anything raised outside that path
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemini_relay.core.enforce_cors import build_cors_headers
from gemini_relay.core.errors import (
    InternalRelayError, MethodNotAllowedError, RelayError,
)
from gemini_relay.schemas.ask import ErrorBody

logger = logging.getLogger(__name__)


def error_response(error: RelayError) -> JSONResponse:
    """Render a relay error as its JSON response."""
    body = ErrorBody(**error.to_response())
    return JSONResponse(status_code=error.http_status, content=body.model_dump())


def register_error_handlers(app: FastAPI, allowed_origins: list[str]) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_relay_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app, frozenset(allowed_origins))


def _register_relay_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        """Handle relay errors raised outside the relay route."""
        logger.warning(
            f"RelayError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors (unlisted verbs, ...) in the relay's error shape."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            response = error_response(MethodNotAllowedError(request.method))
            if exc.headers:
                response.headers.update(exc.headers)
            return response
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorBody(error=str(exc.detail)).model_dump(),
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorBody(error="Invalid request data").model_dump(),
        )


def _register_generic_error_handler(
    app: FastAPI, allowed_origins: frozenset[str],
) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        response = error_response(InternalRelayError())
        response.headers.update(
            build_cors_headers(request.headers.get("origin"), allowed_origins),
        )
        return response
