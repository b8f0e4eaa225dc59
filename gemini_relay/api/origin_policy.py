"""Origin Policy — stamps allow-list CORS headers on every HTTP response.

Invariants:
    - Runs for every route, every status, including preflight and errors
    - Never short-circuits a request: disallowed origins are still served

Design Decisions:
    - Custom middleware over starlette CORSMiddleware: CORSMiddleware rejects
      disallowed preflights with 400 and omits Allow-Methods on simple requests
"""

from fastapi import FastAPI, Request

from gemini_relay.core.enforce_cors import build_cors_headers


def register_origin_policy(app: FastAPI, allowed_origins: list[str]) -> None:
    """Install the CORS header middleware on the app."""
    origins = frozenset(allowed_origins)

    @app.middleware("http")
    async def apply_cors_headers(request: Request, call_next):
        response = await call_next(request)
        headers = build_cors_headers(request.headers.get("origin"), origins)
        response.headers.update(headers)
        return response
