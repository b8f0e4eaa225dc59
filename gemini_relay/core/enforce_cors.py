"""CORS Enforcement — origin allow-list to response headers.

Invariants:
    - Allow-Methods and Allow-Headers present on every response
    - Allow-Origin echoed only on exact match (no wildcards, no case folding)
    - Non-matching origins are not rejected; the browser enforces the block
"""

from collections.abc import Iterable

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def build_cors_headers(origin: str | None, allowed_origins: Iterable[str]) -> dict[str, str]:
    """Return the CORS headers for a request carrying `origin`."""
    origin = origin or ""
    headers = {}
    if origin in set(allowed_origins):
        headers["Access-Control-Allow-Origin"] = origin
    headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    return headers
