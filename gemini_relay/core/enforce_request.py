"""Request Enforcement — method gate and message extraction for inbound requests.

Invariants:
    - Only POST and OPTIONS pass the method gate; comparison is exact
    - An empty body, JSON null, or a non-object JSON value means "no message"
    - `message` must be a non-empty string; whitespace-only text is forwarded as-is
    - Non-string values (42, true, lists) are rejected with 400, not coerced to text
    - decode_body raises on malformed JSON (an unclassified failure, not a 400)
"""

import json
from typing import Any

from gemini_relay.core.domain_types import Err, HttpMethod, Ok, Result
from gemini_relay.core.errors import MethodNotAllowedError, MissingMessageError


def check_method(method: str) -> Result[HttpMethod]:
    """Admit POST and OPTIONS, reject everything else with 405."""
    try:
        return Ok(HttpMethod(method))
    except ValueError:
        return Err(MethodNotAllowedError(method))


def decode_body(raw: bytes) -> Any:
    """Decode a JSON request body. Empty body decodes to None."""
    if not raw.strip():
        return None
    return json.loads(raw)


def extract_message(payload: Any) -> Result[str]:
    """Pull `message` out of a decoded request body."""
    if not isinstance(payload, dict):
        return Err(MissingMessageError())
    message = payload.get("message")
    if not isinstance(message, str) or not message:
        return Err(MissingMessageError())
    return Ok(message)
