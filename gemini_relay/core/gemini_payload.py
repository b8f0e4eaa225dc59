"""Gemini Payload — builds generateContent requests and reads their responses.

Invariants:
    - Request body wraps the message as the sole part of one user-role turn
    - extract_reply_text is total: any shape returns str or None, never raises
    - Only candidates[0].content.parts[0].text is read; other candidates ignored
    - extract_upstream_error prefers error.message, falls back to the reason phrase

Design Decisions:
    - Explicit step-by-step descent over try/except KeyError: the
      "no text field" case is a normal return value, not an exception
"""

from typing import Any


def build_generate_request(message: str) -> dict:
    """Single-turn generateContent payload."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": message}],
            },
        ],
    }


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return None


def _present(value: Any) -> bool:
    """JavaScript-style truthiness: {} and [] are set; None, False, 0, NaN, "" are not."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


def extract_reply_text(payload: Any) -> str | None:
    """Text of the first candidate's first part, or None when absent/empty."""
    candidate = _first(_field(payload, "candidates"))
    part = _first(_field(_field(candidate, "content"), "parts"))
    text = _field(part, "text")
    if isinstance(text, str) and text:
        return text
    return None


def extract_upstream_error(
    status_code: int, reason_phrase: str, payload: Any,
) -> str | None:
    """Error detail when Gemini failed, None when the call succeeded.

    Failure is a non-2xx status or any present `error` field in the body
    (an empty object still counts).
    """
    error = _field(payload, "error")
    if 200 <= status_code < 300 and not _present(error):
        return None
    message = _field(error, "message")
    if isinstance(message, str) and message:
        return message
    return reason_phrase
