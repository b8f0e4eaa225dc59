"""Ask Schemas — outbound bodies of the relay endpoint.

Invariants:
    - Success body is exactly {"reply": str}
    - Error body is exactly {"error": str}
"""

from pydantic import BaseModel


class AskReply(BaseModel):
    """Generated text returned to the browser."""
    reply: str


class ErrorBody(BaseModel):
    """Caller-facing failure description (no internal detail)."""
    error: str
