"""Gemini Client — one generateContent POST per call over httpx.

Invariants:
    - Credential travels as the `key` query parameter, never in logs
    - Exactly one HTTP request per generate_content() call (no retry)
    - Non-2xx statuses are returned, not raised: error mapping belongs to services/
    - Transport failures (httpx.HTTPError) and non-JSON bodies propagate as exceptions

Design Decisions:
    - Client opened per call: no pooled state survives between requests
    - Optional transport parameter: tests swap in httpx.MockTransport
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from gemini_relay.core.domain_types import ApiKey
from gemini_relay.core.gemini_payload import build_generate_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamReply:
    """Status line and decoded JSON body of a Gemini response."""
    status_code: int
    reason_phrase: str
    payload: Any


class GeminiClient:
    """Thin async wrapper around the generateContent REST endpoint."""

    def __init__(
        self,
        api_key: ApiKey,
        model: str,
        base_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_content(self, message: str) -> UpstreamReply:
        """POST the message as a single user turn and decode the reply."""
        async with self._client() as client:
            response = await client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=build_generate_request(message),
            )
        logger.info(
            "Gemini API responded",
            extra={
                "upstream_status": response.status_code,
                "model": self.model,
            },
        )
        return UpstreamReply(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            payload=response.json(),
        )

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self.transport}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds
        return httpx.AsyncClient(**kwargs)
