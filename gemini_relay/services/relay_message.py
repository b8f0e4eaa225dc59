"""Relay Message — forwards one validated message to Gemini and normalizes the outcome.

Invariants:
    - Credential checked on every call, before any network IO
    - At most one upstream call per relay(); no retry on any failure
    - Every upstream failure maps to 500 "Gemini API error: ..." regardless of
      upstream status (429, 503, ... are logged, not surfaced)
    - Expected outcomes return Ok/Err; transport and decode exceptions propagate

Design Decisions:
    - Credential injected at construction (from_settings in production,
      explicit values in tests) rather than read from os.environ per call
"""

import logging

import httpx

from gemini_relay.config import Settings
from gemini_relay.core.domain_types import ApiKey, Err, Ok, Result
from gemini_relay.core.errors import (
    ApiKeyMissingError, EmptyGeminiResponseError, GeminiAPIError,
)
from gemini_relay.core.gemini_payload import (
    extract_reply_text, extract_upstream_error,
)
from gemini_relay.infrastructure.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


class RelayService:
    """Runs the configuration check, upstream call, and reply extraction."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelayService":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    async def relay(self, message: str) -> Result[str]:
        """Forward `message` to Gemini and return the generated text."""
        if not self.api_key:
            return Err(ApiKeyMissingError())

        client = GeminiClient(
            ApiKey(self.api_key), self.model, self.base_url,
            timeout_seconds=self.timeout_seconds, transport=self.transport,
        )
        upstream = await client.generate_content(message)

        detail = extract_upstream_error(
            upstream.status_code, upstream.reason_phrase, upstream.payload,
        )
        if detail is not None:
            logger.warning(
                f"Gemini API error: {detail}",
                extra={
                    "error_code": "GEMINI_API_ERROR",
                    "upstream_status": upstream.status_code,
                },
            )
            return Err(GeminiAPIError(detail, upstream.status_code))

        text = extract_reply_text(upstream.payload)
        if text is None:
            return Err(EmptyGeminiResponseError())
        return Ok(text)
