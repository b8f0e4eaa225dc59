"""Root conftest — shared test configuration and a fake Gemini endpoint."""

import os

import httpx
import pytest

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("GEMINI_API_KEY", "test-fake-gemini-key")

from gemini_relay.services.relay_message import RelayService  # noqa: E402

GEMINI_BASE_URL = "https://gemini.test/v1beta"
GEMINI_MODEL = "gemini-1.5-flash"


def text_body(text):
    """Gemini success body with `text` at candidates[0].content.parts[0]."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}},
        ],
    }


def error_body(message, code=400):
    """Gemini error body."""
    return {"error": {"code": code, "message": message, "status": "INVALID_ARGUMENT"}}


class FakeGemini:
    """Records requests and replies with a configurable status/body."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = text_body("Hello!")
        self.raise_error = None

    def reply_text(self, text, status_code=200):
        self.status_code = status_code
        self.body = text_body(text)

    def reply_error(self, message, status_code=400):
        self.status_code = status_code
        self.body = error_body(message, status_code)

    def reply(self, body, status_code=200):
        self.status_code = status_code
        self.body = body

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def make_service(fake_gemini):
    """Build a RelayService wired to the fake endpoint."""
    def _make(api_key="test-key"):
        return RelayService(
            api_key=api_key,
            model=GEMINI_MODEL,
            base_url=GEMINI_BASE_URL,
            transport=fake_gemini.transport,
        )
    return _make
