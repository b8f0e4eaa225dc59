"""Gemini Client — request shape and transport behavior over httpx.MockTransport."""

import json

import httpx
import pytest

from gemini_relay.infrastructure.gemini_client import GeminiClient, UpstreamReply


def _client(fake_gemini, **kwargs):
    return GeminiClient(
        "secret-key", "gemini-1.5-flash", "https://gemini.test/v1beta/",
        transport=fake_gemini.transport, **kwargs,
    )


async def test_posts_single_user_turn_with_key_param(fake_gemini):
    await _client(fake_gemini).generate_content("Hi there")

    assert len(fake_gemini.requests) == 1
    request = fake_gemini.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
    assert request.url.params["key"] == "secret-key"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "contents": [{"role": "user", "parts": [{"text": "Hi there"}]}],
    }


async def test_returns_status_reason_and_payload(fake_gemini):
    fake_gemini.reply_error("quota exceeded", status_code=429)

    reply = await _client(fake_gemini).generate_content("Hi")

    assert isinstance(reply, UpstreamReply)
    assert reply.status_code == 429
    assert reply.reason_phrase == "Too Many Requests"
    assert reply.payload["error"]["message"] == "quota exceeded"


async def test_transport_error_propagates(fake_gemini):
    fake_gemini.raise_error = httpx.ConnectError("connection refused")

    with pytest.raises(httpx.ConnectError):
        await _client(fake_gemini).generate_content("Hi")


async def test_non_json_body_raises(fake_gemini):
    fake_gemini.reply("<html>Bad Gateway</html>", status_code=502)

    with pytest.raises(ValueError):
        await _client(fake_gemini).generate_content("Hi")


def test_endpoint_strips_trailing_slash(fake_gemini):
    client = _client(fake_gemini, timeout_seconds=12.5)
    assert client.endpoint == (
        "https://gemini.test/v1beta/models/gemini-1.5-flash:generateContent"
    )
    assert client.timeout_seconds == 12.5
