"""Request Enforcement — tests for the method gate and message extraction."""

import json

import pytest

from gemini_relay.core.domain_types import Err, HttpMethod, Ok
from gemini_relay.core.enforce_request import (
    check_method, decode_body, extract_message,
)
from gemini_relay.core.errors import MethodNotAllowedError, MissingMessageError


# ─── check_method ────────────────────────────────────────────────

def test_post_and_options_pass():
    assert check_method("POST") == Ok(HttpMethod.POST)
    assert check_method("OPTIONS") == Ok(HttpMethod.OPTIONS)


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "HEAD", "post"])
def test_other_methods_rejected_with_405(method):
    result = check_method(method)
    assert isinstance(result, Err)
    assert isinstance(result.error, MethodNotAllowedError)
    assert result.error.http_status == 405
    assert result.error.to_response() == {"error": "Method not allowed"}


# ─── decode_body ─────────────────────────────────────────────────

def test_decode_body_parses_json():
    assert decode_body(b'{"message": "hi"}') == {"message": "hi"}


def test_decode_body_empty_is_none():
    assert decode_body(b"") is None
    assert decode_body(b"  \n") is None


def test_decode_body_malformed_raises():
    with pytest.raises(json.JSONDecodeError):
        decode_body(b"{not json")


# ─── extract_message ─────────────────────────────────────────────

def test_extract_message_ok():
    assert extract_message({"message": "Hello there"}) == Ok("Hello there")


def test_extract_message_ignores_extra_fields():
    assert extract_message({"message": "hi", "history": []}) == Ok("hi")


def test_whitespace_message_is_forwarded():
    assert extract_message({"message": "   "}) == Ok("   ")


@pytest.mark.parametrize("payload", [
    None,
    {},
    {"message": ""},
    {"message": None},
    {"message": 0},
    {"message": 42},
    {"message": True},
    {"message": ["hi"]},
    {"text": "hi"},
    ["message"],
    "message",
])
def test_missing_message_rejected_with_400(payload):
    result = extract_message(payload)
    assert isinstance(result, Err)
    assert isinstance(result.error, MissingMessageError)
    assert result.error.http_status == 400
    assert result.error.to_response() == {"error": "Missing message"}
