"""Tests for perch.server.sender response emission rules."""

import pytest

from perch.http.response import Response
from perch.server.sender import send_response


@pytest.fixture
def messages() -> list[dict]:
    return []


@pytest.fixture
def send(messages: list[dict]):
    async def _send(message: dict) -> None:
        messages.append(message)

    return _send


class TestSendResponseNoBodyStatuses:
    async def test_204_drops_body_and_sets_zero_content_length(self, messages, send) -> None:
        # Even if a responder attaches body content, the sender must
        # enforce RFC no-body semantics for 204.
        await send_response(Response("unexpected-body", status=204), send)

        assert messages[0]["type"] == "http.response.start"
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"

        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b""

    async def test_304_drops_body_and_sets_zero_content_length(self, messages, send) -> None:
        await send_response(Response("unexpected-body", status=304), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_200_preserves_body(self, messages, send) -> None:
        await send_response(Response("ok"), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert messages[1]["body"] == b"ok"


class TestSendResponseHeaders:
    async def test_header_names_lowercased(self, messages, send) -> None:
        await send_response(Response("", status=302).with_header("Location", "/a/"), send)

        assert messages[0]["status"] == 302
        assert (b"location", b"/a/") in messages[0]["headers"]

    async def test_content_type_first(self, messages, send) -> None:
        await send_response(Response("x", content_type="text/plain"), send)
        assert messages[0]["headers"][0] == (b"content-type", b"text/plain")


class TestSendResponseHead:
    async def test_head_keeps_length_drops_body(self, messages, send) -> None:
        await send_response(Response("hello"), send, head=True)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"5"
        assert messages[1]["body"] == b""
