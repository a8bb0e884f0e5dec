# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the puzzle site client.

Requests go through httpx.MockTransport, so the tests check exactly what
would be sent and how responses and failures are handled, offline.
"""

import httpx
import pytest

from aocbench.config.schema import FetchConfig
from aocbench.fetch.client import PuzzleClient
from aocbench.puzzle.exceptions import FetchError
from aocbench.puzzle.key import PuzzleKey, PuzzlePart

KEY = PuzzleKey(2015, 1, PuzzlePart.PART2)

PAGE = """\
<html><body><article>
<p>For example:</p>
<ul><li><code>(())</code> and <code>()()</code> both result in floor <code>0</code>.</li></ul>
</article></body></html>
"""


def _client(handler, config: FetchConfig | None = None) -> PuzzleClient:  # type: ignore[no-untyped-def]
    return PuzzleClient("secret-cookie", config=config, transport=httpx.MockTransport(handler))


class TestUrls:
    def test_default_urls(self) -> None:
        client = PuzzleClient("s")
        assert client.puzzle_url(KEY) == "https://adventofcode.com/2015/day/1"
        assert client.input_url(KEY) == "https://adventofcode.com/2015/day/1/input"

    def test_base_url_override(self) -> None:
        client = PuzzleClient("s", FetchConfig(base_url="http://localhost:8080/"))
        assert client.input_url(KEY) == "http://localhost:8080/2015/day/1/input"


class TestFetchInput:
    def test_returns_body_verbatim(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="(()(\n"))
        assert client.fetch_input(KEY) == "(()(\n"

    def test_sends_session_cookie_and_user_agent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="x")

        _client(handler, FetchConfig(user_agent="tester")).fetch_input(KEY)

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/2015/day/1/input"
        assert "session=secret-cookie" in request.headers["cookie"]
        assert request.headers["user-agent"] == "tester"

    @pytest.mark.parametrize("status", [400, 404, 500])
    def test_http_error_status(self, status: int) -> None:
        client = _client(lambda request: httpx.Response(status, text="nope"))
        with pytest.raises(FetchError, match=f"HTTP {status}"):
            client.fetch_input(KEY)

    def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError, match="connection refused"):
            _client(handler).fetch_input(KEY)


class TestFetchExampleBlocks:
    def test_blocks_in_document_order(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, text=PAGE)

        assert _client(handler).fetch_example_blocks(KEY) == ["(())", "()()", "0"]
        assert seen == ["/2015/day/1"]
