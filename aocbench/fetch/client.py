# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
HTTP client for the puzzle site.

Two requests are all the harness ever makes: the puzzle input and the puzzle
page (for its example blocks). Both are authenticated by the session cookie.
Failures are raised as FetchError straight away; nothing is retried and
nothing is cached.

The transport is injectable so tests can serve canned responses through
httpx.MockTransport instead of touching the network.
"""

import time
from typing import Optional

import httpx

from aocbench.config.schema import FetchConfig
from aocbench.fetch.scraper import extract_code_blocks
from aocbench.logging.logger import get_logger
from aocbench.puzzle.exceptions import FetchError
from aocbench.puzzle.key import PuzzleKey

logger = get_logger(__name__)


class PuzzleClient:
    """Fetches puzzle inputs and pages for one session."""

    def __init__(
        self,
        session: str,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._session = session
        self._config = config if config is not None else FetchConfig()
        self._transport = transport

    def puzzle_url(self, key: PuzzleKey) -> str:
        return f"{self._config.base_url}/{key.year}/day/{key.day}"

    def input_url(self, key: PuzzleKey) -> str:
        return f"{self.puzzle_url(key)}/input"

    def _get(self, url: str) -> str:
        t0 = time.monotonic()
        try:
            with httpx.Client(
                transport=self._transport,
                timeout=self._config.timeout_seconds,
                headers={"User-Agent": self._config.user_agent},
                cookies={"session": self._session},
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise FetchError(
                f"GET {url} failed with HTTP {err.response.status_code}"
            ) from err
        except httpx.HTTPError as err:
            raise FetchError(f"GET {url} failed: {err}") from err

        logger.info(
            "Fetched",
            extra={
                "url": url,
                "bytes": len(response.content),
                "elapsed_ms": round((time.monotonic() - t0) * 1000.0, 1),
            },
        )
        return response.text

    def fetch_input(self, key: PuzzleKey) -> str:
        """The personal puzzle input for ``key``'s year and day."""
        return self._get(self.input_url(key))

    def fetch_page(self, key: PuzzleKey) -> str:
        """The puzzle description page, as HTML."""
        return self._get(self.puzzle_url(key))

    def fetch_example_blocks(self, key: PuzzleKey) -> list[str]:
        """The page's <code> blocks in document order."""
        return extract_code_blocks(self.fetch_page(key))


def fetch_input(key: PuzzleKey, credential: str, config: Optional[FetchConfig] = None) -> str:
    """Fetch the puzzle input for ``key`` with a session credential."""
    return PuzzleClient(credential, config).fetch_input(key)


def fetch_example_blocks(
    key: PuzzleKey,
    credential: str,
    config: Optional[FetchConfig] = None,
) -> list[str]:
    """Fetch and scrape the example blocks for ``key`` with a session credential."""
    return PuzzleClient(credential, config).fetch_example_blocks(key)
