# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Example block extraction from a puzzle page.

Worked examples on a puzzle page live in <code> elements. Registered Examples
point into the list of those elements by position, so the order here must be
document order and every <code> element must produce exactly one block.

For each <code> we keep its first text node, the way the page puts the raw
example first and any emphasis markup after it. Entities are decoded.
"""

from html.parser import HTMLParser
from typing import Optional

from aocbench.puzzle.exceptions import FetchError


class _CodeBlockParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.blocks: list[Optional[str]] = []
        self._depth = 0
        # True while the first text run of the current block is still being read.
        self._in_first_run = False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        self._in_first_run = False
        if tag == "code":
            if self._depth == 0:
                self.blocks.append(None)
            self._depth += 1

    def handle_endtag(self, tag: str) -> None:
        self._in_first_run = False
        if tag == "code" and self._depth > 0:
            self._depth -= 1

    def handle_data(self, data: str) -> None:
        if self._depth == 0 or not data:
            return
        # The parser can split one text run, e.g. at a bare "<".
        if self.blocks[-1] is None:
            self.blocks[-1] = data
            self._in_first_run = True
        elif self._in_first_run:
            self.blocks[-1] += data


def extract_code_blocks(html: str) -> list[str]:
    """
    Return the first text node of every top-level <code> element, in order.

    Raises:
        FetchError: A <code> element has no text at all.
    """
    parser = _CodeBlockParser()
    parser.feed(html)
    parser.close()

    blocks: list[str] = []
    for position, block in enumerate(parser.blocks):
        if block is None:
            raise FetchError(f"malformed example: <code> element #{position} has no text")
        blocks.append(block)
    return blocks
