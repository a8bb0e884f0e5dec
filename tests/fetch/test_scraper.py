# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for extracting example blocks from puzzle pages.
"""

import pytest

from aocbench.fetch.scraper import extract_code_blocks
from aocbench.puzzle.exceptions import FetchError


class TestExtractCodeBlocks:
    def test_document_order(self) -> None:
        html = "<p><code>a</code> then <code>b</code></p><pre><code>c\nd\n</code></pre>"
        assert extract_code_blocks(html) == ["a", "b", "c\nd\n"]

    def test_no_code_elements(self) -> None:
        assert extract_code_blocks("<p>nothing here</p>") == []

    def test_first_text_node_only(self) -> None:
        html = "<code>2 + 2 = <em>4</em></code><code><em>5</em> trailing</code>"
        assert extract_code_blocks(html) == ["2 + 2 = ", "5"]

    def test_entities_are_decoded(self) -> None:
        assert extract_code_blocks("<code>a &lt; b &amp;&amp; c</code>") == ["a < b && c"]

    def test_bare_less_than_stays_in_one_block(self) -> None:
        assert extract_code_blocks("<code>1 < 2</code><code>x <- y</code>") == ["1 < 2", "x <- y"]

    def test_nested_code_counts_once(self) -> None:
        assert extract_code_blocks("<code>x<code>y</code></code><code>z</code>") == ["x", "z"]

    def test_multiline_block_is_kept_verbatim(self) -> None:
        html = "<pre><code>Game 1: 3 blue\nGame 2: 1 red\n</code></pre>"
        assert extract_code_blocks(html) == ["Game 1: 3 blue\nGame 2: 1 red\n"]

    def test_empty_code_element_is_malformed(self) -> None:
        with pytest.raises(FetchError, match="malformed example"):
            extract_code_blocks("<code>a</code><code></code>")
