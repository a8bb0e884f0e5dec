# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the example runner.

The block fetcher is a plain function here, so no network is involved.
"""

from typing import Sequence

import pytest

from aocbench.evaluation.examples.runner import run_example, run_examples
from aocbench.puzzle.exceptions import FetchError
from aocbench.puzzle.models import Example, Solution

# Blocks as they'd be scraped from a page: inputs and expected answers mixed
# with unrelated inline code.
BLOCKS = ["(())", "0", "noise", "(((", "3", "())", "2"]

FLOOR = Solution("floor", lambda text: text.count("(") - text.count(")"))


def _fetcher(blocks: Sequence[str], calls: list[str]):  # type: ignore[no-untyped-def]
    def fetch(session: str) -> Sequence[str]:
        calls.append(session)
        return blocks

    return fetch


class TestRunExample:
    def test_passing_example(self) -> None:
        outcome = run_example(FLOOR, BLOCKS, Example(0, 1), number=1)
        assert outcome.passed
        assert outcome.actual == "0"
        assert outcome.error is None

    def test_failing_example_keeps_details(self) -> None:
        outcome = run_example(FLOOR, BLOCKS, Example(5, 6), number=4)
        assert not outcome.passed
        assert outcome.number == 4
        assert (outcome.expected, outcome.actual, outcome.input_text) == ("2", "-1", "())")

    def test_comparison_is_exact(self) -> None:
        outcome = run_example(FLOOR, ["(", " 1"], Example(0, 1), number=1)
        assert not outcome.passed

    def test_input_out_of_bounds(self) -> None:
        outcome = run_example(FLOOR, BLOCKS, Example(7, 1), number=1)
        assert not outcome.passed
        assert outcome.error == "example offset 7 out of bounds; page has 7 code block(s)"

    def test_expected_out_of_bounds(self) -> None:
        outcome = run_example(FLOOR, BLOCKS, Example(0, 9), number=1)
        assert outcome.error is not None
        assert outcome.error.startswith("expected result offset 9 out of bounds")

    def test_solution_error_is_recorded(self) -> None:
        def broken(text: str) -> int:
            raise ValueError("bad input")

        outcome = run_example(Solution("broken", broken), BLOCKS, Example(0, 1), number=2)
        assert not outcome.passed
        assert "bad input" in (outcome.error or "")
        assert outcome.input_text == "(())"


class TestRunExamples:
    def test_partial_pass(self) -> None:
        calls: list[str] = []
        report = run_examples(FLOOR, "cookie", [Example(0, 1), Example(5, 6)], _fetcher(BLOCKS, calls))
        assert (report.success, report.total) == (1, 2)
        assert calls == ["cookie"]

    def test_numbering_is_one_based(self) -> None:
        report = run_examples(FLOOR, "s", [Example(0, 1), Example(3, 4)], _fetcher(BLOCKS, []))
        assert [o.number for o in report.outcomes] == [1, 2]
        assert report.success == 2

    def test_bad_index_does_not_stop_the_batch(self) -> None:
        examples = [Example(0, 1), Example(40, 41), Example(3, 4)]
        report = run_examples(FLOOR, "s", examples, _fetcher(BLOCKS, []))
        assert report.total == 3
        assert report.success == 2
        assert [o.number for o in report.errors] == [2]

    def test_zero_examples_never_fetches(self) -> None:
        calls: list[str] = []
        report = run_examples(FLOOR, "s", [], _fetcher(BLOCKS, calls))
        assert report.total == 0
        assert report.success == 0
        assert calls == []

    def test_fetch_failure_propagates(self) -> None:
        def fetch(session: str) -> Sequence[str]:
            raise FetchError("offline")

        with pytest.raises(FetchError, match="offline"):
            run_examples(FLOOR, "s", [Example(0, 1)], fetch)

    def test_success_never_exceeds_total(self) -> None:
        examples = [Example(i, j) for i in range(len(BLOCKS)) for j in range(len(BLOCKS))]
        report = run_examples(Solution("len", len), "s", examples, _fetcher(BLOCKS, []))
        assert 0 <= report.success <= report.total == len(examples)
