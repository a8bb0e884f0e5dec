# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the puzzle data models: values, examples, solutions and entries.
"""

import pytest

from aocbench.puzzle.exceptions import SolutionError
from aocbench.puzzle.models import Example, PuzzleEntry, PuzzleValue, Solution


class TestPuzzleValue:
    def test_integer_renders_in_decimal(self) -> None:
        assert str(PuzzleValue.of(-1)) == "-1"
        assert PuzzleValue.of(280).kind == "int"

    def test_text_renders_verbatim(self) -> None:
        value = PuzzleValue.of("abc def")
        assert str(value) == "abc def"
        assert value.kind == "text"

    def test_int_and_text_are_different_answers(self) -> None:
        assert PuzzleValue.of(0) != PuzzleValue.of("0")

    def test_int64_bounds_are_accepted(self) -> None:
        assert PuzzleValue.of(2**63 - 1).value == 2**63 - 1
        assert PuzzleValue.of(-(2**63)).value == -(2**63)

    @pytest.mark.parametrize("raw", [2**63, -(2**63) - 1])
    def test_out_of_range_int_is_rejected(self, raw: int) -> None:
        with pytest.raises(SolutionError, match="64 bits"):
            PuzzleValue.of(raw)

    @pytest.mark.parametrize("raw", [True, 1.5, None, [1], b"x"])
    def test_other_types_are_rejected(self, raw: object) -> None:
        with pytest.raises(SolutionError, match="expected int or str"):
            PuzzleValue.of(raw)

    def test_wrapping_a_value_returns_it(self) -> None:
        value = PuzzleValue.of(7)
        assert PuzzleValue.of(value) is value


class TestExample:
    def test_indices_are_kept(self) -> None:
        example = Example(3, 5)
        assert (example.input_index, example.expected_index) == (3, 5)

    def test_negative_index_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Example(-1, 0)


class TestSolution:
    def test_invoke_wraps_result(self) -> None:
        solution = Solution("length", len)
        assert solution.invoke("abcd") == PuzzleValue(4)

    def test_invoke_wraps_exceptions(self) -> None:
        def broken(text: str) -> int:
            raise KeyError("boom")

        with pytest.raises(SolutionError, match="solution 'broken' failed") as info:
            Solution("broken", broken).invoke("")
        assert isinstance(info.value.__cause__, KeyError)

    def test_bad_return_type_is_a_solution_error(self) -> None:
        with pytest.raises(SolutionError):
            Solution("float", lambda text: 1.0).invoke("")  # type: ignore[arg-type, return-value]

    def test_call_returns_raw_result(self) -> None:
        assert Solution("upper", str.upper).call("ab") == "AB"  # type: ignore[arg-type]

    def test_equality_ignores_function(self) -> None:
        assert Solution("a", len) == Solution("a", str.strip)  # type: ignore[arg-type]


class TestPuzzleEntry:
    def test_lists_are_stored_as_tuples(self) -> None:
        entry = PuzzleEntry(
            solutions=[Solution("a", len)],  # type: ignore[arg-type]
            examples=[Example(0, 1)],  # type: ignore[arg-type]
        )
        assert isinstance(entry.solutions, tuple)
        assert isinstance(entry.examples, tuple)

    def test_empty_entry(self) -> None:
        entry = PuzzleEntry()
        assert entry.solutions == ()
        assert entry.examples == ()

    def test_duplicate_solution_names_are_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate solution names"):
            PuzzleEntry(solutions=(Solution("a", len), Solution("a", len)))
