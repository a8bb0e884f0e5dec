# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the 2015 puzzle solutions.

Every registered solution of a part must agree, so the cases run against all
of them.
"""

import pytest

from aocbench.puzzle.exceptions import SolutionError
from aocbench.puzzles.year_2015 import day_1

PART1_SOLUTIONS = day_1.PART1.solutions
PART2_SOLUTIONS = day_1.PART2.solutions


class TestDay1Part1:
    @pytest.mark.parametrize("solution", PART1_SOLUTIONS, ids=lambda s: s.name)
    @pytest.mark.parametrize(
        ("instructions", "floor"),
        [
            ("(())", 0),
            ("()()", 0),
            ("(((", 3),
            ("(()(()(", 3),
            ("))(((((", 3),
            ("())", -1),
            ("))(", -1),
            (")))", -3),
            (")())())", -3),
        ],
    )
    def test_final_floor(self, solution, instructions: str, floor: int) -> None:  # type: ignore[no-untyped-def]
        assert solution.invoke(instructions).value == floor

    @pytest.mark.parametrize("solution", PART1_SOLUTIONS, ids=lambda s: s.name)
    def test_trailing_newline_is_ignored(self, solution) -> None:  # type: ignore[no-untyped-def]
        assert solution.invoke("(()\n").value == 1

    @pytest.mark.parametrize("solution", PART1_SOLUTIONS, ids=lambda s: s.name)
    def test_invalid_character_fails(self, solution) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(SolutionError):
            solution.invoke("(x)")


class TestDay1Part2:
    @pytest.mark.parametrize("solution", PART2_SOLUTIONS, ids=lambda s: s.name)
    @pytest.mark.parametrize(("instructions", "position"), [(")", 1), ("()())", 5)])
    def test_basement_position(self, solution, instructions: str, position: int) -> None:  # type: ignore[no-untyped-def]
        assert solution.invoke(instructions).value == position

    @pytest.mark.parametrize("solution", PART2_SOLUTIONS, ids=lambda s: s.name)
    def test_never_entering_the_basement_fails(self, solution) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(SolutionError, match="never entered basement"):
            solution.invoke("(()")
