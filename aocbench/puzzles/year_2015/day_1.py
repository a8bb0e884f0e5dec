# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
2015 day 1: Not Quite Lisp.

Santa follows a string of parentheses: "(" goes up a floor, ")" goes down.
Part 1 asks for the final floor, part 2 for the 1-based position of the first
character that takes him into the basement (floor -1).
"""

from itertools import accumulate

from aocbench.puzzle.models import Example, PuzzleEntry, Solution

_STEPS: dict[str, int] = {"(": 1, ")": -1}


def _instructions(puzzle_input: str) -> str:
    instructions = puzzle_input.strip()
    invalid = set(instructions) - _STEPS.keys()
    if invalid:
        raise ValueError(f"invalid character(s): {''.join(sorted(invalid))!r}")
    return instructions


def final_floor_count(puzzle_input: str) -> int:
    instructions = _instructions(puzzle_input)
    return instructions.count("(") - instructions.count(")")


def final_floor_loop(puzzle_input: str) -> int:
    floor = 0
    for char in puzzle_input.strip():
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
        else:
            raise ValueError(f"invalid character: {char!r}")
    return floor


def final_floor_sum(puzzle_input: str) -> int:
    return sum(_STEPS[char] for char in _instructions(puzzle_input))


def basement_position_loop(puzzle_input: str) -> int:
    floor = 0
    for position, char in enumerate(puzzle_input.strip(), start=1):
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
        else:
            raise ValueError(f"invalid character: {char!r}")
        if floor == -1:
            return position
    raise ValueError("never entered basement")


def basement_position_accumulate(puzzle_input: str) -> int:
    steps = (_STEPS[char] for char in _instructions(puzzle_input))
    for position, floor in enumerate(accumulate(steps), start=1):
        if floor == -1:
            return position
    raise ValueError("never entered basement")


PART1 = PuzzleEntry(
    solutions=(
        Solution("count", final_floor_count),
        Solution("loop", final_floor_loop),
        Solution("sum", final_floor_sum),
    ),
    examples=(
        Example(3, 5),
        Example(4, 5),
        Example(6, 8),
        Example(7, 8),
        Example(9, 10),
        Example(11, 13),
        Example(12, 13),
        Example(14, 16),
        Example(15, 16),
    ),
)

PART2 = PuzzleEntry(
    solutions=(
        Solution("loop", basement_position_loop),
        Solution("accumulate", basement_position_accumulate),
    ),
    examples=(Example(21, 22), Example(23, 24)),
)
