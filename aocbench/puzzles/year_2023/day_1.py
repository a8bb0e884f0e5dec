# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
2023 day 1: Trebuchet?!

Each line hides a two-digit calibration value made of its first and last
digit. Part 2 also counts digits spelled out as words, which may overlap
("eightwo" has both an 8 and a 2).
"""

import re

from aocbench.puzzle.models import Example, PuzzleEntry, Solution

SPELLED_OUT_DIGITS: tuple[str, ...] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

# Lookahead so overlapping words all match.
_DIGIT_OR_WORD = re.compile(r"(?=(\d|" + "|".join(SPELLED_OUT_DIGITS) + r"))")


def _digit_at(line: str, index: int) -> int | None:
    if line[index].isdigit():
        return int(line[index])
    for value, name in enumerate(SPELLED_OUT_DIGITS, start=1):
        if line.startswith(name, index):
            return value
    return None


def calibration_sum(puzzle_input: str) -> int:
    total = 0
    for line in puzzle_input.splitlines():
        digits = [char for char in line if char.isdigit()]
        if not digits:
            raise ValueError(f"no digit in line {line!r}")
        total += int(digits[0]) * 10 + int(digits[-1])
    return total


def spelled_calibration_sum(puzzle_input: str) -> int:
    total = 0
    for line in puzzle_input.splitlines():
        indices = range(len(line))
        left = next((d for i in indices if (d := _digit_at(line, i)) is not None), None)
        right = next((d for i in reversed(indices) if (d := _digit_at(line, i)) is not None), None)
        if left is None or right is None:
            raise ValueError(f"no digit in line {line!r}")
        total += left * 10 + right
    return total


def spelled_calibration_sum_regex(puzzle_input: str) -> int:
    total = 0
    for line in puzzle_input.splitlines():
        tokens = _DIGIT_OR_WORD.findall(line)
        if not tokens:
            raise ValueError(f"no digit in line {line!r}")
        first, last = (
            int(token) if token.isdigit() else SPELLED_OUT_DIGITS.index(token) + 1
            for token in (tokens[0], tokens[-1])
        )
        total += first * 10 + last
    return total


PART1 = PuzzleEntry(
    solutions=(Solution("solution", calibration_sum),),
    examples=(Example(0, 5),),
)

PART2 = PuzzleEntry(
    solutions=(
        Solution("scan", spelled_calibration_sum),
        Solution("regex", spelled_calibration_sum_regex),
    ),
    examples=(Example(16, 24),),
)
