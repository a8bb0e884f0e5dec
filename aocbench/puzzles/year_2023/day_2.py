# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
2023 day 2: Cube Conundrum.

Each line is ``Game N: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green``.
Part 1 sums the ids of games possible with 12 red, 13 green and 14 blue cubes.
Part 2 sums the power (product) of the smallest bag that makes each game
possible.
"""

from math import prod

from aocbench.puzzle.models import Example, PuzzleEntry, Solution

BAG_LIMITS: dict[str, int] = {"red": 12, "green": 13, "blue": 14}


def _parse_game(line: str) -> tuple[int, list[dict[str, int]]]:
    label, _, draws = line.partition(":")
    if not draws:
        raise ValueError(f"malformed game line {line!r}")
    game_id = int(label.split()[-1])

    rounds: list[dict[str, int]] = []
    for draw in draws.split(";"):
        cubes: dict[str, int] = {}
        for cube in draw.split(","):
            amount, color = cube.split()
            if color not in BAG_LIMITS:
                raise ValueError(f"unknown cube color {color!r}")
            cubes[color] = int(amount)
        rounds.append(cubes)
    return game_id, rounds


def possible_games(puzzle_input: str) -> int:
    total = 0
    for line in puzzle_input.splitlines():
        game_id, rounds = _parse_game(line)
        if all(
            amount <= BAG_LIMITS[color]
            for cubes in rounds
            for color, amount in cubes.items()
        ):
            total += game_id
    return total


def minimum_bag_power(puzzle_input: str) -> int:
    total = 0
    for line in puzzle_input.splitlines():
        _, rounds = _parse_game(line)
        smallest = {color: 0 for color in BAG_LIMITS}
        for cubes in rounds:
            for color, amount in cubes.items():
                smallest[color] = max(smallest[color], amount)
        total += prod(smallest.values())
    return total


PART1 = PuzzleEntry(
    solutions=(Solution("solution", possible_games),),
    examples=(Example(3, 4),),
)

PART2 = PuzzleEntry(
    solutions=(Solution("solution", minimum_bag_power),),
)
