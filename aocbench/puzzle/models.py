# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for puzzles and their solutions.

These are the types that flow between the registry, the example runner and
the benchmark engine. They're all frozen dataclasses because registry data is
built once at import time and must never change afterwards.
"""

from dataclasses import dataclass, field
from typing import Callable, Union

from aocbench.puzzle.exceptions import SolutionError

RawResult = Union[int, str]
SolutionFn = Callable[[str], RawResult]

_INT64_MIN: int = -(2**63)
_INT64_MAX: int = 2**63 - 1


@dataclass(frozen=True)
class PuzzleValue:
    """
    The answer a solution produced: either an integer or a piece of text.

    str() gives the canonical rendering. That rendering is what gets printed
    and what gets compared against expected output scraped from the puzzle
    page. Equality is by kind and value, so the integer 0 and the text "0" are
    different answers.
    """

    value: RawResult

    @classmethod
    def of(cls, raw: object) -> "PuzzleValue":
        """
        Wrap a raw solution return value.

        Raises:
            SolutionError: The value is not an int or str, or the int does not
                fit in a signed 64-bit integer.
        """
        if isinstance(raw, PuzzleValue):
            return raw
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise SolutionError(
                f"solution returned {type(raw).__name__}; expected int or str"
            )
        if isinstance(raw, int) and not _INT64_MIN <= raw <= _INT64_MAX:
            raise SolutionError(f"solution returned {raw}, which does not fit in 64 bits")
        return cls(raw)

    @property
    def kind(self) -> str:
        return "int" if isinstance(self.value, int) else "text"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Example:
    """
    Where one example lives in the puzzle page's list of <code> blocks.

    Indices are zero-based. They are only checked against the scraped list when
    the example runs, so an entry may point at blocks that only appear once
    part 2 is unlocked.
    """

    input_index: int
    expected_index: int

    def __post_init__(self) -> None:
        if self.input_index < 0 or self.expected_index < 0:
            raise ValueError(
                f"Example indices must be non-negative, got ({self.input_index}, {self.expected_index})"
            )


@dataclass(frozen=True)
class Solution:
    """A named candidate implementation for one puzzle part."""

    name: str
    function: SolutionFn = field(compare=False)

    def call(self, puzzle_input: str) -> RawResult:
        """
        Run the solution function and return its raw result.

        Anything the solution function raises comes back as SolutionError with
        the original exception chained.
        """
        try:
            return self.function(puzzle_input)
        except Exception as err:
            raise SolutionError(f"solution '{self.name}' failed: {err!r}") from err

    def invoke(self, puzzle_input: str) -> PuzzleValue:
        """Run the solution and return its result as a PuzzleValue."""
        return PuzzleValue.of(self.call(puzzle_input))


@dataclass(frozen=True)
class PuzzleEntry:
    """
    Everything registered for one puzzle part.

    The first solution is the canonical one: it runs when no name is given and
    it provides the reference answer in comparison mode.
    """

    solutions: tuple[Solution, ...] = ()
    examples: tuple[Example, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from puzzle modules but store tuples.
        object.__setattr__(self, "solutions", tuple(self.solutions))
        object.__setattr__(self, "examples", tuple(self.examples))

        names = [s.name for s in self.solutions]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate solution names: {duplicates}")
