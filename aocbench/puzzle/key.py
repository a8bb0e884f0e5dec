# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Puzzle identity.

A PuzzleKey is the validated (year, day, part) triple everything else is keyed
on. Bounds are enforced at construction, so holding a PuzzleKey means holding a
puzzle that could exist.

Resolution from CLI input applies the defaulting rules:
  - no year, no day: today's puzzle, only possible in December
  - day but no year: the most recently started season
  - year but no day: rejected
  - both: used as given

"Today" is read from an injectable clock in the reference zone puzzles unlock
in (UTC-05:00, no DST) so the rules can be tested without patching time.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Callable, Optional

from aocbench.puzzle.exceptions import PuzzleValidationError

FIRST_YEAR: int = 2015
FIRST_DAY: int = 1
LAST_DAY: int = 25

ADVENT_TIMEZONE = timezone(timedelta(hours=-5), "EST")

Clock = Callable[[], datetime]


class PuzzlePart(IntEnum):
    PART1 = 1
    PART2 = 2

    @property
    def label(self) -> str:
        return f"Part {self.value}"


@dataclass(frozen=True, order=True)
class PuzzleKey:
    """
    One puzzle variant: a year, a day of December, and which half of the puzzle.

    Instances are immutable and ordered by (year, day, part), so they work as
    dict keys and sort the way the calendar does.
    """

    year: int
    day: int
    part: PuzzlePart = PuzzlePart.PART1

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int) or self.year < FIRST_YEAR:
            raise PuzzleValidationError(
                f"Invalid year {self.year!r}; the first year of Advent of Code was {FIRST_YEAR}"
            )
        if (
            isinstance(self.day, bool)
            or not isinstance(self.day, int)
            or not FIRST_DAY <= self.day <= LAST_DAY
        ):
            raise PuzzleValidationError(
                f"Invalid day {self.day!r}; day must be between {FIRST_DAY} and {LAST_DAY}"
            )
        if not isinstance(self.part, PuzzlePart):
            raise PuzzleValidationError(f"Invalid part {self.part!r}")

    def header(self) -> str:
        """The fixed identity line printed before any command does work."""
        return f"Advent of Code {self.year} - Day {self.day} - {self.part.label}"

    def __str__(self) -> str:
        return f"{self.year}/{self.day}/{self.part.value}"


def advent_now() -> datetime:
    """Current time in the puzzle release zone."""
    return datetime.now(tz=ADVENT_TIMEZONE)


def resolve_key(
    year: Optional[int],
    day: Optional[int],
    part2: bool = False,
    clock: Clock = advent_now,
) -> PuzzleKey:
    """
    Build a PuzzleKey from possibly-missing CLI input.

    Args:
        year: Explicit year, or None to derive it from the clock.
        day: Explicit day, or None to derive it from the clock.
        part2: Select part 2 instead of part 1.
        clock: Source of "now" in the puzzle release zone.

    Returns:
        The validated key.

    Raises:
        PuzzleValidationError: Defaulting is impossible (outside December, or a
            year without a day) or the resulting year/day is out of range.
    """
    part = PuzzlePart.PART2 if part2 else PuzzlePart.PART1

    if year is None and day is None:
        now = clock()
        if now.month != 12:
            raise PuzzleValidationError(
                "Current day can only be deduced in December; please specify"
            )
        return PuzzleKey(now.year, now.day, part)

    if year is None:
        now = clock()
        season = now.year - 1 if now.month < 12 else now.year
        return PuzzleKey(season, day, part)  # type: ignore[arg-type]

    if day is None:
        raise PuzzleValidationError(f"Please specify which day of {year} to run")

    return PuzzleKey(year, day, part)
