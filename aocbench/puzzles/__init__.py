# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Implemented puzzles.

PUZZLES is the explicit list of (year, days) the registry imports at startup.
Every listed pair has a module ``year_<year>/day_<day>.py`` that exposes
``PART1`` and/or ``PART2`` as a PuzzleEntry.

The table is rewritten by ``aocbench --generate``. Keep it one year per line
in the form the generator parses.
"""

PUZZLES: dict[int, tuple[int, ...]] = {
    2015: (1,),
    2023: (1, 2),
}
