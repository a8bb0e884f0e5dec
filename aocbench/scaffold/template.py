# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Template generator for new puzzles.

Scaffolding a puzzle takes three steps:
  1. Create ``year_<year>/__init__.py`` if the year is new
  2. Create ``year_<year>/day_<day>.py`` with placeholder solutions for both parts
  3. Add the (year, day) pair to the PUZZLES table in the puzzles package
     ``__init__.py``, which is what the registry reads at startup

The new module is picked up through the same static table as every other
puzzle; the running process never changes its registry. An existing puzzle
module is never overwritten.
"""

import re
import textwrap
from pathlib import Path
from typing import Callable

from aocbench.logging.logger import get_logger
from aocbench.puzzle.exceptions import ScaffoldError
from aocbench.puzzle.key import PuzzleKey
from aocbench.utils.paths import ensure_directory

logger = get_logger(__name__)

_LICENSE_HEADER = (
    "# Author : Eshan Roy <eshanized@proton.me>\n"
    "# SPDX-License-Identifier: MIT\n"
)

_TABLE_START = re.compile(r"^PUZZLES\b.*=\s*\{\s*$")
_TABLE_ROW = re.compile(r"^\s*(\d+)\s*:\s*\(([\d,\s]*)\)\s*,?\s*$")

Echo = Callable[[str], None]


def _noop(_: str) -> None:
    return None


def render_day_module(year: int, day: int) -> str:
    """Source of a fresh puzzle module with placeholder solutions for both parts."""
    body = textwrap.dedent(f'''\

        """
        {year} day {day}.
        """

        from aocbench.puzzle.models import PuzzleEntry, Solution


        def solve_part1(puzzle_input: str) -> int:
            raise NotImplementedError


        def solve_part2(puzzle_input: str) -> int:
            raise NotImplementedError


        PART1 = PuzzleEntry(solutions=(Solution("solution", solve_part1),))

        PART2 = PuzzleEntry(solutions=(Solution("solution", solve_part2),))
    ''')
    return _LICENSE_HEADER + body


def parse_puzzle_table(source: str) -> dict[int, set[int]]:
    """
    Read the PUZZLES table out of the puzzles package source.

    Raises:
        ScaffoldError: The table is missing or a row is not in the expected form.
    """
    lines = source.splitlines()
    start = next((i for i, line in enumerate(lines) if _TABLE_START.match(line)), None)
    if start is None:
        raise ScaffoldError("PUZZLES table not found in puzzles package")

    table: dict[int, set[int]] = {}
    for line in lines[start + 1:]:
        if line.strip() == "}":
            return table
        if not line.strip():
            continue
        match = _TABLE_ROW.match(line)
        if match is None:
            raise ScaffoldError(f"Unexpected line in PUZZLES table: {line!r}")
        year = int(match.group(1))
        days = {int(d) for d in match.group(2).replace(",", " ").split()}
        table.setdefault(year, set()).update(days)

    raise ScaffoldError("PUZZLES table is not closed")


def _render_days(days: set[int]) -> str:
    ordered = sorted(days)
    if len(ordered) == 1:
        return f"({ordered[0]},)"
    return "(" + ", ".join(str(d) for d in ordered) + ")"


def render_puzzle_table(source: str, table: dict[int, set[int]]) -> str:
    """Replace the PUZZLES table rows in ``source`` with ``table``, sorted."""
    lines = source.splitlines()
    start = next(i for i, line in enumerate(lines) if _TABLE_START.match(line))
    end = next(i for i in range(start + 1, len(lines)) if lines[i].strip() == "}")

    rows = [f"    {year}: {_render_days(table[year])}," for year in sorted(table)]
    updated = lines[: start + 1] + rows + lines[end:]
    return "\n".join(updated) + "\n"


def create_template_file(year: int, day: int, package_dir: Path, echo: Echo = _noop) -> Path:
    """
    Write the placeholder puzzle module.

    Raises:
        ScaffoldError: The module already exists or cannot be written.
    """
    echo(f"Creating template for year {year} day {day}... ")

    year_dir = ensure_directory(package_dir / f"year_{year}")
    year_init = year_dir / "__init__.py"
    if not year_init.exists():
        year_init.write_text(_LICENSE_HEADER, encoding="utf-8")

    module_path = year_dir / f"day_{day}.py"
    try:
        with module_path.open("x", encoding="utf-8") as handle:
            handle.write(render_day_module(year, day))
    except FileExistsError as err:
        raise ScaffoldError(f"Puzzle module already exists: {module_path}") from err
    except OSError as err:
        raise ScaffoldError(f"Cannot write {module_path}: {err}") from err

    echo("Done!\n")
    return module_path


def add_puzzle_to_table(year: int, day: int, package_dir: Path, echo: Echo = _noop) -> None:
    """Add (year, day) to the PUZZLES table, keeping years and days sorted and unique."""
    echo("Updating registry table... ")

    init_path = package_dir / "__init__.py"
    try:
        source = init_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ScaffoldError(f"Cannot read {init_path}: {err}") from err

    table = parse_puzzle_table(source)
    table.setdefault(year, set()).add(day)
    init_path.write_text(render_puzzle_table(source, table), encoding="utf-8")

    echo("Done!\n")


def generate_template(key: PuzzleKey, package_dir: Path, echo: Echo = _noop) -> Path:
    """
    Scaffold a new puzzle for ``key``'s year and day (both parts).

    Args:
        key: Validated puzzle key; only year and day are used.
        package_dir: The puzzles package directory to write into.
        echo: Receives progress text as it happens.

    Returns:
        Path of the new puzzle module.

    Raises:
        ScaffoldError: The module exists already, or a file could not be read or written.
    """
    # Parse the table before writing anything so a broken table leaves no stray module.
    try:
        parse_puzzle_table((package_dir / "__init__.py").read_text(encoding="utf-8"))
    except OSError as err:
        raise ScaffoldError(f"Cannot read puzzles package in {package_dir}: {err}") from err

    module_path = create_template_file(key.year, key.day, package_dir, echo)
    add_puzzle_to_table(key.year, key.day, package_dir, echo)

    logger.info(
        "Template generated",
        extra={"year": key.year, "day": key.day, "module": str(module_path)},
    )
    return module_path
