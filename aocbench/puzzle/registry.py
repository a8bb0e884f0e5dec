# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Puzzle registry for aocbench.

Maps a PuzzleKey to the solutions and examples registered for it. The table is
a plain dict keyed by the (year, day, part) triple, populated exactly once at
import time by ``_register_builtins()`` from the explicit PUZZLES enumeration
in ``aocbench.puzzles``. Nothing writes to it afterwards.

Lookups are a single dict access. An unregistered key is not an error at this
level: it simply has no solutions and no examples. Whether that is fatal is
decided by the caller.
"""

import importlib
import logging
from types import ModuleType
from typing import Optional

from aocbench.puzzle.exceptions import PuzzleLookupError
from aocbench.puzzle.key import PuzzleKey, PuzzlePart
from aocbench.puzzle.models import Example, PuzzleEntry, Solution

logger = logging.getLogger(__name__)

_EMPTY_ENTRY = PuzzleEntry()

# ── Puzzle Table ────────────────────────────────────────────────────────────

_PUZZLE_REGISTRY: dict[PuzzleKey, PuzzleEntry] = {}


def register_entry(key: PuzzleKey, entry: PuzzleEntry) -> None:
    """
    Register the solutions and examples for one puzzle part.

    Args:
        key: The puzzle part being registered.
        entry: Its solutions and examples.

    Raises:
        ValueError: If ``key`` is already registered.
    """
    if key in _PUZZLE_REGISTRY:
        raise ValueError(f"Puzzle {key} is already registered")
    _PUZZLE_REGISTRY[key] = entry
    logger.debug(
        "registered_puzzle",
        extra={
            "key": str(key),
            "solutions": [s.name for s in entry.solutions],
            "examples": len(entry.examples),
        },
    )


def get_entry(key: PuzzleKey) -> PuzzleEntry:
    """Return the registered entry for ``key``, or an empty entry if there is none."""
    return _PUZZLE_REGISTRY.get(key, _EMPTY_ENTRY)


def get_solutions(key: PuzzleKey) -> tuple[Solution, ...]:
    """All solutions registered for ``key`` in registration order. Empty if none."""
    return get_entry(key).solutions


def get_examples(key: PuzzleKey) -> tuple[Example, ...]:
    """All examples registered for ``key`` in registration order. Empty if none."""
    return get_entry(key).examples


def get_solution(key: PuzzleKey, name: Optional[str] = None) -> Solution:
    """
    Pick one solution for ``key``.

    Args:
        key: The puzzle part.
        name: Solution name to look for. None selects the first registered
              solution, the canonical one.

    Returns:
        The selected solution.

    Raises:
        PuzzleLookupError: The name does not match any registered solution, or
            no name was given and the puzzle has no solutions at all.
    """
    solutions = get_solutions(key)
    if name is None:
        if not solutions:
            raise PuzzleLookupError(f"puzzle not implemented: {key.header()}")
        return solutions[0]

    for solution in solutions:
        if solution.name == name:
            return solution

    available = [s.name for s in solutions]
    raise PuzzleLookupError(f"solution not found: '{name}'. Available: {available}")


def list_registered_keys() -> list[PuzzleKey]:
    """Return every registered key, sorted by (year, day, part)."""
    return sorted(_PUZZLE_REGISTRY.keys())


# ── Builtin Registration ───────────────────────────────────────────────────

_BUILTINS_REGISTERED: bool = False

_PART_ATTRIBUTES: tuple[tuple[PuzzlePart, str], ...] = (
    (PuzzlePart.PART1, "PART1"),
    (PuzzlePart.PART2, "PART2"),
)


def _register_module(year: int, day: int, module: ModuleType) -> None:
    for part, attribute in _PART_ATTRIBUTES:
        entry = getattr(module, attribute, None)
        if entry is None:
            continue
        if not isinstance(entry, PuzzleEntry):
            raise TypeError(
                f"{module.__name__}.{attribute} must be a PuzzleEntry, got {type(entry).__name__}"
            )
        register_entry(PuzzleKey(year, day, part), entry)


def _register_builtins() -> None:
    """
    Register every puzzle listed in ``aocbench.puzzles.PUZZLES``.

    Called once at module import time. Each listed (year, day) is imported as
    ``aocbench.puzzles.year_<year>.day_<day>``. This function is idempotent.
    """
    global _BUILTINS_REGISTERED
    if _BUILTINS_REGISTERED:
        return

    from aocbench.puzzles import PUZZLES

    for year in sorted(PUZZLES):
        for day in sorted(PUZZLES[year]):
            module = importlib.import_module(f"aocbench.puzzles.year_{year}.day_{day}")
            _register_module(year, day, module)

    _BUILTINS_REGISTERED = True
    logger.debug(
        "builtins_registered",
        extra={"puzzles": [str(k) for k in list_registered_keys()]},
    )


# Register builtins on import
_register_builtins()
