# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path utilities for aocbench.
"""

from pathlib import Path
from typing import Optional


def default_puzzles_dir() -> Path:
    """The directory of the installed ``aocbench.puzzles`` package."""
    return Path(__file__).resolve().parent.parent / "puzzles"


def resolve_puzzles_dir(configured: Optional[str] = None) -> Path:
    """
    Pick the puzzles package directory that template generation writes into.

    Args:
        configured: Path from the scaffold config, or None for the default.

    Returns:
        Absolute path to the puzzles package directory.

    Raises:
        FileNotFoundError: The directory has no ``__init__.py`` holding the
            registry table.
    """
    target = Path(configured).expanduser().resolve() if configured else default_puzzles_dir()
    if not (target / "__init__.py").is_file():
        raise FileNotFoundError(f"Not a puzzles package (no __init__.py): {target}")
    return target


def ensure_directory(path: Path) -> Path:
    """
    Create a directory (and parents) if it doesn't exist. Returns the path for chaining.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
