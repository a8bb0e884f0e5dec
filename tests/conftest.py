# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for aocbench tests.

Fixtures here are available to every test file automatically.
Only fixtures that several test modules need live here.
"""

import logging
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest

from aocbench.puzzle.models import Solution


@pytest.fixture(autouse=True)
def _reset_loggers() -> Iterator[None]:
    """
    Drop handlers from aocbench loggers after each test.

    Handlers hold on to the sys.stderr of the test that created them. Clearing
    them lets the next test's get_logger call bind to the current stream.
    """
    yield
    for name in list(logging.Logger.manager.loggerDict):
        if name == "aocbench" or name.startswith("aocbench."):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """
    Create a minimal valid config YAML file in a temp directory.

    This is the smallest config that passes schema validation.
    Tests that need specific config values should write their own files.
    """
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def fake_timer() -> Callable[[], int]:
    """
    A nanosecond clock that advances by 100ns every time it is read.

    The benchmark loop reads the clock twice per iteration plus once before
    and once after the loop, which makes sample counts predictable.
    """
    ticks = iter(range(0, 10**12, 100))
    return lambda: next(ticks)


@pytest.fixture()
def constant_solution() -> Solution:
    return Solution("constant", lambda text: 42)


@pytest.fixture()
def puzzles_package(tmp_path: Path) -> Path:
    """A throwaway puzzles package with a PUZZLES table, for scaffolding tests."""
    package_dir = tmp_path / "puzzles"
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text(
        textwrap.dedent('''\
            """Implemented puzzles."""

            PUZZLES: dict[int, tuple[int, ...]] = {
                2015: (1,),
                2023: (1, 2),
            }
        '''),
        encoding="utf-8",
    )
    return package_dir
