# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for aocbench.

A single root command. The puzzle is picked with --year/--day/--part2 and the
mode with the remaining flags; with no mode flag the default solution runs
once on the real input.

Usage:
    aocbench                         # today's puzzle, part 1 (December only)
    aocbench -d 1 -2                 # day 1 of the latest season, part 2
    aocbench -y 2015 -d 1 --example  # run every registered example
    aocbench -y 2015 -d 1 -e 2       # run the third example only
    aocbench -y 2015 -d 1 --bench 5  # benchmark the default solution for 5s
    aocbench -y 2015 -d 1 -b -c      # compare every solution for 1s each
    aocbench -y 2016 -d 4 --generate # scaffold a new puzzle module

Exit codes are listed in exit_codes.py. A partially passing example run is a
success.
"""

import argparse
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from aocbench import __version__
from aocbench.cli.commands import (
    ALL_EXAMPLES,
    BENCH_DEFAULT,
    HANDLERS,
    CommandContext,
    resolve_mode,
)
from aocbench.cli.exit_codes import (
    CONFIG_ERROR,
    EXTERNAL_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from aocbench.config.exceptions import ConfigError
from aocbench.config.loader import load_config
from aocbench.logging.logger import get_logger
from aocbench.puzzle.exceptions import (
    ExampleBoundsError,
    FetchError,
    HarnessError,
    PuzzleLookupError,
    PuzzleValidationError,
)
from aocbench.puzzle.key import resolve_key
from aocbench.runtime.bootstrap import bootstrap


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative index, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if not number > 0 or not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be a positive, finite number of seconds, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the root argument parser."""
    parser = argparse.ArgumentParser(
        prog="aocbench",
        description="Run, benchmark and scaffold Advent of Code solutions.",
    )
    parser.add_argument(
        "-y", "--year",
        type=int,
        default=None,
        help="Which year of Advent of Code to run; defaults to the current season.",
    )
    parser.add_argument(
        "-d", "--day",
        type=int,
        default=None,
        help="Which day of Advent of Code to run; defaults to the current day of December.",
    )
    parser.add_argument(
        "-2", "--part2",
        action="store_true",
        default=False,
        help="Run part 2 of the puzzle instead of part 1.",
    )
    parser.add_argument(
        "-e", "--example",
        type=_non_negative_int,
        nargs="?",
        const=ALL_EXAMPLES,
        default=None,
        metavar="N",
        help="Run all examples, or only the example at zero-based index N.",
    )
    parser.add_argument(
        "-b", "--bench",
        type=_positive_float,
        nargs="?",
        const=BENCH_DEFAULT,
        default=None,
        metavar="SECONDS",
        help="Benchmark for SECONDS; defaults to the configured duration (1 second).",
    )
    parser.add_argument(
        "-c", "--compare",
        action="store_true",
        default=False,
        help="With --bench, benchmark every solution and compare them.",
    )
    parser.add_argument(
        "-g", "--generate",
        action="store_true",
        default=False,
        help="Generate a template module for the puzzle.",
    )
    parser.add_argument(
        "-s", "--solution",
        type=str,
        default=None,
        metavar="NAME",
        help="Run the named solution instead of the default one.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides the config file).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _exit_code_for(err: HarnessError) -> int:
    if isinstance(err, PuzzleValidationError):
        return VALIDATION_ERROR
    if isinstance(err, (PuzzleLookupError, ExampleBoundsError)):
        return USER_ERROR
    if isinstance(err, FetchError):
        return EXTERNAL_ERROR
    return RUNTIME_ERROR


def _report_error(message: str) -> None:
    sys.stderr.write(f"Error: {message}\n")
    sys.stderr.flush()


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse ``argv``, run the selected mode and return the exit code.

    The flow:
      1. Parse flags and load the config (defaults if no --config)
      2. Bootstrap: environment check, `.env`, logging
      3. Resolve the puzzle key and print the header
      4. Resolve the mode, rejecting conflicting flags
      5. Run the handler
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config is not None else None)
    except ConfigError as err:
        _report_error(str(err))
        return CONFIG_ERROR

    global_config = config.global_config
    bootstrap(global_config, log_level=args.log_level)
    logger = get_logger(
        "aocbench.cli",
        log_level=args.log_level or global_config.log_level,
        log_file=Path(global_config.log_file) if global_config.log_file is not None else None,
    )

    try:
        key = resolve_key(args.year, args.day, part2=args.part2)
    except PuzzleValidationError as err:
        logger.error("Invalid puzzle", extra={"error": str(err)})
        _report_error(str(err))
        return VALIDATION_ERROR

    ctx = CommandContext(key=key, config=config, logger=logger)
    ctx.write(f"{key.header()}\n\n")

    try:
        mode = resolve_mode(args)
        logger.info("Command started", extra={"key": str(key), "mode": mode.value})
        HANDLERS[mode](args, ctx)
    except HarnessError as err:
        logger.error(
            "Command failed",
            extra={"key": str(key), "error": str(err), "kind": type(err).__name__},
        )
        _report_error(str(err))
        return _exit_code_for(err)
    except Exception as err:
        logger.error("Unexpected error", extra={"error": str(err)}, exc_info=True)
        _report_error(f"unexpected error: {err!r}")
        return RUNTIME_ERROR

    logger.info("Command completed", extra={"key": str(key), "mode": mode.value})
    return SUCCESS


def main() -> None:
    """Console script entrypoint."""
    sys.exit(run())


if __name__ == "__main__":
    main()
