# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Mode handlers for the aocbench CLI.

The command line selects exactly one mode: generate a template, benchmark
one solution, compare all solutions, run examples, or solve once. Mode
resolution rejects conflicting flags before any handler runs, so a bad
combination never fetches anything or writes any file.

Handlers write the terminal report to the context's stdout and raise
HarnessError subclasses on failure; main.py turns those into exit codes.
Diagnostics go through the structured logger.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence, TextIO

from aocbench.config.schema import HarnessConfig
from aocbench.evaluation.benchmarks.engine import benchmark, compare
from aocbench.evaluation.examples.runner import run_examples
from aocbench.evaluation.reporting.writer import (
    format_benchmark,
    format_comparison,
    format_example_report,
)
from aocbench.fetch.client import fetch_example_blocks, fetch_input
from aocbench.fetch.session import get_session
from aocbench.puzzle.exceptions import (
    ExampleBoundsError,
    PuzzleLookupError,
    PuzzleValidationError,
    ScaffoldError,
)
from aocbench.puzzle.key import PuzzleKey
from aocbench.puzzle.models import Example
from aocbench.puzzle.registry import get_examples, get_solution, get_solutions
from aocbench.scaffold.template import generate_template
from aocbench.utils.paths import resolve_puzzles_dir

# `--example` with no index means "all of them".
ALL_EXAMPLES: int = -1
# `--bench` with no duration means "the configured default".
BENCH_DEFAULT: float = 0.0

_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"


class Mode(Enum):
    GENERATE = "generate"
    BENCHMARK = "benchmark"
    COMPARE = "compare"
    EXAMPLES = "examples"
    SOLVE = "solve"


@dataclass
class CommandContext:
    """What every handler needs besides the parsed arguments."""

    key: PuzzleKey
    config: HarnessConfig
    logger: logging.Logger
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    @property
    def interactive(self) -> bool:
        isatty = getattr(self.stdout, "isatty", None)
        return bool(isatty and isatty())


def resolve_mode(args: argparse.Namespace) -> Mode:
    """
    Decide which mode the flags ask for.

    Raises:
        PuzzleValidationError: The flags combine modes that exclude each other.
    """
    if args.generate:
        if args.example is not None:
            raise PuzzleValidationError("template generation incompatible with running an example")
        if args.bench is not None:
            raise PuzzleValidationError("template generation incompatible with benchmarking")
        if args.compare:
            raise PuzzleValidationError("compare can only be used with benchmarking")
        if args.part2:
            raise PuzzleValidationError("template generation always generates both parts")
        if args.solution is not None:
            raise PuzzleValidationError(
                "template generation does not support generating named solutions"
            )
        return Mode.GENERATE

    if args.bench is not None:
        if args.example is not None:
            raise PuzzleValidationError("benchmark cannot be run on examples")
        if args.compare:
            if args.solution is not None:
                raise PuzzleValidationError("compare always runs all solutions")
            return Mode.COMPARE
        return Mode.BENCHMARK

    if args.compare:
        raise PuzzleValidationError("compare can only be used with benchmarking")

    if args.example is not None:
        return Mode.EXAMPLES

    return Mode.SOLVE


def _session(ctx: CommandContext) -> str:
    return get_session(ctx.config.fetch.session_env_var)


def _grab_input(ctx: CommandContext, session: str) -> str:
    ctx.write("Grabbing input... ")
    text = fetch_input(ctx.key, session, ctx.config.fetch)
    ctx.write(f"got {len(text.encode('utf-8'))} bytes.\n\n")
    return text


def _bench_duration(args: argparse.Namespace, config: HarnessConfig) -> float:
    if args.bench == BENCH_DEFAULT:
        return config.bench.default_duration_seconds
    return float(args.bench)


def _warn_if_traced(ctx: CommandContext) -> None:
    # A debugger or coverage tracer slows every call down by an order of magnitude.
    if sys.gettrace() is not None:
        ctx.write(f"{_YELLOW}WARNING: Running benchmark under a tracer (debugger or coverage){_RESET}\n\n")


def _select_examples(ctx: CommandContext, index: int) -> Sequence[Example]:
    examples = get_examples(ctx.key)
    if not examples:
        raise PuzzleLookupError("puzzle has no examples")
    if index == ALL_EXAMPLES:
        return examples
    if index >= len(examples):
        raise ExampleBoundsError(f"puzzle only has {len(examples)} example(s)")
    return [examples[index]]


def handle_solve(args: argparse.Namespace, ctx: CommandContext) -> None:
    """Run one solution on the real input and print its answer."""
    solution = get_solution(ctx.key, args.solution)
    text = _grab_input(ctx, _session(ctx))

    result = solution.invoke(text)
    ctx.logger.info(
        "Solved",
        extra={"key": str(ctx.key), "solution": solution.name, "result": str(result)},
    )
    ctx.write(f"{result}\n")


def handle_examples(args: argparse.Namespace, ctx: CommandContext) -> None:
    """Run one or all registered examples against a solution."""
    examples = _select_examples(ctx, args.example)
    solution = get_solution(ctx.key, args.solution)
    session = _session(ctx)

    def scrape(credential: str) -> list[str]:
        ctx.write("Scraping Example Inputs... ")
        blocks = fetch_example_blocks(ctx.key, credential, ctx.config.fetch)
        ctx.write("Done!\n\n")
        return blocks

    report = run_examples(solution, session, examples, fetch_blocks=scrape)
    ctx.write(format_example_report(report))


def handle_benchmark(args: argparse.Namespace, ctx: CommandContext) -> None:
    """Benchmark one solution on the real input."""
    solution = get_solution(ctx.key, args.solution)
    duration = _bench_duration(args, ctx.config)
    _warn_if_traced(ctx)
    text = _grab_input(ctx, _session(ctx))

    summary = benchmark(solution, text, duration)
    ctx.write(format_benchmark(summary))
    ctx.write("\n")


def handle_compare(args: argparse.Namespace, ctx: CommandContext) -> None:
    """Benchmark every registered solution and print the ranked table."""
    solutions = get_solutions(ctx.key)
    if not solutions:
        raise PuzzleLookupError("puzzle has no solutions")
    duration = _bench_duration(args, ctx.config)
    _warn_if_traced(ctx)
    text = _grab_input(ctx, _session(ctx))

    interactive = ctx.interactive

    def progress(position: int, total: int, name: str) -> None:
        if interactive:
            ctx.write(f"\r\x1b[KBenchmarking {position}/{total} - {name}")

    report = compare(solutions, text, duration, progress=progress)
    if interactive:
        ctx.write("\r\x1b[2K")

    ctx.write(format_comparison(report, color=ctx.config.bench.color and interactive))


def handle_generate(args: argparse.Namespace, ctx: CommandContext) -> None:
    """Scaffold a new puzzle module and register it in the puzzle table."""
    try:
        package_dir = resolve_puzzles_dir(ctx.config.scaffold.package_dir)
    except FileNotFoundError as err:
        raise ScaffoldError(str(err)) from err

    generate_template(ctx.key, package_dir, echo=ctx.write)


HANDLERS: dict[Mode, Callable[[argparse.Namespace, CommandContext], None]] = {
    Mode.GENERATE: handle_generate,
    Mode.BENCHMARK: handle_benchmark,
    Mode.COMPARE: handle_compare,
    Mode.EXAMPLES: handle_examples,
    Mode.SOLVE: handle_solve,
}
