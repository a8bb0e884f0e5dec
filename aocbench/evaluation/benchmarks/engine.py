# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark engine behind ``--bench``.

Single-solution mode runs a solution over and over against one input until a
wall-clock budget is used up, recording every iteration, then reduces the
samples to a BenchmarkSummary. The clock is checked after each iteration, so
there is always at least one sample even with a tiny budget or a slow
solution, and a single slow iteration can overrun the budget.

Comparison mode does the same for every registered solution of a puzzle,
cross-checks their answers against the canonical solution's, and ranks them
by mean time. A solution that raises is reported on its own row; the rest of
the batch still runs.

Nothing here keeps state between calls. The timer is injectable so the
statistics can be tested with a fake clock.
"""

import math
import statistics
import time
from typing import Callable, Optional, Sequence

from aocbench.evaluation.benchmarks.models import (
    BenchmarkSummary,
    ComparisonReport,
    ComparisonRow,
)
from aocbench.logging.logger import get_logger
from aocbench.puzzle.exceptions import (
    PuzzleLookupError,
    PuzzleValidationError,
    SolutionError,
)
from aocbench.puzzle.models import PuzzleValue, Solution

logger = get_logger(__name__)

Timer = Callable[[], int]
ProgressCallback = Callable[[int, int, str], None]

_NS_PER_SECOND: int = 1_000_000_000


def _budget_ns(duration_seconds: float) -> int:
    if not duration_seconds > 0 or not math.isfinite(duration_seconds):
        raise PuzzleValidationError(
            f"Benchmark duration must be positive and finite, got {duration_seconds}"
        )
    return max(1, round(duration_seconds * _NS_PER_SECOND))


def summarize(samples: Sequence[int], wall_ns: int) -> BenchmarkSummary:
    """
    Reduce per-iteration timings to summary statistics.

    Args:
        samples: Elapsed nanoseconds of each iteration, in any order.
        wall_ns: Wall-clock nanoseconds the whole loop took.

    Returns:
        The summary. The standard deviation is the sample standard deviation
        (n - 1 denominator), computed in float seconds and converted back to
        nanoseconds; it is 0 for a single sample. The median of an even count
        is the midpoint of the two central samples.

    Raises:
        ValueError: If ``samples`` is empty.
    """
    if not samples:
        raise ValueError("Cannot summarize an empty benchmark sample")

    ordered = sorted(samples)
    iterations = len(ordered)
    runtime = sum(ordered)
    exact_mean = runtime / iterations

    if iterations > 1:
        seconds = [s / _NS_PER_SECOND for s in ordered]
        stddev_ns = round(statistics.stdev(seconds) * _NS_PER_SECOND)
    else:
        stddev_ns = 0

    middle = iterations // 2
    if iterations % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) // 2
    else:
        median = ordered[middle]

    return BenchmarkSummary(
        runtime_ns=runtime,
        overhead_ns=max(wall_ns - runtime, 0),
        iterations=iterations,
        mean_ns=round(exact_mean),
        stddev_ns=stddev_ns,
        min_ns=ordered[0],
        median_ns=median,
        max_ns=ordered[-1],
    )


def benchmark(
    solution: Solution,
    puzzle_input: str,
    duration_seconds: float,
    timer: Timer = time.perf_counter_ns,
) -> BenchmarkSummary:
    """
    Time ``solution`` on ``puzzle_input`` for roughly ``duration_seconds``.

    Only the solution call itself is timed. Each raw result is then bound to
    a local and checked into a PuzzleValue after the clock is read, so that
    work counts as overhead and a bad return type fails on the first
    iteration. The last result is logged once the loop ends.

    Raises:
        PuzzleValidationError: ``duration_seconds`` is not positive.
        SolutionError: The solution raised on any iteration.
    """
    budget = _budget_ns(duration_seconds)
    samples: list[int] = []

    start = timer()
    while True:
        iteration_start = timer()
        raw = solution.call(puzzle_input)
        now = timer()
        samples.append(now - iteration_start)
        # Wrapped off the clock, so the wrapping cost lands in overhead.
        result = PuzzleValue.of(raw)
        if now - start >= budget:
            break
    wall = timer() - start

    summary = summarize(samples, wall)
    logger.info(
        "Benchmark finished",
        extra={
            "solution": solution.name,
            "iterations": summary.iterations,
            "mean_ns": summary.mean_ns,
            "result": str(result),
        },
    )
    return summary


def _relative_percent(mean_ns: int, fastest_ns: int) -> float:
    if fastest_ns == 0:
        return 0.0 if mean_ns == 0 else math.inf
    return (mean_ns / fastest_ns - 1.0) * 100.0


def compare(
    solutions: Sequence[Solution],
    puzzle_input: str,
    duration_seconds: float,
    progress: Optional[ProgressCallback] = None,
    timer: Timer = time.perf_counter_ns,
) -> ComparisonReport:
    """
    Benchmark every solution against the same input and rank them.

    Each solution is first invoked once on its own to get its answer, then
    benchmarked. The first solution's answer is the reference; any other
    solution that answers differently is flagged as mismatched but still timed
    and ranked.

    Args:
        solutions: All registered solutions of one puzzle part, canonical first.
        puzzle_input: The puzzle input every solution runs on.
        duration_seconds: Benchmark budget per solution.
        progress: Called as ``progress(position, total, name)`` before each
                  solution starts.
        timer: Nanosecond clock.

    Returns:
        The ranked report.

    Raises:
        PuzzleLookupError: ``solutions`` is empty.
        PuzzleValidationError: ``duration_seconds`` is not positive.
    """
    if not solutions:
        raise PuzzleLookupError("puzzle has no solutions")
    _budget_ns(duration_seconds)

    outcomes: list[tuple[str, Optional[PuzzleValue], Optional[BenchmarkSummary], Optional[str]]] = []
    for position, solution in enumerate(solutions, start=1):
        if progress is not None:
            progress(position, len(solutions), solution.name)
        try:
            result = solution.invoke(puzzle_input)
            summary = benchmark(solution, puzzle_input, duration_seconds, timer=timer)
        except SolutionError as err:
            logger.warning(
                "Solution failed during comparison",
                extra={"solution": solution.name, "error": str(err)},
            )
            outcomes.append((solution.name, None, None, str(err)))
            continue
        outcomes.append((solution.name, result, summary, None))

    reference_name, reference, _, _ = outcomes[0]

    succeeded = sorted(
        (o for o in outcomes if o[2] is not None),
        key=lambda o: o[2].mean_ns,  # type: ignore[union-attr]
    )
    fastest_ns = succeeded[0][2].mean_ns if succeeded else 0  # type: ignore[union-attr]

    rows: list[ComparisonRow] = []
    for name, result, summary, _ in succeeded:
        assert summary is not None
        rows.append(ComparisonRow(
            name=name,
            result=result,
            summary=summary,
            mismatched=reference is not None and result != reference,
            relative_percent=_relative_percent(summary.mean_ns, fastest_ns),
        ))
    for name, _, summary, error in outcomes:
        if summary is None:
            rows.append(ComparisonRow(name=name, error=error))

    report = ComparisonReport(reference=reference, reference_name=reference_name, rows=rows)
    logger.info(
        "Comparison finished",
        extra={
            "solutions": len(solutions),
            "failed": len(report.failed),
            "mismatched": [row.name for row in report.mismatched],
        },
    )
    return report
