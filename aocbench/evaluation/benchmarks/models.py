# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for the benchmark engine.

All durations are integer nanoseconds, straight from time.perf_counter_ns.
Summaries are frozen: they are computed once from a finished sample set and
never touched again.
"""

from dataclasses import dataclass, field
from typing import Optional

from aocbench.puzzle.models import PuzzleValue


@dataclass(frozen=True)
class BenchmarkSummary:
    """
    Distribution of per-iteration timings for one benchmark run.

    runtime_ns is the sum of the recorded iterations. overhead_ns is the rest
    of the wall-clock time the loop took: timer calls, list appends, result
    wrapping and the loop itself.
    """

    runtime_ns: int
    overhead_ns: int
    iterations: int
    mean_ns: int
    stddev_ns: int
    min_ns: int
    median_ns: int
    max_ns: int


@dataclass(frozen=True)
class ComparisonRow:
    """
    One solution's line in a comparison report.

    Either ``summary`` is set (the solution ran) or ``error`` is (it raised
    while producing its result or while being benchmarked).
    """

    name: str
    result: Optional[PuzzleValue] = None
    summary: Optional[BenchmarkSummary] = None
    error: Optional[str] = None
    mismatched: bool = False
    relative_percent: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.summary is not None


@dataclass(frozen=True)
class ComparisonReport:
    """
    Result of benchmarking every solution of a puzzle against the same input.

    ``rows`` holds the successful rows sorted by ascending mean, followed by
    the failed rows in registration order. ``reference`` is the canonical
    solution's answer, or None if the canonical solution failed.
    """

    reference: Optional[PuzzleValue]
    reference_name: str
    rows: list[ComparisonRow] = field(default_factory=list)

    @property
    def ranked(self) -> list[ComparisonRow]:
        return [row for row in self.rows if row.succeeded]

    @property
    def failed(self) -> list[ComparisonRow]:
        return [row for row in self.rows if not row.succeeded]

    @property
    def mismatched(self) -> list[ComparisonRow]:
        return [row for row in self.rows if row.mismatched]
