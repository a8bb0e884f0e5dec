# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Terminal report rendering.

Turns example reports, benchmark summaries and comparison reports into the
text the CLI prints. Every function here returns a string and has no side
effects; the CLI decides where it goes.

Durations are shown with a unit picked from their size (ns, µs, ms, s) and two
decimals, so a column of timings stays readable whether a solution takes
nanoseconds or seconds.
"""

from typing import Optional

from aocbench.evaluation.benchmarks.models import BenchmarkSummary, ComparisonReport
from aocbench.evaluation.examples.models import ExampleReport
from aocbench.puzzle.models import PuzzleValue

_DIM = "\x1b[90m"
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"

_EXAMPLE_RULE = "|---------------------"

_SOLUTION_HEADER = "Solution"


def format_duration(nanoseconds: float) -> str:
    """Render a duration with an automatically chosen unit, e.g. ``812.50µs``."""
    if nanoseconds >= 1_000_000_000:
        return f"{nanoseconds / 1_000_000_000:.2f}s"
    if nanoseconds >= 1_000_000:
        return f"{nanoseconds / 1_000_000:.2f}ms"
    if nanoseconds >= 1_000:
        return f"{nanoseconds / 1_000:.2f}µs"
    return f"{nanoseconds:.2f}ns"


def format_example_report(report: ExampleReport) -> str:
    """
    Render an example batch as a bordered block with a ``success / total`` footer.

    Failing examples show the expected and actual answers plus the input that
    produced them. Examples that errored show the error instead.
    """
    lines: list[str] = ["| Running Examples... ", _EXAMPLE_RULE]

    for outcome in report.outcomes:
        if outcome.passed:
            lines.append(f"| Example #{outcome.number} passed")
        elif outcome.error is not None:
            lines.append(f"| Example #{outcome.number} errored: {outcome.error}")
        else:
            lines.append(
                f"| Example #{outcome.number} failed: {outcome.expected} != {outcome.actual}"
            )
            lines.append(f"|- Input: {outcome.input_text}")

    if report.total > 0:
        lines.append(_EXAMPLE_RULE)
        lines.append(f"| {report.success} / {report.total} Examples passed")
    else:
        lines.append("| No Examples found")

    return "\n".join(lines) + "\n"


def format_benchmark(summary: BenchmarkSummary) -> str:
    """Render a single-solution benchmark summary."""
    lines = [
        f"Benchmark ran for {format_duration(summary.runtime_ns)} "
        f"(plus {format_duration(summary.overhead_ns)} of overhead)",
        f"  Iterations: {summary.iterations:,}",
        f"  Avg±StdDev: {format_duration(summary.mean_ns)} ± {format_duration(summary.stddev_ns)}",
        f" Min<Med<Max: {format_duration(summary.min_ns)} < "
        f"{format_duration(summary.median_ns)} < {format_duration(summary.max_ns)}",
    ]
    return "\n".join(lines) + "\n"


def _answer(value: Optional[PuzzleValue], quote: bool) -> str:
    if value is None:
        return "?"
    return repr(value.value) if quote else str(value)


def _mismatch(result: Optional[PuzzleValue], reference: Optional[PuzzleValue]) -> str:
    # An int and a text answer can render the same; quote the text one then.
    quote = result is not None and reference is not None and result.kind != reference.kind
    return f"{_answer(result, quote)} != {_answer(reference, quote)}"


def format_comparison(report: ComparisonReport, color: bool = True) -> str:
    """
    Render a comparison report as an aligned table, fastest solution first.

    Rows whose answer differs from the reference are dimmed and get
    ``<answer> != <reference>`` appended. Solutions that failed are listed
    below the table with their error.
    """
    width = max([len(_SOLUTION_HEADER)] + [len(row.name) for row in report.rows])
    bar = "━" * width

    lines: list[str] = [
        f"  {_SOLUTION_HEADER:<{width}} ┏━ Average ±   StdDev ┯ Relative ┳━ Minimum ┯━━ Median ┯━ Maximum ┓",
        f"┏━{bar}━╋━━━━━━━━━━━━━━━━━━━━━┿━━━━━━━━━━╋━━━━━━━━━━┿━━━━━━━━━━┿━━━━━━━━━━┫",
    ]

    for row in report.ranked:
        summary = row.summary
        assert summary is not None
        line = (
            f"┃ {row.name:<{width}} ┃ "
            f"{format_duration(summary.mean_ns):>8} ± {format_duration(summary.stddev_ns):>8} │ "
            f"{row.relative_percent:>7.1f}% ┃ "
            f"{format_duration(summary.min_ns):>8} │ "
            f"{format_duration(summary.median_ns):>8} │ "
            f"{format_duration(summary.max_ns):>8} ┃"
        )
        if row.mismatched:
            mismatch = _mismatch(row.result, report.reference)
            if color:
                line = f"{_DIM}{line} {_YELLOW}{mismatch}{_RESET}"
            else:
                line = f"{line} {mismatch}"
        lines.append(line)

    lines.append(f"┗━{bar}━┻━━━━━━━━━━━━━━━━━━━━━┷━━━━━━━━━━┻━━━━━━━━━━┷━━━━━━━━━━┷━━━━━━━━━━┛")

    for row in report.failed:
        failure = f"✗ {row.name}: {row.error}"
        lines.append(f"{_YELLOW}{failure}{_RESET}" if color else failure)

    return "\n".join(lines) + "\n"
