# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Example runner.

Runs a solution against the worked examples on the puzzle page. For each
example the runner:
  1. Looks up the input block and the expected-answer block by index
  2. Invokes the solution on the input block
  3. Compares the answer's canonical rendering to the expected block, exactly
  4. Records the outcome

Each example is isolated: a bad index or a solution that raises is recorded
on that example and the batch carries on. The only thing that stops the run
is failing to fetch the blocks in the first place.
"""

from typing import Callable, Iterable, Sequence

from aocbench.evaluation.examples.models import ExampleOutcome, ExampleReport
from aocbench.logging.logger import get_logger
from aocbench.puzzle.exceptions import ExampleBoundsError, SolutionError
from aocbench.puzzle.models import Example, Solution

logger = get_logger(__name__)

BlockFetcher = Callable[[str], Sequence[str]]


def _block(blocks: Sequence[str], index: int, what: str) -> str:
    if not 0 <= index < len(blocks):
        raise ExampleBoundsError(
            f"{what} offset {index} out of bounds; page has {len(blocks)} code block(s)"
        )
    return blocks[index]


def run_example(solution: Solution, blocks: Sequence[str], example: Example, number: int) -> ExampleOutcome:
    """Run one example against already-fetched blocks."""
    try:
        input_text = _block(blocks, example.input_index, "example")
        expected = _block(blocks, example.expected_index, "expected result")
    except ExampleBoundsError as err:
        return ExampleOutcome(number=number, passed=False, error=str(err))

    try:
        actual = str(solution.invoke(input_text))
    except SolutionError as err:
        return ExampleOutcome(
            number=number,
            passed=False,
            expected=expected,
            input_text=input_text,
            error=str(err),
        )

    return ExampleOutcome(
        number=number,
        passed=actual == expected,
        expected=expected,
        actual=actual,
        input_text=input_text,
    )


def run_examples(
    solution: Solution,
    session: str,
    examples: Iterable[Example],
    fetch_blocks: BlockFetcher,
) -> ExampleReport:
    """
    Run a batch of examples.

    Args:
        solution: The solution under test.
        session: Opaque credential handed straight to ``fetch_blocks``.
        examples: Examples to run, in order.
        fetch_blocks: Returns the puzzle page's code blocks for a session.

    Returns:
        The per-example outcomes. Zero examples gives an empty report.

    Raises:
        FetchError: ``fetch_blocks`` failed.
    """
    examples = list(examples)
    report = ExampleReport()
    if not examples:
        return report

    blocks = fetch_blocks(session)

    for number, example in enumerate(examples, start=1):
        outcome = run_example(solution, blocks, example, number)
        report.outcomes.append(outcome)
        if not outcome.passed:
            logger.warning(
                "Example did not pass",
                extra={
                    "solution": solution.name,
                    "example": number,
                    "error": outcome.error,
                    "expected": outcome.expected,
                    "actual": outcome.actual,
                },
            )

    logger.info(
        "Examples finished",
        extra={
            "solution": solution.name,
            "success": report.success,
            "total": report.total,
            "errored": [outcome.number for outcome in report.errors],
        },
    )
    return report
