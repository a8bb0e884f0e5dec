# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for example runs.

One ExampleOutcome per example, collected into an ExampleReport. An outcome
is a pass, a fail (the answer differed) or an error (bad index or the solution
raised); only passes count towards ``success``.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ExampleOutcome:
    """What happened when one example ran."""

    number: int
    passed: bool
    expected: Optional[str] = None
    actual: Optional[str] = None
    input_text: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ExampleReport:
    """Tally of an example batch. A partial pass is a normal outcome, not a failure."""

    outcomes: list[ExampleOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def errors(self) -> list[ExampleOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error is not None]
