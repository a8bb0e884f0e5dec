# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Error taxonomy for the harness.

Everything the harness raises on purpose derives from HarnessError, so the CLI
can map each family to its own exit code without importing the subsystems that
raise them. The builtin mixins (ValueError, LookupError, IndexError) are there
so callers that only know the builtin family still catch the right thing.
"""


class HarnessError(Exception):
    """Base for all harness errors."""


class PuzzleValidationError(HarnessError, ValueError):
    """
    Raised when caller-supplied input is invalid before any work starts.

    Covers out-of-range years and days, a year given without a day, defaulting
    outside December, mutually exclusive CLI flags and non-positive benchmark
    durations.
    """


class PuzzleLookupError(HarnessError, LookupError):
    """Raised when the registry has nothing for the request (no solutions, unknown name, no examples)."""


class ExampleBoundsError(HarnessError, IndexError):
    """Raised when an example index points past the end of the scraped block list."""


class FetchError(HarnessError):
    """Raised when puzzle input or the puzzle page cannot be fetched or parsed."""


class MissingSessionError(FetchError):
    """Raised when the session credential is not set. Always raised before any request is sent."""


class SolutionError(HarnessError):
    """
    Raised when a solution fails while being invoked.

    The original exception is always chained as __cause__. Batch runners record
    it per item; single-solution commands let it propagate to the CLI.
    """


class ScaffoldError(HarnessError):
    """Raised when template generation cannot write the puzzle module or update the registry table."""
