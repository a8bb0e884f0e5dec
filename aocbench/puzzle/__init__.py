# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Puzzle identity, solution contract and the static puzzle registry.

Subsystems:
  - key: validated (year, day, part) identity and default resolution
  - models: PuzzleValue, Solution, Example, PuzzleEntry
  - exceptions: the harness error taxonomy
  - registry: the read-only (year, day, part) lookup table
"""
