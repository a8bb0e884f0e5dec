# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Running and measuring registered puzzle solutions.

Subsystems:
  - examples: running a solution against scraped example blocks
  - benchmarks: the timing loop, summary statistics and comparison mode
  - reporting: terminal rendering of all of the above
"""
