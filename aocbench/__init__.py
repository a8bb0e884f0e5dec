# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
aocbench: run, benchmark and scaffold Advent of Code puzzle solutions.
"""

__version__ = "0.1.0"
