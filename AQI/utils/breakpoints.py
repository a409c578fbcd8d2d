"""Breakpoint segments and the index scans over breakpoint tables."""

from __future__ import annotations

from typing import NamedTuple, Sequence


class Breakpoint(NamedTuple):
    """One (lo, hi) segment of a breakpoint table."""

    lo: float
    hi: float


def low_index(val: float, table: Sequence[Breakpoint]) -> int:
    """Return the highest index whose ``lo`` is at or below ``val``.

    Scans from the end of the table downward. Returns -1 when ``val`` is
    below the first segment.
    """
    i = len(table)
    while i > 0:
        i -= 1
        if table[i].lo <= val:
            return i
    return -1


def high_index(val: float, table: Sequence[Breakpoint]) -> int:
    """Return the lowest index whose ``hi`` is at or above ``val``.

    Returns ``len(table)`` when ``val`` is above the last segment.
    """
    for i, segment in enumerate(table):
        if segment.hi >= val:
            return i
    return len(table)
