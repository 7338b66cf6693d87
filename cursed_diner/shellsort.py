"""Shell sort over mutable sequences with a caller-supplied ordering."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

Before = Callable[[Any, Any], bool]


def _gap_pass(items: MutableSequence, start: int, n: int, gap: int, before: Before) -> int:
    swaps = 0
    for i in range(gap, n, gap):
        j = i
        while j >= gap and before(items[start + j], items[start + j - gap]):
            a, b = start + j, start + j - gap
            items[a], items[b] = items[b], items[a]
            swaps += 1
            j -= gap
    return swaps


def insertion_sort_gap(items: MutableSequence, n: int, gap: int, before: Before) -> int:
    """Insertion-sort positions 0, gap, 2*gap, ... below ``n``.

    An element moves left past its gap-neighbour while ``before(element,
    neighbour)`` holds. Returns the number of swaps made.
    """
    return _gap_pass(items, 0, n, gap, before)


def shellsort(items: MutableSequence, n: int, before: Before) -> int:
    """Shell-sort the first ``n`` items in place; return the number of swaps.

    Gaps halve from ``n // 2`` while above 2, each gap sorting every
    interleaved sublist, and a final plain insertion sort finishes the job.
    """
    swaps = 0
    gap = n // 2
    while gap > 2:
        for offset in range(gap):
            swaps += _gap_pass(items, offset, n - offset, gap, before)
        gap //= 2
    swaps += _gap_pass(items, 0, n, 1, before)
    return swaps