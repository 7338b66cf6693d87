"""Pure helpers behind the restaurant's table rituals."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

from cursed_diner.containers import Customer

_MIN_WINDOW = 4


def void_segment(energies: Sequence[int]) -> list[int]:
    """Pick the cheapest run of at least four seats and order it for printing.

    ``energies`` lists the table clockwise from the current seat. Every start
    seat is tried with windows growing clockwise from four seats up to the
    whole table; ties favour the later start and the longer window. The
    window found for the first start keeps its initial four seats. The
    chosen window is returned as seat indices, beginning at its first
    smallest energy, running clockwise to the window's end, then wrapping to
    the window's start. Tables of fewer than four seats yield an empty list.
    """
    n = len(energies)
    if n < _MIN_WINDOW:
        return []

    left, length = 0, _MIN_WINDOW
    best: int | None = None
    for start in range(n):
        total = sum(energies[(start + k) % n] for k in range(_MIN_WINDOW))
        lowest, span = total, _MIN_WINDOW
        for extra in range(_MIN_WINDOW, n):
            total += energies[(start + extra) % n]
            if total <= lowest:
                lowest, span = total, extra + 1
        if best is None:
            best = lowest
        elif lowest <= best:
            best = lowest
            left, length = start, span

    window = [(left + k) % n for k in range(length)]
    pivot = min(range(length), key=lambda k: energies[window[k]])
    return window[pivot:] + window[:pivot]


def reverse_same_sign(customers: Iterable[Customer]) -> list[Customer]:
    """Reverse the order of positive guests among themselves, and of negative ones.

    ``customers`` lists the table clockwise from the current seat. Seats keep
    their sign; within each sign the guests are reversed along the circle
    read clockwise from the seat after the current one. Returns fresh
    records, one per seat, in the same seat order.
    """
    seats = [(c.name, c.energy) for c in customers]
    n = len(seats)
    result = list(seats)
    ring = [*range(1, n), 0] if n else []
    for keep in (lambda e: e > 0, lambda e: e < 0):
        slots = [k for k in ring if keep(seats[k][1])]
        for slot, source in zip(slots, reversed(slots)):
            result[slot] = seats[source]
    return [Customer(name, energy) for name, energy in result]


def stable_fix(
    sorted_customers: MutableSequence[Customer], original_names: Sequence[str]
) -> MutableSequence[Customer]:
    """Restore original order between adjacent guests of equal energy.

    Walks the sequence once from the front; whenever two neighbours share an
    energy and the left one came later in ``original_names``, they are
    swapped. Unknown names count as position 0. Works in place and returns
    the sequence.
    """
    position: dict[str, int] = {}
    for index, name in enumerate(original_names):
        position[name] = index
    for i in range(len(sorted_customers) - 1):
        here, after = sorted_customers[i], sorted_customers[i + 1]
        if here.energy != after.energy:
            continue
        if position.get(here.name, 0) > position.get(after.name, 0):
            sorted_customers[i], sorted_customers[i + 1] = after, here
    return sorted_customers