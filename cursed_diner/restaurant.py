"""The cursed restaurant: a circular table, a waiting line and a seating history."""

from __future__ import annotations

import sys
from typing import TextIO

from cursed_diner.containers import Customer, CircularTable, CustomerQueue
from cursed_diner.rituals import reverse_same_sign, stable_fix, void_segment
from cursed_diner.shellsort import insertion_sort_gap


def _louder(a: Customer, b: Customer) -> bool:
    return abs(a.energy) > abs(b.energy)


def _purple_sort(items: list[Customer], n: int) -> int:
    """Sort the first ``n`` guests by falling absolute energy; return the swap count.

    Every sub-pass of a gap starts from position 0, with the length shrinking
    by the sub-pass number, before a final plain insertion sort.
    """
    swaps = 0
    gap = n // 2
    while gap > 2:
        for offset in range(gap):
            swaps += insertion_sort_gap(items, n - offset, gap, _louder)
        gap //= 2
    swaps += insertion_sort_gap(items, n, 1, _louder)
    return swaps


class Restaurant:
    """Seats guests at a circular table, queues the overflow and runs the rituals."""

    def __init__(self, maxsize: int = 0, out: TextIO | None = None) -> None:
        self.maxsize = maxsize
        self.table = CircularTable()
        self.queue = CustomerQueue()
        self.history = CustomerQueue()
        self._out = out

    def _emit(self, customer: Customer) -> None:
        print(customer.line(), file=self._out if self._out is not None else sys.stdout)

    def _refill(self) -> None:
        while len(self.queue) and len(self.table) < self.maxsize:
            waiting = self.queue.popleft()
            self.red(waiting.name, waiting.energy)

    def red(self, name: str, energy: int) -> None:
        """Seat a guest, queue them when the table is full, or turn them away."""
        duplicate = name in self.table or name in self.queue
        if energy == 0 or duplicate:
            return
        table = self.table
        if len(table) < self.maxsize:
            if len(table) <= 1:
                table.add_after(name, energy)
            elif len(table) < self.maxsize // 2:
                if table.current.energy <= energy:
                    table.add_after(name, energy)
                else:
                    table.add_before(name, energy)
            else:
                seats = iter(table)
                farthest = next(seats)
                widest = abs(energy - farthest.energy)
                for seat in seats:
                    gap = abs(energy - seat.energy)
                    if widest < gap:
                        widest, farthest = gap, seat
                table.set_current(farthest)
                if energy - farthest.energy < 0:
                    table.add_before(name, energy)
                else:
                    table.add_after(name, energy)
            self.history.append(name, energy)
        elif len(self.queue) < self.maxsize:
            self.queue.append(name, energy)

    def blue(self, num: int) -> None:
        """Send away the ``num`` longest-seated guests, then seat from the queue."""
        num = min(num, len(self.table))
        for _ in range(num):
            oldest = self.history.popleft()
            if oldest.name in self.table:
                self.table.remove(oldest.name)
        self._refill()

    def purple(self) -> None:
        """Sort the queue up to its loudest guest, then send away swaps-many guests."""
        if not len(self.queue):
            return
        items = list(self.queue)
        loudest = abs(items[0].energy)
        last = 0
        for index, customer in enumerate(items[1:], start=1):
            if abs(customer.energy) >= loudest:
                loudest = customer.energy
                last = index
        original = [customer.name for customer in items]
        swaps = _purple_sort(items, last + 1)
        stable_fix(items, original)
        self.queue = CustomerQueue(items)
        self.blue(swaps % self.maxsize)

    def reversal(self) -> None:
        """Reverse positive guests among themselves and negative ones likewise."""
        if not len(self.table):
            return
        anchor = self.table.current.name
        seats = list(self.table)
        for seat, record in zip(seats, reverse_same_sign(seats)):
            seat.name, seat.energy = record.name, record.energy
        for seat in seats:
            if seat.name == anchor:
                self.table.set_current(seat)
                break

    def unlimited_void(self) -> None:
        """Print the cheapest run of at least four seats, from its smallest guest."""
        seats = list(self.table)
        for index in void_segment([seat.energy for seat in seats]):
            self._emit(seats[index])

    def domain_expansion(self) -> None:
        """Expel whichever side, sorcerers or spirits, holds less total energy."""
        everyone = [*self.table, *self.queue]
        positive = sum(c.energy for c in everyone if c.energy > 0)
        negative = sum(c.energy for c in everyone if c.energy < 0)
        if positive == 0 or negative == 0:
            return
        if positive >= abs(negative):
            def expelled(energy: int) -> bool:
                return energy < 0
        else:
            def expelled(energy: int) -> bool:
                return energy > 0

        for index in reversed(range(len(self.queue))):
            if expelled(self.queue[index].energy):
                self._emit(self.queue.remove_at(index))
        for index in reversed(range(len(self.history))):
            if expelled(self.history[index].energy):
                gone = self.history.remove_at(index)
                if gone.name in self.table:
                    self.table.remove(gone.name)
                self._emit(gone)
        self._refill()

    def light(self, num: int) -> None:
        """Print the table clockwise for a non-zero ``num``, else the queue."""
        guests = self.table if num != 0 else self.queue
        for customer in guests:
            self._emit(customer)