"""Customer records and the two containers the restaurant seats them in."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Customer:
    """A named guest with a signed energy; links are used by the circular table."""

    name: str
    energy: int
    prev: Customer | None = field(default=None, repr=False)
    next: Customer | None = field(default=None, repr=False)

    def line(self) -> str:
        """Return the printed form ``name-energy``."""
        return f"{self.name}-{self.energy}"


class CircularTable:
    """A circular doubly linked ring of customers with a movable current seat."""

    def __init__(self) -> None:
        self._current: Customer | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Customer]:
        """Walk clockwise (along ``next``) starting at the current seat."""
        node = self._current
        for _ in range(self._size):
            yield node
            node = node.next

    def backwards(self) -> Iterator[Customer]:
        """Walk anticlockwise (along ``prev``) starting at the current seat."""
        node = self._current
        for _ in range(self._size):
            yield node
            node = node.prev

    def __contains__(self, name: object) -> bool:
        return any(customer.name == name for customer in self)

    @property
    def current(self) -> Customer | None:
        """The customer at the current seat, or None when the table is empty."""
        return self._current

    def set_current(self, customer: Customer) -> None:
        """Move the current seat to a customer already at the table."""
        if not any(seated is customer for seated in self):
            raise ValueError(f"{customer.name!r} is not seated at this table")
        self._current = customer

    def add_after(self, name: str, energy: int) -> Customer:
        """Seat a new customer clockwise of the current seat and make it current."""
        node = Customer(name, energy)
        current = self._current
        if current is None:
            node.prev = node.next = node
        else:
            node.prev, node.next = current, current.next
            current.next.prev = node
            current.next = node
        self._current = node
        self._size += 1
        return node

    def add_before(self, name: str, energy: int) -> Customer:
        """Seat a new customer anticlockwise of the current seat and make it current."""
        node = Customer(name, energy)
        current = self._current
        if current is None:
            node.prev = node.next = node
        else:
            node.prev, node.next = current.prev, current
            current.prev.next = node
            current.prev = node
        self._current = node
        self._size += 1
        return node

    def _unlink(self, node: Customer) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def remove_current(self) -> Customer:
        """Remove the current customer.

        The seat then moves clockwise if the removed energy was positive,
        otherwise anticlockwise.
        """
        node = self._current
        if node is None:
            raise IndexError("remove from an empty table")
        if self._size == 1:
            node.prev = node.next = None
            self._current = None
            self._size = 0
            return node
        if self._size == 2:
            other = node.next
            node.prev = node.next = None
            other.prev = other.next = other
            self._current = other
            self._size = 1
            return node
        follower = node.next if node.energy > 0 else node.prev
        self._unlink(node)
        self._current = follower
        return node

    def remove(self, name: str) -> Customer:
        """Remove the customer with this name.

        The new current seat is the removed customer's clockwise neighbour
        when the previous current customer's energy was positive, otherwise
        its anticlockwise neighbour.
        """
        if self._current is None:
            raise KeyError(name)
        direction_energy = self._current.energy
        target = next((c for c in self if c.name == name), None)
        if target is None:
            raise KeyError(name)
        if self._size == 1:
            target.prev = target.next = None
            self._current = None
            self._size = 0
            return target
        if self._size == 2:
            other = target.next
            target.prev = target.next = None
            other.prev = other.next = other
            self._current = other
            self._size = 1
            return target
        follower = target.next if direction_energy > 0 else target.prev
        self._unlink(target)
        self._current = follower
        return target


class CustomerQueue:
    """A first-in first-out line of customers with positional access."""

    def __init__(self, customers: Iterable[Customer] = ()) -> None:
        self._items: list[Customer] = [Customer(c.name, c.energy) for c in customers]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._items)

    def __contains__(self, name: object) -> bool:
        return any(customer.name == name for customer in self._items)

    def __getitem__(self, index: int) -> Customer:
        return self._items[index]

    def append(self, name: str, energy: int) -> Customer:
        """Add a customer at the back of the line."""
        customer = Customer(name, energy)
        self._items.append(customer)
        return customer

    def popleft(self) -> Customer:
        """Remove and return the customer at the front."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop(0)

    def front(self) -> Customer:
        """Return the customer at the front without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def remove_at(self, index: int) -> Customer:
        """Remove and return the customer at a position."""
        return self._items.pop(index)

    def remove(self, name: str) -> Customer:
        """Remove and return the first customer with this name."""
        for index, customer in enumerate(self._items):
            if customer.name == name:
                return self._items.pop(index)
        raise KeyError(name)

    def swap(self, a: int, b: int) -> None:
        """Exchange the customers at two positions."""
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def copy(self) -> CustomerQueue:
        """Return an independent copy holding fresh customer records."""
        return CustomerQueue(self._items)