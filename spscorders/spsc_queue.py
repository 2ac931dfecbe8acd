"""Bounded single-producer single-consumer ring buffer."""

from __future__ import annotations

import sys
from typing import Any, Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


def is_power_of_two(x: int) -> bool:
    """Return True if ``x`` is a positive power of two."""
    return x > 0 and not (x & (x - 1))


class SPSCQueue(Generic[T]):
    """A fixed-capacity ring buffer for one producer thread and one consumer thread.

    One slot is always kept free, so the queue holds at most ``capacity - 1``
    items. The producer only advances the tail and the consumer only advances
    the head, which keeps the two sides from interfering.
    """

    def __init__(self, capacity: int) -> None:
        if not is_power_of_two(capacity):
            raise ValueError(f"capacity must be a power of two, got {capacity}")
        self._capacity = capacity
        self._mask = capacity - 1
        self._buffer: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the ring (one more than the usable size)."""
        return self._capacity

    def push(self, item: T) -> bool:
        """Append ``item``; return False without storing it if the queue is full."""
        tail = self._tail
        next_tail = (tail + 1) & self._mask
        if next_tail == self._head:
            return False
        self._buffer[tail] = item
        self._tail = next_tail
        return True

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the queue is empty."""
        head = self._head
        if head == self._tail:
            return None
        item = self._buffer[head]
        self._head = (head + 1) & self._mask
        return item

    def empty(self) -> bool:
        """Return True if there is nothing to pop."""
        return self._head == self._tail

    def full(self) -> bool:
        """Return True if a push would fail."""
        return ((self._tail + 1) & self._mask) == self._head

    def size(self) -> int:
        """Number of items currently held."""
        return (self._tail - self._head) & self._mask

    def __len__(self) -> int:
        return self.size()

    def debug_print(self, file: Optional[TextIO] = None) -> None:
        """Write the head, tail and fill state on one line."""
        print(
            f"Head: {self._head}, Tail: {self._tail}, "
            f"Empty: {'yes' if self.empty() else 'no'}, "
            f"Full: {'yes' if self.full() else 'no'}",
            file=sys.stdout if file is None else file,
        )

    def raw_buffer(self) -> tuple:
        """Snapshot of every slot in the ring, including stale ones."""
        return tuple(self._buffer)