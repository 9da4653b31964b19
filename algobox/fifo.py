"""A first-in first-out queue over a fixed number of slots, with a menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 50

__all__ = ["QueueOverflow", "QueueUnderflow", "BoundedQueue", "main"]


class QueueOverflow(Exception):
    """Raised when every slot of a BoundedQueue has been used."""


class QueueUnderflow(Exception):
    """Raised when deleting from a BoundedQueue that holds nothing."""


class BoundedQueue(Generic[T]):
    """A FIFO queue backed by a fixed row of slots.

    Items enter at the rear and leave at the front. A slot freed by
    ``delete`` is never used again, so at most ``capacity`` items can be
    inserted over the queue's whole life.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    @property
    def is_full(self) -> bool:
        """True once every slot has been taken."""
        return len(self._slots) >= self.capacity

    @property
    def has_started(self) -> bool:
        """True once anything has ever been inserted."""
        return bool(self._slots)

    def insert(self, item: T) -> None:
        """Add item at the rear; raises QueueOverflow when no slot is left."""
        if self.is_full:
            raise QueueOverflow("Queue Overflow")
        self._slots.append(item)

    def delete(self) -> T:
        """Remove and return the front item; raises QueueUnderflow if empty."""
        if self._front >= len(self._slots):
            raise QueueUnderflow("Queue Underflow")
        item = self._slots[self._front]
        self._front += 1
        return item

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


_MENU = (
    "1.Insert element to queue\n"
    "2.Delete element from queue\n"
    "3.Display all elements of queue\n"
    "4.Quit"
)


def _read_int(prompt: str) -> Optional[int]:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive queue menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive bounded queue.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    queue: BoundedQueue[int] = BoundedQueue(args.capacity)

    try:
        while True:
            print(_MENU)
            choice = _read_int("Enter your choice : ")
            if choice == 1:
                if queue.is_full:
                    print("Queue Overflow")
                    continue
                item = _read_int("Insert the element in queue : ")
                if item is None:
                    print("Not a number")
                    continue
                queue.insert(item)
            elif choice == 2:
                try:
                    print(f"Element deleted from queue is : {queue.delete()}")
                except QueueUnderflow as exc:
                    print(exc)
            elif choice == 3:
                if not queue.has_started:
                    print("Queue is empty")
                else:
                    print("Queue is :")
                    print(" ".join(str(item) for item in queue))
            elif choice == 4:
                return 1
            else:
                print("Wrong choice")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())